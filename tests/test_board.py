"""Tests for board bounds, layout and iteration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from abalone.board import (
    NUM_STARTING_BALLS,
    OFF_BOARD,
    SIZE,
    Board,
    is_in_bounds,
)
from abalone.errors import OffBoardError
from abalone.types import Color, Pos2


class TestBounds:
    def test_hexagon_has_61_cells(self) -> None:
        inside = [
            (x, y)
            for x in range(-3, SIZE + 3)
            for y in range(-3, SIZE + 3)
            if is_in_bounds(Pos2(x=x, y=y))
        ]
        assert len(inside) == 61

    def test_symmetric_under_swap(self) -> None:
        for x in range(-1, SIZE + 1):
            for y in range(-1, SIZE + 1):
                assert is_in_bounds(Pos2(x=x, y=y)) == is_in_bounds(Pos2(x=y, y=x))

    def test_corners(self) -> None:
        assert is_in_bounds(Pos2.of(0, 0))
        assert is_in_bounds(Pos2.of(4, 0))
        assert not is_in_bounds(Pos2.of(5, 0))
        assert is_in_bounds(Pos2.of(8, 8))
        assert not is_in_bounds(Pos2.of(0, 5))
        assert not is_in_bounds(Pos2.of(-1, 0))
        assert not is_in_bounds(Pos2.of(4, 9))


class TestAccess:
    def test_off_board_read(self) -> None:
        board = Board.empty()
        assert board.get(Pos2.of(8, 0)) is OFF_BOARD
        assert board.get(Pos2.of(4, -1)) is OFF_BOARD

    def test_empty_read(self) -> None:
        board = Board.empty()
        assert board.get(Pos2.of(4, 4)) is None

    def test_write_then_read(self) -> None:
        board = Board.empty()
        board.set(Pos2.of(4, 4), Color.BLACK)
        assert board.get(Pos2.of(4, 4)) == Color.BLACK
        assert board.is_ball(Pos2.of(4, 4))
        assert not board.is_ball(Pos2.of(4, 5))
        assert not board.is_ball(Pos2.of(9, 9))

    def test_off_board_write_raises(self) -> None:
        board = Board.empty()
        with pytest.raises(OffBoardError):
            board.set(Pos2.of(0, 8), Color.WHITE)


class TestStartingLayout:
    def test_fourteen_each(self, starting_board: Board) -> None:
        assert starting_board.count(Color.BLACK) == NUM_STARTING_BALLS
        assert starting_board.count(Color.WHITE) == NUM_STARTING_BALLS

    def test_point_symmetric(self, starting_board: Board) -> None:
        """Rotating 180 degrees about (4, 4) swaps the two sides exactly."""
        for x, y, cell in starting_board.iter_cells():
            rotated = starting_board.get(Pos2(x=8 - x, y=8 - y))
            if cell is None:
                assert rotated is None
            else:
                assert rotated == cell.opposite

    def test_known_cells(self, starting_board: Board) -> None:
        assert starting_board.get(Pos2.of(0, 0)) == Color.BLACK
        assert starting_board.get(Pos2.of(5, 1)) == Color.BLACK
        assert starting_board.get(Pos2.of(1, 2)) is None
        assert starting_board.get(Pos2.of(4, 6)) == Color.WHITE
        assert starting_board.get(Pos2.of(3, 7)) == Color.WHITE


class TestIteration:
    def test_covers_every_cell_once(self, starting_board: Board) -> None:
        cells = list(starting_board.iter_cells())
        assert len(cells) == 61
        assert len({(x, y) for x, y, _ in cells}) == 61

    def test_row_major(self, starting_board: Board) -> None:
        coords = [(x, y) for x, y, _ in starting_board.iter_cells()]
        assert coords == sorted(coords, key=lambda c: (c[1], c[0]))
        assert coords[0] == (0, 0)
        assert coords[-1] == (8, 8)

    def test_restartable(self, starting_board: Board) -> None:
        assert list(starting_board.iter_cells()) == list(starting_board.iter_cells())

    def test_lazy(self, starting_board: Board) -> None:
        it = starting_board.iter_cells()
        assert next(it) == (0, 0, Color.BLACK)


class TestRender:
    def test_starting_diagram(self, starting_board: Board) -> None:
        lines = starting_board.render().splitlines()
        assert len(lines) == SIZE
        assert lines[0].strip() == "b b b b b . . . ."
        assert lines[4].strip() == ". . . . . . . . ."
        assert lines[8].strip() == ". . . . w w w w w"
        assert lines[0].startswith(" " * SIZE)


class TestValidation:
    def test_wrong_shape_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Board(balls=[[None] * SIZE for _ in range(SIZE - 1)])

    def test_ball_outside_hexagon_rejected(self) -> None:
        grid: list[list] = [[None] * SIZE for _ in range(SIZE)]
        grid[0][8] = "black"
        with pytest.raises(ValidationError):
            Board.model_validate({"balls": grid})

    def test_json_round_trip(self, starting_board: Board) -> None:
        restored = Board.model_validate_json(starting_board.model_dump_json())
        assert restored == starting_board
