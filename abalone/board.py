"""Board state for Abalone.

The 61-cell hexagon is stored in a 9x9 grid sheared so that the Z axis is
the diagonal (1, 1). Coordinates, with ``*`` marking addressable cells::

                  0 1 2 3 4 5 6 7 8
               #------------------ x
            0 / * * * * * . . . .
           1 / * * * * * * . . .
          2 / * * * * * * * . .
         3 / * * * * * * * * .
        4 / * * * * * * * * *
       5 / . * * * * * * * *
      6 / . . * * * * * * *
     7 / . . . * * * * * *
    8 / . . . . * * * * *
     y
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Literal

from pydantic import BaseModel, Field, field_validator

from abalone.errors import OffBoardError
from abalone.types import Color, Pos2

SIZE = 9
NUM_STARTING_BALLS = 14


class OffBoard(Enum):
    OFF_BOARD = "off_board"


OFF_BOARD = OffBoard.OFF_BOARD
"""Returned by Board.get() for positions outside the hexagon."""

Cell = Color | None


def is_in_bounds(pos: Pos2) -> bool:
    x, y = pos.x, pos.y
    return 0 <= x < SIZE and 0 <= y < SIZE and x - y < 5 and y - x < 5


def _empty_grid() -> list[list[Cell]]:
    return [[None] * SIZE for _ in range(SIZE)]


# Row ranges of the starting clusters: (y, x_start, x_end)
_BLACK_START_ROWS = [(0, 0, 5), (1, 0, 6), (2, 2, 5)]
_WHITE_START_ROWS = [(8, 4, 9), (7, 3, 9), (6, 4, 7)]


class Board(BaseModel):
    """Ball placement. ``balls`` is indexed ``[y][x]``."""

    balls: list[list[Cell]] = Field(default_factory=_empty_grid)

    @field_validator("balls")
    @classmethod
    def check_shape(cls, balls: list[list[Cell]]) -> list[list[Cell]]:
        if len(balls) != SIZE or any(len(row) != SIZE for row in balls):
            raise ValueError(f"Board must be {SIZE}x{SIZE}")
        for y, row in enumerate(balls):
            for x, cell in enumerate(row):
                if cell is not None and not is_in_bounds(Pos2(x=x, y=y)):
                    raise ValueError(f"Ball outside the hexagon at ({x}, {y})")
        return balls

    # ── Construction ──

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def starting(cls) -> Board:
        """The standard opening layout, 14 balls per side."""
        board = cls()
        for color, rows in (
            (Color.BLACK, _BLACK_START_ROWS),
            (Color.WHITE, _WHITE_START_ROWS),
        ):
            for y, x_start, x_end in rows:
                for x in range(x_start, x_end):
                    board.set(Pos2(x=x, y=y), color)
        return board

    @classmethod
    def from_positions(cls, balls: dict[Pos2, Color]) -> Board:
        board = cls()
        for pos, color in balls.items():
            board.set(pos, color)
        return board

    # ── Access ──

    def get(self, pos: Pos2) -> Cell | Literal[OffBoard.OFF_BOARD]:
        """Return the ball at ``pos``, None if empty, OFF_BOARD if not addressable."""
        if not is_in_bounds(pos):
            return OFF_BOARD
        return self.balls[pos.y][pos.x]

    def set(self, pos: Pos2, value: Cell) -> None:
        if not is_in_bounds(pos):
            raise OffBoardError(pos)
        self.balls[pos.y][pos.x] = value

    def is_ball(self, pos: Pos2) -> bool:
        return isinstance(self.get(pos), Color)

    def iter_cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield (x, y, content) for every addressable cell, row by row."""
        for y in range(SIZE):
            for x in range(SIZE):
                if is_in_bounds(Pos2(x=x, y=y)):
                    yield x, y, self.balls[y][x]

    def count(self, color: Color) -> int:
        return sum(1 for _x, _y, cell in self.iter_cells() if cell == color)

    def render(self) -> str:
        """Text diagram, one line per row, ``b``/``w`` for balls and ``.`` otherwise."""
        lines = []
        for y in range(SIZE):
            cells = []
            for x in range(SIZE):
                cell = self.balls[y][x]
                if cell == Color.BLACK:
                    cells.append(" b")
                elif cell == Color.WHITE:
                    cells.append(" w")
                else:
                    cells.append(" .")
            lines.append(" " * (SIZE - y) + "".join(cells))
        return "\n".join(lines) + "\n"
