from __future__ import annotations

import pytest

from abalone.board import Board
from abalone.game import Abalone
from abalone.types import Color, Pos2


def make_board(
    black: list[tuple[int, int]] = (),
    white: list[tuple[int, int]] = (),
) -> Board:
    """Build a board holding only the given balls."""
    balls = {Pos2(x=x, y=y): Color.BLACK for x, y in black}
    balls.update({Pos2(x=x, y=y): Color.WHITE for x, y in white})
    return Board.from_positions(balls)


@pytest.fixture
def board_factory():
    return make_board


@pytest.fixture
def starting_board() -> Board:
    return Board.starting()


@pytest.fixture
def game() -> Abalone:
    return Abalone()
