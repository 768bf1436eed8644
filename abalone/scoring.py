"""Scoring for Abalone: captured balls and the winner."""

from __future__ import annotations

from abalone.board import NUM_STARTING_BALLS, Board
from abalone.types import Color

DEFAULT_WINNING_CAPTURES = 6

STANDARD_STARTING_BALLS = {Color.BLACK: NUM_STARTING_BALLS, Color.WHITE: NUM_STARTING_BALLS}


def count_balls(board: Board) -> dict[Color, int]:
    counts = {Color.BLACK: 0, Color.WHITE: 0}
    for _x, _y, cell in board.iter_cells():
        if cell is not None:
            counts[cell] += 1
    return counts


def captures(
    board: Board,
    starting_balls: dict[Color, int] | None = None,
) -> dict[Color, int]:
    """Number of opposing balls each side has pushed off the board.

    ``starting_balls`` is the per-side count the game began with, the
    standard layout if not given. Returns {color: captured_count}.
    """
    if starting_balls is None:
        starting_balls = STANDARD_STARTING_BALLS
    counts = count_balls(board)
    return {
        color: starting_balls[color.opposite] - counts[color.opposite]
        for color in (Color.BLACK, Color.WHITE)
    }


def get_winner(
    board: Board,
    winning_captures: int = DEFAULT_WINNING_CAPTURES,
    starting_balls: dict[Color, int] | None = None,
) -> Color | None:
    for color, captured in captures(board, starting_balls).items():
        if captured >= winning_captures:
            return color
    return None
