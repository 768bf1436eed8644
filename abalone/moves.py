"""Board mutation for validated moves, and its exact inverse.

Assumes the move came from check_move() on the same board position.
"""

from __future__ import annotations

from abalone.board import Board
from abalone.errors import InvariantViolationError
from abalone.outcomes import Move, Moved, PushedAway, PushedOff
from abalone.types import Color


def apply_move(board: Board, move: Move) -> None:
    """Shift the balls of ``move`` one step forward."""
    vec = move.last - move.first
    num = vec.magnitude()
    norm = vec.normalize()

    if isinstance(move, Moved):
        step = move.direction.vec
        # Back to front so no cell is overwritten before it is read
        for i in range(num, -1, -1):
            pos = move.first + norm * i
            board.set(pos + step, board.get(pos))
            board.set(pos, None)
    elif isinstance(move, PushedAway):
        for i in range(num, -1, -1):
            pos = move.first + norm * i
            board.set(pos + norm, board.get(pos))
        board.set(move.first, None)
    elif isinstance(move, PushedOff):
        # The ball at last leaves the board and is overwritten
        for i in range(num - 1, -1, -1):
            pos = move.first + norm * i
            board.set(pos + norm, board.get(pos))
        board.set(move.first, None)
    else:
        raise InvariantViolationError(f"Unknown move: {move!r}")


def unapply_move(board: Board, move: Move) -> None:
    """Undo apply_move() for the same ``move``."""
    vec = move.last - move.first
    num = vec.magnitude()
    norm = vec.normalize()

    if isinstance(move, Moved):
        step = move.direction.vec
        for i in range(num + 1):
            old = move.first + norm * i
            pos = old + step
            board.set(old, board.get(pos))
            board.set(pos, None)
    elif isinstance(move, PushedAway):
        for i in range(num + 1):
            old = move.first + norm * i
            board.set(old, board.get(old + norm))
        board.set(move.last + norm, None)
    elif isinstance(move, PushedOff):
        for i in range(num):
            old = move.first + norm * i
            board.set(old, board.get(old + norm))
        # One opposing ball was lost from the line; put it back
        pusher = board.get(move.first)
        if not isinstance(pusher, Color):
            raise InvariantViolationError(f"No ball at {move.first} to undo {move!r}")
        board.set(move.last, pusher.opposite)
    else:
        raise InvariantViolationError(f"Unknown move: {move!r}")
