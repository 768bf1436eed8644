from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from abalone.outcomes import MoveError, SelectionError
    from abalone.types import Pos2


class AbaloneError(Exception):
    """Base class for engine errors."""
    pass


class InvariantViolationError(AbaloneError):
    """The engine reached a state its geometry rules out. Not recoverable."""
    pass


class OffBoardError(AbaloneError):
    """A write was attempted on a cell outside the hexagon."""

    def __init__(self, position: Pos2):
        self.position = position
        super().__init__(f"Position {position} is off the board")


class IllegalMoveError(AbaloneError):
    """A move submitted through Abalone.play() failed validation."""

    def __init__(self, outcome: SelectionError | MoveError):
        self.outcome = outcome
        super().__init__(str(outcome))
