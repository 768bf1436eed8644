"""Rules engine for the board game Abalone."""

from abalone.board import NUM_STARTING_BALLS, OFF_BOARD, Board, is_in_bounds
from abalone.game import Abalone
from abalone.outcomes import (
    BlockedByOwn,
    InvalidSet,
    MixedSet,
    Move,
    Moved,
    MoveError,
    MovePushedOff,
    NoPossibleMove,
    NotABall,
    NotFree,
    PushedAway,
    PushedOff,
    SelectionError,
    TooMany,
    TooManyInferred,
    TooManyOpposing,
    WrongTurn,
)
from abalone.types import DIRECTIONS, Color, Direction, Pos2, Vec2

__all__ = [
    "Abalone",
    "BlockedByOwn",
    "Board",
    "Color",
    "DIRECTIONS",
    "Direction",
    "InvalidSet",
    "MixedSet",
    "Move",
    "MoveError",
    "Moved",
    "MovePushedOff",
    "NUM_STARTING_BALLS",
    "NoPossibleMove",
    "NotABall",
    "NotFree",
    "OFF_BOARD",
    "Pos2",
    "PushedAway",
    "PushedOff",
    "SelectionError",
    "TooMany",
    "TooManyInferred",
    "TooManyOpposing",
    "Vec2",
    "WrongTurn",
    "is_in_bounds",
]
