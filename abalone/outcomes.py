"""Results of legality checks: legal moves and the two error taxonomies.

Every outcome is a returned value. A check never raises for bad user input;
``SelectionError`` subclasses hold for every direction, ``MoveError``
subclasses only for the direction that was tried.
"""

from __future__ import annotations

from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from abalone.errors import InvariantViolationError
from abalone.types import Direction, Pos2

MIXED_SET_CAPACITY = 2
NOT_A_BALL_CAPACITY = 3
LINE_CAPACITY = 3


class BoundedPositions:
    """Fixed-capacity collector for the positions listed in an error payload.

    The selection span is at most three cells, so overflowing means the
    checker itself is broken.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._items: list[Pos2] = []

    def push(self, position: Pos2) -> None:
        if len(self._items) >= self.capacity:
            raise InvariantViolationError(
                f"Position list of capacity {self.capacity} overflowed at {position}"
            )
        self._items.append(position)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Pos2]:
        return iter(self._items)

    def to_tuple(self) -> tuple[Pos2, ...]:
        return tuple(self._items)


def _join(positions: tuple[Pos2, ...]) -> str:
    return "".join(f" {p}" for p in positions)


# --- Moves ---

class Moved(BaseModel):
    """Moved without resistance. ``last`` is the last own ball that moved."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["moved"] = "moved"
    direction: Direction
    first: Pos2
    last: Pos2


class PushedAway(BaseModel):
    """Pushed opposing balls, none of them off the board.

    ``last`` is the last opposing ball that was pushed.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["pushed_away"] = "pushed_away"
    first: Pos2
    last: Pos2


class PushedOff(BaseModel):
    """Pushed the opposing ball at ``last`` off the board."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["pushed_off"] = "pushed_off"
    first: Pos2
    last: Pos2


Move = Annotated[Union[Moved, PushedAway, PushedOff], Field(discriminator="kind")]
MOVE_TYPES = (Moved, PushedAway, PushedOff)


# --- Selection errors (direction independent) ---

class SelectionError(BaseModel):
    model_config = ConfigDict(frozen=True)

    def describe(self) -> str:
        return "Invalid selection"

    def __str__(self) -> str:
        return f"Selection error: {self.describe()}"


class WrongTurn(SelectionError):
    """The selected ball belongs to the side not on move."""
    kind: Literal["wrong_turn"] = "wrong_turn"
    position: Pos2

    def describe(self) -> str:
        return f"Wrong turn at {self.position}"


class InvalidSet(SelectionError):
    """first and last do not lie on a common axis."""
    kind: Literal["invalid_set"] = "invalid_set"

    def describe(self) -> str:
        return "Invalid set"


class MixedSet(SelectionError):
    """The span contains opposing balls, listed in ``positions``."""
    kind: Literal["mixed_set"] = "mixed_set"
    positions: tuple[Pos2, ...] = Field(max_length=MIXED_SET_CAPACITY)

    def describe(self) -> str:
        return f"Mixed set:{_join(self.positions)}"


class NotABall(SelectionError):
    """The span contains empty or off-board cells, listed in ``positions``."""
    kind: Literal["not_a_ball"] = "not_a_ball"
    positions: tuple[Pos2, ...] = Field(max_length=NOT_A_BALL_CAPACITY)

    def describe(self) -> str:
        return f"Not a ball:{_join(self.positions)}"


class TooMany(SelectionError):
    kind: Literal["too_many"] = "too_many"

    def describe(self) -> str:
        return "Too many"


class NoPossibleMove(SelectionError):
    kind: Literal["no_possible_move"] = "no_possible_move"

    def describe(self) -> str:
        return "No possible move"


# --- Move errors (direction dependent) ---

class MoveError(BaseModel):
    model_config = ConfigDict(frozen=True)

    def describe(self) -> str:
        return "Illegal move"

    def __str__(self) -> str:
        return f"Move error: {self.describe()}"


class MovePushedOff(MoveError):
    """Own balls would leave the board."""
    kind: Literal["pushed_off_own"] = "pushed_off_own"
    positions: tuple[Pos2, ...] = Field(max_length=LINE_CAPACITY)

    def describe(self) -> str:
        return f"Pushed off:{_join(self.positions)}"


class BlockedByOwn(MoveError):
    """An own ball sits behind the opposing line."""
    kind: Literal["blocked_by_own"] = "blocked_by_own"
    position: Pos2

    def describe(self) -> str:
        return f"Blocked by own ball at {self.position}"


class TooManyInferred(MoveError):
    """A fourth own ball would join the push."""
    kind: Literal["too_many_inferred"] = "too_many_inferred"
    first: Pos2
    last: Pos2

    def describe(self) -> str:
        return f"Too many own balls in the push direction {self.first} {self.last}"


class TooManyOpposing(MoveError):
    """The opposing line is as long as or longer than the pushing line."""
    kind: Literal["too_many_opposing"] = "too_many_opposing"
    first: Pos2
    last: Pos2

    def describe(self) -> str:
        return f"Too many opposing balls {self.first} {self.last}"


class NotFree(MoveError):
    """Destination cells of a broadside move are occupied."""
    kind: Literal["not_free"] = "not_free"
    positions: tuple[Pos2, ...] = Field(max_length=LINE_CAPACITY)

    def describe(self) -> str:
        return f"Blocked by:{_join(self.positions)}"


CheckResult = Union[Moved, PushedAway, PushedOff, SelectionError, MoveError]


def is_move(outcome: object) -> bool:
    return isinstance(outcome, MOVE_TYPES)
