"""Domain models for Abalone: colors, directions and hex grid vectors."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Color(str, Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opposite(self) -> Color:
        return Color.WHITE if self is Color.BLACK else Color.BLACK


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Vec2(BaseModel):
    """Displacement between two positions.

    The grid is a hexagon sheared into a square, so the three axes are
    X = (1, 0), Y = (0, 1) and the diagonal Z = (1, 1).
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @staticmethod
    def of(x: int, y: int) -> Vec2:
        return Vec2(x=x, y=y)

    def __neg__(self) -> Vec2:
        return Vec2(x=-self.x, y=-self.y)

    def __mul__(self, factor: int) -> Vec2:
        return Vec2(x=self.x * factor, y=self.y * factor)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(x=self.x + other.x, y=self.y + other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def magnitude(self) -> int:
        """Number of hex steps covered by this vector.

        Diagonals along Z count as one step each.
        """
        if _sign(self.x) == _sign(self.y):
            return max(abs(self.x), abs(self.y))
        return abs(self.x) + abs(self.y)

    def normalize(self) -> Vec2:
        return Vec2(x=_sign(self.x), y=_sign(self.y))

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def is_axis_multiple(self) -> bool:
        """True if the vector lies on the X, Y or Z axis."""
        return self.x == 0 or self.y == 0 or self.x == self.y

    def is_parallel(self, other: Vec2) -> bool:
        if self.is_zero() or other.is_zero():
            return self == other
        return self.x * other.y == self.y * other.x

    def unit_direction(self) -> Direction | None:
        return _UNIT_TO_DIRECTION.get((self.x, self.y))


class Pos2(BaseModel):
    """A cell on the 9x9 grid. Only cells inside the hexagon are addressable."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @staticmethod
    def of(x: int, y: int) -> Pos2:
        return Pos2(x=x, y=y)

    def __add__(self, vec: Vec2) -> Pos2:
        return Pos2(x=self.x + vec.x, y=self.y + vec.y)

    def __sub__(self, other: Pos2 | Vec2) -> Vec2 | Pos2:
        if isinstance(other, Pos2):
            return Vec2(x=self.x - other.x, y=self.y - other.y)
        return Pos2(x=self.x - other.x, y=self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(str, Enum):
    POS_X = "pos_x"
    POS_Y = "pos_y"
    POS_Z = "pos_z"
    NEG_X = "neg_x"
    NEG_Y = "neg_y"
    NEG_Z = "neg_z"

    @property
    def vec(self) -> Vec2:
        return _DIRECTION_VECTORS[self]

    @property
    def opposite(self) -> Direction:
        return _UNIT_TO_DIRECTION[(-self.vec.x, -self.vec.y)]


UNIT_X = Vec2(x=1, y=0)
UNIT_Y = Vec2(x=0, y=1)
UNIT_Z = UNIT_X + UNIT_Y

_DIRECTION_VECTORS: dict[Direction, Vec2] = {
    Direction.POS_X: UNIT_X,
    Direction.POS_Y: UNIT_Y,
    Direction.POS_Z: UNIT_Z,
    Direction.NEG_X: -UNIT_X,
    Direction.NEG_Y: -UNIT_Y,
    Direction.NEG_Z: -UNIT_Z,
}

_UNIT_TO_DIRECTION: dict[tuple[int, int], Direction] = {
    (v.x, v.y): d for d, v in _DIRECTION_VECTORS.items()
}

# Order in which check_selection tries directions
DIRECTIONS: list[Direction] = [
    Direction.POS_X,
    Direction.POS_Y,
    Direction.POS_Z,
    Direction.NEG_X,
    Direction.NEG_Y,
    Direction.NEG_Z,
]
