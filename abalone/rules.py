"""Move legality for Abalone.

A selection is given by its two end balls ``first`` and ``last``. The
checker decides whether the balls between them can move one step in a
direction, and describes the resulting move or why it is illegal.
"""

from __future__ import annotations

from abalone.board import OFF_BOARD, Board
from abalone.outcomes import (
    LINE_CAPACITY,
    MIXED_SET_CAPACITY,
    NOT_A_BALL_CAPACITY,
    BlockedByOwn,
    BoundedPositions,
    CheckResult,
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
    is_move,
)
from abalone.types import DIRECTIONS, UNIT_X, UNIT_Y, UNIT_Z, Color, Direction, Pos2, Vec2

MAX_SELECTED = 3


def check_selection(
    board: Board,
    turn: Color,
    first: Pos2,
    last: Pos2,
) -> Move | SelectionError:
    """Return the first legal move of the selection, or why there is none.

    Selection errors hold for every direction, so the first one found is
    returned immediately.
    """
    for direction in DIRECTIONS:
        outcome = check_move(board, turn, first, last, direction)
        if isinstance(outcome, SelectionError):
            return outcome
        if isinstance(outcome, MoveError):
            continue
        return outcome
    return NoPossibleMove()


def check_move(
    board: Board,
    turn: Color,
    first: Pos2,
    last: Pos2,
    direction: Direction,
) -> CheckResult:
    """Check whether the balls from ``first`` to ``last`` can move in ``direction``."""
    anchor = board.get(first)
    if isinstance(anchor, Color) and anchor != turn:
        return WrongTurn(position=first)

    step = direction.vec
    vec = last - first
    if not vec.is_zero():
        if not vec.is_axis_multiple():
            return InvalidSet()
        norm = vec.normalize()

        # Selected backwards: push from the other end
        if -norm == step:
            first, last = last, first
            vec = -vec
            norm = -norm
    else:
        norm = step

    mag = vec.magnitude()
    if mag >= MAX_SELECTED:
        return TooMany()

    color = board.get(first)
    if not isinstance(color, Color):
        no_ball = BoundedPositions(NOT_A_BALL_CAPACITY)
        no_ball.push(first)
        for i in range(1, mag + 1):
            pos = first + norm * i
            if not board.is_ball(pos):
                no_ball.push(pos)
        return NotABall(positions=no_ball.to_tuple())

    # The anchor may have changed sides when the selection was flipped
    if color != turn:
        return WrongTurn(position=first)

    if norm == step:
        return _check_inline(board, color, first, direction, mag)
    return _check_broadside(board, color, first, last, direction, norm, mag)


def _check_inline(
    board: Board,
    color: Color,
    first: Pos2,
    direction: Direction,
    mag: int,
) -> CheckResult:
    step = direction.vec

    # Count own balls from first until something else is hit
    force = 1
    while True:
        pos = first + step * force
        cell = board.get(pos)
        if cell is OFF_BOARD:
            return MovePushedOff(positions=(first + step * (force - 1),))
        if cell is None:
            return Moved(direction=direction, first=first, last=first + step * (force - 1))
        if cell != color:
            if force < mag:
                # Opposing ball inside the selected span
                mixed = BoundedPositions(MIXED_SET_CAPACITY)
                mixed.push(pos)
                for i in range(force + 1, mag + 1):
                    mixed.push(first + step * i)
                return MixedSet(positions=mixed.to_tuple())
            opposing_first = pos
            break
        if force >= MAX_SELECTED:
            return TooManyInferred(first=first, last=pos)
        force += 1

    if force <= 1:
        return TooManyOpposing(first=opposing_first, last=opposing_first)

    # Sumito: the opposing line must be strictly shorter
    opposing = color.opposite
    opposing_force = 1
    while True:
        pos = opposing_first + step * opposing_force
        cell = board.get(pos)
        if cell is OFF_BOARD:
            last = opposing_first + step * (opposing_force - 1)
            return PushedOff(first=first, last=last)
        if cell is None:
            last = opposing_first + step * (opposing_force - 1)
            return PushedAway(first=first, last=last)
        if cell != opposing:
            return BlockedByOwn(position=pos)
        if opposing_force >= force - 1:
            return TooManyOpposing(first=opposing_first, last=pos)
        opposing_force += 1


def _check_broadside(
    board: Board,
    color: Color,
    first: Pos2,
    last: Pos2,
    direction: Direction,
    norm: Vec2,
    mag: int,
) -> CheckResult:
    mixed = BoundedPositions(MIXED_SET_CAPACITY)
    for i in range(1, mag + 1):
        pos = first + norm * i
        cell = board.get(pos)
        if isinstance(cell, Color):
            if cell != color:
                mixed.push(pos)
            continue

        no_ball = BoundedPositions(NOT_A_BALL_CAPACITY)
        for j in range(i, mag + 1):
            gap = first + norm * j
            if not board.is_ball(gap):
                no_ball.push(gap)
        return NotABall(positions=no_ball.to_tuple())

    if mixed:
        return MixedSet(positions=mixed.to_tuple())

    not_free = BoundedPositions(LINE_CAPACITY)
    pushed_off = BoundedPositions(LINE_CAPACITY)
    for i in range(mag + 1):
        current = first + norm * i
        target = current + direction.vec
        cell = board.get(target)
        if cell is OFF_BOARD:
            pushed_off.push(current)
        elif cell is not None:
            not_free.push(target)

    if not_free:
        return NotFree(positions=not_free.to_tuple())
    if pushed_off:
        return MovePushedOff(positions=pushed_off.to_tuple())

    return Moved(direction=direction, first=first, last=last)


def get_all_legal_moves(board: Board, turn: Color) -> list[Move]:
    """Return every distinct legal move for the side to move.

    Selections of one to three own balls along each axis are tried in every
    direction. Different selections can describe the same move, so results
    are deduplicated in discovery order.
    """
    moves: list[Move] = []
    seen: set[Move] = set()

    for x, y, cell in board.iter_cells():
        if cell != turn:
            continue
        first = Pos2(x=x, y=y)
        selections = [first]
        for axis in (UNIT_X, UNIT_Y, UNIT_Z):
            for length in range(1, MAX_SELECTED):
                last = first + axis * length
                if board.get(last) == turn:
                    selections.append(last)

        for last in selections:
            for direction in DIRECTIONS:
                outcome = check_move(board, turn, first, last, direction)
                if is_move(outcome) and outcome not in seen:
                    seen.add(outcome)
                    moves.append(outcome)

    return moves
