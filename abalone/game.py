"""Abalone game session: board, turn and linear undo/redo history."""

from __future__ import annotations

import logging
from typing import Iterator, Literal

from pydantic import BaseModel, Field, model_validator

from abalone.board import Board, Cell, OffBoard
from abalone.config import Settings, settings
from abalone.errors import IllegalMoveError
from abalone.moves import apply_move, unapply_move
from abalone.outcomes import CheckResult, Move, MoveError, SelectionError
from abalone.rules import check_move, check_selection, get_all_legal_moves
from abalone.scoring import STANDARD_STARTING_BALLS, captures, count_balls, get_winner
from abalone.types import Color, Direction, Pos2

logger = logging.getLogger(__name__)


class Abalone(BaseModel):
    """
    A single game of Abalone.

    ``moves[:move_idx]`` have been applied to ``board``; moves past the
    cursor can be redone until a new move is submitted. The whole model
    is the persisted state and round-trips through to_json()/from_json().
    """

    board: Board = Field(default_factory=Board.starting)
    moves: list[Move] = Field(default_factory=list)
    move_idx: int = 0
    turn: Color = Color.WHITE
    winning_captures: int = Field(default_factory=lambda: settings.winning_captures)
    starting_balls: dict[Color, int] | None = None

    @model_validator(mode="after")
    def check_cursor(self) -> Abalone:
        if not 0 <= self.move_idx <= len(self.moves):
            raise ValueError(
                f"move_idx {self.move_idx} outside history of {len(self.moves)} moves"
            )
        return self

    @model_validator(mode="after")
    def record_starting_balls(self) -> Abalone:
        # Only a board with no moves applied shows what the game started with
        if self.starting_balls is None:
            if self.move_idx == 0:
                self.starting_balls = count_balls(self.board)
            else:
                self.starting_balls = dict(STANDARD_STARTING_BALLS)
        return self

    @classmethod
    def new(cls, config: Settings | None = None) -> Abalone:
        """Start a game from the standard layout."""
        config = config or settings
        return cls(turn=config.first_turn, winning_captures=config.winning_captures)

    # ------------------------------------------------------------------ #
    #  Board access
    # ------------------------------------------------------------------ #

    def get(self, pos: Pos2) -> Cell | Literal[OffBoard.OFF_BOARD]:
        return self.board.get(pos)

    def iter_cells(self) -> Iterator[tuple[int, int, Cell]]:
        return self.board.iter_cells()

    # ------------------------------------------------------------------ #
    #  Legality
    # ------------------------------------------------------------------ #

    def check_selection(self, first: Pos2, last: Pos2) -> Move | SelectionError:
        return check_selection(self.board, self.turn, first, last)

    def check_move(self, first: Pos2, last: Pos2, direction: Direction) -> CheckResult:
        return check_move(self.board, self.turn, first, last, direction)

    def legal_moves(self) -> list[Move]:
        return get_all_legal_moves(self.board, self.turn)

    # ------------------------------------------------------------------ #
    #  History
    # ------------------------------------------------------------------ #

    def submit_move(self, move: Move) -> None:
        """Apply a move returned by check_move() and record it.

        Any undone moves past the cursor are discarded.
        """
        apply_move(self.board, move)
        self.turn = self.turn.opposite
        del self.moves[self.move_idx:]
        self.moves.append(move)
        self.move_idx += 1
        logger.debug("Submitted %s, history at %d", move, self.move_idx)

        winner = self.winner()
        if winner is not None:
            logger.info("Game over: %s has pushed off enough balls", winner.value)

    def play(self, first: Pos2, last: Pos2, direction: Direction) -> Move:
        """Check and submit in one step. Raises IllegalMoveError on failure."""
        outcome = self.check_move(first, last, direction)
        if isinstance(outcome, (SelectionError, MoveError)):
            raise IllegalMoveError(outcome)
        self.submit_move(outcome)
        return outcome

    def can_undo(self) -> bool:
        return self.move_idx > 0

    def can_redo(self) -> bool:
        return self.move_idx < len(self.moves)

    def undo_move(self) -> None:
        if self.move_idx == 0:
            return

        self.turn = self.turn.opposite
        self.move_idx -= 1
        move = self.moves[self.move_idx]
        unapply_move(self.board, move)
        logger.debug("Undid %s, history at %d", move, self.move_idx)

    def redo_move(self) -> None:
        if self.move_idx == len(self.moves):
            return

        self.turn = self.turn.opposite
        move = self.moves[self.move_idx]
        self.move_idx += 1
        apply_move(self.board, move)
        logger.debug("Redid %s, history at %d", move, self.move_idx)

    # ------------------------------------------------------------------ #
    #  Scoring
    # ------------------------------------------------------------------ #

    def scores(self) -> dict[Color, int]:
        return captures(self.board, self.starting_balls)

    def winner(self, winning_captures: int | None = None) -> Color | None:
        if winning_captures is None:
            winning_captures = self.winning_captures
        return get_winner(self.board, winning_captures, self.starting_balls)

    def is_over(self, winning_captures: int | None = None) -> bool:
        return self.winner(winning_captures) is not None

    # ------------------------------------------------------------------ #
    #  Persistence
    # ------------------------------------------------------------------ #

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> Abalone:
        return cls.model_validate_json(data)

    def __str__(self) -> str:
        return self.board.render()
