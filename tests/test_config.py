from __future__ import annotations

import logging

import pytest

from abalone.board import Board
from abalone.config import Settings, configure_logging
from abalone.game import Abalone
from abalone.types import Color, Direction, Pos2


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ABALONE_FIRST_TURN", raising=False)
        monkeypatch.delenv("ABALONE_WINNING_CAPTURES", raising=False)
        monkeypatch.delenv("ABALONE_LOG_LEVEL", raising=False)
        config = Settings(_env_file=None)
        assert config.first_turn == Color.WHITE
        assert config.winning_captures == 6
        assert config.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ABALONE_FIRST_TURN", "black")
        monkeypatch.setenv("ABALONE_WINNING_CAPTURES", "3")
        config = Settings(_env_file=None)
        assert config.first_turn == Color.BLACK
        assert config.winning_captures == 3

    def test_new_game_uses_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ABALONE_FIRST_TURN", "black")
        game = Abalone.new(Settings(_env_file=None))
        assert game.turn == Color.BLACK

    def test_new_game_uses_winning_captures(self) -> None:
        game = Abalone.new(Settings(_env_file=None, winning_captures=3))
        white = [Pos2(x=x, y=y) for x, y, cell in game.iter_cells() if cell == Color.WHITE]
        for pos in white[:3]:
            game.board.set(pos, None)

        assert game.winning_captures == 3
        assert game.winner() == Color.BLACK
        assert game.is_over()

    def test_winning_captures_survive_persistence(self) -> None:
        game = Abalone.new(Settings(_env_file=None, winning_captures=3))
        assert Abalone.from_json(game.to_json()).winning_captures == 3


class TestLogging:
    def test_configure_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        configure_logging(Settings(_env_file=None, log_level="debug"))
        assert calls == [{"level": "DEBUG"}]

    def test_session_logs_moves(self, caplog: pytest.LogCaptureFixture) -> None:
        game = Abalone()
        with caplog.at_level(logging.DEBUG, logger="abalone.game"):
            game.play(Pos2.of(4, 6), Pos2.of(4, 6), Direction.NEG_Y)
            game.undo_move()
            game.redo_move()
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Submitted") for m in messages)
        assert any(m.startswith("Undid") for m in messages)
        assert any(m.startswith("Redid") for m in messages)

    def test_game_over_logged_at_configured_threshold(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        board = Board.from_positions({
            Pos2.of(4, 6): Color.BLACK,
            Pos2.of(4, 7): Color.BLACK,
            Pos2.of(4, 8): Color.WHITE,
            Pos2.of(0, 0): Color.WHITE,
        })
        game = Abalone(board=board, turn=Color.BLACK, winning_captures=1)
        with caplog.at_level(logging.INFO, logger="abalone.game"):
            game.play(Pos2.of(4, 6), Pos2.of(4, 7), Direction.POS_Y)
        assert "Game over: black has pushed off enough balls" in caplog.messages
