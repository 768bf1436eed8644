from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from abalone.types import Color


class Settings(BaseSettings):
    # Game rules
    first_turn: Color = Color.WHITE
    winning_captures: int = 6

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="ABALONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()


def configure_logging(config: Settings | None = None) -> None:
    """Set up root logging for applications embedding the engine."""
    config = config or settings
    logging.basicConfig(level=config.log_level.upper())
