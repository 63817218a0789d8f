"""Library configuration loaded from environment variables.

Nothing here changes color semantics; settings only control logging.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("invert_color.config")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """All configuration is read from ``INVERT_COLOR_*`` variables (or a .env file)."""

    log_level: str = "INFO"
    debug: bool = False  # forces DEBUG regardless of log_level

    model_config = SettingsConfigDict(
        env_prefix="INVERT_COLOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @property
    def effective_log_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Route ``invert_color`` log records to stdout.

    The package never calls this itself; applications opt in.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger("invert_color").setLevel(settings.effective_log_level)
    logger.debug("Logging configured at %s", logging.getLevelName(settings.effective_log_level))
