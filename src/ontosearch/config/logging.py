"""Logging configuration for ontosearch entry points."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "ONTOSEARCH_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: int = DEFAULT_LOG_LEVEL


def _parse_level(raw: str) -> int:
    value = raw.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise ConfigurationError(f"Invalid {LOG_LEVEL_ENV} value: {raw!r}")
    return level


def get_logging_config() -> LoggingConfig:
    raw = os.getenv(LOG_LEVEL_ENV)
    if raw is None or not raw.strip():
        return LoggingConfig()
    return LoggingConfig(level=_parse_level(raw))


def configure_logging(*, level: int = DEFAULT_LOG_LEVEL, force: bool = False) -> None:
    """Set up the root logger for CLI output.

    Without ``force`` an already configured root logger is left alone.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
