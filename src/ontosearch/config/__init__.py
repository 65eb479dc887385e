"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import LoggingConfig, configure_logging, get_logging_config

__all__ = [
    "ConfigurationError",
    "LoggingConfig",
    "configure_logging",
    "get_logging_config",
]
