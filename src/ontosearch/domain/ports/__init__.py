"""Domain port definitions for adapters."""

from __future__ import annotations

from .container import ImportsClosureProvider, MutableStatementContainer, StatementContainer
from .factory import StatementFactory

__all__ = [
    "ImportsClosureProvider",
    "MutableStatementContainer",
    "StatementContainer",
    "StatementFactory",
]
