"""Public interface for the JSON statement-document adapter."""

from __future__ import annotations

from .schema import AnnotationPayload, StatementDocument, StatementPayload, TermPayload
from .translator import (
    DocumentError,
    build_containers,
    load_containers,
    parse_document,
    read_document,
    to_annotation,
    to_statement,
    to_term,
)

__all__ = [
    "AnnotationPayload",
    "DocumentError",
    "StatementDocument",
    "StatementPayload",
    "TermPayload",
    "build_containers",
    "load_containers",
    "parse_document",
    "read_document",
    "to_annotation",
    "to_statement",
    "to_term",
]
