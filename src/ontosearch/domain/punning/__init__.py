"""Punned-individual detection, conversion planning and edit-script application."""

from __future__ import annotations

from .apply import ApplyResult, apply_edit_script
from .changes import AddStatement, Change, EditScript, RemoveStatement
from .planner import PlannerState, PunnedAssertionConverter, plan_annotation_conversion
from .resolve import find_punned_individuals

__all__ = [  # noqa: RUF022
    "find_punned_individuals",
    "PlannerState",
    "PunnedAssertionConverter",
    "plan_annotation_conversion",
    "AddStatement",
    "RemoveStatement",
    "Change",
    "EditScript",
    "ApplyResult",
    "apply_edit_script",
]
