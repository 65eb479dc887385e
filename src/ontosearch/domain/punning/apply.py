"""Apply a planned edit script to mutable containers."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, cast

from ontosearch.domain.errors import InvalidArgumentError
from ontosearch.domain.ports import MutableStatementContainer
from ontosearch.domain.punning.changes import AddStatement, RemoveStatement
from ontosearch.domain.search.aggregate import require

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ontosearch.domain.punning.changes import Change


log = getLogger(__name__)


@dataclass(slots=True)
class ApplyResult:
    """Summary of the mutations performed by the applier."""

    applied: int = 0
    added: int = 0
    removed: int = 0
    skipped: int = 0


def _validated(changes: Iterable[Change]) -> tuple[Change, ...]:
    materialized = tuple(require(changes, role="edit script"))
    for index, change in enumerate(materialized):
        if not isinstance(change, (AddStatement, RemoveStatement)):
            raise InvalidArgumentError(f"change at position {index} is not a change: {change!r}")
        if not isinstance(change.container, MutableStatementContainer):
            raise InvalidArgumentError(f"change at position {index} targets a read-only container")
    return materialized


def apply_edit_script(changes: Iterable[Change]) -> ApplyResult:
    """Perform ``changes`` strictly in order.

    The whole script is checked before the first change is applied. Adding a
    statement that is already present or removing one that is absent is a
    no-op and counted as skipped.
    """

    result = ApplyResult()
    for change in _validated(changes):
        container = cast("MutableStatementContainer", change.container)
        if isinstance(change, AddStatement):
            changed = container.add_statement(change.statement)
            if changed:
                result.added += 1
        else:
            changed = container.remove_statement(change.statement)
            if changed:
                result.removed += 1

        if changed:
            result.applied += 1
        else:
            result.skipped += 1
            log.debug("Skipped no-op change %s", change)
    return result
