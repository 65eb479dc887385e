"""Edit-script types shared by the planner and the applier.

An edit script is an ordered, immutable sequence of changes computed against
one snapshot of the containers. Changes name their target container directly;
two changes target the same container only if they hold the same object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ontosearch.domain.model import Statement
    from ontosearch.domain.ports import StatementContainer


@dataclass(frozen=True, slots=True)
class AddStatement:
    container: StatementContainer
    statement: Statement

    def __str__(self) -> str:
        return f"+ {self.statement}"


@dataclass(frozen=True, slots=True)
class RemoveStatement:
    container: StatementContainer
    statement: Statement

    def __str__(self) -> str:
        return f"- {self.statement}"


type Change = AddStatement | RemoveStatement


@dataclass(frozen=True, slots=True)
class EditScript:
    """Ordered changes; apply strictly front to back."""

    changes: tuple[Change, ...] = ()

    def __iter__(self) -> Iterator[Change]:
        return iter(self.changes)

    def __len__(self) -> int:
        return len(self.changes)

    def __getitem__(self, index: int) -> Change:
        return self.changes[index]

    def additions(self) -> tuple[AddStatement, ...]:
        return tuple(change for change in self.changes if isinstance(change, AddStatement))

    def removals(self) -> tuple[RemoveStatement, ...]:
        return tuple(change for change in self.changes if isinstance(change, RemoveStatement))

    def for_container(self, container: StatementContainer) -> tuple[Change, ...]:
        return tuple(change for change in self.changes if change.container is container)
