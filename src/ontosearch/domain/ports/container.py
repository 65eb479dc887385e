"""Ports for statement containers (ontologies).

Storage and indexing are owned by adapters; the query layer only relies on the
per-kind, per-anchor slices and the signature lookups declared here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ontosearch.domain.model import (
        IRI,
        Entity,
        Imports,
        NamedIndividual,
        Statement,
        StatementKind,
        Term,
    )


@runtime_checkable
class StatementContainer(Protocol):
    """Read-only contract for an unordered set of statements."""

    def statements_of(self, kind: StatementKind, anchor: Term) -> Iterable[Statement]:
        """Statements of ``kind`` that have ``anchor`` among their operands."""
        ...

    def signature_individuals(self) -> Iterable[NamedIndividual]: ...

    def contains_class(self, iri: IRI) -> bool: ...

    def referencing_statements(self, entity: Entity, imports: Imports) -> Iterable[Statement]: ...


@runtime_checkable
class ImportsClosureProvider(Protocol):
    """Container that knows which other containers it imports.

    A container without this capability is treated as importing nothing.
    """

    def imports_closure(self) -> Sequence[StatementContainer]:
        """This container followed by every container it transitively imports."""
        ...


@runtime_checkable
class MutableStatementContainer(StatementContainer, Protocol):
    """Container that accepts edits; removal of an absent statement is a no-op."""

    def add_statement(self, statement: Statement) -> bool: ...

    def remove_statement(self, statement: Statement) -> bool: ...
