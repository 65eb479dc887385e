"""In-memory statement container.

Statements are kept in insertion order and indexed twice:
- by ``(kind, operand)`` for every top-level operand, serving ``statements_of``
- by every entity in the statement's signature, serving reference lookups

Lookups hand out tuple snapshots, so a caller may keep iterating while the
container is edited.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from ontosearch.domain.errors import InvalidArgumentError
from ontosearch.domain.model import Imports, NamedIndividual, OWLClass, Statement
from ontosearch.domain.ports import ImportsClosureProvider

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ontosearch.domain.model import IRI, Entity, StatementKind, Term
    from ontosearch.domain.ports import StatementContainer


type _Bucket = dict[Statement, None]


class InMemoryContainer:
    def __init__(
        self,
        statements: Iterable[Statement] = (),
        *,
        iri: IRI | None = None,
        imports: Iterable[StatementContainer] = (),
    ) -> None:
        self.iri = iri
        self._statements: _Bucket = {}
        self._by_anchor: dict[tuple[StatementKind, Term], _Bucket] = {}
        self._by_entity: dict[Entity, _Bucket] = {}
        self._imports: list[StatementContainer] = []
        for statement in statements:
            self.add_statement(statement)
        for imported in imports:
            self.add_import(imported)

    def __repr__(self) -> str:
        return f"InMemoryContainer(iri={self.iri!r}, statements={len(self._statements)})"

    def __len__(self) -> int:
        return len(self._statements)

    def __contains__(self, statement: object) -> bool:
        return statement in self._statements

    def statements(self) -> tuple[Statement, ...]:
        return tuple(self._statements)

    # read port

    def statements_of(self, kind: StatementKind, anchor: Term) -> tuple[Statement, ...]:
        return tuple(self._by_anchor.get((kind, anchor), ()))

    def signature_individuals(self) -> tuple[NamedIndividual, ...]:
        return tuple(entity for entity in self._by_entity if isinstance(entity, NamedIndividual))

    def contains_class(self, iri: IRI) -> bool:
        return OWLClass(iri) in self._by_entity

    def referencing_statements(
        self, entity: Entity, imports: Imports = Imports.EXCLUDED
    ) -> tuple[Statement, ...]:
        if Imports(imports) is Imports.EXCLUDED:
            return tuple(self._by_entity.get(entity, ()))
        collected: list[Statement] = []
        for container in self.imports_closure():
            collected.extend(container.referencing_statements(entity, Imports.EXCLUDED))
        return tuple(collected)

    def imports_closure(self) -> tuple[StatementContainer, ...]:
        closure: list[StatementContainer] = [self]
        seen = {id(self)}
        pending: deque[StatementContainer] = deque(self._imports)
        while pending:
            container = pending.popleft()
            if id(container) in seen:
                continue
            seen.add(id(container))
            closure.append(container)
            if isinstance(container, InMemoryContainer):
                pending.extend(container.direct_imports)
            elif isinstance(container, ImportsClosureProvider):
                pending.extend(container.imports_closure()[1:])
        return tuple(closure)

    @property
    def direct_imports(self) -> tuple[StatementContainer, ...]:
        return tuple(self._imports)

    # write port

    def add_import(self, container: StatementContainer) -> None:
        if container is None:
            raise InvalidArgumentError("imported container is required")
        if container is self or any(existing is container for existing in self._imports):
            return
        self._imports.append(container)

    def add_statement(self, statement: Statement) -> bool:
        if not isinstance(statement, Statement):
            raise InvalidArgumentError(f"Expected a statement, got {statement!r}")
        if statement in self._statements:
            return False
        self._statements[statement] = None
        for operand in statement.operands():
            self._by_anchor.setdefault((statement.kind, operand), {})[statement] = None
        for entity in statement.signature():
            self._by_entity.setdefault(entity, {})[statement] = None
        return True

    def remove_statement(self, statement: Statement) -> bool:
        if statement not in self._statements:
            return False
        del self._statements[statement]
        for operand in statement.operands():
            _discard(self._by_anchor, (statement.kind, operand), statement)
        for entity in statement.signature():
            _discard(self._by_entity, entity, statement)
        return True


def _discard[K](index: dict[K, _Bucket], key: K, statement: Statement) -> None:
    bucket = index.get(key)
    if bucket is None:
        return
    bucket.pop(statement, None)
    if not bucket:
        del index[key]
