"""Statement containment under the imports and annotation modes.

``imports`` decides the scope of each container (itself, or its whole imports
closure when the container can report one) and ``annotations`` decides which
equality is used. The two flags are independent, giving four behaviours.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ontosearch.domain.model import AnnotationMode, Imports
from ontosearch.domain.ports import ImportsClosureProvider
from ontosearch.domain.search.aggregate import any_container, concatenate, containers_of, require

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from ontosearch.domain.model import Statement
    from ontosearch.domain.ports import StatementContainer
    from ontosearch.domain.search.aggregate import ContainerSource


def _scope(container: StatementContainer, imports: Imports) -> Sequence[StatementContainer]:
    if imports is Imports.INCLUDED and isinstance(container, ImportsClosureProvider):
        return container.imports_closure()
    return (container,)


def _candidates(
    container: StatementContainer, statement: Statement, imports: Imports
) -> Iterator[Statement]:
    # every statement is indexed under each of its operands; the first suffices
    anchor = statement.operands()[0]
    for scoped in _scope(container, imports):
        yield from scoped.statements_of(statement.kind, anchor)


def contains_statement(
    statement: Statement,
    source: ContainerSource,
    *,
    imports: Imports = Imports.EXCLUDED,
    annotations: AnnotationMode = AnnotationMode.CONSIDER,
) -> bool:
    statement = require(statement, role="statement")
    containers = containers_of(source)
    imports = Imports(imports)
    mode = AnnotationMode(annotations)

    def holds(container: StatementContainer) -> bool:
        return any(
            candidate.matches(statement, mode=mode)
            for candidate in _candidates(container, statement, imports)
        )

    return any_container(containers, holds)


def statements_ignoring_annotations(
    statement: Statement,
    source: ContainerSource,
    *,
    imports: Imports = Imports.EXCLUDED,
) -> Iterator[Statement]:
    """Stored statements equal to ``statement`` once annotations are stripped."""

    statement = require(statement, role="statement")
    containers = containers_of(source)
    imports = Imports(imports)

    def matching(container: StatementContainer) -> Iterator[Statement]:
        for candidate in _candidates(container, statement, imports):
            if candidate.matches(statement, mode=AnnotationMode.IGNORE):
                yield candidate

    return concatenate(containers, matching)
