from __future__ import annotations

import pytest

from ontosearch.domain.errors import InvalidArgumentError
from ontosearch.domain.model import Annotation, AnnotationMode, Imports, SubClassOf
from ontosearch.domain.ports import ImportsClosureProvider, StatementContainer
from ontosearch.domain.search import (
    contains_statement,
    statements_ignoring_annotations,
    super_classes,
)
from tests.helpers.statements import (
    ContractOnlyContainer,
    annotation_property,
    container,
    literal,
    owl_class,
)

BARE = SubClassOf(owl_class("A"), owl_class("B"))
ANNOTATED = SubClassOf(
    owl_class("A"),
    owl_class("B"),
    annotations=frozenset({Annotation(annotation_property("comment"), literal("why"))}),
)


@pytest.mark.parametrize(
    ("imports", "annotations", "expected"),
    [
        (Imports.EXCLUDED, AnnotationMode.CONSIDER, False),
        (Imports.EXCLUDED, AnnotationMode.IGNORE, False),
        (Imports.INCLUDED, AnnotationMode.CONSIDER, False),
        (Imports.INCLUDED, AnnotationMode.IGNORE, True),
    ],
)
def test_four_containment_modes(
    imports: Imports, annotations: AnnotationMode, expected: bool
) -> None:
    imported = container(ANNOTATED)
    importing = container(imports=[imported])

    assert (
        contains_statement(BARE, importing, imports=imports, annotations=annotations) is expected
    )


def test_exact_match_within_the_container() -> None:
    store = container(ANNOTATED)

    assert contains_statement(ANNOTATED, store)
    assert not contains_statement(BARE, store)
    assert contains_statement(BARE, store, annotations=AnnotationMode.IGNORE)


def test_containment_across_containers() -> None:
    assert contains_statement(BARE, [container(), container(BARE)])
    assert not contains_statement(BARE, [container(), container()])


def test_statements_ignoring_annotations_yields_stored_forms() -> None:
    imported = container(ANNOTATED)
    importing = container(BARE, imports=[imported])

    assert list(statements_ignoring_annotations(BARE, importing)) == [BARE]
    assert list(statements_ignoring_annotations(BARE, importing, imports=Imports.INCLUDED)) == [
        BARE,
        ANNOTATED,
    ]


def test_missing_statement_raises() -> None:
    with pytest.raises(InvalidArgumentError, match="statement"):
        contains_statement(None, container())  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="statement"):
        statements_ignoring_annotations(None, container())  # type: ignore[arg-type]


def test_containers_without_imports_support() -> None:
    store = ContractOnlyContainer(BARE)

    assert isinstance(store, StatementContainer)
    assert not isinstance(store, ImportsClosureProvider)
    assert list(super_classes(owl_class("A"), store)) == [owl_class("B")]
    assert contains_statement(BARE, store)
    assert contains_statement(BARE, store, imports=Imports.INCLUDED)
    assert not contains_statement(ANNOTATED, store, imports=Imports.INCLUDED)


def test_imported_containers_without_imports_support() -> None:
    imported = ContractOnlyContainer(ANNOTATED)
    importing = container(imports=[imported])

    assert importing.imports_closure() == (importing, imported)
    assert contains_statement(ANNOTATED, importing, imports=Imports.INCLUDED)
    assert not contains_statement(ANNOTATED, importing)
