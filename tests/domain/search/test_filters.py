from __future__ import annotations

from ontosearch.domain.model import (
    Declaration,
    EquivalentClasses,
    InverseObjectProperties,
    SubClassOf,
)
from ontosearch.domain.search import filters
from ontosearch.domain.search.filters import search
from tests.helpers.statements import container, object_property, owl_class


def test_role_filter_only_matches_the_anchor_role() -> None:
    statement = SubClassOf(owl_class("A"), owl_class("B"))

    assert list(filters.SUB_CLASS_WITH_SUB.select([statement], owl_class("A"))) == [owl_class("B")]
    assert list(filters.SUB_CLASS_WITH_SUB.select([statement], owl_class("B"))) == []
    assert list(filters.SUB_CLASS_WITH_SUPER.select([statement], owl_class("B"))) == [
        owl_class("A")
    ]


def test_group_filter_excludes_the_anchor() -> None:
    statement = EquivalentClasses((owl_class("A"), owl_class("B"), owl_class("C")))

    assert list(filters.EQUIVALENT_CLASSES.select([statement], owl_class("B"))) == [
        owl_class("A"),
        owl_class("C"),
    ]


def test_filters_skip_other_statement_kinds() -> None:
    statements = [Declaration(owl_class("A")), SubClassOf(owl_class("A"), owl_class("B"))]

    assert list(filters.DISJOINT_CLASSES.select(statements, owl_class("A"))) == []


def test_inverse_filter_is_symmetric() -> None:
    statement = InverseObjectProperties(object_property("p"), object_property("q"))

    assert list(filters.INVERSE_OBJECT_PROPERTIES.select([statement], object_property("p"))) == [
        object_property("q")
    ]
    assert list(filters.INVERSE_OBJECT_PROPERTIES.select([statement], object_property("q"))) == [
        object_property("p")
    ]


def test_statement_filter_yields_the_statement() -> None:
    declaration = Declaration(owl_class("A"))

    assert list(filters.DECLARATION.select([declaration], owl_class("A"))) == [declaration]


def test_search_reads_the_anchored_slice() -> None:
    store = container(
        SubClassOf(owl_class("A"), owl_class("B")),
        SubClassOf(owl_class("A"), owl_class("C")),
        SubClassOf(owl_class("B"), owl_class("C")),
    )

    assert list(search(store, filters.SUB_CLASS_WITH_SUB, owl_class("A"))) == [
        owl_class("B"),
        owl_class("C"),
    ]
