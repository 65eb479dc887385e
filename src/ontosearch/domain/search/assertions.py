"""Property-value queries for individuals.

Single-property forms return the lazy sequence of asserted values; the
``has_*`` helpers reduce that same sequence. Grouped forms fold every assertion
about an individual into a ``PropertyValues`` multimap, keeping duplicates that
come from different containers.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, Final

from ontosearch.domain.errors import UnsupportedQueryError
from ontosearch.domain.model import EntityKind
from ontosearch.domain.search import filters
from ontosearch.domain.search.aggregate import concatenate, containers_of, exists, require
from ontosearch.domain.search.filters import search
from ontosearch.domain.search.searcher import kind_of
from ontosearch.domain.search.values import PropertyValues

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ontosearch.domain.model import (
        DataPropertyExpression,
        Individual,
        Literal,
        ObjectPropertyExpression,
        PropertyAssertionStatement,
        Term,
    )
    from ontosearch.domain.ports import StatementContainer
    from ontosearch.domain.search.aggregate import ContainerSource
    from ontosearch.domain.search.filters import StatementFilter


class ValueRelation(StrEnum):
    PROPERTY_VALUES = "property_values"
    NEGATIVE_PROPERTY_VALUES = "negative_property_values"


_BY_PROPERTY_KIND: Final[dict[tuple[ValueRelation, EntityKind], StatementFilter[Any, Any]]] = {
    (
        ValueRelation.PROPERTY_VALUES,
        EntityKind.OBJECT_PROPERTY,
    ): filters.OBJECT_ASSERTION_WITH_SUBJECT,
    (ValueRelation.PROPERTY_VALUES, EntityKind.DATA_PROPERTY): filters.DATA_ASSERTION_WITH_SUBJECT,
    (
        ValueRelation.NEGATIVE_PROPERTY_VALUES,
        EntityKind.OBJECT_PROPERTY,
    ): filters.NEGATIVE_OBJECT_ASSERTION_WITH_SUBJECT,
    (
        ValueRelation.NEGATIVE_PROPERTY_VALUES,
        EntityKind.DATA_PROPERTY,
    ): filters.NEGATIVE_DATA_ASSERTION_WITH_SUBJECT,
}


def _require_individual(individual: Individual) -> Individual:
    individual = require(individual, role="individual")
    if kind_of(individual) is not EntityKind.INDIVIDUAL:
        raise UnsupportedQueryError("property assertions", kind_of(individual))
    return individual


def _assertions(
    source: ContainerSource,
    statement_filter: StatementFilter[Any, Any],
    individual: Individual,
) -> Iterator[PropertyAssertionStatement]:
    individual = _require_individual(individual)
    containers = containers_of(source)

    def per_container(container: StatementContainer) -> Iterator[PropertyAssertionStatement]:
        return search(container, statement_filter, individual)

    return concatenate(containers, per_container)


def _values(
    relation: ValueRelation,
    individual: Individual,
    prop: Term,
    source: ContainerSource,
    expected: EntityKind | None = None,
) -> Iterator[Any]:
    prop = require(prop, role="property")
    kind = kind_of(prop)
    if expected is not None and kind is not expected:
        raise UnsupportedQueryError(relation, kind)
    statement_filter = (
        _BY_PROPERTY_KIND.get((relation, kind)) if isinstance(kind, EntityKind) else None
    )
    if statement_filter is None:
        raise UnsupportedQueryError(relation, kind)
    assertions = _assertions(source, statement_filter, individual)
    return (assertion.value for assertion in assertions if assertion.property == prop)


def property_values(individual: Individual, prop: Term, source: ContainerSource) -> Iterator[Any]:
    """Values of ``prop`` for ``individual``; dispatches on the property variant."""
    return _values(ValueRelation.PROPERTY_VALUES, individual, prop, source)


def negative_property_values(
    individual: Individual, prop: Term, source: ContainerSource
) -> Iterator[Any]:
    return _values(ValueRelation.NEGATIVE_PROPERTY_VALUES, individual, prop, source)


def data_property_values(
    individual: Individual, prop: DataPropertyExpression, source: ContainerSource
) -> Iterator[Literal]:
    return _values(
        ValueRelation.PROPERTY_VALUES, individual, prop, source, EntityKind.DATA_PROPERTY
    )


def object_property_values(
    individual: Individual, prop: ObjectPropertyExpression, source: ContainerSource
) -> Iterator[Individual]:
    return _values(
        ValueRelation.PROPERTY_VALUES, individual, prop, source, EntityKind.OBJECT_PROPERTY
    )


def negative_data_property_values(
    individual: Individual, prop: DataPropertyExpression, source: ContainerSource
) -> Iterator[Literal]:
    return _values(
        ValueRelation.NEGATIVE_PROPERTY_VALUES, individual, prop, source, EntityKind.DATA_PROPERTY
    )


def negative_object_property_values(
    individual: Individual, prop: ObjectPropertyExpression, source: ContainerSource
) -> Iterator[Individual]:
    return _values(
        ValueRelation.NEGATIVE_PROPERTY_VALUES,
        individual,
        prop,
        source,
        EntityKind.OBJECT_PROPERTY,
    )


def has_data_property_values(
    individual: Individual, prop: DataPropertyExpression, source: ContainerSource
) -> bool:
    return exists(data_property_values(individual, prop, source))


def has_data_property_value(
    individual: Individual,
    prop: DataPropertyExpression,
    value: Literal,
    source: ContainerSource,
) -> bool:
    value = require(value, role="value")
    return value in data_property_values(individual, prop, source)


def has_object_property_values(
    individual: Individual, prop: ObjectPropertyExpression, source: ContainerSource
) -> bool:
    return exists(object_property_values(individual, prop, source))


def has_object_property_value(
    individual: Individual,
    prop: ObjectPropertyExpression,
    value: Individual,
    source: ContainerSource,
) -> bool:
    value = require(value, role="value")
    return value in object_property_values(individual, prop, source)


def has_negative_data_property_values(
    individual: Individual, prop: DataPropertyExpression, source: ContainerSource
) -> bool:
    return exists(negative_data_property_values(individual, prop, source))


def has_negative_data_property_value(
    individual: Individual,
    prop: DataPropertyExpression,
    value: Literal,
    source: ContainerSource,
) -> bool:
    value = require(value, role="value")
    return value in negative_data_property_values(individual, prop, source)


def has_negative_object_property_values(
    individual: Individual, prop: ObjectPropertyExpression, source: ContainerSource
) -> bool:
    return exists(negative_object_property_values(individual, prop, source))


def has_negative_object_property_value(
    individual: Individual,
    prop: ObjectPropertyExpression,
    value: Individual,
    source: ContainerSource,
) -> bool:
    value = require(value, role="value")
    return value in negative_object_property_values(individual, prop, source)


def _grouped(
    statement_filter: StatementFilter[Any, Any],
    individual: Individual,
    source: ContainerSource,
) -> PropertyValues[Any, Any]:
    return PropertyValues.fold(
        (assertion.property, assertion.value)
        for assertion in _assertions(source, statement_filter, individual)
    )


def grouped_data_property_values(
    individual: Individual, source: ContainerSource
) -> PropertyValues[DataPropertyExpression, Literal]:
    return _grouped(filters.DATA_ASSERTION_WITH_SUBJECT, individual, source)


def grouped_object_property_values(
    individual: Individual, source: ContainerSource
) -> PropertyValues[ObjectPropertyExpression, Individual]:
    return _grouped(filters.OBJECT_ASSERTION_WITH_SUBJECT, individual, source)


def grouped_negative_data_property_values(
    individual: Individual, source: ContainerSource
) -> PropertyValues[DataPropertyExpression, Literal]:
    return _grouped(filters.NEGATIVE_DATA_ASSERTION_WITH_SUBJECT, individual, source)


def grouped_negative_object_property_values(
    individual: Individual, source: ContainerSource
) -> PropertyValues[ObjectPropertyExpression, Individual]:
    return _grouped(filters.NEGATIVE_OBJECT_ASSERTION_WITH_SUBJECT, individual, source)
