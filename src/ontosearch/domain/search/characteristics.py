"""Existence checks for property characteristics and class definitions."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, Final

from ontosearch.domain.errors import InvalidArgumentError, UnsupportedQueryError
from ontosearch.domain.model import EntityKind
from ontosearch.domain.search import filters
from ontosearch.domain.search.aggregate import any_container, containers_of, exists, require
from ontosearch.domain.search.filters import search
from ontosearch.domain.search.searcher import kind_of

if TYPE_CHECKING:
    from ontosearch.domain.model import Term
    from ontosearch.domain.search.aggregate import ContainerSource
    from ontosearch.domain.search.filters import StatementFilter


class Characteristic(StrEnum):
    TRANSITIVE = "transitive"
    SYMMETRIC = "symmetric"
    ASYMMETRIC = "asymmetric"
    REFLEXIVE = "reflexive"
    IRREFLEXIVE = "irreflexive"
    FUNCTIONAL = "functional"
    INVERSE_FUNCTIONAL = "inverse_functional"
    DEFINED = "defined"


_CHECKS: Final[dict[tuple[Characteristic, EntityKind], StatementFilter[Any, Any]]] = {
    (Characteristic.TRANSITIVE, EntityKind.OBJECT_PROPERTY): filters.TRANSITIVE_OBJECT_PROPERTY,
    (Characteristic.SYMMETRIC, EntityKind.OBJECT_PROPERTY): filters.SYMMETRIC_OBJECT_PROPERTY,
    (Characteristic.ASYMMETRIC, EntityKind.OBJECT_PROPERTY): filters.ASYMMETRIC_OBJECT_PROPERTY,
    (Characteristic.REFLEXIVE, EntityKind.OBJECT_PROPERTY): filters.REFLEXIVE_OBJECT_PROPERTY,
    (Characteristic.IRREFLEXIVE, EntityKind.OBJECT_PROPERTY): filters.IRREFLEXIVE_OBJECT_PROPERTY,
    (Characteristic.FUNCTIONAL, EntityKind.OBJECT_PROPERTY): filters.FUNCTIONAL_OBJECT_PROPERTY,
    (Characteristic.FUNCTIONAL, EntityKind.DATA_PROPERTY): filters.FUNCTIONAL_DATA_PROPERTY,
    (
        Characteristic.INVERSE_FUNCTIONAL,
        EntityKind.OBJECT_PROPERTY,
    ): filters.INVERSE_FUNCTIONAL_OBJECT_PROPERTY,
    (Characteristic.DEFINED, EntityKind.CLASS): filters.CLASS_DEFINITION,
}


def _as_characteristic(value: object) -> Characteristic:
    value = require(value, role="characteristic")
    try:
        return Characteristic(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown characteristic {value!r}") from exc


def has_characteristic(characteristic: Characteristic, term: Term, source: ContainerSource) -> bool:
    """True if any container states ``characteristic`` for ``term``."""

    characteristic = _as_characteristic(characteristic)
    term = require(term, role="entity")
    containers = containers_of(source)
    kind = kind_of(term)
    statement_filter = _CHECKS.get((characteristic, kind)) if isinstance(kind, EntityKind) else None
    if statement_filter is None:
        raise UnsupportedQueryError(characteristic, kind)
    return any_container(
        containers, lambda container: exists(search(container, statement_filter, term))
    )


def is_transitive(prop: Term, source: ContainerSource) -> bool:
    return has_characteristic(Characteristic.TRANSITIVE, prop, source)


def is_symmetric(prop: Term, source: ContainerSource) -> bool:
    return has_characteristic(Characteristic.SYMMETRIC, prop, source)


def is_asymmetric(prop: Term, source: ContainerSource) -> bool:
    return has_characteristic(Characteristic.ASYMMETRIC, prop, source)


def is_reflexive(prop: Term, source: ContainerSource) -> bool:
    return has_characteristic(Characteristic.REFLEXIVE, prop, source)


def is_irreflexive(prop: Term, source: ContainerSource) -> bool:
    return has_characteristic(Characteristic.IRREFLEXIVE, prop, source)


def is_functional(prop: Term, source: ContainerSource) -> bool:
    """Object and data properties alike."""
    return has_characteristic(Characteristic.FUNCTIONAL, prop, source)


def is_inverse_functional(prop: Term, source: ContainerSource) -> bool:
    return has_characteristic(Characteristic.INVERSE_FUNCTIONAL, prop, source)


def is_defined(cls: Term, source: ContainerSource) -> bool:
    """True if some EquivalentClasses statement mentions ``cls``."""
    return has_characteristic(Characteristic.DEFINED, cls, source)
