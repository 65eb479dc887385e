"""Relation queries over one or many statement containers.

Responsibilities:
- map a ``(Relation, EntityKind)`` pair onto a statement filter
- validate arguments when the query is issued
- return the lazy, order-preserving concatenation of per-container results

Every query is total over the pairs listed in ``_QUERIES``; any other pair
raises ``UnsupportedQueryError``. Equivalent and disjoint properties of an
annotation property are always empty.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, Final

from ontosearch.domain.errors import InvalidArgumentError, UnsupportedQueryError
from ontosearch.domain.model import Entity, EntityKind, Imports
from ontosearch.domain.search import filters
from ontosearch.domain.search.aggregate import concatenate, containers_of, require
from ontosearch.domain.search.filters import search

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from ontosearch.domain.model import (
        Annotation,
        AnnotationAssertion,
        AnnotationProperty,
        AnnotationSubject,
        Declaration,
        Statement,
        Term,
    )
    from ontosearch.domain.ports import StatementContainer
    from ontosearch.domain.search.aggregate import ContainerSource
    from ontosearch.domain.search.filters import StatementFilter

    type PerContainer = Callable[[StatementContainer, Any], Iterable[Any]]


class Relation(StrEnum):
    SUPER_CLASSES = "super_classes"
    SUB_CLASSES = "sub_classes"
    EQUIVALENT_CLASSES = "equivalent_classes"
    DISJOINT_CLASSES = "disjoint_classes"
    SUPER_PROPERTIES = "super_properties"
    SUB_PROPERTIES = "sub_properties"
    EQUIVALENT_PROPERTIES = "equivalent_properties"
    DISJOINT_PROPERTIES = "disjoint_properties"
    INVERSES = "inverses"
    DOMAINS = "domains"
    RANGES = "ranges"
    SAME_INDIVIDUALS = "same_individuals"
    DIFFERENT_INDIVIDUALS = "different_individuals"
    INSTANCES = "instances"
    TYPES = "types"
    ANNOTATIONS = "annotations"
    ANNOTATION_ASSERTIONS = "annotation_assertions"
    DECLARATIONS = "declarations"
    REFERENCING_STATEMENTS = "referencing_statements"


def _filtered(statement_filter: StatementFilter[Any, Any]) -> PerContainer:
    def run(container: StatementContainer, term: Term) -> Iterator[Any]:
        return search(container, statement_filter, term)

    return run


def _empty(_container: StatementContainer, _term: Term) -> Iterator[Any]:
    return iter(())


def _annotation_subject(term: Term) -> AnnotationSubject:
    # named entities are annotated through their IRI
    if isinstance(term, Entity):
        return term.iri
    return term  # type: ignore[return-value]


def _annotation_assertions(
    container: StatementContainer, term: Term
) -> Iterator[AnnotationAssertion]:
    return search(container, filters.ANNOTATION_ASSERTION_WITH_SUBJECT, _annotation_subject(term))


def _annotations(container: StatementContainer, term: Term) -> Iterator[Annotation]:
    for assertion in _annotation_assertions(container, term):
        yield assertion.annotation


def _referencing(container: StatementContainer, term: Term) -> Iterable[Statement]:
    return container.referencing_statements(term, Imports.EXCLUDED)  # type: ignore[arg-type]


_ALL_KINDS: Final = tuple(EntityKind)
_PROPERTY_KINDS: Final = (
    EntityKind.OBJECT_PROPERTY,
    EntityKind.DATA_PROPERTY,
    EntityKind.ANNOTATION_PROPERTY,
)

_QUERIES: Final[dict[tuple[Relation, EntityKind], PerContainer]] = {
    (Relation.SUPER_CLASSES, EntityKind.CLASS): _filtered(filters.SUB_CLASS_WITH_SUB),
    (Relation.SUB_CLASSES, EntityKind.CLASS): _filtered(filters.SUB_CLASS_WITH_SUPER),
    (Relation.EQUIVALENT_CLASSES, EntityKind.CLASS): _filtered(filters.EQUIVALENT_CLASSES),
    (Relation.DISJOINT_CLASSES, EntityKind.CLASS): _filtered(filters.DISJOINT_CLASSES),
    (Relation.SUPER_PROPERTIES, EntityKind.OBJECT_PROPERTY): _filtered(
        filters.SUB_OBJECT_PROPERTY_WITH_SUB
    ),
    (Relation.SUPER_PROPERTIES, EntityKind.DATA_PROPERTY): _filtered(
        filters.SUB_DATA_PROPERTY_WITH_SUB
    ),
    (Relation.SUPER_PROPERTIES, EntityKind.ANNOTATION_PROPERTY): _filtered(
        filters.SUB_ANNOTATION_PROPERTY_WITH_SUB
    ),
    (Relation.SUB_PROPERTIES, EntityKind.OBJECT_PROPERTY): _filtered(
        filters.SUB_OBJECT_PROPERTY_WITH_SUPER
    ),
    (Relation.SUB_PROPERTIES, EntityKind.DATA_PROPERTY): _filtered(
        filters.SUB_DATA_PROPERTY_WITH_SUPER
    ),
    (Relation.SUB_PROPERTIES, EntityKind.ANNOTATION_PROPERTY): _filtered(
        filters.SUB_ANNOTATION_PROPERTY_WITH_SUPER
    ),
    (Relation.EQUIVALENT_PROPERTIES, EntityKind.OBJECT_PROPERTY): _filtered(
        filters.EQUIVALENT_OBJECT_PROPERTIES
    ),
    (Relation.EQUIVALENT_PROPERTIES, EntityKind.DATA_PROPERTY): _filtered(
        filters.EQUIVALENT_DATA_PROPERTIES
    ),
    (Relation.EQUIVALENT_PROPERTIES, EntityKind.ANNOTATION_PROPERTY): _empty,
    (Relation.DISJOINT_PROPERTIES, EntityKind.OBJECT_PROPERTY): _filtered(
        filters.DISJOINT_OBJECT_PROPERTIES
    ),
    (Relation.DISJOINT_PROPERTIES, EntityKind.DATA_PROPERTY): _filtered(
        filters.DISJOINT_DATA_PROPERTIES
    ),
    (Relation.DISJOINT_PROPERTIES, EntityKind.ANNOTATION_PROPERTY): _empty,
    (Relation.INVERSES, EntityKind.OBJECT_PROPERTY): _filtered(filters.INVERSE_OBJECT_PROPERTIES),
    (Relation.DOMAINS, EntityKind.OBJECT_PROPERTY): _filtered(filters.OBJECT_PROPERTY_DOMAIN),
    (Relation.DOMAINS, EntityKind.DATA_PROPERTY): _filtered(filters.DATA_PROPERTY_DOMAIN),
    (Relation.DOMAINS, EntityKind.ANNOTATION_PROPERTY): _filtered(
        filters.ANNOTATION_PROPERTY_DOMAIN
    ),
    (Relation.RANGES, EntityKind.OBJECT_PROPERTY): _filtered(filters.OBJECT_PROPERTY_RANGE),
    (Relation.RANGES, EntityKind.DATA_PROPERTY): _filtered(filters.DATA_PROPERTY_RANGE),
    (Relation.RANGES, EntityKind.ANNOTATION_PROPERTY): _filtered(filters.ANNOTATION_PROPERTY_RANGE),
    (Relation.SAME_INDIVIDUALS, EntityKind.INDIVIDUAL): _filtered(filters.SAME_INDIVIDUAL),
    (Relation.DIFFERENT_INDIVIDUALS, EntityKind.INDIVIDUAL): _filtered(
        filters.DIFFERENT_INDIVIDUALS
    ),
    (Relation.INSTANCES, EntityKind.CLASS): _filtered(filters.CLASS_ASSERTION_WITH_CLASS),
    (Relation.TYPES, EntityKind.INDIVIDUAL): _filtered(filters.CLASS_ASSERTION_WITH_INDIVIDUAL),
    **{(Relation.ANNOTATIONS, kind): _annotations for kind in _ALL_KINDS},
    **{(Relation.ANNOTATION_ASSERTIONS, kind): _annotation_assertions for kind in _ALL_KINDS},
    **{(Relation.DECLARATIONS, kind): _filtered(filters.DECLARATION) for kind in _ALL_KINDS},
    **{(Relation.REFERENCING_STATEMENTS, kind): _referencing for kind in _ALL_KINDS},
}

# bare IRIs are only meaningful as annotation subjects
_IRI_QUERIES: Final[dict[Relation, PerContainer]] = {
    Relation.ANNOTATIONS: _annotations,
    Relation.ANNOTATION_ASSERTIONS: _annotation_assertions,
}


def kind_of(term: Term) -> EntityKind | str:
    """Entity variant of ``term``; literals and bare IRIs report their type name."""

    kind = getattr(term, "entity_kind", None)
    if isinstance(kind, EntityKind):
        return kind
    return "iri" if isinstance(term, str) else type(term).__name__.lower()


def _lookup(relation: Relation, term: Term) -> PerContainer:
    if isinstance(term, str):
        per_container = _IRI_QUERIES.get(relation)
    else:
        kind = kind_of(term)
        per_container = _QUERIES.get((relation, kind)) if isinstance(kind, EntityKind) else None
    if per_container is None:
        raise UnsupportedQueryError(relation, kind_of(term))
    return per_container


def _as_relation(value: object) -> Relation:
    value = require(value, role="relation")
    try:
        return Relation(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown relation {value!r}") from exc


def supports(relation: Relation, kind: EntityKind) -> bool:
    return (relation, kind) in _QUERIES


def query(relation: Relation, term: Term, source: ContainerSource) -> Iterator[Any]:
    """Lazy results of ``relation`` for ``term`` across ``source``.

    ``source`` is a single container or an ordered collection of containers.
    Missing arguments and unsupported pairs raise immediately, before the
    returned iterator is consumed.
    """

    relation = _as_relation(relation)
    term = require(term, role="entity")
    containers = containers_of(source)
    per_container = _lookup(relation, term)
    return concatenate(containers, lambda container: per_container(container, term))


# class hierarchy


def super_classes(cls: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.SUPER_CLASSES, cls, source)


def sub_classes(cls: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.SUB_CLASSES, cls, source)


def equivalent_classes(cls: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.EQUIVALENT_CLASSES, cls, source)


def disjoint_classes(cls: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.DISJOINT_CLASSES, cls, source)


# property hierarchy


def super_properties(prop: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.SUPER_PROPERTIES, prop, source)


def sub_properties(prop: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.SUB_PROPERTIES, prop, source)


def equivalent_properties(prop: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.EQUIVALENT_PROPERTIES, prop, source)


def disjoint_properties(prop: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.DISJOINT_PROPERTIES, prop, source)


def inverses(prop: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.INVERSES, prop, source)


def domains(prop: Term, source: ContainerSource) -> Iterator[Term]:
    """Declared domains; annotation properties yield bare IRIs."""
    return query(Relation.DOMAINS, prop, source)


def ranges(prop: Term, source: ContainerSource) -> Iterator[Term]:
    """Declared ranges; annotation properties yield bare IRIs."""
    return query(Relation.RANGES, prop, source)


# individuals


def same_individuals(individual: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.SAME_INDIVIDUALS, individual, source)


def different_individuals(individual: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.DIFFERENT_INDIVIDUALS, individual, source)


def instances(cls: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.INSTANCES, cls, source)


def types(individual: Term, source: ContainerSource) -> Iterator[Term]:
    return query(Relation.TYPES, individual, source)


# annotations, declarations, references


def annotations(
    subject: Term,
    source: ContainerSource,
    *,
    annotation_property: AnnotationProperty | None = None,
) -> Iterator[Annotation]:
    """Annotations on ``subject``, optionally narrowed to one annotation property."""

    results = query(Relation.ANNOTATIONS, subject, source)
    if annotation_property is None:
        return results
    return (annotation for annotation in results if annotation.property == annotation_property)


def annotation_assertions(subject: Term, source: ContainerSource) -> Iterator[AnnotationAssertion]:
    return query(Relation.ANNOTATION_ASSERTIONS, subject, source)


def declarations(entity: Entity, source: ContainerSource) -> Iterator[Declaration]:
    return query(Relation.DECLARATIONS, entity, source)


def referencing_statements(
    entity: Entity,
    source: ContainerSource,
    *,
    imports: Imports = Imports.EXCLUDED,
) -> Iterator[Statement]:
    """Every statement whose signature mentions ``entity``."""

    imports = Imports(imports)
    if imports is Imports.EXCLUDED:
        return query(Relation.REFERENCING_STATEMENTS, entity, source)

    entity = require(entity, role="entity")
    containers = containers_of(source)
    _lookup(Relation.REFERENCING_STATEMENTS, entity)
    return concatenate(
        containers, lambda container: container.referencing_statements(entity, imports)
    )
