"""Entities, anonymous expressions, literals and annotations.

Every term is an immutable, hashable value. Entities compare by their concrete
type and IRI, so ``OWLClass("A")`` and ``NamedIndividual("A")`` are different
terms that merely share an identifier (punning).
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, ClassVar, Final

from ontosearch.domain.errors import InvalidArgumentError
from ontosearch.domain.model.enums import EntityKind

if TYPE_CHECKING:
    from collections.abc import Iterator

type IRI = str

XSD_STRING: Final[IRI] = "http://www.w3.org/2001/XMLSchema#string"
RDF_LANG_STRING: Final[IRI] = "http://www.w3.org/1999/02/22-rdf-syntax-ns#langString"


def require_iri(value: object, *, role: str = "iri") -> IRI:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{role} must be a non-empty string, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class Entity:
    """Named term identified by an IRI."""

    iri: IRI

    # class-level discriminator; subclasses must override
    ENTITY_KIND: ClassVar[EntityKind]

    def __post_init__(self) -> None:
        require_iri(self.iri)

    @property
    def entity_kind(self) -> EntityKind:
        return self.ENTITY_KIND

    @property
    def is_anonymous(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.ENTITY_KIND}:<{self.iri}>"


@dataclass(frozen=True, slots=True)
class OWLClass(Entity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CLASS


@dataclass(frozen=True, slots=True)
class ObjectProperty(Entity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.OBJECT_PROPERTY


@dataclass(frozen=True, slots=True)
class DataProperty(Entity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.DATA_PROPERTY


@dataclass(frozen=True, slots=True)
class AnnotationProperty(Entity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.ANNOTATION_PROPERTY


@dataclass(frozen=True, slots=True)
class NamedIndividual(Entity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.INDIVIDUAL


@dataclass(frozen=True, slots=True)
class Datatype(Entity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.DATATYPE


ENTITY_TYPES: Final[dict[EntityKind, type[Entity]]] = {
    entity_type.ENTITY_KIND: entity_type
    for entity_type in (
        OWLClass,
        ObjectProperty,
        DataProperty,
        AnnotationProperty,
        NamedIndividual,
        Datatype,
    )
}


def make_entity(kind: EntityKind | str, iri: IRI) -> Entity:
    try:
        entity_type = ENTITY_TYPES[EntityKind(kind)]
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown entity kind {kind!r}") from exc
    return entity_type(iri)


@dataclass(frozen=True, slots=True)
class Expression:
    """Anonymous term standing in for an entity of ``ENTITY_KIND``."""

    ENTITY_KIND: ClassVar[EntityKind]

    @property
    def entity_kind(self) -> EntityKind:
        return self.ENTITY_KIND

    @property
    def is_anonymous(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class AnonymousIndividual(Expression):
    node_id: str

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.INDIVIDUAL

    def __str__(self) -> str:
        return f"_:{self.node_id}"


@dataclass(frozen=True, slots=True)
class ObjectInverseOf(Expression):
    property: ObjectProperty

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.OBJECT_PROPERTY

    def __str__(self) -> str:
        return f"inverse({self.property})"


@dataclass(frozen=True, slots=True)
class AnonymousDataProperty(Expression):
    """Data property expression without an IRI of its own."""

    node_id: str

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.DATA_PROPERTY

    def __str__(self) -> str:
        return f"_:{self.node_id}"


@dataclass(frozen=True, slots=True)
class ObjectIntersectionOf(Expression):
    operands: tuple[ClassExpression, ...]

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CLASS


@dataclass(frozen=True, slots=True)
class ObjectUnionOf(Expression):
    operands: tuple[ClassExpression, ...]

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CLASS


@dataclass(frozen=True, slots=True)
class ObjectComplementOf(Expression):
    operand: ClassExpression

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CLASS


@dataclass(frozen=True, slots=True)
class ObjectSomeValuesFrom(Expression):
    property: ObjectPropertyExpression
    filler: ClassExpression

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CLASS


@dataclass(frozen=True, slots=True)
class ObjectAllValuesFrom(Expression):
    property: ObjectPropertyExpression
    filler: ClassExpression

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CLASS


@dataclass(frozen=True, slots=True)
class Literal:
    lexical: str
    datatype: IRI = XSD_STRING
    lang: str | None = None

    def __str__(self) -> str:
        if self.lang:
            return f'"{self.lexical}"@{self.lang}'
        if self.datatype == XSD_STRING:
            return f'"{self.lexical}"'
        return f'"{self.lexical}"^^<{self.datatype}>'


@dataclass(frozen=True, slots=True)
class Annotation:
    property: AnnotationProperty
    value: AnnotationValue
    annotations: frozenset[Annotation] = field(default_factory=frozenset["Annotation"])

    def __post_init__(self) -> None:
        if self.property is None:
            raise InvalidArgumentError("annotation property is required")
        if self.value is None:
            raise InvalidArgumentError("annotation value is required")


type ClassExpression = (
    OWLClass
    | ObjectIntersectionOf
    | ObjectUnionOf
    | ObjectComplementOf
    | ObjectSomeValuesFrom
    | ObjectAllValuesFrom
)
type ObjectPropertyExpression = ObjectProperty | ObjectInverseOf
type DataPropertyExpression = DataProperty | AnonymousDataProperty
type PropertyExpression = ObjectPropertyExpression | DataPropertyExpression | AnnotationProperty
type Individual = NamedIndividual | AnonymousIndividual
type DataRange = Datatype
type AnnotationSubject = IRI | AnonymousIndividual
type AnnotationValue = IRI | Literal | AnonymousIndividual
type Term = Entity | Expression | Literal | IRI


def term_signature(term: object) -> Iterator[Entity]:
    """Yield every entity mentioned by ``term``, recursing into expressions."""

    if isinstance(term, Entity):
        yield term
    elif isinstance(term, Expression):
        for term_field in fields(term):
            yield from term_signature(getattr(term, term_field.name))
    elif isinstance(term, tuple):
        for member in term:
            yield from term_signature(member)
    elif isinstance(term, Annotation):
        yield term.property
        yield from term_signature(term.value)
        for nested in term.annotations:
            yield from term_signature(nested)
