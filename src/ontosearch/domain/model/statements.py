"""Immutable statements (axioms) over entities.

Equality comes in two modes:
- the dataclass ``==`` is structural *including* attached annotations
- ``matches(other, mode=AnnotationMode.IGNORE)`` compares the bare structure

Containers are expected to index each statement by its ``operands()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, ClassVar, Final, Self

from ontosearch.domain.errors import InvalidArgumentError
from ontosearch.domain.model.enums import AnnotationMode, StatementKind
from ontosearch.domain.model.terms import Annotation, term_signature

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ontosearch.domain.model.terms import (
        IRI,
        AnnotationProperty,
        AnnotationSubject,
        AnnotationValue,
        ClassExpression,
        DataPropertyExpression,
        DataRange,
        Entity,
        Individual,
        Literal,
        ObjectPropertyExpression,
        Term,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class Statement:
    """Base statement: a kind tag, operands declared by subclasses, annotations."""

    annotations: frozenset[Annotation] = field(default_factory=frozenset["Annotation"])

    # class-level discriminator; subclasses must override
    KIND: ClassVar[StatementKind]

    def __post_init__(self) -> None:
        operands = self.operands()
        if not operands:
            raise InvalidArgumentError(f"{self.KIND} requires at least one operand")
        if any(operand is None for operand in operands):
            raise InvalidArgumentError(f"{self.KIND} operands must not be None")

    @property
    def kind(self) -> StatementKind:
        return self.KIND

    @property
    def is_annotated(self) -> bool:
        return bool(self.annotations)

    def operands(self) -> tuple[Term, ...]:
        """Top-level operands in declaration order, n-ary members flattened."""

        collected: list[Term] = []
        for statement_field in fields(self):
            if statement_field.name == "annotations":
                continue
            value = getattr(self, statement_field.name)
            if isinstance(value, tuple):
                collected.extend(value)
            else:
                collected.append(value)
        return tuple(collected)

    def signature(self) -> Iterator[Entity]:
        for operand in self.operands():
            yield from term_signature(operand)
        for annotation in self.annotations:
            yield from term_signature(annotation)

    def __str__(self) -> str:
        rendered = ", ".join(str(operand) for operand in self.operands())
        return f"{self.KIND}({rendered})"

    def without_annotations(self) -> Self:
        if not self.annotations:
            return self
        return replace(self, annotations=frozenset())

    def matches(self, other: Statement, *, mode: AnnotationMode) -> bool:
        if mode is AnnotationMode.CONSIDER:
            return self == other
        return self.without_annotations() == other.without_annotations()


@dataclass(frozen=True, slots=True)
class Declaration(Statement):
    entity: Entity

    KIND: ClassVar[StatementKind] = StatementKind.DECLARATION


@dataclass(frozen=True, slots=True)
class SubClassOf(Statement):
    sub_class: ClassExpression
    super_class: ClassExpression

    KIND: ClassVar[StatementKind] = StatementKind.SUB_CLASS_OF


@dataclass(frozen=True, slots=True)
class EquivalentClasses(Statement):
    class_expressions: tuple[ClassExpression, ...]

    KIND: ClassVar[StatementKind] = StatementKind.EQUIVALENT_CLASSES


@dataclass(frozen=True, slots=True)
class DisjointClasses(Statement):
    class_expressions: tuple[ClassExpression, ...]

    KIND: ClassVar[StatementKind] = StatementKind.DISJOINT_CLASSES


@dataclass(frozen=True, slots=True)
class SubObjectPropertyOf(Statement):
    sub_property: ObjectPropertyExpression
    super_property: ObjectPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.SUB_OBJECT_PROPERTY_OF


@dataclass(frozen=True, slots=True)
class SubDataPropertyOf(Statement):
    sub_property: DataPropertyExpression
    super_property: DataPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.SUB_DATA_PROPERTY_OF


@dataclass(frozen=True, slots=True)
class SubAnnotationPropertyOf(Statement):
    sub_property: AnnotationProperty
    super_property: AnnotationProperty

    KIND: ClassVar[StatementKind] = StatementKind.SUB_ANNOTATION_PROPERTY_OF


@dataclass(frozen=True, slots=True)
class EquivalentObjectProperties(Statement):
    properties: tuple[ObjectPropertyExpression, ...]

    KIND: ClassVar[StatementKind] = StatementKind.EQUIVALENT_OBJECT_PROPERTIES


@dataclass(frozen=True, slots=True)
class EquivalentDataProperties(Statement):
    properties: tuple[DataPropertyExpression, ...]

    KIND: ClassVar[StatementKind] = StatementKind.EQUIVALENT_DATA_PROPERTIES


@dataclass(frozen=True, slots=True)
class DisjointObjectProperties(Statement):
    properties: tuple[ObjectPropertyExpression, ...]

    KIND: ClassVar[StatementKind] = StatementKind.DISJOINT_OBJECT_PROPERTIES


@dataclass(frozen=True, slots=True)
class DisjointDataProperties(Statement):
    properties: tuple[DataPropertyExpression, ...]

    KIND: ClassVar[StatementKind] = StatementKind.DISJOINT_DATA_PROPERTIES


@dataclass(frozen=True, slots=True)
class InverseObjectProperties(Statement):
    first: ObjectPropertyExpression
    second: ObjectPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.INVERSE_OBJECT_PROPERTIES


@dataclass(frozen=True, slots=True)
class TransitiveObjectProperty(Statement):
    property: ObjectPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.TRANSITIVE_OBJECT_PROPERTY


@dataclass(frozen=True, slots=True)
class SymmetricObjectProperty(Statement):
    property: ObjectPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.SYMMETRIC_OBJECT_PROPERTY


@dataclass(frozen=True, slots=True)
class AsymmetricObjectProperty(Statement):
    property: ObjectPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.ASYMMETRIC_OBJECT_PROPERTY


@dataclass(frozen=True, slots=True)
class ReflexiveObjectProperty(Statement):
    property: ObjectPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.REFLEXIVE_OBJECT_PROPERTY


@dataclass(frozen=True, slots=True)
class IrreflexiveObjectProperty(Statement):
    property: ObjectPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.IRREFLEXIVE_OBJECT_PROPERTY


@dataclass(frozen=True, slots=True)
class FunctionalObjectProperty(Statement):
    property: ObjectPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.FUNCTIONAL_OBJECT_PROPERTY


@dataclass(frozen=True, slots=True)
class InverseFunctionalObjectProperty(Statement):
    property: ObjectPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.INVERSE_FUNCTIONAL_OBJECT_PROPERTY


@dataclass(frozen=True, slots=True)
class FunctionalDataProperty(Statement):
    property: DataPropertyExpression

    KIND: ClassVar[StatementKind] = StatementKind.FUNCTIONAL_DATA_PROPERTY


@dataclass(frozen=True, slots=True)
class ObjectPropertyDomain(Statement):
    property: ObjectPropertyExpression
    domain: ClassExpression

    KIND: ClassVar[StatementKind] = StatementKind.OBJECT_PROPERTY_DOMAIN


@dataclass(frozen=True, slots=True)
class ObjectPropertyRange(Statement):
    property: ObjectPropertyExpression
    range: ClassExpression

    KIND: ClassVar[StatementKind] = StatementKind.OBJECT_PROPERTY_RANGE


@dataclass(frozen=True, slots=True)
class DataPropertyDomain(Statement):
    property: DataPropertyExpression
    domain: ClassExpression

    KIND: ClassVar[StatementKind] = StatementKind.DATA_PROPERTY_DOMAIN


@dataclass(frozen=True, slots=True)
class DataPropertyRange(Statement):
    property: DataPropertyExpression
    range: DataRange

    KIND: ClassVar[StatementKind] = StatementKind.DATA_PROPERTY_RANGE


@dataclass(frozen=True, slots=True)
class AnnotationPropertyDomain(Statement):
    property: AnnotationProperty
    domain: IRI

    KIND: ClassVar[StatementKind] = StatementKind.ANNOTATION_PROPERTY_DOMAIN


@dataclass(frozen=True, slots=True)
class AnnotationPropertyRange(Statement):
    property: AnnotationProperty
    range: IRI

    KIND: ClassVar[StatementKind] = StatementKind.ANNOTATION_PROPERTY_RANGE


@dataclass(frozen=True, slots=True)
class ClassAssertion(Statement):
    class_expression: ClassExpression
    individual: Individual

    KIND: ClassVar[StatementKind] = StatementKind.CLASS_ASSERTION


@dataclass(frozen=True, slots=True)
class ObjectPropertyAssertion(Statement):
    property: ObjectPropertyExpression
    subject: Individual
    value: Individual

    KIND: ClassVar[StatementKind] = StatementKind.OBJECT_PROPERTY_ASSERTION


@dataclass(frozen=True, slots=True)
class DataPropertyAssertion(Statement):
    property: DataPropertyExpression
    subject: Individual
    value: Literal

    KIND: ClassVar[StatementKind] = StatementKind.DATA_PROPERTY_ASSERTION


@dataclass(frozen=True, slots=True)
class NegativeObjectPropertyAssertion(Statement):
    property: ObjectPropertyExpression
    subject: Individual
    value: Individual

    KIND: ClassVar[StatementKind] = StatementKind.NEGATIVE_OBJECT_PROPERTY_ASSERTION


@dataclass(frozen=True, slots=True)
class NegativeDataPropertyAssertion(Statement):
    property: DataPropertyExpression
    subject: Individual
    value: Literal

    KIND: ClassVar[StatementKind] = StatementKind.NEGATIVE_DATA_PROPERTY_ASSERTION


@dataclass(frozen=True, slots=True)
class AnnotationAssertion(Statement):
    property: AnnotationProperty
    subject: AnnotationSubject
    value: AnnotationValue

    KIND: ClassVar[StatementKind] = StatementKind.ANNOTATION_ASSERTION

    @property
    def annotation(self) -> Annotation:
        """The (property, value) pair carried by this assertion, nested annotations kept."""
        return Annotation(self.property, self.value, self.annotations)


@dataclass(frozen=True, slots=True)
class SameIndividual(Statement):
    individuals: tuple[Individual, ...]

    KIND: ClassVar[StatementKind] = StatementKind.SAME_INDIVIDUAL


@dataclass(frozen=True, slots=True)
class DifferentIndividuals(Statement):
    individuals: tuple[Individual, ...]

    KIND: ClassVar[StatementKind] = StatementKind.DIFFERENT_INDIVIDUALS


type PropertyCharacteristicStatement = (
    TransitiveObjectProperty
    | SymmetricObjectProperty
    | AsymmetricObjectProperty
    | ReflexiveObjectProperty
    | IrreflexiveObjectProperty
    | FunctionalObjectProperty
    | InverseFunctionalObjectProperty
    | FunctionalDataProperty
)
type PropertyAssertionStatement = (
    ObjectPropertyAssertion
    | DataPropertyAssertion
    | NegativeObjectPropertyAssertion
    | NegativeDataPropertyAssertion
)


STATEMENT_TYPES: Final[dict[StatementKind, type[Statement]]] = {
    statement_type.KIND: statement_type
    for statement_type in (
        Declaration,
        SubClassOf,
        EquivalentClasses,
        DisjointClasses,
        SubObjectPropertyOf,
        SubDataPropertyOf,
        SubAnnotationPropertyOf,
        EquivalentObjectProperties,
        EquivalentDataProperties,
        DisjointObjectProperties,
        DisjointDataProperties,
        InverseObjectProperties,
        TransitiveObjectProperty,
        SymmetricObjectProperty,
        AsymmetricObjectProperty,
        ReflexiveObjectProperty,
        IrreflexiveObjectProperty,
        FunctionalObjectProperty,
        InverseFunctionalObjectProperty,
        FunctionalDataProperty,
        ObjectPropertyDomain,
        ObjectPropertyRange,
        DataPropertyDomain,
        DataPropertyRange,
        AnnotationPropertyDomain,
        AnnotationPropertyRange,
        ClassAssertion,
        ObjectPropertyAssertion,
        DataPropertyAssertion,
        NegativeObjectPropertyAssertion,
        NegativeDataPropertyAssertion,
        AnnotationAssertion,
        SameIndividual,
        DifferentIndividuals,
    )
}
