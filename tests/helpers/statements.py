"""Builders for terms, statements and containers used across the test suite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from ontosearch.adapters.memory import InMemoryContainer
from ontosearch.domain.model import (
    AnnotationProperty,
    ClassAssertion,
    DataProperty,
    DataPropertyAssertion,
    Datatype,
    Declaration,
    Literal,
    NamedIndividual,
    ObjectProperty,
    OWLClass,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ontosearch.domain.model import Entity, Imports, Statement, StatementKind, Term
    from ontosearch.domain.ports import StatementContainer

EX: Final[str] = "http://example.org/onto#"


def iri(name: str) -> str:
    return f"{EX}{name}"


def owl_class(name: str) -> OWLClass:
    return OWLClass(iri(name))


def object_property(name: str) -> ObjectProperty:
    return ObjectProperty(iri(name))


def data_property(name: str) -> DataProperty:
    return DataProperty(iri(name))


def annotation_property(name: str) -> AnnotationProperty:
    return AnnotationProperty(iri(name))


def individual(name: str) -> NamedIndividual:
    return NamedIndividual(iri(name))


def datatype(name: str) -> Datatype:
    return Datatype(iri(name))


def literal(value: str, *, lang: str | None = None) -> Literal:
    return Literal(value, lang=lang)


def container(
    *statements: Statement,
    name: str | None = None,
    imports: Iterable[StatementContainer] = (),
) -> InMemoryContainer:
    return InMemoryContainer(statements, iri=iri(name) if name else None, imports=imports)


@dataclass(frozen=True, slots=True)
class PunningScenario:
    """``A`` is both a class and an individual carrying one ``hasX`` value."""

    container: InMemoryContainer
    class_declaration: Declaration
    individual_declaration: Declaration
    property_declaration: Declaration
    assertion: DataPropertyAssertion
    class_assertion: ClassAssertion


def make_punning_scenario() -> PunningScenario:
    class_declaration = Declaration(owl_class("A"))
    individual_declaration = Declaration(individual("A"))
    property_declaration = Declaration(data_property("hasX"))
    assertion = DataPropertyAssertion(data_property("hasX"), individual("A"), literal("v"))
    class_assertion = ClassAssertion(owl_class("A"), individual("A"))
    return PunningScenario(
        container=container(
            class_declaration,
            individual_declaration,
            property_declaration,
            assertion,
            class_assertion,
            name="scenario",
        ),
        class_declaration=class_declaration,
        individual_declaration=individual_declaration,
        property_declaration=property_declaration,
        assertion=assertion,
        class_assertion=class_assertion,
    )


class ContractOnlyContainer:
    """Read-only container with exactly the base port and no imports support."""

    def __init__(self, *statements: Statement) -> None:
        self._statements = statements

    def statements_of(self, kind: StatementKind, anchor: Term) -> tuple[Statement, ...]:
        return tuple(
            statement
            for statement in self._statements
            if statement.kind is kind and anchor in statement.operands()
        )

    def signature_individuals(self) -> tuple[NamedIndividual, ...]:
        individuals = (
            entity
            for statement in self._statements
            for entity in statement.signature()
            if isinstance(entity, NamedIndividual)
        )
        return tuple(dict.fromkeys(individuals))

    def contains_class(self, iri: str) -> bool:
        return any(OWLClass(iri) in statement.signature() for statement in self._statements)

    def referencing_statements(self, entity: Entity, imports: Imports) -> tuple[Statement, ...]:
        return tuple(
            statement for statement in self._statements if entity in statement.signature()
        )
