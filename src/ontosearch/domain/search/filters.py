"""Typed statement filters.

A filter pairs a statement kind with:
- ``matches``: does the anchor occupy the expected role in the statement
- ``counterparts``: the operand(s) on the other side of that role

Containers hand out per-kind, per-anchor slices in which the anchor may sit in
any role, so every slice is narrowed through ``matches`` before extraction.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING, Any

from ontosearch.domain.model import StatementKind

if TYPE_CHECKING:
    from ontosearch.domain.model import Statement, Term
    from ontosearch.domain.ports import StatementContainer


@dataclass(frozen=True, slots=True)
class StatementFilter[S: Statement, R]:
    name: str
    kind: StatementKind
    matches: Callable[[S, Term], bool]
    counterparts: Callable[[S, Term], Iterable[R]]

    def select(self, statements: Iterable[Statement], anchor: Term) -> Iterator[R]:
        for statement in statements:
            if statement.kind is not self.kind:
                continue
            typed: Any = statement
            if self.matches(typed, anchor):
                yield from self.counterparts(typed, anchor)


def search[R](
    container: StatementContainer,
    statement_filter: StatementFilter[Any, R],
    anchor: Term,
) -> Iterator[R]:
    """Counterparts of every statement in ``container`` that ``statement_filter`` accepts."""

    return statement_filter.select(container.statements_of(statement_filter.kind, anchor), anchor)


def _role(kind: StatementKind, name: str, *, anchor: str, counterpart: str) -> StatementFilter:
    anchor_of = attrgetter(anchor)
    counterpart_of = attrgetter(counterpart)
    return StatementFilter(
        name=name,
        kind=kind,
        matches=lambda statement, term: anchor_of(statement) == term,
        counterparts=lambda statement, _term: (counterpart_of(statement),),
    )


def _group(kind: StatementKind, name: str, *, members: str) -> StatementFilter:
    """Group statements: every member other than the anchor is a counterpart."""

    members_of = attrgetter(members)
    return StatementFilter(
        name=name,
        kind=kind,
        matches=lambda statement, term: term in members_of(statement),
        counterparts=lambda statement, term: (m for m in members_of(statement) if m != term),
    )


def _statement(kind: StatementKind, name: str, *, anchor: str) -> StatementFilter:
    """Yield the statement itself when the anchor sits at ``anchor``."""

    anchor_of = attrgetter(anchor)
    return StatementFilter(
        name=name,
        kind=kind,
        matches=lambda statement, term: anchor_of(statement) == term,
        counterparts=lambda statement, _term: (statement,),
    )


def _inverse_counterparts(statement: Any, term: Term) -> Iterator[Term]:
    yield statement.second if statement.first == term else statement.first


# class hierarchy
SUB_CLASS_WITH_SUB = _role(
    StatementKind.SUB_CLASS_OF, "sub_class_with_sub", anchor="sub_class", counterpart="super_class"
)
SUB_CLASS_WITH_SUPER = _role(
    StatementKind.SUB_CLASS_OF,
    "sub_class_with_super",
    anchor="super_class",
    counterpart="sub_class",
)
EQUIVALENT_CLASSES = _group(
    StatementKind.EQUIVALENT_CLASSES, "equivalent_classes", members="class_expressions"
)
DISJOINT_CLASSES = _group(
    StatementKind.DISJOINT_CLASSES, "disjoint_classes", members="class_expressions"
)
CLASS_DEFINITION = StatementFilter(
    name="class_definition",
    kind=StatementKind.EQUIVALENT_CLASSES,
    matches=lambda statement, term: term in statement.class_expressions,
    counterparts=lambda statement, _term: (statement,),
)

# property hierarchies
SUB_OBJECT_PROPERTY_WITH_SUB = _role(
    StatementKind.SUB_OBJECT_PROPERTY_OF,
    "sub_object_property_with_sub",
    anchor="sub_property",
    counterpart="super_property",
)
SUB_OBJECT_PROPERTY_WITH_SUPER = _role(
    StatementKind.SUB_OBJECT_PROPERTY_OF,
    "sub_object_property_with_super",
    anchor="super_property",
    counterpart="sub_property",
)
SUB_DATA_PROPERTY_WITH_SUB = _role(
    StatementKind.SUB_DATA_PROPERTY_OF,
    "sub_data_property_with_sub",
    anchor="sub_property",
    counterpart="super_property",
)
SUB_DATA_PROPERTY_WITH_SUPER = _role(
    StatementKind.SUB_DATA_PROPERTY_OF,
    "sub_data_property_with_super",
    anchor="super_property",
    counterpart="sub_property",
)
SUB_ANNOTATION_PROPERTY_WITH_SUB = _role(
    StatementKind.SUB_ANNOTATION_PROPERTY_OF,
    "sub_annotation_property_with_sub",
    anchor="sub_property",
    counterpart="super_property",
)
SUB_ANNOTATION_PROPERTY_WITH_SUPER = _role(
    StatementKind.SUB_ANNOTATION_PROPERTY_OF,
    "sub_annotation_property_with_super",
    anchor="super_property",
    counterpart="sub_property",
)
EQUIVALENT_OBJECT_PROPERTIES = _group(
    StatementKind.EQUIVALENT_OBJECT_PROPERTIES, "equivalent_object_properties", members="properties"
)
EQUIVALENT_DATA_PROPERTIES = _group(
    StatementKind.EQUIVALENT_DATA_PROPERTIES, "equivalent_data_properties", members="properties"
)
DISJOINT_OBJECT_PROPERTIES = _group(
    StatementKind.DISJOINT_OBJECT_PROPERTIES, "disjoint_object_properties", members="properties"
)
DISJOINT_DATA_PROPERTIES = _group(
    StatementKind.DISJOINT_DATA_PROPERTIES, "disjoint_data_properties", members="properties"
)
INVERSE_OBJECT_PROPERTIES = StatementFilter(
    name="inverse_object_properties",
    kind=StatementKind.INVERSE_OBJECT_PROPERTIES,
    matches=lambda statement, term: term in (statement.first, statement.second),
    counterparts=_inverse_counterparts,
)

# property characteristics
TRANSITIVE_OBJECT_PROPERTY = _statement(
    StatementKind.TRANSITIVE_OBJECT_PROPERTY, "transitive_object_property", anchor="property"
)
SYMMETRIC_OBJECT_PROPERTY = _statement(
    StatementKind.SYMMETRIC_OBJECT_PROPERTY, "symmetric_object_property", anchor="property"
)
ASYMMETRIC_OBJECT_PROPERTY = _statement(
    StatementKind.ASYMMETRIC_OBJECT_PROPERTY, "asymmetric_object_property", anchor="property"
)
REFLEXIVE_OBJECT_PROPERTY = _statement(
    StatementKind.REFLEXIVE_OBJECT_PROPERTY, "reflexive_object_property", anchor="property"
)
IRREFLEXIVE_OBJECT_PROPERTY = _statement(
    StatementKind.IRREFLEXIVE_OBJECT_PROPERTY, "irreflexive_object_property", anchor="property"
)
FUNCTIONAL_OBJECT_PROPERTY = _statement(
    StatementKind.FUNCTIONAL_OBJECT_PROPERTY, "functional_object_property", anchor="property"
)
INVERSE_FUNCTIONAL_OBJECT_PROPERTY = _statement(
    StatementKind.INVERSE_FUNCTIONAL_OBJECT_PROPERTY,
    "inverse_functional_object_property",
    anchor="property",
)
FUNCTIONAL_DATA_PROPERTY = _statement(
    StatementKind.FUNCTIONAL_DATA_PROPERTY, "functional_data_property", anchor="property"
)

# domains and ranges
OBJECT_PROPERTY_DOMAIN = _role(
    StatementKind.OBJECT_PROPERTY_DOMAIN,
    "object_property_domain",
    anchor="property",
    counterpart="domain",
)
OBJECT_PROPERTY_RANGE = _role(
    StatementKind.OBJECT_PROPERTY_RANGE,
    "object_property_range",
    anchor="property",
    counterpart="range",
)
DATA_PROPERTY_DOMAIN = _role(
    StatementKind.DATA_PROPERTY_DOMAIN,
    "data_property_domain",
    anchor="property",
    counterpart="domain",
)
DATA_PROPERTY_RANGE = _role(
    StatementKind.DATA_PROPERTY_RANGE, "data_property_range", anchor="property", counterpart="range"
)
ANNOTATION_PROPERTY_DOMAIN = _role(
    StatementKind.ANNOTATION_PROPERTY_DOMAIN,
    "annotation_property_domain",
    anchor="property",
    counterpart="domain",
)
ANNOTATION_PROPERTY_RANGE = _role(
    StatementKind.ANNOTATION_PROPERTY_RANGE,
    "annotation_property_range",
    anchor="property",
    counterpart="range",
)

# individuals
CLASS_ASSERTION_WITH_CLASS = _role(
    StatementKind.CLASS_ASSERTION,
    "class_assertion_with_class",
    anchor="class_expression",
    counterpart="individual",
)
CLASS_ASSERTION_WITH_INDIVIDUAL = _role(
    StatementKind.CLASS_ASSERTION,
    "class_assertion_with_individual",
    anchor="individual",
    counterpart="class_expression",
)
CLASS_ASSERTION_STATEMENT = _statement(
    StatementKind.CLASS_ASSERTION, "class_assertion_statement", anchor="individual"
)
SAME_INDIVIDUAL = _group(StatementKind.SAME_INDIVIDUAL, "same_individual", members="individuals")
DIFFERENT_INDIVIDUALS = _group(
    StatementKind.DIFFERENT_INDIVIDUALS, "different_individuals", members="individuals"
)

# assertions keyed by subject
OBJECT_ASSERTION_WITH_SUBJECT = _statement(
    StatementKind.OBJECT_PROPERTY_ASSERTION, "object_assertion_with_subject", anchor="subject"
)
DATA_ASSERTION_WITH_SUBJECT = _statement(
    StatementKind.DATA_PROPERTY_ASSERTION, "data_assertion_with_subject", anchor="subject"
)
NEGATIVE_OBJECT_ASSERTION_WITH_SUBJECT = _statement(
    StatementKind.NEGATIVE_OBJECT_PROPERTY_ASSERTION,
    "negative_object_assertion_with_subject",
    anchor="subject",
)
NEGATIVE_DATA_ASSERTION_WITH_SUBJECT = _statement(
    StatementKind.NEGATIVE_DATA_PROPERTY_ASSERTION,
    "negative_data_assertion_with_subject",
    anchor="subject",
)
ANNOTATION_ASSERTION_WITH_SUBJECT = _statement(
    StatementKind.ANNOTATION_ASSERTION, "annotation_assertion_with_subject", anchor="subject"
)

DECLARATION = _statement(StatementKind.DECLARATION, "declaration", anchor="entity")
