"""Public domain model surface."""

from __future__ import annotations

from ontosearch.domain.model.enums import AnnotationMode, EntityKind, Imports, StatementKind
from ontosearch.domain.model.factory import DefaultStatementFactory
from ontosearch.domain.model.statements import (
    STATEMENT_TYPES,
    AnnotationAssertion,
    AnnotationPropertyDomain,
    AnnotationPropertyRange,
    AsymmetricObjectProperty,
    ClassAssertion,
    DataPropertyAssertion,
    DataPropertyDomain,
    DataPropertyRange,
    Declaration,
    DifferentIndividuals,
    DisjointClasses,
    DisjointDataProperties,
    DisjointObjectProperties,
    EquivalentClasses,
    EquivalentDataProperties,
    EquivalentObjectProperties,
    FunctionalDataProperty,
    FunctionalObjectProperty,
    InverseFunctionalObjectProperty,
    InverseObjectProperties,
    IrreflexiveObjectProperty,
    NegativeDataPropertyAssertion,
    NegativeObjectPropertyAssertion,
    ObjectPropertyAssertion,
    ObjectPropertyDomain,
    ObjectPropertyRange,
    PropertyAssertionStatement,
    PropertyCharacteristicStatement,
    ReflexiveObjectProperty,
    SameIndividual,
    Statement,
    SubAnnotationPropertyOf,
    SubClassOf,
    SubDataPropertyOf,
    SubObjectPropertyOf,
    SymmetricObjectProperty,
    TransitiveObjectProperty,
)
from ontosearch.domain.model.terms import (
    ENTITY_TYPES,
    IRI,
    RDF_LANG_STRING,
    XSD_STRING,
    Annotation,
    AnnotationProperty,
    AnnotationSubject,
    AnnotationValue,
    AnonymousDataProperty,
    AnonymousIndividual,
    ClassExpression,
    DataProperty,
    DataPropertyExpression,
    DataRange,
    Datatype,
    Entity,
    Expression,
    Individual,
    Literal,
    NamedIndividual,
    ObjectAllValuesFrom,
    ObjectComplementOf,
    ObjectIntersectionOf,
    ObjectInverseOf,
    ObjectProperty,
    ObjectPropertyExpression,
    ObjectSomeValuesFrom,
    ObjectUnionOf,
    OWLClass,
    PropertyExpression,
    Term,
    make_entity,
    require_iri,
    term_signature,
)

__all__ = [  # noqa: RUF022
    # enums
    "AnnotationMode",
    "EntityKind",
    "Imports",
    "StatementKind",
    # identifiers and entities
    "IRI",
    "Entity",
    "OWLClass",
    "ObjectProperty",
    "DataProperty",
    "AnnotationProperty",
    "NamedIndividual",
    "Datatype",
    "ENTITY_TYPES",
    "make_entity",
    "require_iri",
    # expressions
    "Expression",
    "AnonymousIndividual",
    "AnonymousDataProperty",
    "ObjectInverseOf",
    "ObjectIntersectionOf",
    "ObjectUnionOf",
    "ObjectComplementOf",
    "ObjectSomeValuesFrom",
    "ObjectAllValuesFrom",
    # values
    "Literal",
    "XSD_STRING",
    "RDF_LANG_STRING",
    "Annotation",
    # aliases
    "AnnotationSubject",
    "AnnotationValue",
    "ClassExpression",
    "DataPropertyExpression",
    "DataRange",
    "Individual",
    "ObjectPropertyExpression",
    "PropertyExpression",
    "Term",
    "term_signature",
    # statements
    "STATEMENT_TYPES",
    "Statement",
    "PropertyAssertionStatement",
    "PropertyCharacteristicStatement",
    "Declaration",
    "SubClassOf",
    "EquivalentClasses",
    "DisjointClasses",
    "SubObjectPropertyOf",
    "SubDataPropertyOf",
    "SubAnnotationPropertyOf",
    "EquivalentObjectProperties",
    "EquivalentDataProperties",
    "DisjointObjectProperties",
    "DisjointDataProperties",
    "InverseObjectProperties",
    "TransitiveObjectProperty",
    "SymmetricObjectProperty",
    "AsymmetricObjectProperty",
    "ReflexiveObjectProperty",
    "IrreflexiveObjectProperty",
    "FunctionalObjectProperty",
    "InverseFunctionalObjectProperty",
    "FunctionalDataProperty",
    "ObjectPropertyDomain",
    "ObjectPropertyRange",
    "DataPropertyDomain",
    "DataPropertyRange",
    "AnnotationPropertyDomain",
    "AnnotationPropertyRange",
    "ClassAssertion",
    "ObjectPropertyAssertion",
    "DataPropertyAssertion",
    "NegativeObjectPropertyAssertion",
    "NegativeDataPropertyAssertion",
    "AnnotationAssertion",
    "SameIndividual",
    "DifferentIndividuals",
    # factory
    "DefaultStatementFactory",
]
