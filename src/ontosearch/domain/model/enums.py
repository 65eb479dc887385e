"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Variant discriminator for entities and the expressions standing in for them."""

    CLASS = "class"
    OBJECT_PROPERTY = "object_property"
    DATA_PROPERTY = "data_property"
    ANNOTATION_PROPERTY = "annotation_property"
    INDIVIDUAL = "individual"
    DATATYPE = "datatype"


class StatementKind(StrEnum):
    DECLARATION = "declaration"

    # class axioms
    SUB_CLASS_OF = "sub_class_of"
    EQUIVALENT_CLASSES = "equivalent_classes"
    DISJOINT_CLASSES = "disjoint_classes"

    # property hierarchy
    SUB_OBJECT_PROPERTY_OF = "sub_object_property_of"
    SUB_DATA_PROPERTY_OF = "sub_data_property_of"
    SUB_ANNOTATION_PROPERTY_OF = "sub_annotation_property_of"
    EQUIVALENT_OBJECT_PROPERTIES = "equivalent_object_properties"
    EQUIVALENT_DATA_PROPERTIES = "equivalent_data_properties"
    DISJOINT_OBJECT_PROPERTIES = "disjoint_object_properties"
    DISJOINT_DATA_PROPERTIES = "disjoint_data_properties"
    INVERSE_OBJECT_PROPERTIES = "inverse_object_properties"

    # property characteristics
    TRANSITIVE_OBJECT_PROPERTY = "transitive_object_property"
    SYMMETRIC_OBJECT_PROPERTY = "symmetric_object_property"
    ASYMMETRIC_OBJECT_PROPERTY = "asymmetric_object_property"
    REFLEXIVE_OBJECT_PROPERTY = "reflexive_object_property"
    IRREFLEXIVE_OBJECT_PROPERTY = "irreflexive_object_property"
    FUNCTIONAL_OBJECT_PROPERTY = "functional_object_property"
    INVERSE_FUNCTIONAL_OBJECT_PROPERTY = "inverse_functional_object_property"
    FUNCTIONAL_DATA_PROPERTY = "functional_data_property"

    # domains and ranges
    OBJECT_PROPERTY_DOMAIN = "object_property_domain"
    OBJECT_PROPERTY_RANGE = "object_property_range"
    DATA_PROPERTY_DOMAIN = "data_property_domain"
    DATA_PROPERTY_RANGE = "data_property_range"
    ANNOTATION_PROPERTY_DOMAIN = "annotation_property_domain"
    ANNOTATION_PROPERTY_RANGE = "annotation_property_range"

    # assertions
    CLASS_ASSERTION = "class_assertion"
    OBJECT_PROPERTY_ASSERTION = "object_property_assertion"
    DATA_PROPERTY_ASSERTION = "data_property_assertion"
    NEGATIVE_OBJECT_PROPERTY_ASSERTION = "negative_object_property_assertion"
    NEGATIVE_DATA_PROPERTY_ASSERTION = "negative_data_property_assertion"
    ANNOTATION_ASSERTION = "annotation_assertion"
    SAME_INDIVIDUAL = "same_individual"
    DIFFERENT_INDIVIDUALS = "different_individuals"


class AnnotationMode(StrEnum):
    """How statement equality treats attached annotations."""

    CONSIDER = "consider_annotations"
    IGNORE = "ignore_annotations"


class Imports(StrEnum):
    """Whether a lookup walks the imports closure of a container."""

    INCLUDED = "included"
    EXCLUDED = "excluded"

    @classmethod
    def from_bool(cls, include: bool) -> Imports:  # noqa: FBT001
        return cls.INCLUDED if include else cls.EXCLUDED
