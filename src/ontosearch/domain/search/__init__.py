"""Query facade over statement containers."""

from __future__ import annotations

from .aggregate import ContainerSource, containers_of
from .assertions import (
    ValueRelation,
    data_property_values,
    grouped_data_property_values,
    grouped_negative_data_property_values,
    grouped_negative_object_property_values,
    grouped_object_property_values,
    has_data_property_value,
    has_data_property_values,
    has_negative_data_property_value,
    has_negative_data_property_values,
    has_negative_object_property_value,
    has_negative_object_property_values,
    has_object_property_value,
    has_object_property_values,
    negative_data_property_values,
    negative_object_property_values,
    negative_property_values,
    object_property_values,
    property_values,
)
from .characteristics import (
    Characteristic,
    has_characteristic,
    is_asymmetric,
    is_defined,
    is_functional,
    is_inverse_functional,
    is_irreflexive,
    is_reflexive,
    is_symmetric,
    is_transitive,
)
from .containment import contains_statement, statements_ignoring_annotations
from .filters import StatementFilter, search
from .searcher import (
    Relation,
    annotation_assertions,
    annotations,
    declarations,
    different_individuals,
    disjoint_classes,
    disjoint_properties,
    domains,
    equivalent_classes,
    equivalent_properties,
    instances,
    inverses,
    query,
    ranges,
    referencing_statements,
    same_individuals,
    sub_classes,
    sub_properties,
    super_classes,
    super_properties,
    supports,
    types,
)
from .values import PropertyValues

__all__ = [  # noqa: RUF022
    # composition
    "ContainerSource",
    "containers_of",
    "StatementFilter",
    "search",
    # relations
    "Relation",
    "query",
    "supports",
    "super_classes",
    "sub_classes",
    "equivalent_classes",
    "disjoint_classes",
    "super_properties",
    "sub_properties",
    "equivalent_properties",
    "disjoint_properties",
    "inverses",
    "domains",
    "ranges",
    "same_individuals",
    "different_individuals",
    "instances",
    "types",
    "annotations",
    "annotation_assertions",
    "declarations",
    "referencing_statements",
    # characteristics
    "Characteristic",
    "has_characteristic",
    "is_transitive",
    "is_symmetric",
    "is_asymmetric",
    "is_reflexive",
    "is_irreflexive",
    "is_functional",
    "is_inverse_functional",
    "is_defined",
    # containment
    "contains_statement",
    "statements_ignoring_annotations",
    # property values
    "PropertyValues",
    "ValueRelation",
    "property_values",
    "negative_property_values",
    "data_property_values",
    "object_property_values",
    "negative_data_property_values",
    "negative_object_property_values",
    "has_data_property_values",
    "has_data_property_value",
    "has_object_property_values",
    "has_object_property_value",
    "has_negative_data_property_values",
    "has_negative_data_property_value",
    "has_negative_object_property_values",
    "has_negative_object_property_value",
    "grouped_data_property_values",
    "grouped_object_property_values",
    "grouped_negative_data_property_values",
    "grouped_negative_object_property_values",
]
