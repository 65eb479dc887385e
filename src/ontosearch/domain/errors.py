"""Domain error definitions."""

from __future__ import annotations


class OntosearchError(Exception):
    """Base class for errors raised by the query and planning layers."""


class InvalidArgumentError(OntosearchError, ValueError):
    """Raised when a required entity, container or statement argument is missing."""


class UnsupportedQueryError(OntosearchError, TypeError):
    """Raised when a relation is asked of an entity variant it is not defined for."""

    def __init__(self, relation: object, entity_kind: object) -> None:
        self.relation = relation
        self.entity_kind = entity_kind
        super().__init__(f"Relation {relation} is not defined for {entity_kind} terms")
