"""Pydantic models describing JSON statement documents."""

from __future__ import annotations

from typing import Literal, Self, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ontosearch.domain.model import StatementKind

EntityTermType = Literal[
    "class",
    "object_property",
    "data_property",
    "annotation_property",
    "individual",
    "datatype",
]
ExpressionTermType = Literal[
    "inverse_of",
    "intersection_of",
    "union_of",
    "complement_of",
    "some_values_from",
    "all_values_from",
]
TermType = (
    EntityTermType
    | ExpressionTermType
    | Literal["iri", "anonymous_individual", "anonymous_data_property", "literal"]
)

ENTITY_TERM_TYPES: frozenset[str] = frozenset(get_args(EntityTermType))
EXPRESSION_TERM_TYPES: frozenset[str] = frozenset(get_args(ExpressionTermType))


class DocumentModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TermPayload(DocumentModel):
    type: TermType
    iri: str | None = None
    node_id: str | None = None
    value: str | None = None
    datatype: str | None = None
    lang: str | None = None
    operands: list[TermPayload] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_required_fields(self) -> Self:
        if (self.type in ENTITY_TERM_TYPES or self.type == "iri") and not self.iri:
            raise ValueError(f"{self.type} term requires 'iri'")
        if self.type in ("anonymous_individual", "anonymous_data_property") and not self.node_id:
            raise ValueError(f"{self.type} term requires 'node_id'")
        if self.type == "literal" and self.value is None:
            raise ValueError("literal term requires 'value'")
        if self.type in EXPRESSION_TERM_TYPES and not self.operands:
            raise ValueError(f"{self.type} term requires 'operands'")
        return self


class AnnotationPayload(DocumentModel):
    property: str
    value: TermPayload
    annotations: list[AnnotationPayload] = Field(default_factory=list)


class StatementPayload(DocumentModel):
    kind: StatementKind
    operands: list[TermPayload] = Field(min_length=1)
    annotations: list[AnnotationPayload] = Field(default_factory=list)


class StatementDocument(DocumentModel):
    iri: str | None = None
    imports: list[str] = Field(default_factory=list)
    statements: list[StatementPayload] = Field(default_factory=list)
