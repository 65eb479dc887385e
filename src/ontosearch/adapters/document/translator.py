"""Translate statement documents into in-memory containers.

Documents are validated by the pydantic schema first; translation then builds
domain terms and statements and wires ``imports`` between the containers of
one load. Structural problems pydantic cannot see (operand arity, unknown
imports, invalid identifiers) raise ``DocumentError``.
"""

from __future__ import annotations

from dataclasses import fields
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from ontosearch.adapters.memory import InMemoryContainer
from ontosearch.domain.errors import InvalidArgumentError, OntosearchError
from ontosearch.domain.model import (
    ENTITY_TYPES,
    RDF_LANG_STRING,
    STATEMENT_TYPES,
    XSD_STRING,
    Annotation,
    AnnotationProperty,
    AnonymousDataProperty,
    AnonymousIndividual,
    Literal,
    ObjectAllValuesFrom,
    ObjectComplementOf,
    ObjectIntersectionOf,
    ObjectInverseOf,
    ObjectProperty,
    ObjectSomeValuesFrom,
    ObjectUnionOf,
    StatementKind,
)

from .schema import StatementDocument

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from ontosearch.domain.model import Statement, Term

    from .schema import AnnotationPayload, StatementPayload, TermPayload


log = getLogger(__name__)


class DocumentError(OntosearchError, ValueError):
    """Raised when a validated document cannot be turned into statements."""


# statements whose single field holds every operand
_NARY_KINDS: Final = frozenset(
    {
        StatementKind.EQUIVALENT_CLASSES,
        StatementKind.DISJOINT_CLASSES,
        StatementKind.EQUIVALENT_OBJECT_PROPERTIES,
        StatementKind.EQUIVALENT_DATA_PROPERTIES,
        StatementKind.DISJOINT_OBJECT_PROPERTIES,
        StatementKind.DISJOINT_DATA_PROPERTIES,
        StatementKind.SAME_INDIVIDUAL,
        StatementKind.DIFFERENT_INDIVIDUALS,
    }
)


def _arity(payload: TermPayload, expected: int) -> list[TermPayload]:
    if len(payload.operands) != expected:
        raise DocumentError(
            f"{payload.type} expects {expected} operand(s), got {len(payload.operands)}"
        )
    return payload.operands


def to_term(payload: TermPayload) -> Term:  # noqa: PLR0911
    entity_type = ENTITY_TYPES.get(payload.type)
    if entity_type is not None:
        return entity_type(payload.iri or "")

    match payload.type:
        case "iri":
            return payload.iri or ""
        case "anonymous_individual":
            return AnonymousIndividual(payload.node_id or "")
        case "anonymous_data_property":
            return AnonymousDataProperty(payload.node_id or "")
        case "literal":
            return _to_literal(payload)
        case "inverse_of":
            (operand,) = _arity(payload, 1)
            inverted = to_term(operand)
            if not isinstance(inverted, ObjectProperty):
                raise DocumentError(f"inverse_of expects an object property, got {inverted}")
            return ObjectInverseOf(inverted)
        case "intersection_of":
            members = tuple(to_term(operand) for operand in payload.operands)
            return ObjectIntersectionOf(members)  # type: ignore[arg-type]
        case "union_of":
            members = tuple(to_term(operand) for operand in payload.operands)
            return ObjectUnionOf(members)  # type: ignore[arg-type]
        case "complement_of":
            (operand,) = _arity(payload, 1)
            return ObjectComplementOf(to_term(operand))  # type: ignore[arg-type]
        case "some_values_from" | "all_values_from":
            prop, filler = (to_term(operand) for operand in _arity(payload, 2))
            if payload.type == "some_values_from":
                return ObjectSomeValuesFrom(prop, filler)  # type: ignore[arg-type]
            return ObjectAllValuesFrom(prop, filler)  # type: ignore[arg-type]
    raise DocumentError(f"Unsupported term type {payload.type!r}")


def _to_literal(payload: TermPayload) -> Literal:
    datatype = payload.datatype or (RDF_LANG_STRING if payload.lang else XSD_STRING)
    return Literal(payload.value or "", datatype, payload.lang)


def to_annotation(payload: AnnotationPayload) -> Annotation:
    value = to_term(payload.value)
    if not isinstance(value, (str, Literal, AnonymousIndividual)):
        raise DocumentError(
            f"Annotation values must be IRIs, literals or anonymous individuals, got {value}"
        )
    return Annotation(
        AnnotationProperty(payload.property),
        value,
        frozenset(to_annotation(nested) for nested in payload.annotations),
    )


def to_statement(payload: StatementPayload) -> Statement:
    statement_type = STATEMENT_TYPES[payload.kind]
    operands = [to_term(operand) for operand in payload.operands]
    annotations = frozenset(to_annotation(annotation) for annotation in payload.annotations)
    if payload.kind in _NARY_KINDS:
        return statement_type(tuple(operands), annotations=annotations)  # type: ignore[call-arg]

    expected = len(fields(statement_type)) - 1
    if len(operands) != expected:
        raise DocumentError(f"{payload.kind} expects {expected} operand(s), got {len(operands)}")
    return statement_type(*operands, annotations=annotations)  # type: ignore[call-arg]


def read_document(path: Path | str) -> StatementDocument:
    return StatementDocument.model_validate_json(Path(path).read_text(encoding="utf-8"))


def parse_document(raw: Mapping[str, object] | StatementDocument) -> StatementDocument:
    if isinstance(raw, StatementDocument):
        return raw
    return StatementDocument.model_validate(raw)


def _container_for(document: StatementDocument, position: int) -> InMemoryContainer:
    container = InMemoryContainer(iri=document.iri)
    for index, payload in enumerate(document.statements):
        try:
            container.add_statement(to_statement(payload))
        except (InvalidArgumentError, DocumentError) as exc:
            raise DocumentError(f"document {position}, statement {index}: {exc}") from exc
    return container


def build_containers(
    documents: Sequence[StatementDocument | Mapping[str, object]],
) -> tuple[InMemoryContainer, ...]:
    """One container per document, in order, with imports resolved among them."""

    parsed = [parse_document(document) for document in documents]
    containers = tuple(
        _container_for(document, position) for position, document in enumerate(parsed)
    )

    by_iri: dict[str, InMemoryContainer] = {}
    for container in containers:
        if container.iri is None:
            continue
        if container.iri in by_iri:
            raise DocumentError(f"Duplicate document iri {container.iri!r}")
        by_iri[container.iri] = container

    for document, container in zip(parsed, containers, strict=True):
        for imported_iri in document.imports:
            imported = by_iri.get(imported_iri)
            if imported is None:
                raise DocumentError(
                    f"Unknown import {imported_iri!r} in {container.iri or 'document'}"
                )
            container.add_import(imported)

    log.info(
        "Loaded %d container(s) with %d statement(s)",
        len(containers),
        sum(len(container) for container in containers),
    )
    return containers


def load_containers(paths: Iterable[Path | str]) -> tuple[InMemoryContainer, ...]:
    return build_containers([read_document(path) for path in paths])
