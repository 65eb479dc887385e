from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from ontosearch.adapters.document import (
    DocumentError,
    build_containers,
    load_containers,
    read_document,
)
from ontosearch.domain.model import (
    RDF_LANG_STRING,
    Annotation,
    AnnotationAssertion,
    ClassAssertion,
    DataPropertyAssertion,
    Declaration,
    EquivalentClasses,
    Literal,
    ObjectInverseOf,
    ObjectSomeValuesFrom,
    SubClassOf,
)
from tests.helpers.statements import (
    annotation_property,
    data_property,
    individual,
    iri,
    literal,
    object_property,
    owl_class,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def _entity(kind: str, name: str) -> dict[str, str]:
    return {"type": kind, "iri": iri(name)}


SCENARIO = {
    "iri": iri("scenario"),
    "statements": [
        {"kind": "declaration", "operands": [_entity("class", "A")]},
        {"kind": "declaration", "operands": [_entity("individual", "A")]},
        {"kind": "declaration", "operands": [_entity("data_property", "hasX")]},
        {
            "kind": "data_property_assertion",
            "operands": [
                _entity("data_property", "hasX"),
                _entity("individual", "A"),
                {"type": "literal", "value": "v"},
            ],
        },
        {
            "kind": "class_assertion",
            "operands": [_entity("class", "A"), _entity("individual", "A")],
        },
    ],
}


def test_scenario_document_translates_in_order() -> None:
    (store,) = build_containers([SCENARIO])

    assert store.iri == iri("scenario")
    assert store.statements() == (
        Declaration(owl_class("A")),
        Declaration(individual("A")),
        Declaration(data_property("hasX")),
        DataPropertyAssertion(data_property("hasX"), individual("A"), literal("v")),
        ClassAssertion(owl_class("A"), individual("A")),
    )


def test_nested_expressions_and_nary_statements() -> None:
    (store,) = build_containers(
        [
            {
                "statements": [
                    {
                        "kind": "sub_class_of",
                        "operands": [
                            _entity("class", "A"),
                            {
                                "type": "some_values_from",
                                "operands": [
                                    {
                                        "type": "inverse_of",
                                        "operands": [_entity("object_property", "p")],
                                    },
                                    _entity("class", "B"),
                                ],
                            },
                        ],
                    },
                    {
                        "kind": "equivalent_classes",
                        "operands": [
                            _entity("class", "A"),
                            _entity("class", "B"),
                            _entity("class", "C"),
                        ],
                    },
                ]
            }
        ]
    )

    assert store.statements() == (
        SubClassOf(
            owl_class("A"),
            ObjectSomeValuesFrom(ObjectInverseOf(object_property("p")), owl_class("B")),
        ),
        EquivalentClasses((owl_class("A"), owl_class("B"), owl_class("C"))),
    )


def test_annotations_and_language_literals() -> None:
    (store,) = build_containers(
        [
            {
                "statements": [
                    {
                        "kind": "annotation_assertion",
                        "operands": [
                            _entity("annotation_property", "label"),
                            {"type": "iri", "iri": iri("A")},
                            {"type": "literal", "value": "chat", "lang": "fr"},
                        ],
                        "annotations": [
                            {
                                "property": iri("source"),
                                "value": {"type": "iri", "iri": iri("dictionary")},
                            }
                        ],
                    }
                ]
            }
        ]
    )

    assert store.statements() == (
        AnnotationAssertion(
            annotation_property("label"),
            iri("A"),
            Literal("chat", RDF_LANG_STRING, "fr"),
            annotations=frozenset({Annotation(annotation_property("source"), iri("dictionary"))}),
        ),
    )


def test_imports_are_resolved_between_documents() -> None:
    base, extension = build_containers(
        [
            {"iri": iri("base"), "statements": []},
            {"iri": iri("extension"), "imports": [iri("base")], "statements": []},
        ]
    )

    assert extension.imports_closure() == (extension, base)
    assert base.imports_closure() == (base,)


@pytest.mark.parametrize(
    ("documents", "message"),
    [
        ([{"imports": [iri("missing")]}], "Unknown import"),
        ([{"iri": iri("same")}, {"iri": iri("same")}], "Duplicate document iri"),
        (
            [{"statements": [{"kind": "sub_class_of", "operands": [_entity("class", "A")]}]}],
            "expects 2 operand",
        ),
        (
            [
                {
                    "statements": [
                        {
                            "kind": "declaration",
                            "operands": [
                                {"type": "inverse_of", "operands": [_entity("class", "A")]}
                            ],
                        }
                    ]
                }
            ],
            "inverse_of expects an object property",
        ),
        (
            [
                {
                    "statements": [
                        {
                            "kind": "declaration",
                            "operands": [_entity("class", "A")],
                            "annotations": [
                                {"property": iri("p"), "value": _entity("class", "B")}
                            ],
                        }
                    ]
                }
            ],
            "Annotation values",
        ),
        (
            [{"statements": [{"kind": "declaration", "operands": [_entity("class", "  ")]}]}],
            "statement 0",
        ),
    ],
)
def test_structural_problems_raise_document_error(
    documents: list[dict[str, object]], message: str
) -> None:
    with pytest.raises(DocumentError, match=message):
        build_containers(documents)


def test_documents_load_from_files(
    write_document: Callable[[str, dict[str, object]], Path],
) -> None:
    path = write_document("scenario", SCENARIO)

    assert read_document(path).iri == iri("scenario")
    (store,) = load_containers([path])
    assert len(store) == 5


def test_malformed_json_raises_validation_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"statements": [{"kind": 1}]}', encoding="utf-8")

    with pytest.raises(ValidationError):
        read_document(path)
