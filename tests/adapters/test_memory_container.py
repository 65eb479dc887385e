from __future__ import annotations

import pytest

from ontosearch.adapters.memory import InMemoryContainer
from ontosearch.domain.errors import InvalidArgumentError
from ontosearch.domain.model import (
    ClassAssertion,
    Declaration,
    Imports,
    StatementKind,
    SubClassOf,
)
from ontosearch.domain.ports import MutableStatementContainer, StatementContainer
from tests.helpers.statements import container, individual, iri, owl_class


def test_satisfies_container_ports() -> None:
    store = InMemoryContainer()

    assert isinstance(store, StatementContainer)
    assert isinstance(store, MutableStatementContainer)


def test_add_and_remove_are_idempotent() -> None:
    store = container()
    statement = Declaration(owl_class("A"))

    assert store.add_statement(statement) is True
    assert store.add_statement(statement) is False
    assert len(store) == 1
    assert store.remove_statement(statement) is True
    assert store.remove_statement(statement) is False
    assert len(store) == 0


def test_statements_are_indexed_by_every_operand() -> None:
    statement = SubClassOf(owl_class("A"), owl_class("B"))
    store = container(statement)

    assert store.statements_of(StatementKind.SUB_CLASS_OF, owl_class("A")) == (statement,)
    assert store.statements_of(StatementKind.SUB_CLASS_OF, owl_class("B")) == (statement,)
    assert store.statements_of(StatementKind.DISJOINT_CLASSES, owl_class("A")) == ()


def test_slices_are_snapshots() -> None:
    statement = SubClassOf(owl_class("A"), owl_class("B"))
    store = container(statement)

    snapshot = store.statements_of(StatementKind.SUB_CLASS_OF, owl_class("A"))
    store.remove_statement(statement)

    assert snapshot == (statement,)
    assert store.statements_of(StatementKind.SUB_CLASS_OF, owl_class("A")) == ()


def test_signature_lookups() -> None:
    store = container(
        ClassAssertion(owl_class("Person"), individual("bob")),
        Declaration(individual("alice")),
        Declaration(individual("bob")),
    )

    assert store.signature_individuals() == (individual("bob"), individual("alice"))
    assert store.contains_class(iri("Person"))
    assert not store.contains_class(iri("alice"))


def test_removal_clears_signature() -> None:
    statement = SubClassOf(owl_class("A"), owl_class("B"))
    store = container(statement)

    store.remove_statement(statement)

    assert not store.contains_class(iri("A"))
    assert store.referencing_statements(owl_class("A")) == ()


def test_imports_closure_is_breadth_first_and_cycle_safe() -> None:
    leaf = container(name="leaf")
    middle = container(name="middle", imports=[leaf])
    root = container(name="root", imports=[middle, leaf])
    leaf.add_import(root)

    assert root.imports_closure() == (root, middle, leaf)
    assert leaf.imports_closure() == (leaf, root, middle)


def test_referencing_statements_follow_imports() -> None:
    imported_statement = SubClassOf(owl_class("B"), owl_class("A"))
    imported = container(imported_statement)
    local_statement = Declaration(owl_class("A"))
    store = container(local_statement, imports=[imported])

    assert store.referencing_statements(owl_class("A"), Imports.EXCLUDED) == (local_statement,)
    assert store.referencing_statements(owl_class("A"), Imports.INCLUDED) == (
        local_statement,
        imported_statement,
    )


def test_invalid_edits_raise() -> None:
    store = container()

    with pytest.raises(InvalidArgumentError):
        store.add_statement(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        store.add_import(None)  # type: ignore[arg-type]
