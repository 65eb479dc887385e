from __future__ import annotations

import logging

import pytest

from ontosearch.domain.errors import InvalidArgumentError
from ontosearch.domain.model import (
    AnnotationAssertion,
    AnonymousDataProperty,
    DataPropertyAssertion,
    DataPropertyDomain,
    Declaration,
    DefaultStatementFactory,
)
from ontosearch.domain.punning import (
    AddStatement,
    PlannerState,
    PunnedAssertionConverter,
    RemoveStatement,
    apply_edit_script,
    plan_annotation_conversion,
)
from tests.helpers.statements import (
    PunningScenario,
    annotation_property,
    container,
    data_property,
    individual,
    iri,
    literal,
    owl_class,
)


def _converted(value: str, subject: str = "A", prop: str = "hasX") -> AnnotationAssertion:
    return AnnotationAssertion(annotation_property(prop), iri(subject), literal(value))


def test_scenario_produces_ordered_edit_script(punning_scenario: PunningScenario) -> None:
    store = punning_scenario.container

    converter = PunnedAssertionConverter(DefaultStatementFactory(), [store])

    assert converter.changes == (
        RemoveStatement(store, punning_scenario.assertion),
        AddStatement(store, _converted("v")),
        RemoveStatement(store, punning_scenario.property_declaration),
        RemoveStatement(store, punning_scenario.individual_declaration),
        RemoveStatement(store, punning_scenario.class_assertion),
    )
    assert converter.state is PlannerState.PLANNED
    assert converter.punned_individuals == (individual("A"),)


def test_planning_does_not_mutate(punning_scenario: PunningScenario) -> None:
    before = punning_scenario.container.statements()

    plan_annotation_conversion(DefaultStatementFactory(), punning_scenario.container)

    assert punning_scenario.container.statements() == before


def test_property_removal_reaches_other_individuals() -> None:
    # retiring hasX drops every statement that mentions it, punned or not
    other_assertion = DataPropertyAssertion(data_property("hasX"), individual("B"), literal("w"))
    domain = DataPropertyDomain(data_property("hasX"), owl_class("Thing"))
    store = container(
        Declaration(owl_class("A")),
        DataPropertyAssertion(data_property("hasX"), individual("A"), literal("v")),
        other_assertion,
        domain,
    )

    script = plan_annotation_conversion(DefaultStatementFactory(), store)

    assert RemoveStatement(store, other_assertion) in script.removals()
    assert RemoveStatement(store, domain) in script.removals()
    assert script.additions() == (AddStatement(store, _converted("v")),)
    assert _converted("w", subject="B") not in {change.statement for change in script}


def test_removals_are_not_planned_twice() -> None:
    first = DataPropertyAssertion(data_property("hasX"), individual("A"), literal("v1"))
    second = DataPropertyAssertion(data_property("hasX"), individual("A"), literal("v2"))
    store = container(
        Declaration(owl_class("A")),
        Declaration(individual("A")),
        Declaration(data_property("hasX")),
        first,
        second,
    )

    script = plan_annotation_conversion(DefaultStatementFactory(), store)

    assert script.changes == (
        RemoveStatement(store, first),
        AddStatement(store, _converted("v1")),
        RemoveStatement(store, Declaration(data_property("hasX"))),
        RemoveStatement(store, second),
        AddStatement(store, _converted("v2")),
        RemoveStatement(store, Declaration(individual("A"))),
    )


def test_anonymous_data_properties_are_left_untouched() -> None:
    anonymous = DataPropertyAssertion(AnonymousDataProperty("n1"), individual("A"), literal("v"))
    store = container(Declaration(owl_class("A")), anonymous)

    script = plan_annotation_conversion(DefaultStatementFactory(), store)

    assert anonymous not in {change.statement for change in script}
    assert script.additions() == ()


def test_punning_is_detected_across_containers() -> None:
    classes = container(Declaration(owl_class("A")), name="classes")
    facts = container(
        Declaration(individual("A")),
        DataPropertyAssertion(data_property("hasX"), individual("A"), literal("v")),
        name="facts",
    )

    script = plan_annotation_conversion(DefaultStatementFactory(), [classes, facts])

    assert script.for_container(classes) == ()
    assert AddStatement(facts, _converted("v")) in script.for_container(facts)


def test_no_punned_individuals_yields_empty_script() -> None:
    store = container(
        Declaration(individual("a")),
        DataPropertyAssertion(data_property("hasX"), individual("a"), literal("v")),
    )

    converter = PunnedAssertionConverter(DefaultStatementFactory(), store)

    assert converter.changes == ()
    assert len(converter.script) == 0
    assert converter.state is PlannerState.PLANNED


def test_fixed_point_after_applying(punning_scenario: PunningScenario) -> None:
    store = punning_scenario.container
    factory = DefaultStatementFactory()

    apply_edit_script(plan_annotation_conversion(factory, store))

    assert len(plan_annotation_conversion(factory, store)) == 0
    assert store.statements() == (punning_scenario.class_declaration, _converted("v"))


def test_planner_logs_summary(
    punning_scenario: PunningScenario, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="ontosearch.domain.punning.planner"):
        plan_annotation_conversion(DefaultStatementFactory(), punning_scenario.container)

    assert "Found 1 punned individual(s) across 1 container(s)" in caplog.messages
    assert any(message.startswith("Converting ") for message in caplog.messages)


def test_missing_arguments_raise(punning_scenario: PunningScenario) -> None:
    with pytest.raises(InvalidArgumentError, match="factory"):
        PunnedAssertionConverter(None, punning_scenario.container)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="container"):
        PunnedAssertionConverter(DefaultStatementFactory(), None)  # type: ignore[arg-type]
