"""Plan the conversion of punned individuals' data assertions into annotations.

Responsibilities:
- find individuals whose IRI is also used for a class
- replace each of their named data property assertions by an annotation assertion
- retire the converted data properties and the individuals themselves

The whole plan is computed once, in the constructor, against the containers as
they are at that moment. Nothing is mutated here; see ``apply_edit_script``.

Retiring a data property removes its declarations and every statement that
references it, in every container, including assertions about individuals that
are not punned.
"""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from ontosearch.domain.model import DataProperty, Imports
from ontosearch.domain.punning.changes import AddStatement, EditScript, RemoveStatement
from ontosearch.domain.punning.resolve import find_punned_individuals
from ontosearch.domain.search import filters
from ontosearch.domain.search.aggregate import containers_of, require
from ontosearch.domain.search.filters import search

if TYPE_CHECKING:
    from ontosearch.domain.model import (
        DataPropertyAssertion,
        NamedIndividual,
        Statement,
    )
    from ontosearch.domain.ports import StatementContainer, StatementFactory
    from ontosearch.domain.punning.changes import Change
    from ontosearch.domain.search.aggregate import ContainerSource


log = getLogger(__name__)


class PlannerState(StrEnum):
    IDLE = "idle"
    SCAN = "scan"
    PLANNED = "planned"


class PunnedAssertionConverter:
    """One-shot planner; read ``changes`` or ``script`` after construction."""

    def __init__(self, factory: StatementFactory, containers: ContainerSource) -> None:
        self._state = PlannerState.IDLE
        self._factory = require(factory, role="factory")
        self._containers = containers_of(containers)
        self._changes: list[Change] = []
        self._planned_removals: set[tuple[int, Statement]] = set()

        self._state = PlannerState.SCAN
        self._punned = find_punned_individuals(self._containers)
        log.info(
            "Found %d punned individual(s) across %d container(s)",
            len(self._punned),
            len(self._containers),
        )
        for individual in self._punned:
            self._convert_assertions(individual)
            self._retire_individual(individual)

        self._script = EditScript(tuple(self._changes))
        self._state = PlannerState.PLANNED
        log.info("Planned %d change(s)", len(self._script))

    @property
    def state(self) -> PlannerState:
        return self._state

    @property
    def punned_individuals(self) -> tuple[NamedIndividual, ...]:
        return self._punned

    @property
    def changes(self) -> tuple[Change, ...]:
        return self._script.changes

    @property
    def script(self) -> EditScript:
        return self._script

    def _convert_assertions(self, individual: NamedIndividual) -> None:
        for container in self._containers:
            assertions: tuple[DataPropertyAssertion, ...] = tuple(
                search(container, filters.DATA_ASSERTION_WITH_SUBJECT, individual)
            )
            for assertion in assertions:
                prop = assertion.property
                if not isinstance(prop, DataProperty):
                    continue
                log.debug("Converting %s into an annotation of %s", assertion, individual)
                self._remove(container, assertion)
                self._changes.append(
                    AddStatement(
                        container,
                        self._factory.annotation_assertion(
                            individual.iri, prop.iri, assertion.value
                        ),
                    )
                )
                self._retire_property(prop)

    def _retire_property(self, prop: DataProperty) -> None:
        for container in self._containers:
            for declaration in search(container, filters.DECLARATION, prop):
                self._remove(container, declaration)
            for statement in container.referencing_statements(prop, Imports.EXCLUDED):
                self._remove(container, statement)

    def _retire_individual(self, individual: NamedIndividual) -> None:
        for container in self._containers:
            for declaration in search(container, filters.DECLARATION, individual):
                self._remove(container, declaration)
            for assertion in search(container, filters.CLASS_ASSERTION_STATEMENT, individual):
                self._remove(container, assertion)

    def _remove(self, container: StatementContainer, statement: Statement) -> None:
        key = (id(container), statement)
        if key in self._planned_removals:
            return
        self._planned_removals.add(key)
        self._changes.append(RemoveStatement(container, statement))


def plan_annotation_conversion(
    factory: StatementFactory, containers: ContainerSource
) -> EditScript:
    return PunnedAssertionConverter(factory, containers).script
