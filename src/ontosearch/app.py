"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any

from ontosearch.adapters.document import load_containers
from ontosearch.domain.model import DefaultStatementFactory, make_entity
from ontosearch.domain.punning import PunnedAssertionConverter, apply_edit_script
from ontosearch.domain.search import Relation, query

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ontosearch.adapters.memory import InMemoryContainer
    from ontosearch.domain.model import IRI, EntityKind, NamedIndividual
    from ontosearch.domain.ports import StatementFactory
    from ontosearch.domain.punning import ApplyResult, EditScript


log = getLogger(__name__)


@dataclass(slots=True)
class PunningOutcome:
    containers: tuple[InMemoryContainer, ...]
    punned: tuple[NamedIndividual, ...]
    script: EditScript
    result: ApplyResult | None = None


def run_query(
    relation: Relation | str,
    kind: EntityKind | str,
    iri: IRI,
    paths: Iterable[Path | str],
) -> list[Any]:
    """Load documents and evaluate one relation query across all of them."""

    containers = load_containers(paths)
    term = make_entity(kind, iri)
    results = list(query(Relation(relation), term, containers))
    log.info("Query %s of %s returned %d result(s)", relation, term, len(results))
    return results


def convert_punned_assertions(
    paths: Iterable[Path | str],
    *,
    apply: bool = False,
    factory: StatementFactory | None = None,
) -> PunningOutcome:
    """Plan the punning conversion for the given documents, optionally applying it."""

    containers = load_containers(paths)
    converter = PunnedAssertionConverter(factory or DefaultStatementFactory(), containers)
    outcome = PunningOutcome(
        containers=containers,
        punned=converter.punned_individuals,
        script=converter.script,
    )
    if apply:
        outcome.result = apply_edit_script(converter.script)
        log.info(
            "Applied edit script: applied=%s, added=%s, removed=%s, skipped=%s",
            outcome.result.applied,
            outcome.result.added,
            outcome.result.removed,
            outcome.result.skipped,
        )
    return outcome
