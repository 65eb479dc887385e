"""Detection of individuals punned with a class."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ontosearch.domain.search.aggregate import any_container, containers_of

if TYPE_CHECKING:
    from ontosearch.domain.model import NamedIndividual
    from ontosearch.domain.search.aggregate import ContainerSource


def find_punned_individuals(source: ContainerSource) -> tuple[NamedIndividual, ...]:
    """Individuals whose IRI also names a class in any of the containers.

    The candidates are the union of every container's individual signature,
    in first-seen order and without duplicates.
    """

    containers = containers_of(source)
    candidates = dict.fromkeys(
        individual
        for container in containers
        for individual in container.signature_individuals()
    )
    return tuple(
        individual
        for individual in candidates
        if any_container(containers, lambda container: container.contains_class(individual.iri))
    )
