"""Multi-container composition of per-container queries.

Results are concatenated in the order the containers were given. There is no
deduplication and no precedence between containers: a fact stated in two
containers is reported twice.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ontosearch.domain.errors import InvalidArgumentError
from ontosearch.domain.ports import StatementContainer

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

type ContainerSource = StatementContainer | Iterable[StatementContainer]


def require[T](value: T | None, *, role: str) -> T:
    if value is None:
        raise InvalidArgumentError(f"{role} is required")
    return value


def containers_of(source: ContainerSource | None) -> tuple[StatementContainer, ...]:
    """Normalize a single container or a sequence of containers into a tuple.

    The sequence is materialized eagerly so that argument errors surface when a
    query is issued, not when its lazy result is first consumed.
    """

    if source is None:
        raise InvalidArgumentError("container source is required")
    if isinstance(source, StatementContainer):
        return (source,)
    if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
        raise InvalidArgumentError(f"Expected a container or containers, got {source!r}")

    containers = tuple(source)
    for index, container in enumerate(containers):
        if container is None:
            raise InvalidArgumentError(f"container at position {index} is None")
        if not isinstance(container, StatementContainer):
            raise InvalidArgumentError(
                f"container at position {index} does not satisfy StatementContainer: "
                f"{container!r}"
            )
    return containers


def concatenate[T](
    containers: tuple[StatementContainer, ...],
    per_container: Callable[[StatementContainer], Iterable[T]],
) -> Iterator[T]:
    for container in containers:
        yield from per_container(container)


def any_container(
    containers: tuple[StatementContainer, ...],
    predicate: Callable[[StatementContainer], bool],
) -> bool:
    return any(predicate(container) for container in containers)


def exists(results: Iterable[object]) -> bool:
    return any(True for _ in results)
