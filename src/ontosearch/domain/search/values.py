"""Ordered, duplicate-preserving property/value multimap."""

from __future__ import annotations

from collections.abc import Mapping
from itertools import chain
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class PropertyValues[K, V](Mapping[K, tuple[V, ...]]):
    """Immutable multimap from property to asserted values.

    Keys keep first-seen order, values keep assertion order, and identical
    (property, value) pairs are kept once per occurrence.
    """

    __slots__ = ("_groups",)

    def __init__(self, groups: Mapping[K, tuple[V, ...]] | None = None) -> None:
        self._groups: dict[K, tuple[V, ...]] = {
            key: tuple(values) for key, values in (groups or {}).items() if values
        }

    @classmethod
    def fold(cls, entries: Iterable[tuple[K, V]]) -> PropertyValues[K, V]:
        grouped: dict[K, list[V]] = {}
        for key, value in entries:
            grouped.setdefault(key, []).append(value)
        return cls({key: tuple(values) for key, values in grouped.items()})

    def __getitem__(self, key: K) -> tuple[V, ...]:
        return self._groups[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._groups!r})"

    def values_for(self, key: K) -> tuple[V, ...]:
        return self._groups.get(key, ())

    def entries(self) -> Iterator[tuple[K, V]]:
        for key, values in self._groups.items():
            for value in values:
                yield key, value

    @property
    def value_count(self) -> int:
        return sum(len(values) for values in self._groups.values())

    def merged(self, other: PropertyValues[K, V]) -> PropertyValues[K, V]:
        return PropertyValues.fold(chain(self.entries(), other.entries()))
