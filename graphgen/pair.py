"""Unordered pair of same-typed values, used as the edge type."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class UnorderedPair(Generic[T]):
    """
    Пара из двух значений одного типа без порядка.

    (a, b) и (b, a) равны и хэшируются одинаково, поэтому пару можно
    класть в set для дедупликации рёбер. Петли (a == a) пара не запрещает,
    это забота генератора.
    """

    __slots__ = ("_first", "_second", "_key")

    def __init__(self, first: T, second: T) -> None:
        self._first = first
        self._second = second
        self._key = frozenset((first, second))

    @property
    def first(self) -> T:
        return self._first

    @property
    def second(self) -> T:
        return self._second

    def contains(self, value: T) -> bool:
        """Return True if ``value`` is one of the two members."""
        return value == self._first or value == self._second

    def __iter__(self) -> Iterator[T]:
        yield self._first
        yield self._second

    def __hash__(self) -> int:
        return hash(self._key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnorderedPair):
            return NotImplemented
        return self._key == other._key

    def __repr__(self) -> str:
        return f"UnorderedPair({self._first!r}, {self._second!r})"


# Общее имя для пары однотипных значений.
SameTypePair = UnorderedPair
