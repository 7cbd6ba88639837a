"""List: a container of zero or more values, flat-mapped by concatenation."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from monadic._types import Predicate

__all__ = ['List']


class List[T]:
    """An immutable sequence with map, flat_map and filter.

    Examples:
        >>> List.of(1, 2, 3).flat_map(lambda x: List.of(x, x * 10))
        List(1, 10, 2, 20, 3, 30)
        >>> List.of(1, 2, 3).map(str).values
        ('1', '2', '3')
    """

    __slots__ = ('_values',)

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._values: tuple[T, ...] = tuple(values)

    @classmethod
    def of[U](cls, *values: U) -> List[U]:
        """Build a List from positional arguments."""
        return List(values)

    @property
    def values(self) -> tuple[T, ...]:
        """The held values, in order."""
        return self._values

    def map[U](self, f: Callable[[T], U]) -> List[U]:
        """Apply f to every element."""
        return List(f(value) for value in self._values)

    def flat_map[U](self, f: Callable[[T], List[U]]) -> List[U]:
        """Apply f to every element and concatenate the resulting Lists in order."""
        return List(item for value in self._values for item in f(value).values)

    def filter(self, predicate: Predicate[T]) -> List[T]:
        """Keep the elements for which predicate holds."""
        return List(value for value in self._values if predicate(value))

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(('List', self._values))

    def __repr__(self) -> str:
        return f'List({", ".join(repr(value) for value in self._values)})'
