"""Maybe type: Just[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable

import msgspec

from monadic._types import Nilable, Predicate

__all__ = ['Just', 'Maybe', 'Nothing', 'NothingType', 'empty', 'just', 'of_nullable']


class Just[T](msgspec.Struct, frozen=True, gc=False):
    """Just variant of Maybe holding a present value.

    Examples:
        >>> Just(6).filter(lambda x: x % 2 == 0)
        Just(value=6)
        >>> Just(5).filter(lambda x: x % 2 == 0)
        NothingType()
        >>> Just(21).map(lambda x: x * 2)
        Just(value=42)
    """

    value: T

    def is_just(self) -> bool:
        """Return True since this is Just."""
        return True

    def is_nothing(self) -> bool:
        """Return False since this is Just."""
        return False

    def or_else(self, _default: T) -> T:
        """Return the held value, ignoring the default."""
        return self.value

    def filter(self, predicate: Predicate[T]) -> Just[T] | NothingType:
        """Keep the value only if the predicate holds.

        Args:
            predicate: Test applied to the value.

        Returns:
            self if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def map[U](self, f: Callable[[T], U]) -> Just[U]:
        """Apply f to the value and wrap the outcome in Just."""
        return Just(f(self.value))

    def flat_map[U](self, f: Callable[[T], Just[U] | NothingType]) -> Just[U] | NothingType:
        """Apply a Maybe-returning function to the value.

        Args:
            f: Function that takes T and returns Maybe[U].

        Returns:
            The Maybe returned by f.
        """
        return f(self.value)

    def bind(self, f: Nilable[T]) -> Just[T] | NothingType:
        """Apply a function that may return None, mapping None to Nothing."""
        return of_nullable(f(self.value))


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Maybe representing an absent value.

    This is a singleton - use the ``Nothing`` constant.

    Examples:
        >>> Nothing.or_else(10)
        10
        >>> Nothing.value is None
        True
    """

    @property
    def value(self) -> None:
        """The zero value: Nothing holds no payload."""
        return None

    def is_just(self) -> bool:
        """Return False since this is Nothing."""
        return False

    def is_nothing(self) -> bool:
        """Return True since this is Nothing."""
        return True

    def or_else[T](self, default: T) -> T:
        """Return the default since there is no value."""
        return default

    def filter[T](self, _predicate: Predicate[T]) -> NothingType:
        """Return Nothing since there is nothing to test."""
        return self

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there is no value to map."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Just[U] | NothingType]) -> NothingType:
        """Return Nothing since there is no value to bind."""
        return self

    def bind[T](self, _f: Nilable[T]) -> NothingType:
        """Return Nothing since there is no value to bind."""
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing an absent value."""


type Maybe[T] = Just[T] | NothingType


def just[T](value: T) -> Maybe[T]:
    """Wrap a value in Just (``None`` included)."""
    return Just(value)


def empty() -> NothingType:
    """Return the empty Maybe."""
    return Nothing


def of_nullable[T](value: T | None) -> Maybe[T]:
    """Build a Maybe that is Nothing for None and Just otherwise.

    Examples:
        >>> of_nullable(None)
        NothingType()
        >>> of_nullable(0)
        Just(value=0)
    """
    if value is None:
        return Nothing
    return Just(value)
