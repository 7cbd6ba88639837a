"""Either type: Left[T] | Right[T], with Right as the success path.

Both branches hold the same type. ``map`` and ``flat_map`` transform Right
only; a Left passes through untouched and is handled with ``or_else``.
"""

from __future__ import annotations

from collections.abc import Callable

import msgspec

__all__ = ['Either', 'Left', 'Right', 'left', 'right']


class Left[T](msgspec.Struct, frozen=True, gc=False):
    """Left variant of Either, by convention the failure or alternate branch.

    Examples:
        >>> Left('boom').map(str.upper)
        Left(value='boom')
        >>> Left('boom').or_else(lambda v: Right(v.upper()))
        Right(value='BOOM')
    """

    value: T

    def is_left(self) -> bool:
        """Return True since this is Left."""
        return True

    def is_right(self) -> bool:
        """Return False since this is Left."""
        return False

    def map[U](self, _f: Callable[[T], U]) -> Left[T]:
        """Return self unchanged since this is Left."""
        return self

    def flat_map[U](self, _f: Callable[[T], Left[U] | Right[U]]) -> Left[T]:
        """Return self unchanged since this is Left."""
        return self

    def or_else(self, f: Callable[[T], Left[T] | Right[T]]) -> Left[T] | Right[T]:
        """Run the fallback on the Left value.

        Args:
            f: Function that takes the Left value and returns a new Either.

        Returns:
            The Either returned by f.
        """
        return f(self.value)


class Right[T](msgspec.Struct, frozen=True, gc=False):
    """Right variant of Either, by convention the success branch.

    Examples:
        >>> Right(20).map(lambda x: x + 1)
        Right(value=21)
    """

    value: T

    def is_left(self) -> bool:
        """Return False since this is Right."""
        return False

    def is_right(self) -> bool:
        """Return True since this is Right."""
        return True

    def map[U](self, f: Callable[[T], U]) -> Right[U]:
        """Apply f to the value and wrap the outcome in Right."""
        return Right(f(self.value))

    def flat_map[U](self, f: Callable[[T], Left[U] | Right[U]]) -> Left[U] | Right[U]:
        """Apply an Either-returning function to the value.

        Args:
            f: Function that takes T and returns Either[U].

        Returns:
            The Either returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[T], Left[T] | Right[T]]) -> Right[T]:
        """Return self unchanged since this is Right."""
        return self


type Either[T] = Left[T] | Right[T]


def left[T](value: T) -> Either[T]:
    """Build a Left."""
    return Left(value)


def right[T](value: T) -> Either[T]:
    """Build a Right."""
    return Right(value)
