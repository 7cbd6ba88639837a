"""Result type: Success[T] | Failure[E] for operations that can fail.

Failures short-circuit ``map``, ``flat_map`` and ``bind`` and are only
touched by ``or_else`` and ``map_error``. Reading ``value`` on a Failure,
or ``error`` on a Success, gives ``None`` rather than raising.

Example:
    ```python
    from monadic.result import from_tuple, succeed

    succeed(1).flat_map(lambda x: succeed(x * 2)).value  # 2

    def parse(raw: str) -> tuple[int, str]:
        return (int(raw), '') if raw.isdigit() else (0, f'not a number: {raw!r}')

    from_tuple(*parse('12'))   # Success(value=12)
    from_tuple(*parse('x'))    # Failure(error="not a number: 'x'")
    ```
"""

from __future__ import annotations

from collections.abc import Callable

import msgspec

from monadic._types import Failable, is_zero

__all__ = ['ErrorHandler', 'Failure', 'Result', 'Success', 'fail', 'from_tuple', 'succeed']


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Success(21).map(lambda x: x * 2)
        Success(value=42)
        >>> Success(21).error is None
        True
    """

    value: T

    @property
    def error(self) -> None:
        """The zero error: a Success carries none."""
        return None

    def success(self) -> bool:
        """Return True since this is Success."""
        return True

    def failure(self) -> bool:
        """Return False since this is Success."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply f to the value and wrap the outcome in Success."""
        return Success(f(self.value))

    def flat_map[U, E](self, f: Callable[[T], Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Chain a computation that may fail.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def bind(self, f: Failable[T]) -> Success[T] | Failure[object]:
        """Run a ``(value, error)``-returning function on the value.

        Args:
            f: Fallible transform; a zero error (see ``is_zero``) means success.

        Returns:
            Success of the new value, or Failure of the non-zero error.
        """
        return from_tuple(*f(self.value))

    def or_else[F](self, _handler: Callable[[object], Success[T] | Failure[F]]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def map_error[F](self, _f: Callable[[object], F]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    Examples:
        >>> Failure('boom').map(lambda x: x * 2)
        Failure(error='boom')
        >>> Failure('boom').or_else(lambda e: Success(len(e)))
        Success(value=4)
    """

    error: E

    @property
    def value(self) -> None:
        """The zero value: a Failure carries none."""
        return None

    def success(self) -> bool:
        """Return False since this is Failure."""
        return False

    def failure(self) -> bool:
        """Return True since this is Failure."""
        return True

    def map[T, U](self, _f: Callable[[T], U]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Success[U] | Failure[E]]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def bind[T](self, _f: Failable[T]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def or_else[T, F](self, handler: Callable[[E], Success[T] | Failure[F]]) -> Success[T] | Failure[F]:
        """Recover from the error.

        Args:
            handler: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by handler.
        """
        return handler(self.error)

    def map_error[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply f to the error, keeping the Failure."""
        return Failure(f(self.error))


type Result[T, E = Exception] = Success[T] | Failure[E]

type ErrorHandler[T, E = Exception] = Result[T, E]
"""Alternative name for Result."""


def succeed[T](value: T) -> Success[T]:
    """Build a Success."""
    return Success(value)


def fail[E](error: E) -> Failure[E]:
    """Build a Failure."""
    return Failure(error)


def from_tuple[T, E](value: T, error: E) -> Result[T, E]:
    """Build a Result from a ``(value, error)`` pair.

    The pair is a Success when the error is structurally empty: ``None``,
    or equal to its type's zero value (``''``, ``0``, an empty struct...).
    Anything else, including every exception instance, is a Failure.

    Examples:
        >>> from_tuple(3, None)
        Success(value=3)
        >>> from_tuple(3, '')
        Success(value=3)
        >>> from_tuple(3, 'bad input')
        Failure(error='bad input')
    """
    if is_zero(error):
        return Success(value)
    return Failure(error)
