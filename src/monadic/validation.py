"""Validation type: Valid[T] | Invalid[E] for checks that collect errors.

``map`` and ``flat_map`` only touch valid values and never merge error
lists. Gathering the errors of several independent checks is opt-in, via
``validate_all``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import msgspec

__all__ = ['Invalid', 'Valid', 'Validation', 'invalid_of', 'valid_of', 'validate_all']


class Valid[T](msgspec.Struct, frozen=True, gc=False):
    """Valid variant of Validation holding the checked value."""

    value: T

    @property
    def errors(self) -> tuple[()]:
        """A valid Validation has no errors."""
        return ()

    def valid(self) -> bool:
        """Return True since this is Valid."""
        return True

    def map[U](self, f: Callable[[T], U]) -> Valid[U]:
        """Apply f to the value and wrap the outcome in Valid."""
        return Valid(f(self.value))

    def flat_map[U, E](self, f: Callable[[T], Valid[U] | Invalid[E]]) -> Valid[U] | Invalid[E]:
        """Apply a Validation-returning function to the value."""
        return f(self.value)


class Invalid[E](msgspec.Struct, frozen=True, gc=False):
    """Invalid variant of Validation holding one or more errors.

    Examples:
        >>> Invalid(('e1', 'e2')).map(str.upper)
        Invalid(errors=('e1', 'e2'))
    """

    errors: tuple[E, ...]

    @property
    def value(self) -> None:
        """The zero value: an Invalid carries none."""
        return None

    def valid(self) -> bool:
        """Return False since this is Invalid."""
        return False

    def map[T, U](self, _f: Callable[[T], U]) -> Invalid[E]:
        """Return self unchanged since this is Invalid."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Valid[U] | Invalid[E]]) -> Invalid[E]:
        """Return self unchanged since this is Invalid."""
        return self


type Validation[E, T] = Valid[T] | Invalid[E]


def valid_of[T](value: T) -> Valid[T]:
    """Build a Valid."""
    return Valid(value)


def invalid_of[E](errors: Iterable[E]) -> Invalid[E]:
    """Build an Invalid from a non-empty collection of errors.

    Raises:
        ValueError: If errors is empty, since an empty error list means valid.
    """
    collected = tuple(errors)
    if not collected:
        msg = 'Invalid requires at least one error'
        raise ValueError(msg)
    return Invalid(collected)


def validate_all[E, T](validations: Iterable[Valid[T] | Invalid[E]]) -> Valid[list[T]] | Invalid[E]:
    """Combine independent validations, keeping every error.

    Args:
        validations: Validations to combine.

    Returns:
        Valid list of values when all inputs are valid, otherwise one
        Invalid holding the errors of every invalid input in order.

    Examples:
        >>> validate_all([Valid(1), Valid(2)])
        Valid(value=[1, 2])
        >>> validate_all([Invalid(('a',)), Valid(2), Invalid(('b', 'c'))])
        Invalid(errors=('a', 'b', 'c'))
    """
    values: list[T] = []
    errors: list[E] = []
    for validation in validations:
        if isinstance(validation, Invalid):
            errors.extend(validation.errors)
        else:
            values.append(validation.value)
    if errors:
        return Invalid(tuple(errors))
    return Valid(values)
