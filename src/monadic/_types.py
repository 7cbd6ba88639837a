"""Callback vocabulary shared by the containers, plus structural zero checks."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import msgspec

from monadic.errors import Cancelled, DeadlineExceeded, Timeout

if TYPE_CHECKING:
    from monadic.result import Result

__all__ = [
    'ErrorFunc',
    'Failable',
    'Nilable',
    'Predicate',
    'Transform',
    'is_zero',
]

type Predicate[T] = Callable[[T], bool]
"""A test performed on a value."""

type Transform[T, U] = Callable[[T], U]
"""A plain value-to-value function."""

type Failable[T] = Callable[[T], tuple[T, Any]]
"""A fallible transform returning ``(value, error)``; a zero error means success."""

type Nilable[T] = Callable[[T], T | None]
"""A transform that may produce no value at all."""

type ErrorFunc[T, E] = Callable[[E], Result[T, E]]
"""A recovery callback handed the error of a failed Result."""


_ERROR_STRUCTS = (Cancelled, DeadlineExceeded, Timeout)


def is_zero(value: object) -> bool:
    """Return True if value is the empty value of its own type.

    ``None`` is always zero. Otherwise the type must be constructible with
    no arguments: a msgspec Struct is then zero when every field is zero,
    whatever its defaults say, and any other value is zero when it equals
    that no-argument instance. So ``''``, ``0``, ``[]`` and ``{}`` count
    as empty.

    Exceptions and the ``Cancelled``, ``DeadlineExceeded`` and ``Timeout``
    error structs are never zero, and neither is anything whose type needs
    constructor arguments.

    Examples:
        >>> is_zero(None), is_zero(''), is_zero(0)
        (True, True, True)
        >>> is_zero(ValueError()), is_zero(Cancelled())
        (False, False)
    """
    if value is None:
        return True
    if isinstance(value, (BaseException, *_ERROR_STRUCTS)):
        return False
    try:
        empty = type(value)()
    except Exception:
        return False
    if isinstance(value, msgspec.Struct):
        return all(is_zero(getattr(value, field)) for field in value.__struct_fields__)
    try:
        return bool(value == empty)
    except Exception:
        return False
