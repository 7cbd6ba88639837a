"""Identity: the plain container, useful as a baseline for the laws."""

from __future__ import annotations

from collections.abc import Callable

import msgspec

__all__ = ['Identity']


class Identity[T](msgspec.Struct, frozen=True, gc=False):
    """Wraps a value with no extra effect.

    Examples:
        >>> Identity(20).map(lambda x: x + 1).flat_map(lambda x: Identity(x * 2))
        Identity(value=42)
    """

    value: T

    def map[U](self, f: Callable[[T], U]) -> Identity[U]:
        """Apply f to the value."""
        return Identity(f(self.value))

    def flat_map[U](self, f: Callable[[T], Identity[U]]) -> Identity[U]:
        """Apply an Identity-returning function to the value."""
        return f(self.value)
