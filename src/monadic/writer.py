"""Writer: a value paired with an output, such as a log.

The container never merges outputs by itself. ``flat_map`` carries the
continuation's output forward as-is; any accumulation belongs to the
``combine`` function chosen at construction, which ``run`` applies.
"""

from __future__ import annotations

from collections.abc import Callable

__all__ = ['Writer', 'tell']


def _keep[T, W](value: T, output: W) -> tuple[T, W]:
    return value, output


class Writer[W, T]:
    """Holds ``value``, ``output`` and a ``combine: (T, W) -> (T, W)``.

    Examples:
        >>> w = Writer(2, ['start']).flat_map(lambda x: Writer(x * 3, ['start', 'tripled']))
        >>> w.run()
        (6, ['start', 'tripled'])
    """

    __slots__ = ('_combine', '_output', '_value')

    def __init__(
        self,
        value: T,
        output: W,
        combine: Callable[[T, W], tuple[T, W]] | None = None,
    ) -> None:
        self._value = value
        self._output = output
        self._combine = combine if combine is not None else _keep

    @property
    def value(self) -> T:
        """The held value."""
        return self._value

    @property
    def output(self) -> W:
        """The held output."""
        return self._output

    def run(self) -> tuple[T, W]:
        """Apply combine and return the ``(value, output)`` pair."""
        return self._combine(self._value, self._output)

    def map[U](self, f: Callable[[T], U]) -> Writer[W, U]:
        """Transform the value; the output still goes through the original combine."""
        new_value = f(self._value)
        original_value, combine = self._value, self._combine

        def mapped_combine(_value: U, output: W) -> tuple[U, W]:
            return new_value, combine(original_value, output)[1]

        return Writer(new_value, self._output, mapped_combine)

    def flat_map(self, f: Callable[[T], Writer[W, T]]) -> Writer[W, T]:
        """Run f on the value and carry its value and output forward."""
        new_value, new_output = f(self._value).run()
        return Writer(new_value, new_output, self._combine)

    def __repr__(self) -> str:
        return f'Writer(value={self._value!r}, output={self._output!r})'


def tell[W](output: W) -> Writer[W, None]:
    """A Writer that only records output."""
    return Writer(None, output)
