"""IO: a deferred effect, re-run on every perform()."""

from __future__ import annotations

from collections.abc import Callable

from monadic.decorators.safe import safe
from monadic.result import Failure, Result, Success

__all__ = ['IO']


class IO[T, E]:
    """Wraps an action ``() -> Result[T, E]``.

    Unlike Future, nothing is memoized: each ``perform`` runs the action
    again on the caller's thread. ``map`` and ``flat_map`` skip their
    function when the upstream action fails.

    Examples:
        >>> hits = []
        >>> io = IO(lambda: Success(hits.append(1) or len(hits)))
        >>> io.perform(), io.perform()
        (Success(value=1), Success(value=2))
    """

    __slots__ = ('_action',)

    def __init__(self, action: Callable[[], Result[T, E]]) -> None:
        self._action = action

    @staticmethod
    def of[V](value: V) -> IO[V, object]:
        """An IO that always succeeds with value."""
        return IO(lambda: Success(value))

    @staticmethod
    def attempt[V](fn: Callable[[], V]) -> IO[V, Exception]:
        """An IO running fn, with exceptions it raises turned into Failure."""
        return IO(safe(fn))

    def perform(self) -> Result[T, E]:
        """Run the action and return its Result."""
        return self._action()

    def map[U](self, f: Callable[[T], U]) -> IO[U, E]:
        """Transform the successful value of each run."""

        def action() -> Result[U, E]:
            result = self.perform()
            if isinstance(result, Failure):
                return result
            return Success(f(result.value))

        return IO(action)

    def flat_map[U](self, f: Callable[[T], IO[U, E]]) -> IO[U, E]:
        """Run f's IO after this one succeeds."""

        def action() -> Result[U, E]:
            result = self.perform()
            if isinstance(result, Failure):
                return result
            return f(result.value).perform()

        return IO(action)

    def __repr__(self) -> str:
        return f'IO({self._action!r})'
