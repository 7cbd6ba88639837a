"""Reader: a computation that reads a shared environment supplied at run time."""

from __future__ import annotations

from collections.abc import Callable

__all__ = ['Reader', 'ask']


class Reader[E, T]:
    """Wraps a computation ``E -> T``; the environment is never stored.

    Examples:
        >>> greeting = ask().map(lambda env: env['name']).map(lambda n: f'hi {n}')
        >>> greeting.run({'name': 'ada'})
        'hi ada'
    """

    __slots__ = ('_compute',)

    def __init__(self, compute: Callable[[E], T]) -> None:
        self._compute = compute

    @staticmethod
    def pure[R, V](value: V) -> Reader[R, V]:
        """A Reader that ignores its environment."""
        return Reader(lambda _: value)

    def run(self, env: E) -> T:
        """Run the computation against env."""
        return self._compute(env)

    def map[U](self, f: Callable[[T], U]) -> Reader[E, U]:
        """Transform the computed value."""
        return Reader(lambda env: f(self._compute(env)))

    def flat_map[U](self, f: Callable[[T], Reader[E, U]]) -> Reader[E, U]:
        """Sequence a Reader-returning function; both steps see the same env."""
        return Reader(lambda env: f(self._compute(env)).run(env))

    def local(self, f: Callable[[E], E]) -> Reader[E, T]:
        """Run this Reader against an environment transformed by f."""
        return Reader(lambda env: self._compute(f(env)))

    def __repr__(self) -> str:
        return f'Reader({self._compute!r})'


def ask[E]() -> Reader[E, E]:
    """A Reader whose value is the environment itself."""
    return Reader(lambda env: env)
