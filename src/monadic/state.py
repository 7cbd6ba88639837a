"""State: a computation threading a state value through pure functions.

``flat_map`` runs the original computation, hands its value to the
continuation and runs the resulting State against the *updated* state.
"""

from __future__ import annotations

from collections.abc import Callable

__all__ = ['State', 'get_state', 'modify_state', 'put_state']


class State[S, T]:
    """Wraps a runner ``S -> (T, S)``.

    Examples:
        >>> counter = State(lambda s: (s + 1, s * 2))
        >>> counter.flat_map(lambda x: State(lambda s: (x, s))).run(3)
        (4, 6)
    """

    __slots__ = ('_runner',)

    def __init__(self, runner: Callable[[S], tuple[T, S]]) -> None:
        self._runner = runner

    @staticmethod
    def pure[R, V](value: V) -> State[R, V]:
        """A State that yields value and leaves the state alone."""
        return State(lambda state: (value, state))

    def run(self, state: S) -> tuple[T, S]:
        """Run the computation from an initial state.

        Returns:
            The ``(value, final_state)`` pair.
        """
        return self._runner(state)

    def eval(self, state: S) -> T:
        """Run and keep only the value."""
        return self._runner(state)[0]

    def exec(self, state: S) -> S:
        """Run and keep only the final state."""
        return self._runner(state)[1]

    def map[U](self, f: Callable[[T], U]) -> State[S, U]:
        """Transform the value without touching the state."""

        def runner(state: S) -> tuple[U, S]:
            value, new_state = self._runner(state)
            return f(value), new_state

        return State(runner)

    def flat_map[U](self, f: Callable[[T], State[S, U]]) -> State[S, U]:
        """Sequence a State-returning function after this computation."""

        def runner(state: S) -> tuple[U, S]:
            value, new_state = self._runner(state)
            return f(value).run(new_state)

        return State(runner)

    def __repr__(self) -> str:
        return f'State({self._runner!r})'


def get_state[S]() -> State[S, S]:
    """A State whose value is the current state."""
    return State(lambda state: (state, state))


def put_state[S](state: S) -> State[S, None]:
    """A State that replaces the current state."""
    return State(lambda _: (None, state))


def modify_state[S](f: Callable[[S], S]) -> State[S, None]:
    """A State that applies f to the current state."""
    return State(lambda state: (None, f(state)))
