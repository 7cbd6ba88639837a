"""Free: programs built from Functor steps and interpreted later.

A Free program is either ``Pure(value)`` or ``Op(functor, continuation)``.
Nothing runs until ``run_free`` is called; it walks the operations in
order, feeding each functor's extracted payload to its continuation.

Example:
    ```python
    from monadic.free import lift, pure

    program = lift(Box(20)).flat_map(lambda x: pure(x + 1)).map(lambda x: x * 2)
    program.run_free(lambda box: box.extract())  # 42
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

import msgspec

from monadic.errors import TypeMismatchError
from monadic.functor import Functor

__all__ = ['Free', 'Op', 'Pure', 'lift', 'operation', 'pure']


def _check_functor(functor: object) -> None:
    if not isinstance(functor, Functor):
        what = 'Free operation needs a Functor (map and extract)'
        raise TypeMismatchError(what, functor)


def _check_interpreter(interpreter: object) -> None:
    """Reject interpreters that cannot take a single functor argument."""
    what = 'Free interpreter must be a one-argument callable'
    if not callable(interpreter):
        raise TypeMismatchError(what, interpreter)
    try:
        signature = inspect.signature(interpreter)
    except (TypeError, ValueError):
        # Builtins without an introspectable signature get the benefit of the doubt
        return
    try:
        signature.bind(object())
    except TypeError:
        raise TypeMismatchError(what, interpreter) from None


class Pure[F, A](msgspec.Struct, frozen=True, gc=False):
    """A finished program holding its value."""

    value: A

    def map[B](self, f: Callable[[A], B]) -> Pure[F, B]:
        """Apply f to the value."""
        return Pure(f(self.value))

    def flat_map[B](self, f: Callable[[A], Pure[F, B] | Op[F, B]]) -> Pure[F, B] | Op[F, B]:
        """Continue the program with f applied to the value."""
        return f(self.value)

    def run_free(self, interpreter: Callable[[F], A]) -> A:
        """Return the value; the interpreter is checked but has nothing to do."""
        _check_interpreter(interpreter)
        return self.value


class Op[F, A](msgspec.Struct, frozen=True):
    """One deferred operation and the continuation that consumes its payload.

    ``pending`` holds the functions chained on with ``map``/``flat_map`` as
    a linked list, newest first: ``(f, rest)`` or None. Chaining only
    prepends, so building a long chain never nests continuations.
    """

    functor: Functor[F]
    continuation: Callable[[F], Pure[F, A] | Op[F, A]]
    pending: tuple[Callable[[Any], Any], Any] | None = None

    def __post_init__(self) -> None:
        _check_functor(self.functor)

    def map[B](self, f: Callable[[A], B]) -> Op[F, B]:
        """Apply f to the program's eventual value."""
        return self.flat_map(lambda value: Pure(f(value)))

    def flat_map[B](self, f: Callable[[A], Pure[F, B] | Op[F, B]]) -> Op[F, B]:
        """Append f after the rest of the program."""
        return Op(self.functor, self.continuation, (f, self.pending))

    def run_free(self, interpreter: Callable[[F], A]) -> A:
        """Interpret the program.

        Runs in a loop with an explicit stack of pending functions, so
        neither long sequences nor long ``flat_map`` chains hit the
        recursion limit.

        Args:
            interpreter: Function giving meaning to a functor step.

        Returns:
            The value of the final Pure node.

        Raises:
            TypeMismatchError: If interpreter cannot accept a functor. Raised
                before any continuation runs.
        """
        _check_interpreter(interpreter)
        stack: list[Callable[[Any], Any]] = []
        node: Pure[F, Any] | Op[F, Any] = self
        while True:
            if isinstance(node, Op):
                # Oldest chained function must run first, so it goes on top
                chained: list[Callable[[Any], Any]] = []
                link = node.pending
                while link is not None:
                    f, link = link
                    chained.append(f)
                stack.extend(chained)
                node = node.continuation(node.functor.extract())
            elif stack:
                node = stack.pop()(node.value)
            else:
                return node.value


type Free[F, A] = Pure[F, A] | Op[F, A]


def pure[F, A](value: A) -> Free[F, A]:
    """Build a finished program."""
    return Pure(value)


def operation[F, A](functor: Functor[F], continuation: Callable[[F], Free[F, A]]) -> Free[F, A]:
    """Build a program of one operation followed by continuation.

    Raises:
        TypeMismatchError: If functor does not implement map and extract.
    """
    return Op(functor, continuation)


def lift[F](functor: Functor[F]) -> Free[F, Any]:
    """Build a program of one operation that yields the functor's payload."""
    return Op(functor, Pure)
