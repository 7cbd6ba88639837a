"""Monad law checks, written once for every container.

Every container obeys:

1. Left identity:  ``unit(a).flat_map(f)  ~  f(a)``
2. Right identity: ``m.flat_map(unit)  ~  m``
3. Associativity:  ``m.flat_map(f).flat_map(g)  ~  m.flat_map(lambda x: f(x).flat_map(g))``

where ``~`` compares what a caller can observe. Deferred containers are
observed by running them, so each check takes an ``observe`` function
(``State.run`` at some state, ``Future.wait``...). Identity is the default.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from monadic.typeclass import bind

__all__ = ['associativity', 'left_identity', 'right_identity']

type Observe = Callable[[Any], Any]


def _same(observe: Observe | None) -> Observe:
    return observe if observe is not None else (lambda container: container)


def left_identity[A](
    unit: Callable[[A], Any],
    a: A,
    f: Callable[[A], Any],
    observe: Observe | None = None,
) -> bool:
    """Check ``unit(a) >>= f`` against ``f(a)``."""
    see = _same(observe)
    return see(bind(unit(a), f)) == see(f(a))


def right_identity(
    unit: Callable[[Any], Any],
    m: Any,
    observe: Observe | None = None,
) -> bool:
    """Check ``m >>= unit`` against ``m``."""
    see = _same(observe)
    return see(bind(m, unit)) == see(m)


def associativity(
    m: Any,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    observe: Observe | None = None,
) -> bool:
    """Check ``(m >>= f) >>= g`` against ``m >>= (x -> f(x) >>= g)``."""
    see = _same(observe)
    return see(bind(bind(m, f), g)) == see(bind(m, lambda x: bind(f(x), g)))
