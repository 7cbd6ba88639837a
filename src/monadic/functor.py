"""Functor capability used by Free to step through deferred operations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

__all__ = ['Functor']


@runtime_checkable
class Functor[F](Protocol):
    """A structure that can be mapped over and whose payload can be extracted.

    Implementations must obey the functor laws:

    - identity: ``fa.map(lambda x: x) == fa``
    - composition: ``fa.map(lambda x: g(f(x))) == fa.map(f).map(g)``

    ``extract`` is not part of the classical definition; Free uses it to
    obtain the payload that feeds the next continuation.
    """

    def map(self, f: Callable[[Any], Any]) -> Functor[F]: ...

    def extract(self) -> F: ...
