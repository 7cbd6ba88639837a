"""fmap and bind instances for every container."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from monadic.continuation import Continuation
from monadic.either import Left, Right
from monadic.free import Op, Pure
from monadic.future import Future
from monadic.identity import Identity
from monadic.io import IO
from monadic.list_ import List
from monadic.maybe import Just, NothingType
from monadic.reader import Reader
from monadic.result import Failure, Success
from monadic.state import State
from monadic.typeclass.core import NoInstanceError, typeclass
from monadic.validation import Invalid, Valid
from monadic.writer import Writer

__all__ = ['CONTAINERS', 'bind', 'fmap']

CONTAINERS: tuple[type, ...] = (
    Just,
    NothingType,
    Left,
    Right,
    Success,
    Failure,
    Valid,
    Invalid,
    Identity,
    List,
    State,
    Reader,
    Writer,
    Pure,
    Op,
    IO,
    Future,
    Continuation,
)


@typeclass
def fmap(container: Any, f: Callable[[Any], Any]) -> Any:
    """Apply f inside a container, leaving its shape alone."""
    raise NoInstanceError('fmap', type(container))


@typeclass
def bind(container: Any, f: Callable[[Any], Any]) -> Any:
    """Sequence a container-returning function after a container."""
    raise NoInstanceError('bind', type(container))


@fmap.instance(*CONTAINERS)
def _fmap_container(container: Any, f: Callable[[Any], Any]) -> Any:
    return container.map(f)


@bind.instance(*CONTAINERS)
def _bind_container(container: Any, f: Callable[[Any], Any]) -> Any:
    return container.flat_map(f)
