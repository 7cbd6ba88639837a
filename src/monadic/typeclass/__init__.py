"""Typeclass utilities for writing one function over every container."""

from monadic.typeclass.core import NoInstanceError, TypeClass, typeclass
from monadic.typeclass.instances import CONTAINERS, bind, fmap

__all__ = [
    'CONTAINERS',
    'NoInstanceError',
    'TypeClass',
    'bind',
    'fmap',
    'typeclass',
]
