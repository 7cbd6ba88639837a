"""@typeclass decorator and dispatch mechanism.

Ad-hoc polymorphism for the containers: one generic function, one
registered implementation per variant class, dispatched on the first
argument's type.
"""

from __future__ import annotations

import dis
from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])

_STUB_OPS = frozenset({'RESUME', 'NOP', 'LOAD_CONST', 'RETURN_CONST', 'RETURN_VALUE'})


class NoInstanceError(TypeError):
    """The typeclass has neither an instance for the type nor a fallback body."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(
            f'{typeclass_name}() has no instance for {value_type.__qualname__}'
        )


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A polymorphic function with per-type instances.

    The proxy keeps the decorated function's name and docstring, so a
    typeclass reads like the function it was declared as.

    Example:
        ```python
        @typeclass
        def describe(container) -> str: ...

        @describe.instance(Just)
        def describe_just(container: Just) -> str:
            return f'just {container.value!r}'

        describe(Just(1))
        # 'just 1'
        ```
    """

    def __init__(self, default_fn: F) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default: F | None = default_fn if _has_implementation(default_fn) else None
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, *types: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register one implementation for one or more types.

        Args:
            *types: The types the implementation handles.

        Returns:
            A decorator that registers the implementation and returns it unchanged.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            for type_ in types:
                self._self_instances[type_] = fn
            return fn

        return decorator

    def registered(self) -> tuple[type, ...]:
        """The types with a registered instance."""
        return tuple(self._self_instances)

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        """Find the instance for a value: exact type first, then the MRO."""
        for base in type(value).__mro__:
            fn = self._self_instances.get(base)
            if fn is not None:
                return fn
        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Call the instance registered for type(args[0]), else the fallback."""
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        instance_fn = self._find_instance(args[0])
        if instance_fn is not None:
            return instance_fn(*args, **kwargs)

        if self._self_default is not None:
            return self._self_default(*args, **kwargs)

        raise NoInstanceError(self._self_name, type(args[0]))

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def _has_implementation(fn: Callable[..., Any]) -> bool:
    """Check if a function has a body beyond ``...`` or ``pass``.

    A docstring alone does not count as a body.
    """
    code = getattr(fn, '__code__', None)
    if code is None:
        return True
    if any(const not in (None, Ellipsis, fn.__doc__) for const in code.co_consts):
        return True
    return any(ins.opname not in _STUB_OPS for ins in dis.get_instructions(code))


def typeclass(fn: F) -> TypeClass[F]:
    """Turn fn into a typeclass; a real body becomes the fallback instance."""
    return TypeClass(fn)
