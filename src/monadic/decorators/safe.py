"""@safe: bridge raise-based callables into Result.

``IO.attempt`` is built on it, and it is the usual way to feed library
code that raises into a ``flat_map`` chain.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from monadic.result import Failure, Success

__all__ = ['safe']


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Success[T] | Failure[Exception]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Success[Any] | Failure[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Make a callable return Success(value) or Failure(exception).

    Usable bare (``@safe``) or configured (``@safe(exceptions=(KeyError,))``).
    Only the listed exception types become Failure; anything else keeps
    propagating. The default is ``(Exception,)``.

    Example:
        ```python
        @safe(exceptions=(KeyError,))
        def price_of(sku: str) -> int:
            return PRICES[sku]

        succeed('sku-1').flat_map(price_of)   # Success(value=...) or Failure(error=KeyError('sku-1'))
        ```
    """
    caught = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def to_result(
        wrapped: Callable[..., Any],
        _instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[Any] | Failure[Any]:
        try:
            value = wrapped(*args, **kwargs)
        except caught as exc:
            return Failure(exc)
        return Success(value)

    return to_result if func is None else to_result(func)
