"""Continuation: a context-aware computation raced against cancellation.

``run(ctx)`` executes the computation on a worker thread and returns
whichever comes first: the worker's Result, or ``Failure(ctx.err())`` once
the context is cancelled. The worker is never killed. It may watch
``ctx`` and stop early; otherwise it finishes in the background and its
Result is dropped. When completion and cancellation land together either
outcome may be returned.

Example:
    ```python
    from monadic.context import Context, with_timeout
    from monadic.continuation import Continuation
    from monadic.result import Success

    slow = Continuation(lambda ctx: Success(crunch(ctx)))
    ctx, cancel = with_timeout(Context.background(), 0.1)
    slow.map(lambda x: x + 1).run(ctx)   # Failure(DeadlineExceeded(...)) if crunch is slow
    cancel()
    ```
"""

from __future__ import annotations

from collections.abc import Callable

import aiologic
import anyio.to_thread

from monadic._internal.worker import spawn_worker
from monadic._logging import get_logger
from monadic.context import Context
from monadic.errors import ContextError
from monadic.result import Failure, Result, Success

__all__ = ['Continuation']

logger = get_logger(__name__)


class Continuation[T]:
    """Wraps a computation ``(Context) -> Result[T, Exception | ContextError]``."""

    __slots__ = ('_run',)

    def __init__(self, run: Callable[[Context], Result[T, Exception | ContextError]]) -> None:
        self._run = run

    @staticmethod
    def of[V](value: V) -> Continuation[V]:
        """A Continuation that succeeds with value unless its context is cancelled."""
        return Continuation(lambda _ctx: Success(value))

    def run(self, ctx: Context) -> Result[T, Exception | ContextError]:
        """Run the computation, returning early if ctx is cancelled.

        Args:
            ctx: Context whose cancellation or deadline cuts the wait short.

        Returns:
            The computation's Result, or Failure carrying exactly the
            error object ``ctx.err()`` returns.
        """
        err = ctx.err()
        if err is not None:
            logger.debug('continuation.skipped', error=repr(err))
            return Failure(err)

        wake = aiologic.Event()
        outcome: list[Result[T, Exception | ContextError]] = []

        def work() -> None:
            try:
                result = self._run(ctx)
            except BaseException as exc:  # noqa: BLE001
                logger.exception('continuation.action_raised', error=repr(exc))
                result = Failure(exc)
            outcome.append(result)
            wake.set()

        unregister = ctx.add_done_callback(wake.set)
        try:
            worker = spawn_worker('continuation', work)
            logger.debug('continuation.started', worker=worker.name)
            wake.wait()
        finally:
            unregister()

        if outcome:
            return outcome[0]

        err = ctx.err()
        logger.debug('continuation.cancelled', worker=worker.name, error=repr(err))
        return Failure(err)  # type: ignore[arg-type]

    async def run_async(self, ctx: Context) -> Result[T, Exception | ContextError]:
        """Run from async code without blocking the event loop.

        Cancelling the awaiting task abandons the wait; cancel ``ctx`` to
        also signal the computation.
        """
        return await anyio.to_thread.run_sync(self.run, ctx, abandon_on_cancel=True)

    def map[U](self, f: Callable[[T], U]) -> Continuation[U]:
        """Transform the value; cancellation is re-checked when run."""

        def run(ctx: Context) -> Result[U, Exception | ContextError]:
            result = self.run(ctx)
            if isinstance(result, Failure):
                return result
            return Success(f(result.value))

        return Continuation(run)

    def flat_map[U](self, f: Callable[[T], Continuation[U]]) -> Continuation[U]:
        """Run f's Continuation after this one, under the same context."""

        def run(ctx: Context) -> Result[U, Exception | ContextError]:
            result = self.run(ctx)
            if isinstance(result, Failure):
                return result
            return f(result.value).run(ctx)

        return Continuation(run)

    def __repr__(self) -> str:
        return f'Continuation({self._run!r})'
