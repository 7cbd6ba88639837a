"""Future: a deferred computation run at most once, on one worker thread.

The action starts on the first ``wait()`` (or ``await``) and never again:
an execute-once gate makes sure concurrent first callers start a single
worker, and every caller sees the same memoized Result.

Example:
    ```python
    from monadic.future import Future
    from monadic.result import Success

    price = Future(lambda: Success(fetch_price()))
    total = price.map(lambda p: p * 3)   # nothing has run yet
    total.wait()                          # runs fetch_price once
    await price                           # async callers share the result
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import aiologic

from monadic._internal.sync import Once
from monadic._internal.worker import spawn_worker
from monadic._logging import get_logger
from monadic.errors import Timeout
from monadic.result import Failure, Result, Success

__all__ = ['Future']

logger = get_logger(__name__)


class Future[T, E]:
    """A one-time asynchronous computation.

    Attributes:
        _action: The wrapped ``() -> Result[T, E]``.
        _gate: Execute-once gate guarding the worker start.
        _done: Event set once the result is stored.
        _result: The memoized Result.
    """

    __slots__ = ('_action', '_done', '_gate', '_result')

    def __init__(self, action: Callable[[], Result[T, E]]) -> None:
        self._action = action
        self._gate = Once()
        self._done: aiologic.Event = aiologic.Event()
        self._result: Result[T, E] | None = None

    @staticmethod
    def of[V](value: V) -> Future[V, object]:
        """A Future that succeeds with value once awaited."""
        return Future(lambda: Success(value))

    @staticmethod
    def completed[V, F](result: Result[V, F]) -> Future[V, F]:
        """A Future that is already done with result; no worker is ever started."""
        future: Future[V, F] = Future(lambda: result)
        future._result = result
        future._gate.call_once(lambda: None)
        future._done.set()
        return future

    def _start(self) -> None:
        self._gate.call_once(self._spawn)

    def _spawn(self) -> None:
        worker = spawn_worker('future', self._execute)
        logger.debug('future.started', worker=worker.name)

    def _execute(self) -> None:
        try:
            result = self._action()
        except BaseException as exc:  # noqa: BLE001
            logger.exception('future.action_raised', error=repr(exc))
            result = Failure(exc)
        self._result = result
        logger.debug('future.completed', success=result.success())
        self._done.set()

    def started(self) -> bool:
        """Check whether the action has been started."""
        return self._gate.is_done()

    def done(self) -> bool:
        """Check whether the result is available."""
        return self._done.is_set()

    def wait(self, timeout: float | None = None) -> Result[T, E | Timeout]:
        """Block until the result is available and return it.

        The first call starts the action; later and concurrent calls only
        wait for it.

        Args:
            timeout: Maximum seconds to block. None waits indefinitely.

        Returns:
            The memoized Result, or Failure(Timeout) if the timeout elapsed
            first. A timed-out wait does not stop the action, and later
            waits still observe its Result.
        """
        self._start()
        if not self._done.wait(timeout):
            logger.debug('future.wait_timeout', timeout=timeout)
            return Failure(Timeout(timeout or 0.0, 'Future.wait'))
        return self._result  # type: ignore[return-value]

    async def _wait_async(self) -> Result[T, E]:
        self._start()
        await self._done
        return self._result  # type: ignore[return-value]

    def __await__(self) -> Generator[Any, None, Result[T, E]]:
        """Support await syntax; the event loop is not blocked."""
        return self._wait_async().__await__()

    def map[U](self, f: Callable[[T], U]) -> Future[U, E]:
        """A new Future transforming this one's value; starts nothing by itself."""

        def action() -> Result[U, E]:
            result = self.wait()
            if isinstance(result, Failure):
                return result
            return Success(f(result.value))

        return Future(action)

    def flat_map[U](self, f: Callable[[T], Future[U, E]]) -> Future[U, E]:
        """A new Future chaining f after this one; starts nothing by itself."""

        def action() -> Result[U, E]:
            result = self.wait()
            if isinstance(result, Failure):
                return result
            return f(result.value).wait()

        return Future(action)

    def __repr__(self) -> str:
        if self.done():
            return f'Future({self._result!r})'
        state = 'running' if self.started() else 'pending'
        return f'Future(<{state}>)'
