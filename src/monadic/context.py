"""Context: cooperative cancellation and deadlines for Continuation.

A Context is cancelled at most once. The error stored at that moment
(``Cancelled`` or ``DeadlineExceeded``) is the exact object returned by
``err()`` forever after, and the exact object children inherit when their
parent is cancelled.

Example:
    ```python
    from monadic.context import Context, with_timeout

    ctx, cancel = with_timeout(Context.background(), 0.5)
    try:
        result = continuation.run(ctx)
    finally:
        cancel()
    ```
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

import aiologic

from monadic._internal.sync import OnceCell
from monadic._logging import get_logger
from monadic.errors import Cancelled, ContextError, DeadlineExceeded

__all__ = ['CancelFunc', 'Context', 'with_cancel', 'with_deadline', 'with_timeout']

logger = get_logger(__name__)

type CancelFunc = Callable[[], None]


class Context:
    """A cancellation signal shared by a computation and its caller.

    Attributes:
        _err: Once-cell holding the cancellation error.
        _done: Event set when the context is cancelled.
        _callbacks: Callbacks to run on cancellation; None once cancelled.
        _deadline: ``time.monotonic()`` deadline, if any.
    """

    __slots__ = ('_callbacks', '_deadline', '_done', '_err', '_lock', '_timer', '_unlink')

    def __init__(self, deadline: float | None = None) -> None:
        self._err: OnceCell[ContextError] = OnceCell()
        self._done: aiologic.Event = aiologic.Event()
        self._lock = aiologic.Lock()
        self._callbacks: list[Callable[[], None]] | None = []
        self._deadline = deadline
        self._timer: threading.Timer | None = None
        self._unlink: Callable[[], None] | None = None

    @staticmethod
    def background() -> Context:
        """The root context: never cancelled and without deadline."""
        return _BACKGROUND

    @property
    def deadline(self) -> float | None:
        """The ``time.monotonic()`` deadline, or None."""
        return self._deadline

    def err(self) -> ContextError | None:
        """The cancellation error, or None while the context is live."""
        return self._err.get()

    def done(self) -> bool:
        """Check whether the context has been cancelled."""
        return self._done.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancellation or timeout.

        Returns:
            True if the context was cancelled.
        """
        return self._done.wait(timeout)

    def add_done_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Run callback on cancellation, or right away if already cancelled.

        Callbacks run on the cancelling thread and must not block.

        Returns:
            A function that unregisters the callback.
        """
        with self._lock:
            callbacks = self._callbacks
            if callbacks is not None:
                callbacks.append(callback)
        if callbacks is None:
            callback()
            return _noop

        def remove() -> None:
            with self._lock:
                if self._callbacks is not None and callback in self._callbacks:
                    self._callbacks.remove(callback)

        return remove

    def _cancel(self, error: ContextError) -> None:
        if not self._err.set(error):
            return
        with self._lock:
            callbacks, self._callbacks = self._callbacks or [], None
        if self._timer is not None:
            self._timer.cancel()
        if self._unlink is not None:
            self._unlink()
        self._done.set()
        logger.debug('context.cancelled', error=repr(error))
        for callback in callbacks:
            callback()

    def _child(self, deadline: float | None = None) -> Context:
        """A context cancelled with this one's error when this one is cancelled."""
        if self._deadline is not None and (deadline is None or self._deadline < deadline):
            deadline = self._deadline
        child = Context(deadline)
        if self is not _BACKGROUND:
            child._unlink = self.add_done_callback(lambda: child._cancel(self.err()))  # type: ignore[arg-type]
        return child

    def __repr__(self) -> str:
        if self is _BACKGROUND:
            return 'Context.background()'
        err = self.err()
        return f'Context(err={err!r})' if err is not None else 'Context(<live>)'


def _noop() -> None:
    return None


_BACKGROUND = Context()


def with_cancel(parent: Context) -> tuple[Context, CancelFunc]:
    """Derive a context that is cancelled by the returned function or its parent.

    Returns:
        ``(ctx, cancel)``. Calling cancel more than once is harmless.
    """
    ctx = parent._child()
    return ctx, lambda: ctx._cancel(Cancelled())


def with_deadline(parent: Context, deadline: float) -> tuple[Context, CancelFunc]:
    """Derive a context that expires at a ``time.monotonic()`` deadline.

    The context is cancelled with ``DeadlineExceeded`` at the deadline (or
    the parent's, if earlier), with ``Cancelled`` by the returned function,
    or with the parent's error.
    """
    ctx = parent._child(deadline)
    if parent.deadline is not None and parent.deadline <= deadline:
        # The parent's own timer fires first and propagates its error
        return ctx, lambda: ctx._cancel(Cancelled())
    remaining = deadline - time.monotonic()
    error = DeadlineExceeded(round(max(remaining, 0.0), 6))
    if remaining <= 0:
        ctx._cancel(error)
        return ctx, lambda: ctx._cancel(Cancelled())
    timer = threading.Timer(remaining, ctx._cancel, args=(error,))
    timer.daemon = True
    ctx._timer = timer
    timer.start()
    return ctx, lambda: ctx._cancel(Cancelled())


def with_timeout(parent: Context, seconds: float) -> tuple[Context, CancelFunc]:
    """Derive a context that expires ``seconds`` from now."""
    return with_deadline(parent, time.monotonic() + seconds)
