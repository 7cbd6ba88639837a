"""aiologic-backed once primitives.

aiologic locks work from threads and from async code alike, so the gates
below stay correct whichever side reaches them first.
"""

from __future__ import annotations

from collections.abc import Callable

import aiologic

__all__ = ['Once', 'OnceCell']


class Once:
    """An execute-once gate.

    ``call_once`` runs its function for the first caller only. Callers that
    race the first one block on the lock until it has finished, so nobody
    returns before the guarded work is done. If fn raises, the exception
    propagates and the gate stays open for the next caller.

    Examples:
        >>> gate = Once()
        >>> gate.call_once(lambda: print('ran'))
        ran
        True
        >>> gate.call_once(lambda: print('ran'))
        False
    """

    __slots__ = ('_done', '_lock')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._done = False

    def call_once(self, fn: Callable[[], object]) -> bool:
        """Run fn unless some caller already has.

        Returns:
            True for the single caller that ran fn, False for everyone else.
        """
        if self._done:
            return False

        with self._lock:
            if self._done:
                return False
            fn()
            self._done = True
            return True

    def is_done(self) -> bool:
        """Check whether the gate has been passed."""
        return self._done


class OnceCell[T]:
    """A cell that can be written to exactly once.

    ``get()`` is non-blocking and returns None while the cell is empty.
    Storing None is allowed; use ``is_set()`` to tell the cases apart.

    Examples:
        >>> cell: OnceCell[int] = OnceCell()
        >>> cell.set(42)
        True
        >>> cell.set(100)
        False
        >>> cell.get()
        42
    """

    __slots__ = ('_is_set', '_lock', '_value')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._value: T | None = None
        self._is_set = False

    def get(self) -> T | None:
        """Get the value if set, otherwise None."""
        return self._value if self._is_set else None

    def set(self, value: T) -> bool:
        """Set the value if not already set.

        Returns:
            True if the value was set, False if already set.
        """
        if self._is_set:
            return False

        with self._lock:
            if self._is_set:
                return False
            self._value = value
            self._is_set = True
            return True

    def is_set(self) -> bool:
        """Check if the value has been set."""
        return self._is_set
