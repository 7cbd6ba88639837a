"""Worker threads for the deferred containers."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable

from monadic._config import get_config

__all__ = ['spawn_worker']

_worker_ids = itertools.count(1)


def spawn_worker(kind: str, target: Callable[[], None]) -> threading.Thread:
    """Start one named thread running target.

    Args:
        kind: Container kind, used in the thread name (``future``, ``continuation``).
        target: Zero-argument callable run on the new thread.

    Returns:
        The started thread.
    """
    config = get_config()
    thread = threading.Thread(
        target=target,
        name=f'{config.worker_prefix}-{kind}-{next(_worker_ids)}',
        daemon=config.daemon_workers,
    )
    thread.start()
    return thread
