"""Runtime configuration: RuntimeConfig, init() and environment detection."""

from __future__ import annotations

import os
from dataclasses import dataclass

from monadic._logging import configure_logging, get_logger

__all__ = [
    'RuntimeConfig',
    'get_config',
    'init',
]

logger = get_logger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class RuntimeConfig:
    """Configuration for the worker-backed containers.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or console text (False).
        worker_prefix: Name prefix for Future/Continuation worker threads.
        daemon_workers: Start worker threads as daemons so an abandoned
            computation never blocks interpreter exit.
    """

    log_level: str | None = None
    json_output: bool = True
    worker_prefix: str = 'monadic'
    daemon_workers: bool = True


# Set by init(); get_config() falls back to defaults until then
_config: RuntimeConfig | None = None


def _env_bool(name: str) -> bool | None:
    """Read a boolean environment variable, None when unset or unrecognised."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return None
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logger.warning('config.invalid_env', variable=name, value=raw)
    return None


def _detect_log_level() -> str | None:
    """Detect the log level from MONADIC_LOG_LEVEL."""
    level = os.environ.get('MONADIC_LOG_LEVEL', '').strip().upper()
    return level or None


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    worker_prefix: str | None = None,
    daemon_workers: bool | None = None,
) -> RuntimeConfig:
    """Initialize monadic with the given configuration.

    Arguments left as None are read from ``MONADIC_LOG_LEVEL``,
    ``MONADIC_LOG_JSON`` and ``MONADIC_WORKER_PREFIX``, then fall back to
    the ``RuntimeConfig`` defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = detect.
        json_output: JSON (True) or console (False) log rendering.
        worker_prefix: Name prefix for worker threads.
        daemon_workers: Whether worker threads are daemons.

    Returns:
        The RuntimeConfig that was set.

    Example:
        ```python
        import monadic

        monadic.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    defaults = RuntimeConfig()

    if json_output is None:
        env_json = _env_bool('MONADIC_LOG_JSON')
        json_output = defaults.json_output if env_json is None else env_json

    _config = RuntimeConfig(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_output=json_output,
        worker_prefix=worker_prefix or os.environ.get('MONADIC_WORKER_PREFIX') or defaults.worker_prefix,
        daemon_workers=defaults.daemon_workers if daemon_workers is None else daemon_workers,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> RuntimeConfig:
    """Get the current configuration.

    Returns:
        The RuntimeConfig set by init(), or the defaults if init() was never called.
    """
    if _config is None:
        return RuntimeConfig()
    return _config
