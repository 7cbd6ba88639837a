"""Structured logging for monadic.

structlog events and stdlib records from other libraries share one
``ProcessorFormatter`` handler. Each event is tagged with the thread that
emitted it, so lines from Future and Continuation workers can be told
apart from the caller's.

Loggers wrap stdlib loggers: until ``configure_logging`` (or
``monadic.init``) runs, the library stays quiet below WARNING.
"""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _add_thread_name(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault('thread', threading.current_thread().name)
    return event_dict


def _run_hooks(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_log_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: S110
            pass
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to every event, whether from structlog or stdlib."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_thread_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Replaces any handlers already on the root logger.

    Args:
        level: Root level name ("DEBUG", "INFO", ...). Unknown names mean INFO.
        json_output: One JSON object per line if True, colourised console
            lines (when stderr is a terminal) if False.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """A structlog logger on top of the stdlib logger ``name``.

    Safe to call at import time; processors are resolved on first use.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def add_log_hook(hook: LogHook) -> None:
    """Call hook with a copy of every event that passes the level filter."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    _log_hooks.clear()
