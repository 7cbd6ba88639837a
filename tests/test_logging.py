"""Tests for logging configuration and hooks."""

from __future__ import annotations

import logging
from typing import Any

import pytest
from monadic import Context, Continuation, Future, with_cancel
from monadic._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

pytestmark = pytest.mark.usefixtures('restore_logging')


def capture() -> tuple[list[dict[str, Any]], Any]:
    received: list[dict[str, Any]] = []

    def hook(event_dict: dict[str, Any]) -> None:
        received.append(event_dict)

    return received, hook


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received, hook = capture()
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'

    def test_hook_gets_a_copy(self) -> None:
        """Mutating the dict a hook receives does not affect other hooks."""
        received, second = capture()

        def vandal(event_dict: dict[str, Any]) -> None:
            event_dict['event'] = 'changed'

        configure_logging(level='DEBUG')
        add_log_hook(vandal)
        add_log_hook(second)
        get_logger('test').info('original')

        assert received[0]['event'] == 'original'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        received, hook = capture()
        configure_logging(level='DEBUG')
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(received) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(received) == 1

    def test_clear_hooks(self) -> None:
        """clear_log_hooks() removes all hooks."""
        received, hook = capture()
        configure_logging(level='DEBUG')
        add_log_hook(hook)
        clear_log_hooks()
        get_logger('test').info('ignored')
        assert received == []

    def test_failing_hook_does_not_break_logging(self) -> None:
        """A hook that raises is skipped."""
        received, hook = capture()

        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failed')

        configure_logging(level='DEBUG')
        add_log_hook(broken)
        add_log_hook(hook)
        get_logger('test').info('still logged')
        assert len(received) == 1

    def test_level_filters_events(self) -> None:
        """Events below the configured level never reach hooks."""
        received, hook = capture()
        configure_logging(level='WARNING')
        add_log_hook(hook)

        logger = get_logger('test')
        logger.debug('hidden')
        logger.warning('shown')

        assert [e['event'] for e in received] == ['shown']


class TestConfigureLogging:
    """Tests for configure_logging output setup."""

    def test_sets_root_level_and_handler(self) -> None:
        """configure_logging installs one handler at the given level."""
        configure_logging(level='ERROR', json_output=False)
        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert len(root.handlers) == 1

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON output renders the event as a JSON object on stderr."""
        configure_logging(level='INFO', json_output=True)
        get_logger('test').info('json event', answer=42)
        err = capsys.readouterr().err
        assert '"event": "json event"' in err
        assert '"answer": 42' in err


class TestContainerEvents:
    """The worker-backed containers log their lifecycle."""

    def test_future_events(self) -> None:
        """A Future logs its start and completion at debug level."""
        received, hook = capture()
        configure_logging(level='DEBUG')
        add_log_hook(hook)

        Future.of(1).wait(timeout=5)

        by_event = {e['event']: e for e in received}
        assert 'future.started' in by_event
        assert by_event['future.completed']['thread'].startswith('monadic-future-')

    def test_continuation_cancel_event(self) -> None:
        """A cancelled Continuation logs why it stopped waiting."""
        received, hook = capture()
        configure_logging(level='DEBUG')
        add_log_hook(hook)

        ctx, cancel = with_cancel(Context.background())
        cancel()
        Continuation.of(1).run(ctx)

        skipped = [e for e in received if e['event'] == 'continuation.skipped']
        assert len(skipped) == 1
        assert skipped[0]['logger'] == 'monadic.continuation'
