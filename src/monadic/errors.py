"""Error types: dual struct+exception for Result payloads and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'Cancelled',
    'CancelledError',
    'ContextError',
    'DeadlineExceeded',
    'DeadlineExceededError',
    'Timeout',
    'TimeoutError',
    'TypeMismatchError',
]


# --- Context Errors ---


class Cancelled(msgspec.Struct, frozen=True, gc=False):
    """Context was cancelled - struct variant for Result[T, Cancelled]."""

    reason: str = 'context cancelled'

    def to_exception(self) -> CancelledError:
        """Convert to exception for raise-based code."""
        return CancelledError(self.reason)


class CancelledError(Exception):
    """Context was cancelled - exception variant."""

    def __init__(self, reason: str = 'context cancelled') -> None:
        self.reason = reason
        super().__init__(reason)

    def to_struct(self) -> Cancelled:
        """Convert to struct for Result-based code."""
        return Cancelled(self.reason)


class DeadlineExceeded(msgspec.Struct, frozen=True, gc=False):
    """Context deadline passed - struct variant for Result[T, DeadlineExceeded]."""

    seconds: float

    def to_exception(self) -> DeadlineExceededError:
        """Convert to exception for raise-based code."""
        return DeadlineExceededError(self.seconds)


class DeadlineExceededError(Exception):
    """Context deadline passed - exception variant."""

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f'context deadline exceeded after {seconds}s')

    def to_struct(self) -> DeadlineExceeded:
        """Convert to struct for Result-based code."""
        return DeadlineExceeded(self.seconds)


type ContextError = Cancelled | DeadlineExceeded


# --- Wait Errors ---


class Timeout(msgspec.Struct, frozen=True, gc=False):
    """A bounded wait gave up - struct variant for Result[T, Timeout]."""

    seconds: float
    operation: str | None = None

    def to_exception(self) -> TimeoutError:
        """Convert to exception for raise-based code."""
        return TimeoutError(self.seconds, self.operation)


class TimeoutError(Exception):  # noqa: A001 - intentionally shadows builtin
    """A bounded wait gave up - exception variant."""

    def __init__(self, seconds: float, operation: str | None = None) -> None:
        self.seconds = seconds
        self.operation = operation
        msg = f'Timeout after {seconds}s'
        if operation:
            msg = f'{operation}: {msg}'
        super().__init__(msg)

    def to_struct(self) -> Timeout:
        """Convert to struct for Result-based code."""
        return Timeout(self.seconds, self.operation)


# --- Construction Errors ---


class TypeMismatchError(TypeError):
    """A Free program was given a functor or interpreter of the wrong shape.

    Raised before any step of the program is interpreted.
    """

    def __init__(self, what: str, value: object) -> None:
        self.what = what
        self.value = value
        super().__init__(f'{what}: got {type(value).__name__} {value!r}')
