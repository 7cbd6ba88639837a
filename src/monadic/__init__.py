"""monadic: composable computation wrappers for Python 3.13+.

Absent, failing, accumulating, stateful, environment-reading, logging,
interpreter-built, deferred, one-shot and cancellable computations all
share the same ``map`` / ``flat_map`` vocabulary and obey the monad laws.

Flat imports (preferred):
    from monadic import Just, Nothing, Success, Failure, Future, Continuation

Submodule imports (for organization):
    from monadic.result import from_tuple
    from monadic.context import with_timeout
    from monadic.typeclass import fmap, bind
"""

# Configuration and logging
from monadic._config import RuntimeConfig, get_config, init
from monadic._logging import configure_logging, get_logger

# Callback vocabulary
from monadic._types import ErrorFunc, Failable, Nilable, Predicate, Transform, is_zero

# Concurrency-bearing containers
from monadic.context import Context, with_cancel, with_deadline, with_timeout
from monadic.continuation import Continuation

# Decorators
from monadic.decorators import safe

# Pure containers
from monadic.either import Either, Left, Right, left, right

# Errors
from monadic.errors import (
    Cancelled,
    CancelledError,
    DeadlineExceeded,
    DeadlineExceededError,
    Timeout,
    TimeoutError,
    TypeMismatchError,
)
from monadic.free import Free, Op, Pure, lift, operation, pure
from monadic.functor import Functor
from monadic.future import Future
from monadic.identity import Identity
from monadic.io import IO
from monadic.list_ import List
from monadic.maybe import Just, Maybe, Nothing, NothingType, empty, just, of_nullable
from monadic.reader import Reader, ask
from monadic.result import ErrorHandler, Failure, Result, Success, fail, from_tuple, succeed
from monadic.state import State, get_state, modify_state, put_state

# Typeclass
from monadic.typeclass import bind, fmap, typeclass
from monadic.validation import Invalid, Valid, Validation, invalid_of, valid_of, validate_all
from monadic.writer import Writer, tell

__all__ = [
    'IO',
    'Cancelled',
    'CancelledError',
    'Context',
    'Continuation',
    'DeadlineExceeded',
    'DeadlineExceededError',
    'Either',
    'ErrorFunc',
    'ErrorHandler',
    'Failable',
    'Failure',
    'Free',
    'Functor',
    'Future',
    'Identity',
    'Invalid',
    'Just',
    'Left',
    'List',
    'Maybe',
    'Nilable',
    'Nothing',
    'NothingType',
    'Op',
    'Predicate',
    'Pure',
    'Reader',
    'Result',
    'Right',
    'RuntimeConfig',
    'State',
    'Success',
    'Timeout',
    'TimeoutError',
    'Transform',
    'TypeMismatchError',
    'Valid',
    'Validation',
    'Writer',
    'ask',
    'bind',
    'configure_logging',
    'empty',
    'fail',
    'fmap',
    'from_tuple',
    'get_config',
    'get_logger',
    'get_state',
    'init',
    'invalid_of',
    'is_zero',
    'just',
    'left',
    'lift',
    'modify_state',
    'of_nullable',
    'operation',
    'pure',
    'put_state',
    'right',
    'safe',
    'succeed',
    'tell',
    'typeclass',
    'valid_of',
    'validate_all',
    'with_cancel',
    'with_deadline',
    'with_timeout',
]
