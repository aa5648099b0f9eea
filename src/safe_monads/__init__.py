"""safe-monads: Option, Result, Either, Reader, State and Writer for Python 3.13+.

Flat imports (preferred):
    from safe_monads import maybe, ok, fail, either, reader, maybe_props
    from safe_monads import Some, Nothing, Ok, Fail, Left, Right, Reader

Submodule imports (for organization):
    from safe_monads.option import Some, Nothing, Option
    from safe_monads.result import Ok, Fail, Result
    from safe_monads.curry import curry2
"""

# Configuration and logging
from safe_monads._config import LibraryConfig, get_config, init
from safe_monads._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Async bridges
from safe_monads.async_ import (
    awaitable_to_maybe,
    awaitable_to_result,
    maybe_to_awaitable,
    result_to_awaitable,
    try_awaitable_to_maybe,
    try_awaitable_to_result,
)
from safe_monads.async_result import AsyncResult

# Currying
from safe_monads.curry import curry2, curry3, curry4, curry5, curry6, curry7

# Decorators
from safe_monads.decorators import safe

# Either
from safe_monads.either import Either, Left, Right, either

# Environment
from safe_monads.env import EnvReader, OsEnvReader, maybe_env

# Errors
from safe_monads.errors import (
    EitherBothError,
    EitherError,
    EitherNeitherError,
    EmptyValueError,
    MonadError,
    UnwrapError,
    UnwrapFailureError,
    UnwrapSuccessError,
)

# Option
from safe_monads.option import Nothing, NothingType, Option, Some, maybe, none, some

# Paths
from safe_monads.paths import maybe_props

# Reader
from safe_monads.reader import Reader, reader

# Result
from safe_monads.result import Fail, Ok, Result, catch_result, fail, ok, sequence

# State and Writer
from safe_monads.state import State, StatePair, state
from safe_monads.writer import Writer, writer

__all__ = [
    'AsyncResult',
    'Either',
    'EitherBothError',
    'EitherError',
    'EitherNeitherError',
    'EmptyValueError',
    'EnvReader',
    'Fail',
    'Left',
    'LibraryConfig',
    'MonadError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OsEnvReader',
    'Reader',
    'Result',
    'Right',
    'Some',
    'State',
    'StatePair',
    'UnwrapError',
    'UnwrapFailureError',
    'UnwrapSuccessError',
    'Writer',
    'add_log_hook',
    'awaitable_to_maybe',
    'awaitable_to_result',
    'catch_result',
    'clear_log_hooks',
    'configure_logging',
    'curry2',
    'curry3',
    'curry4',
    'curry5',
    'curry6',
    'curry7',
    'either',
    'fail',
    'get_config',
    'get_logger',
    'init',
    'maybe',
    'maybe_env',
    'maybe_props',
    'maybe_to_awaitable',
    'none',
    'ok',
    'reader',
    'remove_log_hook',
    'result_to_awaitable',
    'safe',
    'sequence',
    'some',
    'state',
    'try_awaitable_to_maybe',
    'try_awaitable_to_result',
    'writer',
]
