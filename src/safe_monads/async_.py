"""Conversions between awaitables and Option/Result.

These only translate outcomes; scheduling and cancellation stay with the
caller's event loop.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from safe_monads._logging import get_logger
from safe_monads.errors import EmptyValueError, UnwrapFailureError
from safe_monads.option import Nothing, Option, Some, maybe
from safe_monads.result import Fail, Ok, Result

__all__ = [
    'awaitable_to_maybe',
    'awaitable_to_result',
    'maybe_to_awaitable',
    'result_to_awaitable',
    'try_awaitable_to_maybe',
    'try_awaitable_to_result',
]

_log = get_logger(__name__)


async def awaitable_to_maybe[T](aw: Awaitable[T | None]) -> Option[T]:
    """Await ``aw`` and wrap its result; exceptions propagate."""
    return maybe(await aw)


async def try_awaitable_to_maybe[T](fn: Callable[[], Awaitable[T | None]]) -> Option[T]:
    """Call fn and await it, returning Nothing if it raises.

    Takes a factory rather than an awaitable so that an exception raised while
    creating the awaitable is caught too.

    Example:
        ```python
        user = await try_awaitable_to_maybe(lambda: api.fetch_user(user_id))
        user.match(some=render, none=show_missing)
        ```
    """
    try:
        return maybe(await fn())
    except Exception as e:
        _log.debug('async.caught', error=repr(e))
        return Nothing


async def maybe_to_awaitable[T](opt: Option[T], error: BaseException | None = None) -> T:
    """Return the value of ``opt`` or raise ``error`` when it is empty.

    Raises:
        BaseException: ``error`` if given, else EmptyValueError.
    """
    if isinstance(opt, Some):
        return opt.value
    _log.debug('option.empty_value', error=repr(error))
    if error is not None:
        raise error
    raise EmptyValueError


async def awaitable_to_result[T](aw: Awaitable[T]) -> Result[T, Exception]:
    """Await ``aw``, capturing a raised Exception as Fail."""
    try:
        return Ok(await aw)
    except Exception as e:
        _log.debug('async.caught', error=repr(e))
        return Fail(e)


async def try_awaitable_to_result[T, E](
    aw: Awaitable[T], error_mapper: Callable[[Exception], E]
) -> Result[T, E]:
    """Await ``aw``, turning a raised Exception into Fail(error_mapper(exc)).

    Example:
        ```python
        result = await try_awaitable_to_result(
            client.get(url), lambda e: ApiError(code='ERR_API', message=str(e))
        )
        ```
    """
    try:
        return Ok(await aw)
    except Exception as e:
        _log.debug('async.caught', error=repr(e))
        return Fail(error_mapper(e))


async def result_to_awaitable[T, E](result: Result[T, E]) -> T:
    """Return the Ok value, or raise the failure.

    Raises:
        BaseException: The Fail error itself when it is an exception.
        UnwrapFailureError: When the Fail error is not an exception.
    """
    if isinstance(result, Ok):
        return result.value
    _log.debug('result.unwrap_on_fail', error=repr(result.error))
    if isinstance(result.error, BaseException):
        raise result.error
    raise UnwrapFailureError(result.error)
