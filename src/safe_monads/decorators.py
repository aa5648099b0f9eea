"""@safe decorator for turning raised exceptions into Fail."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from safe_monads._logging import get_logger
from safe_monads.result import Fail, Ok

__all__ = ['safe']

_log = get_logger(__name__)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Fail[Exception]]: ...


@overload
def safe[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[..., Any]], Callable[..., Ok[Any] | Fail[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that returns Ok on success and Fail on a caught exception.

    Exceptions outside ``exceptions`` propagate unchanged.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, KeyError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Example:
        ```python
        @safe(exceptions=(ZeroDivisionError,))
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)  # Ok(value=5.0)
        divide(10, 0)  # Fail(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Fail[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            _log.debug('safe.caught', function=wrapped.__qualname__, error=repr(e))
            return Fail(e)

    if func is not None:
        return wrapper(func)
    return wrapper
