"""AsyncResult: a chainable Result across await boundaries.

AsyncResult wraps an ``Awaitable[Result[T, E]]``. Every transformation returns
a new AsyncResult, so a pipeline of sync and async steps reads like a plain
Result chain and is awaited once at the end.

Example:
    ```python
    async def fetch_user(user_id: int) -> Result[User, ApiError]: ...

    profile = await (
        AsyncResult(fetch_user(1))
        .map(lambda user: user.profile_id)
        .flat_map_async(fetch_profile)
        .map_fail(str)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator, Iterable
from typing import Any

import anyio

from safe_monads._logging import get_logger
from safe_monads.async_ import awaitable_to_result
from safe_monads.result import Fail, Ok, Result, sequence

__all__ = ['AsyncResult']

_log = get_logger(__name__)


class AsyncResult[T, E]:
    """Awaitable wrapper around a pending Result.

    Note:
        An AsyncResult built on a coroutine can only be awaited once, like the
        coroutine itself. Wrap a Task or Future to await it several times.

    Examples:
        >>> async def main():
        ...     return await AsyncResult.ok(5).map(lambda x: x * 2)
        >>> anyio.run(main)
        Ok(value=10)
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self._awaitable.__await__()

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'

    # --- Constructors ---

    @classmethod
    def ok(cls, value: T) -> AsyncResult[T, Any]:
        """AsyncResult that resolves to Ok(value)."""
        return cls.from_result(Ok(value))

    @classmethod
    def fail(cls, error: E) -> AsyncResult[Any, E]:
        """AsyncResult that resolves to Fail(error)."""
        return cls.from_result(Fail(error))

    @classmethod
    def from_result(cls, result: Result[T, E] | Awaitable[Result[T, E]]) -> AsyncResult[T, E]:
        """Wrap a Result, or an awaitable that produces one."""
        if isinstance(result, Ok | Fail):

            async def _ready() -> Result[T, E]:
                return result

            return cls(_ready())
        return cls(result)

    @classmethod
    def from_awaitable(cls, aw: Awaitable[T]) -> AsyncResult[T, Exception]:
        """Wrap a plain awaitable; a raised Exception becomes Fail."""
        return cls(awaitable_to_result(aw))

    @classmethod
    def all[U, F](cls, items: Iterable[AsyncResult[U, F]]) -> AsyncResult[list[U], F]:
        """Await every item concurrently and collect the values in order.

        Resolves to the first Fail by position when any item failed.
        """
        pending = tuple(items)

        async def _gathered() -> Result[list[U], F]:
            results: list[Any] = [None] * len(pending)

            async def _collect(index: int, item: AsyncResult[U, F]) -> None:
                results[index] = await item

            async with anyio.create_task_group() as tg:
                for index, item in enumerate(pending):
                    tg.start_soon(_collect, index, item)

            return sequence(results)

        return cls(_gathered())

    # --- Transformations ---

    def map[U](self, fn: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value."""

        async def _mapped() -> Result[U, E]:
            return (await self).map(fn)

        return AsyncResult(_mapped())

    def map_fail[F](self, fn: Callable[[E], F]) -> AsyncResult[T, F]:
        """Apply a sync function to the Fail error."""

        async def _mapped() -> Result[T, F]:
            return (await self).map_fail(fn)

        return AsyncResult(_mapped())

    def flat_map[U](self, fn: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain a sync function that returns a Result."""

        async def _chained() -> Result[U, E]:
            return (await self).flat_map(fn)

        return AsyncResult(_chained())

    def map_async[U](self, fn: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E | Exception]:
        """Apply an async function to the Ok value.

        An Exception raised by fn becomes Fail.
        """

        async def _mapped() -> Result[U, E | Exception]:
            return await (await self).flat_map_awaitable(fn)

        return AsyncResult(_mapped())

    def flat_map_async[U](
        self, fn: Callable[[T], Awaitable[Result[U, E]]]
    ) -> AsyncResult[U, E | Exception]:
        """Chain an async function that returns a Result.

        An Exception raised by fn becomes Fail.
        """

        async def _chained() -> Result[U, E | Exception]:
            result = await self
            if isinstance(result, Fail):
                return result
            try:
                return await fn(result.value)
            except Exception as e:
                _log.debug('async_result.caught', error=repr(e))
                return Fail(e)

        return AsyncResult(_chained())

    def chain[U](self, fn: Callable[[T], AsyncResult[U, E]]) -> AsyncResult[U, E]:
        """Chain a function that returns another AsyncResult."""

        async def _chained() -> Result[U, E]:
            result = await self
            if isinstance(result, Fail):
                return result
            return await fn(result.value)

        return AsyncResult(_chained())

    # --- Leaving the chain ---

    def match[R](
        self, *, ok: Callable[[T], R], fail: Callable[[E], R]
    ) -> Coroutine[Any, Any, R]:
        """Coroutine producing the result of the handler for the outcome."""

        async def _matched() -> R:
            return (await self).match(ok=ok, fail=fail)

        return _matched()

    def match_async[R](
        self, *, ok: Callable[[T], Awaitable[R]], fail: Callable[[E], Awaitable[R]]
    ) -> Coroutine[Any, Any, R]:
        """Like `match()`, with async handlers."""

        async def _matched() -> R:
            result = await self
            if isinstance(result, Ok):
                return await ok(result.value)
            return await fail(result.error)

        return _matched()

    async def to_awaitable(self) -> Result[T, E]:
        """Await the wrapped Result. Equivalent to awaiting self."""
        return await self
