"""Tests for awaitable bridges."""

import asyncio

import pytest

from safe_monads import (
    EmptyValueError,
    Fail,
    Nothing,
    Ok,
    Some,
    UnwrapFailureError,
    awaitable_to_maybe,
    awaitable_to_result,
    fail,
    maybe,
    maybe_to_awaitable,
    ok,
    result_to_awaitable,
    try_awaitable_to_maybe,
    try_awaitable_to_result,
)


async def _value(value):
    await asyncio.sleep(0)
    return value


async def _raise(exc):
    await asyncio.sleep(0)
    raise exc


class TestAwaitableToMaybe:
    """Tests for awaitable_to_maybe and try_awaitable_to_maybe."""

    @pytest.mark.asyncio
    async def test_value(self):
        assert await awaitable_to_maybe(_value(1)) == Some(1)

    @pytest.mark.asyncio
    async def test_none(self):
        assert await awaitable_to_maybe(_value(None)) is Nothing

    @pytest.mark.asyncio
    async def test_exception_propagates(self):
        with pytest.raises(ValueError):
            await awaitable_to_maybe(_raise(ValueError('boom')))

    @pytest.mark.asyncio
    async def test_try_value(self):
        assert await try_awaitable_to_maybe(lambda: _value('user')) == Some('user')

    @pytest.mark.asyncio
    async def test_try_exception_is_nothing(self):
        assert await try_awaitable_to_maybe(lambda: _raise(ValueError('boom'))) is Nothing

    @pytest.mark.asyncio
    async def test_try_factory_exception_is_nothing(self):
        def factory():
            raise RuntimeError('failed before awaiting')

        assert await try_awaitable_to_maybe(factory) is Nothing


class TestMaybeToAwaitable:
    """Tests for maybe_to_awaitable."""

    @pytest.mark.asyncio
    async def test_some(self):
        assert await maybe_to_awaitable(maybe(0)) == 0

    @pytest.mark.asyncio
    async def test_nothing_default_error(self):
        with pytest.raises(EmptyValueError):
            await maybe_to_awaitable(Nothing)

    @pytest.mark.asyncio
    async def test_nothing_custom_error(self):
        with pytest.raises(LookupError, match='no user'):
            await maybe_to_awaitable(Nothing, LookupError('no user'))


class TestAwaitableToResult:
    """Tests for awaitable_to_result and result_to_awaitable."""

    @pytest.mark.asyncio
    async def test_ok(self):
        assert await awaitable_to_result(_value(3)) == Ok(3)

    @pytest.mark.asyncio
    async def test_fail(self):
        exc = ValueError('boom')
        result = await awaitable_to_result(_raise(exc))
        assert result == Fail(exc)

    @pytest.mark.asyncio
    async def test_result_to_awaitable_ok(self):
        assert await result_to_awaitable(ok('v')) == 'v'

    @pytest.mark.asyncio
    async def test_result_to_awaitable_exception(self):
        with pytest.raises(KeyError):
            await result_to_awaitable(fail(KeyError('k')))

    @pytest.mark.asyncio
    async def test_result_to_awaitable_plain_error(self):
        with pytest.raises(UnwrapFailureError) as exc_info:
            await result_to_awaitable(fail('not an exception'))
        assert exc_info.value.error == 'not an exception'


class TestTryAwaitableToResult:
    """Tests for try_awaitable_to_result."""

    @pytest.mark.asyncio
    async def test_value(self):
        assert await try_awaitable_to_result(_value(5), str) == Ok(5)

    @pytest.mark.asyncio
    async def test_error_mapped(self):
        def to_code(error: Exception) -> dict:
            return {'code': 'ERR_API', 'message': str(error)}

        result = await try_awaitable_to_result(_raise(ValueError('down')), to_code)
        assert result == Fail({'code': 'ERR_API', 'message': 'down'})

    @pytest.mark.asyncio
    async def test_mapper_not_called_on_success(self):
        calls = []
        await try_awaitable_to_result(_value(None), calls.append)
        assert calls == []


class TestFlatMapAwaitable:
    """Tests for Result.flat_map_awaitable."""

    @pytest.mark.asyncio
    async def test_ok(self):
        assert await ok(2).flat_map_awaitable(_value) == Ok(2)

    @pytest.mark.asyncio
    async def test_ok_exception_becomes_fail(self):
        exc = RuntimeError('save failed')
        assert await ok(2).flat_map_awaitable(lambda _v: _raise(exc)) == Fail(exc)

    @pytest.mark.asyncio
    async def test_fail_skips_fn(self):
        calls = []

        async def record(value):
            calls.append(value)
            return value

        assert await fail('e').flat_map_awaitable(record) == Fail('e')
        assert calls == []
