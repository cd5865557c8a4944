"""Tests for Result lifting helpers."""

import asyncio

from kungfu import Error, Ok

from storefront import lift as L


async def test_catching_result_passes_results_through():
    async def ok():
        return Ok(1)

    async def err():
        return Error("declined")

    passed = await L.catching_result(ok, on_error=str)
    failed = await L.catching_result(err, on_error=str)

    assert isinstance(passed, Ok) and passed.value == 1
    assert isinstance(failed, Error) and failed.value == "declined"


async def test_catching_result_lifts_exceptions():
    async def boom():
        raise RuntimeError("boom")

    result = await L.catching_result(boom, on_error=lambda e: f"caught: {e}")

    assert isinstance(result, Error)
    assert result.value == "caught: boom"


async def test_with_timeout_raises_timeout_error():
    async def slow():
        await asyncio.sleep(10)
        return Ok(None)

    result = await L.catching_result(L.with_timeout(slow, 0.01), on_error=type)

    assert isinstance(result, Error)
    assert result.value is TimeoutError


async def test_with_timeout_returns_value_in_time():
    async def fast():
        return Ok("done")

    result = await L.catching_result(L.with_timeout(fast, 1), on_error=str)

    assert isinstance(result, Ok)
    assert result.value == "done"
