"""Unwrapping and bridges to exceptions and kungfu Result."""

from __future__ import annotations

import logging

import pytest
from kungfu import Error, LazyCoroResult, Ok, Result

from turbo_response import (
    Fail,
    Success,
    TurboException,
    catching,
    catching_async,
    fail,
    from_lazy,
    from_optional,
    from_result,
    lift as L,
    success,
    to_exception,
    to_result,
    unwrap,
    unwrap_or,
    unwrap_or_compute,
)

pytestmark = pytest.mark.unit


# ============================================================================
# unwrap family
# ============================================================================


def test_unwrap_success() -> None:
    assert unwrap(success(7)) == 7


def test_unwrap_raises_stored_exception_itself() -> None:
    err = ValueError("x")
    with pytest.raises(ValueError) as info:
        unwrap(fail(err))
    assert info.value is err


def test_unwrap_wraps_non_exception_error() -> None:
    payload = {"code": 404}
    with pytest.raises(TurboException) as info:
        unwrap(fail(payload, "Not found", "No such user", "st"))
    exc = info.value
    assert exc.error is payload
    assert (exc.title, exc.message, exc.stack_trace) == ("Not found", "No such user", "st")


def test_unwrap_or() -> None:
    assert unwrap_or(fail("e"), 99) == 99
    assert unwrap_or(success(7), 99) == 7


def test_unwrap_or_compute_is_lazy() -> None:
    calls: list[int] = []

    def compute() -> int:
        calls.append(1)
        return 99

    assert unwrap_or_compute(fail("e"), compute) == 99
    assert calls == [1]

    def never() -> int:
        raise AssertionError("never")

    assert unwrap_or_compute(success(7), never) == 7


# ============================================================================
# TurboException bridge
# ============================================================================


def test_to_exception_from_fail() -> None:
    exc = to_exception(fail("e", "T", "M", "st"))
    assert isinstance(exc, TurboException)
    assert (exc.error, exc.title, exc.message, exc.stack_trace) == ("e", "T", "M", "st")


def test_to_exception_rejects_success() -> None:
    with pytest.raises(TypeError):
        to_exception(success(1))


def test_catching_success() -> None:
    assert catching(lambda: 1 + 1, title="Sum") == Success(2, "Sum")


def test_catching_converts_exception() -> None:
    def parse() -> int:
        return int("nope")

    r = catching(parse, title="Invalid number")
    assert isinstance(r, Fail)
    assert isinstance(r.error, ValueError)
    assert r.title == "Invalid number"
    assert r.message == str(r.error)
    assert r.stack_trace is not None
    assert "ValueError" in r.stack_trace


def test_catching_applies_on_error() -> None:
    def boom() -> int:
        raise KeyError("id")

    r = catching(boom, on_error=lambda e: type(e).__name__, message="Lookup failed")
    assert isinstance(r, Fail)
    assert r.error == "KeyError"
    assert r.message == "Lookup failed"


def test_catching_unpacks_turbo_exception() -> None:
    def boom() -> int:
        raise TurboException(error=404, title="Missing", message="No user", stack_trace="st")

    r = catching(boom)
    assert r == Fail(404, "Missing", "No user", "st")


def test_catching_does_not_catch_base_exceptions() -> None:
    def stop() -> int:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        catching(stop)


@pytest.mark.asyncio
async def test_catching_async() -> None:
    async def ok() -> str:
        return "done"

    async def boom() -> str:
        raise RuntimeError("down")

    assert await catching_async(ok) == success("done")
    r = await catching_async(boom, title="Service")
    assert isinstance(r, Fail)
    assert isinstance(r.error, RuntimeError)
    assert (r.title, r.message) == ("Service", "down")


def test_from_optional() -> None:
    assert from_optional(5, error=lambda: "missing") == success(5)
    assert from_optional(None, error=lambda: "missing", title="Lookup") == fail("missing", "Lookup")


def test_from_optional_error_is_lazy() -> None:
    def never() -> object:
        raise AssertionError("must not be called")

    assert from_optional(0, error=never) == success(0)


# ============================================================================
# kungfu interop
# ============================================================================


def test_from_result() -> None:
    assert from_result(Ok(1), "Loaded") == success(1, "Loaded")
    assert from_result(Error("e"), "Oops") == fail("e", "Oops")


def test_to_result() -> None:
    match to_result(success(1, "dropped")):
        case Ok(value):
            assert value == 1
        case Error():
            pytest.fail("expected Ok")

    match to_result(fail("e", "dropped")):
        case Error(error):
            assert error == "e"
        case Ok():
            pytest.fail("expected Error")


@pytest.mark.asyncio
async def test_from_lazy() -> None:
    async def run_ok() -> Result[int, str]:
        return Ok(42)

    async def run_err() -> Result[int, str]:
        return Error("nope")

    assert await from_lazy(LazyCoroResult(run_ok), title="Fetched") == success(42, "Fetched")
    assert await from_lazy(LazyCoroResult(run_err)) == fail("nope")


def test_namespaces() -> None:
    assert L.up.from_result is from_result
    assert L.down.unwrap is unwrap


# ============================================================================
# Logging
# ============================================================================


def test_unwrap_logs_before_raising(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="turbo_response"):
        with pytest.raises(TurboException):
            unwrap(fail("plain"))
    assert "unwrap: raising str from Fail" in caplog.text


def test_catching_logs_conversion(caplog: pytest.LogCaptureFixture) -> None:
    def boom() -> int:
        raise ValueError("bad")

    with caplog.at_level(logging.DEBUG, logger="turbo_response"):
        catching(boom)
    assert "catching: ValueError converted to Fail" in caplog.text


@pytest.mark.asyncio
async def test_catching_async_logs_conversion(caplog: pytest.LogCaptureFixture) -> None:
    async def boom() -> int:
        raise RuntimeError("down")

    with caplog.at_level(logging.DEBUG, logger="turbo_response"):
        await catching_async(boom)
    assert "catching: RuntimeError converted to Fail" in caplog.text


def test_unwrap_same_fail_twice_raises_same_object() -> None:
    err = ValueError("x")
    f = fail(err)
    for _ in range(2):
        with pytest.raises(ValueError) as info:
            unwrap(f)
        assert info.value is err
    assert f.error is err
