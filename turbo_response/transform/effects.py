"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the response: the same object is returned."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from ..response import Fail, Success, TurboResponse


def tap[T](
    response: TurboResponse[T],
    effect: Callable[[T], None],
) -> TurboResponse[T]:
    """Execute sync side effect on success value, pass through unchanged."""
    match response:
        case Success(value):
            effect(value)
        case Fail():
            pass
    return response


def tap_fail[T](
    response: TurboResponse[T],
    effect: Callable[[object], None],
) -> TurboResponse[T]:
    """Execute sync side effect on error, pass through unchanged."""
    match response:
        case Fail(error):
            effect(error)
        case Success():
            pass
    return response


async def tap_async[T](
    response: TurboResponse[T],
    effect: Callable[[T], Awaitable[None]],
) -> TurboResponse[T]:
    match response:
        case Success(value):
            await effect(value)
        case Fail():
            pass
    return response


async def tap_fail_async[T](
    response: TurboResponse[T],
    effect: Callable[[object], Awaitable[None]],
) -> TurboResponse[T]:
    match response:
        case Fail(error):
            await effect(error)
        case Success():
            pass
    return response


__all__ = ("tap", "tap_fail", "tap_async", "tap_fail_async")
