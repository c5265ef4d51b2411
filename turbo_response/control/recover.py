"""Recover combinators

Turn a Fail into another response using the error."""

from __future__ import annotations

from collections.abc import Callable

from .._types import AsyncHandler
from ..response import Fail, Success, TurboResponse


def recover[T](
    response: TurboResponse[T],
    fn: Callable[[object], TurboResponse[T]],
) -> TurboResponse[T]:
    """On Fail return fn(error), which may fail again. Success passes through."""
    match response:
        case Fail(error):
            return fn(error)
        case Success():
            return response


async def recover_async[T](
    response: TurboResponse[T],
    fn: AsyncHandler[object, TurboResponse[T]],
) -> TurboResponse[T]:
    """Async recover. Exceptions raised by fn propagate unchanged."""
    match response:
        case Fail(error):
            return await fn(error)
        case Success():
            return response


__all__ = ("recover", "recover_async")
