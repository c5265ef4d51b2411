"""Chain combinators

Monadic bind over TurboResponse, sync and async."""

from __future__ import annotations

from collections.abc import Callable

from .._helpers import retag
from .._types import AsyncHandler
from ..response import Fail, Success, TurboResponse


def and_then[T, R](
    response: TurboResponse[T],
    fn: Callable[[T], TurboResponse[R]],
) -> TurboResponse[R]:
    """
    Monadic bind (>>=).

    - On Success: returns fn(result) as-is, no extra wrapping
    - On Fail: short-circuit, same Fail object
    """
    match response:
        case Success(value):
            return fn(value)
        case Fail():
            return retag(response)


async def and_then_async[T, R](
    response: TurboResponse[T],
    fn: AsyncHandler[T, TurboResponse[R]],
) -> TurboResponse[R]:
    """
    Async bind. Awaits fn(result) once.

    Exceptions raised by fn are not converted to Fail.
    """
    match response:
        case Success(value):
            return await fn(value)
        case Fail():
            return retag(response)


__all__ = ("and_then", "and_then_async")
