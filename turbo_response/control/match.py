"""Match combinators

Eliminate a TurboResponse into a plain value by handling each variant."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Handler, Thunk
from ..response import Fail, Success, TurboResponse


def when[T, R](
    response: TurboResponse[T],
    *,
    success: Callable[[Success[T]], R],
    fail: Callable[[Fail[T]], R],
) -> R:
    """
    Exhaustive match. Handler receives the whole variant, so title
    and message are readable alongside result/error.
    """
    match response:
        case Success():
            return success(response)
        case Fail():
            return fail(response)


def maybe_when[T, R](
    response: TurboResponse[T],
    *,
    or_else: Thunk[R],
    success: Callable[[Success[T]], R] | None = None,
    fail: Callable[[Fail[T]], R] | None = None,
) -> R:
    """
    Partial match with fallback.

    or_else runs whenever the handler for the actual variant is missing,
    even if the other handler was given.
    """
    match response:
        case Success() if success is not None:
            return success(response)
        case Fail() if fail is not None:
            return fail(response)
        case _:
            return or_else()


def fold[T, R](
    response: TurboResponse[T],
    on_success: Handler[T, R],
    on_fail: Handler[object, R],
) -> R:
    """Like when(), but handlers get the bare result/error."""
    match response:
        case Success(value):
            return on_success(value)
        case Fail(error):
            return on_fail(error)


__all__ = ("when", "maybe_when", "fold")
