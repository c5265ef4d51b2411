"""Map combinators

Transform one side of a TurboResponse, keep the metadata."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import retag
from ..response import Fail, Success, TurboResponse


def map_success[T, R](
    response: TurboResponse[T],
    fn: Callable[[T], R],
) -> TurboResponse[R]:
    """Functor fmap - apply fn to success value, keep title/message."""
    match response:
        case Success(value, title, message):
            return Success(fn(value), title, message)
        case Fail():
            return retag(response)


def map_fail[T](
    response: TurboResponse[T],
    fn: Callable[[object], object],
) -> TurboResponse[T]:
    """Map over error, keep title/message/stack_trace."""
    match response:
        case Fail(error, title, message, stack_trace):
            return Fail(fn(error), title, message, stack_trace)
        case Success():
            return response


def swap[T](response: TurboResponse[T]) -> TurboResponse[T]:
    """
    Exchange the variants: result becomes error and error becomes result.

    NOTE: This is an unchecked cast between T and the error type. Python
          does not enforce T == E, so the caller vouches that the former
          error is usable as a T. stack_trace is dropped in both directions.
    """
    match response:
        case Success(value, title, message):
            return Fail(value, title, message)
        case Fail(error, title, message):
            return Success(typing.cast("T", error), title, message)


__all__ = ("map_success", "map_fail", "swap")
