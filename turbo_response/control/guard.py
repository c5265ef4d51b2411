"""
Guard combinators
=================

Валидация значения Success через предикат.
"""

from __future__ import annotations

from .._types import Predicate
from ..response import Fail, Success, TurboResponse


def ensure[T](
    response: TurboResponse[T],
    predicate: Predicate[T],
    error: object,
) -> TurboResponse[T]:
    """
    Turn Success into Fail if value FAILS validation check.

    New Fail keeps title/message, has no stack_trace.
    Predicate is not evaluated on Fail.
    """
    match response:
        case Success(value, title, message) if not predicate(value):
            return Fail(error, title, message)
        case _:
            return response


def reject[T](
    response: TurboResponse[T],
    predicate: Predicate[T],
    error: object,
) -> TurboResponse[T]:
    """Turn Success into Fail if value MATCHES condition. Dual of ensure."""
    match response:
        case Success(value, title, message) if predicate(value):
            return Fail(error, title, message)
        case _:
            return response


__all__ = ("ensure", "reject")
