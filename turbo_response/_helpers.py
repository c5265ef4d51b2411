"""Internal helpers for turbo_response.

Common functions used across multiple combinator modules.
Exported for writing custom combinators over TurboResponse."""

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from .response import Fail


def retag[R](response: Fail[typing.Any]) -> Fail[R]:
    """
    Re-type a Fail at a new success parameter without copying it.

    Safe because Fail never stores a value of its type parameter,
    so the same object stands for Fail[T] and Fail[R] alike.
    """
    return typing.cast("Fail[R]", response)


__all__ = (
    "retag",
)
