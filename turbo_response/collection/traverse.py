"""Traverse combinators

Monadic traverse over an async handler. Sequential execution."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .._helpers import retag
from .._types import AsyncHandler
from ..response import Fail, Success, TurboResponse

log = logging.getLogger(__name__)


async def traverse[A, R](
    items: Iterable[A],
    fn: AsyncHandler[A, TurboResponse[R]],
) -> TurboResponse[list[R]]:
    """
    Monadic map: A -> TurboResponse[R]. Sequential to preserve effect order.

    fn for the next item is not called until the previous response is
    known. Stops at the first Fail and returns it unchanged.
    """
    results: list[R] = []

    for index, item in enumerate(items):
        response = await fn(item)
        match response:
            case Success(value):
                results.append(value)
            case Fail():
                log.debug("traverse: short-circuit on Fail at index %d", index)
                return retag(response)

    return Success(results)


__all__ = ("traverse",)
