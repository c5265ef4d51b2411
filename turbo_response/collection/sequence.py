"""Sequence combinators

Structure flipping: [TurboResponse[T]] -> TurboResponse[[T]]."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .._helpers import retag
from ..response import Fail, Success, TurboResponse

log = logging.getLogger(__name__)


def sequence[T](responses: Iterable[TurboResponse[T]]) -> TurboResponse[list[T]]:
    """
    Flip structure. First Fail wins and is returned as the same object;
    results gathered so far are dropped. Empty input gives Success([]).
    """
    results: list[T] = []

    for index, response in enumerate(responses):
        match response:
            case Success(value):
                results.append(value)
            case Fail():
                log.debug("sequence: short-circuit on Fail at index %d", index)
                return retag(response)

    return Success(results)


__all__ = ("sequence",)
