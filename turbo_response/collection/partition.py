"""Partition combinators

Split a batch of responses into results and errors."""

from __future__ import annotations

from collections.abc import Iterable

from ..response import Fail, Success, TurboResponse


def partition[T](
    responses: Iterable[TurboResponse[T]],
) -> tuple[list[T], list[object]]:
    """Separate into (results, errors), input order kept. Never short-circuits."""
    results: list[T] = []
    errors: list[object] = []

    for response in responses:
        match response:
            case Success(value):
                results.append(value)
            case Fail(error):
                errors.append(error)

    return results, errors


__all__ = ("partition",)
