"""
Опускание TurboResponse в значение.

Unwrapping helpers plus conversion back to kungfu Result and TurboException.
"""

from __future__ import annotations

import logging

from kungfu import Error, Ok, Result

from .._errors import TurboException
from .._types import Thunk
from ..response import Fail, Success, TurboResponse

log = logging.getLogger(__name__)


def unwrap[T](response: TurboResponse[T]) -> T:
    """
    Return result, raise on Fail.

    An exception stored as error is raised as-is, the same object.
    Any other error value is raised inside TurboException(error=value),
    carrying the Fail's title/message/stack_trace.

    NOTE: Raising the stored exception extends its __traceback__, so every
          unwrap() of the same Fail adds frames to it.
    """
    match response:
        case Success(value):
            return value
        case Fail(error, title, message, stack_trace):
            log.debug("unwrap: raising %s from Fail", type(error).__name__)
            if isinstance(error, BaseException):
                raise error
            raise TurboException(
                error=error,
                title=title,
                message=message,
                stack_trace=stack_trace,
            )


def unwrap_or[T](response: TurboResponse[T], default: T) -> T:
    """Return result or default."""
    match response:
        case Success(value):
            return value
        case Fail():
            return default


def unwrap_or_compute[T](response: TurboResponse[T], compute: Thunk[T]) -> T:
    """Return result or compute(). compute runs only on Fail."""
    match response:
        case Success(value):
            return value
        case Fail():
            return compute()


def to_result[T](response: TurboResponse[T]) -> Result[T, object]:
    """
    Convert to kungfu Result. Title/message are dropped.

    Example:
        from turbo_response import lift as L

        L.down.to_result(success(1))  # Ok(1)
    """
    match response:
        case Success(value):
            return Ok(value)
        case Fail(error):
            return Error(error)


def to_exception(response: TurboResponse[object]) -> TurboException:
    """Build TurboException from a Fail. Does not raise it."""
    match response:
        case Fail(error, title, message, stack_trace):
            return TurboException(
                error=error,
                title=title,
                message=message,
                stack_trace=stack_trace,
            )
        case Success():
            raise TypeError("to_exception() expects Fail, got Success")


__all__ = (
    "unwrap",
    "unwrap_or",
    "unwrap_or_compute",
    "to_result",
    "to_exception",
)
