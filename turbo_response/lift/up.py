"""
Подъем значений в TurboResponse.

Functions converting kungfu Results, Optionals and exception-based code
into Success/Fail.
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import TurboException
from .._types import Thunk
from ..response import Fail, Success, TurboResponse

log = logging.getLogger(__name__)


def from_result[T, E](
    value: Result[T, E],
    title: str | None = None,
    message: str | None = None,
) -> TurboResponse[T]:
    """
    Convert kungfu Result: Ok(v) -> Success(v), Error(e) -> Fail(e).

    Example:
        from turbo_response import lift as L

        L.up.from_result(Ok(42), title="Loaded")  # Success(42, "Loaded")
    """
    match value:
        case Ok(v):
            return Success(v, title, message)
        case Error(e):
            return Fail(e, title, message)


async def from_lazy[T, E](
    interp: LazyCoroResult[T, E],
    title: str | None = None,
    message: str | None = None,
) -> TurboResponse[T]:
    """
    Run a kungfu LazyCoroResult and convert its outcome.

    **When to use:** at the seam between a combinators/kungfu pipeline
    and code that reports through title/message.
    """
    return from_result(await interp(), title, message)


def from_optional[T](
    value: T | None,
    *,
    error: Thunk[object],
    title: str | None = None,
    message: str | None = None,
) -> TurboResponse[T]:
    """
    Convert Optional. None becomes Fail(error()).

    NOTE: error is a thunk (zero-arg callable) to avoid computing
          the error when value is present.
    """
    if value is None:
        return Fail(error(), title, message)
    return Success(value, title, message)


def _fail_from_exception[T](
    exc: Exception,
    on_error: Callable[[Exception], object] | None,
    title: str | None,
    message: str | None,
) -> Fail[T]:
    stack_trace = "".join(traceback.format_exception(exc))
    error: object = exc

    if isinstance(exc, TurboException):
        if exc.has_error:
            error = exc.error
        title = title if title is not None else exc.title
        message = message or exc.message
        stack_trace = exc.stack_trace or stack_trace

    if on_error is not None:
        error = on_error(exc)

    log.debug("catching: %s converted to Fail", type(exc).__name__)
    return Fail(error, title, message or str(exc), stack_trace)


def catching[T](
    thunk: Thunk[T],
    *,
    on_error: Callable[[Exception], object] | None = None,
    title: str | None = None,
    message: str | None = None,
) -> TurboResponse[T]:
    """
    Execute sync thunk, catch exceptions and convert to Fail.

    **When to use:** Bridge between exception-based code and responses.

    Example:
        from turbo_response import lift as L
        import json

        L.up.catching(
            lambda: json.loads(raw),
            on_error=lambda e: ParseError(str(e)),
            title="Invalid payload",
        )

    The Fail gets the formatted traceback as stack_trace and str(exc) as
    message unless one is given. A raised TurboException contributes its
    own error/title/message/stack_trace.

    NOTE: Catches all Exception subclasses. For specific exceptions,
          use try/except manually.
    """
    try:
        value = thunk()
    except Exception as exc:
        return _fail_from_exception(exc, on_error, title, message)
    return Success(value, title, message)


async def catching_async[T](
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], object] | None = None,
    title: str | None = None,
    message: str | None = None,
) -> TurboResponse[T]:
    """Async version of catching() for code that raises instead of returning responses."""
    try:
        value = await thunk()
    except Exception as exc:
        return _fail_from_exception(exc, on_error, title, message)
    return Success(value, title, message)


__all__ = (
    "from_result",
    "from_lazy",
    "from_optional",
    "catching",
    "catching_async",
)
