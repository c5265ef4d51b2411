"""
TurboResponse - Success or Fail with human-readable metadata
============================================================

Closed two-variant union. Both variants carry optional title/message,
so reporting code can read them without matching first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeGuard, final


@final
@dataclass(frozen=True, slots=True)
class Success[T]:
    """Outcome of an operation that produced a value."""

    result: T
    title: str | None = None
    message: str | None = None


@final
@dataclass(frozen=True, slots=True)
class Fail[T]:
    """
    Outcome of an operation that failed.

    T is phantom: a Fail never holds a T, it only has to compose with
    Success[T] inside TurboResponse[T]. The error is opaque and does not
    have to be an exception.
    """

    error: object
    title: str | None = None
    message: str | None = None
    stack_trace: str | None = None


type TurboResponse[T] = Success[T] | Fail[T]


# ============================================================================
# Constructors
# ============================================================================


def success[T](
    result: T,
    title: str | None = None,
    message: str | None = None,
) -> Success[T]:
    """Create Success. Fields are stored verbatim."""
    return Success(result, title, message)


def fail[T](
    error: object,
    title: str | None = None,
    message: str | None = None,
    stack_trace: str | None = None,
) -> Fail[T]:
    """Create Fail. Fields are stored verbatim."""
    return Fail(error, title, message, stack_trace)


# ============================================================================
# Variant inspection
# ============================================================================


def is_success[T](r: TurboResponse[T]) -> TypeGuard[Success[T]]:
    return isinstance(r, Success)


def is_fail[T](r: TurboResponse[T]) -> TypeGuard[Fail[T]]:
    return isinstance(r, Fail)


# ============================================================================
# Field accessors
# ============================================================================


def get_result[T](r: TurboResponse[T]) -> T | None:
    """Result if Success, else None."""
    match r:
        case Success(value):
            return value
        case Fail():
            return None


def get_error[T](r: TurboResponse[T]) -> object | None:
    """Error if Fail, else None."""
    match r:
        case Fail(error):
            return error
        case Success():
            return None


def get_title[T](r: TurboResponse[T]) -> str | None:
    return r.title


def get_message[T](r: TurboResponse[T]) -> str | None:
    return r.message


__all__ = (
    "Success",
    "Fail",
    "TurboResponse",
    "success",
    "fail",
    "is_success",
    "is_fail",
    "get_result",
    "get_error",
    "get_title",
    "get_message",
)
