"""
Core type definitions for turbo_response.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a success value
type Predicate[T] = Callable[[T], bool]

# Handler = plain function over a payload
type Handler[A, R] = Callable[[A], R]

# AsyncHandler = function over a payload producing something to await
type AsyncHandler[A, R] = Callable[[A], Awaitable[R]]

# Thunk = zero-arg callable, evaluated lazily
type Thunk[R] = Callable[[], R]

__all__ = (
    "Predicate",
    "Handler",
    "AsyncHandler",
    "Thunk",
)
