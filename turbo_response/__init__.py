"""
TurboResponse: Success or Fail, with title and message.

Explicit success/failure values for composing operations without
exceptions, keeping human-readable context for reporting.

Architecture:
- response      - Success/Fail variants, constructors, predicates, accessors
- control       - matching, chaining, recovery, guards
- transform     - mapping and observation effects
- collection    - sequence/traverse/partition over many responses
- lift          - unwrapping and bridges to exceptions and kungfu Result
"""

import logging

# Core types
from ._types import AsyncHandler, Handler, Predicate, Thunk

# Internal helpers
from . import _helpers

# Response model
from .response import (
    Fail,
    Success,
    TurboResponse,
    fail,
    get_error,
    get_message,
    get_result,
    get_title,
    is_fail,
    is_success,
    success,
)

# Control flow
from .control import (
    and_then,
    and_then_async,
    ensure,
    fold,
    maybe_when,
    recover,
    recover_async,
    reject,
    when,
)

# Transform/effects
from .transform import (
    map_fail,
    map_success,
    swap,
    tap,
    tap_async,
    tap_fail,
    tap_fail_async,
)

# Collection operations
from .collection import partition, sequence, traverse

# Lift helpers
from . import lift
from .lift import (
    catching,
    catching_async,
    from_lazy,
    from_optional,
    from_result,
    to_exception,
    to_result,
    unwrap,
    unwrap_or,
    unwrap_or_compute,
)

# Errors
from ._errors import TurboException

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "AsyncHandler",
    "Handler",
    "Predicate",
    "Thunk",
    # Internal helpers
    "_helpers",
    # Response model
    "Fail",
    "Success",
    "TurboResponse",
    "fail",
    "success",
    "is_fail",
    "is_success",
    "get_error",
    "get_message",
    "get_result",
    "get_title",
    # Control
    "and_then",
    "and_then_async",
    "ensure",
    "fold",
    "maybe_when",
    "recover",
    "recover_async",
    "reject",
    "when",
    # Transform
    "map_fail",
    "map_success",
    "swap",
    "tap",
    "tap_async",
    "tap_fail",
    "tap_fail_async",
    # Collection
    "partition",
    "sequence",
    "traverse",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "catching",
    "catching_async",
    "from_lazy",
    "from_optional",
    "from_result",
    "to_exception",
    "to_result",
    "unwrap",
    "unwrap_or",
    "unwrap_or_compute",
    # Errors
    "TurboException",
)
