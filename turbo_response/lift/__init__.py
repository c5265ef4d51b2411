"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from turbo_response import lift as L   # Recommended
    from turbo_response import lift        # Explicit

Architecture:
- L.up.*    - подъем значений в TurboResponse
- L.down.*  - опускание TurboResponse в значение

Examples:
    from turbo_response import lift as L

    user = L.up.from_optional(db_row, error=lambda: NotFound(user_id))
    parsed = L.up.catching(lambda: json.loads(raw), title="Invalid payload")
    response = await L.up.from_lazy(fetch_user(42))

    value = L.down.unwrap(response)
    value = L.down.unwrap_or(response, default)
    result = L.down.to_result(response)  # kungfu Result
"""

from __future__ import annotations

from . import down, up
from .down import to_exception, to_result, unwrap, unwrap_or, unwrap_or_compute
from .up import catching, catching_async, from_lazy, from_optional, from_result

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "catching",
    "catching_async",
    "from_lazy",
    "from_optional",
    "from_result",
    # Down
    "to_exception",
    "to_result",
    "unwrap",
    "unwrap_or",
    "unwrap_or_compute",
)
