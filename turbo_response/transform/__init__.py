from .effects import tap, tap_async, tap_fail, tap_fail_async
from .map import map_fail, map_success, swap

__all__ = (
    # Map
    "map_fail",
    "map_success",
    "swap",
    # Effects
    "tap",
    "tap_async",
    "tap_fail",
    "tap_fail_async",
)
