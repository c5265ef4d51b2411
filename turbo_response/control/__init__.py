from .chain import and_then, and_then_async
from .guard import ensure, reject
from .match import fold, maybe_when, when
from .recover import recover, recover_async

__all__ = (
    # Chain
    "and_then",
    "and_then_async",
    # Guard
    "ensure",
    "reject",
    # Match
    "fold",
    "maybe_when",
    "when",
    # Recover
    "recover",
    "recover_async",
)
