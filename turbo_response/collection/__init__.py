from .partition import partition
from .sequence import sequence
from .traverse import traverse

__all__ = (
    "partition",
    "sequence",
    "traverse",
)
