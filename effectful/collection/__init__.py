from .fold import reduce, reduce_async
from .lift import lift
from .sequence import sequence, sequence_async, sequence_into, sequence_into_async, sequence_props
from .traverse import (
    for_each,
    for_each_async,
    traverse,
    traverse_async,
    traverse_into,
    traverse_into_async,
)

__all__ = (
    # Sync
    "reduce",
    "traverse_into",
    "traverse",
    "sequence_into",
    "sequence",
    "sequence_props",
    "for_each",
    "lift",
    # Async
    "reduce_async",
    "traverse_into_async",
    "traverse_async",
    "sequence_into_async",
    "sequence_async",
    "for_each_async",
)
