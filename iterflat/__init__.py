"""
Lazy, double-ended flattening of nested sequences.

Pull-based producers built on kungfu's Option: every pull returns Some(value)
or Nothing(), and every producer is also a plain Python iterator.

Architecture:
- Producer / DoubleEndedProducer - the pull protocol (front only / both ends)
- cursor.*  - traversal state over one sequence (IterCursor, SequenceCursor, ReversibleCursor)
- adapter.* - Flatten / DoubleEndedFlatten and the Rev view

Examples:
    from iterflat import flatten, seq

    flatten([[1, 2], [3]]).collect()                  # [1, 2, 3]
    list(reversed(flatten([[1, 2], [3]])))            # [3, 2, 1]
    seq([[[1], [2]], [[3]]]).flatten_ext().flatten_ext().collect()  # [1, 2, 3]
"""

# Core types
from ._types import Nested, Pull

# Pull protocol
from .producer import DoubleEndedProducer, Producer

# Cursors
from . import cursor
from .cursor import (
    IterCursor,
    ReversibleCursor,
    SequenceCursor,
    into_cursor,
    into_double_ended,
    seq,
)

# Adapters
from .adapter import DoubleEndedFlatten, Flatten, Rev, flatten

# Errors
from ._errors import NotDoubleEndedError

__all__ = (
    # Types
    "Nested",
    "Pull",
    # Protocol
    "DoubleEndedProducer",
    "Producer",
    # Cursor module (namespace import)
    "cursor",
    # Cursors
    "IterCursor",
    "ReversibleCursor",
    "SequenceCursor",
    "into_cursor",
    "into_double_ended",
    "seq",
    # Adapters
    "DoubleEndedFlatten",
    "Flatten",
    "Rev",
    "flatten",
    # Errors
    "NotDoubleEndedError",
)
