from .convert import into_cursor, into_double_ended, seq
from .iterator import IterCursor
from .reversible import ReversibleCursor, SizedReversible
from .sequence import SequenceCursor

__all__ = (
    # Cursors
    "IterCursor",
    "ReversibleCursor",
    "SequenceCursor",
    "SizedReversible",
    # Conversion
    "into_cursor",
    "into_double_ended",
    "seq",
)
