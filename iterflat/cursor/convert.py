"""
Conversion of arbitrary iterables into cursors.

Picks the most capable cursor the object supports:
- Producer            -> itself
- Sequence            -> SequenceCursor (both ends, by index)
- sized + reversible  -> ReversibleCursor (both ends, by iter/reversed)
- any other iterable  -> IterCursor (front only)
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Sequence

from .._errors import NotDoubleEndedError
from ..producer import DoubleEndedProducer, Producer
from .iterator import IterCursor
from .reversible import ReversibleCursor, SizedReversible
from .sequence import SequenceCursor


def into_cursor[T](source: Iterable[T] | Producer[T], /) -> Producer[T]:
    """
    Open a cursor over source.

    Raises TypeError (from iter()) when source is not iterable.
    """
    if isinstance(source, Producer):
        return typing.cast(Producer[T], source)
    if isinstance(source, Sequence):
        return SequenceCursor(typing.cast(Sequence[T], source))
    if isinstance(source, SizedReversible):
        return ReversibleCursor(typing.cast(SizedReversible[T], source))
    return IterCursor(source)


def into_double_ended[T](source: Iterable[T] | Producer[T], /) -> DoubleEndedProducer[T]:
    """Open a cursor over source that supports back pulls, or raise NotDoubleEndedError."""
    cursor = into_cursor(source)
    if not isinstance(cursor, DoubleEndedProducer):
        raise NotDoubleEndedError(source)
    return typing.cast(DoubleEndedProducer[T], cursor)


@typing.overload
def seq[T](source: Sequence[T], /) -> DoubleEndedProducer[T]: ...


@typing.overload
def seq[T](source: Iterable[T], /) -> Producer[T]: ...


def seq[T](source: Iterable[T], /) -> Producer[T]:
    """
    Fluent entry point: lift any iterable into a Producer.

    Example:
        seq([[1, 2], [3]]).flatten_ext().collect()  # [1, 2, 3]
    """
    return into_cursor(source)


__all__ = ("into_cursor", "into_double_ended", "seq")
