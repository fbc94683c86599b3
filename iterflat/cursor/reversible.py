from __future__ import annotations

import typing
from collections.abc import Iterator

from kungfu import Nothing, Option, Some

from ..producer import DoubleEndedProducer


@typing.runtime_checkable
class SizedReversible[T](typing.Protocol):
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[T]: ...
    def __reversed__(self) -> Iterator[T]: ...


class ReversibleCursor[T](DoubleEndedProducer[T]):
    """
    Cursor over a sized, reversible collection that is not a Sequence
    (dict, dict views, OrderedDict).

    Front and back iterators are opened on first use. A shared remaining
    count taken from len() keeps the two ends from crossing.
    """

    __slots__ = ("_source", "_remaining", "_forward", "_backward")

    _forward: Iterator[T] | None
    _backward: Iterator[T] | None

    def __init__(self, source: SizedReversible[T], /) -> None:
        self._source = source
        self._remaining = len(source)
        self._forward = None
        self._backward = None

    def pull_front(self) -> Option[T]:
        if self._remaining <= 0:
            return Nothing()
        if self._forward is None:
            self._forward = iter(self._source)
        self._remaining -= 1
        return Some(next(self._forward))

    def pull_back(self) -> Option[T]:
        if self._remaining <= 0:
            return Nothing()
        if self._backward is None:
            self._backward = reversed(self._source)
        self._remaining -= 1
        return Some(next(self._backward))

    def __len__(self) -> int:
        return self._remaining


__all__ = ("ReversibleCursor", "SizedReversible")
