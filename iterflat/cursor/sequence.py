from __future__ import annotations

from collections.abc import Sequence

from kungfu import Nothing, Option, Some

from ..producer import DoubleEndedProducer


class SequenceCursor[T](DoubleEndedProducer[T]):
    """
    Two-index cursor over a Sequence. No copy is made.

    Invariant: 0 <= _front <= _back <= len(seq) at construction time.
    Elements in [_front, _back) are still unread.
    """

    __slots__ = ("_seq", "_front", "_back")

    def __init__(self, seq: Sequence[T], /) -> None:
        self._seq = seq
        self._front = 0
        self._back = len(seq)

    def pull_front(self) -> Option[T]:
        if self._front >= self._back:
            return Nothing()
        value = self._seq[self._front]
        self._front += 1
        return Some(value)

    def pull_back(self) -> Option[T]:
        if self._front >= self._back:
            return Nothing()
        self._back -= 1
        return Some(self._seq[self._back])

    def __len__(self) -> int:
        return self._back - self._front


__all__ = ("SequenceCursor",)
