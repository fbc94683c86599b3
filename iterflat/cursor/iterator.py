from __future__ import annotations

from collections.abc import Iterable, Iterator

from kungfu import Nothing, Option, Some

from ..producer import Producer


class IterCursor[T](Producer[T]):
    """
    Forward-only cursor over any iterable.

    Fused: after the wrapped iterator is exhausted it is dropped and never
    advanced again, even if it would resume.
    """

    __slots__ = ("_it",)

    _it: Iterator[T] | None

    def __init__(self, source: Iterable[T], /) -> None:
        self._it = iter(source)

    def pull_front(self) -> Option[T]:
        if self._it is None:
            return Nothing()
        for value in self._it:
            return Some(value)
        self._it = None
        return Nothing()


__all__ = ("IterCursor",)
