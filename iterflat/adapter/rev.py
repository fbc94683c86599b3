from __future__ import annotations

from kungfu import Option

from ..producer import DoubleEndedProducer


class Rev[T](DoubleEndedProducer[T]):
    """Reversed view over a double-ended producer. Shares state with it."""

    __slots__ = ("_inner",)

    def __init__(self, inner: DoubleEndedProducer[T], /) -> None:
        self._inner = inner

    def pull_front(self) -> Option[T]:
        return self._inner.pull_back()

    def pull_back(self) -> Option[T]:
        return self._inner.pull_front()

    def rev(self) -> DoubleEndedProducer[T]:
        return self._inner


__all__ = ("Rev",)
