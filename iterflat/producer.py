"""
Pull protocol
=============

Producer[T] - takes elements from its front, one pull at a time.
DoubleEndedProducer[T] - also takes elements from its back.

Absence of a next element is a normal result (Nothing), not an error.
Both classes double as Python iterators, so they plug into `for`, `list()`
and itertools directly.
"""

from __future__ import annotations

import typing

from kungfu import Option, Some

from ._types import Pull

if typing.TYPE_CHECKING:
    from .adapter.flatten import Flatten


def _drain[T](pull: Pull[T]) -> list[T]:
    items: list[T] = []
    while True:
        match pull():
            case Some(value):
                items.append(value)
            case _:
                return items


class Producer[T]:
    """
    Forward producer.

    Subclasses implement pull_front(); everything else is derived from it.
    """

    __slots__ = ()

    def pull_front(self) -> Option[T]:
        raise NotImplementedError

    # Iterator protocol

    def __iter__(self) -> Producer[T]:
        return self

    def __next__(self) -> T:
        match self.pull_front():
            case Some(value):
                return value
            case _:
                raise StopIteration

    # Consumers

    def count(self) -> int:
        """Consume the producer, returning how many elements it had left."""
        n = 0
        while True:
            match self.pull_front():
                case Some(_):
                    n += 1
                case _:
                    return n

    def collect(self) -> list[T]:
        """Consume the producer front to back."""
        return _drain(self.pull_front)

    # Extension sugar

    def flatten_ext(self) -> Flatten[typing.Any]:
        """
        Chainable form of flatten(self).

        Example:
            seq([[[1, 2], [3]], [[4]]]).flatten_ext().flatten_ext().collect()
            # [1, 2, 3, 4]
        """
        from .adapter.flatten import flatten
        return flatten(typing.cast(typing.Any, self))


class DoubleEndedProducer[T](Producer[T]):
    """
    Producer that can also be consumed from its back.

    Front and back pulls share one pool of elements: once the two ends meet,
    both report Nothing.
    """

    __slots__ = ()

    def pull_back(self) -> Option[T]:
        raise NotImplementedError

    def collect_back(self) -> list[T]:
        """Consume the producer back to front."""
        return _drain(self.pull_back)

    def rev(self) -> DoubleEndedProducer[T]:
        """Lazy view with front and back swapped."""
        from .adapter.rev import Rev
        return Rev(self)

    def __reversed__(self) -> DoubleEndedProducer[T]:
        return self.rev()


__all__ = ("Producer", "DoubleEndedProducer")
