"""
Flatten adapter
===============

Lazy flattening of a producer of iterables, one level deep.

State:
- _outer: cursor over the outer source
- _front: inner cursor being drained by front pulls (None once exhausted)
- _back:  inner cursor being drained by back pulls (None once exhausted)

When the outer cursor runs dry, the last unread inner sequence may be open
on the opposite side only, so each direction finishes by pulling from the
other side's cursor before reporting Nothing.

Depth-2+ flattening is flatten(flatten(x)); the adapter is itself a producer.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable, Sequence

from kungfu import Nothing, Option, Some

from .._errors import NotDoubleEndedError
from .._types import Nested, Pull
from ..cursor import into_cursor, into_double_ended
from ..producer import DoubleEndedProducer, Producer

logger = logging.getLogger(__name__)


class Flatten[T](Producer[T]):
    """Forward flatten adapter. Built by flatten() when the outer source is front-only."""

    __slots__ = ("_outer", "_outer_done", "_front", "_back")

    _front: Producer[T] | None
    _back: DoubleEndedProducer[T] | None

    def __init__(self, outer: Producer[Iterable[T]], /) -> None:
        self._outer = outer
        self._outer_done = False
        self._front = None
        self._back = None

    def _next_outer(self, pull: Pull[Iterable[T]]) -> Option[Iterable[T]]:
        # Outer is never queried again once it has reported exhaustion
        if self._outer_done:
            return Nothing()
        match pull():
            case Some() as item:
                return item
            case _:
                self._outer_done = True
                return Nothing()

    def pull_front(self) -> Option[T]:
        while True:
            if self._front is not None:
                match self._front.pull_front():
                    case Some() as hit:
                        return hit
                    case _:
                        # Exhausted cursors are dropped, so back pulls never
                        # trip over an empty forward-only one
                        self._front = None
            match self._next_outer(self._outer.pull_front):
                case Some(inner):
                    self._front = into_cursor(inner)
                case _:
                    break

        if self._back is None:
            return Nothing()
        match self._back.pull_front():
            case Some() as hit:
                logger.debug("outer exhausted, front pull served from back cursor")
                return hit
            case _:
                self._back = None
                return Nothing()


class DoubleEndedFlatten[T](Flatten[T], DoubleEndedProducer[T]):
    """
    Flatten adapter consumable from both ends.

    Built by flatten() when the outer source supports back pulls. Inner
    sequences opened from the back must support back pulls too, and so must
    a front cursor that still holds elements when the back side reaches it;
    otherwise pull_back raises NotDoubleEndedError.

    Example:
        it = flatten([["a1", "a2", "a3"], ["b1", "b2", "b3"]])
        it.pull_front()  # Some("a1")
        it.pull_back()   # Some("b3")
    """

    __slots__ = ()

    def __init__(self, outer: DoubleEndedProducer[Iterable[T]], /) -> None:
        super().__init__(outer)

    def pull_back(self) -> Option[T]:
        outer = typing.cast(DoubleEndedProducer[Iterable[T]], self._outer)
        while True:
            if self._back is not None:
                match self._back.pull_back():
                    case Some() as hit:
                        return hit
                    case _:
                        self._back = None
            match self._next_outer(outer.pull_back):
                case Some(inner):
                    self._back = into_double_ended(inner)
                case _:
                    break

        if self._front is None:
            return Nothing()
        if not isinstance(self._front, DoubleEndedProducer):
            raise NotDoubleEndedError(self._front)
        match typing.cast(DoubleEndedProducer[T], self._front).pull_back():
            case Some() as hit:
                logger.debug("outer exhausted, back pull served from front cursor")
                return hit
            case _:
                self._front = None
                return Nothing()


@typing.overload
def flatten[T](
    source: Sequence[Sequence[T]] | DoubleEndedProducer[Sequence[T]],
    /,
) -> DoubleEndedFlatten[T]: ...


@typing.overload
def flatten[T](source: Nested[T] | Producer[Iterable[T]], /) -> Flatten[T]: ...


def flatten[T](source: Nested[T] | Producer[Iterable[T]], /) -> Flatten[T]:
    """
    Flatten one level of nesting, lazily.

    Returns DoubleEndedFlatten when source can be consumed from the back
    (a Sequence, a sized reversible collection, or a DoubleEndedProducer),
    plain Flatten otherwise. Nothing is read from source until the first pull.

    Example:
        flatten([[1, 2, 3], [4, 5, 6]]).collect()       # [1, 2, 3, 4, 5, 6]
        flatten([[1, 2, 3], [4, 5, 6]]).collect_back()  # [6, 5, 4, 3, 2, 1]
    """
    outer = into_cursor(source)
    if isinstance(outer, DoubleEndedProducer):
        return DoubleEndedFlatten(typing.cast(DoubleEndedProducer[Iterable[T]], outer))
    return Flatten(outer)


__all__ = ("Flatten", "DoubleEndedFlatten", "flatten")
