"""
Core type definitions for iterflat.

Aliases shared by the cursor and adapter modules.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Option

# ============================================================================
# Type aliases
# ============================================================================

# Pull = zero-arg step taking one element from one end of a producer
type Pull[T] = Callable[[], Option[T]]

# Nested = outer iterable whose items are iterables themselves
type Nested[T] = Iterable[Iterable[T]]

__all__ = (
    "Pull",
    "Nested",
)
