"""
Shared test fixtures.
"""

import pytest
from kungfu import Option, Some


def unwrap_or_none[T](opt: Option[T]) -> T | None:
    match opt:
        case Some(value):
            return value
        case _:
            return None


@pytest.fixture
def value_of():
    """Pull result as a plain value: Some(x) -> x, Nothing() -> None."""
    return unwrap_or_none
