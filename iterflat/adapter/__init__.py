from .flatten import DoubleEndedFlatten, Flatten, flatten
from .rev import Rev

__all__ = (
    "DoubleEndedFlatten",
    "Flatten",
    "Rev",
    "flatten",
)
