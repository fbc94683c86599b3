from __future__ import annotations


class NotDoubleEndedError(TypeError):
    """Backward pull reached a sequence that only supports forward traversal."""

    type_name: str

    def __init__(self, obj: object) -> None:
        self.type_name = type(obj).__name__
        super().__init__(f"{self.type_name} cannot be consumed from the back")


__all__ = ("NotDoubleEndedError",)
