"""Failures raised by structural navigation and editing."""

from __future__ import annotations

from emblem_engine.buffer.state import Cursor


class StructuralError(RuntimeError):
    """A structural command could not apply at the given cursor.

    The buffer and its cursor are left as they were before the call.
    """

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


class NoNestedBlock(StructuralError):
    def __init__(self, *, cursor: Cursor | None = None) -> None:
        super().__init__("Nothing is nested beneath this line", cursor=cursor)


class NoEnclosingComment(StructuralError):
    def __init__(self, *, cursor: Cursor | None = None) -> None:
        super().__init__("No enclosing comment block", cursor=cursor)


__all__ = ["StructuralError", "NoNestedBlock", "NoEnclosingComment"]
