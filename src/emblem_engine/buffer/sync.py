"""Boundary types for exchanging buffer contents with a host editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from .state import Cursor, Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of text, cursor and selection."""

    text: str
    cursor: Cursor
    selection: Optional[Selection]
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    """How a host pulls engine state and pushes its own edits."""

    def pull_buffer(self) -> BufferMirror:
        """Return the latest snapshot the host should render."""
        ...

    def push_host_edit(self, mirror: BufferMirror) -> None:
        """Adopt text changed by the host (typing, paste, external reload)."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller addresses a row or column outside the buffer."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
