"""Linear undo/redo history for structural edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .state import Cursor


@dataclass(frozen=True, slots=True)
class UndoEntry:
    """Whole-text before/after pair of one undoable edit."""

    label: str
    before_text: str
    after_text: str
    cursor_before: Cursor
    cursor_after: Cursor


class UndoTimeline:
    """Bounded history; ``_done`` counts the entries currently applied.

    Pushing after an undo discards the redo tail. The oldest entry falls off
    once ``limit`` is exceeded.
    """

    def __init__(self, *, limit: int = 500) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._entries: List[UndoEntry] = []
        self._done = 0
        self._limit = limit

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: UndoEntry) -> None:
        del self._entries[self._done :]
        self._entries.append(entry)
        overflow = len(self._entries) - self._limit
        if overflow > 0:
            del self._entries[:overflow]
        self._done = len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._done = 0

    def can_undo(self) -> bool:
        return self._done > 0

    def can_redo(self) -> bool:
        return self._done < len(self._entries)

    def peek_undo(self) -> Optional[UndoEntry]:
        return self._entries[self._done - 1] if self.can_undo() else None

    def peek_redo(self) -> Optional[UndoEntry]:
        return self._entries[self._done] if self.can_redo() else None

    def undo(self) -> Optional[UndoEntry]:
        entry = self.peek_undo()
        if entry is not None:
            self._done -= 1
        return entry

    def redo(self) -> Optional[UndoEntry]:
        entry = self.peek_redo()
        if entry is not None:
            self._done += 1
        return entry
