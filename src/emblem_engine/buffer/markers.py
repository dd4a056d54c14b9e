"""Region boundaries that survive line insertions and deletions.

Editors usually track a region with live markers that move as text is
edited. Buffers here are rebuilt on every mutation, so a region is captured
together with the line count it was measured against and recomputed once
the edit is known.
"""

from __future__ import annotations

from dataclasses import dataclass

from .document import BufferDocument


@dataclass(frozen=True, slots=True)
class RegionAnchor:
    """Inclusive ``[start, end]`` row span pinned to a document line count."""

    start: int
    end: int
    line_count: int

    @classmethod
    def capture(cls, document: BufferDocument, start: int, end: int) -> "RegionAnchor":
        if start > end:
            start, end = end, start
        return cls(start=start, end=end, line_count=document.line_count)

    def resolve(self, document: BufferDocument, *, edit_row: int) -> tuple[int, int]:
        """Recompute the span after lines were inserted or removed at ``edit_row``.

        Insertions at ``edit_row`` push boundaries at or below it down. For
        removals, boundaries on a removed row collapse onto ``edit_row`` and
        boundaries below the removed rows move up.
        """

        growth = document.line_count - self.line_count
        removed = max(0, -growth)

        def move(row: int) -> int:
            if row >= edit_row + removed:
                return row + growth
            if row >= edit_row:
                return edit_row
            return row

        return move(self.start), move(self.end)

    @property
    def size(self) -> int:
        return self.end - self.start + 1
