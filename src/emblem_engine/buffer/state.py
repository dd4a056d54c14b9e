"""Cursor and selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (row, column)
Selection = Tuple[Cursor, Cursor]


@dataclass(slots=True)
class BufferState:
    cursor: Cursor = (0, 0)
    selection: Optional[Selection] = None
    last_change_tick: int = 0

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, start: Cursor, end: Cursor) -> None:
        self.selection = (start, end)

    def selected_rows(self) -> Optional[Tuple[int, int]]:
        """Inclusive row span covered by the selection, ordered."""

        if self.selection is None:
            return None
        start, end = sorted(self.selection)
        return (start[0], end[0])
