"""Buffer abstractions: line storage, cursor state, undo and region anchors."""

from .buffer import Buffer, BufferDelta, BufferView, Transaction
from .document import BufferDocument
from .markers import RegionAnchor
from .state import BufferState, Cursor, Selection
from .sync import BufferMirror, BufferSync, BufferValidationError
from .undo import UndoEntry, UndoTimeline
from .validation import clamp_cursor, ensure_cursor, ensure_row, ensure_row_span

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferMirror",
    "BufferState",
    "BufferSync",
    "BufferValidationError",
    "BufferView",
    "Cursor",
    "RegionAnchor",
    "Selection",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "clamp_cursor",
    "ensure_cursor",
    "ensure_row",
    "ensure_row_span",
]
