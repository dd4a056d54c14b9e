"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .state import Cursor
from .sync import BufferValidationError


def ensure_row(document: BufferDocument, row: int) -> int:
    if row < 0 or row >= document.line_count:
        raise BufferValidationError(f"Row {row} out of range", cursor=(row, 0))
    return row


def ensure_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    line = document.get_line(row)
    if col < 0 or col > len(line):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def ensure_row_span(document: BufferDocument, start: int, end: int) -> tuple[int, int]:
    """Validate an inclusive row span and return it ordered."""

    if start > end:
        start, end = end, start
    ensure_row(document, start)
    ensure_row(document, end)
    return start, end


def clamp_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    row = max(0, min(row, document.last_row))
    col = max(0, min(col, len(document.get_line(row))))
    return (row, col)
