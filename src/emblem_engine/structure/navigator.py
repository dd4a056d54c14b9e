"""Block motions driven purely by indentation comparison.

A block is a head line plus every following line, blank lines aside, that
is indented deeper than the head. None of the motions fail at the buffer
edges; they stop and return the furthest position reached. ``down_list`` is
the only motion that reports a failure.
"""

from __future__ import annotations

from emblem_engine.buffer.document import BufferDocument
from emblem_engine.buffer.state import Cursor
from emblem_engine.buffer.validation import ensure_cursor, ensure_row

from .errors import NoNestedBlock
from .scanner import (
    BACKWARD,
    FORWARD,
    advance_skipping_blank,
    is_blank,
    row_indentation,
)


def _at_indentation(document: BufferDocument, row: int) -> Cursor:
    return (row, row_indentation(document, row))


def forward_block(document: BufferDocument, cursor: Cursor, count: int = 1) -> Cursor:
    """Move over ``count`` blocks; a negative count moves backward.

    Moving backward from a cursor that is not on its line's first
    non-whitespace character first goes there, which uses up one count.
    """

    row, col = ensure_cursor(document, cursor)
    if count < 0 and col != row_indentation(document, row):
        count += 1
    while count != 0:
        direction = BACKWARD if count < 0 else FORWARD
        indent = row_indentation(document, row)
        while True:
            step = advance_skipping_blank(document, row, direction)
            row = step.row
            if step.at_boundary or row_indentation(document, row) <= indent:
                break
        count -= direction
    return _at_indentation(document, row)


def backward_block(document: BufferDocument, cursor: Cursor, count: int = 1) -> Cursor:
    return forward_block(document, cursor, -count)


def up_list(document: BufferDocument, cursor: Cursor, count: int = 1) -> Cursor:
    """Move to the enclosing block's head ``count`` times."""

    row, _ = ensure_cursor(document, cursor)
    for _ in range(count):
        indent = row_indentation(document, row)
        while True:
            step = advance_skipping_blank(document, row, BACKWARD)
            row = step.row
            if step.at_boundary or row_indentation(document, row) < indent:
                break
    return _at_indentation(document, row)


def down_list(document: BufferDocument, cursor: Cursor, count: int = 1) -> Cursor:
    """Move into the block nested beneath the current line ``count`` times.

    Each level looks a single scanner step forward. If the line reached is
    not deeper than the current one, ``NoNestedBlock`` is raised and the
    caller keeps the cursor it passed in.
    """

    row, _ = ensure_cursor(document, cursor)
    for _ in range(count):
        indent = row_indentation(document, row)
        step = advance_skipping_blank(document, row, FORWARD)
        if row_indentation(document, step.row) <= indent:
            raise NoNestedBlock(cursor=cursor)
        row = step.row
    return _at_indentation(document, row)


def block_extent(document: BufferDocument, row: int) -> tuple[int, int]:
    """Inclusive row span of the block headed at ``row``.

    Trailing blank lines between the block and whatever follows it are not
    part of the block.
    """

    ensure_row(document, row)
    indent = row_indentation(document, row)
    landing, _ = forward_block(document, (row, 0))
    end = landing
    if landing == row or (
        not is_blank(document.get_line(landing))
        and row_indentation(document, landing) <= indent
    ):
        end = landing - 1
    while end > row and is_blank(document.get_line(end)):
        end -= 1
    return (row, max(row, end))


__all__ = [
    "backward_block",
    "block_extent",
    "down_list",
    "forward_block",
    "up_list",
]
