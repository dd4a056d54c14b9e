"""Block-level edits composed from the navigator, reindenter and shifter."""

from __future__ import annotations

from emblem_engine.buffer import Buffer, RegionAnchor

from .classifier import LineClassifier
from .errors import NoEnclosingComment
from .navigator import block_extent, up_list
from .reindent import backdent_column, reindent_line
from .scanner import (
    BACKWARD,
    advance_skipping_blank,
    indentation,
    is_blank,
    row_indentation,
)
from .shifter import shift_region_indent

COMMENT_MARKER = "/"


def _insert_line(buffer: Buffer, row: int, text: str, *, label: str) -> None:
    cursor_row, col = buffer.cursor
    if cursor_row >= row:
        cursor_row += 1
    buffer.replace_lines(row, row, [text], label=label, cursor=(cursor_row, col))


def _delete_line(buffer: Buffer, row: int, *, label: str) -> str:
    removed = buffer.line(row)
    cursor_row, col = buffer.cursor
    if cursor_row > row:
        buffer.replace_lines(row, row + 1, [], label=label, cursor=(cursor_row - 1, col))
        return removed
    if cursor_row < row:
        buffer.replace_lines(row, row + 1, [], label=label)
        return removed
    buffer.replace_lines(row, row + 1, [], label=label, cursor=(row, 0))
    landed = buffer.cursor[0]
    buffer.move_cursor((landed, row_indentation(buffer.document, landed)))
    return removed


def _shift_body(
    buffer: Buffer, anchor: RegionAnchor, edit_row: int, delta: int, *, label: str
) -> None:
    """Shift what remains of an anchored block after its head row was removed."""

    if anchor.size < 2:
        return
    start, end = anchor.resolve(buffer.document, edit_row=edit_row)
    body = [row for row in range(start, end + 1) if not is_blank(buffer.line(row))]
    if not body:
        return
    reference = row_indentation(buffer.document, body[0])
    shift_region_indent(buffer, start, end, reference, delta, label=label)


def comment_block(buffer: Buffer, *, offset: int) -> tuple[int, int]:
    """Wrap the block at the cursor in a comment and return the comment's rows."""

    row = buffer.cursor[0]
    indent = row_indentation(buffer.document, row)
    anchor = RegionAnchor.capture(buffer.document, *block_extent(buffer.document, row))
    _insert_line(buffer, row, " " * indent + COMMENT_MARKER, label="comment_block")
    start, end = anchor.resolve(buffer.document, edit_row=row)
    shift_region_indent(buffer, start, end, indent, offset, label="comment_block")
    return (row, end)


def uncomment_block(buffer: Buffer, *, classifier: LineClassifier, offset: int) -> int:
    """Remove the nearest enclosing comment marker and un-nest its block.

    Returns the row the marker occupied. Raises ``NoEnclosingComment``,
    leaving the buffer untouched, when no ancestor line is a comment. A
    blank cursor line belongs to the nearest non-blank line above it.
    """

    document = buffer.document
    row = buffer.cursor[0]
    if is_blank(document.get_line(row)):
        row = advance_skipping_blank(document, row, BACKWARD).row
    while not classifier.matches("comment", document.get_line(row)):
        parent, _ = up_list(document, (row, 0))
        if parent == row or row_indentation(document, parent) >= row_indentation(
            document, row
        ):
            raise NoEnclosingComment(cursor=buffer.cursor)
        row = parent

    anchor = RegionAnchor.capture(document, *block_extent(document, row))
    _delete_line(buffer, row, label="uncomment_block")
    _shift_body(buffer, anchor, row, -offset, label="uncomment_block")
    return row


def electric_backspace(
    buffer: Buffer, *, offset: int, nested: bool, count: int = 1
) -> bool:
    """Back-dent when the cursor sits on a line's indentation, else delete backward.

    Returns ``True`` when it back-dented. With ``nested`` the whole block
    headed by the line moves with it.
    """

    row, col = buffer.cursor
    text = buffer.line(row)
    current = indentation(text)
    if col != current or col == 0 or is_blank(text):
        buffer.delete_backward(count)
        return False

    target = current
    for _ in range(max(1, count)):
        target = backdent_column(target, offset)
    start, end = block_extent(buffer.document, row) if nested else (row, row)
    shift_region_indent(
        buffer, start, end, current, target - current, label="electric_backspace"
    )
    buffer.move_cursor((row, row_indentation(buffer.document, row)))
    return True


def kill_line_and_indent(buffer: Buffer, *, offset: int) -> str:
    """Delete the cursor line and pull its nested lines up one level.

    Returns the removed line's text.
    """

    document = buffer.document
    row = buffer.cursor[0]
    if is_blank(document.get_line(row)):
        return _delete_line(buffer, row, label="kill_line")

    anchor = RegionAnchor.capture(document, *block_extent(document, row))
    removed = _delete_line(buffer, row, label="kill_line")
    _shift_body(buffer, anchor, row, -offset, label="kill_line")
    return removed


def newline_and_indent(
    buffer: Buffer, *, classifier: LineClassifier, offset: int
) -> int:
    """Split the line at the cursor and indent the new line."""

    buffer.insert_text("\n")
    return reindent_line(buffer, classifier=classifier, offset=offset)


__all__ = [
    "COMMENT_MARKER",
    "comment_block",
    "electric_backspace",
    "kill_line_and_indent",
    "newline_and_indent",
    "uncomment_block",
]
