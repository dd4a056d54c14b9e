"""Applying computed indentation to a line or a region."""

from __future__ import annotations

from emblem_engine.buffer import Buffer, ensure_row_span

from .classifier import LineClassifier
from .indentation import compute_indent
from .scanner import indentation, is_blank
from .shifter import shift_column


def backdent_column(indent: int, offset: int) -> int:
    """Previous multiple of ``offset`` strictly below ``indent`` (0 at most)."""

    if indent <= 0:
        return 0
    return ((indent - 1) // offset) * offset


def _target_indent(
    buffer: Buffer, row: int, classifier: LineClassifier, offset: int, repeat: bool
) -> int:
    current = indentation(buffer.line(row))
    if repeat and current != 0:
        return backdent_column(current, offset)
    return compute_indent(buffer.document, row, classifier, offset)


def reindent_line(
    buffer: Buffer,
    *,
    classifier: LineClassifier,
    offset: int,
    repeat: bool = False,
) -> int:
    """Re-indent the cursor line and return its new indentation.

    ``repeat`` marks a back-to-back invocation at the same cursor: instead
    of recomputing, the line steps back one ``offset`` (cycling down to
    zero, after which the next invocation recomputes).
    """

    row, col = buffer.cursor
    text = buffer.line(row)
    current = indentation(text)
    target = _target_indent(buffer, row, classifier, offset, repeat)
    new_col = col + target - current if col >= current else target

    new_text = " " * target + text[current:]
    if new_text == text:
        buffer.move_cursor((row, new_col))
    else:
        buffer.replace_lines(
            row, row + 1, [new_text], label="indent_line", cursor=(row, new_col)
        )
    return target


def reindent_region(
    buffer: Buffer,
    start: int,
    end: int,
    *,
    classifier: LineClassifier,
    offset: int,
    repeat: bool = False,
) -> int:
    """Re-indent rows ``start..end`` keeping nesting relative to the first row.

    The first row gets the computed (or cycled) indentation; every other
    non-blank row moves by the same amount, clamped at zero. Blank rows are
    emptied. Returns the first row's new indentation.
    """

    start, end = ensure_row_span(buffer.document, start, end)
    target = _target_indent(buffer, start, classifier, offset, repeat)
    first_indent = indentation(buffer.line(start))

    row, col = buffer.cursor
    cursor = buffer.cursor
    rewritten: list[str] = []
    for index, text in enumerate(buffer.lines[start : end + 1], start=start):
        old_indent = indentation(text)
        if is_blank(text):
            new_indent, new_text = 0, ""
        else:
            new_indent = max(0, target + old_indent - first_indent)
            new_text = " " * new_indent + text[old_indent:]
        if index == row:
            cursor = (row, shift_column(col, old_indent, new_indent))
        rewritten.append(new_text)

    if rewritten != list(buffer.lines[start : end + 1]):
        buffer.replace_lines(
            start, end + 1, rewritten, label="indent_region", cursor=cursor
        )
    return target


__all__ = ["backdent_column", "reindent_line", "reindent_region"]
