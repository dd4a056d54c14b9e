"""Flat prefix rewrites of a region's indentation."""

from __future__ import annotations

from typing import Iterable

from emblem_engine.buffer import Buffer, ensure_row_span

from .scanner import indentation


def shift_column(col: int, old_indent: int, new_indent: int) -> int:
    """Column that keeps pointing at the same text after a re-indent.

    Columns inside the old leading whitespace stay inside the new one.
    """

    if col >= old_indent:
        return max(0, col + new_indent - old_indent)
    return min(col, new_indent)


def shift_line(text: str, reference: int, delta: int) -> str:
    current = indentation(text)
    if not text or delta == 0 or current < reference:
        return text
    return " " * (max(0, reference + delta) + current - reference) + text[current:]


def shift_lines(lines: Iterable[str], reference: int, delta: int) -> list[str]:
    """Move the first ``reference`` columns of every line to ``reference + delta``.

    Leading whitespace is measured like ``indentation`` (a tab is one column)
    and rewritten as spaces. Lines indented less than ``reference``, and empty
    lines, are returned unchanged. The new prefix never goes below zero.
    """

    if reference < 0:
        raise ValueError("reference indentation cannot be negative")
    return [shift_line(text, reference, delta) for text in lines]


def shift_region_indent(
    buffer: Buffer,
    start: int,
    end: int,
    reference: int,
    delta: int,
    *,
    label: str = "shift_region",
) -> int:
    """Apply ``shift_lines`` to rows ``start..end`` inclusive; return rows changed."""

    start, end = ensure_row_span(buffer.document, start, end)
    original = list(buffer.lines[start : end + 1])
    shifted = shift_lines(original, reference, delta)
    changed = sum(1 for before, after in zip(original, shifted) if before != after)
    if not changed:
        return 0

    row, col = buffer.cursor
    cursor = None
    if start <= row <= end and original[row - start] != shifted[row - start]:
        cursor = (row, shift_column(col, reference, max(0, reference + delta)))
    buffer.replace_lines(start, end + 1, shifted, label=label, cursor=cursor)
    return changed


__all__ = ["shift_column", "shift_line", "shift_lines", "shift_region_indent"]
