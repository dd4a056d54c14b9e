"""Indentation a line should have, given the line before it."""

from __future__ import annotations

from emblem_engine.buffer.document import BufferDocument
from emblem_engine.buffer.validation import ensure_row

from .classifier import LineClassifier
from .scanner import BACKWARD, advance_skipping_blank, indentation


def compute_indent(
    document: BufferDocument, row: int, classifier: LineClassifier, offset: int
) -> int:
    """Indentation of the previous non-blank line, plus ``offset`` when it opens a block.

    Works on raw column counts, so a previous line indented off the
    ``offset`` grid propagates its literal indentation.
    """

    ensure_row(document, row)
    if row == 0:
        return 0
    previous = document.get_line(advance_skipping_blank(document, row, BACKWARD).row)
    depth = indentation(previous)
    if classifier.is_block_opener(previous):
        depth += offset
    return depth


__all__ = ["compute_indent"]
