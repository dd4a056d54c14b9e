"""Extents of comment, embedded-content and text blocks for highlighters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from emblem_engine.buffer.document import BufferDocument

from .classifier import LineClassifier
from .navigator import block_extent

REGION_KINDS: tuple[str, ...] = ("comment", "embedded", "text_block")


@dataclass(frozen=True, slots=True)
class MarkedRegion:
    kind: str
    start: int
    end: int

    def contains(self, row: int) -> bool:
        return self.start <= row <= self.end


def marked_region(
    document: BufferDocument, row: int, classifier: LineClassifier
) -> Optional[MarkedRegion]:
    """Region headed at ``row`` if the row is a marker line, else ``None``."""

    text = document.get_line(row)
    for kind in REGION_KINDS:
        if classifier.matches(kind, text):
            start, end = block_extent(document, row)
            return MarkedRegion(kind=kind, start=start, end=end)
    return None


def iter_marked_regions(
    document: BufferDocument, classifier: LineClassifier
) -> Iterator[MarkedRegion]:
    """Outermost marked regions from top to bottom; nested markers are skipped."""

    row = 0
    while row < document.line_count:
        region = marked_region(document, row, classifier)
        if region is None:
            row += 1
            continue
        yield region
        row = region.end + 1


__all__ = ["MarkedRegion", "REGION_KINDS", "iter_marked_regions", "marked_region"]
