"""Line metrics and blank-skipping cursor motion."""

from __future__ import annotations

from typing import NamedTuple

from emblem_engine.buffer.document import BufferDocument

FORWARD = 1
BACKWARD = -1


class ScanStep(NamedTuple):
    row: int
    at_boundary: bool


def indentation(text: str) -> int:
    """Count of leading space/tab characters."""

    return len(text) - len(text.lstrip(" \t"))


def is_blank(text: str) -> bool:
    return not text.strip()


def row_indentation(document: BufferDocument, row: int) -> int:
    return indentation(document.get_line(row))


def advance_skipping_blank(
    document: BufferDocument, row: int, direction: int
) -> ScanStep:
    """Move one line in ``direction``, then keep going across blank lines.

    Stops on the first non-blank line or on the boundary row (row 0 going
    backward, the last row going forward), whichever comes first. A step
    that cannot move at all reports the boundary too.
    """

    if direction not in (FORWARD, BACKWARD):
        raise ValueError("direction must be 1 or -1")
    boundary = 0 if direction == BACKWARD else document.last_row
    if row == boundary:
        return ScanStep(row, True)
    while True:
        row += direction
        if row == boundary:
            return ScanStep(row, True)
        if not is_blank(document.get_line(row)):
            return ScanStep(row, False)


__all__ = [
    "BACKWARD",
    "FORWARD",
    "ScanStep",
    "advance_skipping_blank",
    "indentation",
    "is_blank",
    "row_indentation",
]
