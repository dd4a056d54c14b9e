"""Indentation-driven structural navigation and editing."""

from .blocks import (
    comment_block,
    electric_backspace,
    kill_line_and_indent,
    newline_and_indent,
    uncomment_block,
)
from .classifier import DEFAULT_PATTERNS, LineClassifier, LinePattern
from .errors import NoEnclosingComment, NoNestedBlock, StructuralError
from .indentation import compute_indent
from .navigator import backward_block, block_extent, down_list, forward_block, up_list
from .regions import MarkedRegion, iter_marked_regions, marked_region
from .reindent import backdent_column, reindent_line, reindent_region
from .scanner import ScanStep, advance_skipping_blank, indentation, is_blank
from .shifter import shift_lines, shift_region_indent

__all__ = [
    "DEFAULT_PATTERNS",
    "LineClassifier",
    "LinePattern",
    "MarkedRegion",
    "NoEnclosingComment",
    "NoNestedBlock",
    "ScanStep",
    "StructuralError",
    "advance_skipping_blank",
    "backdent_column",
    "backward_block",
    "block_extent",
    "comment_block",
    "compute_indent",
    "down_list",
    "electric_backspace",
    "forward_block",
    "indentation",
    "is_blank",
    "iter_marked_regions",
    "kill_line_and_indent",
    "marked_region",
    "newline_and_indent",
    "reindent_line",
    "reindent_region",
    "shift_lines",
    "shift_region_indent",
    "uncomment_block",
    "up_list",
]
