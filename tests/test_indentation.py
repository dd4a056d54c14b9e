import pytest

from emblem_engine.buffer import BufferDocument, BufferValidationError
from emblem_engine.structure import LineClassifier, compute_indent


def indent_for(text: str, row: int, offset: int = 2) -> int:
    return compute_indent(BufferDocument.from_text(text), row, LineClassifier(), offset)


def test_line_after_tag_is_indented() -> None:
    # new empty line inserted right after "p"
    text = "p\n\n  | hello\n  | world\ndiv\n"

    assert indent_for(text, 1) == 2


def test_existing_child_line() -> None:
    assert indent_for("p\n  | hello\n  | world\ndiv\n", 1) == 2


def test_first_line_is_never_indented() -> None:
    assert indent_for("  div", 0) == 0


def test_line_after_non_opener_keeps_indentation() -> None:
    assert indent_for("= yield\nfoo", 1) == 0
    assert indent_for("  = yield\nfoo", 1) == 2


def test_blank_lines_are_skipped() -> None:
    assert indent_for("div\n\n   \nx", 3) == 2


def test_off_grid_indentation_is_kept() -> None:
    assert indent_for("   div\nx", 1) == 5


def test_custom_offset() -> None:
    assert indent_for("div\nx", 1, offset=4) == 4


def test_row_out_of_range() -> None:
    with pytest.raises(BufferValidationError):
        indent_for("div", 3)
