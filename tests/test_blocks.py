import pytest

from emblem_engine.buffer import Buffer
from emblem_engine.structure import (
    LineClassifier,
    NoEnclosingComment,
    comment_block,
    electric_backspace,
    kill_line_and_indent,
    newline_and_indent,
    uncomment_block,
)

CLASSIFIER = LineClassifier()
NESTED = "div\n  p\n    a\nspan"


def make_buffer(text: str, cursor: tuple[int, int] = (0, 0)) -> Buffer:
    return Buffer.from_text(text, cursor=cursor)


def test_comment_block_wraps_head_and_descendants() -> None:
    buffer = make_buffer(NESTED, cursor=(1, 2))

    rows = comment_block(buffer, offset=2)

    assert rows == (1, 3)
    assert buffer.text == "div\n  /\n    p\n      a\nspan"
    assert buffer.cursor == (2, 4)


def test_uncomment_block_from_nested_line() -> None:
    buffer = make_buffer("div\n  /\n    p\n      a\nspan", cursor=(3, 6))

    row = uncomment_block(buffer, classifier=CLASSIFIER, offset=2)

    assert row == 1
    assert buffer.text == NESTED
    assert buffer.cursor == (2, 4)


def test_comment_then_uncomment_restores_text() -> None:
    buffer = make_buffer(NESTED, cursor=(1, 2))

    comment_block(buffer, offset=2)
    uncomment_block(buffer, classifier=CLASSIFIER, offset=2)

    assert buffer.text == NESTED


def test_uncomment_block_on_marker_line() -> None:
    buffer = make_buffer("/\n  p\n    a", cursor=(0, 0))

    uncomment_block(buffer, classifier=CLASSIFIER, offset=2)

    assert buffer.text == "p\n  a"
    assert buffer.cursor == (0, 0)


def test_uncomment_without_comment_raises_and_keeps_buffer() -> None:
    buffer = make_buffer("div\n  p", cursor=(1, 2))

    with pytest.raises(NoEnclosingComment):
        uncomment_block(buffer, classifier=CLASSIFIER, offset=2)

    assert buffer.text == "div\n  p"
    assert len(buffer.undo) == 0


def test_uncomment_ignores_comment_that_is_only_a_previous_sibling() -> None:
    buffer = make_buffer("/\n  p\nq", cursor=(2, 0))

    with pytest.raises(NoEnclosingComment):
        uncomment_block(buffer, classifier=CLASSIFIER, offset=2)


def test_electric_backspace_backdents_nested_block() -> None:
    buffer = make_buffer(NESTED, cursor=(1, 2))

    assert electric_backspace(buffer, offset=2, nested=True) is True
    assert buffer.text == "div\np\n  a\nspan"
    assert buffer.cursor == (1, 0)


def test_electric_backspace_single_line() -> None:
    buffer = make_buffer(NESTED, cursor=(1, 2))

    electric_backspace(buffer, offset=2, nested=False)

    assert buffer.text == "div\np\n    a\nspan"


def test_electric_backspace_in_content_deletes_character() -> None:
    buffer = make_buffer(NESTED, cursor=(1, 3))

    assert electric_backspace(buffer, offset=2, nested=True) is False
    assert buffer.text == "div\n  \n    a\nspan"
    assert buffer.cursor == (1, 2)


def test_electric_backspace_at_column_zero_joins_lines() -> None:
    buffer = make_buffer("a\nb", cursor=(1, 0))

    electric_backspace(buffer, offset=2, nested=True)

    assert buffer.text == "ab"
    assert buffer.cursor == (0, 1)


def test_electric_backspace_with_count() -> None:
    buffer = make_buffer("x\n    y", cursor=(1, 4))

    electric_backspace(buffer, offset=2, nested=True, count=2)

    assert buffer.text == "x\ny"


def test_electric_backspace_snaps_off_grid_indentation() -> None:
    buffer = make_buffer("x\n   y", cursor=(1, 3))

    electric_backspace(buffer, offset=2, nested=True)

    assert buffer.text == "x\n  y"
    assert buffer.cursor == (1, 2)


def test_kill_line_reattaches_children() -> None:
    buffer = make_buffer("div\n  ul\n    li\n    li\n  span", cursor=(1, 2))

    removed = kill_line_and_indent(buffer, offset=2)

    assert removed == "  ul"
    assert buffer.text == "div\n  li\n  li\n  span"
    assert buffer.cursor == (1, 2)


def test_kill_leaf_line() -> None:
    buffer = make_buffer("a\n  b\nc", cursor=(1, 2))

    kill_line_and_indent(buffer, offset=2)

    assert buffer.text == "a\nc"
    assert buffer.cursor == (1, 0)


def test_kill_blank_line() -> None:
    buffer = make_buffer("a\n\nb", cursor=(1, 0))

    assert kill_line_and_indent(buffer, offset=2) == ""
    assert buffer.text == "a\nb"


def test_kill_only_line_leaves_empty_buffer() -> None:
    buffer = make_buffer("x")

    kill_line_and_indent(buffer, offset=2)

    assert buffer.text == ""
    assert buffer.cursor == (0, 0)


def test_newline_and_indent_after_opener() -> None:
    buffer = make_buffer("div", cursor=(0, 3))

    assert newline_and_indent(buffer, classifier=CLASSIFIER, offset=2) == 2
    assert buffer.text == "div\n  "
    assert buffer.cursor == (1, 2)


def test_newline_and_indent_splits_line() -> None:
    buffer = make_buffer("ul li", cursor=(0, 2))

    newline_and_indent(buffer, classifier=CLASSIFIER, offset=2)

    assert buffer.text == "ul\n  li"
    assert buffer.cursor == (1, 2)


def test_kill_line_with_blank_line_after_head() -> None:
    buffer = make_buffer("div\n\n  p\n    a\nspan", cursor=(0, 0))

    kill_line_and_indent(buffer, offset=2)

    assert buffer.text == "\np\n  a\nspan"


def test_uncomment_with_blank_line_after_marker() -> None:
    buffer = make_buffer("/\n\n  p\n    a\nspan", cursor=(2, 2))

    row = uncomment_block(buffer, classifier=CLASSIFIER, offset=2)

    assert row == 0
    assert buffer.text == "\np\n  a\nspan"
    assert buffer.cursor == (1, 0)


def test_uncomment_from_blank_line_inside_comment() -> None:
    buffer = make_buffer("/\n  p\n\n  a\nspan", cursor=(2, 0))

    uncomment_block(buffer, classifier=CLASSIFIER, offset=2)

    assert buffer.text == "p\n\na\nspan"


def test_uncomment_from_blank_first_line_raises() -> None:
    buffer = make_buffer("\n  p", cursor=(0, 0))

    with pytest.raises(NoEnclosingComment):
        uncomment_block(buffer, classifier=CLASSIFIER, offset=2)
