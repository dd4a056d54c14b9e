from emblem_engine.buffer import Buffer
from emblem_engine.structure import shift_lines, shift_region_indent


def test_shift_lines_rewrites_matching_prefix() -> None:
    lines = ["  a", "    b", "c", "", "  "]

    assert shift_lines(lines, 2, 2) == ["    a", "      b", "c", "", "    "]


def test_shift_lines_leaves_shallower_lines() -> None:
    assert shift_lines(["    a", "  b"], 4, -2) == ["  a", "  b"]


def test_shift_lines_clamps_at_zero() -> None:
    assert shift_lines(["  a", "    b"], 2, -4) == ["a", "  b"]


def test_shift_down_then_up_restores_lines() -> None:
    original = ["    a", "      b", "    c"]

    lowered = shift_lines(original, 4, -2)

    assert lowered == ["  a", "    b", "  c"]
    assert shift_lines(lowered, 2, 2) == original


def test_shift_region_indent_updates_buffer_and_cursor() -> None:
    buffer = Buffer.from_text("x\n  a\n  b\ny", cursor=(2, 3))

    changed = shift_region_indent(buffer, 1, 2, 2, 2)

    assert changed == 2
    assert buffer.text == "x\n    a\n    b\ny"
    assert buffer.cursor == (2, 5)
    assert len(buffer.undo) == 1


def test_shift_region_indent_without_matches_is_a_noop() -> None:
    buffer = Buffer.from_text("a\nb")

    assert shift_region_indent(buffer, 0, 1, 2, -2) == 0
    assert buffer.text == "a\nb"
    assert len(buffer.undo) == 0


def test_shift_lines_rewrites_tab_indentation_as_spaces() -> None:
    lines = ["\tp", "\t\ta", "q"]

    assert shift_lines(lines, 1, 1) == ["  p", "   a", "q"]


def test_shift_region_indent_moves_tab_indented_block() -> None:
    buffer = Buffer.from_text("div\n\tp\n\t\ta")

    changed = shift_region_indent(buffer, 1, 2, 1, -1)

    assert changed == 2
    assert buffer.text == "div\np\n a"
