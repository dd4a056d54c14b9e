from emblem_engine.buffer import Buffer
from emblem_engine.structure import (
    LineClassifier,
    backdent_column,
    reindent_line,
    reindent_region,
)

CLASSIFIER = LineClassifier()


def make_buffer(text: str, cursor: tuple[int, int] = (0, 0)) -> Buffer:
    return Buffer.from_text(text, cursor=cursor)


def indent_line(buffer: Buffer, *, repeat: bool = False) -> int:
    return reindent_line(buffer, classifier=CLASSIFIER, offset=2, repeat=repeat)


def indent_region(buffer: Buffer, start: int, end: int, *, repeat: bool = False) -> int:
    return reindent_region(
        buffer, start, end, classifier=CLASSIFIER, offset=2, repeat=repeat
    )


def test_backdent_column() -> None:
    assert backdent_column(5, 2) == 4
    assert backdent_column(4, 2) == 2
    assert backdent_column(2, 2) == 0
    assert backdent_column(1, 2) == 0
    assert backdent_column(0, 2) == 0
    assert backdent_column(6, 4) == 4


def test_reindent_line_under_opener() -> None:
    buffer = make_buffer("div\nspan", cursor=(1, 0))

    assert indent_line(buffer) == 2
    assert buffer.text == "div\n  span"
    assert buffer.cursor == (1, 2)


def test_reindent_line_keeps_cursor_in_content() -> None:
    buffer = make_buffer("div\n    span", cursor=(1, 6))

    indent_line(buffer)

    assert buffer.text == "div\n  span"
    assert buffer.cursor == (1, 4)


def test_reindent_line_moves_cursor_out_of_leading_whitespace() -> None:
    buffer = make_buffer("div\n      span", cursor=(1, 1))

    indent_line(buffer)

    assert buffer.cursor == (1, 2)


def test_repeat_cycles_down_then_recomputes() -> None:
    buffer = make_buffer("div\n  span", cursor=(1, 2))

    assert indent_line(buffer, repeat=True) == 0
    assert buffer.text == "div\nspan"
    assert buffer.cursor == (1, 0)

    assert indent_line(buffer, repeat=True) == 2
    assert buffer.text == "div\n  span"


def test_unchanged_line_records_no_undo_entry() -> None:
    buffer = make_buffer("div\n  span", cursor=(1, 2))

    indent_line(buffer)

    assert len(buffer.undo) == 0


def test_reindent_region_preserves_relative_indentation() -> None:
    buffer = make_buffer("div\np\n      a\n   \n    b")

    assert indent_region(buffer, 1, 4) == 2
    assert buffer.text == "div\n  p\n        a\n\n      b"


def test_reindent_region_is_idempotent_without_repeat() -> None:
    buffer = make_buffer("div\np\n      a\n\n    b")

    indent_region(buffer, 1, 4)
    first = buffer.text
    indent_region(buffer, 1, 4)

    assert buffer.text == first


def test_reindent_region_repeat_backdents_first_line() -> None:
    buffer = make_buffer("div\n  p\n        a\n\n      b")

    assert indent_region(buffer, 1, 4, repeat=True) == 0
    assert buffer.text == "div\np\n      a\n\n    b"


def test_reindent_region_clamps_at_zero() -> None:
    buffer = make_buffer("x\n    a\n  b")

    indent_region(buffer, 1, 2)

    assert buffer.text == "x\n  a\nb"


def test_reindent_region_accepts_reversed_rows() -> None:
    buffer = make_buffer("div\np\n  a")

    indent_region(buffer, 2, 1)

    assert buffer.text == "div\n  p\n    a"
