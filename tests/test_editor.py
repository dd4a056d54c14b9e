from __future__ import annotations

from emblem_engine.buffer import BufferMirror
from emblem_engine.config import EngineSettings
from emblem_engine.editor import EmblemEditor


def make_editor(text: str, cursor: tuple[int, int] = (0, 0)) -> EmblemEditor:
    editor = EmblemEditor.from_text(text, settings=EngineSettings())
    editor.buffer.move_cursor(cursor)
    return editor


def test_down_list_on_leaf_reports_error_and_keeps_cursor() -> None:
    editor = make_editor("div\n  p\nspan", cursor=(1, 2))
    errors: list[object] = []
    editor.context.bus.subscribe("command.error", errors.append)

    result = editor.run("block.down")

    assert result.consumed is True
    assert result.status == "error"
    assert editor.buffer.cursor == (1, 2)
    assert errors == [result.message]


def test_forward_block_command_moves_cursor() -> None:
    editor = make_editor("div\n  p\nspan")
    moves: list[object] = []
    editor.context.bus.subscribe("cursor.moved", moves.append)

    result = editor.run("block.forward")

    assert result.status == "moved"
    assert editor.buffer.cursor == (2, 0)
    assert moves == [(2, 0)]


def test_repeated_indent_line_cycles() -> None:
    editor = make_editor("div\nspan", cursor=(1, 0))

    first = editor.run("indent.line")
    assert editor.buffer.text == "div\n  span"
    assert first.status == "indented"

    second = editor.run("indent.line")
    assert editor.buffer.text == "div\nspan"
    assert second.status == "cycled"

    editor.run("indent.line")
    assert editor.buffer.text == "div\n  span"


def test_other_command_breaks_the_cycle() -> None:
    editor = make_editor("div\nspan", cursor=(1, 0))
    editor.run("indent.line")

    editor.run("block.forward")
    result = editor.run("indent.line")

    assert result.status == "indented"
    assert editor.buffer.text == "div\n  span"


def test_host_invalidation_breaks_the_cycle() -> None:
    editor = make_editor("div\nspan", cursor=(1, 0))
    editor.run("indent.line")
    assert editor.memo.last is not None

    editor.invalidate_last_operation()

    assert editor.memo.last is None
    assert editor.run("indent.line").status == "indented"


def test_mark_then_indent_region() -> None:
    editor = make_editor("div\np\n  a", cursor=(1, 0))

    marked = editor.run("block.mark")
    result = editor.run("indent.region")

    assert marked.message == "1-2"
    assert result.status == "indented"
    assert editor.buffer.text == "div\n  p\n    a"


def test_comment_then_undo() -> None:
    editor = make_editor("div\n  p\nspan", cursor=(0, 0))

    assert editor.run("edit.comment_block").status == "commented"
    assert editor.buffer.text == "/\n  div\n    p\nspan"
    undone = editor.run("core.undo")
    assert undone.status == "undo"
    assert undone.message == "edit.comment_block"
    assert editor.buffer.text == "div\n  p\nspan"


def test_undo_with_empty_history_is_noop() -> None:
    editor = make_editor("div")

    assert editor.run("core.undo").status == "noop"
    assert editor.run("core.redo").status == "noop"


def test_command_table_lists_commands() -> None:
    editor = make_editor("div")

    table = editor.command_table()

    assert "block.up" in table
    assert table["indent.region"].cycling is True


def test_suggested_bindings_for_tab_depend_on_region() -> None:
    editor = make_editor("div")

    line = editor.bindings_for("indent.line")
    region = editor.bindings_for("indent.region")

    assert [b.key_signature for b in line] == ["tab"]
    assert line[0].allows({"region_active": False}) is True
    assert region[0].allows({"region_active": False}) is False
    assert region[0].allows({"region_active": True}) is True


def test_pull_and_push_buffer() -> None:
    editor = make_editor("div\nspan", cursor=(1, 0))
    editor.run("indent.line")

    mirror = editor.pull_buffer()
    assert mirror.text == "div\n  span"
    assert mirror.attributes["mode"] == "emblem"

    editor.push_host_edit(
        BufferMirror(text="ul\nli", cursor=(1, 1), selection=((0, 0), (1, 2)))
    )

    assert editor.buffer.text == "ul\nli"
    assert editor.buffer.cursor == (1, 1)
    assert editor.buffer.state.selection is not None
    assert editor.memo.last is None
