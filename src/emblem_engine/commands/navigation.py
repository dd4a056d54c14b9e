"""Cursor motion commands over indentation blocks."""

from __future__ import annotations

from emblem_engine.buffer import Cursor
from emblem_engine.structure import (
    backward_block,
    block_extent,
    down_list,
    forward_block,
    is_blank,
    up_list,
)
from emblem_engine.structure.scanner import row_indentation

from .context import CommandContext, CommandResult


def _land(context: CommandContext, target: Cursor) -> CommandResult:
    context.buffer.move_cursor(target)
    context.bus.emit("cursor.moved", target)
    return CommandResult(consumed=True, status="moved")


def forward_block_command(context: CommandContext, count: int = 1) -> CommandResult:
    buffer = context.buffer
    return _land(context, forward_block(buffer.document, buffer.cursor, count))


def backward_block_command(context: CommandContext, count: int = 1) -> CommandResult:
    buffer = context.buffer
    return _land(context, backward_block(buffer.document, buffer.cursor, count))


def up_list_command(context: CommandContext, count: int = 1) -> CommandResult:
    buffer = context.buffer
    return _land(context, up_list(buffer.document, buffer.cursor, count))


def down_list_command(context: CommandContext, count: int = 1) -> CommandResult:
    # NoNestedBlock propagates before the cursor is touched.
    buffer = context.buffer
    return _land(context, down_list(buffer.document, buffer.cursor, count))


def mark_block_command(context: CommandContext, count: int = 1) -> CommandResult:
    """Select the block at the cursor plus the next ``count - 1`` sibling blocks."""

    buffer = context.buffer
    document = buffer.document
    start, end = block_extent(document, buffer.cursor[0])
    indent = row_indentation(document, start)
    for _ in range(max(0, count - 1)):
        sibling = end + 1
        while sibling <= document.last_row and is_blank(document.get_line(sibling)):
            sibling += 1
        if sibling > document.last_row or row_indentation(document, sibling) != indent:
            break
        _, end = block_extent(document, sibling)
    buffer.state.set_selection((start, 0), (end, len(document.get_line(end))))
    context.bus.emit("selection.changed", buffer.state.selection)
    return CommandResult(consumed=True, status="marked", message=f"{start}-{end}")


__all__ = [
    "backward_block_command",
    "down_list_command",
    "forward_block_command",
    "mark_block_command",
    "up_list_command",
]
