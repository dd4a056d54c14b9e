"""Indentation and block editing commands."""

from __future__ import annotations

from emblem_engine.structure import (
    block_extent,
    comment_block,
    electric_backspace,
    kill_line_and_indent,
    newline_and_indent,
    reindent_line,
    reindent_region,
    uncomment_block,
)

from .context import CommandContext, CommandResult

INDENT_LINE = "indent.line"
INDENT_REGION = "indent.region"


def indent_line_command(context: CommandContext, count: int = 1) -> CommandResult:
    """Indent the cursor line; repeating it in place steps the line back."""

    del count
    buffer = context.buffer
    repeat = context.memo.is_repeat(INDENT_LINE, buffer.cursor)
    depth = reindent_line(
        buffer, classifier=context.classifier, offset=context.offset, repeat=repeat
    )
    context.memo.remember(INDENT_LINE, buffer.cursor)
    return CommandResult(
        consumed=True, status="cycled" if repeat else "indented", message=str(depth)
    )


def indent_region_command(context: CommandContext, count: int = 1) -> CommandResult:
    """Indent the selected rows, or the block at the cursor without a selection."""

    del count
    buffer = context.buffer
    rows = buffer.state.selected_rows()
    if rows is None:
        rows = block_extent(buffer.document, buffer.cursor[0])
    repeat = context.memo.is_repeat(INDENT_REGION, buffer.cursor)
    depth = reindent_region(
        buffer,
        *rows,
        classifier=context.classifier,
        offset=context.offset,
        repeat=repeat,
    )
    context.memo.remember(INDENT_REGION, buffer.cursor)
    return CommandResult(
        consumed=True, status="cycled" if repeat else "indented", message=str(depth)
    )


def newline_command(context: CommandContext, count: int = 1) -> CommandResult:
    depth = 0
    for _ in range(max(1, count)):
        depth = newline_and_indent(
            context.buffer, classifier=context.classifier, offset=context.offset
        )
    return CommandResult(consumed=True, status="inserted", message=str(depth))


def comment_block_command(context: CommandContext, count: int = 1) -> CommandResult:
    del count
    start, end = comment_block(context.buffer, offset=context.offset)
    context.bus.emit("block.commented", (start, end))
    return CommandResult(consumed=True, status="commented", message=f"{start}-{end}")


def uncomment_block_command(context: CommandContext, count: int = 1) -> CommandResult:
    del count
    row = uncomment_block(
        context.buffer, classifier=context.classifier, offset=context.offset
    )
    context.bus.emit("block.uncommented", row)
    return CommandResult(consumed=True, status="uncommented", message=str(row))


def electric_backspace_command(
    context: CommandContext, count: int = 1
) -> CommandResult:
    backdented = electric_backspace(
        context.buffer,
        offset=context.offset,
        nested=context.settings.backspace_backdents_nesting,
        count=count,
    )
    return CommandResult(consumed=True, status="backdented" if backdented else "deleted")


def kill_line_command(context: CommandContext, count: int = 1) -> CommandResult:
    del count
    removed = kill_line_and_indent(context.buffer, offset=context.offset)
    context.bus.emit("line.killed", removed)
    return CommandResult(consumed=True, status="killed", message=removed)


def undo_command(context: CommandContext, count: int = 1) -> CommandResult:
    """Undo up to ``count`` commands; the message names the last one undone."""

    history = context.buffer.undo
    label = None
    for _ in range(max(1, count)):
        entry = history.peek_undo()
        if entry is None or not context.buffer.undo_last():
            break
        label = entry.label
    return CommandResult(consumed=True, status="undo" if label else "noop", message=label)


def redo_command(context: CommandContext, count: int = 1) -> CommandResult:
    history = context.buffer.undo
    label = None
    for _ in range(max(1, count)):
        entry = history.peek_redo()
        if entry is None or not context.buffer.redo_last():
            break
        label = entry.label
    return CommandResult(consumed=True, status="redo" if label else "noop", message=label)


__all__ = [
    "INDENT_LINE",
    "INDENT_REGION",
    "comment_block_command",
    "electric_backspace_command",
    "indent_line_command",
    "indent_region_command",
    "kill_line_command",
    "newline_command",
    "redo_command",
    "uncomment_block_command",
    "undo_command",
]
