"""Command handlers invoked through the keymap command table."""

from .context import (
    CommandContext,
    CommandResult,
    EventBus,
    LastOperation,
    OperationMemo,
)
from .editing import (
    comment_block_command,
    electric_backspace_command,
    indent_line_command,
    indent_region_command,
    kill_line_command,
    newline_command,
    redo_command,
    uncomment_block_command,
    undo_command,
)
from .navigation import (
    backward_block_command,
    down_list_command,
    forward_block_command,
    mark_block_command,
    up_list_command,
)

__all__ = [
    "CommandContext",
    "CommandResult",
    "EventBus",
    "LastOperation",
    "OperationMemo",
    "backward_block_command",
    "comment_block_command",
    "down_list_command",
    "electric_backspace_command",
    "forward_block_command",
    "indent_line_command",
    "indent_region_command",
    "kill_line_command",
    "mark_block_command",
    "newline_command",
    "redo_command",
    "uncomment_block_command",
    "undo_command",
    "up_list_command",
]
