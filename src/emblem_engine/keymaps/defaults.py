"""Built-in command table and Emacs-style bindings for Emblem buffers."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from emblem_engine.commands import editing, navigation

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

EMBLEM_MODE = "emblem"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="block.forward",
        handler=navigation.forward_block_command,
        description="Move over the next block",
    ),
    ActionRef(
        id="block.backward",
        handler=navigation.backward_block_command,
        description="Move back over the previous block",
    ),
    ActionRef(
        id="block.up",
        handler=navigation.up_list_command,
        description="Move to the enclosing block's head",
    ),
    ActionRef(
        id="block.down",
        handler=navigation.down_list_command,
        description="Move into the block nested beneath this line",
    ),
    ActionRef(
        id="block.mark",
        handler=navigation.mark_block_command,
        description="Select the block at the cursor",
    ),
    ActionRef(
        id=editing.INDENT_LINE,
        handler=editing.indent_line_command,
        description="Indent line, back-dent on repeat",
        cycling=True,
    ),
    ActionRef(
        id=editing.INDENT_REGION,
        handler=editing.indent_region_command,
        description="Indent region keeping relative nesting",
        cycling=True,
    ),
    ActionRef(
        id="indent.newline",
        handler=editing.newline_command,
        description="Insert a newline and indent it",
    ),
    ActionRef(
        id="edit.comment_block",
        handler=editing.comment_block_command,
        description="Comment out the block at the cursor",
    ),
    ActionRef(
        id="edit.uncomment_block",
        handler=editing.uncomment_block_command,
        description="Remove the enclosing comment",
    ),
    ActionRef(
        id="edit.electric_backspace",
        handler=editing.electric_backspace_command,
        description="Back-dent at indentation, delete otherwise",
    ),
    ActionRef(
        id="edit.kill_line_and_indent",
        handler=editing.kill_line_command,
        description="Delete line and re-attach its nested lines",
    ),
    ActionRef(id="core.undo", handler=editing.undo_command, description="Undo"),
    ActionRef(id="core.redo", handler=editing.redo_command, description="Redo"),
)


def _binding(
    binding_id: str, keys: str, action_id: str, *, when: tuple[str, ...] = ()
) -> Binding:
    return Binding(
        id=binding_id,
        mode=EMBLEM_MODE,
        sequence=KeySequence.parse(keys),
        action_id=action_id,
        when=when,  # type: ignore[arg-type]
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _binding("emblem.forward_block", "ctrl+c ctrl+f", "block.forward"),
    _binding("emblem.backward_block", "ctrl+c ctrl+b", "block.backward"),
    _binding("emblem.up_list", "ctrl+c ctrl+u", "block.up"),
    _binding("emblem.down_list", "ctrl+c ctrl+d", "block.down"),
    _binding("emblem.mark_block", "ctrl+c ctrl+m", "block.mark"),
    _binding("emblem.comment_block", "ctrl+c ctrl+c", "edit.comment_block"),
    _binding("emblem.uncomment_block", "ctrl+c ctrl+x", "edit.uncomment_block"),
    _binding("emblem.kill_line", "ctrl+c ctrl+k", "edit.kill_line_and_indent"),
    _binding(
        "emblem.indent_line", "tab", editing.INDENT_LINE, when=("!region_active",)
    ),
    _binding(
        "emblem.indent_region", "tab", editing.INDENT_REGION, when=("region_active",)
    ),
    _binding("emblem.newline", "enter", "indent.newline"),
    _binding("emblem.backspace", "backspace", "edit.electric_backspace"),
    _binding("emblem.undo", "ctrl+_", "core.undo"),
    _binding("emblem.redo", "ctrl+shift+_", "core.redo"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace_existing: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    sequence_timeout_ms: int | None = None,
    exclude_actions: Sequence[str] | None = None,
) -> None:
    """Register the built-in commands and their bindings.

    Bindings whose command is excluded are skipped as well.
    """

    excluded = set(exclude_actions or ())
    for action in DEFAULT_ACTIONS:
        if action.id not in excluded:
            registry.register_action(action, replace=replace_existing)

    for binding in DEFAULT_BINDINGS:
        if binding.action_id in excluded:
            continue
        if sequence_timeout_ms is not None:
            sequence = KeySequence(binding.sequence.strokes, timeout_ms=sequence_timeout_ms)
            binding = replace(binding, sequence=sequence)
        registry.register_binding(binding, replace=replace_existing)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace_existing)


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "EMBLEM_MODE",
    "load_default_keymaps",
]
