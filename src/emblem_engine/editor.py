"""Host-facing façade: runs commands from the command table against one buffer."""

from __future__ import annotations

from typing import Mapping, Optional

from emblem_engine.buffer import Buffer, BufferMirror, ensure_cursor
from emblem_engine.commands import CommandContext, CommandResult, EventBus, OperationMemo
from emblem_engine.config import EngineSettings, default_settings
from emblem_engine.keymaps import (
    EMBLEM_MODE,
    ActionRef,
    Binding,
    KeymapRegistry,
    load_default_keymaps,
)
from emblem_engine.runtime import telemetry
from emblem_engine.structure import LineClassifier, StructuralError


class EmblemEditor:
    """Owns the command context of one buffer and the last-operation memo.

    Hosts wire their own keys to command ids (``bindings_for`` lists the
    suggested ones) and call ``run``. Cycling commands (``ActionRef.cycling``)
    see the memo left by the previous invocation; every other command and
    every host edit clears it first.
    """

    mode = EMBLEM_MODE

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        settings: Optional[EngineSettings] = None,
        classifier: Optional[LineClassifier] = None,
        keymap_registry: Optional[KeymapRegistry] = None,
        load_defaults: bool = True,
        bus: Optional[EventBus] = None,
    ) -> None:
        settings = settings or default_settings()
        self.context = CommandContext(
            buffer=buffer or Buffer(),
            settings=settings,
            classifier=classifier or LineClassifier.from_settings(settings),
            memo=OperationMemo(),
            bus=bus or EventBus(),
        )
        self.logger = telemetry.get_logger("emblem_engine.editor")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="emblem_engine.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)

    @classmethod
    def from_text(cls, text: str, **kwargs: object) -> "EmblemEditor":
        return cls(Buffer.from_text(text), **kwargs)  # type: ignore[arg-type]

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def memo(self) -> OperationMemo:
        return self.context.memo

    def command_table(self) -> Mapping[str, ActionRef]:
        return self.keymap_registry.command_table()

    def bindings_for(self, action_id: str) -> tuple[Binding, ...]:
        return self.keymap_registry.bindings_for(action_id)

    def invalidate_last_operation(self) -> None:
        """Forget the last cycling command; hosts call this for commands they run themselves."""

        self.context.memo.invalidate()

    def run(self, action_id: str, *, count: int = 1) -> CommandResult:
        action = self.keymap_registry.get_action(action_id)
        if not action.cycling:
            self.context.memo.invalidate()
        with telemetry.span(
            name=f"command::{action.id}",
            component="commands",
            metadata={"buffer": self.buffer.name, "count": count},
        ) as handle:
            try:
                with self.buffer.edit_group(action.id):
                    result = action(self.context, count)
            except StructuralError as exc:
                handle.add_metadata("status", "error")
                self.context.memo.invalidate()
                telemetry.record_event(
                    "command.error",
                    level="warning",
                    data={"command": action.id, "reason": str(exc)},
                )
                self.context.bus.emit("command.error", str(exc))
                return CommandResult(consumed=True, status="error", message=str(exc))
            handle.add_metadata("status", result.status)
        self.context.bus.emit("command.done", (action.id, result.status))
        return result

    def pull_buffer(self) -> BufferMirror:
        return self.buffer.mirror(attributes={"mode": self.mode})

    def push_host_edit(self, mirror: BufferMirror) -> None:
        self.context.memo.invalidate()
        if mirror.text != self.buffer.text:
            self.buffer.load_text(mirror.text, cursor=mirror.cursor)
        self.buffer.move_cursor(ensure_cursor(self.buffer.document, mirror.cursor))
        if mirror.selection is None:
            self.buffer.state.clear_selection()
        else:
            self.buffer.state.set_selection(*mirror.selection)


__all__ = ["EmblemEditor"]
