"""Shared services and result types for structural commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from emblem_engine.buffer import Buffer, Cursor
from emblem_engine.config import EngineSettings
from emblem_engine.structure import LineClassifier


@dataclass(slots=True)
class CommandResult:
    """Result returned from a command handler or ``EmblemEditor.run``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


@dataclass(frozen=True, slots=True)
class LastOperation:
    kind: str
    cursor: Cursor


class OperationMemo:
    """One-slot memory of the last cycling command and where it left the cursor.

    A cycling command asks ``is_repeat`` before acting and calls
    ``remember`` afterwards. Anything else that runs in between must call
    ``invalidate``.
    """

    def __init__(self) -> None:
        self._last: Optional[LastOperation] = None

    @property
    def last(self) -> Optional[LastOperation]:
        return self._last

    def is_repeat(self, kind: str, cursor: Cursor) -> bool:
        return self._last == LastOperation(kind, cursor)

    def remember(self, kind: str, cursor: Cursor) -> None:
        self._last = LastOperation(kind, cursor)

    def invalidate(self) -> None:
        self._last = None


class EventBus:
    """Minimal event bus so hosts can observe command outcomes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class CommandContext:
    """Everything a command handler may touch."""

    buffer: Buffer
    settings: EngineSettings
    classifier: LineClassifier
    memo: OperationMemo = field(default_factory=OperationMemo)
    bus: EventBus = field(default_factory=EventBus)
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def offset(self) -> int:
        return self.settings.indent_offset


__all__ = [
    "CommandContext",
    "CommandResult",
    "EventBus",
    "LastOperation",
    "OperationMemo",
]
