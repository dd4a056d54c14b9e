"""Buffer façade combining document, cursor state and undo history."""

from __future__ import annotations

from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from typing import ContextManager, Iterable, Iterator, Optional, Sequence

from emblem_engine.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Cursor, Selection
from .sync import BufferMirror
from .undo import UndoEntry, UndoTimeline
from .validation import clamp_cursor, ensure_cursor


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    cursor: Cursor
    selection: Optional[Selection]


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    cursor: Cursor
    label: str


class Buffer:
    """Mutable text buffer the structural operations edit in place.

    Every mutation replaces the underlying ``BufferDocument`` and records an
    undo entry; structure is never cached between calls.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.undo = undo or UndoTimeline()
        self._group: Optional[list[UndoEntry]] = None

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", cursor: Cursor = (0, 0)
    ) -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_text(text))
        buffer.state.set_cursor(*ensure_cursor(buffer.document, cursor))
        return buffer

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    def line(self, row: int) -> str:
        return self.document.get_line(row)

    def move_cursor(self, cursor: Cursor) -> Cursor:
        self.state.set_cursor(*ensure_cursor(self.document, cursor))
        return self.state.cursor

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
        )

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            attributes=dict(attributes or {}),
        )

    def replace_lines(
        self,
        start: int,
        end: int,
        new_lines: Iterable[str],
        *,
        label: str,
        cursor: Optional[Cursor] = None,
    ) -> BufferDelta:
        """Replace rows ``[start:end)`` with ``new_lines``.

        ``cursor`` is where the cursor should land afterwards; without one the
        previous cursor is clamped into the new document.
        """

        replacement = list(new_lines)
        with Transaction(self, label) as tx:
            before_text = self.text
            cursor_before = self.state.cursor
            self.document = self.document.update_lines(start, end, replacement)
            target = cursor if cursor is not None else cursor_before
            self.state.set_cursor(*clamp_cursor(self.document, target))
            self.state.last_change_tick = self.document.version
            tx.commit(before_text, self.text, cursor_before, self.state.cursor)
        return self._delta(label)

    def replace_range(
        self, start: Cursor, end: Cursor, text: str, *, label: str
    ) -> BufferDelta:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        with Transaction(self, label) as tx:
            before_text = self.text
            cursor_before = self.state.cursor
            start_offset = self.offset_for(start)
            end_offset = self.offset_for(end)
            new_text = before_text[:start_offset] + text + before_text[end_offset:]
            self.document = _rebuild(self.document, new_text)
            self.state.set_cursor(*self.cursor_for(start_offset + len(text)))
            self.state.last_change_tick = self.document.version
            tx.commit(before_text, new_text, cursor_before, self.state.cursor)
        return self._delta(label)

    def insert_text(self, text: str, *, cursor: Optional[Cursor] = None) -> BufferDelta:
        position = cursor or self.state.cursor
        return self.replace_range(position, position, text, label="insert_text")

    def delete_range(self, start: Cursor, end: Cursor) -> BufferDelta:
        return self.replace_range(start, end, "", label="delete_range")

    def delete_backward(self, count: int = 1) -> BufferDelta:
        """Delete ``count`` characters before the cursor, joining lines at column 0."""

        end_offset = self.offset_for(self.state.cursor)
        start_offset = max(0, end_offset - max(0, count))
        return self.replace_range(
            self.cursor_for(start_offset),
            self.state.cursor,
            "",
            label="delete_backward",
        )

    def get_text_range(self, start: Cursor, end: Cursor) -> str:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        return self.text[self.offset_for(start) : self.offset_for(end)]

    def load_text(self, text: str, *, cursor: Optional[Cursor] = None) -> BufferDelta:
        """Adopt text edited outside the engine as a single undoable change."""

        return self.replace_lines(
            0,
            self.document.line_count,
            BufferDocument.from_text(text).snapshot(),
            label="load_text",
            cursor=cursor,
        )

    @contextmanager
    def edit_group(self, label: str) -> Iterator["Buffer"]:
        """Collapse every mutation made inside the block into one undo entry."""

        if self._group is not None:
            yield self
            return
        self._group = []
        try:
            yield self
        finally:
            entries, self._group = self._group, None
            if entries:
                self.undo.push(
                    UndoEntry(
                        label=label,
                        before_text=entries[0].before_text,
                        after_text=entries[-1].after_text,
                        cursor_before=entries[0].cursor_before,
                        cursor_after=entries[-1].cursor_after,
                    )
                )

    def undo_last(self) -> bool:
        entry = self.undo.undo()
        if entry is None:
            return False
        self._restore(entry.before_text, entry.cursor_before)
        return True

    def redo_last(self) -> bool:
        entry = self.undo.redo()
        if entry is None:
            return False
        self._restore(entry.after_text, entry.cursor_after)
        return True

    def offset_for(self, cursor: Cursor) -> int:
        row, col = cursor
        offset = 0
        for index in range(row):
            offset += len(self.document.get_line(index)) + 1
        return offset + col

    def cursor_for(self, offset: int) -> Cursor:
        running = 0
        for row, line in enumerate(self.document.snapshot()):
            if offset <= running + len(line):
                return (row, max(0, offset - running))
            running += len(line) + 1
        last = self.document.last_row
        return (last, len(self.document.get_line(last)))

    def _restore(self, text: str, cursor: Cursor) -> None:
        self.document = _rebuild(self.document, text)
        self.state.set_cursor(*clamp_cursor(self.document, cursor))
        self.state.last_change_tick = self.document.version

    def _delta(self, label: str) -> BufferDelta:
        return BufferDelta(
            version=self.document.version,
            text=self.text,
            cursor=self.state.cursor,
            label=label,
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one buffer mutation in a telemetry span and records its undo entry."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(
        self,
        before_text: str,
        after_text: str,
        cursor_before: Cursor,
        cursor_after: Cursor,
    ) -> None:
        if before_text == after_text:
            return
        entry = UndoEntry(
            label=self.label,
            before_text=before_text,
            after_text=after_text,
            cursor_before=cursor_before,
            cursor_after=cursor_after,
        )
        if self.buffer._group is not None:
            self.buffer._group.append(entry)
        else:
            self.buffer.undo.push(entry)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _rebuild(document: BufferDocument, text: str) -> BufferDocument:
    lines = BufferDocument.from_text(text).snapshot()
    return document.update_lines(0, document.line_count, lines)
