"""Line storage for engine buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """Versioned list-of-lines text model.

    A document always holds at least one line. Text ending with a newline
    yields a trailing empty line, so ``text`` round-trips through
    ``from_text``. Line terminators are not stored; ``\\r\\n`` input is
    split like ``\\n``.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        lines = text.splitlines()
        if not lines:
            lines = [""]
        elif text.endswith(("\n", "\r")):
            lines.append("")
        return cls(_lines=list(lines), version=0, dirty=False)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "BufferDocument":
        """Return a document with ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self._lines)
        lines[start:end] = list(new_lines)
        if not lines:
            lines = [""]
        return BufferDocument(_lines=lines, version=self.version + 1, dirty=True)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def last_row(self) -> int:
        return len(self._lines) - 1

    def get_line(self, index: int) -> str:
        return self._lines[index]
