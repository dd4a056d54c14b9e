"""Decides which lines may have lines nested beneath them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Pattern

from emblem_engine.config import EngineSettings

RESERVED_WORDS: tuple[str, ...] = (
    "if",
    "unless",
    "while",
    "until",
    "else",
    "begin",
    "elsif",
    "rescue",
    "ensure",
    "when",
)


@dataclass(frozen=True, slots=True)
class LinePattern:
    """Named predicate over raw line text, backed by a regular expression."""

    name: str
    regex: Pattern[str] = field(compare=False)
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("pattern name cannot be empty")
        if isinstance(self.regex, str):
            object.__setattr__(self, "regex", re.compile(self.regex))

    @classmethod
    def compile(cls, name: str, expression: str, description: str = "") -> "LinePattern":
        try:
            return cls(name=name, regex=re.compile(expression), description=description)
        except re.error as exc:
            raise ValueError(f"Invalid pattern '{name}': {exc}") from exc

    def matches(self, text: str) -> bool:
        return self.regex.match(text) is not None


DEFAULT_PATTERNS: tuple[LinePattern, ...] = (
    LinePattern.compile(
        "tag",
        r"^[ \t]*[.#a-zA-Z][^ \t]*(\[.*\])?",
        "tag, class or id selector with optional attribute brackets",
    ),
    LinePattern.compile(
        "do_block",
        r"^[ \t]*[-=].*\bdo[ \t]*(\|.*\|[ \t]*)?$",
        "control or output line ending in a do block",
    ),
    LinePattern.compile(
        "keyword",
        r"^[ \t]*[-=]?[ \t]*(" + "|".join(RESERVED_WORDS) + r")\b",
        "control keyword introducing a body",
    ),
    LinePattern.compile("text_block", r"^[ \t]*\|", "literal text block"),
    LinePattern.compile("comment", r"^[ \t]*/", "comment block"),
    LinePattern.compile("embedded", r"^[ \t]*[a-z0-9_]+:", "embedded content filter"),
)


class LineClassifier:
    """Ordered disjunction of ``LinePattern`` predicates.

    Order only matters for ``matching_pattern``; ``is_block_opener`` is a
    plain OR over every pattern.
    """

    def __init__(self, patterns: Iterable[LinePattern] = DEFAULT_PATTERNS) -> None:
        self._patterns: tuple[LinePattern, ...] = ()
        self.extend(patterns)

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> "LineClassifier":
        classifier = cls()
        classifier.extend(
            LinePattern.compile(f"custom_{index}", expression)
            for index, expression in enumerate(settings.extra_block_openers)
        )
        return classifier

    @property
    def patterns(self) -> tuple[LinePattern, ...]:
        return self._patterns

    def extend(self, patterns: Iterable[LinePattern]) -> None:
        added = tuple(patterns)
        names = [pattern.name for pattern in self._patterns + added]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate pattern names: {duplicates}")
        self._patterns += added

    def pattern(self, name: str) -> LinePattern:
        for candidate in self._patterns:
            if candidate.name == name:
                return candidate
        raise KeyError(f"Pattern '{name}' is not registered")

    def matching_pattern(self, text: str) -> Optional[LinePattern]:
        for candidate in self._patterns:
            if candidate.matches(text):
                return candidate
        return None

    def is_block_opener(self, text: str) -> bool:
        return any(candidate.matches(text) for candidate in self._patterns)

    def matches(self, name: str, text: str) -> bool:
        return self.pattern(name).matches(text)


__all__ = [
    "DEFAULT_PATTERNS",
    "LineClassifier",
    "LinePattern",
    "RESERVED_WORDS",
]
