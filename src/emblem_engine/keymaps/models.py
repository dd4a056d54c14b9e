"""Dataclasses describing commands and the key sequences bound to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Iterable, Mapping

if TYPE_CHECKING:
    from emblem_engine.commands import CommandContext, CommandResult

CommandHandler = Callable[["CommandContext", int], "CommandResult"]


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single key press; ``token`` is its canonical ``mod+key`` spelling."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Parse ``"ctrl+c"`` style tokens; a lone ``"+"`` is the plus key."""

        if token == "+" or "+" not in token.strip("+"):
            return cls(token)
        *modifiers, key = token.split("+")
        return cls(key, tuple(modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers + (self.key,))
        return self.key


@dataclass(frozen=True, slots=True)
class KeySequence:
    strokes: tuple[KeyStroke, ...]
    timeout_ms: int = 1000

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("KeySequence requires at least one stroke")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.strokes)

    @classmethod
    def parse(cls, keys: str, *, timeout_ms: int = 1000) -> "KeySequence":
        """Build a sequence from space separated tokens, e.g. ``"ctrl+c ctrl+f"``."""

        strokes = tuple(KeyStroke.parse(token) for token in keys.split())
        return cls(strokes=strokes, timeout_ms=timeout_ms)


@dataclass(frozen=True, slots=True)
class WhenClause:
    """Boolean flag condition gating a binding; ``!flag`` negates."""

    flag: str
    expected: bool = True

    def __post_init__(self) -> None:
        if not self.flag:
            raise ValueError("flag cannot be empty")

    @classmethod
    def parse(cls, expression: str) -> "WhenClause":
        expr = expression.strip()
        if not expr:
            raise ValueError("expression cannot be empty")
        if expr.startswith("!"):
            return cls(expr[1:], False)
        return cls(expr)

    def evaluate(self, context: Mapping[str, bool]) -> bool:
        return bool(context.get(self.flag, False)) is self.expected


@dataclass(frozen=True, slots=True)
class ActionRef:
    """A named entry of the command table.

    ``cycling`` commands consult the last-operation memo; running any other
    command clears it.
    """

    id: str
    handler: CommandHandler
    description: str = ""
    cycling: bool = False
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, context: "CommandContext", count: int = 1) -> "CommandResult":
        return self.handler(context, count)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key sequence with a command in one editor mode."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""
    when: tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(
            self,
            "when",
            tuple(
                clause if isinstance(clause, WhenClause) else WhenClause.parse(str(clause))
                for clause in self.when
            ),
        )

    @property
    def when_map(self) -> Mapping[str, bool]:
        return MappingProxyType({clause.flag: clause.expected for clause in self.when})

    def allows(self, context: Mapping[str, bool]) -> bool:
        return all(clause.evaluate(context) for clause in self.when)

    @property
    def key_signature(self) -> str:
        return " ".join(self.sequence.tokens)


__all__ = [
    "ActionRef",
    "Binding",
    "CommandHandler",
    "KeySequence",
    "KeyStroke",
    "WhenClause",
]
