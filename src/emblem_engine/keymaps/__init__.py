"""Command table and the default key bindings offered to hosts."""

from .models import ActionRef, Binding, CommandHandler, KeySequence, KeyStroke, WhenClause
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, EMBLEM_MODE, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "CommandHandler",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "EMBLEM_MODE",
    "KeySequence",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "WhenClause",
    "load_default_keymaps",
]
