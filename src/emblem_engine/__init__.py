"""Indentation-aware structural editing engine for Emblem templates."""

__all__ = [
    "buffer",
    "commands",
    "config",
    "editor",
    "keymaps",
    "runtime",
    "structure",
]

__version__ = "0.1.0"
