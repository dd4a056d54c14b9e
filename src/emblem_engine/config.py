"""Engine settings and their environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from emblem_engine.runtime.telemetry import env_flag, env_value

DEFAULT_INDENT_OFFSET = 2
DEFAULT_FILE_EXTENSIONS: tuple[str, ...] = (".em", ".emblem", ".embl")


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Configuration consumed by the structural core.

    ``extra_block_openers`` holds regular expressions appended to the
    classifier's built-in opener patterns.
    """

    indent_offset: int = DEFAULT_INDENT_OFFSET
    backspace_backdents_nesting: bool = True
    file_extensions: tuple[str, ...] = DEFAULT_FILE_EXTENSIONS
    extra_block_openers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.indent_offset, bool) or not isinstance(
            self.indent_offset, int
        ):
            raise TypeError("indent_offset must be an integer")
        if self.indent_offset <= 0:
            raise ValueError("indent_offset must be positive")
        object.__setattr__(
            self,
            "file_extensions",
            tuple(_normalize_extension(ext) for ext in self.file_extensions),
        )
        object.__setattr__(
            self, "extra_block_openers", tuple(self.extra_block_openers)
        )

    @classmethod
    def from_env(cls, **overrides: object) -> "EngineSettings":
        """Build settings from ``EMBLEM_ENGINE_*`` variables, then ``overrides``."""

        values: dict[str, object] = {}
        offset = env_value("INDENT_OFFSET")
        if offset is not None:
            try:
                values["indent_offset"] = int(offset)
            except ValueError as exc:
                raise ValueError(
                    f"EMBLEM_ENGINE_INDENT_OFFSET must be an integer, got {offset!r}"
                ) from exc
        values["backspace_backdents_nesting"] = env_flag(
            "BACKSPACE_BACKDENTS_NESTING", True
        )
        openers = env_value("EXTRA_BLOCK_OPENERS")
        if openers:
            values["extra_block_openers"] = tuple(
                pattern for pattern in openers.split(";") if pattern.strip()
            )
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]

    def handles(self, path: str | os.PathLike[str]) -> bool:
        """Return whether ``path`` carries one of the Emblem file extensions."""

        _, ext = os.path.splitext(os.fspath(path))
        return ext.lower() in self.file_extensions


def _normalize_extension(ext: str) -> str:
    cleaned = ext.strip().lower()
    if not cleaned:
        raise ValueError("file extension cannot be empty")
    return cleaned if cleaned.startswith(".") else f".{cleaned}"


_default: Optional[EngineSettings] = None


def default_settings() -> EngineSettings:
    global _default
    if _default is None:
        _default = EngineSettings.from_env()
    return _default


__all__ = [
    "DEFAULT_FILE_EXTENSIONS",
    "DEFAULT_INDENT_OFFSET",
    "EngineSettings",
    "default_settings",
]
