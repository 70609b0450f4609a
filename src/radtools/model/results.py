"""Result models returned by file-mutating operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class SyncResult:
    """Outcome of writing synthesized CSS back to disk."""

    success: bool
    path: str
    backup_path: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return not self.success


class SwitchErrorKind(StrEnum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    IO = "io"


@dataclass(frozen=True)
class ThemeSwitchResult:
    """Outcome of rewriting the active theme import.

    ``previous_theme`` is the theme-name suffix of the replaced import
    (``rad-os`` for ``@radflow/theme-rad-os``) so callers can roll back.
    """

    success: bool
    previous_theme: str | None = None
    new_theme: str | None = None
    error: str | None = None
    error_kind: SwitchErrorKind | None = None

    @property
    def failed(self) -> bool:
        return not self.success
