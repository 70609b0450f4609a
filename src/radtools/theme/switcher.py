"""Switch the active theme package by rewriting its ``@import`` line.

The stylesheet is expected to hold one import such as::

    @import "@radflow/theme-rad-os";

Switching replaces that statement with one pointing at the new package.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from radtools.fileio import atomic_write_text
from radtools.model.results import SwitchErrorKind, ThemeSwitchResult

__all__ = [
    "THEME_PACKAGE_RE",
    "is_valid_theme_package_name",
    "find_theme_import",
    "replace_theme_import",
    "current_theme_import",
    "switch_theme_import",
]

logger = logging.getLogger(__name__)

THEME_PACKAGE_RE = re.compile(r"^(@radflow/)?theme-[a-z0-9-]+$")

_THEME_IMPORT_RE = re.compile(
    r"""@import\s+["'](?P<package>@radflow/theme-(?P<theme>[^"']+))["'];?"""
)


def is_valid_theme_package_name(package_name: str) -> bool:
    """True for ``@radflow/theme-<name>`` or ``theme-<name>``."""
    return bool(THEME_PACKAGE_RE.match(package_name))


def find_theme_import(css: str) -> str | None:
    """Return the package of the first theme import in *css*, or None."""
    match = _THEME_IMPORT_RE.search(css)
    return match.group("package") if match else None


def replace_theme_import(css: str, package_name: str) -> tuple[str, str] | None:
    """Point the first theme import at *package_name*.

    Returns ``(updated_css, previous_theme)`` where *previous_theme* is the
    theme-name suffix of the replaced import, or None if no import matched.
    """
    match = _THEME_IMPORT_RE.search(css)
    if match is None:
        return None
    updated = css[: match.start()] + f'@import "{package_name}";' + css[match.end():]
    return updated, match.group("theme")


def current_theme_import(path: str | Path) -> str | None:
    """Read *path* and return its theme package, or None if unreadable or absent."""
    try:
        css = Path(path).read_text(encoding="utf-8")
    except OSError:
        return None
    return find_theme_import(css)


def switch_theme_import(path: str | Path, package_name: str) -> ThemeSwitchResult:
    """Rewrite the theme import in the stylesheet at *path*.

    The package name is validated before the file is touched. Failures are
    reported in the result, never raised.
    """
    if not is_valid_theme_package_name(package_name):
        return ThemeSwitchResult(
            success=False,
            error=(
                f"Invalid theme package name {package_name!r}: "
                "must follow @radflow/theme-<name> or theme-<name>"
            ),
            error_kind=SwitchErrorKind.VALIDATION,
        )

    path = Path(path)
    try:
        css = path.read_text(encoding="utf-8")
    except OSError as exc:
        return ThemeSwitchResult(success=False, error=str(exc), error_kind=SwitchErrorKind.IO)

    replaced = replace_theme_import(css, package_name)
    if replaced is None:
        return ThemeSwitchResult(
            success=False,
            error=f"No theme import found in {path.name}",
            error_kind=SwitchErrorKind.NOT_FOUND,
        )
    updated, previous = replaced

    try:
        atomic_write_text(path, updated)
    except OSError as exc:
        return ThemeSwitchResult(success=False, error=str(exc), error_kind=SwitchErrorKind.IO)

    logger.info("Switched theme import in %s: theme-%s -> %s", path, previous, package_name)
    return ThemeSwitchResult(success=True, previous_theme=previous, new_theme=package_name)
