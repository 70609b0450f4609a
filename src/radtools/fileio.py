"""File primitives used by the stylesheet and theme writers."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def backup_path_for(path: str | Path) -> Path:
    """Sibling backup location: ``app/globals.css`` -> ``app/.globals.css.backup``."""
    path = Path(path)
    return path.with_name(f".{path.name}.backup")


def write_backup(path: str | Path) -> Path | None:
    """Copy *path* to its backup location.

    Failures are logged and swallowed; returns None when no backup was made.
    """
    target = backup_path_for(path)
    try:
        shutil.copyfile(path, target)
    except OSError as exc:
        logger.warning("Could not back up %s: %s", path, exc)
        return None
    return target


def atomic_write_text(path: str | Path, text: str) -> None:
    """Write *text* to *path* through a temp file in the same directory and rename it."""
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
