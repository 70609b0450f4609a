"""Keep the token model and the stylesheet on disk in sync.

Reading parses the managed regions of the stylesheet into models. Writing
renders the models back into those regions only, after taking a backup
copy of the file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from radtools.css.fonts import parse_font_faces, update_font_faces
from radtools.css.layer_base import parse_layer_base, update_layer_base
from radtools.css.parser import load_tokens
from radtools.css.theme_writer import update_color_modes, update_theme_blocks
from radtools.fileio import atomic_write_text, write_backup
from radtools.model.results import SyncResult
from radtools.model.tokens import ColorMode, ThemeTokens
from radtools.model.typography import FontDefinition, TypographyStyle

__all__ = ["StylesheetSync", "synthesize"]

logger = logging.getLogger(__name__)


def synthesize(
    css: str,
    tokens: ThemeTokens | None = None,
    fonts: list[FontDefinition] | tuple[FontDefinition, ...] | None = None,
    typography: list[TypographyStyle] | tuple[TypographyStyle, ...] | None = None,
    color_modes: list[ColorMode] | tuple[ColorMode, ...] | None = None,
) -> str:
    """Patch the managed regions of *css*; sections passed as None are left alone.

    Sections apply in order: theme blocks, font faces, layer base, color
    modes. When *color_modes* is None the modes carried by *tokens* are
    written. Override names are resolved against the base colors of
    *tokens*, or of *css* itself when no tokens are given.
    """
    updated = css
    if tokens is not None:
        updated = update_theme_blocks(updated, tokens)
    if fonts is not None:
        updated = update_font_faces(updated, fonts)
    if typography is not None:
        updated = update_layer_base(updated, typography, fonts or ())
    if color_modes is None and tokens is not None:
        color_modes = tokens.color_modes
    if color_modes is not None:
        colors = tokens.base_colors if tokens is not None else load_tokens(updated).base_colors
        updated = update_color_modes(updated, color_modes, colors)
    return updated


class StylesheetSync:
    """Read and write one stylesheet file.

    Holds no token state; every call reads the file fresh.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str:
        """Return the stylesheet text. Raises OSError if it cannot be read."""
        return self._path.read_text(encoding="utf-8")

    def load(self) -> ThemeTokens:
        return load_tokens(self.read())

    def load_typography(self) -> tuple[list[FontDefinition], list[TypographyStyle]]:
        css = self.read()
        fonts = parse_font_faces(css)
        return fonts, parse_layer_base(css, fonts)

    def write(
        self,
        tokens: ThemeTokens | None = None,
        fonts: list[FontDefinition] | tuple[FontDefinition, ...] | None = None,
        typography: list[TypographyStyle] | tuple[TypographyStyle, ...] | None = None,
        color_modes: list[ColorMode] | tuple[ColorMode, ...] | None = None,
    ) -> SyncResult:
        """Synthesize the given sections into the stylesheet and write it.

        Nothing is written if the file cannot be read. A failed backup is
        logged and does not stop the write.
        """
        try:
            css = self.read()
        except OSError as exc:
            return SyncResult(success=False, path=str(self._path), error=f"Could not read {self._path.name}: {exc}")

        updated = synthesize(css, tokens, fonts, typography, color_modes)
        backup = write_backup(self._path)

        try:
            atomic_write_text(self._path, updated)
        except OSError as exc:
            logger.error("Failed to write %s: %s", self._path, exc)
            return SyncResult(
                success=False,
                path=str(self._path),
                backup_path=str(backup) if backup else None,
                error=f"Could not write {self._path.name}: {exc}",
            )

        logger.info("Wrote %s", self._path)
        return SyncResult(success=True, path=str(self._path), backup_path=str(backup) if backup else None)
