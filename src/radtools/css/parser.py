"""Entry points that turn stylesheet text into variable tables and token models."""

from __future__ import annotations

from dataclasses import dataclass, field

from radtools.css.blocks import THEME_ANCHOR, THEME_INLINE_ANCHOR, class_anchor, find_block
from radtools.css.variables import VariableTables, parse_variables
from radtools.model.tokens import ThemeTokens

__all__ = ["MODE_NAMES", "ParsedStylesheet", "parse_stylesheet", "load_tokens"]

MODE_NAMES = ("dark", "light", "contrast")


@dataclass(frozen=True)
class ParsedStylesheet:
    """Raw declarations of the managed blocks, before classification."""

    tables: VariableTables
    color_modes: dict[str, dict[str, str]] = field(default_factory=dict, hash=False)


def parse_stylesheet(css: str) -> ParsedStylesheet:
    """Extract the ``@theme inline``, ``@theme`` and color-mode declarations from *css*.

    Absent blocks yield empty tables.
    """
    inline = find_block(css, THEME_INLINE_ANCHOR)
    theme = find_block(css, THEME_ANCHOR)
    tables = VariableTables(
        inline=parse_variables(inline.content) if inline else {},
        theme=parse_variables(theme.content) if theme else {},
    )

    modes: dict[str, dict[str, str]] = {}
    for name in MODE_NAMES:
        block = find_block(css, class_anchor(name))
        if block is not None:
            modes[name] = parse_variables(block.content)
    return ParsedStylesheet(tables=tables, color_modes=modes)


def load_tokens(css: str) -> ThemeTokens:
    """Parse *css* and classify its variables into a ThemeTokens model."""
    from radtools.css.mapper import map_tokens

    return map_tokens(parse_stylesheet(css))
