"""Classify parsed CSS variables into the theme token model.

Classification is by naming convention:

    --color-neutral-<n>, --neutral-<n>   neutral base color
    --color-(success|warning|error|focus)-*   system base color
    --color-<n>                          brand base color (known name or color literal)
    --radius-<k>                         border radius scale entry

Anything else is kept verbatim in the passthrough table of the block it
came from, so writing the model back does not lose it. A base color
declared as ``var(...)`` keeps that text as its ``reference`` so the alias
is written back instead of the resolved value.
"""

from __future__ import annotations

import logging
import re

from radtools.css.parser import ParsedStylesheet
from radtools.css.variables import VariableTables, parse_reference, resolve_value
from radtools.model.diagnostic import Diagnostic
from radtools.model.tokens import BaseColor, ColorCategory, ColorMode, ThemeTokens, display_name

__all__ = ["KNOWN_BRAND_COLORS", "PASSTHROUGH_PREFIXES", "classify_color", "map_tokens"]

logger = logging.getLogger(__name__)

KNOWN_BRAND_COLORS = frozenset({
    "sun-yellow", "sky-blue", "warm-cloud", "sunset-fuzz",
    "sun-red", "green", "cream", "black", "white", "transparent",
})

_SYSTEM_PREFIXES = ("success", "warning", "error", "focus")

# Variables under these prefixes are expected in theme blocks but not modeled.
PASSTHROUGH_PREFIXES = (
    "--font-", "--shadow-", "--spacing-", "--breakpoint-", "--animate-",
    "--ease-", "--text-", "--leading-", "--tracking-",
)

_COLOR_LITERAL_RE = re.compile(
    r"^(#[0-9a-fA-F]{3,8}\b|(rgba?|hsla?|hwb|lab|lch|oklab|oklch|color)\()"
)
# A mode override that is exactly one var() reference, no fallback.
_MODE_REF_RE = re.compile(r"^var\(\s*(--color-[\w-]+)\s*\)$")

_CATEGORY_ORDER = (ColorCategory.BRAND, ColorCategory.NEUTRAL, ColorCategory.SYSTEM)


def _looks_like_color(value: str) -> bool:
    return bool(_COLOR_LITERAL_RE.match(value.strip()))


def classify_color(variable: str, value: str) -> tuple[ColorCategory, str] | None:
    """Return ``(category, name)`` for a color variable, or None if it is not one.

    *value* is the declared value. An unknown ``--color-<n>`` name only
    counts as a brand color when it is declared as a color literal, so
    semantic aliases such as ``--color-primary: var(--color-sun-yellow)``
    are left for passthrough.
    """
    if variable.startswith("--color-neutral-"):
        return ColorCategory.NEUTRAL, variable[len("--color-neutral-"):]
    if variable.startswith("--neutral-"):
        return ColorCategory.NEUTRAL, variable[len("--neutral-"):]
    if not variable.startswith("--color-"):
        return None
    name = variable[len("--color-"):]
    if name.startswith(_SYSTEM_PREFIXES):
        return ColorCategory.SYSTEM, name
    if name in KNOWN_BRAND_COLORS or _looks_like_color(value):
        return ColorCategory.BRAND, name
    return None


class _Collector:
    def __init__(self, tables: VariableTables) -> None:
        self.tables = tables
        self.colors: dict[str, BaseColor] = {}
        self.radius: dict[str, str] = {}
        self.diagnostics: list[Diagnostic] = []

    def warn(self, rule: str, message: str, variable: str, source: str) -> None:
        logger.warning("%s in %s: %s", variable, source, message)
        self.diagnostics.append(Diagnostic.warning(rule, message, variable=variable, source=source))

    def take(self, variable: str, value: str, source: str, *, radius: bool) -> bool:
        """Classify one declaration. Returns False when it should pass through."""
        if radius and variable.startswith("--radius-"):
            self.radius[variable[len("--radius-"):]] = value
            return True

        classified = classify_color(variable, value)
        if classified is None:
            return False
        category, name = classified
        resolved = resolve_value(value, self.tables)

        existing = self.colors.get(name)
        if existing is not None:
            if existing.category is not category:
                self.warn(
                    "duplicate_color_id",
                    f"color id {name!r} already used by a {existing.category} color",
                    variable,
                    source,
                )
                return False
            if existing.value != resolved:
                self.warn(
                    "duplicate_color_value",
                    f"value {resolved!r} ignored; {name!r} is already {existing.value!r}",
                    variable,
                    source,
                )
            return True

        self.colors[name] = BaseColor(
            id=name,
            name=name,
            display_name=display_name(name),
            value=resolved,
            category=category,
            reference=value if parse_reference(value) is not None else None,
        )
        return True

    def sorted_colors(self) -> tuple[BaseColor, ...]:
        return tuple(
            color
            for category in _CATEGORY_ORDER
            for color in self.colors.values()
            if color.category is category
        )


def _passthrough(collector: _Collector, table: dict[str, str], source: str, *, radius: bool) -> dict[str, str]:
    kept: dict[str, str] = {}
    for variable, value in table.items():
        if collector.take(variable, value, source, radius=radius):
            continue
        kept[variable] = value
        if not variable.startswith(PASSTHROUGH_PREFIXES):
            collector.warn(
                "unclassified_variable",
                "not recognized as a color or radius token; kept verbatim",
                variable,
                source,
            )
    return kept


def _map_mode(collector: _Collector, name: str, declarations: dict[str, str]) -> ColorMode:
    # var() references to a modeled color become its reference name; every
    # other value is kept as written.
    by_variable = {color.variable: color.reference_name for color in collector.colors.values()}
    overrides: dict[str, str] = {}
    for variable, value in declarations.items():
        if not variable.startswith("--color-"):
            collector.warn(
                "mode_declaration_dropped",
                f"only --color-* overrides are kept in the .{name} mode",
                variable,
                f".{name}",
            )
            continue
        ref = _MODE_REF_RE.match(value.strip())
        overrides[variable[len("--color-"):]] = by_variable.get(ref.group(1), value) if ref else value
    return ColorMode(id=name, name=name, class_name=f".{name}", overrides=overrides)


def map_tokens(parsed: ParsedStylesheet) -> ThemeTokens:
    """Build a ThemeTokens model from parsed stylesheet declarations.

    Colors are read from the inline block first, then the theme block; a
    color already seen in the inline block is not duplicated, and a
    different value for it is reported. Radius entries are only read from
    the theme block.
    """
    collector = _Collector(parsed.tables)
    passthrough_inline = _passthrough(collector, parsed.tables.inline, "@theme inline", radius=False)
    passthrough_theme = _passthrough(collector, parsed.tables.theme, "@theme", radius=True)
    modes = tuple(
        _map_mode(collector, name, declarations)
        for name, declarations in parsed.color_modes.items()
    )
    return ThemeTokens(
        base_colors=collector.sorted_colors(),
        border_radius=collector.radius,
        color_modes=modes,
        passthrough_inline=passthrough_inline,
        passthrough_theme=passthrough_theme,
        diagnostics=tuple(collector.diagnostics),
    )
