"""Token model: base colors, color modes and the theme token set."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from radtools.model.diagnostic import Diagnostic


class ColorCategory(StrEnum):
    BRAND = "brand"
    NEUTRAL = "neutral"
    SYSTEM = "system"


# Canonical border radius scale, in emission order.
RADIUS_KEYS = ("none", "xs", "sm", "md", "lg", "full")


def display_name(name: str) -> str:
    """Turn a token name into a label, e.g. ``sun-yellow`` -> ``Sun Yellow``."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split("-") if word)


@dataclass(frozen=True)
class BaseColor:
    id: str
    name: str
    display_name: str
    value: str  # literal, or unresolved var(...) text when resolution failed
    category: ColorCategory
    # Declared var() text when the color is an alias, e.g. var(--color-sun-yellow).
    reference: str | None = None

    @property
    def variable(self) -> str:
        """The CSS custom property this color is written as."""
        if self.category is ColorCategory.NEUTRAL:
            return f"--color-neutral-{self.name}"
        return f"--color-{self.name}"

    @property
    def reference_name(self) -> str:
        """The name a mode override uses for this color, e.g. ``neutral-lightest``."""
        return self.variable[len("--color-"):]


@dataclass(frozen=True)
class ColorMode:
    """A class-scoped override set such as ``.dark``.

    ``overrides`` maps a semantic color name (the part after ``--color-``)
    to either a base color reference name (``black``, ``neutral-lightest``)
    or a CSS value written out verbatim (``currentColor``, ``#fff``,
    ``var(--color-primary)``).
    """

    id: str
    name: str
    class_name: str
    overrides: dict[str, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class ThemeTokens:
    """Everything the theme blocks and color-mode classes of a stylesheet hold.

    The passthrough tables keep variables the mapper could not classify so
    they can be written back unchanged.
    """

    base_colors: tuple[BaseColor, ...] = ()
    border_radius: dict[str, str] = field(default_factory=dict, hash=False)
    color_modes: tuple[ColorMode, ...] = ()
    passthrough_inline: dict[str, str] = field(default_factory=dict, hash=False)
    passthrough_theme: dict[str, str] = field(default_factory=dict, hash=False)
    diagnostics: tuple[Diagnostic, ...] = field(default=(), compare=False)

    def colors_in(self, category: ColorCategory) -> tuple[BaseColor, ...]:
        return tuple(c for c in self.base_colors if c.category is category)

    def get_color(self, color_id: str) -> BaseColor | None:
        for color in self.base_colors:
            if color.id == color_id:
                return color
        return None

    def get_mode(self, mode_id: str) -> ColorMode | None:
        for mode in self.color_modes:
            if mode.id == mode_id:
                return mode
        return None
