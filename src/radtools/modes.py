"""Color-mode preview as an explicit style context.

Instead of mutating a live document, a mode is applied to a plain mapping
of CSS variable -> value that a caller can hand to whatever renders it.
"""

from __future__ import annotations

from radtools.model.tokens import ColorCategory, ThemeTokens

__all__ = ["base_style_context", "apply_mode"]


def base_style_context(tokens: ThemeTokens) -> dict[str, str]:
    """Map each base color's CSS variable to its value."""
    return {color.variable: color.value for color in tokens.base_colors}


def _lookup_reference(tokens: ThemeTokens, reference: str) -> str | None:
    if reference.startswith("neutral-"):
        name = reference[len("neutral-"):]
        for color in tokens.colors_in(ColorCategory.NEUTRAL):
            if color.name == name:
                return color.value
    color = tokens.get_color(reference)
    return color.value if color is not None else None


def apply_mode(tokens: ThemeTokens, mode_id: str | None) -> dict[str, str] | None:
    """Return the style context with mode *mode_id*'s overrides applied.

    ``None`` selects the base context. An unknown mode id returns None.
    Override references that name a base color take that color's value;
    anything else is used as a literal.
    """
    context = base_style_context(tokens)
    if mode_id is None:
        return context
    mode = tokens.get_mode(mode_id)
    if mode is None:
        return None
    for name, reference in mode.overrides.items():
        value = _lookup_reference(tokens, reference)
        context[f"--color-{name}"] = value if value is not None else reference
    return context
