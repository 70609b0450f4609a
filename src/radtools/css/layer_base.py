"""``@layer base`` typography rules: parse and synthesize.

Each element rule body is a single ``@apply`` line, e.g.::

    @layer base {
      h1 {
        @apply font-mondwest text-4xl font-bold leading-tight text-black;
      }
    }

Replacement matches the layer with a regex that allows one level of
nested rules. Element rules that nest further (a media query inside
``h1 { }``) are not supported.
"""

from __future__ import annotations

import re

from radtools.css.blocks import find_block
from radtools.model.typography import (
    ELEMENT_DISPLAY_NAMES,
    FontDefinition,
    TypographyStyle,
    element_display_name,
)

__all__ = [
    "SIZE_CLASSES",
    "WEIGHT_CLASSES",
    "LEADING_CLASSES",
    "TRACKING_CLASSES",
    "build_utilities",
    "parse_layer_base",
    "render_layer_base",
    "update_layer_base",
]

SIZE_CLASSES = frozenset({
    "text-xs", "text-sm", "text-base", "text-lg", "text-xl", "text-2xl",
    "text-3xl", "text-4xl", "text-5xl", "text-6xl", "text-7xl", "text-8xl", "text-9xl",
})
WEIGHT_CLASSES = frozenset({
    "font-thin", "font-extralight", "font-light", "font-normal", "font-medium",
    "font-semibold", "font-bold", "font-extrabold", "font-black",
})
LEADING_CLASSES = frozenset({
    "leading-none", "leading-tight", "leading-snug", "leading-normal",
    "leading-relaxed", "leading-loose",
})
TRACKING_CLASSES = frozenset({
    "tracking-tighter", "tracking-tight", "tracking-normal", "tracking-wide",
    "tracking-wider", "tracking-widest",
})
_TEXT_NON_COLOR = frozenset({
    "text-left", "text-center", "text-right", "text-justify", "text-start", "text-end",
    "text-wrap", "text-nowrap", "text-balance", "text-pretty", "text-ellipsis", "text-clip",
})

_LAYER_BASE_ANCHOR = re.compile(r"@layer\s+base\b")
_LAYER_BASE_RE = re.compile(r"@layer\s+base\s*\{(?:[^{}]|\{[^{}]*\})*\}")
_ELEMENTS = "|".join(sorted(ELEMENT_DISPLAY_NAMES, key=len, reverse=True))
_ELEMENT_RULE_RE = re.compile(rf"(?<![\w.#-])(?P<element>{_ELEMENTS})\s*\{{(?P<body>[^{{}}]*)\}}")
_APPLY_RE = re.compile(r"@apply\s+(?P<classes>[^;]+);")


def _compact(family: str) -> str:
    return "".join(family.lower().split())


def _style_from_classes(element: str, classes: list[str], fonts_by_utility: dict[str, str]) -> TypographyStyle:
    # Fields the rule does not set stay empty so writing it back adds nothing.
    fields: dict[str, object] = {
        "font_family_id": "",
        "font_size": "",
        "font_weight": "",
        "base_color_id": "",
        "line_height": None,
        "letter_spacing": None,
    }
    utilities: list[str] = []

    for cls in classes:
        if cls in WEIGHT_CLASSES:
            fields["font_weight"] = cls
        elif cls.startswith("font-") and not fields["font_family_id"]:
            name = cls[len("font-"):]
            fields["font_family_id"] = fonts_by_utility.get(name, name)
        elif cls in SIZE_CLASSES:
            fields["font_size"] = cls
        elif cls in LEADING_CLASSES:
            fields["line_height"] = cls
        elif cls in TRACKING_CLASSES:
            fields["letter_spacing"] = cls
        elif cls.startswith("text-") and cls not in _TEXT_NON_COLOR and not fields["base_color_id"]:
            fields["base_color_id"] = cls[len("text-"):]
        else:
            utilities.append(cls)

    return TypographyStyle(
        id=element,
        element=element,
        display_name=element_display_name(element),
        utilities=tuple(utilities),
        **fields,  # type: ignore[arg-type]
    )


def parse_layer_base(css: str, fonts: list[FontDefinition] | tuple[FontDefinition, ...] | None = None) -> list[TypographyStyle]:
    """Parse element rules of the ``@layer base`` block into typography styles.

    When *fonts* is given, ``font-<compact family>`` utilities are mapped
    back to the matching font id; otherwise the compact name is kept.
    """
    block = find_block(css, _LAYER_BASE_ANCHOR)
    if block is None:
        return []

    fonts_by_utility = {_compact(f.family): f.id for f in fonts or ()}
    styles: dict[str, TypographyStyle] = {}
    for match in _ELEMENT_RULE_RE.finditer(block.content):
        apply = _APPLY_RE.search(match.group("body"))
        if apply is None:
            continue
        element = match.group("element")
        styles[element] = _style_from_classes(element, apply.group("classes").split(), fonts_by_utility)
    return list(styles.values())


def build_utilities(style: TypographyStyle, fonts: list[FontDefinition] | tuple[FontDefinition, ...]) -> list[str]:
    """Assemble the ``@apply`` class list for *style* in its fixed order.

    font family, size, weight, line height, letter spacing, text color,
    then extra utilities.
    """
    classes: list[str] = []
    font = next((f for f in fonts if f.id == style.font_family_id), None)
    if font is not None:
        classes.append(font.utility)
    elif style.font_family_id:
        classes.append(f"font-{_compact(style.font_family_id)}")
    for value in (style.font_size, style.font_weight, style.line_height, style.letter_spacing):
        if value:
            classes.append(value)
    if style.base_color_id:
        classes.append(f"text-{style.base_color_id}")
    classes.extend(style.utilities)
    return classes


def _authoritative(styles: list[TypographyStyle] | tuple[TypographyStyle, ...]) -> list[TypographyStyle]:
    # One style per element: the last one wins, keeping the first position.
    by_element: dict[str, TypographyStyle] = {}
    for style in styles:
        by_element[style.element] = style
    return list(by_element.values())


def render_layer_base(
    styles: list[TypographyStyle] | tuple[TypographyStyle, ...],
    fonts: list[FontDefinition] | tuple[FontDefinition, ...] = (),
) -> str:
    """Render the full ``@layer base { ... }`` block."""
    rules: list[str] = []
    for style in _authoritative(styles):
        classes = build_utilities(style, fonts)
        if classes:
            rules.append(f"  {style.element} {{\n    @apply {' '.join(classes)};\n  }}")
    return "@layer base {\n" + "\n\n".join(rules) + "\n}"


def update_layer_base(
    css: str,
    styles: list[TypographyStyle] | tuple[TypographyStyle, ...],
    fonts: list[FontDefinition] | tuple[FontDefinition, ...] = (),
) -> str:
    """Replace the ``@layer base`` block in *css*, or append one at the end."""
    rendered = render_layer_base(styles, fonts)
    match = _LAYER_BASE_RE.search(css)
    if match is not None:
        return css[: match.start()] + rendered + css[match.end():]
    return css.rstrip() + f"\n\n{rendered}\n"
