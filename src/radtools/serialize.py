"""JSON wire format for the devtools panel.

The panel speaks camelCase (``baseColors``, ``displayName``,
``fontFamilyId``); the model uses snake_case dataclasses. These helpers
convert between the two.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from radtools.model.component import DiscoveredComponent
from radtools.model.tokens import BaseColor, ColorCategory, ColorMode, ThemeTokens, display_name
from radtools.model.typography import FontDefinition, FontFile, TypographyStyle, element_display_name


def color_to_dict(color: BaseColor) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": color.id,
        "name": color.name,
        "displayName": color.display_name,
        "value": color.value,
        "category": color.category.value,
    }
    if color.reference:
        data["reference"] = color.reference
    return data


def color_from_dict(data: dict[str, Any]) -> BaseColor:
    name = data.get("name") or data["id"]
    return BaseColor(
        id=data.get("id") or name,
        name=name,
        display_name=data.get("displayName") or display_name(name),
        value=data["value"],
        category=ColorCategory(data.get("category", "brand")),
        reference=data.get("reference") or None,
    )


def _carry_reference(color: BaseColor, base: ThemeTokens) -> BaseColor:
    # The panel edits resolved values. An unchanged value keeps the alias
    # on disk; a changed one is written as a literal.
    current = base.get_color(color.id)
    if current is None or current.reference is None:
        return color
    if color.value != current.value:
        return replace(color, reference=None)
    return replace(color, reference=color.reference or current.reference)


def mode_to_dict(mode: ColorMode) -> dict[str, Any]:
    return {
        "id": mode.id,
        "name": mode.name,
        "className": mode.class_name,
        "overrides": dict(mode.overrides),
    }


def mode_from_dict(data: dict[str, Any]) -> ColorMode:
    name = data["name"]
    return ColorMode(
        id=data.get("id") or name,
        name=name,
        class_name=data.get("className") or f".{name}",
        overrides=dict(data.get("overrides") or {}),
    )


def tokens_to_dict(tokens: ThemeTokens) -> dict[str, Any]:
    return {
        "baseColors": [color_to_dict(c) for c in tokens.base_colors],
        "borderRadius": dict(tokens.border_radius),
        "colorModes": [mode_to_dict(m) for m in tokens.color_modes],
        "passthrough": {
            "themeInline": dict(tokens.passthrough_inline),
            "theme": dict(tokens.passthrough_theme),
        },
        "warnings": [str(d) for d in tokens.diagnostics],
    }


def tokens_from_dict(data: dict[str, Any], base: ThemeTokens | None = None) -> ThemeTokens:
    """Build tokens from a panel payload.

    Fields missing from *data* fall back to *base* (usually the tokens
    currently on disk), so a payload with only ``baseColors`` keeps the
    existing radius scale and passthrough variables. A color whose value matches the one in *base* keeps its ``var()``
    reference from there.
    """
    base = base or ThemeTokens()
    passthrough = data.get("passthrough") or {}
    return ThemeTokens(
        base_colors=(
            tuple(_carry_reference(color_from_dict(c), base) for c in data["baseColors"])
            if data.get("baseColors") is not None
            else base.base_colors
        ),
        border_radius=(
            dict(data["borderRadius"]) if data.get("borderRadius") is not None else dict(base.border_radius)
        ),
        color_modes=(
            tuple(mode_from_dict(m) for m in data["colorModes"])
            if data.get("colorModes") is not None
            else base.color_modes
        ),
        passthrough_inline=dict(passthrough.get("themeInline", base.passthrough_inline)),
        passthrough_theme=dict(passthrough.get("theme", base.passthrough_theme)),
    )


def font_file_to_dict(file: FontFile) -> dict[str, Any]:
    return {
        "id": file.id,
        "weight": file.weight,
        "style": file.style,
        "format": file.format,
        "path": file.path,
    }


def font_to_dict(font: FontDefinition) -> dict[str, Any]:
    return {
        "id": font.id,
        "name": font.name,
        "family": font.family,
        "files": [font_file_to_dict(f) for f in font.files],
        "weights": list(font.weights),
        "styles": list(font.styles),
    }


def font_from_dict(data: dict[str, Any]) -> FontDefinition:
    files = tuple(
        FontFile(
            id=f.get("id") or f"{data['id']}-{f.get('weight', 400)}-{f.get('style', 'normal')}",
            weight=int(f.get("weight", 400)),
            style=f.get("style", "normal"),
            format=f["format"],
            path=f["path"],
        )
        for f in data.get("files") or ()
    )
    family = data.get("family") or data["name"]
    # weights/styles are always recomputed from the files.
    return FontDefinition.from_files(
        id=data["id"], name=data.get("name") or family, family=family, files=files
    )


def style_to_dict(style: TypographyStyle) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": style.id,
        "element": style.element,
        "fontFamilyId": style.font_family_id,
        "fontSize": style.font_size,
        "fontWeight": style.font_weight,
        "baseColorId": style.base_color_id,
        "displayName": style.display_name,
        "utilities": list(style.utilities),
    }
    if style.line_height:
        data["lineHeight"] = style.line_height
    if style.letter_spacing:
        data["letterSpacing"] = style.letter_spacing
    return data


def style_from_dict(data: dict[str, Any]) -> TypographyStyle:
    element = data["element"]
    return TypographyStyle(
        id=data.get("id") or element,
        element=element,
        font_family_id=data.get("fontFamilyId", ""),
        font_size=data.get("fontSize", "text-base"),
        font_weight=data.get("fontWeight", "font-normal"),
        base_color_id=data.get("baseColorId", ""),
        display_name=data.get("displayName") or element_display_name(element),
        line_height=data.get("lineHeight") or None,
        letter_spacing=data.get("letterSpacing") or None,
        utilities=tuple(data.get("utilities") or ()),
    )


def component_to_dict(component: DiscoveredComponent) -> dict[str, Any]:
    props = []
    for prop in component.props:
        entry: dict[str, Any] = {"name": prop.name, "type": prop.type, "required": prop.required}
        if prop.default_value is not None:
            entry["defaultValue"] = prop.default_value
        props.append(entry)
    return {"name": component.name, "path": component.path, "props": props}
