"""Render the token model back into ``@theme`` blocks and color-mode classes.

Blocks are regenerated in full and patched into the stylesheet by span,
so every byte outside the replaced block is left as it was.
"""

from __future__ import annotations

import re

from radtools.css.blocks import THEME_ANCHOR, THEME_INLINE_ANCHOR, class_anchor, find_block
from radtools.css.parser import MODE_NAMES
from radtools.css.variables import parse_reference, parse_variables
from radtools.model.tokens import RADIUS_KEYS, BaseColor, ColorCategory, ColorMode, ThemeTokens

__all__ = [
    "TAILWIND_IMPORT_RE",
    "import_insertion_point",
    "insert_after_imports",
    "render_theme_inline",
    "render_theme",
    "render_color_mode",
    "update_theme_blocks",
    "update_color_modes",
]

TAILWIND_IMPORT_RE = re.compile(r"""@import\s+["']tailwindcss["'];?[ \t]*\n?""")
_ROOT_RE = re.compile(r":root\s*\{")

_SECTION_TITLES = {
    ColorCategory.BRAND: "Brand Colors",
    ColorCategory.NEUTRAL: "Neutral Colors",
    ColorCategory.SYSTEM: "System Colors",
}


def _declared_value(color: BaseColor, written: set[str]) -> str:
    # An alias stays an alias while the variable it points at is still written.
    if color.reference is not None and parse_reference(color.reference) in written:
        return color.reference
    return color.value


def _color_lines(tokens: ThemeTokens) -> list[str]:
    written = {c.variable for c in tokens.base_colors}
    written.update(tokens.passthrough_inline, tokens.passthrough_theme)
    lines: list[str] = []
    for category in (ColorCategory.BRAND, ColorCategory.NEUTRAL, ColorCategory.SYSTEM):
        colors = tokens.colors_in(category)
        if not colors:
            continue
        if lines:
            lines.append("")
        lines.append(f"  /* {_SECTION_TITLES[category]} */")
        lines.extend(f"  {c.variable}: {_declared_value(c, written)};" for c in colors)
    return lines


def _section(lines: list[str], title: str, entries: list[str]) -> None:
    if not entries:
        return
    if lines:
        lines.append("")
    lines.append(f"  /* {title} */")
    lines.extend(entries)


def _radius_entries(border_radius: dict[str, str]) -> list[str]:
    keys = [k for k in RADIUS_KEYS if k in border_radius]
    keys += [k for k in border_radius if k not in RADIUS_KEYS]
    return [f"  --radius-{k}: {border_radius[k]};" for k in keys]


def _wrap(header: str, lines: list[str]) -> str:
    if not lines:
        return f"{header} {{\n}}"
    return f"{header} {{\n" + "\n".join(lines) + "\n}"


def render_theme_inline(tokens: ThemeTokens) -> str:
    """Render the full ``@theme inline { ... }`` block."""
    lines = _color_lines(tokens)
    _section(lines, "Custom Properties", [f"  {k}: {v};" for k, v in tokens.passthrough_inline.items()])
    return _wrap("@theme inline", lines)


def render_theme(tokens: ThemeTokens) -> str:
    """Render the full ``@theme { ... }`` block."""
    lines = _color_lines(tokens)
    _section(lines, "Border Radius", _radius_entries(tokens.border_radius))
    _section(lines, "Custom Properties", [f"  {k}: {v};" for k, v in tokens.passthrough_theme.items()])
    return _wrap("@theme", lines)


_FOLLOWING_IMPORT_RE = re.compile(r"\s*@import\s[^;\n]*;[ \t]*\n?")


def import_insertion_point(css: str) -> int | None:
    """Index just past ``@import "tailwindcss";`` and any imports directly after it.

    Rules must not come between imports, so new blocks go after the whole
    run. Returns None when there is no tailwind import.
    """
    match = TAILWIND_IMPORT_RE.search(css)
    if match is None:
        return None
    pos = match.end()
    while (following := _FOLLOWING_IMPORT_RE.match(css, pos)) is not None:
        pos = following.end()
    return pos


def insert_after_imports(css: str, chunk: str) -> str:
    """Insert *chunk* after the tailwind import run, or at the top of *css*.

    The chunk is set off from its neighbours by one blank line on each side.
    """
    pos = import_insertion_point(css)
    if pos is None:
        return f"{chunk}\n\n{css}"
    prefix = "" if css[:pos].endswith("\n") else "\n"
    rest = css[pos:]
    suffix = "\n" if not rest or rest.startswith("\n") else "\n\n"
    return css[:pos] + f"{prefix}\n{chunk}{suffix}" + rest


def _splice(css: str, start: int, end: int, replacement: str) -> str:
    return css[:start] + replacement + css[end:]


def update_theme_blocks(css: str, tokens: ThemeTokens) -> str:
    """Replace (or insert) the ``@theme inline`` and ``@theme`` blocks in *css*.

    A missing inline block goes after the ``@import "tailwindcss";`` run (or at the
    top of the file); a missing theme block goes right after the inline
    block.
    """
    inline_text = render_theme_inline(tokens)
    theme_text = render_theme(tokens)

    theme = find_block(css, THEME_ANCHOR)
    if theme is not None:
        css = _splice(css, theme.start, theme.end, theme_text)

    inline = find_block(css, THEME_INLINE_ANCHOR)
    if inline is None:
        chunk = inline_text if theme is not None else f"{inline_text}\n\n{theme_text}"
        return insert_after_imports(css, chunk)

    css = _splice(css, inline.start, inline.end, inline_text)
    if theme is None:
        end = inline.start + len(inline_text)
        css = _splice(css, end, end, f"\n\n{theme_text}")
    return css


def _override_value(value: str, variables: dict[str, str]) -> str:
    variable = variables.get(value)
    return f"var({variable})" if variable is not None else value


def render_color_mode(mode: ColorMode, colors: tuple[BaseColor, ...] | list[BaseColor]) -> str:
    """Render a ``.name { --color-x: var(--color-y); }`` class block.

    Overrides naming one of *colors* become a ``var()`` reference to it;
    any other value is written as is.
    """
    variables = {color.reference_name: color.variable for color in colors}
    lines = [f"  --color-{name}: {_override_value(value, variables)};" for name, value in mode.overrides.items()]
    return f".{mode.name} {{\n" + "\n".join(lines) + "\n}"


def _remove_block(css: str, start: int, end: int) -> str:
    # Take trailing blank space with the block so no gap is left behind.
    while end < len(css) and css[end] in " \t\n":
        end += 1
    return css[:start] + css[end:]


def update_color_modes(
    css: str,
    modes: tuple[ColorMode, ...] | list[ColorMode],
    colors: tuple[BaseColor, ...] | list[BaseColor],
) -> str:
    """Write *modes* as class blocks into *css*, resolving override names against *colors*.

    Existing blocks are replaced in place. Blocks of known modes missing
    from *modes* are removed if they hold custom property declarations.
    New blocks go before ``:root {`` or at the end of the file.
    """
    wanted = {m.name: m for m in modes if m.overrides}
    for name in MODE_NAMES:
        if name in wanted:
            continue
        block = find_block(css, class_anchor(name))
        if block is not None and parse_variables(block.content):
            css = _remove_block(css, block.start, block.end)

    pending: list[str] = []
    for mode in wanted.values():
        rendered = render_color_mode(mode, colors)
        block = find_block(css, class_anchor(mode.name))
        if block is not None:
            css = _splice(css, block.start, block.end, rendered)
        else:
            pending.append(rendered)

    if not pending:
        return css
    chunk = "\n\n".join(pending)
    root = _ROOT_RE.search(css)
    if root is not None:
        return _splice(css, root.start(), root.start(), f"{chunk}\n\n")
    return css.rstrip() + f"\n\n{chunk}\n"
