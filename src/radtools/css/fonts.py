"""``@font-face`` parsing and synthesis.

Font-face bodies are expected to be flat, so blocks are matched with a
single-level regex rather than the brace-counting extractor.
"""

from __future__ import annotations

import re

from radtools.css.theme_writer import insert_after_imports
from radtools.model.typography import FontDefinition, FontFile

__all__ = ["FONT_FACE_RE", "font_id", "parse_font_faces", "render_font_faces", "update_font_faces"]

FONT_FACE_RE = re.compile(r"@font-face\s*\{(?P<body>[^}]+)\}")
_FONT_FACE_STRIP_RE = re.compile(r"@font-face\s*\{[^}]+\}\s*")

_FAMILY_RE = re.compile(r"""font-family:\s*['"]?(?P<family>[^'";]+)['"]?\s*;""")
_SRC_RE = re.compile(
    r"""src:\s*url\(\s*['"]?(?P<path>[^'"()]+)['"]?\s*\)\s*format\(\s*['"]?(?P<format>[^'")]+)['"]?\s*\)"""
)
_WEIGHT_RE = re.compile(r"font-weight:\s*(?P<weight>\d+)\s*;")
_STYLE_RE = re.compile(r"font-style:\s*(?P<style>\w+)\s*;")

# CSS format() names <-> file extensions
_FORMAT_TO_EXT = {"truetype": "ttf", "opentype": "otf"}
_EXT_TO_FORMAT = {"ttf": "truetype", "otf": "opentype"}


def font_id(family: str) -> str:
    """``Joystix Monospace`` -> ``joystix-monospace``."""
    return "-".join(family.lower().split())


def parse_font_faces(css: str) -> list[FontDefinition]:
    """Group every ``@font-face`` block in *css* into font definitions.

    Blocks without a family or a ``src: url(...) format(...)`` are skipped.
    """
    order: list[str] = []
    names: dict[str, str] = {}
    files: dict[str, list[FontFile]] = {}

    for match in FONT_FACE_RE.finditer(css):
        body = match.group("body")
        family_match = _FAMILY_RE.search(body)
        src_match = _SRC_RE.search(body)
        if family_match is None or src_match is None:
            continue
        family = family_match.group("family").strip()
        fmt = src_match.group("format").strip()
        fmt = _FORMAT_TO_EXT.get(fmt, fmt)
        weight_match = _WEIGHT_RE.search(body)
        weight = int(weight_match.group("weight")) if weight_match else 400
        style_match = _STYLE_RE.search(body)
        style = style_match.group("style") if style_match else "normal"

        fid = font_id(family)
        if fid not in files:
            order.append(fid)
            names[fid] = family
            files[fid] = []
        files[fid].append(
            FontFile(
                id=f"{fid}-{weight}-{style}",
                weight=weight,
                style=style,
                format=fmt,
                path=src_match.group("path").strip(),
            )
        )

    return [
        FontDefinition.from_files(id=fid, name=names[fid], family=names[fid], files=tuple(files[fid]))
        for fid in order
    ]


def _render_face(family: str, file: FontFile) -> str:
    fmt = _EXT_TO_FORMAT.get(file.format, file.format)
    return (
        "@font-face {\n"
        f"  font-family: '{family}';\n"
        f"  src: url('{file.path}') format('{fmt}');\n"
        f"  font-weight: {file.weight};\n"
        f"  font-style: {file.style};\n"
        "  font-display: swap;\n"
        "}"
    )


def render_font_faces(fonts: list[FontDefinition] | tuple[FontDefinition, ...]) -> str:
    """Render one ``@font-face`` block per font file."""
    return "\n\n".join(_render_face(font.family, file) for font in fonts for file in font.files)


def update_font_faces(css: str, fonts: list[FontDefinition] | tuple[FontDefinition, ...]) -> str:
    """Replace all ``@font-face`` blocks in *css* with ones rendered from *fonts*.

    New blocks go after ``@import "tailwindcss";`` and the imports following it, or at the top
    of the file when that import is absent.
    """
    updated = _FONT_FACE_STRIP_RE.sub("", css)
    rendered = render_font_faces(fonts)
    if not rendered:
        return updated
    return insert_after_imports(updated, rendered)
