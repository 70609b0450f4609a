"""Discover font families from files in the public fonts directory."""

from __future__ import annotations

from pathlib import Path

from radtools.css.fonts import font_id
from radtools.model.typography import FontDefinition, FontFile

__all__ = ["FONT_EXTENSIONS", "detect_font_properties", "family_from_filename", "discover_fonts"]

FONT_EXTENSIONS = ("woff2", "woff", "ttf", "otf")

# Longer names first so "extrabold" is not read as "bold".
_WEIGHT_NAMES = (
    ("extralight", 200),
    ("ultralight", 200),
    ("extrabold", 800),
    ("ultrabold", 800),
    ("semibold", 600),
    ("demibold", 600),
    ("hairline", 100),
    ("regular", 400),
    ("medium", 500),
    ("normal", 400),
    ("light", 300),
    ("black", 900),
    ("heavy", 900),
    ("thin", 100),
    ("bold", 700),
)


def detect_font_properties(filename: str) -> tuple[int, str]:
    """Guess ``(weight, style)`` from a font filename.

    ``Mondwest-Bold.woff2`` -> ``(700, "normal")``,
    ``Mondwest-Italic.woff2`` -> ``(400, "italic")``.
    """
    name = filename.lower()
    style = "italic" if "italic" in name else "normal"
    for weight_name, weight in _WEIGHT_NAMES:
        if weight_name in name:
            return weight, style
    return 400, style


def family_from_filename(filename: str) -> str:
    """``Pixeloid-Sans-Bold.woff2`` -> ``Pixeloid Sans``; ``joystix_monospace.ttf`` -> ``Joystix Monospace``."""
    parts = Path(filename).stem.replace("_", "-").split("-")
    family = parts[0]
    if len(parts) > 1 and parts[1].lower() in ("sans", "mono", "monospace", "serif"):
        family = f"{family} {parts[1]}"
    return " ".join(word[:1].upper() + word[1:].lower() for word in family.split())


def discover_fonts(fonts_dir: str | Path, public_prefix: str = "/fonts") -> list[FontDefinition]:
    """Group the font files in *fonts_dir* into font definitions.

    A missing directory yields an empty list.
    """
    fonts_dir = Path(fonts_dir)
    if not fonts_dir.is_dir():
        return []

    grouped: dict[str, list[FontFile]] = {}
    families: dict[str, str] = {}
    for path in sorted(fonts_dir.iterdir()):
        ext = path.suffix.lower().lstrip(".")
        if not path.is_file() or ext not in FONT_EXTENSIONS:
            continue
        family = family_from_filename(path.name)
        fid = font_id(family)
        weight, style = detect_font_properties(path.name)
        families.setdefault(fid, family)
        grouped.setdefault(fid, []).append(
            FontFile(
                id=f"{fid}-{path.stem}",
                weight=weight,
                style=style,
                format=ext,
                path=f"{public_prefix.rstrip('/')}/{path.name}",
            )
        )

    return [
        FontDefinition.from_files(id=fid, name=families[fid], family=families[fid], files=tuple(files))
        for fid, files in grouped.items()
    ]
