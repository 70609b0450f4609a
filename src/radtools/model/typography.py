"""Typography model: font families, font files and per-element styles."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class FontFile:
    id: str
    weight: int  # 100-900
    style: str  # "normal" or "italic"
    format: str  # woff2, woff, ttf, otf
    path: str  # public path, e.g. /fonts/Mondwest-Regular.woff2


@dataclass(frozen=True)
class FontDefinition:
    """A font family grouping one or more weight/style variants.

    ``weights`` and ``styles`` are the de-duplicated union over ``files``.
    Use :meth:`with_file` / :meth:`without_file` so they stay in sync.
    """

    id: str
    name: str
    family: str
    files: tuple[FontFile, ...] = ()
    weights: tuple[int, ...] = ()
    styles: tuple[str, ...] = ()

    @classmethod
    def from_files(cls, id: str, name: str, family: str, files: tuple[FontFile, ...]) -> FontDefinition:
        weights, styles = _union(files)
        return cls(id=id, name=name, family=family, files=files, weights=weights, styles=styles)

    def with_file(self, file: FontFile) -> FontDefinition:
        files = self.files + (file,)
        weights, styles = _union(files)
        return replace(self, files=files, weights=weights, styles=styles)

    def without_file(self, file_id: str) -> FontDefinition:
        files = tuple(f for f in self.files if f.id != file_id)
        weights, styles = _union(files)
        return replace(self, files=files, weights=weights, styles=styles)

    @property
    def utility(self) -> str:
        """Tailwind font-family utility, e.g. ``Joystix Monospace`` -> ``font-joystixmonospace``."""
        return "font-" + "".join(self.family.lower().split())


def _union(files: tuple[FontFile, ...]) -> tuple[tuple[int, ...], tuple[str, ...]]:
    weights = tuple(sorted({f.weight for f in files}))
    styles: list[str] = []
    for f in files:
        if f.style not in styles:
            styles.append(f.style)
    return weights, tuple(styles)


ELEMENT_DISPLAY_NAMES: dict[str, str] = {
    "h1": "Heading 1",
    "h2": "Heading 2",
    "h3": "Heading 3",
    "h4": "Heading 4",
    "h5": "Heading 5",
    "h6": "Heading 6",
    "p": "Paragraph",
    "a": "Link",
    "ul": "Unordered List",
    "ol": "Ordered List",
    "li": "List Item",
    "small": "Small Text",
    "strong": "Strong",
    "em": "Emphasis",
    "code": "Inline Code",
    "pre": "Code Block",
    "kbd": "Keyboard Input",
    "mark": "Highlighted Text",
    "blockquote": "Block Quote",
    "cite": "Citation",
    "abbr": "Abbreviation",
    "dfn": "Definition Term",
    "q": "Inline Quote",
    "sub": "Subscript",
    "sup": "Superscript",
    "del": "Deleted Text",
    "ins": "Inserted Text",
    "caption": "Caption",
    "label": "Form Label",
    "figcaption": "Figure Caption",
}


def element_display_name(element: str) -> str:
    return ELEMENT_DISPLAY_NAMES.get(element, element.upper())


@dataclass(frozen=True)
class TypographyStyle:
    """Base style for one HTML element, emitted as an ``@apply`` rule in ``@layer base``.

    All class fields hold Tailwind utility names (``text-4xl``, ``font-bold``).
    ``font_family_id`` references a :class:`FontDefinition` id and
    ``base_color_id`` a base color id.
    """

    id: str
    element: str
    font_family_id: str = ""
    font_size: str = "text-base"
    font_weight: str = "font-normal"
    base_color_id: str = ""
    display_name: str = ""
    line_height: str | None = None
    letter_spacing: str | None = None
    utilities: tuple[str, ...] = ()
