"""Heuristic component signature scanner for TypeScript/TSX source.

This is pattern matching, not a parser. It recovers enough metadata to
drive a preview: the default-exported component's name, its props and
their defaults. Multi-line types, generics and unusual prop declaration
styles may be missed, in which case fewer props are returned. An empty
prop list is a valid result.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from radtools.model.component import DiscoveredComponent, PropDefinition

__all__ = ["parse_component", "scan_components", "SOURCE_SUFFIXES"]

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = (".tsx", ".ts")

_DEFAULT_FUNCTION_RE = re.compile(r"export\s+default\s+(?:async\s+)?function\b\s*(?P<name>\w+)?")
_DEFAULT_CLASS_RE = re.compile(r"export\s+default\s+class\s+(?P<name>\w+)")
_DEFAULT_IDENT_RE = re.compile(r"export\s+default\s+(?P<name>[A-Za-z_$][\w$]*)\s*;?")

_INTERFACE_RE = re.compile(r"interface\s+(?P<name>\w+Props)\b[^{]*\{(?P<body>[^}]+)\}")
_INTERFACE_MEMBER_RE = re.compile(r"^(?:readonly\s+)?(?P<name>\w+)(?P<optional>\?)?\s*:\s*(?P<type>[^;]+)")

# { a, b = 1 }: { a: string; b?: number }
_INLINE_RE = re.compile(r"\{\s*(?P<pattern>[^}]+?)\s*\}\s*:\s*\{(?P<types>[^}]+)\}")
_INLINE_MEMBER_RE = re.compile(r"^(?P<name>\w+)(?P<optional>\?)?\s*:\s*(?P<type>.+)$")

# Destructuring pattern followed by its type, named or inline.
_DESTRUCTURE_RE = re.compile(r"\{\s*(?P<pattern>[^}]+?)\s*\}\s*:\s*(?:\w+Props\b|\{[^}]+\})")

_KEYWORDS = frozenset({"function", "class", "async", "const", "let", "var", "new"})


def _component_name(content: str, path: str) -> str | None:
    match = _DEFAULT_FUNCTION_RE.search(content)
    if match is not None:
        return match.group("name") or Path(path).stem
    match = _DEFAULT_CLASS_RE.search(content)
    if match is not None:
        return match.group("name")
    for match in _DEFAULT_IDENT_RE.finditer(content):
        if match.group("name") not in _KEYWORDS:
            return match.group("name")
    return None


def _interface_props(content: str, name: str) -> list[PropDefinition]:
    interfaces = list(_INTERFACE_RE.finditer(content))
    if not interfaces:
        return []
    # Prefer <Name>Props when a file declares several props interfaces.
    chosen = next((m for m in interfaces if m.group("name") == f"{name}Props"), interfaces[0])

    props: list[PropDefinition] = []
    for line in chosen.group("body").splitlines():
        line = line.strip()
        if not line or line.startswith(("//", "/*", "*")):
            continue
        member = _INTERFACE_MEMBER_RE.match(line)
        if member is None:
            continue
        props.append(
            PropDefinition(
                name=member.group("name"),
                type=member.group("type").strip().rstrip(","),
                required=not member.group("optional"),
            )
        )
    return props


def _inline_props(content: str) -> list[PropDefinition]:
    match = _INLINE_RE.search(content)
    if match is None:
        return []
    props: list[PropDefinition] = []
    for part in re.split(r"[,;\n]", match.group("types")):
        member = _INLINE_MEMBER_RE.match(part.strip())
        if member is None:
            continue
        props.append(
            PropDefinition(
                name=member.group("name"),
                type=member.group("type").strip(),
                required=not member.group("optional"),
            )
        )
    return props


def _default_value(pattern: str, prop: str) -> str | None:
    match = re.search(
        rf"(?<![\w$]){re.escape(prop)}\s*=(?![=>])\s*(?P<value>['\"`]?[^,}}]+['\"`]?)",
        pattern,
    )
    return match.group("value").strip() if match else None


def parse_component(content: str, path: str) -> DiscoveredComponent | None:
    """Extract the default-exported component of a source file.

    Returns None when the file has no default export.
    """
    name = _component_name(content, path)
    if name is None:
        return None

    props = _interface_props(content, name) or _inline_props(content)

    destructure = _DESTRUCTURE_RE.search(content)
    if destructure is not None and props:
        pattern = destructure.group("pattern")
        with_defaults = []
        for prop in props:
            default = _default_value(pattern, prop.name)
            if default is not None:
                prop = PropDefinition(
                    name=prop.name, type=prop.type, required=prop.required, default_value=default
                )
            with_defaults.append(prop)
        props = with_defaults

    return DiscoveredComponent(name=name, path=path, props=tuple(props))


def scan_components(
    components_dir: str | Path,
    folder: str | None = None,
    project_root: str | Path | None = None,
) -> list[DiscoveredComponent]:
    """Scan *components_dir* (or a *folder* below it) for components.

    Paths are reported as ``/<relative to project_root>``; the project root
    defaults to the parent of *components_dir*. Test and story files are
    skipped, unreadable files are logged and skipped, and a missing
    directory yields an empty list.
    """
    base = Path(components_dir).resolve()
    root = Path(project_root).resolve() if project_root is not None else base.parent
    scan_dir = (base / folder).resolve() if folder else base
    if not scan_dir.is_relative_to(base) or not scan_dir.is_dir():
        return []

    components: list[DiscoveredComponent] = []
    for file_path in sorted(scan_dir.rglob("*")):
        if not file_path.is_file() or not file_path.name.endswith(SOURCE_SUFFIXES):
            continue
        if ".test." in file_path.name or ".stories." in file_path.name:
            continue
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping unreadable component file %s: %s", file_path, exc)
            continue
        component = parse_component(content, "/" + file_path.relative_to(root).as_posix())
        if component is not None:
            components.append(component)
    return components
