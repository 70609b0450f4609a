"""CSS custom property tables and ``var()`` reference resolution."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

__all__ = [
    "MAX_DEPTH",
    "VariableTables",
    "parse_variables",
    "parse_reference",
    "resolve_variable",
    "resolve_value",
]

MAX_DEPTH = 32

# Matches a single declaration: --name: value;
_VAR_RE = re.compile(
    r"""
    (?P<name>--[\w-]+)     # custom property name
    \s*:\s*                # colon separator
    (?P<value>[^;]+)       # value up to the semicolon, nested calls included
    ;
    """,
    re.VERBOSE,
)

# A value that is nothing but a var() reference, optionally with a fallback.
_REF_RE = re.compile(r"^var\(\s*(?P<name>--[\w-]+)\s*(?:,[^)]*)?\)$")


@dataclass(frozen=True)
class VariableTables:
    """The ``@theme inline`` and ``@theme`` declarations of a stylesheet."""

    inline: dict[str, str] = field(default_factory=dict, hash=False)
    theme: dict[str, str] = field(default_factory=dict, hash=False)

    def lookup(self, name: str) -> str | None:
        if name in self.inline:
            return self.inline[name]
        return self.theme.get(name)


def parse_variables(block: str) -> dict[str, str]:
    """Parse ``--name: value;`` pairs from block text.

    Keys keep source order; a repeated name keeps its first position and
    its last value.
    """
    variables: dict[str, str] = {}
    for match in _VAR_RE.finditer(block):
        variables[match.group("name")] = match.group("value").strip()
    return variables


def parse_reference(value: str) -> str | None:
    """Return ``--x`` when *value* is ``var(--x)``, else None."""
    match = _REF_RE.match(value.strip())
    return match.group("name") if match else None


def _follow(value: str, tables: VariableTables, seen: set[str]) -> str:
    current = value
    for _ in range(MAX_DEPTH):
        ref = parse_reference(current)
        if ref is None:
            return current
        if ref in seen:
            return value
        seen.add(ref)
        nxt = tables.lookup(ref)
        if nxt is None:
            return value
        current = nxt
    return value


def resolve_value(value: str, tables: VariableTables) -> str:
    """Follow ``var()`` indirections in *value* until a literal is found.

    If a referenced name is missing, the chain cycles, or it exceeds
    MAX_DEPTH, *value* is returned unresolved.
    """
    return _follow(value, tables, set())


def resolve_variable(name: str, tables: VariableTables) -> str | None:
    """Resolve variable *name* to a literal, checking inline before theme.

    Returns None when *name* is declared in neither table.
    """
    value = tables.lookup(name)
    if value is None:
        return None
    return _follow(value, tables, {name})
