"""Brace-balanced block extraction for at-rules and class selectors.

The extractor does not tokenize CSS. It finds an anchor, takes the first
``{`` after it and counts ``{``/``}`` until the depth returns to zero, so
nested rules inside the block do not end extraction early.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "Block",
    "THEME_INLINE_ANCHOR",
    "THEME_ANCHOR",
    "class_anchor",
    "find_block",
    "extract_block_content",
]

THEME_INLINE_ANCHOR = re.compile(r"@theme\s+inline\b")
# "@theme" directly followed by its brace, so "@theme inline {" never matches.
THEME_ANCHOR = re.compile(r"@theme(?=\s*\{)")


def class_anchor(name: str) -> re.Pattern[str]:
    """Anchor for a ``.name { ... }`` block (``.dark`` but not ``.darker``)."""
    return re.compile(rf"(?<![\w-])\.{re.escape(name)}(?![\w-])(?=\s*\{{)")


@dataclass(frozen=True)
class Block:
    """A located block.

    ``start`` is where the anchor begins, ``open``/``close`` index the
    braces and ``end`` is one past the closing brace, so
    ``text[start:end]`` is the whole block.
    """

    start: int
    open: int
    close: int
    content: str

    @property
    def end(self) -> int:
        return self.close + 1


def _match_brace(text: str, open_index: int) -> int | None:
    depth = 0
    for i in range(open_index, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return None


def find_block(text: str, anchor: str | re.Pattern[str], start: int = 0) -> Block | None:
    """Locate the first block introduced by *anchor* at or after *start*.

    Returns None when the anchor is absent, no ``{`` follows it, or the
    braces never balance.
    """
    pattern = re.compile(anchor) if isinstance(anchor, str) else anchor
    match = pattern.search(text, start)
    if match is None:
        return None
    open_index = text.find("{", match.end())
    if open_index == -1:
        return None
    close_index = _match_brace(text, open_index)
    if close_index is None:
        return None
    return Block(
        start=match.start(),
        open=open_index,
        close=close_index,
        content=text[open_index + 1 : close_index],
    )


def extract_block_content(text: str, anchor: str | re.Pattern[str]) -> str | None:
    """Return the inner text of the first block matching *anchor*, or None."""
    block = find_block(text, anchor)
    return block.content if block is not None else None
