"""radtools: design-token sync between a token model and a Tailwind stylesheet."""
from __future__ import annotations

from radtools.config import RadToolsConfig
from radtools.css.parser import load_tokens, parse_stylesheet
from radtools.sync import StylesheetSync, synthesize

__version__ = "0.1.0"

__all__ = [
    "RadToolsConfig",
    "StylesheetSync",
    "load_tokens",
    "parse_stylesheet",
    "synthesize",
]
