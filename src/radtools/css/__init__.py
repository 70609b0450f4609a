from radtools.css.blocks import Block, extract_block_content, find_block
from radtools.css.fonts import parse_font_faces, update_font_faces
from radtools.css.layer_base import parse_layer_base, update_layer_base
from radtools.css.mapper import map_tokens
from radtools.css.parser import ParsedStylesheet, load_tokens, parse_stylesheet
from radtools.css.theme_writer import update_color_modes, update_theme_blocks
from radtools.css.variables import VariableTables, parse_variables, resolve_variable

__all__ = [
    "Block",
    "ParsedStylesheet",
    "VariableTables",
    "extract_block_content",
    "find_block",
    "load_tokens",
    "map_tokens",
    "parse_font_faces",
    "parse_layer_base",
    "parse_stylesheet",
    "parse_variables",
    "resolve_variable",
    "update_color_modes",
    "update_font_faces",
    "update_layer_base",
    "update_theme_blocks",
]
