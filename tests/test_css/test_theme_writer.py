"""Tests for rendering and patching @theme blocks and color-mode classes."""

from radtools.css.blocks import THEME_ANCHOR, THEME_INLINE_ANCHOR, extract_block_content
from radtools.css.parser import load_tokens
from radtools.css.theme_writer import (
    import_insertion_point,
    insert_after_imports,
    render_color_mode,
    render_theme,
    render_theme_inline,
    update_color_modes,
    update_theme_blocks,
)
from radtools.model.tokens import BaseColor, ColorCategory, ColorMode, ThemeTokens
from radtools.sync import synthesize


def _color(name, value, category=ColorCategory.BRAND):
    return BaseColor(id=name, name=name, display_name=name.title(), value=value, category=category)


TOKENS = ThemeTokens(
    base_colors=(
        _color("sun-yellow", "#FCE184"),
        _color("lightest", "#F5F5F5", ColorCategory.NEUTRAL),
        _color("error-red", "#FF0000", ColorCategory.SYSTEM),
    ),
    border_radius={"md": "0.5rem", "none": "0"},
    passthrough_inline={"--font-mondwest": "'Mondwest'"},
    passthrough_theme={"--shadow-card": "none"},
)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRenderTheme:
    def test_inline_sections(self):
        text = render_theme_inline(TOKENS)
        assert text == (
            "@theme inline {\n"
            "  /* Brand Colors */\n"
            "  --color-sun-yellow: #FCE184;\n"
            "\n"
            "  /* Neutral Colors */\n"
            "  --color-neutral-lightest: #F5F5F5;\n"
            "\n"
            "  /* System Colors */\n"
            "  --color-error-red: #FF0000;\n"
            "\n"
            "  /* Custom Properties */\n"
            "  --font-mondwest: 'Mondwest';\n"
            "}"
        )

    def test_theme_has_radius_and_no_inline_passthrough(self):
        text = render_theme(TOKENS)
        assert text.startswith("@theme {\n")
        assert "/* Border Radius */" in text
        assert "--shadow-card: none;" in text
        assert "--font-mondwest" not in text

    def test_radius_canonical_order_then_extras(self):
        tokens = ThemeTokens(border_radius={"pill": "999px", "lg": "1rem", "none": "0"})
        text = render_theme(tokens)
        assert text.index("--radius-none") < text.index("--radius-lg") < text.index("--radius-pill")

    def test_empty_tokens_render_empty_blocks(self):
        assert render_theme_inline(ThemeTokens()) == "@theme inline {\n}"
        assert render_theme(ThemeTokens()) == "@theme {\n}"

    def test_alias_written_as_reference(self):
        alias = BaseColor(
            id="warning-yellow",
            name="warning-yellow",
            display_name="Warning Yellow",
            value="#FCE184",
            category=ColorCategory.SYSTEM,
            reference="var(--color-sun-yellow)",
        )
        text = render_theme_inline(ThemeTokens(base_colors=(_color("sun-yellow", "#FCE184"), alias)))
        assert "  --color-warning-yellow: var(--color-sun-yellow);\n" in text

    def test_alias_to_removed_color_written_as_value(self):
        alias = BaseColor(
            id="warning-yellow",
            name="warning-yellow",
            display_name="Warning Yellow",
            value="#FCE184",
            category=ColorCategory.SYSTEM,
            reference="var(--color-sun-yellow)",
        )
        text = render_theme_inline(ThemeTokens(base_colors=(alias,)))
        assert "  --color-warning-yellow: #FCE184;\n" in text


class TestRenderColorMode:
    def test_references_and_literals(self):
        mode = ColorMode(
            id="dark",
            name="dark",
            class_name=".dark",
            overrides={
                "surface": "black",
                "muted": "neutral-lightest",
                "edge": "#fff",
                "glow": "rgba(0, 0, 0, 0.5)",
            },
        )
        colors = (_color("black", "#0F0E0C"), _color("lightest", "#F5F5F5", ColorCategory.NEUTRAL))
        assert render_color_mode(mode, colors) == (
            ".dark {\n"
            "  --color-surface: var(--color-black);\n"
            "  --color-muted: var(--color-neutral-lightest);\n"
            "  --color-edge: #fff;\n"
            "  --color-glow: rgba(0, 0, 0, 0.5);\n"
            "}"
        )


# ---------------------------------------------------------------------------
# Import insertion point
# ---------------------------------------------------------------------------


class TestImportInsertion:
    def test_skips_following_imports(self):
        css = '@import "tailwindcss";\n@import "@radflow/theme-rad-os";\n\nbody {}\n'
        pos = import_insertion_point(css)
        assert css[:pos].rstrip().endswith('@import "@radflow/theme-rad-os";')

    def test_no_tailwind_import(self):
        assert import_insertion_point("body {}") is None

    def test_insert_without_imports_goes_to_top(self):
        assert insert_after_imports("body {}\n", "X") == "X\n\nbody {}\n"

    def test_insert_after_single_import(self):
        css = '@import "tailwindcss";\nbody {}\n'
        assert insert_after_imports(css, "X") == '@import "tailwindcss";\n\nX\n\nbody {}\n'


# ---------------------------------------------------------------------------
# Patching theme blocks
# ---------------------------------------------------------------------------


class TestUpdateThemeBlocks:
    def test_text_outside_blocks_unchanged(self, sample_css):
        updated = update_theme_blocks(sample_css, TOKENS)
        before, _, _ = sample_css.partition("/* marker: before theme */")
        _, _, after = sample_css.partition("/* marker: after theme */")
        assert updated.startswith(before + "/* marker: before theme */\n@theme inline {")
        assert updated.endswith("}\n/* marker: after theme */" + after)

    def test_blocks_hold_new_values(self, sample_css):
        updated = update_theme_blocks(sample_css, TOKENS)
        assert "--color-error-red: #FF0000;" in extract_block_content(updated, THEME_INLINE_ANCHOR)
        theme = extract_block_content(updated, THEME_ANCHOR)
        assert "--radius-md: 0.5rem;" in theme
        assert "--radius-sm" not in theme

    def test_missing_blocks_inserted_after_imports(self):
        css = '@import "tailwindcss";\n@import "@radflow/theme-rad-os";\n\nbody {\n  margin: 0;\n}\n'
        updated = update_theme_blocks(css, TOKENS)
        theme_import = updated.index("@radflow/theme-rad-os")
        inline = updated.index("@theme inline {")
        theme = updated.index("@theme {")
        body = updated.index("body {")
        assert theme_import < inline < theme < body
        assert updated.endswith("body {\n  margin: 0;\n}\n")

    def test_missing_theme_block_goes_after_inline(self):
        css = "@theme inline {\n  --color-cream: #FEF8E2;\n}\n\n.card {}\n"
        updated = update_theme_blocks(css, TOKENS)
        assert updated.index("@theme inline") < updated.index("@theme {") < updated.index(".card")

    def test_without_any_import_blocks_go_to_top(self):
        updated = update_theme_blocks("body {}\n", TOKENS)
        assert updated.startswith("@theme inline {")
        assert updated.endswith("body {}\n")

    def test_update_is_stable(self, sample_css):
        once = update_theme_blocks(sample_css, TOKENS)
        assert update_theme_blocks(once, TOKENS) == once

    def test_inserted_blocks_set_off_from_next_rule(self):
        css = '@import "tailwindcss";\n.dark {\n  --color-surface: #000;\n}\n'
        assert update_theme_blocks(css, ThemeTokens()) == (
            '@import "tailwindcss";\n\n'
            "@theme inline {\n}\n\n"
            "@theme {\n}\n\n"
            ".dark {\n  --color-surface: #000;\n}\n"
        )


# ---------------------------------------------------------------------------
# Patching color modes
# ---------------------------------------------------------------------------


class TestUpdateColorModes:
    def test_existing_mode_replaced_in_place(self, sample_css):
        mode = ColorMode(id="dark", name="dark", class_name=".dark", overrides={"surface": "cream"})
        updated = update_color_modes(sample_css, [mode], load_tokens(sample_css).base_colors)
        assert ".dark {\n  --color-surface: var(--color-cream);\n}" in updated
        assert "--color-content" not in updated
        assert updated.index(".dark {") < updated.index(":root {")

    def test_new_mode_inserted_before_root(self, sample_css):
        tokens = load_tokens(sample_css)
        light = ColorMode(id="light", name="light", class_name=".light", overrides={"surface": "cream"})
        updated = update_color_modes(sample_css, tokens.color_modes + (light,), tokens.base_colors)
        assert ".dark {" in updated
        assert updated.index(".light {") < updated.index(":root {")

    def test_new_mode_appended_without_root(self):
        mode = ColorMode(id="dark", name="dark", class_name=".dark", overrides={"surface": "black"})
        updated = update_color_modes("body {}\n", [mode], [_color("black", "#0F0E0C")])
        assert updated == "body {}\n\n.dark {\n  --color-surface: var(--color-black);\n}\n"

    def test_dropped_mode_removed(self, sample_css):
        updated = update_color_modes(sample_css, [], ())
        assert ".dark" not in updated
        assert ":root {\n  --app-gutter: 1rem;\n}" in updated

    def test_mode_class_without_variables_left_alone(self):
        css = ".dark {\n  color: white;\n}\n"
        assert update_color_modes(css, [], ()) == css

    def test_modes_from_sample_round_trip_unchanged(self, sample_css):
        tokens = load_tokens(sample_css)
        assert update_color_modes(sample_css, tokens.color_modes, tokens.base_colors) == sample_css

    def test_keyword_literals_kept_verbatim(self):
        css = ".dark {\n  --color-edge: currentColor;\n  --color-bg: inherit;\n  --color-ring: none;\n}\n"
        updated = synthesize(css, load_tokens(css))
        assert ".dark {\n  --color-edge: currentColor;\n  --color-bg: inherit;\n  --color-ring: none;\n}" in updated
        assert "var(--color-currentColor)" not in updated

    def test_name_outside_model_kept_verbatim(self):
        mode = ColorMode(id="dark", name="dark", class_name=".dark", overrides={"surface": "initial"})
        updated = update_color_modes("body {}\n", [mode], [_color("black", "#0F0E0C")])
        assert "--color-surface: initial;" in updated
