"""Tests for color-mode preview contexts."""

from radtools.css.parser import load_tokens
from radtools.model.tokens import BaseColor, ColorCategory, ColorMode, ThemeTokens
from radtools.modes import apply_mode, base_style_context


class TestBaseStyleContext:
    def test_maps_variables_to_values(self, sample_css):
        context = base_style_context(load_tokens(sample_css))
        assert context["--color-sun-yellow"] == "#FCE184"
        assert context["--color-neutral-lightest"] == "#F5F5F5"
        assert context["--color-warning-yellow"] == "#FCE184"
        assert len(context) == 6


class TestApplyMode:
    def test_none_returns_base_context(self, sample_css):
        tokens = load_tokens(sample_css)
        assert apply_mode(tokens, None) == base_style_context(tokens)

    def test_overrides_resolved_to_base_colors(self, sample_css):
        context = apply_mode(load_tokens(sample_css), "dark")
        assert context["--color-surface"] == "#0F0E0C"
        assert context["--color-content"] == "#FEF8E2"
        assert context["--color-sun-yellow"] == "#FCE184"

    def test_unknown_mode(self, sample_css):
        assert apply_mode(load_tokens(sample_css), "sepia") is None

    def test_neutral_reference_and_literal(self):
        tokens = ThemeTokens(
            base_colors=(
                BaseColor(
                    id="darkest",
                    name="darkest",
                    display_name="Darkest",
                    value="#111111",
                    category=ColorCategory.NEUTRAL,
                ),
            ),
            color_modes=(
                ColorMode(
                    id="contrast",
                    name="contrast",
                    class_name=".contrast",
                    overrides={"surface": "neutral-darkest", "edge": "#FFFFFF", "ghost": "nowhere"},
                ),
            ),
        )
        context = apply_mode(tokens, "contrast")
        assert context["--color-surface"] == "#111111"
        assert context["--color-edge"] == "#FFFFFF"
        assert context["--color-ghost"] == "nowhere"

    def test_base_tokens_not_mutated(self, sample_css):
        tokens = load_tokens(sample_css)
        apply_mode(tokens, "dark")
        assert "--color-surface" not in base_style_context(tokens)
