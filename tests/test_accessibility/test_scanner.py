"""Tests for the heuristic suggestion scanner."""

import pytest

from stylegate.accessibility import suggest
from stylegate.accessibility.scanner import PROBES
from stylegate.model import Severity, WcagLevel

# Keeps the focus probes quiet so each test sees only the probe it targets.
FOCUSED = "a:focus { outline: 2px solid #005fcc; }\n"


def _ids(css):
    return [issue.rule_id for issue in suggest(css)]


class TestSuggestionShape:
    def test_all_info_with_example(self):
        css = "a:hover { color: red; transition: all 1s; position: fixed; font-size: 9px; background-image: none; }"
        suggestions = suggest(css)
        assert len(suggestions) == len(PROBES)
        for issue in suggestions:
            assert issue.severity is Severity.INFO
            assert issue.details["example"]
            assert issue.wcag_criterion


class TestFocusProbes:
    def test_hover_without_focus(self):
        ids = _ids("a:hover { color: blue; }")
        assert "hover_without_focus" in ids
        assert "missing_focus_styles" in ids

    def test_hover_with_focus(self):
        assert _ids("a:hover, a:focus { color: blue; }") == []

    def test_missing_focus_only(self):
        assert _ids("p { margin: 0; }") == ["missing_focus_styles"]

    def test_empty_input(self):
        assert _ids("") == ["missing_focus_styles"]

    def test_levels(self):
        by_id = {issue.rule_id: issue for issue in suggest("a:hover { color: blue; }")}
        assert by_id["hover_without_focus"].target_level is WcagLevel.A
        assert by_id["missing_focus_styles"].target_level is WcagLevel.AA


class TestMotionProbe:
    @pytest.mark.parametrize(
        "css",
        [".x { transition: opacity 0.3s; }", ".x { animation: spin 1s infinite; }", ".x { transition-duration: 1s; }"],
    )
    def test_unguarded(self, css):
        ids = _ids(FOCUSED + css)
        assert ids == ["animation_no_reduced_motion"]

    def test_guarded(self):
        css = FOCUSED + ".x { animation: spin 1s; } @media (prefers-reduced-motion: reduce) { .x { animation: none; } }"
        assert _ids(css) == []

    def test_level_is_aaa(self):
        issue = suggest(FOCUSED + ".x { animation: spin 1s; }")[0]
        assert issue.target_level is WcagLevel.AAA
        assert issue.wcag_criterion == "2.3.3"


class TestFontProbe:
    @pytest.mark.parametrize("size", ["10px", "8pt", "11.5px"])
    def test_small(self, size):
        assert _ids(FOCUSED + f"p {{ font-size: {size}; }}") == ["font_too_small"]

    def test_only_first_size_considered(self):
        assert _ids(FOCUSED + "p { font-size: 16px; } small { font-size: 10px; }") == []

    def test_relative_units_ignored(self):
        assert _ids(FOCUSED + "p { font-size: 0.5rem; }") == []

    def test_message_in_px(self):
        issue = suggest(FOCUSED + "p { font-size: 8pt; }")[0]
        assert issue.message == "Font size 10.7px is below minimum recommended size."


class TestOtherProbes:
    @pytest.mark.parametrize("css", ["header { background-image: url(hero.jpg); }", ".x { background: url(a.png) no-repeat; }"])
    def test_text_over_image(self, css):
        assert _ids(FOCUSED + css) == ["text_over_image"]

    def test_plain_background(self):
        assert _ids(FOCUSED + ".x { background: #fff; }") == []

    def test_fixed_positioning(self):
        assert _ids(FOCUSED + "nav { position:fixed; }") == ["fixed_positioning"]

    def test_sticky_not_flagged(self):
        assert _ids(FOCUSED + "nav { position: sticky; }") == []

    @pytest.mark.parametrize("literal", ["red", "green", "#f00", "#0F0", "#ff0000", "#00ff00"])
    def test_color_only(self, literal):
        assert _ids(FOCUSED + f".status {{ color: {literal}; }}") == ["color_only_info"]

    @pytest.mark.parametrize("literal", ["blue", "#333", "redwood"])
    def test_other_colors(self, literal):
        assert _ids(FOCUSED + f".status {{ color: {literal}; }}") == []


class TestIndependence:
    def test_order_insensitive(self):
        first = "a:hover { color: red; } nav { position: fixed; }"
        second = "nav { position: fixed; } a:hover { color: red; }"
        assert sorted(_ids(first)) == sorted(_ids(second))
