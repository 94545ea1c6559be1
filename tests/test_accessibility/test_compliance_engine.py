"""Tests for the accessibility compliance engine and its rules."""

import logging

import pytest

from stylegate.accessibility import check, check_contrast, check_stylesheet
from stylegate.accessibility.engine import rule_from_declarations
from stylegate.accessibility.rules import font_size_px, is_large_text, required_contrast
from stylegate.model import RuleContext, Severity, WcagLevel


def _rule_ids(report):
    return [issue.rule_id for issue in report.issues]


INTERACTIVE = RuleContext(is_interactive=True)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    @pytest.mark.parametrize(
        "raw, expected",
        [("12px", 12.0), ("1rem", 16.0), ("x-small", 10.0), ("Large", 18.0), ("150%", 24.0)],
    )
    def test_font_size_px(self, raw, expected):
        assert font_size_px(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", [None, "2vw", "calc(1em + 2px)", "smaller"])
    def test_font_size_px_unknown(self, raw):
        assert font_size_px(raw) is None

    def test_large_text(self):
        assert is_large_text({"font-size": "24px"})
        assert is_large_text({"font-size": "19px", "font-weight": "bold"})
        assert is_large_text({"font-size": "19px", "font-weight": "700"})
        assert not is_large_text({"font-size": "19px"})
        assert not is_large_text({"font-size": "18px", "font-weight": "bold"})
        assert not is_large_text({})

    def test_required_contrast(self):
        assert required_contrast(WcagLevel.AA, False) == 4.5
        assert required_contrast(WcagLevel.AA, True) == 3.0
        assert required_contrast(WcagLevel.AAA, False) == 7.0
        assert required_contrast(WcagLevel.AAA, True) == 4.5
        assert required_contrast(WcagLevel.A, False) == 4.5

    def test_rule_from_declarations(self):
        rule = rule_from_declarations({"Color": "red !important", "z-index": 3, "width": None}, "p")
        assert rule.declarations == {"color": "red", "z-index": "3"}
        assert rule.important == frozenset({"color"})
        assert rule.selector.text == "p"


# ---------------------------------------------------------------------------
# Contrast
# ---------------------------------------------------------------------------


class TestContrastRule:
    def test_below_aa_is_error(self):
        report = check({"color": "#777", "background-color": "#fff"})
        assert _rule_ids(report) == ["insufficient_contrast"]
        issue = report.issues[0]
        assert issue.severity is Severity.ERROR
        assert issue.wcag_criterion == "1.4.3"
        assert issue.target_level is WcagLevel.AA
        assert issue.details["ratio"] == 4.48
        assert issue.details["required"] == 4.5
        assert issue.details["large_text"] is False
        assert issue.suggestion.startswith("Try a darker foreground such as #")
        assert report.achieved_level is WcagLevel.A
        assert not report.passes

    def test_between_aa_and_aaa_is_info(self):
        report = check({"color": "#767676", "background-color": "#ffffff"})
        assert _rule_ids(report) == ["contrast_below_aaa"]
        assert report.issues[0].severity is Severity.INFO
        assert report.issues[0].wcag_criterion == "1.4.6"
        assert report.passes
        assert report.achieved_level is WcagLevel.AAA

    def test_black_on_white_clean(self):
        report = check({"color": "black", "background-color": "white"})
        assert report.issues == ()
        assert report.achieved_level is WcagLevel.AAA

    def test_large_text_threshold(self):
        report = check({"color": "#777", "background-color": "#fff", "font-size": "24px"})
        assert _rule_ids(report) == ["contrast_below_aaa"]

    def test_bold_large_text_threshold(self):
        report = check({"color": "#777", "background-color": "#fff", "font-size": "19px", "font-weight": "bold"})
        assert "insufficient_contrast" not in _rule_ids(report)

    def test_background_shorthand_single_color(self):
        report = check({"color": "#777", "background": "#fff"})
        assert _rule_ids(report) == ["insufficient_contrast"]

    def test_background_shorthand_not_a_color(self):
        report = check({"color": "#777", "background": "#fff linear-gradient(red, blue)"})
        assert "insufficient_contrast" not in _rule_ids(report)

    def test_context_background(self):
        report = check({"color": "#777"}, RuleContext(default_background="#fff"))
        assert _rule_ids(report) == ["insufficient_contrast"]
        assert report.issues[0].details["background_source"] == "context"

    def test_context_foreground(self):
        report = check({"background-color": "#fff"}, RuleContext(default_foreground="#777"))
        assert _rule_ids(report) == ["insufficient_contrast"]

    def test_transparent_background_uses_context(self):
        report = check({"color": "#777", "background-color": "transparent"}, RuleContext(default_background="#000"))
        assert report.issues[0].details["background"] == "#000"

    def test_missing_pair_skipped(self):
        assert check({"color": "#777"}).issues == ()

    def test_unparsable_color_warns(self):
        report = check({"color": "chartreuse", "background-color": "#fff"})
        assert _rule_ids(report) == ["contrast_unverifiable"]
        assert report.issues[0].severity is Severity.WARNING

    def test_inherited_color_skipped(self):
        assert check({"color": "inherit", "background-color": "#fff"}).issues == ()


# ---------------------------------------------------------------------------
# Font size, line height, opacity
# ---------------------------------------------------------------------------


class TestFontSizeRule:
    @pytest.mark.parametrize("size", ["10px", "8pt", "0.5rem", "x-small", "11.9px"])
    def test_too_small(self, size):
        report = check({"font-size": size})
        assert _rule_ids(report) == ["font_too_small"]
        assert report.issues[0].severity is Severity.ERROR
        assert report.achieved_level is WcagLevel.A

    def test_small_warns(self):
        report = check({"font-size": "13px"})
        assert _rule_ids(report) == ["font_small"]
        assert report.issues[0].severity is Severity.WARNING

    @pytest.mark.parametrize("size", ["12px", "14px", "1rem", "medium"])
    def test_boundaries_and_normal(self, size):
        assert "font_too_small" not in _rule_ids(check({"font-size": size}))

    def test_unverifiable(self):
        report = check({"font-size": "calc(1em + 2px)"})
        assert _rule_ids(report) == ["font_size_unverifiable"]

    def test_css_wide_keyword_skipped(self):
        assert check({"font-size": "inherit"}).issues == ()


class TestLineHeightRule:
    @pytest.mark.parametrize("value", ["1.2", "120%"])
    def test_tight(self, value):
        report = check({"line-height": value})
        assert _rule_ids(report) == ["tight_line_height"]
        assert report.issues[0].wcag_criterion == "1.4.12"

    @pytest.mark.parametrize("value", ["1.5", "150%", "20px", "normal"])
    def test_not_flagged(self, value):
        assert check({"line-height": value}).issues == ()


class TestOpacityRule:
    @pytest.mark.parametrize("value", ["0.3", "30%", "0"])
    def test_low(self, value):
        assert _rule_ids(check({"opacity": value})) == ["low_opacity"]

    @pytest.mark.parametrize("value", ["0.5", "1"])
    def test_fine(self, value):
        assert check({"opacity": value}).issues == ()


# ---------------------------------------------------------------------------
# Focus and keyboard
# ---------------------------------------------------------------------------


class TestFocusRule:
    def test_outline_removed_on_focus(self):
        report = check({"outline": "none"}, RuleContext(selector="button:focus"))
        assert _rule_ids(report) == ["focus_outline_removed"]
        issue = report.issues[0]
        assert issue.selector == "button:focus"
        assert issue.wcag_criterion == "2.4.7"
        assert report.achieved_level is WcagLevel.A

    def test_outline_zero(self):
        report = check({"outline": "0"}, RuleContext(selector="a:focus"))
        assert "focus_outline_removed" in _rule_ids(report)

    def test_replacement_downgrades_to_info(self):
        report = check({"outline": "none", "box-shadow": "0 0 0 3px #005fcc"}, RuleContext(selector="input:focus"))
        assert _rule_ids(report) == ["focus_outline_replaced"]
        assert report.issues[0].severity is Severity.INFO
        assert report.passes

    def test_interactive_without_selector(self):
        assert _rule_ids(check({"outline": "none"}, INTERACTIVE)) == ["focus_outline_removed"]

    def test_no_focus_context(self):
        assert check({"outline": "none"}).issues == ()
        assert check({"outline": "none"}, RuleContext(selector=".card")).issues == ()


class TestKeyboardRule:
    def test_display_none_single_error(self):
        report = check({"display": "none"}, INTERACTIVE)
        assert report.error_count == 1
        assert _rule_ids(report) == ["keyboard_display_none"]
        assert report.issues[0].target_level is WcagLevel.A
        assert report.achieved_level is None

    def test_visibility_hidden(self):
        assert _rule_ids(check({"visibility": "hidden"}, INTERACTIVE)) == ["keyboard_visibility_hidden"]

    def test_pointer_events(self):
        report = check({"pointer-events": "none"}, INTERACTIVE)
        assert _rule_ids(report) == ["keyboard_pointer_events", "pointer_events_disabled"]
        assert report.passes

    def test_not_interactive(self):
        assert check({"display": "none", "visibility": "hidden"}).issues == ()


class TestLinkUnderlineRule:
    def test_tag_a(self):
        report = check({"text-decoration": "none"}, RuleContext(tag="a"))
        assert _rule_ids(report) == ["link_underline_removed"]
        assert report.issues[0].target_level is WcagLevel.A
        assert report.issues[0].severity is Severity.WARNING

    @pytest.mark.parametrize("selector", ["a", "nav a:hover", ".footer-link"])
    def test_link_selectors(self, selector):
        report = check({"text-decoration": "none"}, RuleContext(selector=selector))
        assert _rule_ids(report) == ["link_underline_removed"]

    def test_non_link(self):
        assert check({"text-decoration": "none"}, RuleContext(selector=".title")).issues == ()

    def test_underline_kept(self):
        assert check({"text-decoration": "underline"}, RuleContext(tag="a")).issues == ()


# ---------------------------------------------------------------------------
# Stylesheet-wide rules
# ---------------------------------------------------------------------------


class TestStylesheetRules:
    def test_important_overuse(self):
        css = ".a { color: red !important; width: 1px !important; height: 1px !important; }" \
              ".b { margin: 0 !important; padding: 0 !important; top: 0 !important; }"
        report = check_stylesheet(css)
        overuse = report.by_rule("important_overuse")
        assert len(overuse) == 1
        assert overuse[0].details == {"count": 6}

    def test_five_importants_fine(self):
        css = ".a { color: red !important; width: 1px !important; height: 1px !important; margin: 0 !important; top: 0 !important; }"
        assert check_stylesheet(css).by_rule("important_overuse") == []

    def test_important_in_declaration_map(self):
        declarations = {name: "0 !important" for name in ("top", "left", "right", "bottom", "margin", "padding")}
        assert _rule_ids(check(declarations)) == ["important_overuse"]

    def test_global_user_select(self):
        report = check_stylesheet("body { user-select: none; }")
        assert _rule_ids(report) == ["text_selection_disabled"]

    def test_scoped_user_select(self):
        assert check_stylesheet(".button { user-select: none; }").issues == ()

    def test_pointer_events_reported_once(self):
        report = check_stylesheet(".a { pointer-events: none; } .b { pointer-events: none; }")
        assert _rule_ids(report) == ["pointer_events_disabled"]


# ---------------------------------------------------------------------------
# Stylesheet checks
# ---------------------------------------------------------------------------


class TestCheckStylesheet:
    def test_selectors_attached(self):
        css = """
        a:focus { outline: none; }
        p { color: #777; background-color: #fff; }
        """
        report = check_stylesheet(css)
        assert [(i.rule_id, i.selector) for i in report.issues] == [
            ("focus_outline_removed", "a:focus"),
            ("insufficient_contrast", "p"),
        ]

    def test_media_block_rules_checked(self):
        report = check_stylesheet("@media (max-width: 600px) { .small { font-size: 10px; } }")
        assert [(i.rule_id, i.selector) for i in report.issues] == [("font_too_small", ".small")]

    def test_context_background_applies_to_every_block(self):
        report = check_stylesheet("h1 { color: #777; } h2 { color: #000; }", RuleContext(default_background="#fff"))
        assert [(i.rule_id, i.selector) for i in report.issues] == [("insufficient_contrast", "h1")]

    def test_empty(self):
        report = check_stylesheet("")
        assert report.issues == ()
        assert report.achieved_level is WcagLevel.AAA


class TestNeverRaises:
    def test_odd_values(self):
        report = check({"color": 123, "font-size": None, 5: "x", "line-height": "abc", "opacity": "(("})
        assert report.passes

    def test_garbage_stylesheet(self):
        report = check_stylesheet("}}{{ a { color: ; } ;;; { }")
        assert report.issues == ()

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="stylegate.accessibility.engine"):
            check({"font-size": "10px"})
        assert "1 error(s)" in caplog.text


# ---------------------------------------------------------------------------
# Standalone contrast check
# ---------------------------------------------------------------------------


class TestCheckContrast:
    def test_black_on_white(self):
        result = check_contrast("#000", "#fff")
        assert result.passes
        assert result.ratio == pytest.approx(21.0)
        assert result.required == 4.5
        assert result.level is WcagLevel.AA
        assert result.suggestion is None

    def test_aaa_failure_suggests(self):
        result = check_contrast("#777", "#fff", level="aaa")
        assert not result.passes
        assert result.required == 7.0
        assert result.suggestion.startswith("Try a darker foreground")

    def test_large_text(self):
        result = check_contrast("#777", "#fff", large_text=True)
        assert result.passes
        assert result.required == 3.0

    def test_just_above_and_below_aa(self):
        assert check_contrast("#767676", "#fff").passes
        assert not check_contrast("#777777", "#fff").passes

    def test_invalid_color(self):
        result = check_contrast("nope", "#fff")
        assert not result.passes
        assert result.ratio is None
        assert result.error == "Invalid color format"
