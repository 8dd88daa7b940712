"""Tests for character-level diagnostics."""

import json
import unicodedata

from fuzzyspan.diagnostics import (
    CharDistribution,
    EncodingIssue,
    WhitespaceIssue,
    analyze,
    format_char_display,
    format_char_name,
    inline_codes,
)


class TestAnalyze:
    """Test analyze() on typical invisible differences."""

    def test_tab_against_spaces(self):
        data = analyze("a\tb", "a    b")

        assert data.expected_diff == "\t"
        assert data.actual_diff == "    "
        assert data.report == "9:1[\\x09],32:4[ ]"
        assert data.unique_count == 2
        assert data.diff_length == 5
        assert data.whitespace_issues == (
            WhitespaceIssue.TABS_VS_SPACES,
            WhitespaceIssue.EXTRA_SPACES,
            WhitespaceIssue.TRAILING_WHITESPACE,
        )
        assert data.classification.whitespace == ((9, 1), (32, 4))
        assert data.encoding_issues == ()

    def test_mixed_line_endings(self):
        data = analyze("x\r", "y\n")

        assert WhitespaceIssue.MIXED_LINE_ENDINGS in data.whitespace_issues
        assert WhitespaceIssue.TRAILING_WHITESPACE not in data.whitespace_issues
        assert data.classification.line_endings == ((10, 1), (13, 1))
        assert data.classification.printable == ((120, 1), (121, 1))

    def test_few_spaces_are_not_extra(self):
        data = analyze("a b", "a  b")
        assert WhitespaceIssue.EXTRA_SPACES not in data.whitespace_issues

    def test_zero_width_space(self):
        data = analyze("foobar", "foo\u200bbar")

        assert data.expected_diff == ""
        assert data.actual_diff == "\u200b"
        assert data.report == "8203:1[\\x200b]"
        assert data.has_zero_width is True
        assert data.classification.unicode == ((0x200B, 1),)

    def test_byte_order_mark(self):
        data = analyze("abc", "\ufeffabc")

        assert data.encoding_issues == (EncodingIssue.BYTE_ORDER_MARK,)
        assert data.has_zero_width is True

    def test_replacement_char(self):
        data = analyze("café", "caf\ufffd")

        assert data.encoding_issues == (EncodingIssue.REPLACEMENT_CHAR,)
        assert data.classification.unicode == ((0xE9, 1), (0xFFFD, 1))

    def test_lone_surrogate(self):
        data = analyze("a", "a\udc80")
        assert EncodingIssue.UTF16_SURROGATE in data.encoding_issues

    def test_normalization_mismatch(self):
        composed = unicodedata.normalize("NFC", "café")
        decomposed = unicodedata.normalize("NFD", composed)

        analysis = analyze(composed, decomposed).unicode_analysis

        assert analysis.has_composed is True
        assert analysis.has_decomposed is True
        assert analysis.normalization_mismatch is True

    def test_plain_ascii_unicode_analysis(self):
        analysis = analyze("hello", "hallo").unicode_analysis

        assert analysis.has_composed is False
        assert analysis.has_decomposed is False
        assert analysis.normalization_mismatch is False

    def test_identical_strings(self):
        data = analyze("same", "same")

        assert data.report == ""
        assert data.unique_count == 0
        assert data.diff_length == 0
        assert data.whitespace_issues == ()
        assert data.visual_diff == "same{--}{++}"

    def test_distribution(self):
        data = analyze("xab", "xba")
        assert data.distribution == CharDistribution(in_both=((97, 1, 1), (98, 1, 1)))

        data = analyze("a\tb", "a    b")
        assert data.distribution.only_in_expected == ((9, 1),)
        assert data.distribution.only_in_actual == ((32, 4),)

    def test_visual_diff(self):
        data = analyze("function getUserData()", "function  getUserData()")
        assert data.visual_diff == "function {--}{+ +}getUserData()"

    def test_to_dict_is_json_serializable(self):
        payload = analyze("a\tb", "a    b").to_dict()

        assert payload["whitespace_issues"] == [
            "tabs_vs_spaces",
            "extra_spaces",
            "trailing_whitespace",
        ]
        decoded = json.loads(json.dumps(payload))
        assert decoded["report"] == "9:1[\\x09],32:4[ ]"
        assert decoded["unicode_analysis"]["normalization_mismatch"] is False


class TestFormatCharDisplay:
    """Test the display form of single code points."""

    def test_printable_ascii(self):
        assert format_char_display(ord("a")) == "a"
        assert format_char_display(32) == " "
        assert format_char_display(126) == "~"

    def test_escaped(self):
        assert format_char_display(9) == "\\x09"
        assert format_char_display(127) == "\\x7f"
        assert format_char_display(0x200B) == "\\x200b"


class TestVisualDiffWithCodes:
    """Test the diff line annotated with code points."""

    def test_tab_against_spaces(self):
        data = analyze("a\tb", "a    b")

        assert data.visual_diff_with_codes == (
            "a{-\t-}{+    +}b\n"
            "\n"
            "With character codes:\n"
            "Expected diff: '\\t' [9]\n"
            "Actual diff:   '    ' [32,32,32,32]"
        )

    def test_zero_width_space(self):
        data = analyze("foobar", "foo\u200bbar")

        lines = data.visual_diff_with_codes.splitlines()
        assert lines[0] == "foo{+\u200b+}bar"
        assert lines[3] == "Expected diff: '' [empty]"
        assert lines[4] == "Actual diff:   '\\u200b' [8203]"

    def test_in_dict(self):
        payload = analyze("x", "y").to_dict()
        assert payload["visual_diff_with_codes"].startswith("{-x-}{+y+}")

    def test_inline_codes(self):
        assert inline_codes("") == "empty"
        assert inline_codes("a\t") == "97,9"


class TestDetailedReport:
    """Test the plain-text analysis report."""

    def test_tab_against_spaces(self):
        report = analyze("a\tb", "a    b").format_detailed_report()

        assert report == (
            "Character Analysis:\n"
            "  Character codes: 9:1[\\x09],32:4[ ]\n"
            "  Unique codes: 2, Diff length: 5\n"
            "\n"
            "Character Types:\n"
            "  Whitespace: TAB×1, SPACE×4\n"
            "\n"
            "Issues Detected:\n"
            "  ! TABS_VS_SPACES\n"
            "  ! EXTRA_SPACES\n"
            "  ! TRAILING_WHITESPACE\n"
            "\n"
            "Distribution:\n"
            "  Only in search string: TAB×1\n"
            "  Only in found string: SPACE×4\n"
            "\n"
            "Visual Diff:\n"
            "a{-\t-}{+    +}b\n"
            "\n"
            "With character codes:\n"
            "Expected diff: '\\t' [9]\n"
            "Actual diff:   '    ' [32,32,32,32]\n"
        )

    def test_zero_width_space_named(self):
        report = analyze("foobar", "foo\u200bbar").format_detailed_report()

        assert "  ! Zero-width characters detected\n" in report
        assert "  Only in found string: ZWSP×1\n" in report
        assert "Character Types:" not in report

    def test_line_endings_named(self):
        report = analyze("x\r", "y\n").format_detailed_report()

        assert "  Line endings: LF×1, CR×1\n" in report
        assert "  ! MIXED_LINE_ENDINGS\n" in report

    def test_normalization_mismatch_listed(self):
        composed = unicodedata.normalize("NFC", "café")
        report = analyze(composed, unicodedata.normalize("NFD", composed)).format_detailed_report()

        assert "  ! Unicode normalization mismatch (NFC vs NFD)\n" in report

    def test_identical_strings(self):
        report = analyze("same", "same").format_detailed_report()

        assert "Issues Detected:" not in report
        assert "Distribution:" not in report
        assert report.endswith("Expected diff: '' [empty]\nActual diff:   '' [empty]\n")

    def test_char_names(self):
        assert format_char_name(0x09) == "TAB"
        assert format_char_name(0xFEFF) == "BOM"
        assert format_char_name(ord("a")) == "a"
        assert format_char_name(0x2192) == "\\x2192"
