"""Character-level diagnostics for near-identical strings.

When a search string almost matches some text, the difference is often
invisible: tabs against spaces, CR against LF, a zero-width joiner, a
decomposed accent. ``analyze`` isolates the differing middle of the two
strings with ``boundaries`` and reports what the differing code points are.

Usage:
    from fuzzyspan.diagnostics import analyze

    composed = unicodedata.normalize("NFC", "cafe\u0301")
    decomposed = unicodedata.normalize("NFD", composed)
    analyze(composed, decomposed).unicode_analysis.normalization_mismatch  # True
"""

from __future__ import annotations

import unicodedata
from collections import Counter
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from .boundaries import CharDiff, boundaries

__all__ = [
    "CharClassification",
    "CharCodeData",
    "CharDistribution",
    "EncodingIssue",
    "UnicodeAnalysis",
    "WhitespaceIssue",
    "analyze",
]

TAB, LF, CR, SPACE, NBSP = 0x09, 0x0A, 0x0D, 0x20, 0xA0
ZWSP, ZWNJ, ZWJ, BOM = 0x200B, 0x200C, 0x200D, 0xFEFF
REPLACEMENT_CHAR = 0xFFFD

ZERO_WIDTH_CHARS = frozenset({ZWSP, ZWNJ, ZWJ, BOM})

# Space count in the differing parts above which EXTRA_SPACES is reported
EXTRA_SPACES_LIMIT = 3


class WhitespaceIssue(str, Enum):
    """Common whitespace/formatting problems."""

    TABS_VS_SPACES = "tabs_vs_spaces"
    MIXED_LINE_ENDINGS = "mixed_line_endings"
    EXTRA_SPACES = "extra_spaces"
    TRAILING_WHITESPACE = "trailing_whitespace"


class EncodingIssue(str, Enum):
    """Encoding-related problems."""

    REPLACEMENT_CHAR = "replacement_char"
    BYTE_ORDER_MARK = "byte_order_mark"
    UTF16_SURROGATE = "utf16_surrogate"


CodeCount = tuple[int, int]


@dataclass(frozen=True)
class CharClassification:
    """Differing code points grouped by kind, each as (code, count) sorted by code."""

    whitespace: tuple[CodeCount, ...] = ()
    line_endings: tuple[CodeCount, ...] = ()
    printable: tuple[CodeCount, ...] = ()
    control: tuple[CodeCount, ...] = ()
    unicode: tuple[CodeCount, ...] = ()


@dataclass(frozen=True)
class CharDistribution:
    """Where each differing code point occurs."""

    only_in_expected: tuple[CodeCount, ...] = ()
    only_in_actual: tuple[CodeCount, ...] = ()
    # (code, expected_count, actual_count)
    in_both: tuple[tuple[int, int, int], ...] = ()


@dataclass(frozen=True)
class UnicodeAnalysis:
    """Normalization status of the two full strings.

    Attributes:
        has_composed: Either string holds a precomposed character (changes under NFD).
        has_decomposed: Either string holds a decomposed sequence (changes under NFC).
        normalization_mismatch: The strings differ but their NFC forms are equal.
    """

    has_composed: bool
    has_decomposed: bool
    normalization_mismatch: bool


@dataclass(frozen=True)
class CharCodeData:
    """Result of ``analyze``."""

    expected_diff: str
    actual_diff: str
    report: str
    unique_count: int
    diff_length: int
    classification: CharClassification
    whitespace_issues: tuple[WhitespaceIssue, ...]
    encoding_issues: tuple[EncodingIssue, ...]
    distribution: CharDistribution
    unicode_analysis: UnicodeAnalysis
    has_zero_width: bool
    visual_diff: str
    visual_diff_with_codes: str

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly dictionary (enums become their values)."""
        data = asdict(self)
        data["whitespace_issues"] = [issue.value for issue in self.whitespace_issues]
        data["encoding_issues"] = [issue.value for issue in self.encoding_issues]
        return data

    def format_detailed_report(self) -> str:
        """Render every analysis result as a plain-text report.

        Invisible characters are listed by name (TAB, ZWSP, BOM, ...) so the
        report stays readable where the raw diff does not.
        """
        lines = [
            "Character Analysis:",
            f"  Character codes: {self.report}",
            f"  Unique codes: {self.unique_count}, Diff length: {self.diff_length}",
        ]

        classification = self.classification
        if classification.whitespace or classification.line_endings:
            lines += ["", "Character Types:"]
            if classification.whitespace:
                lines.append(f"  Whitespace: {_format_named_counts(classification.whitespace)}")
            if classification.line_endings:
                lines.append(
                    f"  Line endings: {_format_named_counts(classification.line_endings)}",
                )
            if classification.control:
                lines.append(f"  Control chars: {len(classification.control)} types")
            if classification.unicode:
                lines.append(f"  Unicode chars: {len(classification.unicode)} types")

        mismatch = self.unicode_analysis.normalization_mismatch
        if self.whitespace_issues or self.encoding_issues or self.has_zero_width or mismatch:
            lines += ["", "Issues Detected:"]
            lines += [f"  ! {issue.name}" for issue in self.whitespace_issues]
            lines += [f"  ! {issue.name}" for issue in self.encoding_issues]
            if self.has_zero_width:
                lines.append("  ! Zero-width characters detected")
            if mismatch:
                lines.append("  ! Unicode normalization mismatch (NFC vs NFD)")

        distribution = self.distribution
        if distribution.only_in_expected or distribution.only_in_actual:
            lines += ["", "Distribution:"]
            if distribution.only_in_expected:
                lines.append(
                    f"  Only in search string: {_format_named_counts(distribution.only_in_expected)}",
                )
            if distribution.only_in_actual:
                lines.append(
                    f"  Only in found string: {_format_named_counts(distribution.only_in_actual)}",
                )

        lines += ["", "Visual Diff:", self.visual_diff_with_codes]
        return "\n".join(lines) + "\n"


def analyze(expected: str, actual: str) -> CharCodeData:
    """Explain how ``actual`` differs from ``expected`` at code-point level.

    Args:
        expected: String that was searched for
        actual: String that was found

    Returns:
        CharCodeData describing the differing middle of the two strings

    """
    prefix_len, suffix_len = boundaries(expected, actual)
    expected_diff = expected[prefix_len:len(expected) - suffix_len]
    actual_diff = actual[prefix_len:len(actual) - suffix_len]

    codes = Counter(map(ord, expected_diff + actual_diff))

    return CharCodeData(
        expected_diff=expected_diff,
        actual_diff=actual_diff,
        report=format_char_code_report(codes),
        unique_count=len(codes),
        diff_length=sum(codes.values()),
        classification=classify_characters(codes),
        whitespace_issues=detect_whitespace_issues(codes, expected_diff, actual_diff),
        encoding_issues=detect_encoding_issues(codes),
        distribution=compare_distribution(expected_diff, actual_diff),
        unicode_analysis=analyze_unicode(expected, actual),
        has_zero_width=any(code in codes for code in ZERO_WIDTH_CHARS),
        visual_diff=CharDiff.from_strings(expected, actual).format(),
        visual_diff_with_codes=format_visual_diff_with_codes(
            expected[:prefix_len],
            expected_diff,
            actual_diff,
            expected[len(expected) - suffix_len:],
        ),
    )


def format_char_display(code: int) -> str:
    """Printable ASCII as itself, anything else as a ``\\xHH`` escape."""
    if 32 <= code <= 126:
        return chr(code)
    return f"\\x{code:02x}"


CHAR_NAMES = {
    TAB: "TAB",
    LF: "LF",
    CR: "CR",
    SPACE: "SPACE",
    NBSP: "NBSP",
    ZWSP: "ZWSP",
    ZWNJ: "ZWNJ",
    ZWJ: "ZWJ",
    BOM: "BOM",
}


def format_char_name(code: int) -> str:
    """Name of a whitespace or invisible code point, else its display form."""
    return CHAR_NAMES.get(code, format_char_display(code))


def _format_named_counts(items: tuple[CodeCount, ...]) -> str:
    return ", ".join(f"{format_char_name(code)}×{count}" for code, count in items)


def inline_codes(text: str) -> str:
    """Comma-separated code points of ``text``, or ``empty``."""
    if not text:
        return "empty"
    return ",".join(str(ord(char)) for char in text)


def format_visual_diff_with_codes(
    prefix: str,
    expected_diff: str,
    actual_diff: str,
    suffix: str,
) -> str:
    """Diff line followed by the code points of both differing parts.

    Empty sides are left out of the diff line; their code list reads ``empty``.
    """
    removed = f"{{-{expected_diff}-}}" if expected_diff else ""
    added = f"{{+{actual_diff}+}}" if actual_diff else ""
    return "\n".join(
        [
            f"{prefix}{removed}{added}{suffix}",
            "",
            "With character codes:",
            f"Expected diff: {expected_diff!r} [{inline_codes(expected_diff)}]",
            f"Actual diff:   {actual_diff!r} [{inline_codes(actual_diff)}]",
        ],
    )


def format_char_code_report(codes: Counter[int]) -> str:
    """Format as ``code:count[display],...`` sorted by code."""
    return ",".join(
        f"{code}:{count}[{format_char_display(code)}]"
        for code, count in sorted(codes.items())
    )


def classify_characters(codes: Counter[int]) -> CharClassification:
    groups: dict[str, list[CodeCount]] = {
        "whitespace": [],
        "line_endings": [],
        "printable": [],
        "control": [],
        "unicode": [],
    }
    for code, count in sorted(codes.items()):
        if code in (TAB, SPACE, NBSP):
            groups["whitespace"].append((code, count))
        elif code in (LF, CR):
            groups["line_endings"].append((code, count))
        elif code <= 31 or code == 127:
            groups["control"].append((code, count))
        elif code <= 126:
            groups["printable"].append((code, count))
        else:
            groups["unicode"].append((code, count))

    return CharClassification(**{name: tuple(items) for name, items in groups.items()})


def detect_whitespace_issues(
    codes: Counter[int],
    expected_diff: str,
    actual_diff: str,
) -> tuple[WhitespaceIssue, ...]:
    issues = []

    if TAB in codes and SPACE in codes:
        issues.append(WhitespaceIssue.TABS_VS_SPACES)
    if CR in codes and LF in codes:
        issues.append(WhitespaceIssue.MIXED_LINE_ENDINGS)
    if codes.get(SPACE, 0) > EXTRA_SPACES_LIMIT:
        issues.append(WhitespaceIssue.EXTRA_SPACES)

    lines = expected_diff.splitlines() + actual_diff.splitlines()
    if any(line.endswith((" ", "\t")) for line in lines):
        issues.append(WhitespaceIssue.TRAILING_WHITESPACE)

    return tuple(issues)


def detect_encoding_issues(codes: Counter[int]) -> tuple[EncodingIssue, ...]:
    issues = []

    if REPLACEMENT_CHAR in codes:
        issues.append(EncodingIssue.REPLACEMENT_CHAR)
    if BOM in codes:
        issues.append(EncodingIssue.BYTE_ORDER_MARK)
    # Lone surrogates survive in str when text was decoded with "surrogateescape"
    if any(0xD800 <= code <= 0xDFFF for code in codes):
        issues.append(EncodingIssue.UTF16_SURROGATE)

    return tuple(issues)


def compare_distribution(expected_diff: str, actual_diff: str) -> CharDistribution:
    expected_codes = Counter(map(ord, expected_diff))
    actual_codes = Counter(map(ord, actual_diff))

    return CharDistribution(
        only_in_expected=tuple(
            (code, count)
            for code, count in sorted(expected_codes.items())
            if code not in actual_codes
        ),
        only_in_actual=tuple(
            (code, count)
            for code, count in sorted(actual_codes.items())
            if code not in expected_codes
        ),
        in_both=tuple(
            (code, count, actual_codes[code])
            for code, count in sorted(expected_codes.items())
            if code in actual_codes
        ),
    )


def analyze_unicode(expected: str, actual: str) -> UnicodeAnalysis:
    expected_nfc = unicodedata.normalize("NFC", expected)
    actual_nfc = unicodedata.normalize("NFC", actual)

    return UnicodeAnalysis(
        has_composed=(
            unicodedata.normalize("NFD", expected) != expected
            or unicodedata.normalize("NFD", actual) != actual
        ),
        has_decomposed=expected_nfc != expected or actual_nfc != actual,
        normalization_mismatch=expected_nfc == actual_nfc and expected != actual,
    )
