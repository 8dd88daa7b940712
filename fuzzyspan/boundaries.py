"""Common prefix/suffix detection and character-level diffs.

``boundaries`` isolates the region in which two near-identical strings differ.
It is used to trim operands before the edit-distance pass and to render
``prefix{-removed-}{+added+}suffix`` diffs.
"""

from dataclasses import dataclass

from .types import BoundaryPair

__all__ = ["CharDiff", "boundaries"]


def boundaries(a: str, b: str) -> BoundaryPair:
    """Return the common prefix and suffix lengths of ``a`` and ``b``.

    Lengths are counted in code points. The suffix is searched only in the
    remainders left after removing the prefix, so for ``a == b`` the prefix
    absorbs everything and the result is ``(len(a), 0)``.

    Args:
        a: First string
        b: Second string

    Returns:
        BoundaryPair(prefix_len, suffix_len)

    """
    limit = min(len(a), len(b))

    prefix_len = 0
    while prefix_len < limit and a[prefix_len] == b[prefix_len]:
        prefix_len += 1

    max_suffix = limit - prefix_len
    suffix_len = 0
    while suffix_len < max_suffix and a[-1 - suffix_len] == b[-1 - suffix_len]:
        suffix_len += 1

    return BoundaryPair(prefix_len, suffix_len)


@dataclass(frozen=True)
class CharDiff:
    """Character-level diff of two strings split around their differing middle."""

    common_prefix: str
    expected_part: str
    actual_part: str
    common_suffix: str

    @classmethod
    def from_strings(cls, expected: str, actual: str) -> "CharDiff":
        """Build the diff of ``expected`` against ``actual``.

        Example:
            >>> CharDiff.from_strings("function getUserData()", "function  getUserData()").format()
            'function {--}{+ +}getUserData()'
        """
        prefix_len, suffix_len = boundaries(expected, actual)
        return cls(
            common_prefix=expected[:prefix_len],
            expected_part=expected[prefix_len:len(expected) - suffix_len],
            actual_part=actual[prefix_len:len(actual) - suffix_len],
            common_suffix=expected[len(expected) - suffix_len:],
        )

    def format(self) -> str:
        """Render as ``prefix{-old-}{+new+}suffix``."""
        return (
            f"{self.common_prefix}{{-{self.expected_part}-}}"
            f"{{+{self.actual_part}+}}{self.common_suffix}"
        )

    def is_whitespace_only(self) -> bool:
        """True when the differing parts only disagree on surrounding whitespace."""
        return self.expected_part.strip() == self.actual_part.strip()
