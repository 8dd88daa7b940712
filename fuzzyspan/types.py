"""Type definitions for fuzzyspan results.

Every offset carried by these types is an index into a Python ``str``, i.e. a
count of Unicode code points, so slicing with them can never split a character.
"""

from dataclasses import asdict, dataclass
from typing import Any, NamedTuple, TypedDict


class BoundaryPair(NamedTuple):
    """Lengths of the common prefix and common suffix of two strings.

    ``prefix_len + suffix_len <= min(len(a), len(b))`` always holds: the suffix
    is only searched for in what remains after the prefix.
    """

    prefix_len: int
    suffix_len: int


@dataclass(frozen=True)
class FuzzyMatch:
    """Approximate occurrence of a query inside a text.

    Attributes:
        start: Index of the first code point of the match in the text.
        end: Index one past the last code point of the match.
        matched_text: ``text[start:end]``.
        distance: Levenshtein distance between ``matched_text`` and the query.
            Always integral; 0.0 only for a verbatim match.
    """

    start: int
    end: int
    matched_text: str
    distance: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class PairScore(TypedDict):
    """One row of bulk pair scoring."""

    a: str
    b: str
    distance: float
    similarity: float
    prefix_len: int
    suffix_len: int
