"""fuzzyspan: approximate substring search and minimal-diff detection.

Both problems reduce to two primitives, code-point safe boundary detection
and Levenshtein distance.

Modules:
    - boundaries: Common prefix/suffix lengths and character-level diffs.
    - distance: Levenshtein distance (pure-Python and rapidfuzz backends).
    - locator: Divide-and-conquer search refined by hill climbing.
    - scoring: Similarity ratio and bulk pair scoring (pandas).
    - diagnostics: Explains invisible differences between near-identical strings.
    - cache: Bounded memoization in front of the pure functions.

Example usage:
    >>> import fuzzyspan
    >>> fuzzyspan.locate("The qwick brown fox", "quick").matched_text
    'qwick'
    >>> fuzzyspan.boundaries("abc", "abc")
    BoundaryPair(prefix_len=3, suffix_len=0)
"""

from .boundaries import CharDiff, boundaries
from .diagnostics import CharCodeData, analyze
from .distance import distance
from .locator import locate, refine
from .scoring import score_pairs, score_pairs_frame, similarity
from .types import BoundaryPair, FuzzyMatch, PairScore

__version__ = "0.1.0"

__all__ = [
    "BoundaryPair",
    "CharCodeData",
    "CharDiff",
    "FuzzyMatch",
    "PairScore",
    "analyze",
    "boundaries",
    "distance",
    "locate",
    "refine",
    "score_pairs",
    "score_pairs_frame",
    "similarity",
]
