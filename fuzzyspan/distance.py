"""Levenshtein edit distance.

Insertions, deletions and substitutions each cost 1. Operands are compared
code point by code point. Two interchangeable backends are provided:

- ``levenshtein_python``: row-reduced dynamic programming, O(min(n, m)) space
- ``levenshtein_rapidfuzz``: rapidfuzz's C++ implementation

Both return the same integer for the same input. ``distance`` strips the
common prefix and suffix first (they never contribute edits), then lets
``choose_backend`` pick the implementation for what is left.
"""

from rapidfuzz.distance import Levenshtein

from .boundaries import boundaries
from .utils.engine_selection import choose_backend

__all__ = ["distance", "levenshtein_python", "levenshtein_rapidfuzz"]


def levenshtein_python(a: str, b: str) -> int:
    """Edit distance by the classic DP recurrence, keeping a single row."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous_row = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current_row = [i]
        for j, char_b in enumerate(b, start=1):
            insertions = current_row[j - 1] + 1
            deletions = previous_row[j] + 1
            substitutions = previous_row[j - 1] + (char_a != char_b)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def levenshtein_rapidfuzz(a: str, b: str) -> int:
    """Edit distance computed by rapidfuzz (uniform weights)."""
    return Levenshtein.distance(a, b)


_BACKEND_FUNCS = {
    "python": levenshtein_python,
    "rapidfuzz": levenshtein_rapidfuzz,
}


def distance(a: str, b: str, *, backend: str = "auto") -> float:
    """Levenshtein distance between ``a`` and ``b``.

    Args:
        a: First string
        b: Second string
        backend: "auto", "python" or "rapidfuzz"

    Returns:
        Non-negative integral distance as a float

    Raises:
        ValueError: If the backend name is not recognized.

    """
    prefix_len, suffix_len = boundaries(a, b)
    a_mid = a[prefix_len:len(a) - suffix_len]
    b_mid = b[prefix_len:len(b) - suffix_len]

    # validates the backend name even when an operand is empty
    chosen = choose_backend(len(a_mid), len(b_mid), backend)

    if not a_mid:
        return float(len(b_mid))
    if not b_mid:
        return float(len(a_mid))

    return float(_BACKEND_FUNCS[chosen](a_mid, b_mid))
