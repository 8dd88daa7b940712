"""Approximate substring search.

``locate`` finds the window of a text that is closest, in edit distance, to a
query without scoring every possible window. It repeatedly halves the search
range, keeping the half whose (overlapping) window is closer to the query,
and once halving stops paying off it hands the range to ``refine``, which
trims the window one code point at a time.

Guarantees:
    - ``matched_text == text[start:end]`` and ``distance`` is the exact edit
      distance between ``matched_text`` and the query.
    - A verbatim occurrence of the query is found with distance 0 (the first
      one, checked with ``str.find`` before any halving).
    - Otherwise the result is a local optimum, not necessarily the best
      window in the whole text. This is a bounded-cost heuristic: about
      O(log(len(text) / len(query))) halving steps followed by a linear
      trimming pass.
"""

import logging
import math

from .distance import distance as edit_distance
from .types import FuzzyMatch

logger = logging.getLogger(__name__)

__all__ = ["locate", "refine"]


def _clamp_range(text: str, start: int, end: int) -> tuple[int, int]:
    if start > end:
        start, end = end, start
    length = len(text)
    return min(max(start, 0), length), min(max(end, 0), length)


def refine(
    text: str,
    query: str,
    start: int,
    end: int,
    distance: float,
    *,
    backend: str = "auto",
) -> FuzzyMatch:
    """Tighten ``text[start:end]`` around the query by hill climbing.

    The window first loses code points from the left while each step strictly
    lowers the distance, then from the right the same way. The search stops
    at the first step that does not improve, so the result is a local optimum
    only.

    Args:
        text: Text being searched
        query: Query string
        start: Window start
        end: Window end (exclusive)
        distance: Edit distance of ``text[start:end]`` to the query
        backend: Distance backend name

    Returns:
        FuzzyMatch for the tightened window

    """
    start, end = _clamp_range(text, start, end)
    best_distance = distance

    while start < end:
        next_distance = edit_distance(text[start + 1:end], query, backend=backend)
        if not next_distance < best_distance:
            break
        best_distance = next_distance
        start += 1

    while end > start:
        next_distance = edit_distance(text[start:end - 1], query, backend=backend)
        if not next_distance < best_distance:
            break
        best_distance = next_distance
        end -= 1

    return FuzzyMatch(
        start=start,
        end=end,
        matched_text=text[start:end],
        distance=best_distance,
    )


def locate(
    text: str,
    query: str,
    start: int = 0,
    end: int | None = None,
    bound: float = math.inf,
    *,
    backend: str = "auto",
) -> FuzzyMatch:
    """Find the window of ``text[start:end]`` closest to ``query``.

    Args:
        text: Text to search in
        query: Pattern to search for
        start: Start of the search range (default: 0)
        end: End of the search range (default: len(text))
        bound: Best distance known so far. Pass infinity (the default) or the
            exact distance of ``text[start:end]`` to the query.
        backend: Distance backend name

    Returns:
        FuzzyMatch with code-point offsets into ``text``. An empty query yields
        an empty match at the start of the search range.

    """
    start, end = _clamp_range(text, start, len(text) if end is None else end)

    if not query:
        return FuzzyMatch(start=start, end=start, matched_text="", distance=0.0)

    query_len = len(query)

    exact_start = text.find(query, start, end)
    if exact_start >= 0:
        return FuzzyMatch(
            start=exact_start,
            end=exact_start + query_len,
            matched_text=query,
            distance=0.0,
        )

    steps = 0

    # Ranges up to twice the query length go straight to the refiner.
    while end - start > 2 * query_len:
        mid = start + (end - start) // 2
        left_end = min(end, mid + query_len)
        right_start = max(start, mid - query_len)

        left_distance = edit_distance(text[start:left_end], query, backend=backend)
        right_distance = edit_distance(text[right_start:end], query, backend=backend)
        best_distance = min(left_distance, right_distance, bound)

        # Distances are integral, exact comparison is safe.
        if best_distance == bound:
            break

        if left_distance < right_distance:
            end = left_end
        else:
            start = right_start
        bound = best_distance
        steps += 1

    if math.isinf(bound):
        bound = edit_distance(text[start:end], query, backend=backend)

    logger.debug(
        f"locate | steps={steps} | range=[{start}, {end}) | bound={bound} | query_len={query_len}",
    )
    return refine(text, query, start, end, bound, backend=backend)
