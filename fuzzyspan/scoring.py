"""Similarity scoring functionality."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import pandas as pd

from .boundaries import boundaries
from .distance import distance
from .types import PairScore

logger = logging.getLogger(__name__)

__all__ = ["similarity", "score_pair", "score_pairs", "score_pairs_frame"]

SCORE_COLUMNS = {
    "distance": "float64",
    "similarity": "float64",
    "prefix_len": "int64",
    "suffix_len": "int64",
}


def _ratio(pair_distance: float, max_len: int) -> float:
    return max(0.0, min(1.0, 1.0 - pair_distance / max_len))


def similarity(a: str, b: str, *, backend: str = "auto") -> float:
    """Normalized closeness of two strings in [0.0, 1.0].

    ``1.0 - distance(a, b) / max(len(a), len(b))``; two empty strings are
    identical and score 1.0.

    Example:
        >>> similarity("hello", "hallo")
        0.8
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return _ratio(distance(a, b, backend=backend), max_len)


def score_pair(a: str, b: str, *, backend: str = "auto") -> PairScore:
    """Canonical scorer for one pair: distance, ratio and shared boundaries."""
    prefix_len, suffix_len = boundaries(a, b)
    pair_distance = distance(a, b, backend=backend)
    max_len = max(len(a), len(b))
    ratio = 1.0 if max_len == 0 else _ratio(pair_distance, max_len)
    return {
        "a": a,
        "b": b,
        "distance": pair_distance,
        "similarity": ratio,
        "prefix_len": prefix_len,
        "suffix_len": suffix_len,
    }


def score_pairs(
    pairs: Iterable[tuple[str, str]],
    *,
    backend: str = "auto",
) -> list[PairScore]:
    """Score every ``(a, b)`` pair in order.

    Args:
        pairs: Iterable of string pairs
        backend: Distance backend name

    Returns:
        List of score dictionaries, one per pair

    """
    return [score_pair(a, b, backend=backend) for a, b in pairs]


def score_pairs_frame(
    df: pd.DataFrame,
    col_a: str,
    col_b: str,
    *,
    backend: str = "auto",
) -> pd.DataFrame:
    """Score the string pairs held in two columns of a DataFrame.

    The input frame is not mutated. Missing values are scored as empty
    strings; non-string values are converted with ``str``.

    Args:
        df: DataFrame holding the pairs
        col_a: Column with the first string of each pair
        col_b: Column with the second string of each pair
        backend: Distance backend name

    Returns:
        Copy of ``df`` with ``distance``, ``similarity``, ``prefix_len`` and
        ``suffix_len`` columns added

    Raises:
        KeyError: If either column is missing.

    """
    missing = [col for col in (col_a, col_b) if col not in df.columns]
    if missing:
        raise KeyError(f"Columns not found in DataFrame: {missing}")

    a_values = df[col_a].fillna("").astype(str).tolist()
    b_values = df[col_b].fillna("").astype(str).tolist()
    scores = score_pairs(zip(a_values, b_values), backend=backend)

    result = df.copy()
    for column, dtype in SCORE_COLUMNS.items():
        result[column] = pd.Series(
            [s[column] for s in scores], index=result.index, dtype=dtype,
        )

    logger.info(f"Scored {len(result)} pairs from columns '{col_a}' / '{col_b}'")
    return result
