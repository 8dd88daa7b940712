"""Memoized entry points.

The algorithm modules keep no state. Callers that score the same pairs
repeatedly (an editor re-checking a failed replacement, a UI re-rendering a
diff) go through these wrappers instead, which put a bounded LRU cache keyed
by the input pair in front of each pure function.

``configure_cache`` swaps in freshly built wrappers with a new bound; the
previous caches are dropped.
"""

import functools
import logging
from typing import Any, Callable, Optional

from .boundaries import boundaries
from .diagnostics import CharCodeData, analyze
from .distance import distance
from .locator import locate
from .scoring import similarity
from .types import BoundaryPair, FuzzyMatch

logger = logging.getLogger(__name__)

__all__ = [
    "cache_info",
    "cached_analyze",
    "cached_boundaries",
    "cached_distance",
    "cached_locate",
    "cached_similarity",
    "clear_caches",
    "configure_cache",
]

DEFAULT_MAXSIZE = 100

_CACHEABLE: dict[str, Callable[..., Any]] = {
    "analyze": analyze,
    "boundaries": boundaries,
    "distance": distance,
    "locate": locate,
    "similarity": similarity,
}


def _build_wrappers(maxsize: Optional[int]) -> dict[str, Any]:
    return {name: functools.lru_cache(maxsize=maxsize)(func) for name, func in _CACHEABLE.items()}


_wrappers = _build_wrappers(DEFAULT_MAXSIZE)


def configure_cache(maxsize: Optional[int] = DEFAULT_MAXSIZE) -> None:
    """Rebuild every wrapper with a new bound (None = unbounded).

    Raises:
        ValueError: If maxsize is negative.

    """
    global _wrappers
    if maxsize is not None and maxsize < 0:
        raise ValueError(f"Cache maxsize must be >= 0 or None, got {maxsize}")
    _wrappers = _build_wrappers(maxsize)
    logger.info(f"cache_configured | maxsize={maxsize} | entry_points={len(_wrappers)}")


def clear_caches() -> None:
    """Empty every cache without changing its bound."""
    for wrapper in _wrappers.values():
        wrapper.cache_clear()


def cache_info() -> dict[str, dict[str, Any]]:
    """Hit/miss statistics per entry point."""
    return {name: wrapper.cache_info()._asdict() for name, wrapper in _wrappers.items()}


def cached_boundaries(a: str, b: str) -> BoundaryPair:
    return _wrappers["boundaries"](a, b)


def cached_distance(a: str, b: str, backend: str = "auto") -> float:
    return _wrappers["distance"](a, b, backend=backend)


def cached_similarity(a: str, b: str, backend: str = "auto") -> float:
    return _wrappers["similarity"](a, b, backend=backend)


def cached_locate(text: str, query: str, backend: str = "auto") -> FuzzyMatch:
    return _wrappers["locate"](text, query, backend=backend)


def cached_analyze(expected: str, actual: str) -> CharCodeData:
    return _wrappers["analyze"](expected, actual)
