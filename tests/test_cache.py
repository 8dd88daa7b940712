"""Tests for the memoized entry points."""

import logging

import pytest

from fuzzyspan.boundaries import boundaries
from fuzzyspan.diagnostics import analyze
from fuzzyspan.distance import distance
from fuzzyspan.locator import locate
from fuzzyspan.scoring import similarity


class TestCachedEntryPoints:
    """Test that cached wrappers agree with the plain functions and memoize."""

    def test_results_match_uncached(self, fresh_cache):
        assert fresh_cache.cached_boundaries("cat", "bat") == boundaries("cat", "bat")
        assert fresh_cache.cached_distance("kitten", "sitting") == distance("kitten", "sitting")
        assert fresh_cache.cached_similarity("hello", "hallo") == similarity("hello", "hallo")
        assert fresh_cache.cached_locate("The qwick brown fox", "quick") == locate(
            "The qwick brown fox", "quick",
        )
        assert fresh_cache.cached_analyze("a\tb", "a    b") == analyze("a\tb", "a    b")

    def test_repeated_call_hits_cache(self, fresh_cache):
        fresh_cache.cached_distance("kitten", "sitting")
        fresh_cache.cached_distance("kitten", "sitting")

        info = fresh_cache.cache_info()["distance"]
        assert info["hits"] == 1
        assert info["misses"] == 1
        assert info["currsize"] == 1

    def test_backend_is_part_of_key(self, fresh_cache):
        fresh_cache.cached_distance("kitten", "sitting", backend="python")
        fresh_cache.cached_distance("kitten", "sitting", backend="rapidfuzz")

        assert fresh_cache.cache_info()["distance"]["misses"] == 2

    def test_cache_info_lists_every_entry_point(self, fresh_cache):
        assert set(fresh_cache.cache_info()) == {
            "analyze",
            "boundaries",
            "distance",
            "locate",
            "similarity",
        }

    def test_clear_caches(self, fresh_cache):
        fresh_cache.cached_similarity("a", "b")
        fresh_cache.clear_caches()

        info = fresh_cache.cache_info()["similarity"]
        assert info["currsize"] == 0
        assert info["maxsize"] == 100


class TestConfigureCache:
    """Test rebuilding the caches with a new bound."""

    def test_bounded_eviction(self, fresh_cache):
        fresh_cache.configure_cache(maxsize=2)
        for word in ["a", "b", "c"]:
            fresh_cache.cached_boundaries(word, word)

        info = fresh_cache.cache_info()["boundaries"]
        assert info["maxsize"] == 2
        assert info["currsize"] == 2

    def test_zero_disables_memoization(self, fresh_cache):
        fresh_cache.configure_cache(maxsize=0)
        fresh_cache.cached_distance("a", "b")
        fresh_cache.cached_distance("a", "b")

        assert fresh_cache.cache_info()["distance"]["hits"] == 0

    def test_unbounded(self, fresh_cache):
        fresh_cache.configure_cache(maxsize=None)
        assert fresh_cache.cache_info()["locate"]["maxsize"] is None

    def test_negative_raises(self, fresh_cache):
        with pytest.raises(ValueError, match="maxsize"):
            fresh_cache.configure_cache(maxsize=-1)

    def test_configure_logs(self, fresh_cache, caplog):
        with caplog.at_level(logging.INFO, logger="fuzzyspan.cache"):
            fresh_cache.configure_cache(maxsize=10)

        assert "cache_configured | maxsize=10 | entry_points=5" in caplog.text

    def test_reconfigure_drops_previous_entries(self, fresh_cache):
        fresh_cache.cached_distance("a", "b")
        fresh_cache.configure_cache(maxsize=50)

        assert fresh_cache.cache_info()["distance"]["currsize"] == 0
