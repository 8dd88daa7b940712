from __future__ import annotations

import logging

import pytest
from hypothesis import settings

from fuzzyspan import cache


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "hypothesis: property-based test")
    # Set xfail_strict to False globally
    config.option.xfail_strict = False


# ---- Deterministic Testing Configuration ---------------------

# Hypothesis settings for all property-based tests
settings.register_profile(
    "deterministic",
    deadline=None,
    max_examples=200,
    derandomize=True,
    database=None,
)
settings.load_profile("deterministic")


# ---- Shared fixtures --------------------------------------------


@pytest.fixture
def fresh_cache():
    """Give the test empty memoization caches and restore defaults afterwards."""
    cache.configure_cache()
    yield cache
    cache.configure_cache()


@pytest.fixture
def restore_root_logging():
    """Undo the root logger reconfiguration done by the CLI."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
