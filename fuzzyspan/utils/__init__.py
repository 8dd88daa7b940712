"""Utility modules for fuzzyspan.
"""

from .engine_selection import BACKENDS, choose_backend
from .logging_utils import get_logger, setup_logging, setup_logging_from_settings
from .settings import (
    get_cache_maxsize,
    get_config_path,
    get_distance_backend,
    load_settings,
    reload_settings,
    validate_settings,
)

__all__ = [
    "BACKENDS",
    "choose_backend",
    "get_cache_maxsize",
    "get_config_path",
    "get_distance_backend",
    "get_logger",
    "load_settings",
    "reload_settings",
    "setup_logging",
    "setup_logging_from_settings",
    "validate_settings",
]
