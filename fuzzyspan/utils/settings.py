"""Settings loading for fuzzyspan.

Settings are read from a YAML file and deep-merged over in-code defaults.
The algorithm modules never read settings themselves; callers (the CLI, the
cache wrappers) resolve the values and pass them in explicitly.
"""

import copy
import functools
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .engine_selection import BACKENDS

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULTS",
    "get_cache_maxsize",
    "get_config_path",
    "get_distance_backend",
    "load_settings",
    "reload_settings",
    "validate_settings",
]

BACKEND_ENV_VAR = "FUZZYSPAN_BACKEND"

DEFAULTS: dict[str, Any] = {
    "distance": {},
    "cache": {"maxsize": 100},
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "file": None,
    },
}

# Settings loading counter for debugging
_settings_load_count = 0


def get_config_path(filename: str = "settings.yaml") -> Path:
    """Get the path to a config file under the project's ``config/`` directory.

    Args:
        filename: Name of the config file (default: settings.yaml)

    Returns:
        Path to the config file

    """
    return Path(__file__).resolve().parents[2] / "config" / filename


def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        elif key in base and isinstance(base[key], dict) and value is None:
            continue
        else:
            base[key] = value
    return base


@functools.lru_cache(maxsize=1)
def load_settings(path: Optional[str] = None) -> dict[str, Any]:
    """Load settings from YAML file with defaults.

    This function is cached to prevent repeated file I/O and parsing.
    Use reload_settings() to force a fresh load.

    Args:
        path: Path to settings YAML file (default: config/settings.yaml)

    Returns:
        Dictionary with settings (user config merged over defaults)

    """
    global _settings_load_count
    _settings_load_count += 1

    settings_path = Path(path) if path else get_config_path()
    logger.debug(f"Settings loaded (count: {_settings_load_count}) from {settings_path}")

    defaults = copy.deepcopy(DEFAULTS)
    try:
        with open(settings_path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
        if not isinstance(user_config, dict):
            logger.warning(
                f"Settings file {settings_path} does not contain a mapping. Using defaults.",
            )
            return defaults
        return _deep_merge(defaults, user_config)

    except FileNotFoundError:
        if path:
            logger.warning(f"Settings file not found: {settings_path}. Using defaults.")
        else:
            # installed without a source checkout: no config/ next to the package
            logger.debug(f"No default settings file at {settings_path}. Using defaults.")
        return defaults
    except yaml.YAMLError as e:
        logger.exception(f"Error loading settings: {e}. Using defaults.")
        return defaults


def reload_settings(path: Optional[str] = None) -> dict[str, Any]:
    """Force reload settings from file (clears cache).

    Args:
        path: Path to settings YAML file

    Returns:
        Freshly loaded settings

    """
    load_settings.cache_clear()
    return load_settings(path)


def get_distance_backend(settings: Optional[dict[str, Any]] = None) -> str:
    """Resolve the distance backend name.

    Precedence order: config > env > default

    Args:
        settings: Settings dict to use. If None, uses load_settings().

    Returns:
        Backend name ("auto", "python" or "rapidfuzz")

    """
    if settings is None:
        settings = load_settings()

    env_backend = os.environ.get(BACKEND_ENV_VAR, "").strip().lower() or "auto"
    configured = settings.get("distance", {}).get("backend")
    return str(configured).lower() if configured else env_backend


def get_cache_maxsize(settings: Optional[dict[str, Any]] = None) -> Optional[int]:
    """Return the configured bound of the memoizing cache (None = unbounded).

    Raises:
        ValueError: If the configured value is not an integer or null.

    """
    if settings is None:
        settings = load_settings()
    maxsize = settings.get("cache", {}).get("maxsize", DEFAULTS["cache"]["maxsize"])
    if maxsize is None:
        return None
    if isinstance(maxsize, bool) or not isinstance(maxsize, int):
        raise ValueError(f"cache.maxsize must be an integer or null, got {maxsize!r}")
    return maxsize


def validate_settings(settings: Optional[dict[str, Any]] = None) -> list[str]:
    """Returns list of validation warnings.

    Args:
        settings: Settings dict to validate. If None, uses load_settings().

    Returns:
        List of validation warning messages.

    """
    warnings = []
    if settings is None:
        settings = load_settings()

    backend = settings.get("distance", {}).get("backend", "auto")
    if backend is not None and str(backend).lower() not in BACKENDS + ("auto",):
        warnings.append(
            f"distance.backend must be one of {sorted(BACKENDS + ('auto',))}, got {backend}",
        )

    maxsize = settings.get("cache", {}).get("maxsize", 100)
    if maxsize is not None and (
        isinstance(maxsize, bool) or not isinstance(maxsize, int) or maxsize < 0
    ):
        warnings.append(f"cache.maxsize must be a non-negative int or null, got {maxsize}")

    level = settings.get("logging", {}).get("level", "INFO")
    if not isinstance(level, str) or not isinstance(
        logging.getLevelName(level.upper()), int
    ):
        warnings.append(f"logging.level must be a standard level name, got {level}")

    return warnings
