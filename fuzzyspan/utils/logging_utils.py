"""Logging utilities for fuzzyspan."""

import logging
from typing import Any, Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Any) -> int:
    """Map a level name such as ``"info"`` to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level.

    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: '{level}'")
    return numeric_level


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """Configure root logging for command-line use.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a file that receives a copy of every record
        fmt: Record format string

    Raises:
        ValueError: If the level name is unknown.

    """
    numeric_level = resolve_level(level)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=numeric_level,
        format=fmt,
        handlers=handlers,
        force=True,
    )


def setup_logging_from_settings(settings: dict[str, Any], level: Optional[str] = None) -> None:
    """Configure logging from the ``logging`` section of the settings.

    Args:
        settings: Settings dictionary as returned by ``load_settings``
        level: Optional level that overrides the configured one

    """
    log_cfg = settings.get("logging", {})
    setup_logging(
        level=level or log_cfg.get("level", "INFO"),
        log_file=log_cfg.get("file"),
        fmt=log_cfg.get("format", DEFAULT_FORMAT),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance

    """
    return logging.getLogger(name)
