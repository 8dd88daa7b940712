"""Command-line interface for fuzzyspan.

Usage:
    python -m fuzzyspan locate "The qwick brown fox" quick
    python -m fuzzyspan diff "function getUserData()" "function  getUserData()"
    python -m fuzzyspan score pairs.csv --col-a expected --col-b actual --output scored.csv
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional

import pandas as pd

from . import cache
from .boundaries import CharDiff
from .scoring import score_pairs_frame
from .utils.logging_utils import setup_logging_from_settings
from .utils.settings import (
    get_cache_maxsize,
    get_distance_backend,
    load_settings,
    validate_settings,
)

logger = logging.getLogger(__name__)


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _cmd_locate(args: argparse.Namespace, backend: str) -> None:
    _print_json(cache.cached_locate(args.text, args.query, backend=backend).to_dict())


def _cmd_distance(args: argparse.Namespace, backend: str) -> None:
    print(int(cache.cached_distance(args.a, args.b, backend=backend)))


def _cmd_similarity(args: argparse.Namespace, backend: str) -> None:
    print(f"{cache.cached_similarity(args.a, args.b, backend=backend):.6f}")


def _cmd_boundaries(args: argparse.Namespace, backend: str) -> None:
    _print_json(cache.cached_boundaries(args.a, args.b)._asdict())


def _cmd_diff(args: argparse.Namespace, backend: str) -> None:
    print(CharDiff.from_strings(args.expected, args.actual).format())


def _cmd_analyze(args: argparse.Namespace, backend: str) -> None:
    data = cache.cached_analyze(args.expected, args.actual)
    if args.report:
        print(data.format_detailed_report(), end="")
    else:
        _print_json(data.to_dict())


def _cmd_score(args: argparse.Namespace, backend: str) -> None:
    df = pd.read_csv(args.input, dtype=str, keep_default_na=False)
    logger.info(f"Loaded {len(df)} rows from {args.input}")

    scored = score_pairs_frame(df, args.col_a, args.col_b, backend=backend)

    if args.output:
        scored.to_csv(args.output, index=False)
        logger.info(f"Scores saved to {args.output}")
    else:
        scored.to_csv(sys.stdout, index=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzyspan",
        description="Approximate substring search and minimal-diff diagnostics",
    )
    parser.add_argument("--config", help="Settings YAML file (default: config/settings.yaml)")
    parser.add_argument(
        "--backend",
        choices=["auto", "python", "rapidfuzz"],
        help="Distance backend (overrides settings)",
    )
    parser.add_argument("--log-level", help="Logging level (overrides settings)")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("locate", help="Find the closest window of TEXT to QUERY")
    p.add_argument("text")
    p.add_argument("query")
    p.set_defaults(func=_cmd_locate)

    for name, func, help_text in (
        ("distance", _cmd_distance, "Levenshtein distance of A and B"),
        ("similarity", _cmd_similarity, "Similarity ratio of A and B in [0, 1]"),
        ("boundaries", _cmd_boundaries, "Common prefix and suffix lengths of A and B"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("a")
        p.add_argument("b")
        p.set_defaults(func=func)

    p = sub.add_parser("diff", help="Render prefix{-expected-}{+actual+}suffix")
    p.add_argument("expected")
    p.add_argument("actual")
    p.set_defaults(func=_cmd_diff)

    p = sub.add_parser("analyze", help="Character-level diagnostics of the differing span")
    p.add_argument("expected")
    p.add_argument("actual")
    p.add_argument(
        "--report",
        action="store_true",
        help="Print a plain-text report instead of JSON",
    )
    p.set_defaults(func=_cmd_analyze)

    p = sub.add_parser("score", help="Score string pairs held in two CSV columns")
    p.add_argument("input", help="Input CSV file")
    p.add_argument("--col-a", required=True, help="Column with the first string")
    p.add_argument("--col-b", required=True, help="Column with the second string")
    p.add_argument("--output", help="Output CSV file (default: stdout)")
    p.set_defaults(func=_cmd_score)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    warnings = validate_settings(settings)

    try:
        setup_logging_from_settings(settings, level=args.log_level)
    except ValueError as e:
        if args.log_level:
            setup_logging_from_settings(settings, level="INFO")
            logger.error(f"--log-level: {e}")
            return 1
        # logging.level is reported by validate_settings below
        setup_logging_from_settings(settings, level="INFO")

    for warning in warnings:
        logger.warning(f"settings | {warning}")

    backend = args.backend or get_distance_backend(settings)

    try:
        cache.configure_cache(get_cache_maxsize(settings))
        args.func(args, backend)
    except (FileNotFoundError, KeyError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
