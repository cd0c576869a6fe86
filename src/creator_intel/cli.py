"""Command-line interface for landscape and benchmark analysis."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from .analyzer import InvalidInputError, analyze_landscape, benchmark_creator
from .analyzer.report import (
    ResultMode,
    format_benchmark_report,
    format_landscape_report,
    result_payload,
)
from .services.profiles import (
    ProfileLoadError,
    filter_profiles,
    load_profiles,
    select_benchmark_profiles,
)
from .types import BenchmarkResult, LandscapeError, LandscapeResult

PROFILES_ENV_VAR = "CREATOR_INTEL_PROFILES"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--profiles",
        type=Path,
        default=None,
        help=f"JSON file of creator profiles (default: ${PROFILES_ENV_VAR})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional path for writing the JSON result",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON result instead of the markdown report",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="creator-intel",
        description="Benchmark creators and analyze their competitive landscape",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    landscape_parser = subparsers.add_parser(
        "landscape",
        help="Rank two or more creators and summarize the market",
    )
    _add_common_arguments(landscape_parser)
    landscape_parser.add_argument(
        "--usernames",
        nargs="+",
        default=None,
        help="Only analyze these usernames (default: every profile in the file)",
    )

    benchmark_parser = subparsers.add_parser(
        "benchmark",
        help="Compare one creator against competitors",
    )
    _add_common_arguments(benchmark_parser)
    benchmark_parser.add_argument(
        "--target", required=True, help="Username of the creator to benchmark"
    )
    benchmark_parser.add_argument(
        "--competitors",
        nargs="+",
        default=None,
        help="Competitor usernames (default: every other profile in the file)",
    )

    return parser


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _resolve_profiles_path(args: argparse.Namespace) -> Path:
    if args.profiles is not None:
        return Path(args.profiles)
    env_path = os.environ.get(PROFILES_ENV_VAR)
    if not env_path:
        raise ProfileLoadError(
            f"No profile file given; pass --profiles or set {PROFILES_ENV_VAR}"
        )
    return Path(env_path)


def _emit(
    result: LandscapeResult | BenchmarkResult,
    mode: ResultMode,
    args: argparse.Namespace,
) -> None:
    payload = result_payload(result, mode)
    if args.output:
        destination = Path(args.output)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logging.getLogger(__name__).info("Wrote %s result to %s", mode, destination)

    if args.json:
        print(json.dumps(payload, indent=2))
    elif isinstance(result, BenchmarkResult):
        print(format_benchmark_report(result))
    else:
        print(format_landscape_report(result))


def _run_landscape(args: argparse.Namespace) -> int:
    try:
        profiles = load_profiles(_resolve_profiles_path(args))
    except ProfileLoadError as exc:
        print(f"Loading profiles failed: {exc}", file=sys.stderr)
        return 1

    if args.usernames:
        profiles = filter_profiles(profiles, args.usernames)

    result = analyze_landscape(profiles)
    if isinstance(result, LandscapeError):
        print(f"Landscape analysis failed: {result.error}", file=sys.stderr)
        return 1

    _emit(result, "landscape", args)
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    try:
        profiles = load_profiles(_resolve_profiles_path(args))
        target, competitors = select_benchmark_profiles(
            profiles, args.target, args.competitors
        )
        result = benchmark_creator(target, competitors)
    except (ProfileLoadError, InvalidInputError) as exc:
        print(f"Benchmark failed: {exc}", file=sys.stderr)
        return 1

    _emit(result, "benchmark", args)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    if args.command == "landscape":
        return _run_landscape(args)
    if args.command == "benchmark":
        return _run_benchmark(args)
    parser.error(f"Unknown command {args.command}")
    return 1


if __name__ == "__main__":  # pragma: no cover - entry point
    raise SystemExit(main())
