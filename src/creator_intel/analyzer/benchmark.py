"""Benchmark a target creator against a set of competitors."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from creator_intel.analyzer.classifiers import percentile_from_rank, percentile_label
from creator_intel.analyzer.landscape import (
    ProfileInput,
    analyze_landscape,
    coerce_profiles,
    sort_by_engagement,
    sort_by_growth,
)
from creator_intel.analyzer.normalization import round_int, safe_ratio, same_username
from creator_intel.analyzer.recommendations import generate_recommendations
from creator_intel.types import (
    BenchmarkResult,
    Benchmarks,
    CompetitorAnalysis,
    DimensionBenchmark,
    GapToLeader,
    LandscapeError,
)

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a benchmark is requested without a target or competitors."""


def _dimension_rank(ordered: Sequence[CompetitorAnalysis], username: str) -> int:
    for position, analysis in enumerate(ordered, start=1):
        if same_username(analysis.username, username):
            return position
    raise InvalidInputError(f"@{username} is missing from the ranked landscape")


def _dimension(rank: int, total: int) -> DimensionBenchmark:
    percentile = percentile_from_rank(rank, total)
    return DimensionBenchmark(
        rank=rank,
        percentile=percentile,
        total=total,
        label=percentile_label(percentile),
    )


def _gap_to_leader(
    target: CompetitorAnalysis, leader: CompetitorAnalysis
) -> GapToLeader | None:
    if same_username(target.username, leader.username):
        return None
    gap = leader.metrics.followers - target.metrics.followers
    return GapToLeader(
        followers=gap,
        percentage=round_int(safe_ratio(gap, leader.metrics.followers) * 100),
    )


def benchmark_creator(
    target: ProfileInput | None,
    competitors: Sequence[ProfileInput],
) -> BenchmarkResult:
    """Compare ``target`` against ``competitors``.

    Args:
        target: Profile of the creator being benchmarked
        competitors: One or more competitor profiles

    Returns:
        Percentile standing per dimension, gap to the leader and
        prioritized recommendations.

    Raises:
        InvalidInputError: If the target is missing, no competitors were
            given, or every competitor is the target itself.
    """
    if target is None:
        raise InvalidInputError("Benchmark requires a target profile")
    if not competitors:
        raise InvalidInputError("Benchmark requires at least one competitor")

    target_profile, *competitor_profiles = coerce_profiles([target, *competitors])
    competitor_profiles = [
        p
        for p in competitor_profiles
        if not same_username(p.username, target_profile.username)
    ]
    if not competitor_profiles:
        raise InvalidInputError(
            f"No competitors left after excluding target @{target_profile.username}"
        )

    logger.info(
        "Benchmarking @%s against %d competitors",
        target_profile.username,
        len(competitor_profiles),
    )

    landscape = analyze_landscape([target_profile, *competitor_profiles])
    if isinstance(landscape, LandscapeError):  # pragma: no cover - guarded above
        raise InvalidInputError(landscape.error)

    ranked = landscape.competitors
    total = len(ranked)
    target_analysis = next(
        c for c in ranked if same_username(c.username, target_profile.username)
    )
    competitor_analyses = [
        c for c in ranked if not same_username(c.username, target_profile.username)
    ]
    leader = ranked[0]

    engagement_order = sort_by_engagement(ranked)
    growth_order = sort_by_growth(ranked)

    benchmarks = Benchmarks(
        followers=_dimension(target_analysis.rank, total),
        engagement=_dimension(
            _dimension_rank(engagement_order, target_analysis.username), total
        ),
        growth=_dimension(
            _dimension_rank(growth_order, target_analysis.username), total
        ),
    )

    is_leader = same_username(leader.username, target_analysis.username)
    recommendations = generate_recommendations(
        target_analysis, competitor_analyses, leader
    )

    return BenchmarkResult(
        target=target_analysis,
        benchmarks=benchmarks,
        gap_to_leader=_gap_to_leader(target_analysis, leader),
        is_leader=is_leader,
        competitor_count=len(competitor_analyses),
        landscape=landscape.summary,
        recommendations=recommendations,
    )


__all__ = ["InvalidInputError", "benchmark_creator"]
