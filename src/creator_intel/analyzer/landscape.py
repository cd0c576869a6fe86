"""Competitive landscape analysis over a set of creator profiles."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from creator_intel.analyzer.classifiers import (
    classify_content_strategy,
    classify_tier,
    videos_per_month,
)
from creator_intel.analyzer.constants import (
    DAYS_PER_MONTH,
    INSUFFICIENT_DATA_MESSAGE,
    MIN_LANDSCAPE_CREATORS,
)
from creator_intel.analyzer.insights import generate_insights
from creator_intel.analyzer.normalization import (
    mean,
    round_half_up,
    round_int,
    safe_ratio,
)
from creator_intel.analyzer.validation import check_data_quality
from creator_intel.types import (
    CompetitorAnalysis,
    CoreMetrics,
    CreatorProfile,
    EngagementRanking,
    FollowerRanking,
    GrowthRanking,
    GrowthVelocity,
    Highlights,
    LandscapeError,
    LandscapeResult,
    LandscapeSummary,
    MarketShare,
    Rankings,
)

logger = logging.getLogger(__name__)

ProfileInput = CreatorProfile | Mapping[str, Any]


def coerce_profiles(profiles: Iterable[ProfileInput]) -> list[CreatorProfile]:
    """Validate raw mappings into ``CreatorProfile`` records."""
    return [
        p if isinstance(p, CreatorProfile) else CreatorProfile.model_validate(p)
        for p in profiles
    ]


def build_competitor_analysis(
    profile: CreatorProfile, total_followers: int, total_likes: int
) -> CompetitorAnalysis:
    """Derive per-creator metrics relative to the landscape totals."""
    age = profile.account_age_days
    followers_per_day = profile.followers / age

    return CompetitorAnalysis(
        username=profile.username,
        nickname=profile.nickname,
        verified=profile.verified,
        metrics=CoreMetrics(
            followers=profile.followers,
            likes=profile.likes,
            videos=profile.videos,
            engagement_rate=round_half_up(profile.engagement_rate, 2),
            account_age_days=age,
        ),
        market_share=MarketShare(
            followers=round_half_up(safe_ratio(profile.followers, total_followers) * 100, 2),
            likes=round_half_up(safe_ratio(profile.likes, total_likes) * 100, 2),
        ),
        growth=GrowthVelocity(
            followers_per_day=round_int(followers_per_day),
            followers_per_month=round_int(followers_per_day * DAYS_PER_MONTH),
            videos_per_month=round_half_up(videos_per_month(profile), 1),
        ),
        content_strategy=classify_content_strategy(profile),
        tier=classify_tier(profile.followers),
    )


def rank_by_followers(analyses: list[CompetitorAnalysis]) -> list[CompetitorAnalysis]:
    """Stable sort by followers descending and stamp 1-based ranks."""
    ordered = sorted(analyses, key=lambda c: c.metrics.followers, reverse=True)
    return [c.model_copy(update={"rank": i + 1}) for i, c in enumerate(ordered)]


def sort_by_engagement(ranked: list[CompetitorAnalysis]) -> list[CompetitorAnalysis]:
    # sorted() is stable, so ties keep follower-rank order
    return sorted(ranked, key=lambda c: c.metrics.engagement_rate, reverse=True)


def sort_by_growth(ranked: list[CompetitorAnalysis]) -> list[CompetitorAnalysis]:
    return sorted(ranked, key=lambda c: c.growth.followers_per_month, reverse=True)


def analyze_landscape(
    profiles: Iterable[ProfileInput],
) -> LandscapeResult | LandscapeError:
    """Build a ranked market overview for two or more creators.

    Args:
        profiles: Creator profiles, as ``CreatorProfile`` records or raw
            provider mappings

    Returns:
        The landscape, or a ``LandscapeError`` when fewer than two creators
        were supplied. Callers check for the error before using the result.
    """
    creators = coerce_profiles(profiles)
    if len(creators) < MIN_LANDSCAPE_CREATORS:
        logger.info("Landscape skipped: %d creator(s) supplied", len(creators))
        return LandscapeError(error=INSUFFICIENT_DATA_MESSAGE)

    logger.info("Analyzing competitive landscape with %d creators", len(creators))
    warnings = check_data_quality(creators)

    total_followers = sum(c.followers for c in creators)
    total_likes = sum(c.likes for c in creators)

    analyses = [
        build_competitor_analysis(c, total_followers, total_likes) for c in creators
    ]
    ranked = rank_by_followers(analyses)
    by_engagement = sort_by_engagement(ranked)
    by_growth = sort_by_growth(ranked)

    leader = ranked[0]
    challenger = ranked[1] if len(ranked) > 1 else None
    fastest_growing = by_growth[0]
    highest_engagement = by_engagement[0]

    for analysis in ranked:
        logger.debug(
            "#%d @%s: %s followers, %s%% engagement, %s/month",
            analysis.rank,
            analysis.username,
            analysis.metrics.followers,
            analysis.metrics.engagement_rate,
            analysis.growth.followers_per_month,
        )

    insights = generate_insights(
        ranked, leader, challenger, fastest_growing, highest_engagement
    )

    summary = LandscapeSummary(
        total_creators=len(creators),
        total_followers=total_followers,
        total_likes=total_likes,
        avg_followers=round_int(total_followers / len(creators)),
        avg_engagement=round_half_up(
            mean(c.metrics.engagement_rate for c in ranked), 2
        ),
    )

    rankings = Rankings(
        by_followers=[
            FollowerRanking(
                username=c.username, followers=c.metrics.followers, rank=c.rank
            )
            for c in ranked
        ],
        by_engagement=[
            EngagementRanking(
                username=c.username,
                engagement_rate=c.metrics.engagement_rate,
                rank=i + 1,
            )
            for i, c in enumerate(by_engagement)
        ],
        by_growth=[
            GrowthRanking(
                username=c.username,
                growth_per_month=c.growth.followers_per_month,
                rank=i + 1,
            )
            for i, c in enumerate(by_growth)
        ],
    )

    highlights = Highlights(
        market_leader=leader,
        challenger=challenger,
        challenger_gap=(
            leader.metrics.followers - challenger.metrics.followers
            if challenger is not None
            else 0
        ),
        fastest_growing=fastest_growing,
        highest_engagement=highest_engagement,
    )

    return LandscapeResult(
        summary=summary,
        rankings=rankings,
        highlights=highlights,
        competitors=ranked,
        insights=insights,
        data_quality_warnings=warnings,
    )


__all__ = [
    "analyze_landscape",
    "build_competitor_analysis",
    "coerce_profiles",
    "rank_by_followers",
    "sort_by_engagement",
    "sort_by_growth",
]
