"""Recommendation generation for a benchmarked creator."""

import logging
from collections.abc import Sequence

from creator_intel.analyzer.constants import (
    CONTENT_VOLUME_RATIO,
    GROWTH_DISCLAIMER,
    GROWTH_MATERIALITY_THRESHOLD,
    MAX_PROJECTION_MONTHS,
)
from creator_intel.analyzer.normalization import (
    format_percent,
    mean,
    round_int,
    same_username,
)
from creator_intel.types import CompetitorAnalysis, Recommendation

logger = logging.getLogger(__name__)


def _engagement_recommendation(
    target: CompetitorAnalysis, competitors: Sequence[CompetitorAnalysis]
) -> Recommendation:
    target_rate = target.metrics.engagement_rate
    avg_rate = mean(c.metrics.engagement_rate for c in competitors)

    if target_rate < avg_rate:
        return Recommendation(
            category="Engagement",
            priority="high",
            action=(
                f"Improve engagement rate from {format_percent(target_rate)}% "
                f"to match competitor average of {avg_rate:.1f}%"
            ),
            impact="Better algorithm visibility and sponsorship rates",
        )
    return Recommendation(
        category="Engagement",
        priority="low",
        action=(
            f"Maintain strong engagement rate ({format_percent(target_rate)}% "
            f"vs {avg_rate:.1f}% avg)"
        ),
        impact="Key competitive advantage",
    )


def _content_volume_recommendation(
    target: CompetitorAnalysis, competitors: Sequence[CompetitorAnalysis]
) -> Recommendation | None:
    avg_posting = mean(c.growth.videos_per_month for c in competitors)
    if target.growth.videos_per_month >= avg_posting * CONTENT_VOLUME_RATIO:
        return None
    return Recommendation(
        category="Content Volume",
        priority="medium",
        action=(
            f"Increase posting frequency from "
            f"{format_percent(target.growth.videos_per_month)} to "
            f"{round_int(avg_posting)} videos/month"
        ),
        impact="Match competitor content output",
    )


def _growth_recommendation(
    target: CompetitorAnalysis, leader: CompetitorAnalysis
) -> Recommendation:
    follower_gap = leader.metrics.followers - target.metrics.followers
    growth_delta = target.growth.followers_per_month - leader.growth.followers_per_month

    if growth_delta > GROWTH_MATERIALITY_THRESHOLD:
        months = round_int(follower_gap / growth_delta)
        if months > MAX_PROJECTION_MONTHS:
            horizon = f"{MAX_PROJECTION_MONTHS}+"
        else:
            horizon = str(months)
        logger.debug(
            "@%s projected to overtake @%s in %s months",
            target.username,
            leader.username,
            horizon,
        )
        return Recommendation(
            category="Growth",
            priority="low",
            action=(
                "Maintain growth velocity - on track to overtake leader "
                f"in ~{horizon} months"
            ),
            impact="Market leadership potential",
            disclaimer=GROWTH_DISCLAIMER,
        )

    return Recommendation(
        category="Growth",
        priority="high",
        action="Increase growth rate to close gap with leader",
        impact=f"Currently {follower_gap / 1_000_000:.1f}M followers behind",
        disclaimer=GROWTH_DISCLAIMER,
    )


def generate_recommendations(
    target: CompetitorAnalysis,
    competitors: Sequence[CompetitorAnalysis],
    leader: CompetitorAnalysis,
) -> list[Recommendation]:
    """Build the ordered recommendation list for ``target``.

    Args:
        target: Analysis of the benchmarked creator
        competitors: Analyses of every other creator in the landscape
        leader: Rank 1 analysis (may be the target itself)

    Returns:
        Recommendations in fixed category order: Engagement, Content Volume,
        Growth, Credibility. Content Volume, Growth and Credibility are only
        present when their condition holds.
    """
    recommendations = [_engagement_recommendation(target, competitors)]

    volume = _content_volume_recommendation(target, competitors)
    if volume is not None:
        recommendations.append(volume)

    if not same_username(target.username, leader.username):
        recommendations.append(_growth_recommendation(target, leader))

    if not target.verified and any(c.verified for c in competitors):
        recommendations.append(
            Recommendation(
                category="Credibility",
                priority="medium",
                action="Pursue platform verification",
                impact="Match verified competitors for brand trust",
            )
        )

    return recommendations


__all__ = ["generate_recommendations"]
