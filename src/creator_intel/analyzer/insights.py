"""Insight generation for a ranked competitive landscape."""

import logging
from collections.abc import Sequence

from creator_intel.analyzer.constants import (
    GROWTH_OUTLIER_MULTIPLIER,
    MARKET_DOMINANCE_SHARE,
)
from creator_intel.analyzer.normalization import (
    format_count,
    format_percent,
    mean,
    same_username,
)
from creator_intel.types import CompetitorAnalysis, Insight

logger = logging.getLogger(__name__)


def generate_insights(
    competitors: Sequence[CompetitorAnalysis],
    leader: CompetitorAnalysis,
    challenger: CompetitorAnalysis | None,
    fastest_growing: CompetitorAnalysis,
    highest_engagement: CompetitorAnalysis,
) -> list[Insight]:
    """Evaluate the insight rules in their fixed order.

    Each rule fires independently; the output keeps rule order so the same
    landscape always produces the same list.
    """
    insights: list[Insight] = []

    # Leader dominance
    if leader.market_share.followers > MARKET_DOMINANCE_SHARE:
        insights.append(
            Insight(
                type="market_dominance",
                message=(
                    f"@{leader.username} dominates with "
                    f"{format_percent(leader.market_share.followers)}% of total followers"
                ),
                severity="info",
            )
        )

    # Challenger threat
    leader_growth = leader.growth.followers_per_month
    if challenger is not None and challenger.growth.followers_per_month > leader_growth:
        insights.append(
            Insight(
                type="challenger_rising",
                message=(
                    f"@{challenger.username} is growing faster than the leader "
                    f"({format_count(challenger.growth.followers_per_month)} vs "
                    f"{format_count(leader_growth)} followers/month)"
                ),
                severity="warning",
            )
        )

    # Engagement leader without the follower lead
    if not same_username(highest_engagement.username, leader.username):
        insights.append(
            Insight(
                type="engagement_opportunity",
                message=(
                    f"@{highest_engagement.username} has highest engagement "
                    f"({format_percent(highest_engagement.metrics.engagement_rate)}%) "
                    "but fewer followers"
                ),
                severity="opportunity",
            )
        )

    avg_growth = mean(c.growth.followers_per_month for c in competitors)
    if fastest_growing.growth.followers_per_month > avg_growth * GROWTH_OUTLIER_MULTIPLIER:
        insights.append(
            Insight(
                type="growth_outlier",
                message=f"@{fastest_growing.username} is growing 2x faster than average",
                severity="info",
            )
        )

    strategies = {c.content_strategy.posting_strategy for c in competitors}
    if len(strategies) == 1:
        strategy = next(iter(strategies))
        insights.append(
            Insight(
                type="strategy_uniformity",
                message=(
                    f"All competitors use similar {strategy} posting strategy - "
                    "differentiation opportunity"
                ),
                severity="opportunity",
            )
        )

    logger.debug("Generated %d insights for %d creators", len(insights), len(competitors))
    return insights


__all__ = ["generate_insights"]
