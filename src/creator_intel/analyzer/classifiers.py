"""Leaf classifiers for content strategy, tier and percentile standing."""

from creator_intel.analyzer.constants import (
    BASE_PERCENTILE_LABEL,
    BASE_POSTING_STRATEGY,
    BASE_TIER,
    DAYS_PER_MONTH,
    PERCENTILE_LABELS,
    POSTING_STRATEGY_THRESHOLDS,
    TIER_THRESHOLDS,
)
from creator_intel.analyzer.normalization import round_half_up, round_int
from creator_intel.types import ContentStrategy, CreatorProfile, PostingStrategy, Tier


def videos_per_month(profile: CreatorProfile) -> float:
    """Unrounded posting cadence over the account lifetime."""
    return profile.videos / profile.account_age_days * DAYS_PER_MONTH


def classify_posting_strategy(monthly_videos: float) -> PostingStrategy:
    for floor, strategy in POSTING_STRATEGY_THRESHOLDS:
        if monthly_videos >= floor:
            return strategy  # type: ignore[return-value]
    return BASE_POSTING_STRATEGY  # type: ignore[return-value]


def classify_content_strategy(profile: CreatorProfile) -> ContentStrategy:
    """Classify posting cadence and collect profile signals."""
    monthly_videos = videos_per_month(profile)
    avg_likes = profile.likes / profile.videos if profile.videos > 0 else 0

    return ContentStrategy(
        posting_strategy=classify_posting_strategy(monthly_videos),
        videos_per_month=round_half_up(monthly_videos, 1),
        avg_likes_per_video=round_int(avg_likes),
        has_external_links=bool(profile.bio_link),
        is_verified=profile.verified,
        is_commerce=profile.commerce_user or profile.seller,
    )


def classify_tier(followers: int) -> Tier:
    """Bucket a follower count into a popularity tier."""
    for floor, tier in TIER_THRESHOLDS:
        if followers >= floor:
            return tier  # type: ignore[return-value]
    return BASE_TIER  # type: ignore[return-value]


def percentile_from_rank(rank: int, total: int) -> int:
    """Share of the set the creator is at least as good as, 0-100."""
    if total <= 0:
        return 0
    return round_int((1 - (rank - 1) / total) * 100)


def percentile_label(percentile: float) -> str:
    for floor, label in PERCENTILE_LABELS:
        if percentile >= floor:
            return label
    return BASE_PERCENTILE_LABEL


__all__ = [
    "classify_content_strategy",
    "classify_posting_strategy",
    "classify_tier",
    "percentile_from_rank",
    "percentile_label",
    "videos_per_month",
]
