"""Constants for the competitive intelligence analyzer."""

from creator_intel.types import DEFAULT_ACCOUNT_AGE_DAYS

MIN_LANDSCAPE_CREATORS = 2
INSUFFICIENT_DATA_MESSAGE = "Need at least 2 creators for competitive analysis"

DAYS_PER_MONTH = 30

# Follower floors, evaluated top-down
TIER_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (1_000_000, "mega"),
    (500_000, "macro"),
    (100_000, "mid-tier"),
    (10_000, "micro"),
)
BASE_TIER = "nano"

# Videos-per-month floors, evaluated top-down
POSTING_STRATEGY_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (60, "high-volume"),
    (20, "consistent"),
    (5, "moderate"),
)
BASE_POSTING_STRATEGY = "quality-focused"

# Percentile floors for the human-readable standing label
PERCENTILE_LABELS: tuple[tuple[int, str], ...] = (
    (90, "Top 10%"),
    (75, "Top 25%"),
    (50, "Above Average"),
    (25, "Below Average"),
)
BASE_PERCENTILE_LABEL = "Bottom 25%"

# Insight thresholds
MARKET_DOMINANCE_SHARE = 50.0
GROWTH_OUTLIER_MULTIPLIER = 2.0

# Recommendation thresholds
CONTENT_VOLUME_RATIO = 0.7
GROWTH_MATERIALITY_THRESHOLD = 100  # followers/month
MAX_PROJECTION_MONTHS = 24
GROWTH_DISCLAIMER = (
    "Projection assumes linear growth from lifetime averages; actual growth "
    "varies with content performance and platform algorithms."
)

__all__ = [
    "BASE_PERCENTILE_LABEL",
    "BASE_POSTING_STRATEGY",
    "BASE_TIER",
    "CONTENT_VOLUME_RATIO",
    "DAYS_PER_MONTH",
    "DEFAULT_ACCOUNT_AGE_DAYS",
    "GROWTH_DISCLAIMER",
    "GROWTH_MATERIALITY_THRESHOLD",
    "GROWTH_OUTLIER_MULTIPLIER",
    "INSUFFICIENT_DATA_MESSAGE",
    "MARKET_DOMINANCE_SHARE",
    "MAX_PROJECTION_MONTHS",
    "MIN_LANDSCAPE_CREATORS",
    "PERCENTILE_LABELS",
    "POSTING_STRATEGY_THRESHOLDS",
    "TIER_THRESHOLDS",
]
