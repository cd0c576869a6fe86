"""Shared type definitions for the competitive intelligence engine."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ModelWrapValidatorHandler,
    PrivateAttr,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

Tier = Literal["mega", "macro", "mid-tier", "micro", "nano"]
PostingStrategy = Literal["high-volume", "consistent", "moderate", "quality-focused"]
Severity = Literal["info", "warning", "opportunity"]
Priority = Literal["high", "medium", "low"]

# Ages of zero or below fall back to one year
DEFAULT_ACCOUNT_AGE_DAYS = 365

# Numeric inputs whose raw value is replaced by a declared default
_DEFAULTABLE_FIELDS = (
    "followers",
    "likes",
    "videos",
    "engagement_rate",
    "account_age_days",
)

# =============================================================================
# Input Records
# =============================================================================


class CreatorProfile(BaseModel):
    """Profile record as handed over by the profile provider."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    username: str
    nickname: str | None = None
    verified: bool = False
    followers: int = 0
    likes: int = 0
    videos: int = 0
    engagement_rate: float = 0.0
    account_age_days: int = DEFAULT_ACCOUNT_AGE_DAYS
    bio_link: str | None = None
    commerce_user: bool = False
    seller: bool = Field(
        default=False,
        validation_alias=AliasChoices("ttSeller", "sellerFlag", "seller"),
    )

    _defaulted: dict[str, Any] = PrivateAttr(default_factory=dict)

    @field_validator("followers", "likes", "videos", mode="before")
    @classmethod
    def _missing_count(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("engagement_rate", mode="before")
    @classmethod
    def _missing_rate(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator("verified", "commerce_user", "seller", mode="before")
    @classmethod
    def _missing_flag(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("account_age_days", mode="before")
    @classmethod
    def _default_age(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_ACCOUNT_AGE_DAYS
        return value

    @field_validator("account_age_days")
    @classmethod
    def _positive_age(cls, value: int) -> int:
        # Zero or negative ages would divide by zero in growth projections
        return value if value > 0 else DEFAULT_ACCOUNT_AGE_DAYS

    @model_validator(mode="wrap")
    @classmethod
    def _track_defaults(
        cls, data: Any, handler: ModelWrapValidatorHandler[CreatorProfile]
    ) -> CreatorProfile:
        profile = handler(data)
        if isinstance(data, Mapping):
            profile._defaulted = _defaulted_inputs(data)
        return profile

    @property
    def defaulted_fields(self) -> dict[str, Any]:
        """Raw values that were replaced by defaults, keyed by field name."""
        return dict(self._defaulted)


def _defaulted_inputs(data: Mapping[str, Any]) -> dict[str, Any]:
    defaulted: dict[str, Any] = {}
    for name in _DEFAULTABLE_FIELDS:
        for key in (to_camel(name), name):
            if key not in data:
                continue
            value = data[key]
            if value is None:
                defaulted[name] = None
            elif (
                name == "account_age_days"
                and isinstance(value, int | float)
                and not isinstance(value, bool)
                and value <= 0
            ):
                defaulted[name] = value
            break
    return defaulted


# =============================================================================
# Analysis Records
# =============================================================================


class _Record(BaseModel):
    """Immutable result record serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class CoreMetrics(_Record):
    """Raw counts carried through from the profile."""

    followers: int
    likes: int
    videos: int
    engagement_rate: float  # rounded to 2 decimals
    account_age_days: int


class MarketShare(_Record):
    """Percentage of the analyzed set's totals."""

    followers: float
    likes: float


class GrowthVelocity(_Record):
    """Linear growth projection from lifetime followers over account age."""

    followers_per_day: int
    followers_per_month: int
    videos_per_month: float


class ContentStrategy(_Record):
    """Posting cadence and profile signals."""

    posting_strategy: PostingStrategy
    videos_per_month: float
    avg_likes_per_video: int
    has_external_links: bool
    is_verified: bool
    is_commerce: bool


class CompetitorAnalysis(_Record):
    """Derived metrics for one creator within a landscape."""

    username: str
    nickname: str | None = None
    verified: bool = False
    metrics: CoreMetrics
    market_share: MarketShare
    growth: GrowthVelocity
    content_strategy: ContentStrategy
    tier: Tier
    rank: int = 0  # assigned after the follower sort


class LandscapeSummary(_Record):
    """Aggregate totals and averages over the input set."""

    total_creators: int
    total_followers: int
    total_likes: int
    avg_followers: int
    avg_engagement: float


class FollowerRanking(_Record):
    username: str
    followers: int
    rank: int


class EngagementRanking(_Record):
    username: str
    engagement_rate: float
    rank: int


class GrowthRanking(_Record):
    username: str
    growth_per_month: int
    rank: int


class Rankings(_Record):
    """Three independently sorted views over the same creators."""

    by_followers: list[FollowerRanking]
    by_engagement: list[EngagementRanking]
    by_growth: list[GrowthRanking]


class Highlights(_Record):
    """References to the notable creators of a landscape."""

    market_leader: CompetitorAnalysis
    challenger: CompetitorAnalysis | None = None
    challenger_gap: int = 0  # leader followers minus challenger followers
    fastest_growing: CompetitorAnalysis
    highest_engagement: CompetitorAnalysis


class Insight(_Record):
    """Qualitative observation about a landscape."""

    type: str
    message: str
    severity: Severity


class LandscapeResult(_Record):
    """Ranked market overview produced by ``analyze_landscape``."""

    summary: LandscapeSummary
    rankings: Rankings
    highlights: Highlights
    competitors: list[CompetitorAnalysis]
    insights: list[Insight]
    data_quality_warnings: list[str] = []


class LandscapeError(_Record):
    """Returned instead of a landscape when the input set is too small."""

    error: str


class DimensionBenchmark(_Record):
    """Target standing for a single ranked dimension."""

    rank: int
    percentile: int
    total: int
    label: str


class Benchmarks(_Record):
    followers: DimensionBenchmark
    engagement: DimensionBenchmark
    growth: DimensionBenchmark


class GapToLeader(_Record):
    followers: int
    percentage: int


class Recommendation(_Record):
    """Prioritized action for a benchmarked creator."""

    category: str
    priority: Priority
    action: str
    impact: str
    disclaimer: str | None = None


class BenchmarkResult(_Record):
    """Target-versus-competitors comparison produced by ``benchmark_creator``."""

    target: CompetitorAnalysis
    benchmarks: Benchmarks
    gap_to_leader: GapToLeader | None
    is_leader: bool
    competitor_count: int
    landscape: LandscapeSummary
    recommendations: list[Recommendation]


__all__ = [
    "BenchmarkResult",
    "Benchmarks",
    "CompetitorAnalysis",
    "ContentStrategy",
    "CoreMetrics",
    "CreatorProfile",
    "DEFAULT_ACCOUNT_AGE_DAYS",
    "DimensionBenchmark",
    "EngagementRanking",
    "FollowerRanking",
    "GapToLeader",
    "GrowthRanking",
    "GrowthVelocity",
    "Highlights",
    "Insight",
    "LandscapeError",
    "LandscapeResult",
    "LandscapeSummary",
    "MarketShare",
    "PostingStrategy",
    "Priority",
    "Rankings",
    "Recommendation",
    "Severity",
    "Tier",
]
