"""Shared fixtures for the analyzer tests."""

from __future__ import annotations

from typing import Any

import pytest

from creator_intel.types import CreatorProfile


def make_profile(username: str, **fields: Any) -> CreatorProfile:
    """Build a profile with explicit engagement and age so no defaults warn."""
    fields.setdefault("engagement_rate", 0.0)
    fields.setdefault("account_age_days", 365)
    return CreatorProfile(username=username, **fields)


@pytest.fixture
def scenario_profiles() -> list[dict[str, Any]]:
    """Two provider records in camelCase, as exported by the scraper."""
    return [
        {
            "username": "a",
            "followers": 1_000_000,
            "likes": 50_000,
            "videos": 100,
            "engagementRate": 5,
            "accountAgeDays": 365,
        },
        {
            "username": "b",
            "followers": 500_000,
            "likes": 40_000,
            "videos": 50,
            "engagementRate": 8,
            "accountAgeDays": 365,
        },
    ]


@pytest.fixture
def market_profiles() -> list[CreatorProfile]:
    """Four creators spanning several tiers and posting cadences."""
    return [
        make_profile(
            "dancewithmia",
            followers=420_000,
            likes=9_800_000,
            videos=610,
            engagement_rate=7.4,
            account_age_days=540,
        ),
        make_profile(
            "StepsByJay",
            verified=True,
            followers=2_100_000,
            likes=48_000_000,
            videos=1_320,
            engagement_rate=4.1,
            account_age_days=1_460,
        ),
        make_profile(
            "moves.daily",
            verified=True,
            followers=880_000,
            likes=15_300_000,
            videos=2_400,
            engagement_rate=5.35,
            account_age_days=700,
        ),
        make_profile(
            "tiny_tutorials",
            followers=38_000,
            likes=410_000,
            videos=95,
            engagement_rate=9.0,
            account_age_days=365,
        ),
    ]
