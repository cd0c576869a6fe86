"""Tests for markdown rendering and the JSON payload."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from creator_intel.analyzer.benchmark import benchmark_creator
from creator_intel.analyzer.landscape import analyze_landscape
from creator_intel.analyzer.report import (
    format_benchmark_report,
    format_landscape_report,
    result_payload,
)
from creator_intel.types import CreatorProfile, LandscapeResult


def _landscape(profiles: list[Any]) -> LandscapeResult:
    result = analyze_landscape(profiles)
    assert isinstance(result, LandscapeResult)
    return result


def test_landscape_report_sections(scenario_profiles: list[dict[str, Any]]) -> None:
    report = format_landscape_report(_landscape(scenario_profiles))

    assert report.startswith("# Competitive Landscape")
    assert "- **Total Followers:** 1,500,000" in report
    assert "- **Market Leader:** @a (66.67% share)" in report
    assert "- **Highest Engagement:** @b (8%)" in report
    assert "| 1 | @a | 1,000,000 | mega | moderate |" in report
    assert "## Insights" in report
    assert "## Data Quality" not in report


def test_benchmark_report_for_leader(market_profiles: list[CreatorProfile]) -> None:
    leader = market_profiles[1]
    others = [p for p in market_profiles if p is not leader]
    report = format_benchmark_report(benchmark_creator(leader, others))

    assert report.startswith("# Benchmark: @StepsByJay")
    assert "**MARKET LEADER**" in report
    assert "| Followers | 2,100,000 | 1/4 | 100 | Top 10% |" in report


def test_benchmark_report_lists_recommendations(
    market_profiles: list[CreatorProfile],
) -> None:
    target = market_profiles[3]
    report = format_benchmark_report(benchmark_creator(target, market_profiles[:3]))

    assert "**Gap to leader:** 2,062,000 followers (98%)" in report
    assert "- [HIGH] Growth: Increase growth rate to close gap with leader" in report
    assert "  Note: Projection assumes linear growth" in report


def test_result_payload_uses_camel_case(
    scenario_profiles: list[dict[str, Any]],
) -> None:
    analyzed_at = datetime(2025, 1, 1, tzinfo=UTC)
    payload = result_payload(
        _landscape(scenario_profiles), "landscape", analyzed_at=analyzed_at
    )

    assert payload["type"] == "landscape"
    assert payload["analyzedAt"] == "2025-01-01T00:00:00+00:00"
    assert payload["summary"]["totalFollowers"] == 1_500_000
    assert payload["highlights"]["marketLeader"]["username"] == "a"
    assert payload["competitors"][0]["growth"]["followersPerMonth"] == 82_192
    assert payload["rankings"]["byEngagement"][0]["engagementRate"] == 8.0
