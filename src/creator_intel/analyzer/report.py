"""Report generation for landscape and benchmark results."""

from datetime import UTC, datetime
from typing import Any, Literal

from creator_intel.analyzer.normalization import format_count, format_percent
from creator_intel.types import BenchmarkResult, Insight, LandscapeResult

ResultMode = Literal["landscape", "benchmark"]

_SEVERITY_MARKERS = {
    "opportunity": "[opportunity]",
    "warning": "[warning]",
    "info": "[info]",
}


def _format_insight(insight: Insight) -> str:
    marker = _SEVERITY_MARKERS.get(insight.severity, "")
    return f"- {marker} {insight.message}"


def format_landscape_report(result: LandscapeResult) -> str:
    """Render a landscape as markdown."""
    summary = result.summary
    highlights = result.highlights
    leader = highlights.market_leader

    lines = ["# Competitive Landscape\n"]

    lines.append("## Market Overview\n")
    lines.append(f"- **Total Creators:** {summary.total_creators}")
    lines.append(f"- **Total Followers:** {format_count(summary.total_followers)}")
    lines.append(f"- **Average Followers:** {format_count(summary.avg_followers)}")
    lines.append(f"- **Average Engagement:** {format_percent(summary.avg_engagement)}%")
    lines.append("")

    lines.append("## Highlights\n")
    lines.append(
        f"- **Market Leader:** @{leader.username} "
        f"({format_percent(leader.market_share.followers)}% share)"
    )
    if highlights.challenger is not None:
        lines.append(
            f"- **Challenger:** @{highlights.challenger.username} "
            f"({format_count(highlights.challenger_gap)} followers behind)"
        )
    lines.append(
        f"- **Fastest Growing:** @{highlights.fastest_growing.username} "
        f"(+{format_count(highlights.fastest_growing.growth.followers_per_month)}/month)"
    )
    lines.append(
        f"- **Highest Engagement:** @{highlights.highest_engagement.username} "
        f"({format_percent(highlights.highest_engagement.metrics.engagement_rate)}%)"
    )
    lines.append("")

    lines.append("## Rankings by Followers\n")
    lines.append("| Rank | Creator | Followers | Tier | Strategy |")
    lines.append("|------|---------|-----------|------|----------|")
    for c in result.competitors:
        lines.append(
            f"| {c.rank} | @{c.username} | {format_count(c.metrics.followers)} "
            f"| {c.tier} | {c.content_strategy.posting_strategy} |"
        )
    lines.append("")

    if result.insights:
        lines.append("## Insights\n")
        lines.extend(_format_insight(insight) for insight in result.insights)
        lines.append("")

    if result.data_quality_warnings:
        lines.append("## Data Quality\n")
        lines.extend(f"- {message}" for message in result.data_quality_warnings)
        lines.append("")

    return "\n".join(lines)


def format_benchmark_report(result: BenchmarkResult) -> str:
    """Render a benchmark as markdown."""
    target = result.target
    benchmarks = result.benchmarks

    lines = [f"# Benchmark: @{target.username}\n"]

    lines.append("## Standing\n")
    lines.append("| Dimension | Value | Rank | Percentile | Label |")
    lines.append("|-----------|-------|------|------------|-------|")
    rows = (
        ("Followers", format_count(target.metrics.followers), benchmarks.followers),
        (
            "Engagement",
            f"{format_percent(target.metrics.engagement_rate)}%",
            benchmarks.engagement,
        ),
        (
            "Growth",
            f"{format_count(target.growth.followers_per_month)}/month",
            benchmarks.growth,
        ),
    )
    for name, value, dimension in rows:
        lines.append(
            f"| {name} | {value} | {dimension.rank}/{dimension.total} "
            f"| {dimension.percentile} | {dimension.label} |"
        )
    lines.append("")

    if result.gap_to_leader is not None:
        lines.append(
            f"**Gap to leader:** {format_count(result.gap_to_leader.followers)} "
            f"followers ({result.gap_to_leader.percentage}%)\n"
        )
    else:
        lines.append("**MARKET LEADER**\n")

    lines.append("## Recommendations\n")
    for rec in result.recommendations:
        lines.append(f"- [{rec.priority.upper()}] {rec.category}: {rec.action}")
        lines.append(f"  Impact: {rec.impact}")
        if rec.disclaimer:
            lines.append(f"  Note: {rec.disclaimer}")
    lines.append("")

    return "\n".join(lines)


def result_payload(
    result: LandscapeResult | BenchmarkResult,
    mode: ResultMode,
    analyzed_at: datetime | None = None,
) -> dict[str, Any]:
    """Return a JSON-ready dict with camelCase keys, a ``type`` and a timestamp."""
    timestamp = analyzed_at or datetime.now(UTC)
    return {
        "type": mode,
        **result.model_dump(mode="json", by_alias=True),
        "analyzedAt": timestamp.isoformat(),
    }


__all__ = ["format_benchmark_report", "format_landscape_report", "result_payload"]
