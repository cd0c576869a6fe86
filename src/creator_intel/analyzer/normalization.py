"""Numeric and username normalization utilities."""

import math
from collections.abc import Iterable


def normalize_username(username: str) -> str:
    """Normalize a username for case-insensitive matching."""
    return username.lower()


def same_username(left: str, right: str) -> bool:
    return normalize_username(left) == normalize_username(right)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half-up (2.5 -> 3), unlike the built-in banker's ``round``."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(math.floor(value + 0.5))


def safe_ratio(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator`` or 0.0 for a non-positive denominator."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator


def format_count(value: float) -> str:
    """Thousands-separated count, e.g. 1,250,000."""
    return f"{value:,}"


def format_percent(value: float) -> str:
    """Percentage without trailing zeros, e.g. 5 or 4.25."""
    return f"{value:g}"


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean that returns 0.0 for an empty sequence."""
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


__all__ = [
    "format_count",
    "format_percent",
    "mean",
    "normalize_username",
    "round_half_up",
    "round_int",
    "safe_ratio",
    "same_username",
]
