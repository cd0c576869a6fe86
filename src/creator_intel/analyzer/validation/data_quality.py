"""Data-quality checks for incoming creator profiles.

Nothing here rejects a profile. Negative counts are analyzed as-is and
missing or null inputs (and non-positive ages) use the defaults declared
on ``CreatorProfile``; the messages only tell the caller which numbers to
take with a pinch of salt.
"""

import logging
from collections.abc import Sequence

from creator_intel.analyzer.constants import DEFAULT_ACCOUNT_AGE_DAYS
from creator_intel.analyzer.normalization import normalize_username
from creator_intel.types import CreatorProfile

logger = logging.getLogger(__name__)

_COUNT_FIELDS = ("followers", "likes", "videos")


def check_profile(profile: CreatorProfile) -> list[str]:
    """Return data-quality warnings for a single profile."""
    warnings: list[str] = []
    handle = f"@{profile.username}"

    for field_name in _COUNT_FIELDS:
        value = getattr(profile, field_name)
        if value < 0:
            warnings.append(f"{handle}: negative {field_name} ({value}) used as-is")

    if profile.engagement_rate < 0:
        warnings.append(
            f"{handle}: negative engagement rate ({profile.engagement_rate}) used as-is"
        )

    fields_set = profile.model_fields_set
    defaulted = profile.defaulted_fields

    for field_name in _COUNT_FIELDS:
        if field_name in defaulted:
            warnings.append(f"{handle}: {field_name} missing, defaulting to 0")

    if "engagement_rate" not in fields_set or "engagement_rate" in defaulted:
        warnings.append(f"{handle}: engagement rate missing, defaulting to 0")

    raw_age = defaulted.get("account_age_days", 0)
    if "account_age_days" not in fields_set or raw_age is None:
        warnings.append(
            f"{handle}: account age missing, defaulting to {DEFAULT_ACCOUNT_AGE_DAYS} days"
        )
    elif "account_age_days" in defaulted:
        warnings.append(
            f"{handle}: account age {raw_age} invalid, "
            f"defaulting to {DEFAULT_ACCOUNT_AGE_DAYS} days"
        )

    return warnings


def check_data_quality(profiles: Sequence[CreatorProfile]) -> list[str]:
    """Collect and log data-quality warnings across a profile set."""
    warnings: list[str] = []
    seen: dict[str, str] = {}

    for profile in profiles:
        warnings.extend(check_profile(profile))

        key = normalize_username(profile.username)
        if key in seen:
            warnings.append(
                f"@{profile.username}: duplicate of @{seen[key]}, both are analyzed"
            )
        else:
            seen[key] = profile.username

    for message in warnings:
        logger.warning("Data quality: %s", message)

    return warnings


__all__ = ["check_data_quality", "check_profile"]
