"""Load creator profiles exported by the profile provider."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..analyzer.normalization import normalize_username
from ..types import CreatorProfile

logger = logging.getLogger(__name__)


class ProfileLoadError(RuntimeError):
    """Raised when profile records cannot be loaded or selected."""


def _extract_records(raw: Any) -> list[Any]:
    if isinstance(raw, dict):
        raw = raw.get("profiles")
    if not isinstance(raw, list):
        raise ProfileLoadError(
            "Profile file must hold a list of profiles or an object with a 'profiles' list"
        )
    return raw


def parse_profiles(raw: Any) -> list[CreatorProfile]:
    """Validate decoded JSON into ``CreatorProfile`` records."""
    profiles: list[CreatorProfile] = []
    for index, record in enumerate(_extract_records(raw)):
        try:
            profiles.append(CreatorProfile.model_validate(record))
        except ValidationError as exc:
            raise ProfileLoadError(f"Invalid profile at index {index}: {exc}") from exc
    return profiles


def load_profiles(path: Path) -> list[CreatorProfile]:
    """Read and validate a JSON profile export."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ProfileLoadError(f"Profile file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ProfileLoadError(f"Profile file is not valid JSON: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ProfileLoadError(f"Cannot read profile file {path}: {exc}") from exc

    profiles = parse_profiles(raw)
    logger.info("Loaded %d profiles from %s", len(profiles), path)
    return profiles


def filter_profiles(
    profiles: Sequence[CreatorProfile], usernames: Sequence[str]
) -> list[CreatorProfile]:
    """Keep profiles whose username is requested, in file order."""
    wanted = {normalize_username(name.lstrip("@")) for name in usernames}
    selected = [p for p in profiles if normalize_username(p.username) in wanted]

    found = {normalize_username(p.username) for p in selected}
    for name in sorted(wanted - found):
        logger.warning("No profile found for @%s", name)
    return selected


def select_benchmark_profiles(
    profiles: Sequence[CreatorProfile],
    target_username: str,
    competitor_usernames: Sequence[str] | None = None,
) -> tuple[CreatorProfile, list[CreatorProfile]]:
    """Split loaded profiles into the benchmark target and its competitors.

    Without ``competitor_usernames`` every non-target profile competes.
    """
    target_key = normalize_username(target_username.lstrip("@"))
    target = next(
        (p for p in profiles if normalize_username(p.username) == target_key), None
    )
    if target is None:
        raise ProfileLoadError(f"Could not find target profile: @{target_username}")

    pool = (
        filter_profiles(profiles, competitor_usernames)
        if competitor_usernames
        else profiles
    )
    competitors = [p for p in pool if normalize_username(p.username) != target_key]
    if not competitors:
        raise ProfileLoadError("No competitor profiles found")

    return target, competitors


__all__ = [
    "ProfileLoadError",
    "filter_profiles",
    "load_profiles",
    "parse_profiles",
    "select_benchmark_profiles",
]
