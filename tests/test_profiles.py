"""Tests for loading and selecting provider profiles."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from creator_intel.services.profiles import (
    ProfileLoadError,
    filter_profiles,
    load_profiles,
    parse_profiles,
    select_benchmark_profiles,
)
from creator_intel.types import CreatorProfile

from .conftest import make_profile


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_profiles_from_list(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        [
            {
                "username": "a",
                "followers": 10,
                "engagementRate": 2.5,
                "accountAgeDays": 90,
                "bioLink": "https://a.example",
                "ttSeller": True,
                "scrapedAt": "2024-01-01",
            }
        ],
    )
    (profile,) = load_profiles(path)

    assert profile.username == "a"
    assert profile.engagement_rate == 2.5
    assert profile.account_age_days == 90
    assert profile.bio_link == "https://a.example"
    assert profile.seller is True


def test_load_profiles_from_object(tmp_path: Path) -> None:
    path = _write(tmp_path, {"profiles": [{"username": "a"}, {"username": "b"}]})
    assert [p.username for p in load_profiles(path)] == ["a", "b"]


def test_null_fields_use_defaults() -> None:
    (profile,) = parse_profiles(
        [
            {
                "username": "a",
                "followers": None,
                "engagementRate": None,
                "accountAgeDays": None,
                "verified": None,
            }
        ]
    )

    assert profile.followers == 0
    assert profile.engagement_rate == 0.0
    assert profile.account_age_days == 365
    assert profile.verified is False


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ProfileLoadError, match="not found"):
        load_profiles(tmp_path / "missing.json")


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ProfileLoadError, match="not valid JSON"):
        load_profiles(path)


def test_directory_is_not_readable(tmp_path: Path) -> None:
    with pytest.raises(ProfileLoadError, match="Cannot read profile file"):
        load_profiles(tmp_path)


def test_non_utf8_file_is_not_readable(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b"\xff\xfe[]")

    with pytest.raises(ProfileLoadError, match="Cannot read profile file"):
        load_profiles(path)


def test_wrong_shape() -> None:
    with pytest.raises(ProfileLoadError):
        parse_profiles({"creators": []})


def test_invalid_record_names_index() -> None:
    with pytest.raises(ProfileLoadError, match="index 1"):
        parse_profiles([{"username": "ok"}, {"followers": 5}])


def test_filter_profiles_case_insensitive() -> None:
    profiles = [make_profile("Alpha"), make_profile("beta"), make_profile("gamma")]

    selected = filter_profiles(profiles, ["@alpha", "GAMMA", "delta"])

    assert [p.username for p in selected] == ["Alpha", "gamma"]


class TestSelectBenchmarkProfiles:
    """Tests for splitting target and competitors."""

    @pytest.fixture
    def profiles(self) -> list[CreatorProfile]:
        return [make_profile("Alpha"), make_profile("beta"), make_profile("gamma")]

    def test_all_others_compete_by_default(
        self, profiles: list[CreatorProfile]
    ) -> None:
        """Without a competitor list every other profile competes."""
        target, competitors = select_benchmark_profiles(profiles, "alpha")
        assert target.username == "Alpha"
        assert [p.username for p in competitors] == ["beta", "gamma"]

    def test_competitor_filter(self, profiles: list[CreatorProfile]) -> None:
        """Explicit competitors narrow the pool and never include the target."""
        _, competitors = select_benchmark_profiles(profiles, "Alpha", ["gamma", "alpha"])
        assert [p.username for p in competitors] == ["gamma"]

    def test_missing_target(self, profiles: list[CreatorProfile]) -> None:
        """An unknown target is a load error."""
        with pytest.raises(ProfileLoadError, match="target profile"):
            select_benchmark_profiles(profiles, "zeta")

    def test_no_competitors(self, profiles: list[CreatorProfile]) -> None:
        """A filter that leaves nobody is a load error."""
        with pytest.raises(ProfileLoadError, match="No competitor"):
            select_benchmark_profiles(profiles, "alpha", ["omega"])
