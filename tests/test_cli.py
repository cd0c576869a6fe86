"""CLI level tests against temporary profile files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from creator_intel import cli


@pytest.fixture
def profiles_path(tmp_path: Path, scenario_profiles: list[dict[str, Any]]) -> Path:
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps({"profiles": scenario_profiles}), encoding="utf-8")
    return path


def test_landscape_prints_report(
    profiles_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = cli.main(["landscape", "--profiles", str(profiles_path)])

    assert status == 0
    out = capsys.readouterr().out
    assert "# Competitive Landscape" in out
    assert "@a" in out


def test_landscape_json_output(
    profiles_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = cli.main(["landscape", "--profiles", str(profiles_path), "--json"])

    assert status == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["type"] == "landscape"
    assert payload["summary"]["totalCreators"] == 2


def test_landscape_writes_output_file(profiles_path: Path, tmp_path: Path) -> None:
    destination = tmp_path / "out" / "landscape.json"

    status = cli.main(
        [
            "landscape",
            "--profiles",
            str(profiles_path),
            "--output",
            str(destination),
        ]
    )

    assert status == 0
    data = json.loads(destination.read_text(encoding="utf-8"))
    assert data["highlights"]["marketLeader"]["username"] == "a"
    assert "analyzedAt" in data


def test_landscape_needs_two_creators(
    profiles_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = cli.main(
        ["landscape", "--profiles", str(profiles_path), "--usernames", "a"]
    )

    assert status == 1
    assert "at least 2 creators" in capsys.readouterr().err


def test_benchmark_prints_report(
    profiles_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = cli.main(
        ["benchmark", "--profiles", str(profiles_path), "--target", "B"]
    )

    assert status == 0
    out = capsys.readouterr().out
    assert "# Benchmark: @b" in out
    assert "Gap to leader" in out


def test_benchmark_unknown_target(
    profiles_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = cli.main(
        ["benchmark", "--profiles", str(profiles_path), "--target", "nobody"]
    )

    assert status == 1
    assert "Could not find target profile" in capsys.readouterr().err


def test_profiles_path_from_environment(
    profiles_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv(cli.PROFILES_ENV_VAR, str(profiles_path))

    status = cli.main(["landscape", "--json"])

    assert status == 0
    assert json.loads(capsys.readouterr().out)["type"] == "landscape"


def test_missing_profiles_path(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv(cli.PROFILES_ENV_VAR, raising=False)

    status = cli.main(["landscape"])

    assert status == 1
    assert cli.PROFILES_ENV_VAR in capsys.readouterr().err


def test_unreadable_profiles_path_exits_cleanly(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = cli.main(["landscape", "--profiles", str(tmp_path)])

    assert status == 1
    assert "Cannot read profile file" in capsys.readouterr().err
