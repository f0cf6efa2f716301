from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from climb_cli.core.activities import ClimbSession, Difficulty, Location, TrainingSession


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CLIMB_CONFIG_FILE", str(tmp_path / "config" / "config.toml"))
    monkeypatch.setenv("CLIMB_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("CLIMB_REPORT_FILE", raising=False)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def gym_climb() -> ClimbSession:
    return ClimbSession("Route", 0, Difficulty.EASY, 1.0, Location("Gym", True))


@pytest.fixture()
def crag_climb() -> ClimbSession:
    return ClimbSession("Lead Route", 150, Difficulty.HARD, 2.5, Location("Crag", False))


@pytest.fixture()
def hangboard() -> TrainingSession:
    return TrainingSession("Hangboard", 1, Difficulty.MODERATE, 5)


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write
