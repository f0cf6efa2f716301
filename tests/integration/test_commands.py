from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List

from climb_cli.__main__ import app
from climb_cli.core.config import load_config
from climb_cli.exporters.report import write_report


def _answers(*lines: str) -> str:
    return "\n".join(lines) + "\n"


def _summary() -> Dict[str, Any]:
    return {
        "name": "Alex",
        "total_hours": 3,
        "climbing_days": 20,
        "average_hours": 0.5,
        "experience_level": "Beginner",
        "climber_type": "Regular Climber",
        "performance_rating": "Casual",
    }


def test_session_full_menu_flow(runner, tmp_path: Path) -> None:
    report = tmp_path / "reports" / "alex.txt"
    answers: List[str] = [
        "1", "Bouldering", "y", "2", "1.5",
        "2", "Hangboard", "3", "6",
        "3",
        "4", "",
        "5", "",
        "7", "0",
        "9",
        "6",
    ]
    result = runner.invoke(
        app,
        ["--plain", "session", "--name", "Alex", "--days", "20", "--report-file", str(report)],
        input=_answers(*answers),
    )
    assert result.exit_code == 0, result.output
    out = result.stdout
    assert "CLIMBING ACTIVITY TRACKER" in out
    assert "Climb session added." in out
    assert "Training session added." in out
    assert "Hours Climbed: 1.5" in out
    assert "Location: Bouldering (Indoor)" in out
    assert "Reps: 6" in out
    assert "CLIMBING SUMMARY" in out
    assert "----- LOADED REPORT -----" in out
    assert "[Climb] Bouldering | 1.5 hrs | Bouldering (Indoor)" in out
    assert "Deleted." in out
    assert "Invalid choice." in out
    assert out.rstrip().endswith("Goodbye!")

    saved = report.read_text()
    assert "Name: Alex\n" in saved
    assert "Total Hours: 1\n" in saved
    assert "Climbing Days: 20\n" in saved
    assert "Climber Type: Regular Climber\n" in saved


def test_session_prompts_for_climber_details(runner) -> None:
    result = runner.invoke(app, ["session"], input=_answers("Sam", "400", "15", "6"))
    assert result.exit_code == 0, result.output
    assert "Enter your full name" in result.stdout
    assert "Invalid input. Please enter a number between 0 and 366." in result.stdout
    assert "Goodbye!" in result.stdout


def test_session_uses_configured_climber(runner) -> None:
    config_path = Path(os.environ["CLIMB_CONFIG_FILE"])
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text('[climber]\nname = "Sam"\nclimbing_days = 90\n')

    result = runner.invoke(app, ["session"], input=_answers("6"))
    assert result.exit_code == 0, result.output
    assert "Enter your full name" not in result.stdout
    assert "climb per year" not in result.stdout


def test_session_delete_without_activities(runner) -> None:
    result = runner.invoke(
        app,
        ["session", "--name", "Sam", "--days", "5"],
        input=_answers("7", "3", "6"),
    )
    assert result.exit_code == 0, result.output
    assert result.stdout.count("No activities to delete.") == 1
    assert "No activities recorded." in result.stdout


def test_session_rejects_bad_difficulty_and_reps(runner) -> None:
    result = runner.invoke(
        app,
        ["session", "--name", "Sam", "--days", "5"],
        input=_answers("2", "Campus", "7", "1", "0", "101", "10", "3", "6"),
    )
    assert result.exit_code == 0, result.output
    assert "Invalid input. Please enter a number between 1 and 4." in result.stdout
    assert "Invalid input. Please enter a number between 1 and 100." in result.stdout
    assert "Difficulty: Easy" in result.stdout
    assert "Reps: 10" in result.stdout


def test_session_json_lists_activities(runner) -> None:
    result = runner.invoke(
        app,
        ["--json", "session", "--name", "Sam", "--days", "5"],
        input=_answers("2", "Campus", "4", "8", "3", "6"),
    )
    assert result.exit_code == 0, result.output
    assert '"type": "Training Session"' in result.stdout
    assert '"reps": 8' in result.stdout


def test_session_load_missing_report(runner, tmp_path: Path) -> None:
    missing = tmp_path / "nope.txt"
    result = runner.invoke(
        app,
        ["session", "--name", "Sam", "--days", "5", "--report-file", str(missing)],
        input=_answers("5", "", "6"),
    )
    assert result.exit_code == 0, result.output
    assert "Cannot read report" in result.stdout


def test_report_show_plain(runner, tmp_path: Path) -> None:
    path = write_report(tmp_path / "report.txt", _summary())
    result = runner.invoke(app, ["--plain", "report", "show", str(path)])
    assert result.exit_code == 0
    assert result.stdout.startswith("Name: Alex\n")
    assert "Avg Hours / Session: 0.5" in result.stdout


def test_report_show_rich(runner, tmp_path: Path) -> None:
    path = write_report(tmp_path / "report.txt", _summary())
    result = runner.invoke(app, ["report", "show", str(path)])
    assert result.exit_code == 0
    assert "----- LOADED REPORT -----" in result.stdout
    assert "Climber Type: Regular Climber" in result.stdout


def test_report_show_json(runner, tmp_path: Path) -> None:
    path = write_report(tmp_path / "report.txt", _summary())
    result = runner.invoke(app, ["--json", "report", "show", str(path)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["Name"] == "Alex"
    assert payload["Total Hours"] == "3"


def test_report_show_missing_file(runner, tmp_path: Path) -> None:
    result = runner.invoke(app, ["report", "show", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "Load failed" in result.stdout


def test_config_init_writes_defaults_once(runner, tmp_path: Path) -> None:
    path = tmp_path / "cfg" / "config.toml"
    first = runner.invoke(app, ["--config", str(path), "config", "init"])
    assert first.exit_code == 0
    assert path.exists()
    assert load_config(path)["thresholds"]["advanced_hours"] == 160

    second = runner.invoke(app, ["--config", str(path), "config", "init"])
    assert second.exit_code == 1
    assert "already exists" in second.stdout

    forced = runner.invoke(app, ["--config", str(path), "config", "init", "--force"])
    assert forced.exit_code == 0


def test_config_show_json(runner, write_temp_toml) -> None:
    path = write_temp_toml("config.toml", "[collection]\ninitial_capacity = 9")
    result = runner.invoke(app, ["--json", "--config", str(path), "config", "show"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["config"]["collection"]["initial_capacity"] == 9
    assert payload["config"]["thresholds"]["new_climber_days"] == 10


def test_invalid_config_exits_with_code_2(runner, tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{broken")
    result = runner.invoke(app, ["--config", str(path), "config", "show"])
    assert result.exit_code == 2
    assert "Config error" in result.stdout


def test_bad_capacity_in_config_exits_with_code_2(runner, write_temp_toml) -> None:
    path = write_temp_toml("bad.toml", "[collection]\ninitial_capacity = 0")
    result = runner.invoke(app, ["--config", str(path), "session", "--name", "A", "--days", "3"])
    assert result.exit_code == 2
    assert "Config error" in result.stdout
    assert "initial_capacity" in result.stdout


def test_non_numeric_threshold_in_config_exits_with_code_2(runner, write_temp_toml) -> None:
    path = write_temp_toml("bad.toml", '[thresholds]\nadvanced_hours = "lots"')
    result = runner.invoke(
        app,
        ["--config", str(path), "session", "--name", "A", "--days", "3"],
        input=_answers("4", "", "6"),
    )
    assert result.exit_code == 2
    assert "thresholds.advanced_hours must be a number" in result.stdout


def test_non_integer_climbing_days_in_config_exits_with_code_2(runner, write_temp_toml) -> None:
    path = write_temp_toml("bad.toml", '[climber]\nname = "Sam"\nclimbing_days = "ninety"')
    result = runner.invoke(app, ["--config", str(path), "session"], input=_answers("6"))
    assert result.exit_code == 2
    assert "climber.climbing_days must be an integer" in result.stdout


def test_quiet_session_still_shows_menu(runner) -> None:
    result = runner.invoke(
        app,
        ["--quiet", "session", "--name", "Sam", "--days", "5"],
        input=_answers("3", "6"),
    )
    assert result.exit_code == 0, result.output
    assert "MENU" in result.stdout
    assert "No activities recorded." in result.stdout
    assert "Goodbye!" in result.stdout
