"""Interactive climbing session menu."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.prompt import Prompt

from climb_cli.commands.common import get_state, print_json_payload, print_rendered
from climb_cli.core.activities import ClimbSession, Location, TrainingSession, activity_to_dict
from climb_cli.core.constants import BANNER_RULE, MENU_OPTIONS, REPORT_RULE
from climb_cli.core.sequence import OutOfRangeError
from climb_cli.core.state import CLIState
from climb_cli.core.tracker import ClimbingTracker
from climb_cli.exporters.report import ReportError, read_report, write_report
from climb_cli.utils.formatting import format_summary_lines
from climb_cli.utils.prompts import (
    prompt_difficulty,
    prompt_float,
    prompt_int,
    prompt_text,
    prompt_yes_no,
)

logger = logging.getLogger(__name__)

EXIT_CHOICE = "6"


def _banner(state: CLIState) -> None:
    state.console.print(f"[cyan]{BANNER_RULE}[/cyan]")
    state.console.print("[cyan]        CLIMBING ACTIVITY TRACKER         [/cyan]")
    state.console.print(f"[cyan]{BANNER_RULE}[/cyan]")


def _menu(state: CLIState) -> None:
    state.console.print("\n[yellow]====== MENU ======[/yellow]")
    for key, label in MENU_OPTIONS:
        state.console.print(f"[green]{key}. {label}[/green]")


def add_climb(state: CLIState, tracker: ClimbingTracker) -> None:
    console = state.console
    limits = state.limits
    name = prompt_text(console, "Enter climbing style")
    indoor = prompt_yes_no(console, "Is this climb indoor or outdoor? (Y=Indoor, N=Outdoor)")
    difficulty = prompt_difficulty(console)
    hours = prompt_float(
        console,
        "Hours climbed this session",
        float(limits["min_session_hours"]),
        float(limits["max_session_hours"]),
    )
    tracker.add_session(
        ClimbSession(
            name=name,
            duration=int(round(hours * 60)),
            difficulty=difficulty,
            hours=hours,
            location=Location(name, indoor),
        )
    )
    console.print("[green]Climb session added.[/green]")


def add_training(state: CLIState, tracker: ClimbingTracker) -> None:
    console = state.console
    name = prompt_text(console, "Enter training name")
    difficulty = prompt_difficulty(console)
    reps = prompt_int(console, "Enter reps", 1, int(state.limits["max_reps"]))
    tracker.add_session(TrainingSession(name=name, duration=0, difficulty=difficulty, reps=reps))
    console.print("[green]Training session added.[/green]")


def show_summary(state: CLIState, tracker: ClimbingTracker) -> None:
    console = state.console
    console.print(f"\n[cyan]{REPORT_RULE}[/cyan]")
    console.print("[cyan]       CLIMBING SUMMARY[/cyan]")
    console.print(f"[cyan]{REPORT_RULE}[/cyan]")
    for line in format_summary_lines(tracker.summary()):
        console.print(line, markup=False, highlight=False, soft_wrap=True)
    console.print(REPORT_RULE)


def save_summary(state: CLIState, tracker: ClimbingTracker, report_file: Optional[Path]) -> None:
    default_path = state.report_path(report_file)
    filename = prompt_text(state.console, "Enter filename to save report", default=str(default_path))
    try:
        path = write_report(Path(filename).expanduser(), tracker.summary())
    except OSError as exc:
        logger.debug("Report write failed", exc_info=True)
        state.console.print(f"[red]Error saving report: {escape(str(exc))}[/red]")
        return
    state.console.print(f"Report saved to {path}", markup=False, highlight=False, soft_wrap=True)


def load_summary(state: CLIState, report_file: Optional[Path]) -> None:
    default_path = state.report_path(report_file)
    filename = prompt_text(state.console, "Enter filename to load report", default=str(default_path))
    try:
        text = read_report(Path(filename).expanduser())
    except ReportError as exc:
        state.console.print(f"[red]{escape(str(exc))}[/red]")
        return
    state.console.print("\n----- LOADED REPORT -----")
    state.console.print(text, markup=False, highlight=False, soft_wrap=True)


def delete_activity(state: CLIState, tracker: ClimbingTracker) -> None:
    count = tracker.activity_count()
    if count == 0:
        state.console.print("No activities to delete.")
        return
    for position, activity in enumerate(tracker.activities):
        buffer = io.StringIO()
        activity.to_compact_text(buffer)
        state.console.print(f"{position}: {buffer.getvalue()}", end="", markup=False, highlight=False)
    index = prompt_int(state.console, "Enter index to delete", 0, count - 1)
    try:
        tracker.remove_activity(index)
    except OutOfRangeError as exc:
        state.console.print(f"[red]{escape(str(exc))}[/red]")
        return
    state.console.print("Deleted.")


def run_menu(state: CLIState, tracker: ClimbingTracker, report_file: Optional[Path] = None) -> None:
    """Loop over the menu until the user picks Exit."""
    while True:
        _menu(state)
        choice = Prompt.ask("Choice", console=state.console).strip()

        if choice == "1":
            add_climb(state, tracker)
        elif choice == "2":
            add_training(state, tracker)
        elif choice == "3":
            if state.json_output:
                print_json_payload(state, [activity_to_dict(item) for item in tracker.activities])
            else:
                print_rendered(state, tracker.display_activities)
        elif choice == "4":
            show_summary(state, tracker)
            save_summary(state, tracker, report_file)
        elif choice == "5":
            load_summary(state, report_file)
        elif choice == EXIT_CHOICE:
            state.console.print("Goodbye!")
            return
        elif choice == "7":
            delete_activity(state, tracker)
        else:
            state.console.print("[red]Invalid choice.[/red]")


def session_command(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, help="Climber name (skips the prompt)"),
    days: Optional[int] = typer.Option(None, min=0, help="Climbing days per year (skips the prompt)"),
    report_file: Optional[Path] = typer.Option(None, help="Default report file for save/load"),
) -> None:
    """Start an interactive logging session."""
    state = get_state(ctx)
    # Prompts and menu stay visible; --quiet only lowers the log level here.
    state.console.quiet = False
    climber_cfg = state.config.get("climber", {})
    _banner(state)

    climber_name = name if name is not None else climber_cfg.get("name") or ""
    if not climber_name:
        climber_name = prompt_text(state.console, "Enter your full name")

    climbing_days = days if days is not None else climber_cfg.get("climbing_days")
    if climbing_days is None:
        climbing_days = prompt_int(
            state.console,
            "About how many days do you climb per year?",
            0,
            int(state.limits["max_climbing_days"]),
        )

    tracker = state.new_tracker(climber_name, int(climbing_days))
    logger.debug("Session started for '%s' (%d days/year)", climber_name, tracker.climbing_days)
    run_menu(state, tracker, report_file=report_file)
