"""Saved report commands."""

from __future__ import annotations

from pathlib import Path

import typer

from climb_cli.commands.common import get_state, print_json_payload
from climb_cli.exporters.report import ReportError, parse_report, read_report

app = typer.Typer(help="Work with saved summary reports")


@app.command("show")
def show_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Report file to load"),
) -> None:
    """Print a previously saved report."""
    state = get_state(ctx)
    try:
        text = read_report(path.expanduser())
    except ReportError as exc:
        if state.json_output:
            print_json_payload(state, {"status": "error", "message": str(exc)})
        else:
            typer.echo(f"Load failed: {exc}")
        raise typer.Exit(code=1)

    if state.json_output:
        print_json_payload(state, parse_report(text))
        return

    if state.plain_output:
        typer.echo(text, nl=False)
        return

    state.console.print("----- LOADED REPORT -----")
    state.console.print(text, end="", markup=False, highlight=False, soft_wrap=True)
