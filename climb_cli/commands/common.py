"""Shared command helpers."""

from __future__ import annotations

import io
import json
from typing import Any, Callable, TextIO

import typer

from climb_cli.core.state import CLIState


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def print_rendered(state: CLIState, render: Callable[[TextIO], None]) -> None:
    """Run a sink-based renderer and print its text verbatim."""
    buffer = io.StringIO()
    render(buffer)
    state.console.print(buffer.getvalue(), end="", markup=False, highlight=False, soft_wrap=True)
