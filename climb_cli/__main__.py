"""Entry point for climb-log."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from climb_cli import __version__
from climb_cli.commands import config as config_commands
from climb_cli.commands import report as report_commands
from climb_cli.commands.session import session_command
from climb_cli.core.config import ConfigError, default_config_path, load_config, validate_config
from climb_cli.core.state import CLIState
from climb_cli.utils.log import setup_logging

app = typer.Typer(
    add_completion=False,
    help="Personal climbing activity log",
    invoke_without_command=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no colors)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Quiet output (session keeps its prompts and menu)",
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    setup_logging(verbose=verbose, quiet=quiet)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = validate_config(load_config(cfg_path))
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    console = Console(
        quiet=quiet,
        no_color=plain_output,
        log_time=False,
        log_path=False,
    )
    ctx.obj = CLIState(
        json_output=(json_output and not plain_output),
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=console,
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


app.command("session")(session_command)
app.add_typer(report_commands.app, name="report")
app.add_typer(config_commands.app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
