"""Validated console prompts for the interactive session."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt

from climb_cli.core.activities import Difficulty
from climb_cli.utils.formatting import difficulty_label


def prompt_text(console: Console, prompt: str, default: str = "") -> str:
    return Prompt.ask(prompt, console=console, default=default, show_default=bool(default)).strip()


def prompt_int(console: Console, prompt: str, minimum: int, maximum: int) -> int:
    """Ask until the answer is an integer within [minimum, maximum]."""
    while True:
        value = IntPrompt.ask(prompt, console=console)
        if minimum <= value <= maximum:
            return value
        console.print(
            f"[red]Invalid input. Please enter a number between {minimum} and {maximum}.[/red]"
        )


def prompt_float(console: Console, prompt: str, minimum: float, maximum: float) -> float:
    """Ask until the answer is a number within [minimum, maximum]."""
    while True:
        value = FloatPrompt.ask(prompt, console=console)
        if minimum <= value <= maximum:
            return value
        console.print(
            f"[red]Invalid input. Please enter a value between {minimum} and {maximum}.[/red]"
        )


def prompt_yes_no(console: Console, prompt: str) -> bool:
    return Confirm.ask(prompt, console=console)


def prompt_difficulty(console: Console) -> Difficulty:
    console.print("Select Difficulty:")
    for level in Difficulty:
        console.print(f"{level.value}. {difficulty_label(level.value)}")
    return Difficulty(prompt_int(console, "Choice", 1, len(Difficulty)))
