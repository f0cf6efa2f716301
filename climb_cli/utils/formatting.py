"""Formatting helpers used by activity rendering and console output."""

from __future__ import annotations

from typing import Any, Dict, List

from climb_cli.core.constants import DIFFICULTY_LABELS, REPORT_FIELDS


def difficulty_label(level: int) -> str:
    """Map a difficulty level (1-4) to its label."""
    return DIFFICULTY_LABELS.get(int(level), "Unknown")


def format_location(place: str, indoor: bool) -> str:
    """Render a place with its indoor/outdoor suffix."""
    return place + (" (Indoor)" if indoor else " (Outdoor)")


def format_hours(hours: float) -> str:
    """Render hours without trailing zeros: 2.5 -> '2.5', 1.0 -> '1'."""
    return f"{float(hours):g}"


def format_average(value: float) -> str:
    return f"{float(value):.1f}"


def format_summary_value(key: str, value: Any) -> str:
    if key == "average_hours":
        return format_average(value)
    return str(value)


def format_summary_lines(summary: Dict[str, Any], width: int = 25) -> List[str]:
    """Left-aligned label/value rows for the console summary."""
    lines: List[str] = []
    for key, label in REPORT_FIELDS:
        lines.append(f"{label + ':':<{width}}{format_summary_value(key, summary.get(key, ''))}")
    return lines
