"""Plain-text summary report: `Key: value` lines."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from climb_cli.core.constants import REPORT_FIELDS
from climb_cli.utils.formatting import format_summary_value

logger = logging.getLogger(__name__)


class ReportError(RuntimeError):
    """Raised when a report file cannot be read."""


def summary_to_text(summary: Dict[str, Any]) -> str:
    """Render a tracker summary as newline-terminated `Key: value` lines."""
    lines = [
        f"{label}: {format_summary_value(key, summary.get(key, ''))}"
        for key, label in REPORT_FIELDS
    ]
    return "\n".join(lines) + "\n"


def write_report(path: Path, summary: Dict[str, Any]) -> Path:
    """Write summary report and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(summary_to_text(summary))
    logger.info("Report saved to %s", path)
    return path


def read_report(path: Path) -> str:
    """Return the raw text of a saved report."""
    try:
        return path.read_text()
    except OSError as exc:
        raise ReportError(f"Cannot read report {path}: {exc.strerror or exc}") from exc


def parse_report(text: str) -> Dict[str, str]:
    """Parse `Key: value` lines; lines without a separator are skipped."""
    parsed: Dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition(": ")
        if not sep or not key.strip():
            continue
        parsed[key.strip()] = value.strip()
    return parsed
