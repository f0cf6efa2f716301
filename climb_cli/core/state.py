"""Runtime state container for CLI context."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console

from climb_cli.core.config import resolve_initial_capacity, resolve_limits, resolve_report_path
from climb_cli.core.stats import resolve_thresholds
from climb_cli.core.tracker import ClimbingTracker


@dataclass
class CLIState:
    """CLI options, loaded configuration and the output console."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console

    @property
    def limits(self) -> Dict[str, Any]:
        return resolve_limits(self.config)

    def report_path(self, explicit: Optional[Path] = None) -> Path:
        return resolve_report_path(self.config, explicit=explicit)

    def new_tracker(self, climber_name: str = "", climbing_days: int = 0) -> ClimbingTracker:
        """Build an empty tracker using the configured thresholds and capacity."""
        return ClimbingTracker(
            climber_name=climber_name,
            climbing_days=climbing_days,
            thresholds=resolve_thresholds(self.config),
            initial_capacity=resolve_initial_capacity(self.config),
        )
