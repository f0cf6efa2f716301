"""Climber-level aggregation over an activity collection."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, TextIO, Tuple

from climb_cli.core import stats
from climb_cli.core.activities import Activity, climb_hours
from climb_cli.core.manager import ActivityManager

logger = logging.getLogger(__name__)


class ClimbingTracker:
    """Holds a climber's activities and the counters the report is built from.

    Only climb sessions add to ``total_hours`` (truncated to whole hours);
    training sessions are listed but never counted. Removing an activity
    leaves the running total untouched.
    """

    def __init__(
        self,
        climber_name: str = "",
        climbing_days: int = 0,
        thresholds: Optional[Dict[str, float]] = None,
        initial_capacity: int = 5,
    ) -> None:
        self.climber_name = climber_name
        self.climbing_days = climbing_days
        self.total_hours = 0
        self.thresholds = stats.resolve_thresholds({"thresholds": thresholds or {}})
        self._manager = ActivityManager(initial_capacity)

    @property
    def activities(self) -> Tuple[Activity, ...]:
        """Snapshot of the held activities; add and remove through the tracker."""
        return tuple(self._manager)

    def add_session(self, activity: Activity) -> None:
        hours = climb_hours(activity)
        self._manager.add(activity)
        if hours:
            self.total_hours += int(hours)
            logger.debug("Total hours now %d", self.total_hours)

    def remove_activity(self, index: int) -> None:
        self._manager.remove_at(index)

    def activity_count(self) -> int:
        return self._manager.size()

    def clear(self) -> None:
        self._manager.clear()

    def display_activities(self, sink: TextIO) -> None:
        if self._manager.size() == 0:
            sink.write("No activities recorded.\n")
            return
        self._manager.display_all(sink)

    def average_hours(self) -> float:
        return stats.average_hours(self.total_hours, self.climbing_days)

    def experience_level(self) -> str:
        return stats.experience_level(self.total_hours, self.thresholds)

    def climber_type(self) -> str:
        return stats.climber_type(self.climbing_days, self.thresholds)

    def performance_rating(self) -> str:
        return stats.performance_rating(self.average_hours(), self.thresholds)

    def summary(self) -> Dict[str, Any]:
        """Report payload; recomputed on every call."""
        return {
            "name": self.climber_name,
            "total_hours": self.total_hours,
            "climbing_days": self.climbing_days,
            "average_hours": self.average_hours(),
            "experience_level": self.experience_level(),
            "climber_type": self.climber_type(),
            "performance_rating": self.performance_rating(),
        }
