"""Static constants and mappings for climb-log."""

from __future__ import annotations

DIFFICULTY_LABELS = {1: "Easy", 2: "Moderate", 3: "Hard", 4: "Extreme"}

CLIMB_TYPE_NAME = "Climb Session"
TRAINING_TYPE_NAME = "Training Session"

ACTIVITY_DIVIDER = "-----------------------------"
REPORT_RULE = "================================="
BANNER_RULE = "========================================="

DEFAULT_THRESHOLDS = {
    "advanced_hours": 160,
    "intermediate_hours": 21,
    "frequent_climber_days": 80,
    "new_climber_days": 10,
    "dedicated_session_hours": 2.0,
    "moderate_session_hours": 1.0,
}

DEFAULT_LIMITS = {
    "min_session_hours": 0.1,
    "max_session_hours": 24.0,
    "max_reps": 100,
    "max_climbing_days": 366,
}

REPORT_FIELDS = [
    ("name", "Name"),
    ("total_hours", "Total Hours"),
    ("climbing_days", "Climbing Days"),
    ("average_hours", "Avg Hours / Session"),
    ("experience_level", "Experience Level"),
    ("climber_type", "Climber Type"),
    ("performance_rating", "Performance Rating"),
]

MENU_OPTIONS = [
    ("1", "Add Climb Session"),
    ("2", "Add Training Session"),
    ("3", "View Activities"),
    ("4", "View Summary Report and save to file"),
    ("5", "Load report"),
    ("6", "Exit"),
    ("7", "Delete Activity"),
]
