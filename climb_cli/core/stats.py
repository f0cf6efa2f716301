"""Climber statistics buckets."""

from __future__ import annotations

from typing import Any, Dict, Optional

from climb_cli.core.constants import DEFAULT_THRESHOLDS


def resolve_thresholds(config: Optional[Dict[str, Any]] = None) -> Dict[str, float]:
    """Merge configured thresholds over the defaults."""
    configured = (config or {}).get("thresholds", {})
    return {key: configured.get(key, default) for key, default in DEFAULT_THRESHOLDS.items()}


def average_hours(total_hours: int, climbing_days: int) -> float:
    """Average hours per climbing day, 0.0 without any days."""
    if climbing_days <= 0:
        return 0.0
    return float(total_hours) / climbing_days


def experience_level(total_hours: int, thresholds: Optional[Dict[str, float]] = None) -> str:
    limits = {**DEFAULT_THRESHOLDS, **(thresholds or {})}
    if total_hours >= limits["advanced_hours"]:
        return "Advanced"
    if total_hours >= limits["intermediate_hours"]:
        return "Intermediate"
    return "Beginner"


def climber_type(climbing_days: int, thresholds: Optional[Dict[str, float]] = None) -> str:
    limits = {**DEFAULT_THRESHOLDS, **(thresholds or {})}
    if climbing_days >= limits["frequent_climber_days"]:
        return "Frequent Climber"
    if climbing_days >= limits["new_climber_days"]:
        return "Regular Climber"
    return "New Climber"


def performance_rating(hours_per_session: float, thresholds: Optional[Dict[str, float]] = None) -> str:
    limits = {**DEFAULT_THRESHOLDS, **(thresholds or {})}
    if hours_per_session >= limits["dedicated_session_hours"]:
        return "Highly Dedicated"
    if hours_per_session >= limits["moderate_session_hours"]:
        return "Moderately Dedicated"
    return "Casual"
