"""Activity records: climb and training sessions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, TextIO, Union

from climb_cli.core.constants import CLIMB_TYPE_NAME, TRAINING_TYPE_NAME
from climb_cli.utils.formatting import difficulty_label, format_hours, format_location


class Difficulty(IntEnum):
    """Ordered difficulty levels."""

    EASY = 1
    MODERATE = 2
    HARD = 3
    EXTREME = 4

    @property
    def label(self) -> str:
        return difficulty_label(self.value)


class ActivityKind(Enum):
    CLIMB = "climb"
    TRAINING = "training"


@dataclass(frozen=True)
class Location:
    """Where a climb happened."""

    place: str = ""
    indoor: bool = True

    def formatted(self) -> str:
        return format_location(self.place, self.indoor)


@dataclass(eq=False)
class _ActivityBase:
    """Fields and rendering shared by every activity variant."""

    name: str
    duration: int
    difficulty: Difficulty

    def __post_init__(self) -> None:
        self.difficulty = Difficulty(self.difficulty)
        if self.duration < 0:
            raise ValueError(f"duration must be >= 0 minutes, got {self.duration}")

    def _describe_base(self, sink: TextIO) -> None:
        sink.write(f"Name: {self.name}\n")
        sink.write(f"Duration: {self.duration} minutes\n")
        sink.write(f"Difficulty: {self.difficulty.label}\n")


@dataclass(eq=False)
class ClimbSession(_ActivityBase):
    """A logged climbing session.

    Equality compares name, hours and location only; duration and difficulty
    are not part of a climb's identity.
    """

    hours: float
    location: Location

    kind = ActivityKind.CLIMB

    def type_name(self) -> str:
        return CLIMB_TYPE_NAME

    def describe(self, sink: TextIO) -> None:
        self._describe_base(sink)
        sink.write(f"Hours Climbed: {format_hours(self.hours)}\n")
        sink.write(f"Location: {self.location.formatted()}\n")

    def to_compact_text(self, sink: TextIO) -> None:
        sink.write(
            f"[Climb] {self.name} | {format_hours(self.hours)} hrs | {self.location.formatted()}\n"
        )

    def clone(self) -> "ClimbSession":
        return ClimbSession(
            name=self.name,
            duration=self.duration,
            difficulty=self.difficulty,
            hours=self.hours,
            location=dataclasses.replace(self.location),
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ClimbSession):
            return NotImplemented
        return (
            self.name == other.name
            and self.hours == other.hours
            and self.location.place == other.location.place
            and self.location.indoor == other.location.indoor
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class TrainingSession(_ActivityBase):
    """A logged training session (hangboard, campus board, ...)."""

    reps: int

    kind = ActivityKind.TRAINING

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.reps < 1:
            raise ValueError(f"reps must be >= 1, got {self.reps}")

    def type_name(self) -> str:
        return TRAINING_TYPE_NAME

    def describe(self, sink: TextIO) -> None:
        self._describe_base(sink)
        sink.write(f"Reps: {self.reps}\n")

    def to_compact_text(self, sink: TextIO) -> None:
        sink.write(f"[Training] {self.name} | {self.reps} reps\n")

    def clone(self) -> "TrainingSession":
        return TrainingSession(
            name=self.name,
            duration=self.duration,
            difficulty=self.difficulty,
            reps=self.reps,
        )


Activity = Union[ClimbSession, TrainingSession]


def climb_hours(activity: Activity) -> float:
    """Hours that count towards the climber's total; training adds nothing."""
    if isinstance(activity, ClimbSession):
        return activity.hours
    if isinstance(activity, TrainingSession):
        return 0.0
    raise TypeError(f"Unsupported activity type: {type(activity).__name__}")


def activity_to_dict(activity: Activity) -> Dict[str, Any]:
    """Plain mapping of an activity for JSON output."""
    payload: Dict[str, Any] = {
        "type": activity.type_name(),
        "name": activity.name,
        "duration": activity.duration,
        "difficulty": activity.difficulty.label,
    }
    if isinstance(activity, ClimbSession):
        payload["hours"] = activity.hours
        payload["location"] = {"place": activity.location.place, "indoor": activity.location.indoor}
    elif isinstance(activity, TrainingSession):
        payload["reps"] = activity.reps
    else:
        raise TypeError(f"Unsupported activity type: {type(activity).__name__}")
    return payload
