"""Data models for the school timetable optimizer."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Identifiers come from external registries and may be numeric or textual
EntityId = int | str


class Day(str, Enum):
    """Teaching days of the school week."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"

    @classmethod
    def from_name(cls, name: str) -> "Day":
        """Parse a day name case-insensitively ('monday', 'Monday', 'MONDAY')."""
        for day in cls:
            if day.value.lower() == str(name).strip().lower():
                return day
        raise ValueError(f"Unknown day: {name!r}")


class RoomType(str, Enum):
    """Kind of teaching space."""

    CLASSROOM = "classroom"
    LAB = "lab"
    GYM = "gym"
    AUDITORIUM = "auditorium"


class ConstraintKind(str, Enum):
    """Whether a constraint is mandatory or a weighted preference."""

    HARD = "hard"
    SOFT = "soft"


@dataclass(frozen=True)
class TimeSlot:
    """One (day, period) cell of the weekly grid with its wall-clock times."""

    day: Day
    period: int
    start_time: str
    end_time: str


@dataclass(frozen=True)
class SchoolClass:
    """A class (form) of students that follows one timetable."""

    id: EntityId
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SchoolClass":
        return cls(id=data["id"], name=data["name"])


@dataclass(frozen=True)
class Subject:
    """A subject with its weekly period requirement."""

    id: EntityId
    name: str
    weekly_periods: int
    requires_lab: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subject":
        return cls(
            id=data["id"],
            name=data["name"],
            weekly_periods=int(data["weekly_periods"]),
            requires_lab=bool(data.get("requires_lab", False)),
        )


@dataclass(frozen=True)
class Teacher:
    """A teacher with blocked slots and a daily period cap.

    ``max_consecutive_periods`` caps the total number of periods the teacher
    teaches on one day, whether or not those periods are adjacent.
    """

    id: EntityId
    name: str
    max_consecutive_periods: int
    unavailable_slots: frozenset[tuple[Day, int]] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Teacher":
        """Create a Teacher from a dictionary.

        Unavailable slots are given as ``[{"day": "Monday", "period": 1}, ...]``.
        """
        slots = frozenset(
            (Day.from_name(slot["day"]), int(slot["period"]))
            for slot in data.get("unavailable_slots", [])
        )
        return cls(
            id=data["id"],
            name=data["name"],
            max_consecutive_periods=int(data["max_consecutive_periods"]),
            unavailable_slots=slots,
        )

    def is_blocked(self, day: Day, period: int) -> bool:
        """Check if the teacher marked this slot as unavailable."""
        return (day, period) in self.unavailable_slots


@dataclass(frozen=True)
class Room:
    """A physical room that can host a period."""

    id: EntityId
    name: str
    capacity: int
    type: RoomType = RoomType.CLASSROOM

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Room":
        return cls(
            id=data["id"],
            name=data["name"],
            capacity=int(data.get("capacity", 0)),
            type=RoomType(data.get("type", RoomType.CLASSROOM.value)),
        )

    @property
    def is_lab(self) -> bool:
        return self.type == RoomType.LAB


@dataclass(frozen=True)
class Constraint:
    """A named predicate over a complete schedule.

    Hard constraints cost a flat penalty when violated; soft constraints cost
    a penalty proportional to ``weight``.
    """

    name: str
    kind: ConstraintKind
    weight: float
    validate: Callable[[list["ScheduleEntry"]], bool] = field(compare=False)

    @property
    def is_hard(self) -> bool:
        return self.kind == ConstraintKind.HARD


@dataclass(frozen=True)
class SchedulingRequest:
    """Immutable input of one optimization run.

    List order is significant: classes, subjects, teachers and rooms are
    always scanned in the order given here.
    """

    classes: list[SchoolClass] = field(default_factory=list)
    subjects: list[Subject] = field(default_factory=list)
    teachers: list[Teacher] = field(default_factory=list)
    rooms: list[Room] = field(default_factory=list)
    constraints: list[Constraint] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        constraints: list[Constraint] | None = None,
    ) -> "SchedulingRequest":
        """Create a request from its JSON form.

        Constraints are code, not data, so they are passed in separately.
        """
        return cls(
            classes=[SchoolClass.from_dict(c) for c in data.get("classes", [])],
            subjects=[Subject.from_dict(s) for s in data.get("subjects", [])],
            teachers=[Teacher.from_dict(t) for t in data.get("teachers", [])],
            rooms=[Room.from_dict(r) for r in data.get("rooms", [])],
            constraints=list(constraints or []),
        )


@dataclass(frozen=True)
class ScheduleEntry:
    """One period of a subject for a class, bound to a slot, teacher and room."""

    id: str
    day: Day
    period: int
    start_time: str
    end_time: str
    subject_id: EntityId
    subject_name: str
    teacher_id: EntityId
    teacher_name: str
    class_id: EntityId
    class_name: str
    room_id: EntityId | None = None
    room_name: str | None = None

    @staticmethod
    def make_id(class_id: EntityId, subject_id: EntityId, day: Day, period: int) -> str:
        """Build the deterministic entry id ``classId-subjectId-day-period``."""
        return f"{class_id}-{subject_id}-{day.value}-{period}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScheduleEntry":
        return cls(
            id=data["id"],
            day=Day.from_name(data["day"]),
            period=int(data["period"]),
            start_time=data.get("start_time", ""),
            end_time=data.get("end_time", ""),
            subject_id=data["subject_id"],
            subject_name=data.get("subject_name", ""),
            teacher_id=data["teacher_id"],
            teacher_name=data.get("teacher_name", ""),
            class_id=data["class_id"],
            class_name=data.get("class_name", ""),
            room_id=data.get("room_id"),
            room_name=data.get("room_name"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert entry to dictionary."""
        return {
            "id": self.id,
            "day": self.day.value,
            "period": self.period,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "subject_id": self.subject_id,
            "subject_name": self.subject_name,
            "teacher_id": self.teacher_id,
            "teacher_name": self.teacher_name,
            "class_id": self.class_id,
            "class_name": self.class_name,
            "room_id": self.room_id,
            "room_name": self.room_name,
        }


@dataclass
class OptimizationResult:
    """Result of one optimization run."""

    schedule: list[ScheduleEntry] = field(default_factory=list)
    score: int = 0
    satisfied_constraints: list[str] = field(default_factory=list)
    violated_constraints: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    # Reserved for alternative candidate timetables; never populated
    alternative_schedules: list[list[ScheduleEntry]] = field(default_factory=list)

    @property
    def total_entries(self) -> int:
        """Total number of scheduled periods."""
        return len(self.schedule)

    @property
    def has_shortfall(self) -> bool:
        return bool(self.suggestions)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OptimizationResult":
        """Rebuild a result from its exported JSON form."""
        return cls(
            schedule=[ScheduleEntry.from_dict(e) for e in data.get("schedule", [])],
            score=int(data.get("score", 0)),
            satisfied_constraints=list(data.get("satisfied_constraints", [])),
            violated_constraints=list(data.get("violated_constraints", [])),
            suggestions=list(data.get("suggestions", [])),
            alternative_schedules=[
                [ScheduleEntry.from_dict(e) for e in alternative]
                for alternative in data.get("alternative_schedules", [])
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "schedule": [e.to_dict() for e in self.schedule],
            "score": self.score,
            "satisfied_constraints": self.satisfied_constraints,
            "violated_constraints": self.violated_constraints,
            "suggestions": self.suggestions,
            "alternative_schedules": [
                [e.to_dict() for e in alternative]
                for alternative in self.alternative_schedules
            ],
        }
