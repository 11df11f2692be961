"""Availability checks for teachers and rooms against a partial schedule."""

from collections import defaultdict
from collections.abc import Iterable

from .models import Day, EntityId, ScheduleEntry, Teacher


class ConflictTracker:
    """Indexes a partial schedule for constant-time availability checks.

    This class maintains four lookups that mirror the schedule built so far:
    - teacher_schedule: (day, period) -> set of busy teacher ids
    - room_schedule: (day, period) -> set of occupied room ids
    - class_schedule: (day, period) -> set of class ids already in a lesson
    - teacher_daily_load: (teacher_id, day) -> number of periods taught that day

    Answers are identical to scanning the schedule list directly.
    """

    def __init__(self, entries: Iterable[ScheduleEntry] = ()) -> None:
        self.teacher_schedule: dict[tuple[Day, int], set[EntityId]] = defaultdict(set)
        self.room_schedule: dict[tuple[Day, int], set[EntityId]] = defaultdict(set)
        self.class_schedule: dict[tuple[Day, int], set[EntityId]] = defaultdict(set)
        self.teacher_daily_load: dict[tuple[EntityId, Day], int] = defaultdict(int)
        for entry in entries:
            self.reserve(entry)

    def reserve(self, entry: ScheduleEntry) -> None:
        """Record a committed entry."""
        key = (entry.day, entry.period)
        self.teacher_schedule[key].add(entry.teacher_id)
        self.class_schedule[key].add(entry.class_id)
        self.teacher_daily_load[(entry.teacher_id, entry.day)] += 1
        if entry.room_id is not None:
            self.room_schedule[key].add(entry.room_id)

    def get_teacher_daily_load(self, teacher_id: EntityId, day: Day) -> int:
        """Number of periods the teacher already has on this day."""
        return self.teacher_daily_load.get((teacher_id, day), 0)

    def is_teacher_available(self, teacher: Teacher, day: Day, period: int) -> bool:
        """Check if a teacher can take this slot.

        Rejects blocked slots, slots where the teacher already teaches, and
        days on which the teacher has reached ``max_consecutive_periods``.
        """
        if teacher.is_blocked(day, period):
            return False

        if teacher.id in self.teacher_schedule.get((day, period), ()):
            return False

        if self.get_teacher_daily_load(teacher.id, day) >= teacher.max_consecutive_periods:
            return False

        return True

    def is_room_available(self, room_id: EntityId, day: Day, period: int) -> bool:
        """Check if a room is free at this slot."""
        return room_id not in self.room_schedule.get((day, period), ())

    def is_class_available(self, class_id: EntityId, day: Day, period: int) -> bool:
        """Check if a class has no lesson at this slot yet."""
        return class_id not in self.class_schedule.get((day, period), ())


def is_teacher_available(
    teacher: Teacher,
    day: Day,
    period: int,
    schedule: list[ScheduleEntry],
) -> bool:
    """Check if a teacher can be used at a slot given the schedule so far.

    Args:
        teacher: Teacher to check
        day: Day of the week
        period: Period number (1-8)
        schedule: Entries committed so far

    Returns:
        True if the teacher is available, False if there's a conflict
    """
    if teacher.is_blocked(day, period):
        return False

    daily_load = 0
    for entry in schedule:
        if entry.teacher_id != teacher.id or entry.day != day:
            continue
        if entry.period == period:
            return False
        daily_load += 1

    return daily_load < teacher.max_consecutive_periods


def is_room_available(
    room_id: EntityId,
    day: Day,
    period: int,
    schedule: list[ScheduleEntry],
) -> bool:
    """Check if no committed entry occupies the room at this slot."""
    return not any(
        entry.room_id == room_id and entry.day == day and entry.period == period
        for entry in schedule
    )


def is_class_available(
    class_id: EntityId,
    day: Day,
    period: int,
    schedule: list[ScheduleEntry],
) -> bool:
    """Check if no committed entry already puts the class in a lesson at this slot."""
    return not any(
        entry.class_id == class_id and entry.day == day and entry.period == period
        for entry in schedule
    )
