"""Greedy first-fit assignment of subject periods to weekly slots."""

import logging
import time
from dataclasses import dataclass, field

from .availability import ConflictTracker
from .constants import get_time_slot, iter_week_slots
from .models import (
    Day,
    EntityId,
    SchedulingRequest,
    ScheduleEntry,
    SchoolClass,
    Subject,
    Teacher,
)
from .rooms import find_room

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchedulingBudget:
    """Optional limits on one assignment run.

    ``max_iterations`` counts (day, period) probes across the whole run and
    ``time_limit`` is wall-clock seconds. ``None`` means unlimited.
    """

    max_iterations: int | None = None
    time_limit: float | None = None

    @property
    def is_unlimited(self) -> bool:
        return self.max_iterations is None and self.time_limit is None


UNLIMITED_BUDGET = SchedulingBudget()


@dataclass
class AssignmentOutcome:
    """Entries and shortfall diagnostics produced by the engine."""

    entries: list[ScheduleEntry] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    # (subject_id, class_id) -> periods assigned
    assigned_counts: dict[tuple[EntityId, EntityId], int] = field(default_factory=dict)
    iterations: int = 0
    stopped_early: bool = False


def format_shortfall(subject: Subject, school_class: SchoolClass, assigned: int) -> str:
    """Human-readable shortfall message for one subject/class pair."""
    return (
        f"Could not assign all {subject.weekly_periods} periods for {subject.name} "
        f"in {school_class.name}. Only {assigned} periods assigned."
    )


class GreedyScheduler:
    """Single-pass, non-backtracking timetable builder.

    Algorithm:
    1. Outer loop: subjects in input order
    2. Inner loop: classes in input order
    3. Walk Monday to Friday, periods 1 to 8, until the subject's weekly
       periods are placed for the class
    4. At each slot take the first available teacher, then the first usable
       room; commit only when both exist
    5. Record a shortfall suggestion when the week runs out

    Earlier commitments are never revisited, so the result depends on the
    order of every input list.
    """

    def __init__(self, budget: SchedulingBudget | None = None) -> None:
        self.budget = budget or UNLIMITED_BUDGET
        self._iterations = 0
        self._deadline: float | None = None

    def assign(self, request: SchedulingRequest) -> AssignmentOutcome:
        """Build the schedule for a request.

        Args:
            request: Immutable scheduling input

        Returns:
            AssignmentOutcome with entries in commit order and suggestions
        """
        outcome = AssignmentOutcome()
        tracker = ConflictTracker()
        self._iterations = 0
        self._deadline = (
            time.monotonic() + self.budget.time_limit
            if self.budget.time_limit is not None
            else None
        )

        pairs = [(s, c) for s in request.subjects for c in request.classes]
        logger.info(
            f"Assigning {len(pairs)} subject/class pairs with "
            f"{len(request.teachers)} teachers and {len(request.rooms)} rooms"
        )
        if not request.teachers:
            logger.warning("No teachers in request; nothing can be scheduled")
        if not request.rooms:
            logger.warning("No rooms in request; nothing can be scheduled")

        incomplete = 0
        for subject, school_class in pairs:
            if outcome.stopped_early:
                assigned = 0
            else:
                assigned = self._assign_pair(
                    subject, school_class, request, tracker, outcome
                )

            outcome.assigned_counts[(subject.id, school_class.id)] = assigned
            if assigned < subject.weekly_periods:
                if outcome.stopped_early:
                    incomplete += 1
                logger.warning(
                    f"Shortfall for {subject.name} in {school_class.name}: "
                    f"{assigned}/{subject.weekly_periods} periods"
                )
                outcome.suggestions.append(
                    format_shortfall(subject, school_class, assigned)
                )

        outcome.iterations = self._iterations
        if outcome.stopped_early:
            logger.warning(
                f"Scheduling budget exhausted after {self._iterations} slot checks"
            )
            outcome.suggestions.append(
                f"Scheduling stopped early after {self._iterations} slot checks; "
                f"{incomplete} subject/class pairs were left incomplete. "
                "Increase the scheduling budget for full coverage."
            )

        logger.info(
            f"Created {len(outcome.entries)} entries, "
            f"{len(outcome.suggestions)} suggestions"
        )
        return outcome

    def _assign_pair(
        self,
        subject: Subject,
        school_class: SchoolClass,
        request: SchedulingRequest,
        tracker: ConflictTracker,
        outcome: AssignmentOutcome,
    ) -> int:
        """Place the weekly periods of one subject for one class.

        Returns:
            Number of periods committed for this pair
        """
        assigned = 0
        for day, period in iter_week_slots():
            if assigned >= subject.weekly_periods:
                break
            if self._budget_exhausted():
                outcome.stopped_early = True
                break
            self._iterations += 1

            if not tracker.is_class_available(school_class.id, day, period):
                continue

            teacher = self._find_teacher(request.teachers, day, period, tracker)
            if teacher is None:
                continue

            # The tentative teacher is dropped if no room fits
            room = find_room(subject, day, period, request.rooms, tracker)
            if room is None:
                continue

            entry = self._create_entry(subject, school_class, teacher, room, day, period)
            if entry is None:
                continue

            outcome.entries.append(entry)
            tracker.reserve(entry)
            assigned += 1
            logger.debug(
                f"Assigned {subject.name} for {school_class.name} on {day.value} "
                f"period {period} ({teacher.name}, {room.name})"
            )

        return assigned

    def _find_teacher(
        self,
        teachers: list[Teacher],
        day: Day,
        period: int,
        tracker: ConflictTracker,
    ) -> Teacher | None:
        """First teacher in input order who can take this slot."""
        for teacher in teachers:
            if tracker.is_teacher_available(teacher, day, period):
                return teacher
        return None

    def _create_entry(self, subject, school_class, teacher, room, day, period):
        time_slot = get_time_slot(day, period)
        if time_slot is None:
            return None
        return ScheduleEntry(
            id=ScheduleEntry.make_id(school_class.id, subject.id, day, period),
            day=day,
            period=period,
            start_time=time_slot.start_time,
            end_time=time_slot.end_time,
            subject_id=subject.id,
            subject_name=subject.name,
            teacher_id=teacher.id,
            teacher_name=teacher.name,
            class_id=school_class.id,
            class_name=school_class.name,
            room_id=room.id,
            room_name=room.name,
        )

    def _budget_exhausted(self) -> bool:
        max_iterations = self.budget.max_iterations
        if max_iterations is not None and self._iterations >= max_iterations:
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return True
        return False


def assign(
    request: SchedulingRequest,
    budget: SchedulingBudget | None = None,
) -> AssignmentOutcome:
    """Run the greedy engine on a request."""
    return GreedyScheduler(budget).assign(request)
