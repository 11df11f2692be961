"""Soft constraint implementations.

Soft constraints are preferences that should be satisfied when possible.
Violations cost ``weight`` times the soft multiplier but never invalidate
the schedule.
"""

from collections import Counter

from ..constants import (
    DIFFICULT_SUBJECTS,
    MAX_CLASS_DAILY_PERIODS,
    MORNING_LAST_PERIOD,
    MORNING_SHARE_THRESHOLD,
)
from ..models import Constraint, ConstraintKind, ScheduleEntry

BALANCED_DAILY_LOAD_WEIGHT = 0.8
DIFFICULT_SUBJECTS_IN_MORNING_WEIGHT = 0.6


def is_difficult_subject(subject_name: str) -> bool:
    """Check if a subject name contains one of the difficult subject names."""
    return any(name in subject_name for name in DIFFICULT_SUBJECTS)


def balanced_daily_load(
    weight: float = BALANCED_DAILY_LOAD_WEIGHT,
    max_daily_periods: int = MAX_CLASS_DAILY_PERIODS,
) -> Constraint:
    """No class has more than ``max_daily_periods`` periods on any day."""

    def validate(schedule: list[ScheduleEntry]) -> bool:
        daily_loads = Counter((entry.class_id, entry.day) for entry in schedule)
        return all(count <= max_daily_periods for count in daily_loads.values())

    return Constraint(
        name="Balanced daily workload",
        kind=ConstraintKind.SOFT,
        weight=weight,
        validate=validate,
    )


def difficult_subjects_in_morning(
    weight: float = DIFFICULT_SUBJECTS_IN_MORNING_WEIGHT,
) -> Constraint:
    """At least 70% of difficult-subject periods fall in periods 1-4.

    Vacuously satisfied when no difficult subject is scheduled.
    """

    def validate(schedule: list[ScheduleEntry]) -> bool:
        difficult = [e for e in schedule if is_difficult_subject(e.subject_name)]
        if not difficult:
            return True
        morning = [e for e in difficult if e.period <= MORNING_LAST_PERIOD]
        return len(morning) / len(difficult) >= MORNING_SHARE_THRESHOLD

    return Constraint(
        name="Difficult subjects scheduled in morning",
        kind=ConstraintKind.SOFT,
        weight=weight,
        validate=validate,
    )
