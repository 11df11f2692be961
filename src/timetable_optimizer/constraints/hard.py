"""Hard constraint implementations.

Hard constraints are mandatory requirements that must never be violated.
A violation costs a flat score penalty but does not stop generation.
"""

from collections.abc import Callable, Hashable

from ..models import Constraint, ConstraintKind, ScheduleEntry

# Hard constraints carry no tolerance; the weight is informational only
HARD_CONSTRAINT_WEIGHT = 1.0


def _unique_slots(
    key: Callable[[ScheduleEntry], Hashable | None],
) -> Callable[[list[ScheduleEntry]], bool]:
    """Build a validator that rejects two entries sharing a (resource, day, period) key.

    Entries whose resource is ``None`` are skipped.
    """

    def validate(schedule: list[ScheduleEntry]) -> bool:
        seen: set[tuple] = set()
        for entry in schedule:
            resource = key(entry)
            if resource is None:
                continue
            slot = (resource, entry.day, entry.period)
            if slot in seen:
                return False
            seen.add(slot)
        return True

    return validate


def no_teacher_double_booking() -> Constraint:
    """A teacher teaches at most one entry per slot."""
    return Constraint(
        name="No teacher double-booking",
        kind=ConstraintKind.HARD,
        weight=HARD_CONSTRAINT_WEIGHT,
        validate=_unique_slots(lambda entry: entry.teacher_id),
    )


def no_class_double_booking() -> Constraint:
    """A class attends at most one entry per slot."""
    return Constraint(
        name="No class double-booking",
        kind=ConstraintKind.HARD,
        weight=HARD_CONSTRAINT_WEIGHT,
        validate=_unique_slots(lambda entry: entry.class_id),
    )


def no_room_double_booking() -> Constraint:
    """A room hosts at most one entry per slot; roomless entries are ignored."""
    return Constraint(
        name="No room double-booking",
        kind=ConstraintKind.HARD,
        weight=HARD_CONSTRAINT_WEIGHT,
        validate=_unique_slots(lambda entry: entry.room_id),
    )
