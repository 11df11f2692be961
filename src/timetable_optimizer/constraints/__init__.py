"""Constraint implementations for the timetable optimizer."""

from collections.abc import Callable

from ..exceptions import UnknownConstraintError
from ..models import Constraint
from .evaluator import ConstraintReport, evaluate_constraints
from .hard import no_class_double_booking, no_room_double_booking, no_teacher_double_booking
from .soft import balanced_daily_load, difficult_subjects_in_morning, is_difficult_subject

# Registry key -> factory, in the standard evaluation order
STANDARD_CONSTRAINTS: dict[str, Callable[..., Constraint]] = {
    "no_teacher_double_booking": no_teacher_double_booking,
    "no_class_double_booking": no_class_double_booking,
    "no_room_double_booking": no_room_double_booking,
    "balanced_daily_load": balanced_daily_load,
    "difficult_subjects_in_morning": difficult_subjects_in_morning,
}


def standard_constraints() -> list[Constraint]:
    """Build the full standard constraint set."""
    return [factory() for factory in STANDARD_CONSTRAINTS.values()]


def get_constraint(key: str, weight: float | None = None) -> Constraint:
    """Build a standard constraint by registry key.

    Args:
        key: Registry key such as 'balanced_daily_load'
        weight: Optional weight override for soft constraints

    Raises:
        UnknownConstraintError: If the key is not registered
    """
    factory = STANDARD_CONSTRAINTS.get(key)
    if factory is None:
        raise UnknownConstraintError(key, list(STANDARD_CONSTRAINTS))
    constraint = factory()
    if weight is not None and not constraint.is_hard:
        return factory(weight=weight)
    return constraint


__all__ = [
    "ConstraintReport",
    "STANDARD_CONSTRAINTS",
    "balanced_daily_load",
    "difficult_subjects_in_morning",
    "evaluate_constraints",
    "get_constraint",
    "is_difficult_subject",
    "no_class_double_booking",
    "no_room_double_booking",
    "no_teacher_double_booking",
    "standard_constraints",
]
