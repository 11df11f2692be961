"""Evaluation of constraints against a finished schedule."""

from dataclasses import dataclass, field

from ..models import Constraint, ScheduleEntry


@dataclass
class ConstraintReport:
    """Constraints partitioned by outcome, in input order."""

    satisfied: list[Constraint] = field(default_factory=list)
    violated: list[Constraint] = field(default_factory=list)

    @property
    def satisfied_names(self) -> list[str]:
        return [c.name for c in self.satisfied]

    @property
    def violated_names(self) -> list[str]:
        return [c.name for c in self.violated]

    @property
    def violated_hard(self) -> list[Constraint]:
        return [c for c in self.violated if c.is_hard]

    @property
    def violated_soft(self) -> list[Constraint]:
        return [c for c in self.violated if not c.is_hard]


def evaluate_constraints(
    schedule: list[ScheduleEntry],
    constraints: list[Constraint],
) -> ConstraintReport:
    """Run every constraint's predicate on the schedule.

    Args:
        schedule: Complete schedule to check
        constraints: Constraints to evaluate, in reporting order

    Returns:
        ConstraintReport with satisfied and violated constraints
    """
    report = ConstraintReport()
    for constraint in constraints:
        if constraint.validate(schedule):
            report.satisfied.append(constraint)
        else:
            report.violated.append(constraint)
    return report
