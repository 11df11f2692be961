"""Schedule quality score."""

import math
from collections import defaultdict

from .constants import DEFAULT_SCORING_WEIGHTS, MAX_SCORE, MIN_SCORE, WEEK_DAYS, ScoringWeights
from .constraints import ConstraintReport, evaluate_constraints
from .models import Constraint, Day, EntityId, ScheduleEntry


def _teacher_day_periods(
    schedule: list[ScheduleEntry],
) -> dict[EntityId, dict[Day, list[int]]]:
    """Group scheduled periods by teacher and day, teachers in first-seen order."""
    periods: dict[EntityId, dict[Day, list[int]]] = {}
    for entry in schedule:
        by_day = periods.setdefault(entry.teacher_id, defaultdict(list))
        by_day[entry.day].append(entry.period)
    return periods


def calculate_teacher_idle_time(schedule: list[ScheduleEntry]) -> int:
    """Count unfilled periods between each teacher's first and last period of a day.

    Args:
        schedule: Complete schedule

    Returns:
        Idle periods summed over all teachers and days
    """
    idle = 0
    for by_day in _teacher_day_periods(schedule).values():
        for periods in by_day.values():
            taught = set(periods)
            if len(taught) < 2:
                continue
            idle += (max(taught) - min(taught) + 1) - len(taught)
    return idle


def calculate_workload_balance(
    schedule: list[ScheduleEntry],
    ceiling: float = DEFAULT_SCORING_WEIGHTS.balance_ceiling,
) -> float:
    """Average per-teacher balance of daily period counts across the week.

    Each teacher contributes ``max(0, ceiling - variance)`` where variance is
    the population variance of their five daily counts. A schedule with no
    teachers has a balance of 0.
    """
    teachers = _teacher_day_periods(schedule)
    if not teachers:
        return 0.0

    total = 0.0
    for by_day in teachers.values():
        counts = [len(by_day.get(day, [])) for day in WEEK_DAYS]
        mean = sum(counts) / len(WEEK_DAYS)
        variance = sum((count - mean) ** 2 for count in counts) / len(WEEK_DAYS)
        total += max(0.0, ceiling - variance)
    return total / len(teachers)


def constraint_penalty(report: ConstraintReport, weights: ScoringWeights) -> float:
    """Penalty for the violated constraints of a report."""
    hard = len(report.violated_hard) * weights.hard_violation_penalty
    soft = sum(c.weight * weights.soft_weight_multiplier for c in report.violated_soft)
    return hard + soft


def calculate_score(
    schedule: list[ScheduleEntry],
    constraints: list[Constraint],
    weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
) -> int:
    """Score a schedule from 0 to 100.

    Starts from the base score, subtracts constraint penalties and teacher
    idle time, adds the workload balance bonus, then clamps and rounds half up.

    Args:
        schedule: Complete schedule
        constraints: Constraints to evaluate
        weights: Scoring weights

    Returns:
        Integer score within [0, 100]
    """
    report = evaluate_constraints(schedule, constraints)
    score = weights.base_score
    score -= constraint_penalty(report, weights)
    score -= calculate_teacher_idle_time(schedule) * weights.idle_period_penalty
    score += (
        calculate_workload_balance(schedule, weights.balance_ceiling)
        * weights.balance_bonus
    )
    score = max(MIN_SCORE, min(MAX_SCORE, score))
    return int(math.floor(score + 0.5))
