"""Timetable Optimizer - weekly school timetable generation.

This package assigns subject periods to (day, period) slots across classes,
teachers and rooms with a deterministic greedy first-fit algorithm, checks
the result against hard and soft constraints, and scores it from 0 to 100.

Example usage:
    from timetable_optimizer import SchedulingRequest, optimize_schedule
    from timetable_optimizer.constraints import standard_constraints

    request = SchedulingRequest(
        classes=classes,
        subjects=subjects,
        teachers=teachers,
        rooms=rooms,
        constraints=standard_constraints(),
    )
    result = optimize_schedule(request)

    print(f"Score: {result.score}/100")
    for suggestion in result.suggestions:
        print(suggestion)

    # Export to JSON
    from timetable_optimizer.exporter import export_result_json
    export_result_json(result, "timetable.json")
"""

from .config import ConfigLoader, load_request
from .constants import DEFAULT_SCORING_WEIGHTS, TIME_SLOTS, WEEK_DAYS, ScoringWeights
from .constraints import evaluate_constraints, standard_constraints
from .edit_rules import EditDecision, SubjectRule, apply_scheduling_rules
from .engine import GreedyScheduler, SchedulingBudget, assign
from .exceptions import (
    InvalidRequestError,
    OptimizerError,
    RequestFileError,
    UnknownConstraintError,
)
from .models import (
    Constraint,
    ConstraintKind,
    Day,
    OptimizationResult,
    Room,
    RoomType,
    ScheduleEntry,
    SchedulingRequest,
    SchoolClass,
    Subject,
    Teacher,
    TimeSlot,
)
from .optimizer import optimize_schedule
from .scoring import calculate_score

__version__ = "0.1.0"

__all__ = [
    # Main entry point
    "optimize_schedule",
    "GreedyScheduler",
    "SchedulingBudget",
    "assign",
    "calculate_score",
    "evaluate_constraints",
    "standard_constraints",
    # Models
    "Constraint",
    "ConstraintKind",
    "Day",
    "OptimizationResult",
    "Room",
    "RoomType",
    "ScheduleEntry",
    "SchedulingRequest",
    "SchoolClass",
    "Subject",
    "Teacher",
    "TimeSlot",
    # Manual edits
    "EditDecision",
    "SubjectRule",
    "apply_scheduling_rules",
    # Configuration
    "ConfigLoader",
    "load_request",
    "ScoringWeights",
    "DEFAULT_SCORING_WEIGHTS",
    "TIME_SLOTS",
    "WEEK_DAYS",
    # Exceptions
    "OptimizerError",
    "RequestFileError",
    "InvalidRequestError",
    "UnknownConstraintError",
]
