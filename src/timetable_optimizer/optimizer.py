"""Public entry point: build a timetable and assemble the optimization result."""

import logging

from .constants import DEFAULT_SCORING_WEIGHTS, ScoringWeights
from .constraints import evaluate_constraints
from .engine import GreedyScheduler, SchedulingBudget
from .models import OptimizationResult, SchedulingRequest
from .scoring import calculate_score

logger = logging.getLogger(__name__)


def optimize_schedule(
    request: SchedulingRequest,
    weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
    budget: SchedulingBudget | None = None,
) -> OptimizationResult:
    """Generate a weekly timetable for a request.

    Never raises for unsatisfiable subject/class pairs: each shortfall is
    reported as a suggestion. Violated hard constraints are reported, not
    repaired.

    Args:
        request: Classes, subjects, teachers, rooms and constraints
        weights: Scoring weights
        budget: Optional iteration/time budget for the assignment pass

    Returns:
        OptimizationResult with schedule, score and diagnostics
    """
    outcome = GreedyScheduler(budget).assign(request)
    schedule = outcome.entries

    report = evaluate_constraints(schedule, request.constraints)
    score = calculate_score(schedule, request.constraints, weights)

    logger.info(f"Schedule score: {score}/100 ({len(schedule)} entries)")
    for name in report.violated_names:
        logger.warning(f"Constraint violated: {name}")

    return OptimizationResult(
        schedule=list(schedule),
        score=score,
        satisfied_constraints=report.satisfied_names,
        violated_constraints=report.violated_names,
        suggestions=list(outcome.suggestions),
        alternative_schedules=[],
    )
