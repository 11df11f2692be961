"""End-to-end tests for optimize_schedule."""

import json

from timetable_optimizer.constants import ScoringWeights
from timetable_optimizer.constraints import standard_constraints
from timetable_optimizer.engine import SchedulingBudget
from timetable_optimizer.models import (
    Room,
    RoomType,
    SchedulingRequest,
    SchoolClass,
    Subject,
    Teacher,
)
from timetable_optimizer.optimizer import optimize_schedule


class TestSimpleRequest:
    """One class, one subject, one teacher, one classroom."""

    def test_result(self, simple_request):
        result = optimize_schedule(simple_request)
        assert result.total_entries == 5
        assert result.score == 100
        assert result.violated_constraints == []
        assert len(result.satisfied_constraints) == 5
        assert result.suggestions == []
        assert result.alternative_schedules == []

    def test_constraint_names_partition_input(self, simple_request):
        result = optimize_schedule(simple_request)
        names = [c.name for c in simple_request.constraints]
        reported = result.satisfied_constraints + result.violated_constraints
        assert sorted(reported) == sorted(names)


class TestLabShortfall:
    """Lab subject with no lab room available."""

    def test_shortfall_is_not_an_error(self, classroom, teacher):
        request = SchedulingRequest(
            classes=[SchoolClass(id=1, name="JSS1")],
            subjects=[Subject(id=12, name="Chemistry", weekly_periods=3, requires_lab=True)],
            teachers=[teacher],
            rooms=[classroom],
            constraints=standard_constraints(),
        )
        result = optimize_schedule(request)
        assert result.schedule == []
        assert result.score == 100
        assert result.suggestions == [
            "Could not assign all 3 periods for Chemistry in JSS1. Only 0 periods assigned."
        ]
        assert result.has_shortfall


class TestResourceContention:
    """Two classes share one teacher for a 25-period subject."""

    def test_soft_violation_scored(self):
        request = SchedulingRequest(
            classes=[SchoolClass(id=1, name="JSS1"), SchoolClass(id=2, name="JSS2")],
            subjects=[Subject(id=10, name="Mathematics", weekly_periods=25)],
            teachers=[Teacher(id="t1", name="Mr Okafor", max_consecutive_periods=6)],
            rooms=[
                Room(id=1, name="Room 101", capacity=40),
                Room(id=2, name="Room 102", capacity=40),
            ],
            constraints=standard_constraints(),
        )
        result = optimize_schedule(request)
        assert result.total_entries == 30
        # 20 of 30 Mathematics periods fall in the morning
        assert result.violated_constraints == ["Difficult subjects scheduled in morning"]
        # 100 - 0.6 * 10 + 0.3 * 10
        assert result.score == 97
        assert len(result.suggestions) == 1


class TestOptions:
    """Scoring weights and budgets flow through to the result."""

    def test_custom_weights(self, simple_request):
        result = optimize_schedule(simple_request, ScoringWeights(base_score=80.0))
        # 80 + 0.3 * (10 - 4)
        assert result.score == 82

    def test_budget(self, simple_request):
        result = optimize_schedule(simple_request, budget=SchedulingBudget(max_iterations=2))
        assert result.total_entries == 2
        assert result.suggestions[0].startswith("Could not assign all 5 periods")
        assert result.suggestions[-1].startswith("Scheduling stopped early")


def test_empty_request():
    request = SchedulingRequest(constraints=standard_constraints())
    result = optimize_schedule(request)
    assert result.schedule == []
    assert result.score == 100
    assert result.violated_constraints == []
    assert result.suggestions == []


def test_no_constraints(simple_request):
    request = SchedulingRequest(
        classes=simple_request.classes,
        subjects=simple_request.subjects,
        teachers=simple_request.teachers,
        rooms=simple_request.rooms,
    )
    result = optimize_schedule(request)
    assert result.satisfied_constraints == []
    assert result.violated_constraints == []
    assert result.total_entries == 5


def test_deterministic(school_request):
    first = optimize_schedule(school_request)
    second = optimize_schedule(school_request)
    assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())


def test_request_left_untouched(school_request):
    subjects = list(school_request.subjects)
    rooms = list(school_request.rooms)
    optimize_schedule(school_request)
    assert school_request.subjects == subjects
    assert school_request.rooms == rooms
    assert school_request.rooms[1].type == RoomType.LAB
