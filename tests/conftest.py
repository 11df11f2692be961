"""Test fixtures for timetable optimizer tests."""

import pytest

from timetable_optimizer.constraints import standard_constraints
from timetable_optimizer.models import (
    Day,
    Room,
    RoomType,
    ScheduleEntry,
    SchedulingRequest,
    SchoolClass,
    Subject,
    Teacher,
)


def make_entry(
    class_id="C1",
    subject_id="S1",
    day=Day.MONDAY,
    period=1,
    teacher_id="T1",
    room_id="R1",
    **overrides,
) -> ScheduleEntry:
    """Build a schedule entry with sensible defaults."""
    values = {
        "id": ScheduleEntry.make_id(class_id, subject_id, day, period),
        "day": day,
        "period": period,
        "start_time": "",
        "end_time": "",
        "subject_id": subject_id,
        "subject_name": f"Subject {subject_id}",
        "teacher_id": teacher_id,
        "teacher_name": f"Teacher {teacher_id}",
        "class_id": class_id,
        "class_name": f"Class {class_id}",
        "room_id": room_id,
        "room_name": f"Room {room_id}" if room_id is not None else None,
    }
    values.update(overrides)
    return ScheduleEntry(**values)


@pytest.fixture
def entry_factory():
    """Factory for schedule entries; keyword arguments override defaults."""
    return make_entry


@pytest.fixture
def classroom():
    return Room(id=1, name="Room 101", capacity=40, type=RoomType.CLASSROOM)


@pytest.fixture
def lab_room():
    return Room(id=2, name="Science Lab", capacity=30, type=RoomType.LAB)


@pytest.fixture
def teacher():
    return Teacher(id="t1", name="Mrs Adeyemi", max_consecutive_periods=6)


@pytest.fixture
def simple_request(classroom, teacher):
    """One class, one five-period subject, one teacher, one classroom."""
    return SchedulingRequest(
        classes=[SchoolClass(id=1, name="JSS1")],
        subjects=[Subject(id=10, name="History", weekly_periods=5)],
        teachers=[teacher],
        rooms=[classroom],
        constraints=standard_constraints(),
    )


@pytest.fixture
def school_request(classroom, lab_room):
    """A small school: three classes, four subjects, three teachers, three rooms."""
    return SchedulingRequest(
        classes=[
            SchoolClass(id=1, name="JSS1"),
            SchoolClass(id=2, name="JSS2"),
            SchoolClass(id=3, name="JSS3"),
        ],
        subjects=[
            Subject(id=10, name="Mathematics", weekly_periods=5),
            Subject(id=11, name="English", weekly_periods=4),
            Subject(id=12, name="Chemistry", weekly_periods=3, requires_lab=True),
            Subject(id=13, name="Physical Education", weekly_periods=2),
        ],
        teachers=[
            Teacher(
                id="t1",
                name="Mr Okafor",
                max_consecutive_periods=5,
                unavailable_slots=frozenset({(Day.MONDAY, 1), (Day.FRIDAY, 8)}),
            ),
            Teacher(id="t2", name="Ms Bello", max_consecutive_periods=6),
            Teacher(id="t3", name="Mrs Eze", max_consecutive_periods=4),
        ],
        rooms=[
            classroom,
            lab_room,
            Room(id=3, name="Main Gym", capacity=80, type=RoomType.GYM),
        ],
        constraints=standard_constraints(),
    )


@pytest.fixture
def request_document():
    """Request in its JSON form."""
    return {
        "classes": [{"id": 1, "name": "JSS1"}, {"id": 2, "name": "JSS2"}],
        "subjects": [
            {"id": 10, "name": "Mathematics", "weekly_periods": 4},
            {"id": 12, "name": "Chemistry", "weekly_periods": 2, "requires_lab": True},
        ],
        "teachers": [
            {
                "id": "t1",
                "name": "Mr Okafor",
                "max_consecutive_periods": 6,
                "unavailable_slots": [{"day": "Monday", "period": 1}],
            },
            {"id": "t2", "name": "Ms Bello", "max_consecutive_periods": 6},
        ],
        "rooms": [
            {"id": 1, "name": "Room 101", "capacity": 40, "type": "classroom"},
            {"id": 2, "name": "Science Lab", "capacity": 30, "type": "lab"},
        ],
    }
