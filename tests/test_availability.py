"""Tests for teacher, room and class availability checks."""

import pytest

from timetable_optimizer.availability import (
    ConflictTracker,
    is_class_available,
    is_room_available,
    is_teacher_available,
)
from timetable_optimizer.models import Day, Teacher


@pytest.fixture
def capped_teacher():
    return Teacher(
        id="T1",
        name="Mr Okafor",
        max_consecutive_periods=2,
        unavailable_slots=frozenset({(Day.TUESDAY, 3)}),
    )


class TestIsTeacherAvailable:
    """Tests for the pure teacher predicate."""

    def test_available_on_empty_schedule(self, capped_teacher):
        assert is_teacher_available(capped_teacher, Day.MONDAY, 1, [])

    def test_blocked_slot(self, capped_teacher):
        assert not is_teacher_available(capped_teacher, Day.TUESDAY, 3, [])
        assert is_teacher_available(capped_teacher, Day.TUESDAY, 4, [])

    def test_already_teaching(self, capped_teacher, entry_factory):
        schedule = [entry_factory(teacher_id="T1", day=Day.MONDAY, period=1)]
        assert not is_teacher_available(capped_teacher, Day.MONDAY, 1, schedule)
        assert is_teacher_available(capped_teacher, Day.MONDAY, 2, schedule)

    def test_daily_cap_counts_non_adjacent_periods(self, capped_teacher, entry_factory):
        schedule = [
            entry_factory(teacher_id="T1", day=Day.MONDAY, period=1),
            entry_factory(teacher_id="T1", day=Day.MONDAY, period=7),
        ]
        # Cap is a daily total, not a run of adjacent periods
        assert not is_teacher_available(capped_teacher, Day.MONDAY, 4, schedule)
        assert is_teacher_available(capped_teacher, Day.TUESDAY, 1, schedule)

    def test_other_teachers_ignored(self, capped_teacher, entry_factory):
        schedule = [
            entry_factory(teacher_id="T2", day=Day.MONDAY, period=1),
            entry_factory(teacher_id="T2", day=Day.MONDAY, period=2),
        ]
        assert is_teacher_available(capped_teacher, Day.MONDAY, 3, schedule)


class TestIsRoomAvailable:
    """Tests for the pure room predicate."""

    def test_free_room(self):
        assert is_room_available("R1", Day.MONDAY, 1, [])

    def test_occupied_room(self, entry_factory):
        schedule = [entry_factory(room_id="R1", day=Day.MONDAY, period=1)]
        assert not is_room_available("R1", Day.MONDAY, 1, schedule)
        assert is_room_available("R1", Day.MONDAY, 2, schedule)
        assert is_room_available("R2", Day.MONDAY, 1, schedule)


class TestIsClassAvailable:
    def test_class_busy(self, entry_factory):
        schedule = [entry_factory(class_id="C1", day=Day.FRIDAY, period=5)]
        assert not is_class_available("C1", Day.FRIDAY, 5, schedule)
        assert is_class_available("C2", Day.FRIDAY, 5, schedule)


class TestConflictTracker:
    """Tests for ConflictTracker class."""

    def test_teacher_initially_available(self, capped_teacher):
        tracker = ConflictTracker()
        assert tracker.is_teacher_available(capped_teacher, Day.MONDAY, 1)

    def test_reserve_blocks_teacher_room_and_class(self, capped_teacher, entry_factory):
        tracker = ConflictTracker()
        tracker.reserve(entry_factory(class_id="C1", teacher_id="T1", room_id="R1"))
        assert not tracker.is_teacher_available(capped_teacher, Day.MONDAY, 1)
        assert not tracker.is_room_available("R1", Day.MONDAY, 1)
        assert not tracker.is_class_available("C1", Day.MONDAY, 1)
        assert tracker.get_teacher_daily_load("T1", Day.MONDAY) == 1

    def test_roomless_entry(self, entry_factory):
        tracker = ConflictTracker([entry_factory(room_id=None)])
        assert tracker.is_room_available("R1", Day.MONDAY, 1)
        assert not tracker.room_schedule.get((Day.MONDAY, 1))

    def test_daily_cap(self, capped_teacher, entry_factory):
        tracker = ConflictTracker(
            [
                entry_factory(teacher_id="T1", period=1),
                entry_factory(teacher_id="T1", period=2, class_id="C2"),
            ]
        )
        assert not tracker.is_teacher_available(capped_teacher, Day.MONDAY, 3)
        assert tracker.is_teacher_available(capped_teacher, Day.TUESDAY, 1)

    def test_matches_pure_predicates(self, capped_teacher, entry_factory):
        schedule = [
            entry_factory(teacher_id="T1", day=Day.MONDAY, period=1),
            entry_factory(teacher_id="T1", day=Day.WEDNESDAY, period=4, room_id="R2"),
            entry_factory(teacher_id="T2", day=Day.WEDNESDAY, period=5, room_id="R1"),
        ]
        tracker = ConflictTracker(schedule)
        for day in Day:
            for period in range(1, 9):
                assert tracker.is_teacher_available(
                    capped_teacher, day, period
                ) == is_teacher_available(capped_teacher, day, period, schedule)
                for room_id in ("R1", "R2"):
                    assert tracker.is_room_available(room_id, day, period) == (
                        is_room_available(room_id, day, period, schedule)
                    )
