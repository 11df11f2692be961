"""Tests for load frames and statistics."""

from timetable_optimizer.models import Day, OptimizationResult
from timetable_optimizer.optimizer import optimize_schedule
from timetable_optimizer.reporting import (
    DAY_COLUMNS,
    class_load_frame,
    schedule_statistics,
    schedule_to_frame,
    teacher_load_frame,
)


class TestFrames:
    """Tests for DataFrame conversions."""

    def test_schedule_to_frame(self, entry_factory):
        df = schedule_to_frame([entry_factory(), entry_factory(period=2)])
        assert len(df) == 2
        assert list(df["day"]) == ["Monday", "Monday"]
        assert "room_name" in df.columns

    def test_empty_frame_has_columns(self):
        df = schedule_to_frame([])
        assert df.empty
        assert "teacher_id" in df.columns

    def test_teacher_load(self, entry_factory):
        schedule = [
            entry_factory(teacher_id="T1", period=1),
            entry_factory(teacher_id="T1", period=2),
            entry_factory(teacher_id="T1", day=Day.FRIDAY, period=1),
            entry_factory(teacher_id="T2", class_id="C2", period=1),
        ]
        frame = teacher_load_frame(schedule)
        assert list(frame.columns) == DAY_COLUMNS
        assert frame.loc["Teacher T1", "Monday"] == 2
        assert frame.loc["Teacher T1", "Friday"] == 1
        assert frame.loc["Teacher T2", "Tuesday"] == 0

    def test_class_load(self, entry_factory):
        schedule = [entry_factory(class_id="C1", period=p) for p in range(1, 4)]
        frame = class_load_frame(schedule)
        assert frame.loc["Class C1"].sum() == 3

    def test_empty_load(self):
        frame = teacher_load_frame([])
        assert frame.empty
        assert list(frame.columns) == DAY_COLUMNS


class TestStatistics:
    """Tests for schedule_statistics."""

    def test_simple_request(self, simple_request):
        statistics = schedule_statistics(optimize_schedule(simple_request))
        assert statistics["total_entries"] == 5
        assert statistics["score"] == 100
        assert statistics["by_day"] == {
            "Monday": 5,
            "Tuesday": 0,
            "Wednesday": 0,
            "Thursday": 0,
            "Friday": 0,
        }
        assert statistics["by_room"] == {"Room 101": 5}
        assert statistics["by_teacher"] == {"Mrs Adeyemi": 5}
        assert statistics["teacher_idle_time"] == 0
        assert statistics["workload_balance"] == 6.0

    def test_empty_result(self):
        statistics = schedule_statistics(OptimizationResult())
        assert statistics["total_entries"] == 0
        assert sum(statistics["by_day"].values()) == 0
        assert statistics["by_room"] == {}
        assert statistics["workload_balance"] == 0.0
