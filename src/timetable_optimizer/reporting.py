"""Load matrices and summary statistics for generated timetables."""

from typing import Any

import pandas as pd

from .constants import WEEK_DAYS
from .models import OptimizationResult, ScheduleEntry
from .scoring import calculate_teacher_idle_time, calculate_workload_balance

DAY_COLUMNS = [day.value for day in WEEK_DAYS]


def schedule_to_frame(schedule: list[ScheduleEntry]) -> pd.DataFrame:
    """Flatten schedule entries into a DataFrame, one row per entry."""
    columns = list(ScheduleEntry.__dataclass_fields__)
    return pd.DataFrame([entry.to_dict() for entry in schedule], columns=columns)


def _load_frame(schedule: list[ScheduleEntry], key: str) -> pd.DataFrame:
    """Count periods per ``key`` value and weekday.

    Args:
        schedule: Schedule entries
        key: Entry column to group rows by (e.g. 'teacher_name')

    Returns:
        DataFrame indexed by ``key`` with one column per weekday
    """
    df = schedule_to_frame(schedule)
    if df.empty:
        frame = pd.DataFrame(columns=DAY_COLUMNS, dtype="int64")
        frame.index.name = key
        return frame

    frame = pd.crosstab(df[key], df["day"]).reindex(columns=DAY_COLUMNS, fill_value=0)
    frame.columns.name = None
    return frame.astype("int64")


def teacher_load_frame(schedule: list[ScheduleEntry]) -> pd.DataFrame:
    """Periods per teacher per weekday."""
    return _load_frame(schedule, "teacher_name")


def class_load_frame(schedule: list[ScheduleEntry]) -> pd.DataFrame:
    """Periods per class per weekday."""
    return _load_frame(schedule, "class_name")


def schedule_statistics(result: OptimizationResult) -> dict[str, Any]:
    """Summary statistics of a result.

    Returns:
        Dictionary with totals, distribution by day/room/teacher and the
        idle-time and balance heuristics used by the score
    """
    df = schedule_to_frame(result.schedule)
    by_day = {day: 0 for day in DAY_COLUMNS}
    by_room: dict[str, int] = {}
    by_teacher: dict[str, int] = {}
    if not df.empty:
        by_day.update({k: int(v) for k, v in df["day"].value_counts().items()})
        by_room = {
            str(k): int(v) for k, v in df["room_name"].dropna().value_counts().sort_index().items()
        }
        by_teacher = {
            str(k): int(v) for k, v in df["teacher_name"].value_counts().sort_index().items()
        }

    return {
        "total_entries": result.total_entries,
        "score": result.score,
        "violated_constraints": len(result.violated_constraints),
        "suggestions": len(result.suggestions),
        "by_day": by_day,
        "by_room": by_room,
        "by_teacher": by_teacher,
        "teacher_idle_time": calculate_teacher_idle_time(result.schedule),
        "workload_balance": round(calculate_workload_balance(result.schedule), 2),
    }
