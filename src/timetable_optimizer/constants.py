"""Constants for timetable generation."""

from dataclasses import dataclass

from .models import Day, TimeSlot

# Weekly grid: five teaching days, eight periods per day
WEEK_DAYS = [Day.MONDAY, Day.TUESDAY, Day.WEDNESDAY, Day.THURSDAY, Day.FRIDAY]
PERIODS_PER_DAY = 8
MIN_PERIOD = 1
MAX_PERIOD = PERIODS_PER_DAY

# Period times
# 45-minute periods, short break after period 3 and lunch after period 6
TIME_SLOTS = [
    {"period": 1, "start": "08:00", "end": "08:45"},
    {"period": 2, "start": "08:45", "end": "09:30"},
    {"period": 3, "start": "09:30", "end": "10:15"},
    {"period": 4, "start": "10:45", "end": "11:30"},
    {"period": 5, "start": "11:30", "end": "12:15"},
    {"period": 6, "start": "12:15", "end": "13:00"},
    {"period": 7, "start": "13:45", "end": "14:30"},
    {"period": 8, "start": "14:30", "end": "15:15"},
]

# Subjects preferred in the morning (matched by substring of the subject name)
DIFFICULT_SUBJECTS = ["Mathematics", "Physics", "Chemistry", "Further Mathematics"]

# Last period that still counts as "morning"
MORNING_LAST_PERIOD = 4

# Share of difficult-subject periods that must fall in the morning
MORNING_SHARE_THRESHOLD = 0.7

# Maximum periods a class should have on a single day
MAX_CLASS_DAILY_PERIODS = 6


@dataclass(frozen=True)
class ScoringWeights:
    """Tunable weights of the schedule quality score."""

    base_score: float = 100.0
    hard_violation_penalty: float = 25.0
    soft_weight_multiplier: float = 10.0
    idle_period_penalty: float = 0.5
    balance_bonus: float = 0.3
    balance_ceiling: float = 10.0


DEFAULT_SCORING_WEIGHTS = ScoringWeights()

MIN_SCORE = 0
MAX_SCORE = 100


WEEKLY_CALENDAR = [
    TimeSlot(day=day, period=slot["period"], start_time=slot["start"], end_time=slot["end"])
    for day in WEEK_DAYS
    for slot in TIME_SLOTS
]


def get_slot_info(period: int) -> dict | None:
    """Get slot info by period number."""
    for slot in TIME_SLOTS:
        if slot["period"] == period:
            return slot
    return None


def get_slot_time_range(period: int) -> str:
    """Get time range string for a period (e.g., '08:00-08:45')."""
    slot = get_slot_info(period)
    if slot:
        return f"{slot['start']}-{slot['end']}"
    return ""


def get_time_slot(day: Day, period: int) -> TimeSlot | None:
    """Get the calendar cell for a day and period."""
    for slot in WEEKLY_CALENDAR:
        if slot.day == day and slot.period == period:
            return slot
    return None


def iter_week_slots():
    """Yield every (day, period) cell of the week in scheduling order.

    Days run Monday to Friday and periods 1 to 8 within each day.
    """
    for day in WEEK_DAYS:
        for period in range(MIN_PERIOD, MAX_PERIOD + 1):
            yield day, period
