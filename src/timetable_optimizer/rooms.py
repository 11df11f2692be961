"""Room matching for timetable generation."""

from .availability import ConflictTracker
from .models import Day, Room, RoomType, ScheduleEntry, Subject


def get_candidate_rooms(subject: Subject, rooms: list[Room]) -> list[Room]:
    """Get rooms a subject may use, in input order.

    Lab subjects are restricted to rooms of type ``lab``; every other
    subject may use any room.

    Args:
        subject: Subject to place
        rooms: All rooms from the request

    Returns:
        List of Room objects allowed for this subject
    """
    if subject.requires_lab:
        return [room for room in rooms if room.type == RoomType.LAB]
    return list(rooms)


def find_room(
    subject: Subject,
    day: Day,
    period: int,
    rooms: list[Room],
    schedule: list[ScheduleEntry] | ConflictTracker,
) -> Room | None:
    """Find the first usable room for a subject at a slot.

    No capacity ranking is applied: the first free candidate in input order
    wins.

    Args:
        subject: Subject to place
        day: Day of the week
        period: Period number
        rooms: All rooms from the request
        schedule: Entries committed so far, or a tracker indexing them

    Returns:
        Room if one is free, None otherwise
    """
    tracker = schedule if isinstance(schedule, ConflictTracker) else ConflictTracker(schedule)
    for room in get_candidate_rooms(subject, rooms):
        if tracker.is_room_available(room.id, day, period):
            return room
    return None
