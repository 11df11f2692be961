"""Tests for room matching."""

from timetable_optimizer.availability import ConflictTracker
from timetable_optimizer.models import Day, Room, RoomType, Subject
from timetable_optimizer.rooms import find_room, get_candidate_rooms

ROOMS = [
    Room(id=1, name="Room 101", capacity=40, type=RoomType.CLASSROOM),
    Room(id=2, name="Physics Lab", capacity=25, type=RoomType.LAB),
    Room(id=3, name="Chemistry Lab", capacity=30, type=RoomType.LAB),
    Room(id=4, name="Hall", capacity=200, type=RoomType.AUDITORIUM),
]

THEORY = Subject(id=10, name="English", weekly_periods=4)
PRACTICAL = Subject(id=11, name="Chemistry", weekly_periods=2, requires_lab=True)


class TestGetCandidateRooms:
    """Tests for candidate filtering."""

    def test_non_lab_subject_uses_all_rooms(self):
        assert get_candidate_rooms(THEORY, ROOMS) == ROOMS

    def test_lab_subject_uses_only_labs(self):
        assert [r.id for r in get_candidate_rooms(PRACTICAL, ROOMS)] == [2, 3]

    def test_lab_subject_without_labs(self):
        classrooms = [r for r in ROOMS if r.type != RoomType.LAB]
        assert get_candidate_rooms(PRACTICAL, classrooms) == []


class TestFindRoom:
    """Tests for find_room."""

    def test_first_room_in_input_order(self):
        assert find_room(THEORY, Day.MONDAY, 1, ROOMS, []).id == 1

    def test_no_capacity_ranking(self):
        # The smaller lab comes first in the list and wins
        assert find_room(PRACTICAL, Day.MONDAY, 1, ROOMS, []).id == 2

    def test_skips_occupied_room(self, entry_factory):
        schedule = [entry_factory(room_id=1, day=Day.MONDAY, period=1)]
        assert find_room(THEORY, Day.MONDAY, 1, ROOMS, schedule).id == 2
        assert find_room(THEORY, Day.MONDAY, 2, ROOMS, schedule).id == 1

    def test_all_labs_busy(self, entry_factory):
        schedule = [
            entry_factory(room_id=2, day=Day.MONDAY, period=1),
            entry_factory(room_id=3, day=Day.MONDAY, period=1, class_id="C2"),
        ]
        assert find_room(PRACTICAL, Day.MONDAY, 1, ROOMS, schedule) is None

    def test_accepts_tracker(self, entry_factory):
        tracker = ConflictTracker([entry_factory(room_id=1)])
        assert find_room(THEORY, Day.MONDAY, 1, ROOMS, tracker).id == 2

    def test_no_rooms(self):
        assert find_room(THEORY, Day.MONDAY, 1, [], []) is None
