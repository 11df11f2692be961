"""Rules for manual edits of a published timetable.

An administrator may insert or move a single entry by hand. These rules
decide whether the edit is allowed and which existing entries it displaces:
- Teacher double-booking is never allowed
- A room can only be booked once per slot
- Within one class slot, subject priority decides between competing entries
- Solo subjects never share a slot; co-running subjects may share one
"""

from dataclasses import dataclass, field

from .models import EntityId, ScheduleEntry

DEFAULT_PRIORITY = 1


@dataclass(frozen=True)
class SubjectRule:
    """Slot-sharing settings of one subject."""

    name: str = "Subject"
    priority: int = DEFAULT_PRIORITY
    is_solo: bool = False
    can_co_run: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "SubjectRule":
        return cls(
            name=data.get("name") or "Subject",
            priority=int(data.get("priority", DEFAULT_PRIORITY)),
            is_solo=bool(data.get("is_solo", False)),
            can_co_run=bool(data.get("can_co_run", False)),
        )


@dataclass
class EditDecision:
    """Outcome of applying the edit rules to a candidate entry."""

    entries_to_upsert: list[ScheduleEntry] = field(default_factory=list)
    entries_to_delete: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def allowed(self) -> bool:
        return self.error is None


def get_subject_rule(
    subject_id: EntityId, rules: dict[EntityId, SubjectRule]
) -> SubjectRule:
    """Get the rule for a subject, falling back to defaults."""
    return rules.get(subject_id, SubjectRule())


def _id_sort_key(entry_id: EntityId) -> tuple[int, int, str]:
    """Numeric ids sort by value and before other ids, which sort as text."""
    text = str(entry_id)
    if isinstance(entry_id, int) or text.isdigit():
        return (0, int(text), "")
    return (1, 0, text)


def _strongest(
    occupants: list[tuple[ScheduleEntry, SubjectRule]],
) -> tuple[ScheduleEntry, SubjectRule]:
    """Highest priority occupant; ties broken by subject name, then entry id."""
    return sorted(
        occupants,
        key=lambda item: (-item[1].priority, item[1].name, _id_sort_key(item[0].id)),
    )[0]


def _missing_fields(entry: ScheduleEntry) -> bool:
    """Day, period, class, subject and teacher must all be set.

    Empty values count as missing, including period 0 and id 0.
    """
    required = (entry.day, entry.period, entry.class_id, entry.subject_id, entry.teacher_id)
    return any(not value for value in required)


def _find_teacher_conflict(
    existing: list[ScheduleEntry], candidate: ScheduleEntry
) -> ScheduleEntry | None:
    for entry in existing:
        if (
            entry.day == candidate.day
            and entry.period == candidate.period
            and entry.teacher_id == candidate.teacher_id
            and entry.id != candidate.id
        ):
            return entry
    return None


def _find_room_conflict(
    existing: list[ScheduleEntry], candidate: ScheduleEntry
) -> ScheduleEntry | None:
    if candidate.room_id is None:
        return None
    for entry in existing:
        if (
            entry.day == candidate.day
            and entry.period == candidate.period
            and entry.room_id == candidate.room_id
            and entry.id != candidate.id
        ):
            return entry
    return None


def apply_scheduling_rules(
    existing_entries: list[ScheduleEntry],
    candidate: ScheduleEntry,
    subject_rules: dict[EntityId, SubjectRule] | None = None,
) -> EditDecision:
    """Decide whether a candidate entry can be inserted or updated.

    Args:
        existing_entries: Entries currently in the timetable
        candidate: Entry to insert, or an existing entry with changed fields
        subject_rules: Subject id -> SubjectRule; unknown subjects use defaults

    Returns:
        EditDecision with the entry to upsert and ids to delete, or an error
    """
    rules = subject_rules or {}
    decision = EditDecision()

    if _missing_fields(candidate):
        decision.error = "Missing required timetable fields."
        return decision

    if _find_teacher_conflict(existing_entries, candidate):
        decision.error = "Teacher is already assigned to another class in this slot."
        return decision

    room_conflict = _find_room_conflict(existing_entries, candidate)
    if room_conflict:
        room_name = room_conflict.room_name or "Room"
        decision.error = f"{room_name} is already booked at this time."
        return decision

    candidate_rule = get_subject_rule(candidate.subject_id, rules)
    occupants = [
        (entry, get_subject_rule(entry.subject_id, rules))
        for entry in existing_entries
        if entry.day == candidate.day
        and entry.period == candidate.period
        and entry.class_id == candidate.class_id
        and entry.id != candidate.id
    ]
    displaced: list[ScheduleEntry] = []

    # Solo subjects cannot share slots
    solo_occupants = [item for item in occupants if item[1].is_solo]
    if candidate_rule.is_solo and occupants:
        _, rule = _strongest(occupants)
        if candidate_rule.priority <= rule.priority:
            decision.error = (
                f"{rule.name} already occupies this slot with equal or higher priority."
            )
            return decision
        displaced.extend(entry for entry, _ in occupants)
    elif not candidate_rule.is_solo and solo_occupants:
        _, rule = _strongest(solo_occupants)
        if candidate_rule.priority <= rule.priority:
            decision.error = f"{rule.name} is marked as solo and already scheduled here."
            return decision
        displaced.extend(entry for entry, _ in occupants)

    blocking = [item for item in occupants if not item[1].can_co_run]
    if blocking:
        _, rule = _strongest(blocking)
        if candidate_rule.priority > rule.priority:
            displaced.extend(entry for entry, _ in blocking)
        elif candidate_rule.can_co_run:
            decision.error = f"{rule.name} already owns this slot."
            return decision
        elif candidate_rule.priority == rule.priority:
            decision.error = f"{rule.name} has the same priority and remains scheduled."
            return decision
        else:
            decision.error = f"{rule.name} has higher priority for this slot."
            return decision
    elif occupants and not candidate_rule.can_co_run:
        _, rule = _strongest(occupants)
        if candidate_rule.priority > rule.priority:
            displaced.extend(entry for entry, _ in occupants)
        elif candidate_rule.priority == rule.priority:
            decision.error = f"{rule.name} already occupies this slot at the same priority."
            return decision
        else:
            decision.error = f"{rule.name} has higher priority for this slot."
            return decision

    for entry in displaced:
        if entry.id not in decision.entries_to_delete:
            decision.entries_to_delete.append(entry.id)
    decision.entries_to_upsert.append(candidate)
    return decision


def can_add_co_running_subject(
    existing_entries: list[ScheduleEntry],
    candidate: ScheduleEntry,
    subject_rules: dict[EntityId, SubjectRule] | None = None,
) -> bool:
    """Check if the candidate could be added without an error."""
    return apply_scheduling_rules(existing_entries, candidate, subject_rules).allowed
