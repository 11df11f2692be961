"""Loading of scheduling requests and optimizer settings from files."""

import csv
import json
from dataclasses import fields
from pathlib import Path
from typing import Any

from .constants import DEFAULT_SCORING_WEIGHTS, ScoringWeights
from .constraints import get_constraint, standard_constraints
from .engine import SchedulingBudget
from .exceptions import InvalidRequestError, RequestFileError
from .models import Constraint, Room, RoomType, SchedulingRequest, SchoolClass, Subject, Teacher

REQUEST_SECTIONS = {
    "classes": SchoolClass,
    "subjects": Subject,
    "teachers": Teacher,
    "rooms": Room,
}


def load_json(path: Path | str) -> Any:
    """Load a JSON document, wrapping read and decode failures."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise RequestFileError(str(path), "file not found") from None
    except json.JSONDecodeError as e:
        raise RequestFileError(str(path), f"invalid JSON ({e.msg} at line {e.lineno})") from e


def parse_section(data: dict[str, Any], section: str) -> list:
    """Parse one list section of a request document into model objects."""
    model = REQUEST_SECTIONS[section]
    items = data.get(section, [])
    if not isinstance(items, list):
        raise InvalidRequestError("expected a list", section=section)

    parsed = []
    for index, item in enumerate(items):
        try:
            parsed.append(model.from_dict(item))
        except KeyError as e:
            raise InvalidRequestError(f"missing key {e}", section, index) from e
        except (TypeError, ValueError) as e:
            raise InvalidRequestError(str(e), section, index) from e
    return parsed


def parse_constraints(items: list | None) -> list[Constraint]:
    """Build constraints from registry keys.

    Each item is a key (``"balanced_daily_load"``) or an object with a key
    and weight override (``{"name": "balanced_daily_load", "weight": 0.5}``).
    ``None`` selects the full standard set.
    """
    if items is None:
        return standard_constraints()
    if not isinstance(items, list):
        raise InvalidRequestError("expected a list", "constraints")

    constraints = []
    for index, item in enumerate(items):
        if isinstance(item, str):
            constraints.append(get_constraint(item))
        elif isinstance(item, dict) and "name" in item:
            weight = item.get("weight")
            try:
                weight = float(weight) if weight is not None else None
            except (TypeError, ValueError) as e:
                raise InvalidRequestError(f"invalid weight {weight!r}", "constraints", index) from e
            constraints.append(get_constraint(item["name"], weight))
        else:
            raise InvalidRequestError(
                "expected a constraint key or {'name': ..., 'weight': ...}",
                "constraints",
                index,
            )
    return constraints


def parse_scoring_weights(data: dict[str, Any] | None) -> ScoringWeights:
    """Override default scoring weights with the keys present in ``data``."""
    if not data:
        return DEFAULT_SCORING_WEIGHTS
    if not isinstance(data, dict):
        raise InvalidRequestError("expected an object", "scoring")
    known = {f.name for f in fields(ScoringWeights)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidRequestError(f"unknown weights: {', '.join(unknown)}", "scoring")
    try:
        return ScoringWeights(**{key: float(value) for key, value in data.items()})
    except (TypeError, ValueError) as e:
        raise InvalidRequestError(f"weights must be numbers ({e})", "scoring") from e


def parse_budget(data: dict[str, Any] | None) -> SchedulingBudget | None:
    """Parse the optional ``budget`` section."""
    if not data:
        return None
    if not isinstance(data, dict):
        raise InvalidRequestError("expected an object", "budget")
    max_iterations = data.get("max_iterations")
    time_limit = data.get("time_limit")
    try:
        return SchedulingBudget(
            max_iterations=int(max_iterations) if max_iterations is not None else None,
            time_limit=float(time_limit) if time_limit is not None else None,
        )
    except (TypeError, ValueError) as e:
        raise InvalidRequestError(f"limits must be numbers ({e})", "budget") from e


def parse_request(data: dict[str, Any]) -> SchedulingRequest:
    """Build a SchedulingRequest from a request document."""
    if not isinstance(data, dict):
        raise InvalidRequestError("request document must be a JSON object")
    return SchedulingRequest(
        classes=parse_section(data, "classes"),
        subjects=parse_section(data, "subjects"),
        teachers=parse_section(data, "teachers"),
        rooms=parse_section(data, "rooms"),
        constraints=parse_constraints(data.get("constraints")),
    )


def load_request(path: Path | str) -> SchedulingRequest:
    """Load a scheduling request from a JSON file."""
    return parse_request(load_json(path))


def load_rooms_csv(rooms_path: Path | str) -> list[Room]:
    """Load rooms from a CSV file with columns id, name, capacity, type.

    Args:
        rooms_path: Path to rooms.csv file

    Returns:
        List of Room objects in file order
    """
    path = Path(rooms_path)
    if not path.exists():
        raise RequestFileError(str(path), "file not found")

    rooms = []
    with open(path, encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for index, row in enumerate(reader):
            name = (row.get("name") or "").strip()
            if not name:
                continue

            room_id = (row.get("id") or "").strip() or name
            capacity_str = (row.get("capacity") or "0").strip()
            type_str = (row.get("type") or RoomType.CLASSROOM.value).strip().lower()
            try:
                rooms.append(
                    Room(
                        id=int(room_id) if room_id.isdigit() else room_id,
                        name=name,
                        capacity=int(capacity_str) if capacity_str else 0,
                        type=RoomType(type_str),
                    )
                )
            except ValueError as e:
                raise InvalidRequestError(str(e), "rooms.csv", index) from e
    return rooms


class ConfigLoader:
    """Unified loader for a request file and its optimizer settings.

    The request JSON may carry two optional sections next to the request data:
    - ``scoring``: overrides of ScoringWeights fields
    - ``budget``: ``max_iterations`` and/or ``time_limit`` for the engine
    """

    def __init__(self, request_path: Path, rooms_csv: Path | None = None):
        """
        Initialize configuration loader.

        Args:
            request_path: Path to the request JSON file.
            rooms_csv: Optional rooms.csv; replaces the request's rooms.
        """
        self.request_path = Path(request_path)
        data = load_json(self.request_path)
        self.request = parse_request(data)
        if rooms_csv is not None:
            self.request = SchedulingRequest(
                classes=self.request.classes,
                subjects=self.request.subjects,
                teachers=self.request.teachers,
                rooms=load_rooms_csv(rooms_csv),
                constraints=self.request.constraints,
            )
        self.weights = parse_scoring_weights(data.get("scoring"))
        self.budget = parse_budget(data.get("budget"))
