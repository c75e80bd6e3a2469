"""Types, structures, and validation for time entries."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Mapping, TypedDict, get_args
from typing_extensions import ReadOnly

from ._common_types import _format_datetime, _normalize_id_sequence, _parse_datetime

__all__ = [
    "TimeEntryRequest",
    "UpdateTimeEntryRequest",
    "TimeIntervalResponse",
    "TimeEntryResponse",
    "validate_create",
    "validate_update",
]


# --- Request Shapes --- #
class TimeEntryRequest(TypedDict, total=False):
    """Payload for creating a time entry. ``start`` is required."""
    start: datetime | str | None
    end: datetime | str | None
    description: str | None
    projectId: str | None
    taskId: str | None
    tagIds: list[str] | None
    billable: bool | None


class UpdateTimeEntryRequest(TimeEntryRequest, total=False):
    """Payload for updating a time entry. ``start`` and ``billable`` are required."""


TimeEntryField = Literal["start", "end", "description", "projectId", "taskId", "tagIds", "billable"]
TIME_ENTRY_FIELDS: tuple[TimeEntryField, ...] = get_args(TimeEntryField)

TextField = Literal["description", "projectId", "taskId"]
TEXT_FIELDS: tuple[TextField, ...] = get_args(TextField)


#region --- VALIDATION ---

def _check_mapping(request: object) -> Mapping[str, Any]:
    if not isinstance(request, Mapping):
        raise TypeError(f"Time entry request must be a dict. Given [{type(request)}]")
    return request


def validate_create(request: TimeEntryRequest | Mapping[str, Any]) -> list[str]:
    """Return the required parameters missing from a create request."""
    request = _check_mapping(request)
    violations: list[str] = []
    if request.get("start") is None:
        violations.append("start")
    return violations


def validate_update(request: UpdateTimeEntryRequest | Mapping[str, Any]) -> list[str]:
    """Return the required parameters missing from an update request.

    ``start`` is reported before ``billable``.
    """
    request = _check_mapping(request)
    violations: list[str] = []
    if request.get("start") is None:
        violations.append("start")
    if request.get("billable") is None:
        violations.append("billable")
    return violations


def _build_payload(request: Mapping[str, Any]) -> dict[str, object]:
    """Convert a validated request into the API's JSON body.

    Unknown keys and ``None`` optionals are dropped.

    Raises
    ------
    ValueError
        If a present field has the wrong type.
    """
    payload: dict[str, object] = {}
    for field in TIME_ENTRY_FIELDS:
        value = request.get(field)
        if value is None:
            continue
        if field in ("start", "end"):
            payload[field] = _format_datetime(value, field=field)
        elif field == "billable":
            if not isinstance(value, bool):
                raise ValueError(f"billable must be a bool. Given [{value!r}]")
            payload[field] = value
        elif field == "tagIds":
            tag_ids = _normalize_id_sequence(value)
            if tag_ids is None:
                raise ValueError(f"tagIds must be a list of str. Given [{type(value)}]")
            payload[field] = tag_ids
        elif field in TEXT_FIELDS:
            if not isinstance(value, str):
                raise ValueError(f"{field} must be a str. Given [{type(value)}]")
            payload[field] = value
    return payload

#endregion


#region --- RESPONSE SHAPES ---

class TimeIntervalResponse(TypedDict, total=False):
    """Readonly time interval of a time entry. ``end`` is None while running."""
    start: ReadOnly[datetime | None]
    end: ReadOnly[datetime | None]
    duration: ReadOnly[str | None]


class TimeEntryResponse(TypedDict, total=False):
    """Readonly time entry dict returned by time entry endpoints."""
    id: ReadOnly[str]
    description: ReadOnly[str | None]
    userId: ReadOnly[str | None]
    workspaceId: ReadOnly[str | None]
    projectId: ReadOnly[str | None]
    taskId: ReadOnly[str | None]
    tagIds: ReadOnly[list[str]]
    billable: ReadOnly[bool]
    isLocked: ReadOnly[bool]
    timeInterval: ReadOnly[TimeIntervalResponse]


def _decode_time_entry(raw: object) -> TimeEntryResponse:
    """Decode a raw time entry, parsing the interval timestamps."""
    if not isinstance(raw, dict):
        raise TypeError(f"Time entry must be a dict. Given [{type(raw)}]")
    entry_id = raw.get("id")
    if not isinstance(entry_id, str) or not entry_id:
        raise ValueError("Time entry is missing its id")

    interval = raw.get("timeInterval") or {}
    if not isinstance(interval, dict):
        raise TypeError(f"timeInterval must be a dict. Given [{type(interval)}]")

    return TimeEntryResponse(
        id=entry_id,
        description=raw.get("description"),
        userId=raw.get("userId"),
        workspaceId=raw.get("workspaceId"),
        projectId=raw.get("projectId"),
        taskId=raw.get("taskId"),
        tagIds=_normalize_id_sequence(raw.get("tagIds") or []) or [],
        billable=bool(raw.get("billable", False)),
        isLocked=bool(raw.get("isLocked", False)),
        timeInterval=TimeIntervalResponse(
            start=_parse_datetime(interval.get("start")),
            end=_parse_datetime(interval.get("end")),
            duration=interval.get("duration"),
        ),
    )


def _decode_optional_time_entry(raw: object) -> TimeEntryResponse | None:
    """Decode a time entry when the body was not empty."""
    if raw is None:
        return None
    return _decode_time_entry(raw)


def _decode_time_entries(raw: object) -> list[TimeEntryResponse]:
    """Decode a list of raw time entries."""
    if not isinstance(raw, list):
        raise TypeError(f"Time entry list must be a list. Given [{type(raw)}]")
    return [_decode_time_entry(item) for item in raw]

#endregion
