"""Shared types and validation helpers for resources.

This module contains:
- The response envelope (``Success`` / ``Failure``) returned by every operation
- ``InvalidArgument``, raised for local validation failures before dispatch
- Timestamp encoding/decoding between aware datetimes and the API's ISO strings
- Common validation normalizers (path identifiers, ID sequences)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, Literal, Sequence, TypeVar, Union

from requests.utils import quote

from ..utils import unique_in_order

_logger = logging.getLogger(__name__)

T = TypeVar("T")


# --- Response Envelope --- #
@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful remote call carrying the decoded payload."""
    data: T
    status_code: int = 200

    @property
    def is_successful(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed remote call.

    ``status_code`` is ``None`` when no HTTP response was received
    (connection errors, timeouts).
    """
    status_code: int | None
    message: str

    @property
    def is_successful(self) -> Literal[False]:
        return False


Response = Union[Success[T], Failure]


# --- Local Validation Errors --- #
class InvalidArgument(ValueError):
    """Raised when a required argument is missing, empty or malformed.

    ``param_name`` is the Python-side name: the API field key for request
    fields (``start``, ``billable``) or the keyword for path identifiers
    (``workspace_id``).
    """

    def __init__(self, param_name: str, reason: str = "Argument cannot be null.") -> None:
        self.param_name = param_name
        super().__init__(f"{reason} (Parameter '{param_name}')")


def _raise_first(violations: Sequence[str]) -> None:
    """Raise ``InvalidArgument`` for the first violated parameter, if any."""
    if violations:
        raise InvalidArgument(violations[0])


def _require_id(value: object, param_name: str) -> str:
    """Return a path identifier escaped for use as one URL segment.

    Raises ``InvalidArgument`` for blank identifiers and for ones that would
    change the request path (slashes, dot segments).
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(param_name, "Argument cannot be empty.")
    value = value.strip()
    if "/" in value or "\\" in value or value in (".", ".."):
        raise InvalidArgument(param_name, "Argument is not a valid identifier.")
    return quote(value, safe="")


# --- Timestamps --- #
def _format_datetime(value: datetime | str | object, *, field: str) -> str:
    """Encode a timestamp for the API as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC.

    Parameters
    ----------
    value
        Aware datetime or ISO-8601 string. Naive datetimes are taken as UTC.
    field
        Field name used in log and error messages.

    Raises
    ------
    ValueError
        If the value is not a datetime or parseable ISO-8601 string.
    """
    if isinstance(value, str):
        value = _parse_datetime(value)
    if not isinstance(value, datetime):
        raise ValueError(f"{field} must be a datetime. Given [{type(value)}]")
    if value.tzinfo is None:
        _logger.warning("Naive datetime for %s interpreted as UTC: %s", field, value)
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _parse_datetime(value: object) -> datetime | None:
    """Decode an API timestamp into an aware UTC datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"Input must be an ISO-8601 timestamp. Given [{value!r}]") from None
    else:
        raise ValueError(f"Input must be a timestamp. Given [{type(value)}]")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


# --- ID Sequence Normalization --- #
def _normalize_id_sequence(ids: str | Sequence[str] | object) -> list[str] | None:
    """Normalize a single ID or sequence of IDs to a deduplicated list.

    Parameters
    ----------
    ids
        Single string ID or sequence of string IDs.

    Returns
    -------
    list[str] | None
        Deduplicated list of stripped, non-empty IDs, or None if the input is
        neither a string nor a sequence. An empty list is kept, so that an
        update can clear all tags.
    """
    if isinstance(ids, str):
        id_list: list[object] = [ids]
    elif isinstance(ids, Sequence) and not isinstance(ids, bytes):
        id_list = list(ids)
    elif isinstance(ids, (set, frozenset)):
        id_list = sorted(ids, key=str)
    else:
        return None

    valid_ids = [id_val.strip() for id_val in id_list if isinstance(id_val, str) and id_val.strip()]
    return unique_in_order(valid_ids)
