"""Time entry resource wrapper."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from .base import Resource
from .time_entries_types import (
    TimeEntryRequest,
    TimeEntryResponse,
    UpdateTimeEntryRequest,
    _build_payload,
    _decode_optional_time_entry,
    _decode_time_entries,
    _decode_time_entry,
    validate_create,
    validate_update,
)
from ._common_types import InvalidArgument, Response, _format_datetime, _raise_first, _require_id


class TimeEntries(Resource):
    """Time entry operations scoped to a workspace."""

    async def create(
        self,
        workspace_id: str,
        request: TimeEntryRequest | Mapping[str, Any],
        *,
        timeout: Optional[int] = None,
    ) -> Response[TimeEntryResponse]:
        """Create a time entry.

        Parameters
        ----------
        workspace_id
            Workspace the entry belongs to.
        request
            Entry payload; ``start`` is required.
        timeout
            Request timeout in seconds.

        Returns
        -------
        Success[TimeEntryResponse] | Failure
            The created entry as stored by the service.

        Raises
        ------
        InvalidArgument
            If ``start`` is missing or ``workspace_id`` is empty. Nothing is sent.
        """
        _raise_first(validate_create(request))
        workspace_id = _require_id(workspace_id, "workspace_id")
        payload = _build_payload(request)

        response = await self._post(f"/workspaces/{workspace_id}/time-entries", json=payload, timeout=timeout)
        return self._map(response, _decode_time_entry, what="Create time entry")

    async def get(
        self,
        workspace_id: str,
        time_entry_id: str,
        *,
        timeout: Optional[int] = None,
    ) -> Response[TimeEntryResponse]:
        """Fetch a single time entry by ID."""
        workspace_id = _require_id(workspace_id, "workspace_id")
        time_entry_id = _require_id(time_entry_id, "time_entry_id")

        response = await self._get(f"/workspaces/{workspace_id}/time-entries/{time_entry_id}", timeout=timeout)
        return self._map(response, _decode_time_entry, what="Get time entry")

    async def update(
        self,
        workspace_id: str,
        time_entry_id: str,
        request: UpdateTimeEntryRequest | Mapping[str, Any],
        *,
        timeout: Optional[int] = None,
    ) -> Response[TimeEntryResponse | None]:
        """Update an existing time entry.

        Parameters
        ----------
        workspace_id
            Workspace the entry belongs to.
        time_entry_id
            Entry identifier.
        request
            Entry payload; ``start`` and ``billable`` are required. The service
            replaces the entry, so omitted optional fields are cleared.
        timeout
            Request timeout in seconds.

        Returns
        -------
        Success[TimeEntryResponse | None] | Failure
            The updated entry when the service returns one.

        Raises
        ------
        InvalidArgument
            If ``start`` or ``billable`` is missing (``start`` is reported first),
            or an identifier is empty. Nothing is sent.
        """
        _raise_first(validate_update(request))
        workspace_id = _require_id(workspace_id, "workspace_id")
        time_entry_id = _require_id(time_entry_id, "time_entry_id")
        payload = _build_payload(request)

        response = await self._put(
            f"/workspaces/{workspace_id}/time-entries/{time_entry_id}", json=payload, timeout=timeout
        )
        return self._map(response, _decode_optional_time_entry, what="Update time entry")

    async def delete(
        self,
        workspace_id: str,
        time_entry_id: str,
        *,
        timeout: Optional[int] = None,
    ) -> Response[None]:
        """Delete a time entry. Repeated deletes are reported by the service."""
        workspace_id = _require_id(workspace_id, "workspace_id")
        time_entry_id = _require_id(time_entry_id, "time_entry_id")

        response = await self._delete(f"/workspaces/{workspace_id}/time-entries/{time_entry_id}", timeout=timeout)
        return self._map(response, lambda _data: None, what="Delete time entry")

    async def list_for_user(
        self,
        workspace_id: str,
        user_id: str,
        *,
        description: Optional[str] = None,
        start: Optional[datetime | str] = None,
        end: Optional[datetime | str] = None,
        project: Optional[str] = None,
        in_progress: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        timeout: Optional[int] = None,
    ) -> Response[list[TimeEntryResponse]]:
        """List a user's time entries in a workspace.

        Parameters
        ----------
        workspace_id
            Workspace to search.
        user_id
            Owner of the entries, e.g. from ``client.users.current()``.
        description
            Only entries whose description contains this text.
        start, end
            Only entries inside this range.
        project
            Only entries on this project ID.
        in_progress
            Only running (``True``) entries.
        page, page_size
            Paging; the service applies its own defaults when omitted.
        timeout
            Request timeout in seconds.

        Returns
        -------
        Success[list[TimeEntryResponse]] | Failure
            Matching entries in the order returned by the service.
        """
        workspace_id = _require_id(workspace_id, "workspace_id")
        user_id = _require_id(user_id, "user_id")

        params: dict[str, object] = {}
        if description is not None:
            params["description"] = description
        if start is not None:
            params["start"] = _format_datetime(start, field="start")
        if end is not None:
            params["end"] = _format_datetime(end, field="end")
        if project is not None:
            params["project"] = project
        if in_progress is not None:
            params["in-progress"] = "true" if in_progress else "false"
        if page is not None:
            if isinstance(page, bool) or not isinstance(page, int) or page < 1:
                raise InvalidArgument("page", "Argument must be a positive int.")
            params["page"] = page
        if page_size is not None:
            if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
                raise InvalidArgument("page_size", "Argument must be a positive int.")
            params["page-size"] = page_size

        response = await self._get(
            f"/workspaces/{workspace_id}/user/{user_id}/time-entries",
            params=params or None,
            timeout=timeout,
        )
        return self._map(response, _decode_time_entries, what="List time entries")
