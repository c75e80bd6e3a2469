"""Time entry helper tools."""

from __future__ import annotations

import asyncio
from datetime import timedelta
from typing import Iterable, TYPE_CHECKING

from tqdm.asyncio import tqdm

from clockify.resources._common_types import Response
from clockify.resources.time_entries_types import TimeEntryResponse

if TYPE_CHECKING:  # pragma: no cover
    from clockify.client import Clockify


async def fetch_many(
    client: "Clockify",
    workspace_id: str,
    time_entry_ids: Iterable[str],
    *,
    progress: bool = False,
) -> list[Response[TimeEntryResponse]]:
    """Fetch several time entries concurrently.

    Parameters
    ----------
    client
        Clockify client.
    workspace_id
        Workspace the entries belong to.
    time_entry_ids
        Entry identifiers; duplicates are fetched once per occurrence.
    progress
        Show a tqdm progress bar while requests complete.

    Returns
    -------
    list of Success | Failure
        One envelope per ID, in input order.
    """
    calls = [client.time_entries.get(workspace_id, time_entry_id) for time_entry_id in time_entry_ids]
    if not calls:
        return []
    if progress:
        return list(await tqdm.gather(*calls, desc="Fetching time entries", unit=" entries"))
    return list(await asyncio.gather(*calls))


def total_duration(entries: Iterable[TimeEntryResponse]) -> timedelta:
    """Sum the closed intervals of decoded entries. Running entries are skipped."""
    total = timedelta()
    for entry in entries:
        interval = entry.get("timeInterval") or {}
        start = interval.get("start")
        end = interval.get("end")
        if start is None or end is None:
            continue
        total += end - start
    return total
