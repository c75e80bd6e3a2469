"""CLI demo that exercises the :class:`clockify.Clockify` time entry helpers.

Run with the virtual environment activated::

    CLOCKIFY_API_KEY=... python examples/demo_time_entries.py

A throwaway workspace is created and deleted again at the end.
"""

import asyncio
import logging
import os
import sys
from datetime import datetime, timedelta, timezone
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from clockify import Clockify
from clockify.tools.time_entries import total_duration

logging.basicConfig(level=logging.INFO)


async def main() -> None:
    client = Clockify()

    workspace = await client.workspaces.create("TimeEntryWorkspace")
    if not workspace.is_successful:
        print(f"Could not create workspace: {workspace.message}")
        return
    workspace_id = workspace.data["id"]

    try:
        now = datetime.now(timezone.utc)
        created = await client.time_entries.create(
            workspace_id,
            {"start": now - timedelta(hours=1), "end": now, "description": "Demo entry"},
        )
        if not created.is_successful:
            print(f"Create failed: {created.message}")
            return
        pprint(created.data)

        updated = await client.time_entries.update(
            workspace_id,
            created.data["id"],
            {"start": now - timedelta(hours=2), "end": now, "billable": True, "description": "Demo entry"},
        )
        print(f"Update successful: {updated.is_successful}")

        user = await client.users.current()
        if user.is_successful:
            entries = await client.time_entries.list_for_user(workspace_id, user.data["id"])
            if entries.is_successful:
                print(f"{len(entries.data)} entries, {total_duration(entries.data)} tracked")

        tags = await client.tags.list(workspace_id)
        print(f"Tags: {tags.data if tags.is_successful else tags.message}")

        deleted = await client.time_entries.delete(workspace_id, created.data["id"])
        print(f"Delete successful: {deleted.is_successful}")
    finally:
        await client.workspaces.delete(workspace_id)


if __name__ == "__main__":
    asyncio.run(main())
