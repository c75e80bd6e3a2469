"""Resource module exports."""

from .tags import Tags
from .time_entries import TimeEntries
from .users import Users
from .workspaces import Workspaces

__all__ = [
    "Tags",
    "TimeEntries",
    "Users",
    "Workspaces",
]
