"""Public package surface for the clockify Python client."""

from .client import DEFAULT_BASE_URL, Clockify
from .resources._common_types import Failure, InvalidArgument, Response, Success
from .resources.time_entries_types import *
from .resources.tags_types import TagResponse
from .resources.workspaces_types import UserResponse, WorkspaceResponse



__all__ = [
    "DEFAULT_BASE_URL",
    "Clockify",
    "Failure",
    "InvalidArgument",
    "Response",
    "Success",
    "TagResponse",
    "TimeEntryRequest",
    "TimeEntryResponse",
    "TimeIntervalResponse",
    "UpdateTimeEntryRequest",
    "UserResponse",
    "WorkspaceResponse",
]
