"""Types for workspaces and users resources."""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly


class WorkspaceResponse(TypedDict, total=False):
    """Readonly workspace dict returned by workspace endpoints."""
    id: ReadOnly[str]
    name: ReadOnly[str]


class UserResponse(TypedDict, total=False):
    """Readonly user dict returned by ``GET /user``."""
    id: ReadOnly[str]
    name: ReadOnly[str]
    email: ReadOnly[str]
    activeWorkspace: ReadOnly[str | None]
    defaultWorkspace: ReadOnly[str | None]


def _decode_workspace(raw: object) -> WorkspaceResponse:
    if not isinstance(raw, dict) or not isinstance(raw.get("id"), str):
        raise ValueError(f"Workspace must be a dict with an id. Given [{raw!r}]")
    return WorkspaceResponse(id=raw["id"], name=raw.get("name", ""))


def _decode_workspaces(raw: object) -> list[WorkspaceResponse]:
    if not isinstance(raw, list):
        raise TypeError(f"Workspace list must be a list. Given [{type(raw)}]")
    return [_decode_workspace(item) for item in raw]


def _decode_user(raw: object) -> UserResponse:
    if not isinstance(raw, dict) or not isinstance(raw.get("id"), str):
        raise ValueError(f"User must be a dict with an id. Given [{raw!r}]")
    return UserResponse(
        id=raw["id"],
        name=raw.get("name", ""),
        email=raw.get("email", ""),
        activeWorkspace=raw.get("activeWorkspace"),
        defaultWorkspace=raw.get("defaultWorkspace"),
    )


__all__ = ["UserResponse", "WorkspaceResponse"]
