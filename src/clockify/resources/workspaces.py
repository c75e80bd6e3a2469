"""Workspace resource wrapper."""

from __future__ import annotations

from typing import Optional

from .base import Resource
from .workspaces_types import WorkspaceResponse, _decode_workspace, _decode_workspaces
from ._common_types import InvalidArgument, Response, _require_id


class Workspaces(Resource):
    """Workspace operations."""

    async def list(self, *, timeout: Optional[int] = None) -> Response[list[WorkspaceResponse]]:
        """Fetch the workspaces the current user belongs to."""
        response = await self._get("/workspaces", timeout=timeout)
        return self._map(response, _decode_workspaces, what="List workspaces")

    async def create(self, name: str, *, timeout: Optional[int] = None) -> Response[WorkspaceResponse]:
        """Create a workspace.

        Raises
        ------
        InvalidArgument
            If ``name`` is blank.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("name", "Argument cannot be empty.")
        response = await self._post("/workspaces", json={"name": name.strip()}, timeout=timeout)
        return self._map(response, _decode_workspace, what="Create workspace")

    async def delete(self, workspace_id: str, *, timeout: Optional[int] = None) -> Response[None]:
        workspace_id = _require_id(workspace_id, "workspace_id")
        response = await self._delete(f"/workspaces/{workspace_id}", timeout=timeout)
        return self._map(response, lambda _data: None, what="Delete workspace")
