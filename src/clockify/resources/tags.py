"""Workspace tag resource wrapper."""

from __future__ import annotations

from typing import Optional

from .base import Resource
from .tags_types import TagResponse, _decode_tag, _decode_tags
from ._common_types import InvalidArgument, Response, _require_id


class Tags(Resource):
    """Tag operations scoped to a workspace."""

    async def list(
        self,
        workspace_id: str,
        *,
        timeout: Optional[int] = None,
    ) -> Response[list[TagResponse]]:
        """Fetch all tags on a workspace.

        Parameters
        ----------
        workspace_id
            Workspace identifier.
        timeout
            Request timeout in seconds.

        Returns
        -------
        Success[list[TagResponse]] | Failure
            Tags in the order returned by the service.
        """
        workspace_id = _require_id(workspace_id, "workspace_id")
        response = await self._get(f"/workspaces/{workspace_id}/tags", timeout=timeout)
        return self._map(response, _decode_tags, what="List tags")

    async def add(
        self,
        workspace_id: str,
        name: str,
        *,
        timeout: Optional[int] = None,
    ) -> Response[TagResponse]:
        """Create a tag on a workspace.

        Raises
        ------
        InvalidArgument
            If ``name`` or ``workspace_id`` is blank.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("name", "Argument cannot be empty.")
        workspace_id = _require_id(workspace_id, "workspace_id")

        response = await self._post(f"/workspaces/{workspace_id}/tags", json={"name": name.strip()}, timeout=timeout)
        return self._map(response, _decode_tag, what="Create tag")
