"""User resource wrapper."""

from __future__ import annotations

from typing import Optional

from .base import Resource
from .workspaces_types import UserResponse, _decode_user
from ._common_types import Response


class Users(Resource):
    """User operations."""

    async def current(self, *, timeout: Optional[int] = None) -> Response[UserResponse]:
        """Fetch the user that owns the API key."""
        response = await self._get("/user", timeout=timeout)
        return self._map(response, _decode_user, what="Get current user")
