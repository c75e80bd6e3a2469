"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar, TYPE_CHECKING

from ._common_types import Failure, Response, Success

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Clockify

T = TypeVar("T")


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "Clockify") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Response[Any]:
        return await self._client.request(method, path, params=params, json=json, timeout=timeout)

    async def _get(
        self,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        timeout: Optional[int] = None,
    ) -> Response[Any]:
        return await self._request("GET", path, params=params, timeout=timeout)

    async def _post(
        self,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Response[Any]:
        return await self._request("POST", path, json=json, timeout=timeout)

    async def _put(
        self,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Response[Any]:
        return await self._request("PUT", path, json=json, timeout=timeout)

    async def _delete(
        self,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        timeout: Optional[int] = None,
    ) -> Response[Any]:
        return await self._request("DELETE", path, params=params, timeout=timeout)

    def _map(
        self,
        response: Response[Any],
        decode: Callable[[Any], T],
        *,
        what: str,
    ) -> Response[T]:
        """Decode a successful payload, turning shape errors into ``Failure``."""
        if isinstance(response, Failure):
            return response
        try:
            data = decode(response.data)
        except (TypeError, ValueError, KeyError) as exc:
            self._logger.warning("%s response had unexpected shape: %s", what, exc)
            return Failure(status_code=response.status_code, message=f"Unexpected {what} payload: {exc}")
        return Success(data=data, status_code=response.status_code)
