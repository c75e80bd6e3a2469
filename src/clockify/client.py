"""Core Clockify client with a raw-request escape hatch."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Optional

import requests

from .resources._common_types import Failure, Response, Success
from .resources.tags import Tags
from .resources.time_entries import TimeEntries
from .resources.users import Users
from .resources.workspaces import Workspaces
from .tools import time_entries as time_entry_tools

DEFAULT_BASE_URL = os.environ.get("CLOCKIFY_BASE_URL", "https://api.clockify.me/api/v1")
API_KEY_ENV = "CLOCKIFY_API_KEY"


class Clockify:
    """Resource-grouped client for the Clockify REST API."""

    time_entries: TimeEntries
    tags: Tags
    workspaces: Workspaces
    users: Users
    tools: Any

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
        raise_on_error: bool = False,
    ) -> None:
        """Create a Clockify client bound to an API key.

        Parameters
        ----------
        api_key
            Clockify API key. Falls back to the ``CLOCKIFY_API_KEY`` environment variable.
        base_url
            API root, e.g. ``https://api.clockify.me/api/v1``.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        raise_on_error
            If True, raise HTTP errors instead of returning a ``Failure``.

        Raises
        ------
        ValueError
            If no API key is given or configured.
        """
        api_key = api_key or os.environ.get(API_KEY_ENV)
        if not api_key:
            raise ValueError(f"A Clockify API key is required (pass api_key or set {API_KEY_ENV}).")
        self.api_key = api_key
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.default_timeout = default_timeout
        self.raise_on_error = raise_on_error
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.time_entries: TimeEntries = TimeEntries(self)
        self.tags: Tags = Tags(self)
        self.workspaces: Workspaces = Workspaces(self)
        self.users: Users = Users(self)
        self.tools = type("Tools", (), {})()
        self.tools.time_entries = time_entry_tools

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Response[Any]:
        """Send a raw request to the Clockify API without blocking the event loop.

        Parameters
        ----------
        method
            HTTP method (GET, POST, PUT, DELETE).
        path
            Endpoint path relative to the base URL.
        params
            Query parameters for the request.
        json
            JSON payload for the request.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        Success | Failure
            ``Success`` with the parsed JSON payload (``None`` for an empty body),
            or ``Failure`` describing the HTTP status or transport error.
        """
        return await asyncio.to_thread(
            self.request_sync, method, path, params=params, json=json, timeout=timeout
        )

    def request_sync(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Response[Any]:
        """Blocking variant of :meth:`request`."""
        if not path.startswith("/"):
            path = "/" + path
        url = f"{self.base_url}{path}"
        headers = {"X-Api-Key": self.api_key}

        requester = self._session or requests
        response = None
        try:
            response = requester.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=timeout or self.default_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            if self.raise_on_error:
                raise
            # Extract error message from response body if available
            error_msg = str(exc)
            try:
                error_body = response.json()
                if isinstance(error_body, dict):
                    if "message" in error_body:
                        error_msg = f"{exc}\nServer message: {error_body['message']}"
                    elif "error" in error_body:
                        error_msg = f"{exc}\nServer error: {error_body['error']}"
                    elif "detail" in error_body:
                        error_msg = f"{exc}\nDetails: {error_body['detail']}"
            except (ValueError, AttributeError, KeyError):
                pass  # Response wasn't JSON or didn't have expected fields
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            return Failure(status_code=getattr(response, "status_code", None), message=error_msg)
        except Exception as exc:  # noqa: BLE001 - surface request failures
            if self.raise_on_error:
                raise
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            return Failure(status_code=None, message=str(exc))

        status_code = getattr(response, "status_code", 200)
        if not response.content:
            return Success(data=None, status_code=status_code)
        try:
            payload = response.json()
        except ValueError:  # noqa: PERF203 - only attempt JSON when present
            self._logger.warning("Response from %s %s was not JSON", method, url)
            return Failure(status_code=status_code, message="Response body was not JSON")
        if isinstance(payload, (dict, list)):
            return Success(data=payload, status_code=status_code)
        self._logger.warning("Response from %s %s was not a JSON object or array", method, url)
        return Failure(status_code=status_code, message="Unexpected response payload")
