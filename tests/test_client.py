import logging
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

import requests

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from clockify.client import Clockify  # noqa: E402
from clockify.resources._common_types import Failure, Success  # noqa: E402
from clockify.tools import time_entries as time_entry_tools  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


class FakeResponse:
    def __init__(self, *, content=b"{}", json_payload=None, json_error=False, status_error=None, status_code=200):
        self.content = content
        self.status_code = status_code
        self._json_payload = json_payload
        self._json_error = json_error
        self._status_error = status_error

    def raise_for_status(self):
        if self._status_error:
            raise self._status_error

    def json(self):
        if self._json_error:
            raise ValueError("bad json")
        return self._json_payload


class FakeSession:
    def __init__(self, response: FakeResponse):
        self.response = response
        self.calls = []

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append((method, url, params, json, headers, timeout))
        return self.response


def make_client(response, **kwargs):
    session = FakeSession(response)
    client = Clockify(api_key="secret", base_url="https://example.com/api/v1", session=session, **kwargs)
    return client, session


class ClientConfigTests(unittest.TestCase):
    def test_missing_api_key_raises(self):
        with patch.dict("os.environ", {}, clear=True):
            with self.assertRaises(ValueError):
                Clockify()

    def test_api_key_from_environment(self):
        with patch.dict("os.environ", {"CLOCKIFY_API_KEY": "from-env"}):
            client = Clockify()
        self.assertEqual(client.api_key, "from-env")

    def test_base_url_trailing_slash_stripped(self):
        client = Clockify(api_key="k", base_url="https://example.com/api/v1/")
        self.assertEqual(client.base_url, "https://example.com/api/v1")

    def test_resources_attached(self):
        client = Clockify(api_key="k")
        self.assertIs(client.time_entries._client, client)
        self.assertIs(client.tags._client, client)
        self.assertIs(client.workspaces._client, client)
        self.assertIs(client.users._client, client)

    def test_tools_attached(self):
        client = Clockify(api_key="k")
        self.assertIs(client.tools.time_entries, time_entry_tools)
        self.assertTrue(callable(client.tools.time_entries.fetch_many))


class ClientRequestTests(unittest.TestCase):
    def test_request_url_and_auth_header(self):
        client, session = make_client(FakeResponse(json_payload={"ok": True}))
        client.request_sync("GET", "workspaces")
        self.assertEqual(len(session.calls), 1)
        method, url, params, json, headers, timeout = session.calls[0]
        self.assertEqual(method, "GET")
        self.assertEqual(url, "https://example.com/api/v1/workspaces")
        self.assertIsNone(params)
        self.assertIsNone(json)
        self.assertEqual(headers, {"X-Api-Key": "secret"})
        self.assertEqual(timeout, client.default_timeout)

    def test_request_timeout_override(self):
        client, session = make_client(FakeResponse(json_payload={}))
        client.request_sync("GET", "/user", timeout=3)
        self.assertEqual(session.calls[0][5], 3)

    def test_request_empty_body_is_success_without_data(self):
        client, _ = make_client(FakeResponse(content=b"", status_code=204))
        result = client.request_sync("DELETE", "/workspaces/w1")
        self.assertEqual(result, Success(data=None, status_code=204))

    def test_request_non_json_is_failure(self):
        client, _ = make_client(FakeResponse(content=b"not json", json_error=True))
        result = client.request_sync("GET", "/user")
        self.assertIsInstance(result, Failure)
        self.assertFalse(result.is_successful)
        self.assertEqual(result.status_code, 200)

    def test_request_json_dict_and_list(self):
        response = FakeResponse(json_payload={"data": 1})
        client, _ = make_client(response)
        self.assertEqual(client.request_sync("GET", "/user").data, {"data": 1})
        response._json_payload = [1, 2]
        self.assertEqual(client.request_sync("GET", "/user").data, [1, 2])
        response._json_payload = "not dict"
        self.assertIsInstance(client.request_sync("GET", "/user"), Failure)

    def test_request_http_error_is_failure_with_status(self):
        error = requests.HTTPError("400 Client Error")
        response = FakeResponse(json_payload={"message": "problem"}, status_error=error, status_code=400)
        client, _ = make_client(response)
        result = client.request_sync("POST", "/workspaces/w1/time-entries", json={})
        self.assertIsInstance(result, Failure)
        self.assertEqual(result.status_code, 400)
        self.assertIn("Server message: problem", result.message)

    def test_request_http_error_uses_error_field(self):
        error = requests.HTTPError("bad")
        client, _ = make_client(FakeResponse(json_payload={"error": "nope"}, status_error=error, status_code=401))
        result = client.request_sync("GET", "/user")
        self.assertIn("Server error: nope", result.message)

    def test_request_http_error_uses_detail_field(self):
        error = requests.HTTPError("bad")
        client, _ = make_client(FakeResponse(json_payload={"detail": "nope"}, status_error=error, status_code=404))
        result = client.request_sync("GET", "/user")
        self.assertIn("Details: nope", result.message)

    def test_request_http_error_bad_json_body(self):
        error = requests.HTTPError("bad")
        client, _ = make_client(FakeResponse(json_error=True, status_error=error, status_code=500))
        result = client.request_sync("GET", "/user")
        self.assertEqual(result, Failure(status_code=500, message="bad"))

    def test_request_http_error_raises_when_enabled(self):
        error = requests.HTTPError("bad")
        client, _ = make_client(
            FakeResponse(json_payload={"message": "problem"}, status_error=error, status_code=400),
            raise_on_error=True,
        )
        with self.assertRaises(requests.HTTPError):
            client.request_sync("GET", "/user")

    def test_request_network_error_is_failure_without_status(self):
        client = Clockify(api_key="k")
        with patch("clockify.client.requests.request", side_effect=requests.ConnectionError("down")):
            result = client.request_sync("GET", "/user")
        self.assertIsInstance(result, Failure)
        self.assertIsNone(result.status_code)
        self.assertIn("down", result.message)

    def test_request_other_exception_raises_when_enabled(self):
        client = Clockify(api_key="k", raise_on_error=True)
        with patch("clockify.client.requests.request", side_effect=RuntimeError("boom")):
            with self.assertRaises(RuntimeError):
                client.request_sync("GET", "/user")


class AsyncRequestTests(unittest.IsolatedAsyncioTestCase):
    async def test_request_runs_through_session(self):
        client, session = make_client(FakeResponse(json_payload=[{"id": "t1"}]))
        result = await client.request("GET", "/workspaces/w1/tags")
        self.assertTrue(result.is_successful)
        self.assertEqual(result.data, [{"id": "t1"}])
        self.assertEqual(session.calls[0][1], "https://example.com/api/v1/workspaces/w1/tags")


if __name__ == "__main__":
    unittest.main()
