"""Shared pytest fixtures for tunnel routes tests."""

import json
from typing import Any

import pytest

from tunnel_routes.client import TunnelRouteClient
from tunnel_routes.common.exceptions import TransportError

CLOUDFLARE_ENV_VARS = (
    "CLOUDFLARE_API_TOKEN",
    "CLOUDFLARE_EMAIL",
    "CLOUDFLARE_API_KEY",
    "CLOUDFLARE_BASE_URL",
    "CLOUDFLARE_TIMEOUT",
    "CLOUDFLARE_USER_AGENT",
)


class FakeExecutor:
    """Records requests and replays queued response bodies."""

    def __init__(self, responses: list[bytes | Exception] | None = None):
        self._responses = list(responses or [])
        self.requests: list[tuple[str, str, Any]] = []

    def queue(self, response: bytes | Exception) -> None:
        self._responses.append(response)

    def execute(self, method: str, path: str, body: Any | None = None) -> bytes:
        self.requests.append((method, path, body))
        if not self._responses:
            raise TransportError("No fake responses available")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def envelope(result: Any, **extra: Any) -> bytes:
    """Build a successful API envelope around ``result``."""
    payload = {"success": True, "errors": [], "messages": [], "result": result}
    payload.update(extra)
    return json.dumps(payload).encode()


@pytest.fixture
def route_payload():
    """A route as the API returns it, with every field populated.

    Returns:
        dict: JSON-compatible route payload
    """
    return {
        "network": "10.0.0.0/8",
        "tunnel_id": "f70ff985-a4ef-4643-bbbc-4a0ed4fc8415",
        "tunnel_name": "blog",
        "comment": "office network",
        "created_at": "2021-01-25T18:22:34.317854Z",
        "deleted_at": None,
    }


@pytest.fixture
def fake_executor():
    """Create an executor fake with an empty response queue.

    Returns:
        FakeExecutor: Recording executor
    """
    return FakeExecutor()


@pytest.fixture
def client(fake_executor):
    """Create a client wired to the fake executor.

    Returns:
        TunnelRouteClient: Client under test
    """
    return TunnelRouteClient(executor=fake_executor)


@pytest.fixture(autouse=True)
def clean_cloudflare_env(monkeypatch):
    """Keep the host's CLOUDFLARE_* variables out of ClientConfig.

    ClientConfig reads the environment on every construction.
    """
    for name in CLOUDFLARE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
