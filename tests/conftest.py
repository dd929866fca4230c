"""Pytest configuration and shared fixtures for dnsimple-client tests."""

from pathlib import Path

import httpx
import pytest
import respx

from dnsimple_client import new_client
from dnsimple_client.testing import response_from_fixture

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "v2" / "api"

MOCK_BASE_URL = "https://api.dnsimple.test"

NOT_FOUND_REASON = b"Mock Not Found"


def fixture_path(name: str) -> Path:
    """Return the path of a `.http` fixture, e.g. `fixture_path("whoami/success-account")`."""
    return FIXTURES_DIR / f"{name}.http"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear DNSimple environment variables before each test.

    This prevents test pollution when testing settings resolution.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("DNSIMPLE_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
async def setup_mock_for():
    """Factory fixture: route one request to a fixture and return a client pointing at it.

    Usage: `client, route = setup_mock_for("/whoami", "whoami/success-account", "GET")`.
    The path is relative to the API version segment and may include a query string.
    Requests are inspected through `route.calls.last.request`. Anything else gets a
    501 "Mock Not Found" answer.
    """
    clients = []

    def _setup(path: str, fixture: str, method: str = "GET"):
        router = respx.Router()
        route = router.route(method=method, url=f"{MOCK_BASE_URL}/v2{path}").mock(
            side_effect=lambda request: response_from_fixture(fixture_path(fixture))
        )
        router.route().mock(
            side_effect=lambda request: httpx.Response(501, extensions={"reason_phrase": NOT_FOUND_REASON})
        )

        client = new_client(True, "some-token", transport=httpx.MockTransport(router.async_handler))
        client.set_base_url(MOCK_BASE_URL)
        clients.append(client)
        return client, route

    yield _setup

    for client in clients:
        await client.aclose()
