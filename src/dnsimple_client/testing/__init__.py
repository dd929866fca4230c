"""Testing utilities for code built on the DNSimple client.

Response factories pair with any httpx mocking library; the client's own suite
routes them with `respx`.

Example:
    ```python
    import pytest
    import respx

    from dnsimple_client import new_client
    from dnsimple_client.errors import NotFoundError
    from dnsimple_client.testing import create_error_response


    @respx.mock
    async def test_handles_404():
        respx.get("https://api.sandbox.dnsimple.com/v2/1010/zones/missing").mock(
            return_value=create_error_response(404, "Zone `missing` not found")
        )
        client = new_client(True, "some-token")

        with pytest.raises(NotFoundError):
            await client.zones.get_zone(1010, "missing")
    ```
"""

from dnsimple_client.testing.factories import (
    DEFAULT_RATE_LIMIT_HEADERS,
    create_error_response,
    create_mock_response,
    parse_http_fixture,
    response_from_fixture,
)

__all__ = [
    "DEFAULT_RATE_LIMIT_HEADERS",
    "create_error_response",
    "create_mock_response",
    "parse_http_fixture",
    "response_from_fixture",
]
