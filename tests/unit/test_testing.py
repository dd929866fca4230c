"""Tests for the response factories and the `.http` fixture parser."""

import pytest
import respx

from dnsimple_client import new_client
from dnsimple_client.errors import NotFoundError
from dnsimple_client.testing import create_error_response, parse_http_fixture, response_from_fixture

RAW_FIXTURE = (
    "HTTP/1.1 200 OK\r\n"
    "Server: nginx\r\n"
    "Content-Type: application/json; charset=utf-8\r\n"
    "Content-Length: 999\r\n"
    "X-RateLimit-Limit: 2400\r\n"
    "\r\n"
    '{"data":{"id":1}}\r\n'
)


@pytest.mark.unit
def test_parse_http_fixture():
    status, reason, headers, body = parse_http_fixture(RAW_FIXTURE)

    assert status == 200
    assert reason == b"OK"
    assert headers["X-RateLimit-Limit"] == "2400"
    assert headers["Content-Type"] == "application/json; charset=utf-8"
    assert "Content-Length" not in headers
    assert body == b'{"data":{"id":1}}'


@pytest.mark.unit
def test_parse_http_fixture_without_body():
    status, reason, headers, body = parse_http_fixture("HTTP/1.1 204 No Content\nX-RateLimit-Limit: 2400\n\n")

    assert status == 204
    assert reason == b"No Content"
    assert body == b""


@pytest.mark.unit
def test_response_from_fixture(tmp_path):
    fixture = tmp_path / "success.http"
    fixture.write_text(RAW_FIXTURE)

    response = response_from_fixture(fixture)

    assert response.status_code == 200
    assert response.reason_phrase == "OK"
    assert response.json() == {"data": {"id": 1}}


@pytest.mark.unit
def test_create_error_response():
    response = create_error_response(400, "Validation failed", {"email": ["can't be blank"]})

    assert response.status_code == 400
    assert response.json() == {"message": "Validation failed", "errors": {"email": ["can't be blank"]}}


@pytest.mark.unit
@respx.mock
async def test_error_response_through_client():
    respx.get("https://api.dnsimple.test/v2/1010/zones/missing").mock(
        return_value=create_error_response(404, "Zone `missing` not found")
    )

    async with new_client(True, "some-token") as client:
        client.set_base_url("https://api.dnsimple.test")
        with pytest.raises(NotFoundError) as exc_info:
            await client.zones.get_zone(1010, "missing")

    assert str(exc_info.value) == "Zone `missing` not found"
