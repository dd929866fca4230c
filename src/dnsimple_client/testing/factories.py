"""Factories for `httpx.Response` objects used in tests."""

from pathlib import Path
from typing import Any

import httpx

DEFAULT_RATE_LIMIT_HEADERS = {
    "X-RateLimit-Limit": "2",
    "X-RateLimit-Remaining": "2",
    "X-RateLimit-Reset": "never",
}

# httpx computes these from the body it is given
_IGNORED_FIXTURE_HEADERS = frozenset(["content-length", "transfer-encoding", "connection"])


def create_mock_response(
    status_code: int = 200,
    json_data: Any = None,
    headers: dict[str, str] | None = None,
    rate_limit_headers: bool = True,
) -> httpx.Response:
    """Create a response with a JSON body.

    Args:
        status_code: HTTP status code
        json_data: Body to encode as JSON; None leaves the body empty
        headers: Extra headers
        rate_limit_headers: Whether to add the default rate limit headers

    Example:
        ```python
        response = create_mock_response(200, {"data": {"id": 1, "url": "https://example.com"}})
        ```
    """
    all_headers = dict(DEFAULT_RATE_LIMIT_HEADERS) if rate_limit_headers else {}
    all_headers.update(headers or {})

    if json_data is None:
        return httpx.Response(status_code, headers=all_headers)
    return httpx.Response(status_code, headers=all_headers, json=json_data)


def create_error_response(
    status_code: int,
    message: str | None = None,
    errors: dict[str, list[str]] | None = None,
) -> httpx.Response:
    """Create an error response shaped like the ones the API sends.

    Example:
        ```python
        response = create_error_response(400, "Validation failed", {"email": ["can't be blank"]})
        ```
    """
    body: dict[str, Any] = {}
    if message is not None:
        body["message"] = message
    if errors is not None:
        body["errors"] = errors
    return create_mock_response(status_code, body)


def parse_http_fixture(text: str) -> tuple[int, bytes, dict[str, str], bytes]:
    """Split a raw HTTP response into status code, reason phrase, headers and body.

    The fixture format is the one produced by `curl -i`: a status line, header
    lines, a blank line and the body.
    """
    normalized = text.replace("\r\n", "\n")
    head, _, body = normalized.partition("\n\n")

    status_line, *header_lines = head.split("\n")
    _, status, *reason = status_line.split(" ", 2)

    headers = {}
    for line in header_lines:
        name, _, value = line.partition(":")
        if name.strip().lower() in _IGNORED_FIXTURE_HEADERS:
            continue
        headers[name.strip()] = value.strip()

    reason_phrase = reason[0].strip() if reason else ""
    return int(status), reason_phrase.encode(), headers, body.strip().encode()


def response_from_fixture(path: str | Path) -> httpx.Response:
    """Build a response from a `.http` fixture file."""
    status_code, reason_phrase, headers, body = parse_http_fixture(Path(path).read_text())
    return httpx.Response(
        status_code,
        headers=headers,
        content=body,
        extensions={"reason_phrase": reason_phrase},
    )
