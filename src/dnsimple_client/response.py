"""Response envelopes and the mapping from raw HTTP responses to them.

Every call returns either a `DNSimpleResponse[T]`, whose `data` holds the
deserialized payload, or a `DNSimpleEmptyResponse` for calls that carry no body
(deletes, toggles). Both expose the rate limit headers of the response.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

from dnsimple_client.errors.exceptions import DeserializationError
from dnsimple_client.errors.handler import raise_for_status
from dnsimple_client.serialization import parse_as

logger = logging.getLogger(__name__)

T = TypeVar("T")

RATE_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"


@dataclass
class Pagination:
    """Pagination metadata returned by list endpoints.

    By default the API returns 30 entries per page.
    """

    current_page: int
    per_page: int
    total_entries: int
    total_pages: int


@dataclass
class DNSimpleResponse(Generic[T]):
    """A successful API response.

    Attributes:
        rate_limit: The maximum number of requests per hour.
        rate_limit_remaining: Requests left in the current window.
        rate_limit_reset: When the window resets, in Unix time.
        status: The HTTP status code.
        data: The deserialized `data` member; None on 204 or when the body has none.
        pagination: Pagination metadata for paginated list endpoints.
        body: The whole decoded JSON body.
    """

    rate_limit: str
    rate_limit_remaining: str
    rate_limit_reset: str
    status: int
    data: T | None = None
    pagination: Pagination | None = None
    body: Any = None


@dataclass
class DNSimpleEmptyResponse:
    """A successful API response without a body."""

    rate_limit: str
    rate_limit_remaining: str
    rate_limit_reset: str
    status: int


def _header(response: httpx.Response, name: str) -> str:
    value = response.headers.get(name)
    if value is None:
        logger.debug(f"Response has no {name} header")
        return ""
    return value


def extract_rate_limits(response: httpx.Response) -> tuple[str, str, str]:
    """Read the three rate limit headers, using "" for any that is missing."""
    return (
        _header(response, RATE_LIMIT_HEADER),
        _header(response, RATE_LIMIT_REMAINING_HEADER),
        _header(response, RATE_LIMIT_RESET_HEADER),
    )


def build_response(response: httpx.Response, output_type: type[T] | Any) -> DNSimpleResponse[T]:
    """Map a raw response to a `DNSimpleResponse`.

    Args:
        response: The HTTP response
        output_type: The type the `data` member is deserialized into

    Returns:
        The populated response envelope

    Raises:
        DNSimpleError subclass: For non-2xx responses
        DeserializationError: If the body is not JSON or does not match `output_type`
    """
    rate_limit, rate_limit_remaining, rate_limit_reset = extract_rate_limits(response)
    raise_for_status(response)

    status = response.status_code
    if status == 204:
        return DNSimpleResponse(
            rate_limit=rate_limit,
            rate_limit_remaining=rate_limit_remaining,
            rate_limit_reset=rate_limit_reset,
            status=status,
        )

    try:
        json = response.json()
    except (ValueError, UnicodeDecodeError) as e:
        raise DeserializationError(str(e)) from e

    if not isinstance(json, dict):
        raise DeserializationError(f"Expected a JSON object, got {type(json).__name__}")

    raw_data = json.get("data")
    raw_pagination = json.get("pagination")

    return DNSimpleResponse(
        rate_limit=rate_limit,
        rate_limit_remaining=rate_limit_remaining,
        rate_limit_reset=rate_limit_reset,
        status=status,
        data=parse_as(output_type, raw_data) if raw_data is not None else None,
        pagination=parse_as(Pagination, raw_pagination) if raw_pagination is not None else None,
        body=json,
    )


def build_empty_response(response: httpx.Response) -> DNSimpleEmptyResponse:
    """Map a raw response to a `DNSimpleEmptyResponse`, ignoring any body.

    Raises:
        DNSimpleError subclass: For non-2xx responses
    """
    rate_limit, rate_limit_remaining, rate_limit_reset = extract_rate_limits(response)
    raise_for_status(response)

    return DNSimpleEmptyResponse(
        rate_limit=rate_limit,
        rate_limit_remaining=rate_limit_remaining,
        rate_limit_reset=rate_limit_reset,
        status=response.status_code,
    )
