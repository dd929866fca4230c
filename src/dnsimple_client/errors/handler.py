"""Error classification for HTTP responses."""

import logging

import httpx

from dnsimple_client.errors.exceptions import (
    APIError,
    BadGatewayError,
    BadRequestError,
    DNSimpleError,
    GatewayTimeoutError,
    MethodNotAllowedError,
    NotFoundError,
    PaymentRequiredError,
    PreconditionRequiredError,
    ServiceUnavailableError,
    TooManyRequestsError,
    TransportError,
    UnauthorizedError,
)
from dnsimple_client.errors.models import ErrorBody

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "unknown error"

# Variants whose text comes from the server's "message" field
MESSAGE_ERRORS: dict[int, type[APIError]] = {
    404: NotFoundError,
    428: PreconditionRequiredError,
    504: GatewayTimeoutError,
}

# Variants with a fixed text
FIXED_ERRORS: dict[int, type[APIError]] = {
    401: UnauthorizedError,
    402: PaymentRequiredError,
    405: MethodNotAllowedError,
    429: TooManyRequestsError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
}


def classify_response(response: httpx.Response) -> DNSimpleError:
    """Map a non-2xx response to the matching error.

    The body is only read as far as each variant needs. A body that cannot be
    parsed never turns into a second error: the message falls back to
    "Unable to parse error message".

    Args:
        response: HTTP response object

    Returns:
        The DNSimpleError subclass instance describing the failure
    """
    status_code = response.status_code

    if status_code == 400:
        error_body = ErrorBody.from_response(response)
        return BadRequestError(
            message=error_body.message_or_fallback(),
            errors=error_body.errors,
            status_code=status_code,
            body=error_body.raw,
        )

    if status_code in MESSAGE_ERRORS:
        error_body = ErrorBody.from_response(response)
        return MESSAGE_ERRORS[status_code](
            message=error_body.message_or_fallback(),
            status_code=status_code,
            body=error_body.raw,
        )

    if status_code in FIXED_ERRORS:
        return FIXED_ERRORS[status_code](status_code=status_code, body=ErrorBody.from_response(response).raw)

    reason = response.reason_phrase or UNKNOWN_ERROR
    return TransportError(str(status_code), reason)


def raise_for_status(response: httpx.Response) -> None:
    """Raise the classified error for non-2xx responses.

    Args:
        response: HTTP response object

    Raises:
        DNSimpleError subclass based on status code
    """
    if response.is_success:
        return

    error = classify_response(response)
    logger.debug(f"Request failed with {response.status_code}: {error}")
    raise error
