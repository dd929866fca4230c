"""Error taxonomy and status code classification for DNSimple API responses."""

from dnsimple_client.errors.exceptions import (
    APIError,
    BadGatewayError,
    BadRequestError,
    DeserializationError,
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
from dnsimple_client.errors.handler import classify_response, raise_for_status
from dnsimple_client.errors.models import UNPARSEABLE_MESSAGE, ErrorBody

__all__ = [
    "UNPARSEABLE_MESSAGE",
    "APIError",
    "BadGatewayError",
    "BadRequestError",
    "DNSimpleError",
    "DeserializationError",
    "ErrorBody",
    "GatewayTimeoutError",
    "MethodNotAllowedError",
    "NotFoundError",
    "PaymentRequiredError",
    "PreconditionRequiredError",
    "ServiceUnavailableError",
    "TooManyRequestsError",
    "TransportError",
    "UnauthorizedError",
    "classify_response",
    "raise_for_status",
]
