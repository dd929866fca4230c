"""Structured exceptions for DNSimple API errors.

Every failure raised by the client is a subclass of `DNSimpleError`, so callers can
either catch everything at once or branch on the specific kind:

```python
try:
    await client.registrar.register_domain(1010, "example.com", payload)
except BadRequestError as e:
    for field, problems in (e.errors or {}).items():
        print(field, problems)
except NotFoundError as e:
    print(e.message)
```
"""

from typing import Any


class DNSimpleError(Exception):
    """Base exception for every error raised by the client."""

    pass


class APIError(DNSimpleError):
    """The API answered with a recognised non-2xx status code."""

    default_message = "API error"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        body: Any = None,
    ):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)
        self.status_code = status_code
        self.body = body


class BadRequestError(APIError):
    """400 Bad Request.

    `errors` holds the per-field validation errors exactly as the API sent them
    (field name -> list of messages), or None when the body had none.
    """

    def __init__(self, message: str | None = None, errors: dict[str, list[str]] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors


class UnauthorizedError(APIError):
    """401 Unauthorized."""

    default_message = "Authentication failed"


class PaymentRequiredError(APIError):
    """402 Payment Required."""

    default_message = "Your account is not subscribed or not in good standing"


class NotFoundError(APIError):
    """404 Not Found."""

    pass


class MethodNotAllowedError(APIError):
    """405 Method Not Allowed."""

    default_message = "Method not Allowed"


class PreconditionRequiredError(APIError):
    """428 Precondition Required."""

    pass


class TooManyRequestsError(APIError):
    """429 Too Many Requests."""

    default_message = (
        "You exceeded the allowed number of requests per hour and your request has temporarily been throttled."
    )


class BadGatewayError(APIError):
    """502 Bad Gateway."""

    default_message = "Bad Gateway"


class ServiceUnavailableError(APIError):
    """503 Service Unavailable."""

    default_message = "Service Unavailable"


class GatewayTimeoutError(APIError):
    """504 Gateway Timeout."""

    default_message = "Gateway Timeout"


class TransportError(DNSimpleError):
    """The request failed below the API level.

    Raised for status codes the client does not map to a specific error and for
    network failures reported by httpx.
    """

    def __init__(self, code: str, reason: str):
        super().__init__(f"Transport Error - {code}({reason})")
        self.code = code
        self.reason = reason


class DeserializationError(DNSimpleError):
    """A body could not be parsed as JSON or did not match the expected shape."""

    def __init__(self, detail: str):
        super().__init__(f"Deserialization Error {detail}")
        self.detail = detail
