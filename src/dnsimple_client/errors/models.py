"""Error body model for DNSimple API error responses."""

from dataclasses import dataclass
from typing import Any

import httpx

UNPARSEABLE_MESSAGE = "Unable to parse error message"


@dataclass
class ErrorBody:
    """The JSON body DNSimple sends with an error response.

    ```json
    {"message": "Validation failed", "errors": {"email": ["can't be blank"]}}
    ```
    """

    message: str | None = None
    errors: dict[str, list[str]] | None = None

    # The whole parsed body, None when it was not JSON
    raw: Any = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorBody":
        """Parse the error body of a response.

        Never raises: a missing, empty or non-JSON body gives an empty ErrorBody.

        Args:
            response: HTTP response object

        Returns:
            ErrorBody with whatever fields could be extracted
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError, UnicodeDecodeError):
            # Empty bodies and non-JSON payloads (HTML error pages from proxies, etc.)
            return cls()

        if not isinstance(data, dict):
            return cls(raw=data)

        message = data.get("message")
        if message is not None and not isinstance(message, str):
            message = str(message)

        errors = data.get("errors")
        if not isinstance(errors, dict):
            errors = None

        return cls(message=message, errors=errors, raw=data)

    def message_or_fallback(self) -> str:
        """Return the server message, or the generic fallback when it has none."""
        return self.message if self.message is not None else UNPARSEABLE_MESSAGE
