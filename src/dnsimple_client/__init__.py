"""DNSimple Client - asynchronous Python client for the DNSimple API v2.

The package is organised around one shared request pipeline:
- `Client` builds requests, sends them over httpx and maps responses
- `RequestOptions` encodes filtering, sorting and pagination
- `DNSimpleError` and its subclasses classify every failure
- `dnsimple_client.resources` wraps each area of the API

Example:
    ```python
    from dnsimple_client import Filters, RequestOptions, new_client

    async with new_client(sandbox=True, token="my-token") as client:
        whoami = await client.identity.whoami()
        account_id = whoami.data.account.id

        zones = await client.zones.list_zones(
            account_id, RequestOptions(filters=Filters({"name_like": "example"}))
        )
        for zone in zones.data:
            print(zone.name)
    ```
"""

from dnsimple_client.client import (
    API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_SANDBOX_URL,
    DEFAULT_USER_AGENT,
    VERSION,
    Client,
    client_from_env,
    new_client,
)
from dnsimple_client.errors import (
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
from dnsimple_client.options import Filters, Paginate, RequestOptions, Sort
from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse, Pagination

__version__ = VERSION

__all__ = [
    "API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_SANDBOX_URL",
    "DEFAULT_USER_AGENT",
    "VERSION",
    "APIError",
    "BadGatewayError",
    "BadRequestError",
    "Client",
    "DNSimpleEmptyResponse",
    "DNSimpleError",
    "DNSimpleResponse",
    "DeserializationError",
    "Filters",
    "GatewayTimeoutError",
    "MethodNotAllowedError",
    "NotFoundError",
    "Paginate",
    "Pagination",
    "PaymentRequiredError",
    "PreconditionRequiredError",
    "RequestOptions",
    "ServiceUnavailableError",
    "Sort",
    "TooManyRequestsError",
    "TransportError",
    "UnauthorizedError",
    "__version__",
    "client_from_env",
    "new_client",
]
