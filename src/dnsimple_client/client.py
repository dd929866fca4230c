"""The HTTP boundary shared by every resource of the DNSimple API.

`Client` owns the base URL, the bearer token, the user agent and one pooled
`httpx.AsyncClient`. Resource helpers reach the API exclusively through its verb
methods, which build the request, send it and map the response into a
`DNSimpleResponse` or `DNSimpleEmptyResponse`.

Example:
    ```python
    from dnsimple_client import new_client

    async with new_client(sandbox=True, token="my-token") as client:
        response = await client.identity.whoami()
        print(response.data.account)
    ```
"""

import logging
from typing import Any, TypeVar

import httpx

from dnsimple_client.auth.credentials import BASE_URL_ENV_VAR, SANDBOX_ENV_VAR, CredentialResolver
from dnsimple_client.errors.exceptions import TransportError
from dnsimple_client.errors.handler import UNKNOWN_ERROR
from dnsimple_client.options import RequestOptions, encode_query
from dnsimple_client.resources.accounts import Accounts
from dnsimple_client.resources.certificates import Certificates
from dnsimple_client.resources.contacts import Contacts
from dnsimple_client.resources.domains import Domains
from dnsimple_client.resources.identity import Identity
from dnsimple_client.resources.oauth import OAuth
from dnsimple_client.resources.registrar import Registrar
from dnsimple_client.resources.services import Services
from dnsimple_client.resources.templates import Templates
from dnsimple_client.resources.tlds import Tlds
from dnsimple_client.resources.vanity_name_servers import VanityNameServers
from dnsimple_client.resources.webhooks import Webhooks
from dnsimple_client.resources.zones import Zones
from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse, build_empty_response, build_response
from dnsimple_client.serialization import to_json_payload

logger = logging.getLogger(__name__)

T = TypeVar("T")

VERSION = "0.1.0"
DEFAULT_USER_AGENT = f"dnsimple-client/{VERSION}"

API_VERSION = "v2"
DEFAULT_BASE_URL = "https://api.dnsimple.com"
DEFAULT_SANDBOX_URL = "https://api.sandbox.dnsimple.com"


class Client:
    """Asynchronous client for the DNSimple API v2.

    Args:
        base_url: The API root, without the version segment
        auth_token: The token sent as `Authorization: Bearer <token>`
        user_agent: The `User-Agent` header sent with every request
        transport: Optional httpx transport, e.g. `httpx.MockTransport` in tests

    The client holds no per-call state. `set_base_url` is the only mutation and must
    not race with in-flight requests.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        auth_token: str = "",
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url
        self._auth_token = auth_token
        self._user_agent = user_agent
        self._http = httpx.AsyncClient(transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def set_base_url(self, url: str) -> None:
        """Point the client at another API root. Intended for tests."""
        logger.debug(f"Base URL changed from {self._base_url} to {url}")
        self._base_url = url

    def versioned_url(self) -> str:
        """Return the base URL followed by the API version segment."""
        return f"{self._base_url}/{API_VERSION}"

    def url(self, path: str) -> str:
        return f"{self.versioned_url()}{path}"

    # Resources

    @property
    def accounts(self) -> Accounts:
        return Accounts(self)

    @property
    def certificates(self) -> Certificates:
        return Certificates(self)

    @property
    def contacts(self) -> Contacts:
        return Contacts(self)

    @property
    def domains(self) -> Domains:
        return Domains(self)

    @property
    def identity(self) -> Identity:
        return Identity(self)

    @property
    def oauth(self) -> OAuth:
        return OAuth(self)

    @property
    def registrar(self) -> Registrar:
        return Registrar(self)

    @property
    def services(self) -> Services:
        return Services(self)

    @property
    def templates(self) -> Templates:
        return Templates(self)

    @property
    def tlds(self) -> Tlds:
        return Tlds(self)

    @property
    def vanity_name_servers(self) -> VanityNameServers:
        return VanityNameServers(self)

    @property
    def webhooks(self) -> Webhooks:
        return Webhooks(self)

    @property
    def zones(self) -> Zones:
        return Zones(self)

    # Request pipeline

    def build_request(
        self,
        method: str,
        path: str,
        *,
        options: RequestOptions | None = None,
        payload: Any = None,
        authenticated: bool = True,
    ) -> httpx.Request:
        """Build a request against `versioned_url() + path` without sending it.

        Args:
            method: HTTP method
            path: Resource path, starting with `/`
            options: Filters, sorting and pagination, encoded as query parameters
            payload: JSON body; dataclasses drop their None fields
            authenticated: Whether to attach the bearer token

        Returns:
            The prepared request

        Raises:
            DeserializationError: If the payload cannot be serialized
            TransportError: If the URL cannot be built, e.g. a malformed base URL
        """
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "application/json",
        }
        if authenticated:
            headers["Authorization"] = f"Bearer {self._auth_token}"

        params = encode_query(options)
        json = to_json_payload(payload) if payload is not None else None

        try:
            return self._http.build_request(
                method,
                self.url(path),
                params=params or None,
                headers=headers,
                json=json,
            )
        except (httpx.InvalidURL, httpx.HTTPError) as e:
            logger.debug(f"{method} {self.url(path)} could not be built: {e!r}")
            raise TransportError("unknown", str(e) or UNKNOWN_ERROR) from e

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a prepared request.

        Raises:
            TransportError: If the request never produced a response
        """
        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._http.send(request)
        except (httpx.InvalidURL, httpx.HTTPError) as e:
            logger.debug(f"{request.method} {request.url} failed: {e!r}")
            raise TransportError("unknown", str(e) or UNKNOWN_ERROR) from e

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    async def _call(
        self,
        method: str,
        path: str,
        output_type: type[T] | Any,
        *,
        options: RequestOptions | None = None,
        payload: Any = None,
    ) -> DNSimpleResponse[T]:
        request = self.build_request(method, path, options=options, payload=payload)
        return build_response(await self.send(request), output_type)

    async def _call_empty(self, method: str, path: str, *, payload: Any = None) -> DNSimpleEmptyResponse:
        request = self.build_request(method, path, payload=payload)
        return build_empty_response(await self.send(request))

    async def get(
        self, path: str, output_type: type[T] | Any, options: RequestOptions | None = None
    ) -> DNSimpleResponse[T]:
        """Send a GET request and deserialize `data` into `output_type`."""
        return await self._call("GET", path, output_type, options=options)

    async def post(self, path: str, output_type: type[T] | Any, payload: Any = None) -> DNSimpleResponse[T]:
        """Send a POST request with a JSON payload."""
        return await self._call("POST", path, output_type, payload=payload)

    async def put(self, path: str, output_type: type[T] | Any, payload: Any = None) -> DNSimpleResponse[T]:
        """Send a PUT request with a JSON payload."""
        return await self._call("PUT", path, output_type, payload=payload)

    async def patch(self, path: str, output_type: type[T] | Any, payload: Any = None) -> DNSimpleResponse[T]:
        """Send a PATCH request with a JSON payload."""
        return await self._call("PATCH", path, output_type, payload=payload)

    async def empty_post(self, path: str) -> DNSimpleEmptyResponse:
        """Send a POST request whose success carries no body."""
        return await self._call_empty("POST", path)

    async def empty_put(self, path: str) -> DNSimpleEmptyResponse:
        """Send a PUT request whose success carries no body."""
        return await self._call_empty("PUT", path)

    async def delete(self, path: str) -> DNSimpleEmptyResponse:
        """Send a DELETE request, ignoring any body."""
        return await self._call_empty("DELETE", path)

    async def delete_with_response(self, path: str, output_type: type[T] | Any) -> DNSimpleResponse[T]:
        """Send a DELETE request to an endpoint that answers with a body."""
        return await self._call("DELETE", path, output_type)

    # Lifecycle

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def new_client(sandbox: bool, token: str, *, transport: httpx.AsyncBaseTransport | None = None) -> Client:
    """Create a client for the production or the sandbox API.

    Args:
        sandbox: Use the sandbox environment
        token: The API access token
        transport: Optional httpx transport

    Returns:
        A configured client. No I/O happens until a request is made.
    """
    base_url = DEFAULT_SANDBOX_URL if sandbox else DEFAULT_BASE_URL
    return Client(base_url, token, transport=transport)


def client_from_env(
    *,
    token: str | None = None,
    sandbox: bool | None = None,
    base_url: str | None = None,
    dotenv_path: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Client:
    """Create a client from explicit values, the environment and a .env file.

    Explicit arguments win over `DNSIMPLE_TOKEN` (or `DNSIMPLE_TOKEN_FILE`),
    `DNSIMPLE_SANDBOX` and `DNSIMPLE_BASE_URL`.

    Raises:
        CredentialNotFoundError: If no token can be found
    """
    resolver = CredentialResolver(dotenv_path=dotenv_path)
    resolved_token = resolver.resolve_token(token)
    use_sandbox = resolver.resolve_flag(value=sandbox, env_var_name=SANDBOX_ENV_VAR)

    client = new_client(use_sandbox, resolved_token, transport=transport)

    override = resolver.resolve(value=base_url, env_var_name=BASE_URL_ENV_VAR, mask_in_logs=False)
    if override:
        client.set_base_url(override)
    return client
