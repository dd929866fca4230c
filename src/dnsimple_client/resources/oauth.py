"""OAuth 2 authorization code exchange.

Example:
    ```python
    payload = OAuthTokenPayload(
        client_id="id",
        client_secret="secret",
        code="code",
        redirect_uri="/redirect_uri",
        state="state",
    )
    token = await client.oauth.exchange_authorization_for_token(payload)
    ```
"""

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from dnsimple_client.errors.exceptions import DeserializationError
from dnsimple_client.errors.handler import raise_for_status
from dnsimple_client.serialization import parse_as

if TYPE_CHECKING:
    from dnsimple_client.client import Client

logger = logging.getLogger(__name__)

GRANT_TYPE = "authorization_code"


@dataclass(kw_only=True)
class OAuthTokenPayload:
    """Parameters of an authorization code exchange."""

    client_id: str
    client_secret: str
    code: str
    redirect_uri: str
    state: str


@dataclass(kw_only=True)
class AccessToken:
    """An OAuth access token bound to one account."""

    access_token: str
    account_id: int
    token_type: str
    scope: str | None = None


class OAuth:
    """OAuth endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    async def exchange_authorization_for_token(self, payload: OAuthTokenPayload) -> AccessToken:
        """Exchange a short-lived authorization code for an access token.

        The request carries no bearer token, and the answer is the token object
        itself rather than a `data` envelope.

        Raises:
            DNSimpleError subclass: For non-2xx responses
            DeserializationError: If the answer is not a valid token
        """
        params = {"grant_type": GRANT_TYPE, **asdict(payload)}
        request = self._client.build_request("POST", "/oauth/access_token", payload=params, authenticated=False)
        response = await self._client.send(request)
        raise_for_status(response)

        try:
            json = response.json()
        except (ValueError, UnicodeDecodeError) as e:
            raise DeserializationError(str(e)) from e

        token = parse_as(AccessToken, json)
        logger.debug(f"Exchanged authorization code for a {token.token_type} token on account {token.account_id}")
        return token
