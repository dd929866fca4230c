"""Who the current credentials belong to."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dnsimple_client.resources.accounts import Account
from dnsimple_client.response import DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class User:
    """The user behind a user token."""

    id: int
    email: str
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class WhoamiData:
    """Exactly one of `account` or `user` is set, depending on the token type."""

    account: Account | None = None
    user: User | None = None


class Identity:
    """Endpoint identifying the current token."""

    def __init__(self, client: "Client"):
        self._client = client

    async def whoami(self) -> DNSimpleResponse[WhoamiData]:
        """Retrieve the account or user behind the token in use."""
        return await self._client.get("/whoami", WhoamiData)
