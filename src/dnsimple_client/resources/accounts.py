"""Accounts the authenticated identity has access to."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dnsimple_client.response import DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class Account:
    """An account the token can act on."""

    id: int
    email: str
    plan_identifier: str
    created_at: str
    updated_at: str


class Accounts:
    """The Accounts API.

    See https://developer.dnsimple.com/v2/accounts
    """

    def __init__(self, client: "Client"):
        self._client = client

    async def list_accounts(self) -> DNSimpleResponse[list[Account]]:
        """List the accounts the current credentials have access to.

        An account token only sees its own account; a user token sees every
        account the user belongs to.
        """
        return await self._client.get("/accounts", list[Account])
