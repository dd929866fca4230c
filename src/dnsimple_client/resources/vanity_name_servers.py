"""Vanity name servers: DNSimple name servers under the customer's own domain."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class VanityNameServer:
    """A vanity name server of an account."""

    id: int
    name: str
    ipv4: str
    ipv6: str
    created_at: str
    updated_at: str


class VanityNameServers:
    """Vanity name server endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    async def enable_vanity_name_servers(
        self, account_id: int, domain: str | int
    ) -> DNSimpleResponse[list[VanityNameServer]]:
        """Create the vanity name servers for a domain. Delegation is not changed."""
        return await self._client.put(f"/{account_id}/vanity/{domain}", list[VanityNameServer])

    async def disable_vanity_name_servers(self, account_id: int, domain: str | int) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/vanity/{domain}")
