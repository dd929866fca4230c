"""Top-level domains supported for registration."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dnsimple_client.options import RequestOptions
from dnsimple_client.response import DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class Tld:
    """A TLD.

    `type` is 1 for generic TLDs, 2 for country code TLDs and 3 for new gTLDs.
    """

    tld: str
    type: int
    whois_privacy: bool
    auto_renew_only: bool
    idn: bool
    minimum_registration: int
    registration_enabled: bool
    renewal_enabled: bool
    transfer_enabled: bool
    dnssec_interface_type: str | None = None


@dataclass(kw_only=True)
class ExtendedAttributeOption:
    """An allowed value of a TLD extended attribute."""

    title: str
    value: str
    description: str | None = None


@dataclass(kw_only=True)
class TldExtendedAttribute:
    """An extra attribute some registries require when registering or transferring."""

    name: str
    description: str
    required: bool
    options: list[ExtendedAttributeOption] = field(default_factory=list)


class Tlds:
    """TLD endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    async def list_tlds(self, options: RequestOptions | None = None) -> DNSimpleResponse[list[Tld]]:
        """List the TLDs DNSimple supports. Sortable by `tld`."""
        return await self._client.get("/tlds", list[Tld], options)

    async def get_tld(self, tld: str) -> DNSimpleResponse[Tld]:
        return await self._client.get(f"/tlds/{tld}", Tld)

    async def get_tld_extended_attributes(self, tld: str) -> DNSimpleResponse[list[TldExtendedAttribute]]:
        return await self._client.get(f"/tlds/{tld}/extended_attributes", list[TldExtendedAttribute])
