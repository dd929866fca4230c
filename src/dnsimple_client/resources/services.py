"""One-click services that configure DNS records for third-party providers."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dnsimple_client.options import RequestOptions
from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class ServiceSetting:
    """A setting a one-click service asks for when applied."""

    name: str
    label: str
    append: str | None = None
    description: str
    example: str | None = None
    password: bool


@dataclass(kw_only=True)
class Service:
    """A one-click service."""

    id: int
    name: str
    sid: str
    description: str
    setup_description: str | None = None
    requires_setup: bool
    default_subdomain: str | None = None
    created_at: str
    updated_at: str
    settings: list[ServiceSetting] = field(default_factory=list)


class Services:
    """One-click service endpoints."""

    def __init__(self, client: "Client"):
        self._client = client

    async def list_services(self, options: RequestOptions | None = None) -> DNSimpleResponse[list[Service]]:
        return await self._client.get("/services", list[Service], options)

    async def get_service(self, service: str | int) -> DNSimpleResponse[Service]:
        """Get a service by its sid or id."""
        return await self._client.get(f"/services/{service}", Service)

    async def applied_services(
        self, account_id: int, domain: str | int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[Service]]:
        """List the services applied to a domain."""
        return await self._client.get(f"/{account_id}/domains/{domain}/services", list[Service], options)

    async def apply_service(self, account_id: int, domain: str | int, service: str | int) -> DNSimpleEmptyResponse:
        return await self._client.empty_post(f"/{account_id}/domains/{domain}/services/{service}")

    async def unapply_service(self, account_id: int, domain: str | int, service: str | int) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/domains/{domain}/services/{service}")
