"""DNS zones and the records they contain."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dnsimple_client.options import RequestOptions
from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class Zone:
    """A DNS zone."""

    id: int
    account_id: int
    name: str
    reverse: bool
    secondary: bool
    last_transferred_at: str | None = None
    active: bool
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class ZoneFile:
    """The zone in BIND file format."""

    zone: str


@dataclass(kw_only=True)
class ZoneDistribution:
    """Whether a zone or record is served by every name server."""

    distributed: bool


@dataclass(kw_only=True)
class ZoneRecord:
    """A record in a zone."""

    id: int
    zone_id: str
    parent_id: int | None = None
    name: str
    content: str
    ttl: int
    priority: int | None = None
    type: str
    regions: list[str] | None = None
    system_record: bool
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class ZoneRecordPayload:
    """A new record. An empty `name` creates a record at the zone apex."""

    name: str
    type: str
    content: str
    ttl: int | None = None
    priority: int | None = None
    regions: list[str] | None = None


@dataclass(kw_only=True)
class ZoneRecordUpdatePayload:
    """Fields to change on a zone record; unset fields are left alone."""

    name: str | None = None
    content: str | None = None
    ttl: int | None = None
    priority: int | None = None
    regions: list[str] | None = None


class Zones:
    """The Zones API.

    `zone` arguments accept either the zone name or its numeric id.
    """

    def __init__(self, client: "Client"):
        self._client = client

    async def list_zones(self, account_id: int, options: RequestOptions | None = None) -> DNSimpleResponse[list[Zone]]:
        """List the zones in the account. Supports the `name_like` filter and sorting by `id` and `name`."""
        return await self._client.get(f"/{account_id}/zones", list[Zone], options)

    async def get_zone(self, account_id: int, zone: str | int) -> DNSimpleResponse[Zone]:
        return await self._client.get(f"/{account_id}/zones/{zone}", Zone)

    async def get_zone_file(self, account_id: int, zone: str | int) -> DNSimpleResponse[ZoneFile]:
        return await self._client.get(f"/{account_id}/zones/{zone}/file", ZoneFile)

    async def check_zone_distribution(self, account_id: int, zone: str | int) -> DNSimpleResponse[ZoneDistribution]:
        """Check whether the zone is fully distributed to every name server."""
        return await self._client.get(f"/{account_id}/zones/{zone}/distribution", ZoneDistribution)

    async def activate_dns(self, account_id: int, zone: str | int) -> DNSimpleResponse[Zone]:
        """Activate DNS resolution for the zone."""
        return await self._client.put(f"/{account_id}/zones/{zone}/activation", Zone)

    async def deactivate_dns(self, account_id: int, zone: str | int) -> DNSimpleResponse[Zone]:
        return await self._client.delete_with_response(f"/{account_id}/zones/{zone}/activation", Zone)

    # Records

    async def list_zone_records(
        self, account_id: int, zone: str | int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[ZoneRecord]]:
        """List the records of a zone.

        Supports the `name_like`, `name` and `type` filters and sorting by `id`,
        `name`, `content` and `type`.
        """
        return await self._client.get(f"/{account_id}/zones/{zone}/records", list[ZoneRecord], options)

    async def create_zone_record(
        self, account_id: int, zone: str | int, payload: ZoneRecordPayload
    ) -> DNSimpleResponse[ZoneRecord]:
        return await self._client.post(f"/{account_id}/zones/{zone}/records", ZoneRecord, payload)

    async def get_zone_record(self, account_id: int, zone: str | int, record_id: int) -> DNSimpleResponse[ZoneRecord]:
        return await self._client.get(f"/{account_id}/zones/{zone}/records/{record_id}", ZoneRecord)

    async def update_zone_record(
        self, account_id: int, zone: str | int, record_id: int, payload: ZoneRecordUpdatePayload
    ) -> DNSimpleResponse[ZoneRecord]:
        return await self._client.patch(f"/{account_id}/zones/{zone}/records/{record_id}", ZoneRecord, payload)

    async def delete_zone_record(self, account_id: int, zone: str | int, record_id: int) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/zones/{zone}/records/{record_id}")

    async def check_zone_record_distribution(
        self, account_id: int, zone: str | int, record_id: int
    ) -> DNSimpleResponse[ZoneDistribution]:
        path = f"/{account_id}/zones/{zone}/records/{record_id}/distribution"
        return await self._client.get(path, ZoneDistribution)
