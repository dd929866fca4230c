"""Templates: reusable sets of DNS records that can be applied to domains."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dnsimple_client.options import RequestOptions
from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class Template:
    """A template of zone records."""

    id: int
    account_id: int
    name: str
    sid: str
    description: str | None = None
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class TemplatePayload:
    """Parameters for creating or updating a template."""

    name: str
    sid: str
    description: str | None = None


@dataclass(kw_only=True)
class TemplateRecord:
    """A record inside a template."""

    id: int
    template_id: int
    name: str
    content: str
    ttl: int
    priority: int | None = None
    type: str
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class TemplateRecordPayload:
    """Parameters for creating a template record."""

    name: str
    type: str
    content: str
    ttl: int | None = None
    priority: int | None = None


class Templates:
    """The Templates API.

    `template` arguments accept either the template sid or its numeric id.
    """

    def __init__(self, client: "Client"):
        self._client = client

    async def list_templates(
        self, account_id: int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[Template]]:
        return await self._client.get(f"/{account_id}/templates", list[Template], options)

    async def create_template(self, account_id: int, payload: TemplatePayload) -> DNSimpleResponse[Template]:
        return await self._client.post(f"/{account_id}/templates", Template, payload)

    async def get_template(self, account_id: int, template: str | int) -> DNSimpleResponse[Template]:
        return await self._client.get(f"/{account_id}/templates/{template}", Template)

    async def update_template(
        self, account_id: int, template: str | int, payload: TemplatePayload
    ) -> DNSimpleResponse[Template]:
        return await self._client.patch(f"/{account_id}/templates/{template}", Template, payload)

    async def delete_template(self, account_id: int, template: str | int) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/templates/{template}")

    async def list_template_records(
        self, account_id: int, template: str | int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[TemplateRecord]]:
        path = f"/{account_id}/templates/{template}/records"
        return await self._client.get(path, list[TemplateRecord], options)

    async def create_template_record(
        self, account_id: int, template: str | int, payload: TemplateRecordPayload
    ) -> DNSimpleResponse[TemplateRecord]:
        return await self._client.post(f"/{account_id}/templates/{template}/records", TemplateRecord, payload)

    async def get_template_record(
        self, account_id: int, template: str | int, record_id: int
    ) -> DNSimpleResponse[TemplateRecord]:
        return await self._client.get(f"/{account_id}/templates/{template}/records/{record_id}", TemplateRecord)

    async def delete_template_record(
        self, account_id: int, template: str | int, record_id: int
    ) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/templates/{template}/records/{record_id}")

    async def apply_template(self, account_id: int, domain: str | int, template: str | int) -> DNSimpleEmptyResponse:
        """Create the template's records in the domain's zone."""
        return await self._client.empty_post(f"/{account_id}/domains/{domain}/templates/{template}")
