"""Webhooks notified of events in an account."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dnsimple_client.options import RequestOptions
from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class Webhook:
    """A webhook endpoint."""

    id: int
    url: str


class Webhooks:
    """Webhook endpoints of an account."""

    def __init__(self, client: "Client"):
        self._client = client

    async def list_webhooks(
        self, account_id: int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[Webhook]]:
        return await self._client.get(f"/{account_id}/webhooks", list[Webhook], options)

    async def create_webhook(self, account_id: int, url: str) -> DNSimpleResponse[Webhook]:
        return await self._client.post(f"/{account_id}/webhooks", Webhook, {"url": url})

    async def get_webhook(self, account_id: int, webhook_id: int) -> DNSimpleResponse[Webhook]:
        return await self._client.get(f"/{account_id}/webhooks/{webhook_id}", Webhook)

    async def delete_webhook(self, account_id: int, webhook_id: int) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/webhooks/{webhook_id}")
