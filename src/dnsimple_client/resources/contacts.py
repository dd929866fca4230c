"""Contacts used as registrants for domain registrations and certificates."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dnsimple_client.options import RequestOptions
from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class Contact:
    """A registrant contact."""

    id: int
    account_id: int
    label: str | None = None
    first_name: str
    last_name: str
    job_title: str | None = None
    organization_name: str | None = None
    email: str
    phone: str
    fax: str | None = None
    address1: str
    address2: str | None = None
    city: str
    state_province: str
    postal_code: str
    country: str
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class ContactPayload:
    """Attributes to create or update a contact.

    `first_name`, `last_name`, `email`, `phone`, `address1`, `city`,
    `state_province`, `postal_code` and `country` are required on creation.
    """

    label: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    job_title: str | None = None
    organization_name: str | None = None
    email: str | None = None
    phone: str | None = None
    fax: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state_province: str | None = None
    postal_code: str | None = None
    country: str | None = None


class Contacts:
    """Contact endpoints of an account."""

    def __init__(self, client: "Client"):
        self._client = client

    async def list_contacts(
        self, account_id: int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[Contact]]:
        return await self._client.get(f"/{account_id}/contacts", list[Contact], options)

    async def create_contact(self, account_id: int, payload: ContactPayload) -> DNSimpleResponse[Contact]:
        return await self._client.post(f"/{account_id}/contacts", Contact, payload)

    async def get_contact(self, account_id: int, contact_id: int) -> DNSimpleResponse[Contact]:
        return await self._client.get(f"/{account_id}/contacts/{contact_id}", Contact)

    async def update_contact(
        self, account_id: int, contact_id: int, payload: ContactPayload
    ) -> DNSimpleResponse[Contact]:
        """Update the attributes set on `payload`; unset (None) attributes are left untouched."""
        return await self._client.patch(f"/{account_id}/contacts/{contact_id}", Contact, payload)

    async def delete_contact(self, account_id: int, contact_id: int) -> DNSimpleEmptyResponse:
        """Delete a contact. Contacts in use by a domain cannot be deleted."""
        return await self._client.delete(f"/{account_id}/contacts/{contact_id}")
