"""Domains in an account and the features attached to them.

Besides the domain itself this covers collaborators, DNSSEC, email forwards,
pushes between accounts, domain research and delegation signer (DS) records.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Annotated

from pydantic import Field

from dnsimple_client.options import Filters, RequestOptions
from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class Domain:
    """A domain in an account."""

    id: int
    account_id: int
    registrant_id: int | None = None
    name: str
    unicode_name: str
    state: str
    auto_renew: bool
    private_whois: bool
    expires_on: str | None = None
    expires_at: str | None = None
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class Collaborator:
    """A user given access to a domain."""

    id: int
    domain_id: int
    domain_name: str
    user_id: int | None = None
    user_email: str
    invitation: bool
    created_at: str
    updated_at: str
    accepted_at: str | None = None


@dataclass(kw_only=True)
class Dnssec:
    """DNSSEC status of a domain."""

    enabled: bool
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class EmailForward:
    """An email forward.

    List responses carry only the legacy `from`/`to` attributes; single-forward
    responses also include `alias_email` and `destination_email`.
    """

    id: int
    domain_id: int
    alias_email: str | None = None
    destination_email: str | None = None
    from_: Annotated[str | None, Field(alias="from")] = None
    to: str | None = None
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class EmailForwardPayload:
    """Parameters for creating an email forward."""

    alias_name: str
    destination_email: str


@dataclass(kw_only=True)
class DomainPush:
    """A pending transfer of a domain to another account."""

    id: int
    domain_id: int
    contact_id: int | None = None
    account_id: int
    created_at: str
    updated_at: str
    accepted_at: str | None = None


@dataclass(kw_only=True)
class DomainPushPayload:
    """The account receiving a pushed domain."""

    new_account_email: str


@dataclass(kw_only=True)
class DomainResearchStatus:
    """Availability of a domain name, as reported by domain research."""

    request_id: str
    domain: str
    availability: str
    errors: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class SignerRecord:
    """A delegation signer (DS) record."""

    id: int
    domain_id: int
    algorithm: str
    digest: str | None = None
    digest_type: str | None = None
    keytag: str | None = None
    public_key: str | None = None
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class SignerRecordPayload:
    """A DS record. `digest`, `digest_type` and `keytag` are required unless the TLD takes a `public_key`."""

    algorithm: str
    digest: str | None = None
    digest_type: str | None = None
    keytag: str | None = None
    public_key: str | None = None


class Domains:
    """The Domains API.

    `domain` arguments accept either the domain name or its numeric id.
    """

    def __init__(self, client: "Client"):
        self._client = client

    # Domains

    async def list_domains(
        self, account_id: int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[Domain]]:
        """List the domains in the account.

        Supports the `name_like` and `registrant_id` filters and sorting by `id`,
        `name` and `expiration`.
        """
        return await self._client.get(f"/{account_id}/domains", list[Domain], options)

    async def create_domain(self, account_id: int, name: str) -> DNSimpleResponse[Domain]:
        """Add a domain to the account without registering it."""
        return await self._client.post(f"/{account_id}/domains", Domain, {"name": name})

    async def get_domain(self, account_id: int, domain: str | int) -> DNSimpleResponse[Domain]:
        return await self._client.get(f"/{account_id}/domains/{domain}", Domain)

    async def delete_domain(self, account_id: int, domain: str | int) -> DNSimpleEmptyResponse:
        """Delete a domain and everything attached to it. Registered domains stay registered."""
        return await self._client.delete(f"/{account_id}/domains/{domain}")

    # Collaborators

    async def list_collaborators(
        self, account_id: int, domain: str | int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[Collaborator]]:
        path = f"/{account_id}/domains/{domain}/collaborators"
        return await self._client.get(path, list[Collaborator], options)

    async def add_collaborator(self, account_id: int, domain: str | int, email: str) -> DNSimpleResponse[Collaborator]:
        """Invite a user to collaborate on a domain.

        Users without a DNSimple account receive an invitation; the returned
        collaborator then has `invitation` set and no `user_id`.
        """
        path = f"/{account_id}/domains/{domain}/collaborators"
        return await self._client.post(path, Collaborator, {"email": email})

    async def remove_collaborator(
        self, account_id: int, domain: str | int, collaborator_id: int
    ) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/domains/{domain}/collaborators/{collaborator_id}")

    # DNSSEC

    async def enable_dnssec(self, account_id: int, domain: str | int) -> DNSimpleResponse[Dnssec]:
        return await self._client.post(f"/{account_id}/domains/{domain}/dnssec", Dnssec)

    async def disable_dnssec(self, account_id: int, domain: str | int) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/domains/{domain}/dnssec")

    async def get_dnssec(self, account_id: int, domain: str | int) -> DNSimpleResponse[Dnssec]:
        return await self._client.get(f"/{account_id}/domains/{domain}/dnssec", Dnssec)

    # Email forwards

    async def list_email_forwards(
        self, account_id: int, domain: str | int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[EmailForward]]:
        path = f"/{account_id}/domains/{domain}/email_forwards"
        return await self._client.get(path, list[EmailForward], options)

    async def create_email_forward(
        self, account_id: int, domain: str | int, payload: EmailForwardPayload
    ) -> DNSimpleResponse[EmailForward]:
        path = f"/{account_id}/domains/{domain}/email_forwards"
        return await self._client.post(path, EmailForward, payload)

    async def get_email_forward(
        self, account_id: int, domain: str | int, email_forward_id: int
    ) -> DNSimpleResponse[EmailForward]:
        path = f"/{account_id}/domains/{domain}/email_forwards/{email_forward_id}"
        return await self._client.get(path, EmailForward)

    async def delete_email_forward(
        self, account_id: int, domain: str | int, email_forward_id: int
    ) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/domains/{domain}/email_forwards/{email_forward_id}")

    # Pushes

    async def initiate_push(
        self, account_id: int, domain: str | int, payload: DomainPushPayload
    ) -> DNSimpleResponse[DomainPush]:
        """Start moving a domain to the account owning `payload.new_account_email`."""
        return await self._client.post(f"/{account_id}/domains/{domain}/pushes", DomainPush, payload)

    async def list_pushes(
        self, account_id: int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[DomainPush]]:
        """List the pushes pending for the target account."""
        return await self._client.get(f"/{account_id}/domains/pushes", list[DomainPush], options)

    async def accept_push(self, account_id: int, push_id: int) -> DNSimpleEmptyResponse:
        return await self._client.empty_post(f"/{account_id}/domains/pushes/{push_id}")

    async def reject_push(self, account_id: int, push_id: int) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/domains/pushes/{push_id}")

    # Research

    async def get_domain_research_status(self, account_id: int, domain: str) -> DNSimpleResponse[DomainResearchStatus]:
        """Research whether a domain name can be registered.

        This endpoint is in public beta and may change without notice.
        """
        options = RequestOptions(filters=Filters({"domain": domain}))
        return await self._client.get(f"/{account_id}/domains/research/status", DomainResearchStatus, options)

    # Delegation signer records

    async def list_delegation_signer_records(
        self, account_id: int, domain: str | int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[SignerRecord]]:
        path = f"/{account_id}/domains/{domain}/ds_records"
        return await self._client.get(path, list[SignerRecord], options)

    async def create_delegation_signer_record(
        self, account_id: int, domain: str | int, payload: SignerRecordPayload
    ) -> DNSimpleResponse[SignerRecord]:
        path = f"/{account_id}/domains/{domain}/ds_records"
        return await self._client.post(path, SignerRecord, payload)

    async def get_delegation_signer_record(
        self, account_id: int, domain: str | int, record_id: int
    ) -> DNSimpleResponse[SignerRecord]:
        path = f"/{account_id}/domains/{domain}/ds_records/{record_id}"
        return await self._client.get(path, SignerRecord)

    async def delete_delegation_signer_record(
        self, account_id: int, domain: str | int, record_id: int
    ) -> DNSimpleEmptyResponse:
        return await self._client.delete(f"/{account_id}/domains/{domain}/ds_records/{record_id}")
