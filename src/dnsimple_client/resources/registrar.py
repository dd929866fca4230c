"""Domain registration, transfers, renewals and registrar-level settings.

Also covers auto renewal, name server delegation, registrant changes, the
transfer lock and WHOIS privacy, all of which live under the registrar
namespace of the API.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dnsimple_client.options import Filters, RequestOptions
from dnsimple_client.resources.tlds import TldExtendedAttribute
from dnsimple_client.resources.vanity_name_servers import VanityNameServer
from dnsimple_client.response import DNSimpleEmptyResponse, DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client

logger = logging.getLogger(__name__)

DEFAULT_PREMIUM_PRICE_ACTION = "registration"


@dataclass(kw_only=True)
class DomainCheck:
    """Whether a domain can be registered."""

    domain: str
    available: bool
    premium: bool


@dataclass(kw_only=True)
class DomainPremiumPrice:
    """The premium price of a domain for one action."""

    premium_price: str
    action: str


@dataclass(kw_only=True)
class DomainPrices:
    """Registration, renewal and transfer prices of a domain."""

    domain: str
    premium: bool
    registration_price: float
    renewal_price: float
    transfer_price: float


@dataclass(kw_only=True)
class DomainRegistrationPayload:
    """Registration options. `premium_price` must be set to register a premium domain."""

    registrant_id: int
    whois_privacy: bool | None = None
    auto_renew: bool | None = None
    extended_attributes: dict[str, str] | None = None
    premium_price: str | None = None


@dataclass(kw_only=True)
class DomainRegistration:
    """A domain registration order."""

    id: int
    domain_id: int
    registrant_id: int
    period: int
    state: str
    auto_renew: bool
    whois_privacy: bool
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class DomainTransferPayload:
    """Parameters for transferring a domain in."""

    registrant_id: int
    auth_code: str
    whois_privacy: bool | None = None
    auto_renew: bool | None = None
    extended_attributes: dict[str, str] | None = None
    premium_price: str | None = None


@dataclass(kw_only=True)
class DomainTransfer:
    """A domain transfer order."""

    id: int
    domain_id: int
    registrant_id: int
    state: str
    auto_renew: bool
    whois_privacy: bool
    status_description: str | None = None
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class DomainRenewalPayload:
    """Parameters for renewing a domain."""

    period: int
    premium_price: str | None = None


@dataclass(kw_only=True)
class DomainRenewal:
    """A domain renewal order."""

    id: int
    domain_id: int
    period: int
    state: str
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class RegistrantChange:
    """A change of the registrant contact of a domain."""

    id: int
    account_id: int
    contact_id: int
    domain_id: int
    state: str
    extended_attributes: dict[str, str] | None = None
    registry_owner_change: bool
    irt_lock_lifted_by: str | None = None
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class RegistrantChangeCheck:
    """What a registrant change would involve.

    `extended_attributes` lists the attributes the new registrant must provide.
    """

    contact_id: int
    domain_id: int
    extended_attributes: list[TldExtendedAttribute] | None = None
    registry_owner_change: bool


@dataclass(kw_only=True)
class RegistrantChangeCheckPayload:
    """Parameters for checking a registrant change."""

    domain_id: int | str
    contact_id: int


@dataclass(kw_only=True)
class RegistrantChangePayload:
    """Parameters for starting a registrant change."""

    domain_id: int | str
    contact_id: int
    extended_attributes: dict[str, str] | None = None


@dataclass(kw_only=True)
class TransferLock:
    """Transfer lock status of a domain."""

    enabled: bool


@dataclass(kw_only=True)
class WhoisPrivacy:
    """WHOIS privacy status of a domain."""

    id: int
    domain_id: int
    expires_on: str | None = None
    enabled: bool | None = None
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class WhoisPrivacyRenewal:
    """A renewal order for WHOIS privacy."""

    id: int
    domain_id: int
    whois_privacy_id: int
    state: str
    expires_on: str
    enabled: bool
    created_at: str
    updated_at: str


class Registrar:
    """The Registrar API.

    `domain` arguments accept either the domain name or its numeric id.
    """

    def __init__(self, client: "Client"):
        self._client = client

    def _domain_path(self, account_id: int, domain: str | int, suffix: str = "") -> str:
        return f"/{account_id}/registrar/domains/{domain}{suffix}"

    # Registration, transfer and renewal

    async def check_domain(self, account_id: int, domain: str) -> DNSimpleResponse[DomainCheck]:
        """Check whether a domain is available for registration."""
        return await self._client.get(self._domain_path(account_id, domain, "/check"), DomainCheck)

    async def check_domain_premium_price(
        self, account_id: int, domain: str, action: str | None = None
    ) -> DNSimpleResponse[DomainPremiumPrice]:
        """Get the premium price of a domain for `registration`, `renewal` or `transfer`.

        Deprecated: use `get_domain_prices` instead.
        """
        warnings.warn(
            "check_domain_premium_price is deprecated, use get_domain_prices instead",
            DeprecationWarning,
            stacklevel=2,
        )
        options = RequestOptions(filters=Filters({"action": action or DEFAULT_PREMIUM_PRICE_ACTION}))
        path = self._domain_path(account_id, domain, "/premium_price")
        return await self._client.get(path, DomainPremiumPrice, options)

    async def get_domain_prices(self, account_id: int, domain: str) -> DNSimpleResponse[DomainPrices]:
        return await self._client.get(self._domain_path(account_id, domain, "/prices"), DomainPrices)

    async def register_domain(
        self, account_id: int, domain: str, payload: DomainRegistrationPayload
    ) -> DNSimpleResponse[DomainRegistration]:
        path = self._domain_path(account_id, domain, "/registrations")
        return await self._client.post(path, DomainRegistration, payload)

    async def get_domain_registration(
        self, account_id: int, domain: str, registration_id: int
    ) -> DNSimpleResponse[DomainRegistration]:
        path = self._domain_path(account_id, domain, f"/registrations/{registration_id}")
        return await self._client.get(path, DomainRegistration)

    async def transfer_domain(
        self, account_id: int, domain: str, payload: DomainTransferPayload
    ) -> DNSimpleResponse[DomainTransfer]:
        path = self._domain_path(account_id, domain, "/transfers")
        return await self._client.post(path, DomainTransfer, payload)

    async def get_domain_transfer(
        self, account_id: int, domain: str, transfer_id: int
    ) -> DNSimpleResponse[DomainTransfer]:
        path = self._domain_path(account_id, domain, f"/transfers/{transfer_id}")
        return await self._client.get(path, DomainTransfer)

    async def cancel_domain_transfer(
        self, account_id: int, domain: str, transfer_id: int
    ) -> DNSimpleResponse[DomainTransfer]:
        """Cancel an in-progress transfer. The API answers 202 with the transfer being cancelled."""
        path = self._domain_path(account_id, domain, f"/transfers/{transfer_id}")
        return await self._client.delete_with_response(path, DomainTransfer)

    async def renew_domain(
        self, account_id: int, domain: str, payload: DomainRenewalPayload
    ) -> DNSimpleResponse[DomainRenewal]:
        path = self._domain_path(account_id, domain, "/renewals")
        return await self._client.post(path, DomainRenewal, payload)

    async def get_domain_renewal(
        self, account_id: int, domain: str, renewal_id: int
    ) -> DNSimpleResponse[DomainRenewal]:
        path = self._domain_path(account_id, domain, f"/renewals/{renewal_id}")
        return await self._client.get(path, DomainRenewal)

    async def transfer_domain_out(self, account_id: int, domain: str) -> DNSimpleEmptyResponse:
        """Authorize the transfer of a domain to another registrar."""
        return await self._client.empty_post(self._domain_path(account_id, domain, "/authorize_transfer_out"))

    # Auto renewal

    async def enable_domain_auto_renewal(self, account_id: int, domain: str | int) -> DNSimpleEmptyResponse:
        return await self._client.empty_put(self._domain_path(account_id, domain, "/auto_renewal"))

    async def disable_domain_auto_renewal(self, account_id: int, domain: str | int) -> DNSimpleEmptyResponse:
        return await self._client.delete(self._domain_path(account_id, domain, "/auto_renewal"))

    # Name servers

    async def get_domain_delegation(self, account_id: int, domain: str | int) -> DNSimpleResponse[list[str]]:
        """List the name servers the domain is delegated to."""
        return await self._client.get(self._domain_path(account_id, domain, "/delegation"), list[str])

    async def change_domain_delegation(
        self, account_id: int, domain: str | int, server_names: list[str]
    ) -> DNSimpleResponse[list[str]]:
        path = self._domain_path(account_id, domain, "/delegation")
        return await self._client.put(path, list[str], list(server_names))

    async def change_domain_delegation_to_vanity(
        self, account_id: int, domain: str | int, server_names: list[str]
    ) -> DNSimpleResponse[list[VanityNameServer]]:
        path = self._domain_path(account_id, domain, "/delegation/vanity")
        return await self._client.put(path, list[VanityNameServer], list(server_names))

    async def change_domain_delegation_from_vanity(self, account_id: int, domain: str | int) -> DNSimpleEmptyResponse:
        return await self._client.delete(self._domain_path(account_id, domain, "/delegation/vanity"))

    # Registrant changes

    async def list_registrant_changes(
        self, account_id: int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[RegistrantChange]]:
        """List registrant changes. Filterable by `state`, `domain_id` and `contact_id`."""
        path = f"/{account_id}/registrar/registrant_changes"
        return await self._client.get(path, list[RegistrantChange], options)

    async def check_registrant_change(
        self, account_id: int, payload: RegistrantChangeCheckPayload
    ) -> DNSimpleResponse[RegistrantChangeCheck]:
        path = f"/{account_id}/registrar/registrant_changes/check"
        return await self._client.post(path, RegistrantChangeCheck, payload)

    async def create_registrant_change(
        self, account_id: int, payload: RegistrantChangePayload
    ) -> DNSimpleResponse[RegistrantChange]:
        path = f"/{account_id}/registrar/registrant_changes"
        return await self._client.post(path, RegistrantChange, payload)

    async def get_registrant_change(
        self, account_id: int, registrant_change_id: int
    ) -> DNSimpleResponse[RegistrantChange]:
        path = f"/{account_id}/registrar/registrant_changes/{registrant_change_id}"
        return await self._client.get(path, RegistrantChange)

    async def delete_registrant_change(
        self, account_id: int, registrant_change_id: int
    ) -> DNSimpleResponse[RegistrantChange]:
        """Cancel a registrant change.

        Returns status 204 with no data when the change was cancelled right away,
        or 202 with the change when cancellation happens asynchronously.
        """
        path = f"/{account_id}/registrar/registrant_changes/{registrant_change_id}"
        response = await self._client.delete_with_response(path, RegistrantChange)
        if response.status == 202:
            logger.debug(f"Registrant change {registrant_change_id} is being cancelled asynchronously")
        return response

    # Transfer lock

    async def enable_domain_transfer_lock(self, account_id: int, domain: str | int) -> DNSimpleResponse[TransferLock]:
        return await self._client.post(self._domain_path(account_id, domain, "/transfer_lock"), TransferLock)

    async def disable_domain_transfer_lock(self, account_id: int, domain: str | int) -> DNSimpleResponse[TransferLock]:
        path = self._domain_path(account_id, domain, "/transfer_lock")
        return await self._client.delete_with_response(path, TransferLock)

    async def get_domain_transfer_lock(self, account_id: int, domain: str | int) -> DNSimpleResponse[TransferLock]:
        return await self._client.get(self._domain_path(account_id, domain, "/transfer_lock"), TransferLock)

    # WHOIS privacy

    async def get_whois_privacy(self, account_id: int, domain: str | int) -> DNSimpleResponse[WhoisPrivacy]:
        return await self._client.get(self._domain_path(account_id, domain, "/whois_privacy"), WhoisPrivacy)

    async def enable_whois_privacy(self, account_id: int, domain: str | int) -> DNSimpleResponse[WhoisPrivacy]:
        """Enable WHOIS privacy, purchasing it first when the domain has none.

        The API answers 201 when privacy was purchased and 200 when it was only enabled.
        """
        return await self._client.put(self._domain_path(account_id, domain, "/whois_privacy"), WhoisPrivacy)

    async def disable_whois_privacy(self, account_id: int, domain: str | int) -> DNSimpleResponse[WhoisPrivacy]:
        path = self._domain_path(account_id, domain, "/whois_privacy")
        return await self._client.delete_with_response(path, WhoisPrivacy)

    async def renew_whois_privacy(self, account_id: int, domain: str | int) -> DNSimpleResponse[WhoisPrivacyRenewal]:
        path = self._domain_path(account_id, domain, "/whois_privacy/renewals")
        return await self._client.post(path, WhoisPrivacyRenewal)
