"""SSL certificates, including Let's Encrypt purchase and renewal."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dnsimple_client.options import RequestOptions
from dnsimple_client.response import DNSimpleResponse

if TYPE_CHECKING:
    from dnsimple_client.client import Client


@dataclass(kw_only=True)
class Certificate:
    """An SSL certificate issued for a domain."""

    id: int
    domain_id: int
    contact_id: int
    name: str
    common_name: str
    years: int
    csr: str | None = None
    state: str
    auto_renew: bool
    alternate_names: list[str] = field(default_factory=list)
    authority_identifier: str
    created_at: str
    updated_at: str
    expires_at: str | None = None
    expires_on: str | None = None


@dataclass(kw_only=True)
class CertificateBundle:
    """A certificate in PEM format along with its intermediate chain."""

    server: str
    root: str | None = None
    chain: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class CertificatePrivateKey:
    """The private key of a certificate."""

    private_key: str


@dataclass(kw_only=True)
class LetsEncryptPurchase:
    """A Let's Encrypt certificate order, issued in a second step."""

    id: int
    certificate_id: int
    state: str
    auto_renew: bool
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class LetsEncryptRenewal:
    """A renewal order for a Let's Encrypt certificate."""

    id: int
    old_certificate_id: int
    new_certificate_id: int
    state: str
    auto_renew: bool
    created_at: str
    updated_at: str


@dataclass(kw_only=True)
class LetsEncryptPurchasePayload:
    """Parameters for ordering a Let's Encrypt certificate."""

    contact_id: int | None = None
    auto_renew: bool | None = None
    name: str | None = None
    alternate_names: list[str] | None = None


@dataclass(kw_only=True)
class LetsEncryptRenewalPayload:
    """Parameters for renewing a Let's Encrypt certificate."""

    auto_renew: bool | None = None


class Certificates:
    """The Certificates API.

    `domain` arguments accept either the domain name or its numeric id.
    """

    def __init__(self, client: "Client"):
        self._client = client

    def _path(self, account_id: int, domain: str | int, suffix: str = "") -> str:
        return f"/{account_id}/domains/{domain}/certificates{suffix}"

    async def list_certificates(
        self, account_id: int, domain: str | int, options: RequestOptions | None = None
    ) -> DNSimpleResponse[list[Certificate]]:
        return await self._client.get(self._path(account_id, domain), list[Certificate], options)

    async def get_certificate(
        self, account_id: int, domain: str | int, certificate_id: int
    ) -> DNSimpleResponse[Certificate]:
        return await self._client.get(self._path(account_id, domain, f"/{certificate_id}"), Certificate)

    async def download_certificate(
        self, account_id: int, domain: str | int, certificate_id: int
    ) -> DNSimpleResponse[CertificateBundle]:
        """Get the PEM-encoded certificate, root and intermediate chain."""
        path = self._path(account_id, domain, f"/{certificate_id}/download")
        return await self._client.get(path, CertificateBundle)

    async def get_certificate_private_key(
        self, account_id: int, domain: str | int, certificate_id: int
    ) -> DNSimpleResponse[CertificatePrivateKey]:
        path = self._path(account_id, domain, f"/{certificate_id}/private_key")
        return await self._client.get(path, CertificatePrivateKey)

    async def purchase_letsencrypt_certificate(
        self, account_id: int, domain: str | int, payload: LetsEncryptPurchasePayload
    ) -> DNSimpleResponse[LetsEncryptPurchase]:
        """Order a Let's Encrypt certificate. Issue it afterwards with `issue_letsencrypt_certificate`."""
        path = self._path(account_id, domain, "/letsencrypt")
        return await self._client.post(path, LetsEncryptPurchase, payload)

    async def issue_letsencrypt_certificate(
        self, account_id: int, domain: str | int, certificate_id: int
    ) -> DNSimpleResponse[Certificate]:
        path = self._path(account_id, domain, f"/letsencrypt/{certificate_id}/issue")
        return await self._client.post(path, Certificate)

    async def purchase_letsencrypt_certificate_renewal(
        self,
        account_id: int,
        domain: str | int,
        certificate_id: int,
        payload: LetsEncryptRenewalPayload,
    ) -> DNSimpleResponse[LetsEncryptRenewal]:
        path = self._path(account_id, domain, f"/letsencrypt/{certificate_id}/renewals")
        return await self._client.post(path, LetsEncryptRenewal, payload)

    async def issue_letsencrypt_certificate_renewal(
        self, account_id: int, domain: str | int, certificate_id: int, renewal_id: int
    ) -> DNSimpleResponse[Certificate]:
        path = self._path(account_id, domain, f"/letsencrypt/{certificate_id}/renewals/{renewal_id}/issue")
        return await self._client.post(path, Certificate)
