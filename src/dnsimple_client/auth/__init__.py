"""Token and settings resolution for the DNSimple client.

Example:
    ```python
    from dnsimple_client.auth import CredentialResolver

    resolver = CredentialResolver()
    token = resolver.resolve_token()
    ```
"""

from dnsimple_client.auth.credentials import (
    BASE_URL_ENV_VAR,
    SANDBOX_ENV_VAR,
    TOKEN_ENV_VAR,
    TOKEN_FILE_ENV_VAR,
    CredentialResolver,
)
from dnsimple_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "BASE_URL_ENV_VAR",
    "SANDBOX_ENV_VAR",
    "TOKEN_ENV_VAR",
    "TOKEN_FILE_ENV_VAR",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
