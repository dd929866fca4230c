"""Exceptions raised while resolving the DNSimple token and settings."""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).

    Example:
        ```python
        try:
            client = client_from_env()
        except CredentialNotFoundError as e:
            print(f"Set {e.env_var_name} first")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a token file cannot be read."""

    pass
