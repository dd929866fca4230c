"""Multi-source resolution of the DNSimple token and client settings.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Recognised settings:

| Variable | Meaning |
|----------|---------|
| `DNSIMPLE_TOKEN` | OAuth or API access token |
| `DNSIMPLE_TOKEN_FILE` | Path to a file holding the token |
| `DNSIMPLE_SANDBOX` | `1`, `true`, `yes` or `on` to talk to the sandbox |
| `DNSIMPLE_BASE_URL` | Override of the API base URL |

Example:
    ```python
    from dnsimple_client.auth import CredentialResolver

    resolver = CredentialResolver()
    token = resolver.resolve_token()
    sandbox = resolver.resolve_flag(env_var_name="DNSIMPLE_SANDBOX")
    ```

Security Considerations:
    - Tokens are never logged (masked with ***)
    - Only the source of a value is logged (env var name, file path, etc.)
    - File-based tokens have whitespace stripped
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from dnsimple_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "DNSIMPLE_TOKEN"
TOKEN_FILE_ENV_VAR = "DNSIMPLE_TOKEN_FILE"
SANDBOX_ENV_VAR = "DNSIMPLE_SANDBOX"
BASE_URL_ENV_VAR = "DNSIMPLE_BASE_URL"

TRUTHY_VALUES = frozenset(["1", "true", "yes", "on"])


class CredentialResolver:
    """Resolve settings from explicit values, the environment, .env files and defaults.

    Attributes:
        _dotenv_loaded: Whether the .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to the .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                # Existing environment variables win over .env entries
                load_dotenv(dotenv_path=self._dotenv_path, override=False)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a setting from an explicit value, the environment or a default.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Default value if not found elsewhere.
            required: Raise CredentialNotFoundError when nothing is found.
            mask_in_logs: Mask the value in log messages. Disable for non-secret settings.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required=True and nothing was found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_flag(
        self,
        *,
        value: bool | None = None,
        env_var_name: str | None = None,
        default: bool = False,
    ) -> bool:
        """Resolve a boolean setting.

        Environment values count as true when they are one of `1`, `true`, `yes`
        or `on` (case-insensitive); anything else is false.
        """
        if value is not None:
            return value

        raw = self.resolve(env_var_name=env_var_name, mask_in_logs=False)
        if raw is None:
            return default
        return raw.strip().lower() in TRUTHY_VALUES

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path may come directly or from an environment variable, and supports
        `~` and `$VAR` expansion.

        Args:
            file_path: Path to the file holding the credential.
            env_var_name: Environment variable holding the path, used when
                file_path is None.
            required: Raise CredentialFileError when the file cannot be read.

        Returns:
            The stripped file contents, or None if unavailable and not required.

        Raises:
            CredentialFileError: If required=True and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False)

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_token(self, token: str | None = None) -> str:
        """Resolve the API token.

        Checks the explicit `token`, then `DNSIMPLE_TOKEN`, then the file named by
        `DNSIMPLE_TOKEN_FILE`.

        Raises:
            CredentialNotFoundError: If no source provides a token.
        """
        resolved = self.resolve(value=token, env_var_name=TOKEN_ENV_VAR)
        if resolved is None:
            resolved = self.resolve_from_file(env_var_name=TOKEN_FILE_ENV_VAR)
        if not resolved:
            raise CredentialNotFoundError(
                f"DNSimple token not found (checked env vars: {TOKEN_ENV_VAR}, {TOKEN_FILE_ENV_VAR})",
                env_var_name=TOKEN_ENV_VAR,
            )
        return resolved
