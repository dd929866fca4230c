"""Tests for resolving the DNSimple token and client settings.

This module tests the CredentialResolver class which reads settings from
explicit values, the environment, .env files and token files.
"""

import logging
import os

import pytest

from dnsimple_client.auth import (
    SANDBOX_ENV_VAR,
    TOKEN_ENV_VAR,
    TOKEN_FILE_ENV_VAR,
    CredentialResolver,
)
from dnsimple_client.auth.exceptions import CredentialFileError, CredentialNotFoundError


@pytest.mark.unit
class TestCredentialResolverInit:
    """Test CredentialResolver initialization."""

    def test_init_skip_dotenv(self):
        """Test initialization with dotenv loading disabled."""
        resolver = CredentialResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_init_with_custom_dotenv_path(self, tmp_path):
        """Test initialization with custom dotenv path."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("DNSIMPLE_SANDBOX=true\n")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))

        assert resolver._dotenv_loaded
        assert resolver.resolve_flag(env_var_name=SANDBOX_ENV_VAR) is True

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        """Test that .env entries never override variables already set."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("DNSIMPLE_TOKEN=dotenv-token\n")
        monkeypatch.setenv(TOKEN_ENV_VAR, "env-token")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))

        assert resolver.resolve_token() == "env-token"

    def test_dotenv_loaded_only_once(self, tmp_path):
        """Test that .env file is loaded only once even with multiple calls."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("DNSIMPLE_SANDBOX=1\n")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))
        resolver._ensure_dotenv_loaded()
        resolver._ensure_dotenv_loaded()

        assert resolver._dotenv_loaded is True


@pytest.mark.unit
class TestCredentialResolverResolve:
    """Test basic setting resolution and its priority order."""

    def test_resolve_from_explicit_value(self):
        """Test resolving from explicitly provided value (highest priority)."""
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(value="explicit-value-123") == "explicit-value-123"

    def test_explicit_value_overrides_all(self, monkeypatch):
        """Test that explicit value takes priority over everything."""
        monkeypatch.setenv("DNSIMPLE_BASE_URL", "https://env.example.com")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(
            value="https://explicit.example.com",
            env_var_name="DNSIMPLE_BASE_URL",
            default="https://default.example.com",
        )

        assert result == "https://explicit.example.com"

    def test_environment_overrides_default(self, monkeypatch):
        """Test that environment variable takes priority over default."""
        monkeypatch.setenv("DNSIMPLE_BASE_URL", "https://env.example.com")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(env_var_name="DNSIMPLE_BASE_URL", default="https://default.example.com")

        assert result == "https://env.example.com"

    def test_resolve_returns_none_when_not_found(self):
        """Test that resolve returns None when nothing is set and not required."""
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="DNSIMPLE_BASE_URL") is None

    def test_resolve_raises_when_required_and_not_found(self):
        """Test that resolve raises error when required=True and not found."""
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve(env_var_name="DNSIMPLE_BASE_URL", required=True)

        assert "Required credential not found" in str(exc_info.value)
        assert exc_info.value.env_var_name == "DNSIMPLE_BASE_URL"


@pytest.mark.unit
class TestResolveFlag:
    """Test boolean setting resolution."""

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", "on", " True "])
    def test_truthy_values(self, monkeypatch, raw):
        monkeypatch.setenv(SANDBOX_ENV_VAR, raw)
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_flag(env_var_name=SANDBOX_ENV_VAR) is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", "", "sandbox"])
    def test_other_values_are_false(self, monkeypatch, raw):
        monkeypatch.setenv(SANDBOX_ENV_VAR, raw)
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_flag(env_var_name=SANDBOX_ENV_VAR) is False

    def test_explicit_value_wins(self, monkeypatch):
        monkeypatch.setenv(SANDBOX_ENV_VAR, "true")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_flag(value=False, env_var_name=SANDBOX_ENV_VAR) is False

    def test_default_when_unset(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_flag(env_var_name=SANDBOX_ENV_VAR) is False
        assert resolver.resolve_flag(env_var_name=SANDBOX_ENV_VAR, default=True) is True


@pytest.mark.unit
class TestCredentialResolverFromFile:
    """Test file-based credential resolution."""

    def test_resolve_from_file_with_explicit_path(self, tmp_path):
        """Test resolving a token from a file, whitespace stripped."""
        cred_file = tmp_path / "token"
        cred_file.write_text("  file-token-abc123  \n")

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(cred_file)) == "file-token-abc123"

    def test_resolve_from_file_with_tilde_expansion(self, tmp_path, monkeypatch):
        """Test file path expansion with ~ (home directory)."""
        fake_home = tmp_path / "home"
        cred_file = fake_home / ".config" / "dnsimple" / "token"
        cred_file.parent.mkdir(parents=True)
        cred_file.write_text("home-dir-token")
        monkeypatch.setenv("HOME", str(fake_home))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="~/.config/dnsimple/token") == "home-dir-token"

    def test_resolve_from_file_with_env_var_expansion(self, tmp_path, monkeypatch):
        """Test file path expansion with $VAR environment variables."""
        cred_file = tmp_path / "token"
        cred_file.write_text("expanded-token")
        monkeypatch.setenv("SECRETS_DIR", str(tmp_path))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="$SECRETS_DIR/token") == "expanded-token"

    def test_resolve_from_file_returns_none_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="/nonexistent/path/to/token") is None

    def test_resolve_from_file_raises_when_required_and_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialFileError) as exc_info:
            resolver.resolve_from_file(file_path="/nonexistent/path/to/token", required=True)

        assert "not found" in str(exc_info.value)

    @pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root can read any file")
    def test_resolve_from_file_handles_permission_error(self, tmp_path):
        """Test that resolve_from_file handles permission errors gracefully."""
        cred_file = tmp_path / "token"
        cred_file.write_text("secret")
        cred_file.chmod(0o000)

        resolver = CredentialResolver(load_dotenv=False)

        try:
            assert resolver.resolve_from_file(file_path=str(cred_file)) is None

            with pytest.raises(CredentialFileError) as exc_info:
                resolver.resolve_from_file(file_path=str(cred_file), required=True)

            assert "Permission denied" in str(exc_info.value)
        finally:
            cred_file.chmod(0o644)

    def test_resolve_from_file_with_general_read_error(self, tmp_path):
        """Test that reading a directory is reported as a file error."""
        not_a_file = tmp_path / "dir_not_file"
        not_a_file.mkdir()

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(not_a_file)) is None
        with pytest.raises(CredentialFileError):
            resolver.resolve_from_file(file_path=str(not_a_file), required=True)

    def test_resolve_from_file_env_var_not_set(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(env_var_name=TOKEN_FILE_ENV_VAR) is None
        with pytest.raises(CredentialFileError) as exc_info:
            resolver.resolve_from_file(env_var_name=TOKEN_FILE_ENV_VAR, required=True)
        assert TOKEN_FILE_ENV_VAR in str(exc_info.value)


@pytest.mark.unit
class TestResolveToken:
    """Test the token lookup chain."""

    def test_explicit_token(self, monkeypatch):
        monkeypatch.setenv(TOKEN_ENV_VAR, "env-token")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_token("explicit-token") == "explicit-token"

    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv(TOKEN_ENV_VAR, "env-token")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_token() == "env-token"

    def test_token_from_file(self, tmp_path, monkeypatch):
        cred_file = tmp_path / "token"
        cred_file.write_text("file-token\n")
        monkeypatch.setenv(TOKEN_FILE_ENV_VAR, str(cred_file))
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_token() == "file-token"

    def test_environment_wins_over_file(self, tmp_path, monkeypatch):
        cred_file = tmp_path / "token"
        cred_file.write_text("file-token")
        monkeypatch.setenv(TOKEN_FILE_ENV_VAR, str(cred_file))
        monkeypatch.setenv(TOKEN_ENV_VAR, "env-token")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_token() == "env-token"

    def test_missing_token_raises(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve_token()

        assert TOKEN_ENV_VAR in str(exc_info.value)
        assert TOKEN_FILE_ENV_VAR in str(exc_info.value)
        assert exc_info.value.env_var_name == TOKEN_ENV_VAR

    def test_empty_token_file_raises(self, tmp_path, monkeypatch):
        cred_file = tmp_path / "token"
        cred_file.write_text("   \n")
        monkeypatch.setenv(TOKEN_FILE_ENV_VAR, str(cred_file))
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError):
            resolver.resolve_token()


@pytest.mark.unit
class TestCredentialMasking:
    """Test that tokens never reach the logs."""

    def test_token_is_masked_in_debug_logs(self, caplog, monkeypatch):
        caplog.set_level(logging.DEBUG)
        monkeypatch.setenv(TOKEN_ENV_VAR, "super-secret-token-123")

        CredentialResolver(load_dotenv=False).resolve_token()

        assert "super-secret-token-123" not in caplog.text
        assert "***" in caplog.text

    def test_masking_can_be_disabled(self, caplog):
        caplog.set_level(logging.DEBUG)

        CredentialResolver(load_dotenv=False).resolve(value="https://api.example.com", mask_in_logs=False)

        assert "https://api.example.com" in caplog.text

    def test_file_tokens_are_masked(self, tmp_path, caplog):
        caplog.set_level(logging.DEBUG)
        cred_file = tmp_path / "token"
        cred_file.write_text("file-secret-xyz")

        CredentialResolver(load_dotenv=False).resolve_from_file(file_path=str(cred_file))

        assert "file-secret-xyz" not in caplog.text
        assert "***" in caplog.text
