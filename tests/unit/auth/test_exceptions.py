"""Tests for credential resolution exceptions."""

import pytest

from dnsimple_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)


@pytest.mark.unit
class TestCredentialNotFoundError:
    """Test CredentialNotFoundError exception."""

    def test_is_credential_error(self):
        """Test that CredentialNotFoundError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    def test_exception_message(self):
        """Test that exception message is preserved."""
        error = CredentialNotFoundError("DNSimple token not found")
        assert str(error) == "DNSimple token not found"

    def test_env_var_name_attribute(self):
        """Test that env_var_name attribute is set."""
        error = CredentialNotFoundError("Test error", env_var_name="DNSIMPLE_TOKEN")
        assert error.env_var_name == "DNSIMPLE_TOKEN"

    def test_env_var_name_optional(self):
        """Test that env_var_name is optional."""
        assert CredentialNotFoundError("Test error").env_var_name is None


@pytest.mark.unit
class TestCredentialFileError:
    """Test CredentialFileError exception."""

    def test_is_credential_error(self):
        """Test that CredentialFileError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialFileError("Credential file not found: /tmp/token")

    def test_not_a_not_found_error(self):
        """Test that the two kinds can be told apart."""
        assert not issubclass(CredentialFileError, CredentialNotFoundError)
