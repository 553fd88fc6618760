"""
Unit tests for utils.keys module.

Tests:
- ENV_PRIVATE_KEY constant
- parse_secret() - hex and nsec formats, invalid input
- load_secret_from_env() - environment variable loading
- to_bech32() - NIP-19 encodings
- KeysConfig - Pydantic model for secret key configuration
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from nostrseal.core.exceptions import InvalidKeyError
from nostrseal.models import Key, SecretScalar
from nostrseal.nips.nip01 import KeyManager
from nostrseal.utils.keys import (
    ENV_PRIVATE_KEY,
    KeysConfig,
    load_secret_from_env,
    parse_secret,
    to_bech32,
)


# =============================================================================
# Test Constants
# =============================================================================

# Valid secp256k1 test keys (DO NOT USE IN PRODUCTION)
VALID_HEX_KEY = (
    "67dea2ed018072d675f5415ecfaed7d2597555e202d85b3d65ea4e58d2d92ffa"  # pragma: allowlist secret
)
VALID_NSEC_KEY = (
    "nsec1vl029mgpspedva04g90vltkh6fvh240zqtv9k0t9af8935ke9laqsnlfe5"  # pragma: allowlist secret
)

# Invalid key formats for testing error handling
INVALID_KEYS = [
    "invalid_key",  # Not hex or nsec
    "0" * 32,  # Too short (32 chars instead of 64)
    "0" * 128,  # Too long
    "nsec1invalid",  # Invalid bech32 checksum
    "npub1abc",  # Wrong prefix (public key, not secret)
    "xyz" * 21 + "x",  # 64 chars but not valid hex
]


# =============================================================================
# ENV_PRIVATE_KEY Constant Tests
# =============================================================================


class TestEnvPrivateKeyConstant:
    """ENV_PRIVATE_KEY constant value."""

    def test_constant_value(self) -> None:
        """Verify the constant has the expected value."""
        assert ENV_PRIVATE_KEY == "PRIVATE_KEY"  # pragma: allowlist secret


# =============================================================================
# parse_secret() Tests
# =============================================================================


class TestParseSecret:
    """parse_secret() with hex and nsec input."""

    def test_hex(self) -> None:
        """Test parsing a 64-character hex secret."""
        secret = parse_secret(VALID_HEX_KEY)
        assert isinstance(secret, SecretScalar)
        assert secret.hex() == VALID_HEX_KEY

    def test_nsec(self) -> None:
        """Test that the nsec form decodes to the same scalar."""
        assert parse_secret(VALID_NSEC_KEY).hex() == VALID_HEX_KEY

    def test_surrounding_whitespace(self) -> None:
        """Test that trailing newlines from env files are ignored."""
        assert parse_secret(f"  {VALID_NSEC_KEY}\n").hex() == VALID_HEX_KEY

    @pytest.mark.parametrize("value", INVALID_KEYS)
    def test_invalid(self, value: str) -> None:
        """Test that malformed keys raise InvalidKeyError."""
        with pytest.raises(InvalidKeyError):
            parse_secret(value)


# =============================================================================
# load_secret_from_env() Tests
# =============================================================================


class TestLoadSecretFromEnv:
    """load_secret_from_env() environment handling."""

    def test_raises_when_env_var_not_set(self) -> None:
        """Test that ValueError is raised when env var is not set."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="PRIVATE_KEY is not set"):
                load_secret_from_env("PRIVATE_KEY")

    def test_raises_when_env_var_is_empty(self) -> None:
        """Test that ValueError is raised when env var is empty string."""
        with patch.dict(os.environ, {"PRIVATE_KEY": ""}):  # pragma: allowlist secret
            with pytest.raises(ValueError, match="create a key with"):
                load_secret_from_env("PRIVATE_KEY")

    def test_loads_hex(self) -> None:
        """Test loading a hex key."""
        with patch.dict(os.environ, {"PRIVATE_KEY": VALID_HEX_KEY}):  # pragma: allowlist secret
            assert load_secret_from_env("PRIVATE_KEY").hex() == VALID_HEX_KEY

    def test_loads_nsec_from_custom_var(self) -> None:
        """Test loading an nsec key from a custom variable name."""
        with patch.dict(os.environ, {"NOSTR_SECRET": VALID_NSEC_KEY}):  # pragma: allowlist secret
            assert load_secret_from_env("NOSTR_SECRET").hex() == VALID_HEX_KEY

    def test_invalid_value(self) -> None:
        """Test that a malformed value raises InvalidKeyError."""
        with patch.dict(os.environ, {"PRIVATE_KEY": "not-a-key"}):  # pragma: allowlist secret
            with pytest.raises(InvalidKeyError):
                load_secret_from_env("PRIVATE_KEY")


# =============================================================================
# to_bech32() Tests
# =============================================================================


class TestToBech32:
    """to_bech32() NIP-19 encoding."""

    def test_encodings(self, key_manager: KeyManager) -> None:
        """Test that nsec matches the known encoding and npub has the right prefix."""
        key = key_manager.decode(VALID_HEX_KEY)
        nsec, npub = to_bech32(key)
        assert nsec == VALID_NSEC_KEY
        assert npub.startswith("npub1")

    def test_round_trip(self, key_manager: KeyManager) -> None:
        """Test that a generated key survives nsec encoding and parsing."""
        key = key_manager.generate()
        nsec, _ = to_bech32(key)
        assert parse_secret(nsec) == key.secret


# =============================================================================
# KeysConfig Tests
# =============================================================================


class TestKeysConfig:
    """KeysConfig auto-loading."""

    def test_default_env_var(self) -> None:
        """Test that PRIVATE_KEY is read by default."""
        with patch.dict(os.environ, {"PRIVATE_KEY": VALID_HEX_KEY}):  # pragma: allowlist secret
            config = KeysConfig()
        assert config.keys_env == "PRIVATE_KEY"  # pragma: allowlist secret
        assert config.secret.hex() == VALID_HEX_KEY

    def test_custom_env_var(self) -> None:
        """Test reading from a custom environment variable."""
        with patch.dict(os.environ, {"NOSTR_SECRET": VALID_NSEC_KEY}):  # pragma: allowlist secret
            config = KeysConfig(keys_env="NOSTR_SECRET")
        assert config.secret.hex() == VALID_HEX_KEY

    def test_explicit_secret_skips_env(self) -> None:
        """Test that an explicit secret is used as-is."""
        secret = SecretScalar.from_hex(VALID_HEX_KEY)
        with patch.dict(os.environ, {}, clear=True):
            config = KeysConfig(secret=secret)
        assert config.secret == secret

    def test_explicit_string_secret(self) -> None:
        """Test that an explicit nsec string is parsed."""
        with patch.dict(os.environ, {}, clear=True):
            config = KeysConfig(secret=VALID_NSEC_KEY)
        assert config.secret.hex() == VALID_HEX_KEY

    def test_frozen(self) -> None:
        """Test that the resolved secret cannot be replaced."""
        config = KeysConfig(secret=VALID_HEX_KEY)
        with pytest.raises(ValidationError):
            config.keys_env = "OTHER"  # type: ignore[misc]

    def test_missing_env_var(self) -> None:
        """Test that a missing variable surfaces as ValidationError."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError, match="PRIVATE_KEY is not set"):
                KeysConfig()

    def test_secret_redacted_in_repr(self) -> None:
        """Test that the loaded secret does not leak through repr."""
        with patch.dict(os.environ, {"PRIVATE_KEY": VALID_HEX_KEY}):  # pragma: allowlist secret
            config = KeysConfig()
        assert VALID_HEX_KEY not in repr(config)

    def test_decodes_to_key(self, key_manager: KeyManager) -> None:
        """Test that the loaded secret is accepted by KeyManager."""
        with patch.dict(os.environ, {"PRIVATE_KEY": VALID_NSEC_KEY}):  # pragma: allowlist secret
            config = KeysConfig()
        assert isinstance(key_manager.decode(config.secret), Key)
