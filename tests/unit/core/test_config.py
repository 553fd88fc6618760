"""
Unit tests for core.config module.

Tests:
- Default values of every section
- from_dict() validation and ConfigurationError wrapping
- from_yaml() loading and error wrapping
- Frozen models and unknown-key rejection
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from nostrseal.core.config import LoggingConfig, NostrSealConfig, OutputConfig, SigningConfig
from nostrseal.core.exceptions import ConfigurationError
from nostrseal.models.constants import DEFAULT_BUFFER_SIZE, ErrorCode


# ============================================================================
# Default Tests
# ============================================================================


class TestDefaults:
    """Default configuration values."""

    def test_top_level(self) -> None:
        """Test NostrSealConfig defaults."""
        config = NostrSealConfig()
        assert config.keys_env == "PRIVATE_KEY"  # pragma: allowlist secret
        assert config.signing == SigningConfig()
        assert config.output == OutputConfig()
        assert config.logging == LoggingConfig()

    def test_signing_randomized_by_default(self) -> None:
        """Test that deterministic signing is opt-in."""
        assert SigningConfig().deterministic is False

    def test_buffer_size(self) -> None:
        """Test the default output buffer size."""
        assert OutputConfig().buffer_size == DEFAULT_BUFFER_SIZE

    def test_logging(self) -> None:
        """Test logging defaults."""
        assert LoggingConfig().level == "INFO"
        assert LoggingConfig().json_output is False


# ============================================================================
# Validation Tests
# ============================================================================


class TestValidation:
    """Field validation."""

    def test_buffer_size_bounds(self) -> None:
        """Test buffer_size lower and upper bounds."""
        assert OutputConfig(buffer_size=64).buffer_size == 64
        assert OutputConfig(buffer_size=1024 * 1024).buffer_size == 1024 * 1024
        with pytest.raises(ValidationError):
            OutputConfig(buffer_size=63)
        with pytest.raises(ValidationError):
            OutputConfig(buffer_size=1024 * 1024 + 1)

    def test_invalid_level(self) -> None:
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="TRACE")  # type: ignore[arg-type]

    def test_unknown_key_rejected(self) -> None:
        """Test that typos in config keys are caught."""
        with pytest.raises(ValidationError):
            SigningConfig(determinstic=True)  # type: ignore[call-arg]

    def test_empty_keys_env_rejected(self) -> None:
        """Test that keys_env must be non-empty."""
        with pytest.raises(ValidationError):
            NostrSealConfig(keys_env="")

    def test_frozen(self) -> None:
        """Test that configuration cannot be mutated after loading."""
        config = NostrSealConfig()
        with pytest.raises(ValidationError):
            config.keys_env = "OTHER"  # type: ignore[misc]


# ============================================================================
# from_dict Tests
# ============================================================================


class TestFromDict:
    """NostrSealConfig.from_dict()."""

    def test_nested(self) -> None:
        """Test that nested sections are validated."""
        config = NostrSealConfig.from_dict(
            {
                "keys_env": "NOSTR_SECRET",
                "signing": {"deterministic": True},
                "output": {"buffer_size": 2048},
                "logging": {"level": "DEBUG", "json_output": True},
            }
        )
        assert config.keys_env == "NOSTR_SECRET"
        assert config.signing.deterministic is True
        assert config.output.buffer_size == 2048
        assert config.logging.level == "DEBUG"
        assert config.logging.json_output is True

    def test_empty(self) -> None:
        """Test that an empty dict yields defaults."""
        assert NostrSealConfig.from_dict({}) == NostrSealConfig()

    def test_invalid_wrapped(self) -> None:
        """Test that validation failures become ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid configuration") as exc_info:
            NostrSealConfig.from_dict({"output": {"buffer_size": 1}})
        assert exc_info.value.code == ErrorCode.CONFIGURATION
        assert isinstance(exc_info.value.__cause__, ValidationError)


# ============================================================================
# from_yaml Tests
# ============================================================================


class TestFromYaml:
    """NostrSealConfig.from_yaml()."""

    def test_valid_file(self, tmp_path: Path) -> None:
        """Test loading a YAML file."""
        path = tmp_path / "nostrseal.yaml"
        path.write_text(
            "keys_env: NOSTR_SECRET\nsigning:\n  deterministic: true\n", encoding="utf-8"
        )
        config = NostrSealConfig.from_yaml(path)
        assert config.keys_env == "NOSTR_SECRET"
        assert config.signing.deterministic is True

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            NostrSealConfig.from_yaml(tmp_path / "missing.yaml")

    def test_bad_yaml(self, tmp_path: Path) -> None:
        """Test that invalid YAML raises ConfigurationError."""
        path = tmp_path / "bad.yaml"
        path.write_text("signing: [\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            NostrSealConfig.from_yaml(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test that a list document raises ConfigurationError."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            NostrSealConfig.from_yaml(path)
