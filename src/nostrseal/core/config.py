"""
Pydantic configuration for the nostrseal signing pipeline.

Configuration is read from a YAML file (via
[load_yaml()][nostrseal.core.yaml.load_yaml]) or a plain dictionary and
validated into frozen Pydantic models. The secret key itself is never part
of the file: only the *name* of the environment variable that holds it
(``keys_env``), which [KeysConfig][nostrseal.utils.keys.KeysConfig] resolves.

Examples:
    ```yaml
    keys_env: NOSTR_SECRET
    signing:
      deterministic: false
    output:
      buffer_size: 2048
    logging:
      level: DEBUG
      json_output: true
    ```

    ```python
    config = NostrSealConfig.from_yaml("config/nostrseal.yaml")
    config.output.buffer_size  # 2048
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nostrseal.models.constants import DEFAULT_BUFFER_SIZE

from .exceptions import ConfigurationError
from .yaml import load_yaml


_MIN_BUFFER_SIZE = 64
_MAX_BUFFER_SIZE = 1024 * 1024


class SigningConfig(BaseModel):
    """How Schnorr signatures are produced.

    Attributes:
        deterministic: Use fixed (all-zero) BIP-340 auxiliary data so the same
            key and id always yield the same signature. Off by default:
            fresh auxiliary randomness is drawn for every signature.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    deterministic: bool = False


class OutputConfig(BaseModel):
    """Output buffer sizing for serialized events."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    buffer_size: int = Field(
        default=DEFAULT_BUFFER_SIZE,
        ge=_MIN_BUFFER_SIZE,
        le=_MAX_BUFFER_SIZE,
        description="Capacity in bytes of the serialized event buffer",
    )


class LoggingConfig(BaseModel):
    """Root logger level and output format."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_output: bool = False


class NostrSealConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        keys_env: Name of the environment variable holding the secret key.
        signing: [SigningConfig][nostrseal.core.config.SigningConfig].
        output: [OutputConfig][nostrseal.core.config.OutputConfig].
        logging: [LoggingConfig][nostrseal.core.config.LoggingConfig].
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    keys_env: str = Field(
        default="PRIVATE_KEY",  # pragma: allowlist secret
        min_length=1,
        description="Environment variable name for private key",
    )
    signing: SigningConfig = Field(default_factory=SigningConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If validation fails.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or fails validation.
        """
        try:
            data = load_yaml(config_path)
        except (FileNotFoundError, TypeError, yaml.YAMLError) as e:
            raise ConfigurationError(str(e)) from e
        return cls.from_dict(data)
