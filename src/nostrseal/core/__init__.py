"""Core layer: crypto context, exceptions, logging, and configuration.

Sits in the middle of the diamond DAG -- depends only on
``nostrseal.models`` and is depended upon by ``nostrseal.nips``,
``nostrseal.utils``, and ``nostrseal.api``.

Attributes:
    CryptoContext: Explicitly owned libsecp256k1 context.
        See [CryptoContext][nostrseal.core.context.CryptoContext].
    NostrSealError: Base of the exception hierarchy; every subclass carries
        an [ErrorCode][nostrseal.models.constants.ErrorCode].
    Logger: Structured logger supporting key=value and JSON output modes.
    NostrSealConfig: Pydantic configuration loaded from YAML.
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
"""

from .config import LoggingConfig, NostrSealConfig, OutputConfig, SigningConfig
from .context import CryptoContext
from .exceptions import (
    BufferTooSmallError,
    ConfigurationError,
    ContextError,
    InvalidInputError,
    InvalidKeyError,
    KeyGenError,
    KeyMaterialError,
    NostrSealError,
    SigningError,
    VerificationError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "BufferTooSmallError",
    "ConfigurationError",
    "ContextError",
    "CryptoContext",
    "InvalidInputError",
    "InvalidKeyError",
    "KeyGenError",
    "KeyMaterialError",
    "Logger",
    "LoggingConfig",
    "NostrSealConfig",
    "NostrSealError",
    "OutputConfig",
    "SigningConfig",
    "SigningError",
    "StructuredFormatter",
    "VerificationError",
    "format_kv_pairs",
    "load_yaml",
]
