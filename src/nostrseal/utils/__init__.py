"""Utility helpers that sit beside the NIP layer.

Attributes:
    keys: Environment-based secret loading (hex or ``nsec1``) and NIP-19
        encoding via ``nostr_sdk``.
"""

from .keys import ENV_PRIVATE_KEY, KeysConfig, load_secret_from_env, parse_secret, to_bech32


__all__ = [
    "ENV_PRIVATE_KEY",
    "KeysConfig",
    "load_secret_from_env",
    "parse_secret",
    "to_bech32",
]
