"""Nostr key loading and NIP-19 encoding utilities.

The ``note`` command signs with a secret taken from the environment rather
than from the YAML config. [parse_secret][nostrseal.utils.keys.parse_secret]
accepts NIP-19 ``nsec1`` strings and 64-character hex, delegating the format
detection to ``nostr_sdk.Keys.parse``; range checks and public key derivation
stay in [KeyManager.decode()][nostrseal.nips.nip01.keys.KeyManager.decode].

Warning:
    Secrets belong in the process environment or a secret manager. Never put
    them in ``config/*.yaml`` or pass them to a logger unredacted.

Note:
    [KeysConfig][nostrseal.utils.keys.KeysConfig] resolves the secret while it
    validates, so a missing variable fails the command before any event is
    assembled.

Examples:
    ```python
    secret = load_secret_from_env("NOSTR_SECRET")
    key = KeyManager(CryptoContext.create()).decode(secret)
    nsec, npub = to_bech32(key)
    ```
"""

from __future__ import annotations

import os
from typing import Any

from nostr_sdk import Keys, NostrSdkError
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from nostrseal.core.exceptions import InvalidKeyError
from nostrseal.models.fixed import SecretScalar
from nostrseal.models.key import Key


ENV_PRIVATE_KEY = "PRIVATE_KEY"  # pragma: allowlist secret


def parse_secret(value: str) -> SecretScalar:
    """Parse an ``nsec1`` or 64-character hex secret key.

    Raises:
        InvalidKeyError: If ``nostr_sdk`` cannot parse the value.
    """
    try:
        keys = Keys.parse(value.strip())
    except (NostrSdkError, ValueError) as e:
        raise InvalidKeyError(f"Secret key is neither nsec nor 64-char hex: {e}") from e
    return SecretScalar.from_hex(keys.secret_key().to_hex())


def load_secret_from_env(env_var: str) -> SecretScalar:
    """Read and parse the secret stored in ``env_var``.

    Raises:
        ValueError: If the variable is unset or empty.
        InvalidKeyError: If the value is neither hex nor ``nsec1``.
    """
    raw = os.environ.get(env_var, "").strip()
    if not raw:
        raise ValueError(f"{env_var} is not set; create a key with `nostrseal keys`")
    return parse_secret(raw)


def to_bech32(key: Key) -> tuple[str, str]:
    """Return the NIP-19 ``(nsec, npub)`` encodings of ``key``."""
    keys = Keys.parse(key.secret.hex())
    return keys.secret_key().to_bech32(), keys.public_key().to_bech32()


class KeysConfig(BaseModel):
    """Resolved secret key for the ``note`` command.

    Unless ``secret`` is given explicitly, it is read during validation from
    the environment variable named by ``keys_env``. An explicit ``secret``
    may be a [SecretScalar][nostrseal.models.fixed.SecretScalar] or a
    hex / ``nsec1`` string.

    Attributes:
        keys_env: Environment variable holding the secret.
        secret: The 32-byte scalar. Range checks happen later in
            [KeyManager.decode()][nostrseal.nips.nip01.keys.KeyManager.decode].

    Raises:
        pydantic.ValidationError: If the environment variable is unset or
            empty.
        InvalidKeyError: If the value is neither hex nor ``nsec1``.

    Warning:
        ``secret`` is live key material. Its ``repr`` is redacted, but the
        model must still never be dumped to logs or files.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    keys_env: str = Field(
        default=ENV_PRIVATE_KEY,
        min_length=1,
        description="Variable the signing secret is read from",
    )
    secret: SecretScalar

    @model_validator(mode="before")
    @classmethod
    def _secret_from_env(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("secret") is None:
            return {**data, "secret": load_secret_from_env(data.get("keys_env", ENV_PRIVATE_KEY))}
        return data

    @field_validator("secret", mode="before")
    @classmethod
    def _parse_str_secret(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_secret(value)
        return value
