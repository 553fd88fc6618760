"""nostrseal exception hierarchy.

Provides typed exceptions for every failure category of the signing
pipeline. Each class carries a numeric [ErrorCode][nostrseal.models.constants.ErrorCode]
so callers (and the CLI exit status) can distinguish failures by number as
well as by type.

Exception hierarchy:

```text
NostrSealError (base -- never raised directly)
├── ContextError            -- secp256k1 context unavailable (fatal)
├── KeyMaterialError        -- bad or unusable key material
│   ├── KeyGenError         -- library failure while generating a key
│   └── InvalidKeyError     -- supplied secret malformed or out of range
├── SigningError            -- Schnorr primitive rejected the input
├── BufferTooSmallError     -- rendered event exceeds the output buffer
├── InvalidInputError       -- malformed pubkey, content, tags, or event
├── ConfigurationError      -- invalid YAML, settings, or environment
└── VerificationError       -- event id or signature does not verify
```

See Also:
    [KeyManager][nostrseal.nips.nip01.keys.KeyManager]: Raises the key
        material errors.
    [EventSigner][nostrseal.nips.nip01.signer.EventSigner]: Raises
        [SigningError][nostrseal.core.exceptions.SigningError].
    [EventSerializer][nostrseal.nips.nip01.serializer.EventSerializer]: Raises
        [BufferTooSmallError][nostrseal.core.exceptions.BufferTooSmallError].
"""

from __future__ import annotations

from typing import ClassVar

from nostrseal.models.constants import ErrorCode


class NostrSealError(Exception):
    """Base exception for all nostrseal errors.

    Never raised directly -- always use a specific subclass.

    Attributes:
        code: Numeric status code for this failure category.
    """

    code: ClassVar[ErrorCode] = ErrorCode.OK


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


class ContextError(NostrSealError):
    """The secp256k1 context could not be created or randomized.

    Unrecoverable within the process, but still reported rather than
    aborting.
    """

    code = ErrorCode.CONTEXT


# ---------------------------------------------------------------------------
# Key material
# ---------------------------------------------------------------------------


class KeyMaterialError(NostrSealError):
    """Base for key generation and key decoding failures.

    Named to avoid shadowing the builtin ``KeyError``.
    """

    code = ErrorCode.KEY_DECODE


class KeyGenError(KeyMaterialError):
    """Key generation failed inside the cryptographic library.

    Effectively unreachable with a healthy library; callers may retry.
    """

    code = ErrorCode.KEY_GENERATION


class InvalidKeyError(KeyMaterialError):
    """A supplied secret is not a 32-byte scalar in ``[1, n)``.

    Not retryable without supplying different input.
    """

    code = ErrorCode.KEY_DECODE


# ---------------------------------------------------------------------------
# Signing
# ---------------------------------------------------------------------------


class SigningError(NostrSealError):
    """The Schnorr signing primitive rejected its input.

    Not retryable without fixing the key or identifier.
    """

    code = ErrorCode.SIGNING


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class BufferTooSmallError(NostrSealError):
    """The rendered event does not fit in the caller-provided buffer.

    Recoverable by retrying with a buffer of at least ``required`` bytes.
    The buffer is left untouched.

    Attributes:
        required: Size in bytes of the full rendering.
        capacity: Size in bytes of the buffer that was offered.
    """

    code = ErrorCode.BUFFER_TOO_SMALL

    def __init__(self, required: int, capacity: int) -> None:
        super().__init__(f"Buffer too small: need {required} bytes, have {capacity}")
        self.required = required
        self.capacity = capacity


# ---------------------------------------------------------------------------
# Input, configuration, verification
# ---------------------------------------------------------------------------


class InvalidInputError(NostrSealError):
    """Malformed event input: pubkey length, content encoding, tags, or JSON."""

    code = ErrorCode.INVALID_INPUT


class ConfigurationError(NostrSealError):
    """Invalid or missing configuration (YAML, env vars, CLI flags).

    See Also:
        [load_yaml()][nostrseal.core.yaml.load_yaml]: YAML loading function
            that may trigger configuration errors.
    """

    code = ErrorCode.CONFIGURATION


class VerificationError(NostrSealError):
    """An event's id or signature does not verify."""

    code = ErrorCode.VERIFICATION
