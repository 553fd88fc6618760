"""
Immutable secp256k1 keypair.

A [Key][nostrseal.models.key.Key] is produced only by
[KeyManager][nostrseal.nips.nip01.keys.KeyManager], either freshly generated
or decoded from an externally supplied secret. It is never built from a
public key alone.

See Also:
    [nostrseal.nips.nip01.keys][]: Generation and decoding.
    [nostrseal.utils.keys][]: Loading a secret from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._validation import validate_instance
from .fixed import SecretScalar, XOnlyPublicKey


@dataclass(frozen=True, slots=True)
class Key:
    """A secret scalar and its x-only public key.

    Attributes:
        secret: 32-byte scalar in ``[1, n)``. Excluded from ``repr``.
        public: 32-byte x-only public key derived from ``secret``.

    Warning:
        The pairing between ``secret`` and ``public`` is not re-checked at
        construction. [EventSigner.sign()][nostrseal.nips.nip01.signer.EventSigner.sign]
        re-derives ``public`` and refuses a mismatched key.
    """

    secret: SecretScalar = field(repr=False)
    public: XOnlyPublicKey

    def __post_init__(self) -> None:
        validate_instance(self.secret, SecretScalar, "secret")
        validate_instance(self.public, XOnlyPublicKey, "public")
