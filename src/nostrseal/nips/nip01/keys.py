"""
secp256k1 key generation and decoding.

[KeyManager][nostrseal.nips.nip01.keys.KeyManager] is the only producer of
[Key][nostrseal.models.key.Key] instances. Scalar validation and x-only
public key derivation are delegated to ``coincurve`` (libsecp256k1) using
the caller's [CryptoContext][nostrseal.core.context.CryptoContext].

See Also:
    [nostrseal.utils.keys][]: Loads a secret from an environment variable
        (hex or ``nsec1``) and hands it to
        [KeyManager.decode()][nostrseal.nips.nip01.keys.KeyManager.decode].
"""

from __future__ import annotations

from coincurve import PrivateKey, PublicKeyXOnly

from nostrseal.core.context import CryptoContext
from nostrseal.core.exceptions import InvalidKeyError, KeyGenError
from nostrseal.core.logger import Logger
from nostrseal.models._validation import validate_instance
from nostrseal.models.constants import SECRET_KEY_SIZE
from nostrseal.models.fixed import SecretScalar, XOnlyPublicKey
from nostrseal.models.key import Key


# Order n of the secp256k1 group; valid secrets are 1 <= s < n.
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


class KeyManager:
    """Generates and decodes secp256k1 keypairs.

    Args:
        context: Initialized crypto context shared with the signer.

    Examples:
        ```python
        ctx = CryptoContext.create()
        manager = KeyManager(ctx)
        key = manager.generate()
        same = manager.decode(key.secret.hex())
        assert same.public == key.public
        ```
    """

    def __init__(self, context: CryptoContext) -> None:
        validate_instance(context, CryptoContext, "context")
        self._context = context
        self._logger = Logger("nostrseal.keys")

    def generate(self) -> Key:
        """Generate a fresh keypair from system entropy.

        Blocks only while the operating system supplies random bytes.

        Returns:
            A new [Key][nostrseal.models.key.Key].

        Raises:
            KeyGenError: If the library fails to produce or derive a key.
        """
        try:
            private = PrivateKey(context=self._context.raw)
            public = PublicKeyXOnly.from_secret(private.secret, context=self._context.raw)
            key = Key(secret=SecretScalar(private.secret), public=XOnlyPublicKey(public.format()))
        except Exception as e:  # Intentionally broad: any library failure is reported, never raised raw
            self._logger.error("key_generation_failed", error=str(e))
            raise KeyGenError(f"Could not generate key: {e}") from e

        self._logger.debug("key_generated", pubkey=key.public.hex())
        return key

    def decode(self, secret: bytes | bytearray | str) -> Key:
        """Decode an externally supplied secret and derive its public key.

        A pure function of its input: decoding the same secret always yields
        the same public key.

        Args:
            secret: 32 raw bytes or 64 hex characters.

        Returns:
            The [Key][nostrseal.models.key.Key] for ``secret``.

        Raises:
            InvalidKeyError: If the input is not 32 bytes / 64 hex characters,
                is zero, or is not below the curve order.
        """
        scalar = self._parse_secret(secret)
        try:
            public = PublicKeyXOnly.from_secret(bytes(scalar), context=self._context.raw)
        except ValueError as e:
            raise InvalidKeyError(f"Secret rejected by secp256k1: {e}") from e

        key = Key(secret=scalar, public=XOnlyPublicKey(public.format()))
        self._logger.debug("key_decoded", pubkey=key.public.hex())
        return key

    @staticmethod
    def _parse_secret(secret: bytes | bytearray | str) -> SecretScalar:
        if isinstance(secret, str):
            # bytes.fromhex skips whitespace, so the length is checked first
            if len(secret) != SECRET_KEY_SIZE * 2:
                raise InvalidKeyError(
                    f"Secret key hex must be {SECRET_KEY_SIZE * 2} characters, got {len(secret)}"
                )
            try:
                raw = bytes.fromhex(secret)
            except ValueError as e:
                raise InvalidKeyError("Secret key is not valid hex") from e
        elif isinstance(secret, bytes | bytearray | memoryview):
            raw = bytes(secret)
        else:
            raise InvalidKeyError(f"Secret key must be bytes or hex str, got {type(secret).__name__}")

        if len(raw) != SECRET_KEY_SIZE:
            raise InvalidKeyError(f"Secret key must be {SECRET_KEY_SIZE} bytes, got {len(raw)}")

        value = int.from_bytes(raw, "big")
        if value == 0:
            raise InvalidKeyError("Secret key must not be zero")
        if value >= CURVE_ORDER:
            raise InvalidKeyError("Secret key must be less than the curve order")
        return SecretScalar(raw)
