"""
BIP-340 Schnorr signing and verification of event ids.

[EventSigner][nostrseal.nips.nip01.signer.EventSigner] wraps coincurve's
``sign_schnorr`` and x-only ``verify`` with the caller's
[CryptoContext][nostrseal.core.context.CryptoContext].

Two signing modes are supported:

* **randomized** (default): each call draws 32 fresh bytes of BIP-340
  auxiliary randomness, so concurrent signers never share nonce material
  and repeated signatures over the same id differ;
* **deterministic**: auxiliary data is fixed to 32 zero bytes, so the same
  key and id always produce the same signature.

Both modes produce signatures that any BIP-340 verifier accepts. Tests and
callers compare signatures through
[verify()][nostrseal.nips.nip01.signer.EventSigner.verify], never byte-wise,
unless deterministic mode was chosen.
"""

from __future__ import annotations

from coincurve import PrivateKey, PublicKeyXOnly

from nostrseal.core.context import CryptoContext
from nostrseal.core.exceptions import SigningError
from nostrseal.core.logger import Logger
from nostrseal.models._validation import validate_instance
from nostrseal.models.constants import EVENT_ID_SIZE, PUBLIC_KEY_SIZE, SIGNATURE_SIZE
from nostrseal.models.event import IdentifiedEvent, SignedEvent
from nostrseal.models.fixed import Signature
from nostrseal.models.key import Key

from .identifier import compute_event_id


_DETERMINISTIC_AUX = bytes(32)


class EventSigner:
    """Signs event ids with a [Key][nostrseal.models.key.Key] and verifies signatures.

    Args:
        context: Initialized crypto context shared with the key manager.
        deterministic: Fix BIP-340 auxiliary data instead of drawing fresh
            randomness per signature.
    """

    def __init__(self, context: CryptoContext, *, deterministic: bool = False) -> None:
        validate_instance(context, CryptoContext, "context")
        self._context = context
        self._deterministic = deterministic
        self._logger = Logger("nostrseal.signer")

    @property
    def deterministic(self) -> bool:
        return self._deterministic

    def sign(self, key: Key, event_id: bytes) -> Signature:
        """Schnorr-sign a 32-byte event id.

        Args:
            key: Signing key.
            event_id: The id to sign, an [EventId][nostrseal.models.fixed.EventId]
                or any 32-byte value.

        Returns:
            The 64-byte signature.

        Raises:
            SigningError: If the key is not a [Key][nostrseal.models.key.Key],
                its ``public`` is not derived from its ``secret``, the id is
                not 32 bytes, or the primitive rejects the input.
        """
        if not isinstance(key, Key):
            raise SigningError(f"key must be a Key, got {type(key).__name__}")
        if not isinstance(event_id, bytes | bytearray) or len(event_id) != EVENT_ID_SIZE:
            raise SigningError(f"Event id must be {EVENT_ID_SIZE} bytes")

        # b"" makes coincurve draw os.urandom(32) per call
        aux = _DETERMINISTIC_AUX if self._deterministic else b""
        try:
            derived = PublicKeyXOnly.from_secret(bytes(key.secret), context=self._context.raw)
            if derived.format() != key.public:
                self._logger.error("key_pair_mismatch", pubkey=key.public.hex())
                raise SigningError("Key public component does not derive from its secret")
            private = PrivateKey(bytes(key.secret), context=self._context.raw)
            raw = private.sign_schnorr(bytes(event_id), aux)
            signature = Signature(raw)
        except ValueError as e:
            self._logger.error("signing_failed", error=str(e))
            raise SigningError(f"Schnorr signing failed: {e}") from e

        self._logger.debug("event_signed", event_id=bytes(event_id).hex())
        return signature

    def seal(self, key: Key, identified: IdentifiedEvent) -> SignedEvent:
        """Sign an identified event and return the complete [SignedEvent][nostrseal.models.event.SignedEvent].

        Raises:
            SigningError: If ``key`` does not belong to the record's author
                or signing fails.
        """
        validate_instance(identified, IdentifiedEvent, "identified")
        if not isinstance(key, Key):
            raise SigningError(f"key must be a Key, got {type(key).__name__}")
        if key.public != identified.record.pubkey:
            raise SigningError("Signing key does not match the event pubkey")
        sig = self.sign(key, identified.event_id)
        return SignedEvent(record=identified.record, event_id=identified.event_id, sig=sig)

    def verify(self, signature: bytes, event_id: bytes, public_key: bytes) -> bool:
        """Check a Schnorr signature over ``event_id`` by ``public_key``.

        Returns ``False`` rather than raising for non-bytes arguments,
        malformed lengths, or a public key that is not on the curve.
        """
        if not all(
            isinstance(value, bytes | bytearray | memoryview)
            for value in (signature, event_id, public_key)
        ):
            return False
        if (
            len(signature) != SIGNATURE_SIZE
            or len(event_id) != EVENT_ID_SIZE
            or len(public_key) != PUBLIC_KEY_SIZE
        ):
            return False
        try:
            xonly = PublicKeyXOnly(bytes(public_key), context=self._context.raw)
            return bool(xonly.verify(bytes(signature), bytes(event_id)))
        except ValueError:
            return False


def verify_event(signed: SignedEvent, context: CryptoContext) -> bool:
    """Verify both the id and the signature of a complete event.

    The id is recomputed from the record and must equal ``signed.event_id``;
    the signature must then verify against the record's ``pubkey``.
    """
    validate_instance(signed, SignedEvent, "signed")
    if compute_event_id(signed.record) != signed.event_id:
        return False
    signer = EventSigner(context)
    return signer.verify(signed.sig, signed.event_id, signed.record.pubkey)
