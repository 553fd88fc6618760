"""
Fixed-length byte strings for keys, identifiers, and signatures.

Every cryptographic value that crosses a module boundary is one of these
types rather than a plain ``bytes``, so a 31-byte key or a 63-byte signature
is rejected at construction time instead of reaching the secp256k1 library.

See Also:
    [nostrseal.models.key.Key][]: Pairs a
        [SecretScalar][nostrseal.models.fixed.SecretScalar] with its
        [XOnlyPublicKey][nostrseal.models.fixed.XOnlyPublicKey].
    [nostrseal.models.event][]: Event records built from these types.
"""

from __future__ import annotations

from typing import ClassVar, Self

from .constants import EVENT_ID_SIZE, PUBLIC_KEY_SIZE, SECRET_KEY_SIZE, SIGNATURE_SIZE


class FixedBytes(bytes):
    """Immutable ``bytes`` whose length is fixed by the ``SIZE`` class attribute.

    Raises:
        TypeError: If the value is not ``bytes``, ``bytearray``, or ``memoryview``.
        ValueError: If the length differs from ``SIZE``.

    Examples:
        ```python
        EventId(b"\\x00" * 32)           # ok
        EventId.from_hex("ab" * 32)     # ok
        EventId(b"\\x00" * 31)           # ValueError
        ```
    """

    SIZE: ClassVar[int] = 0

    __slots__ = ()

    def __new__(cls, value: bytes | bytearray | memoryview) -> Self:
        if not isinstance(value, bytes | bytearray | memoryview):
            raise TypeError(f"{cls.__name__} must be bytes, got {type(value).__name__}")
        raw = bytes(value)
        if len(raw) != cls.SIZE:
            raise ValueError(f"{cls.__name__} must be exactly {cls.SIZE} bytes, got {len(raw)}")
        return super().__new__(cls, raw)

    @classmethod
    def from_hex(cls, value: str) -> Self:
        """Decode a hex string of exactly ``2 * SIZE`` characters."""
        if not isinstance(value, str):
            raise TypeError(f"{cls.__name__} hex must be a str, got {type(value).__name__}")
        if len(value) != cls.SIZE * 2:
            raise ValueError(
                f"{cls.__name__} hex must be {cls.SIZE * 2} characters, got {len(value)}"
            )
        return cls(bytes.fromhex(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()!r})"


class SecretScalar(FixedBytes):
    """32-byte secp256k1 secret scalar. Never shown by ``repr``."""

    SIZE = SECRET_KEY_SIZE

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted>)"

    __str__ = __repr__


class XOnlyPublicKey(FixedBytes):
    """32-byte x-only public key (BIP-340)."""

    SIZE = PUBLIC_KEY_SIZE

    __slots__ = ()


class EventId(FixedBytes):
    """32-byte SHA-256 event identifier (NIP-01)."""

    SIZE = EVENT_ID_SIZE

    __slots__ = ()


class Signature(FixedBytes):
    """64-byte BIP-340 Schnorr signature."""

    SIZE = SIGNATURE_SIZE

    __slots__ = ()
