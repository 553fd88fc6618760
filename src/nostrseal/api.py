"""
Top-level operations: key generation and one-shot note creation.

These functions wire the NIP-01 pipeline stages together for the two
exposed operations:

* [get_keys()][nostrseal.api.get_keys] -- generate a fresh keypair;
* [create_event()][nostrseal.api.create_event] -- build, identify, sign,
  and serialize a kind-1 text note into an output buffer.

Every failure is raised as a subclass of
[NostrSealError][nostrseal.core.exceptions.NostrSealError] whose ``code``
identifies the category. No partially built event is returned on failure.

Examples:
    ```python
    ctx = CryptoContext.create()
    key = get_keys(ctx)
    result = create_event(key.public, key.secret, "hello world", context=ctx)
    print(result.buffer.text())
    ```
"""

from __future__ import annotations

from typing import NamedTuple

from nostrseal.core.context import CryptoContext
from nostrseal.core.exceptions import InvalidKeyError
from nostrseal.core.logger import Logger
from nostrseal.models.constants import DEFAULT_BUFFER_SIZE, EventKind
from nostrseal.models.event import SignedEvent
from nostrseal.models.key import Key
from nostrseal.nips.nip01 import (
    EventIdentifier,
    EventSerializer,
    EventSigner,
    KeyManager,
    OutputBuffer,
    build_event,
    coerce_pubkey,
)


logger = Logger("nostrseal.api")


class CreateEventResult(NamedTuple):
    """Outcome of [create_event()][nostrseal.api.create_event].

    Attributes:
        signed: The signed event.
        written: Number of bytes written to ``buffer``.
        buffer: The buffer holding the serialized event.
    """

    signed: SignedEvent
    written: int
    buffer: OutputBuffer | bytearray | memoryview


def get_keys(context: CryptoContext | None = None) -> Key:
    """Generate a new keypair.

    Args:
        context: Crypto context to use; a new one is created when omitted.

    Raises:
        ContextError: If a context had to be created and creation failed.
        KeyGenError: If key generation failed.
    """
    ctx = context if context is not None else CryptoContext.create()
    key = KeyManager(ctx).generate()
    logger.info("keys_generated", pubkey=key.public.hex())
    return key


def create_event(  # noqa: PLR0913
    pubkey: bytes | bytearray | str,
    secret: bytes | bytearray | str,
    content: str,
    *,
    context: CryptoContext | None = None,
    created_at: int | None = None,
    buffer: OutputBuffer | bytearray | memoryview | None = None,
    deterministic: bool = False,
) -> CreateEventResult:
    """Create, sign, and serialize a kind-1 text note with no tags.

    Args:
        pubkey: Author public key (32 bytes or 64 hex characters). Must be
            the public key of ``secret``.
        secret: Author secret key (32 bytes or 64 hex characters).
        content: Note text.
        context: Crypto context to use; a new one is created when omitted.
        created_at: Unix timestamp; defaults to the current time.
        buffer: Destination buffer; defaults to a new
            [OutputBuffer][nostrseal.nips.nip01.serializer.OutputBuffer] of
            [DEFAULT_BUFFER_SIZE][nostrseal.models.constants.DEFAULT_BUFFER_SIZE].
        deterministic: Use fixed BIP-340 auxiliary data.

    Returns:
        A [CreateEventResult][nostrseal.api.CreateEventResult].

    Raises:
        ContextError: If a context had to be created and creation failed.
        InvalidKeyError: If ``secret`` is invalid or does not match ``pubkey``.
        InvalidInputError: If ``pubkey`` or ``content`` is malformed.
        SigningError: If signing failed.
        BufferTooSmallError: If the serialized event does not fit ``buffer``.
    """
    ctx = context if context is not None else CryptoContext.create()
    author = coerce_pubkey(pubkey)
    key = KeyManager(ctx).decode(secret)
    if key.public != author:
        raise InvalidKeyError("Secret key does not belong to the given pubkey")

    record = build_event(
        author, created_at=created_at, kind=EventKind.TEXT_NOTE, tags=[], content=content
    )
    identified = EventIdentifier().attach(record)
    signed = EventSigner(ctx, deterministic=deterministic).seal(key, identified)

    out = buffer if buffer is not None else OutputBuffer(DEFAULT_BUFFER_SIZE)
    written = EventSerializer().serialize(signed, out)

    logger.info("event_created", event_id=signed.event_id.hex(), size=written)
    return CreateEventResult(signed=signed, written=written, buffer=out)
