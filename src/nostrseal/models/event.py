"""
Immutable Nostr event records for each stage of the signing pipeline.

An event moves strictly through three value types, each produced by the
next pipeline stage from the previous one:

```text
EventRecord  --identify-->  IdentifiedEvent  --sign-->  SignedEvent  --serialize-->  bytes
  (Built)                    (Identified)                (Signed)                   (Serialized)
```

Because each stage only accepts its predecessor's type, a stage can not be
skipped or replayed out of order. All three are frozen dataclasses with
validation in ``__post_init__``, so invalid instances never escape the
constructor.

See Also:
    [nostrseal.nips.nip01.builder][]: Produces
        [EventRecord][nostrseal.models.event.EventRecord].
    [nostrseal.nips.nip01.identifier][]: Produces
        [IdentifiedEvent][nostrseal.models.event.IdentifiedEvent].
    [nostrseal.nips.nip01.signer][]: Produces
        [SignedEvent][nostrseal.models.event.SignedEvent].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ._validation import (
    freeze_tags,
    validate_instance,
    validate_int,
    validate_timestamp,
    validate_utf8_str,
)
from .constants import EVENT_KIND_MAX
from .fixed import EventId, Signature, XOnlyPublicKey


@dataclass(frozen=True, slots=True)
class EventRecord:
    """The unsigned fields of a Nostr event.

    Attributes:
        pubkey: Author x-only public key.
        created_at: Unix timestamp in seconds (signed 64-bit).
        kind: Event kind, ``0..65535``.
        tags: Ordered tags, each an ordered tuple of strings. Lists are
            accepted and frozen to tuples on construction.
        content: Arbitrary caller-supplied UTF-8 text.

    Raises:
        TypeError: If any field has the wrong type.
        ValueError: If an integer is out of range or a string is not UTF-8.
    """

    pubkey: XOnlyPublicKey
    created_at: int
    kind: int
    tags: tuple[tuple[str, ...], ...]
    content: str

    def __post_init__(self) -> None:
        validate_instance(self.pubkey, XOnlyPublicKey, "pubkey")
        validate_timestamp(self.created_at, "created_at")
        validate_int(self.kind, "kind", minimum=0, maximum=EVENT_KIND_MAX)
        validate_utf8_str(self.content, "content")
        # IntEnum members would otherwise leak into the canonical JSON
        object.__setattr__(self, "created_at", int(self.created_at))
        object.__setattr__(self, "kind", int(self.kind))
        object.__setattr__(self, "tags", freeze_tags(self.tags))

    def tags_as_lists(self) -> list[list[str]]:
        """Return the tags as nested lists, the shape JSON encoders expect."""
        return [list(tag) for tag in self.tags]


@dataclass(frozen=True, slots=True)
class IdentifiedEvent:
    """An [EventRecord][nostrseal.models.event.EventRecord] with its computed id."""

    record: EventRecord
    event_id: EventId

    def __post_init__(self) -> None:
        validate_instance(self.record, EventRecord, "record")
        validate_instance(self.event_id, EventId, "event_id")


@dataclass(frozen=True, slots=True)
class SignedEvent:
    """A complete, exportable Nostr event.

    Attributes:
        record: The event fields.
        event_id: SHA-256 identifier of the canonical serialization.
        sig: BIP-340 Schnorr signature over ``event_id``.

    Note:
        Construction does not verify the id or the signature; use
        [verify_event()][nostrseal.nips.nip01.signer.verify_event] for that.
        Instances produced by
        [EventSigner.seal()][nostrseal.nips.nip01.signer.EventSigner.seal]
        are valid by construction.
    """

    record: EventRecord
    event_id: EventId
    sig: Signature

    def __post_init__(self) -> None:
        validate_instance(self.record, EventRecord, "record")
        validate_instance(self.event_id, EventId, "event_id")
        validate_instance(self.sig, Signature, "sig")

    def to_dict(self) -> dict[str, Any]:
        """Return the NIP-01 JSON object with hex-encoded byte fields.

        Keys are emitted in the order ``id, pubkey, created_at, kind, tags,
        content, sig``.
        """
        return {
            "id": self.event_id.hex(),
            "pubkey": self.record.pubkey.hex(),
            "created_at": self.record.created_at,
            "kind": self.record.kind,
            "tags": self.record.tags_as_lists(),
            "content": self.record.content,
            "sig": self.sig.hex(),
        }
