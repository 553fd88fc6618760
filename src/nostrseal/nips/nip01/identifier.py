"""
Canonical NIP-01 serialization and event id computation.

The event id is the SHA-256 digest of the UTF-8 encoding of the JSON array

```text
[0,"<lowercase hex pubkey>",<created_at>,<kind>,<tags>,"<content>"]
```

rendered with no whitespace between tokens and ``ensure_ascii=False``, so
non-ASCII characters are emitted verbatim and only ``"``, ``\\``, and control
characters are escaped (``\\n``, ``\\r``, ``\\t``, ``\\b``, ``\\f``, others as
``\\u00XX``). Python's ``json`` module always applies this one rule set, so
equal records serialize to identical bytes.

Hashing uses ``hashlib`` and needs no secp256k1 context.

See Also:
    [EventSigner][nostrseal.nips.nip01.signer.EventSigner]: Signs the id
        produced here.
"""

from __future__ import annotations

import hashlib
import json

from nostrseal.core.logger import Logger
from nostrseal.models._validation import validate_instance
from nostrseal.models.event import EventRecord, IdentifiedEvent
from nostrseal.models.fixed import EventId


logger = Logger("nostrseal.identifier")


def canonical_serialize(record: EventRecord) -> bytes:
    """Return the canonical byte serialization of ``record``.

    Examples:
        ```python
        canonical_serialize(record)
        # b'[0,"79be...",1700000000,1,[],"hello world"]'
        ```
    """
    validate_instance(record, EventRecord, "record")
    payload = [
        0,
        record.pubkey.hex(),
        record.created_at,
        record.kind,
        record.tags_as_lists(),
        record.content,
    ]
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def compute_event_id(record: EventRecord) -> EventId:
    """SHA-256 of [canonical_serialize()][nostrseal.nips.nip01.identifier.canonical_serialize]."""
    return EventId(hashlib.sha256(canonical_serialize(record)).digest())


class EventIdentifier:
    """Computes ids and advances records to the *Identified* state."""

    def identify(self, record: EventRecord) -> EventId:
        """Compute the 32-byte id of ``record``.

        Pure and deterministic. Any change to a field, including reordering
        tags, changes the result.
        """
        event_id = compute_event_id(record)
        logger.debug("event_identified", event_id=event_id.hex(), kind=record.kind)
        return event_id

    def attach(self, record: EventRecord) -> IdentifiedEvent:
        """Return ``record`` paired with its id."""
        return IdentifiedEvent(record=record, event_id=self.identify(record))
