"""NIP-01 event identification and signing pipeline.

Implements the [NIP-01](https://github.com/nostr-protocol/nips/blob/master/01.md)
event model: key handling, record assembly, canonical id computation, BIP-340
Schnorr signatures, and JSON rendering.

Pipeline:

```text
KeyManager ──> EventBuilder ──> EventIdentifier ──> EventSigner ──> EventSerializer
  Key           EventRecord      IdentifiedEvent     SignedEvent     bytes in buffer
```

Every stage is synchronous. All stages except key generation and randomized
signing are pure functions of their inputs.

See Also:
    [nostrseal.api][]: ``get_keys()`` and ``create_event()`` entry points
        that wire the stages together.
"""

from .builder import EventBuilder, build_event, coerce_pubkey
from .identifier import EventIdentifier, canonical_serialize, compute_event_id
from .keys import CURVE_ORDER, KeyManager
from .serializer import EventSerializer, OutputBuffer, parse_event
from .signer import EventSigner, verify_event


__all__ = [
    "CURVE_ORDER",
    "EventBuilder",
    "EventIdentifier",
    "EventSerializer",
    "EventSigner",
    "KeyManager",
    "OutputBuffer",
    "build_event",
    "canonical_serialize",
    "coerce_pubkey",
    "compute_event_id",
    "parse_event",
    "verify_event",
]
