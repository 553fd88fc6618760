"""Pure frozen dataclasses with zero I/O for keys and Nostr events.

The models layer is the foundation of the diamond DAG. It has **no dependencies**
on any other nostrseal package -- only the Python standard library. Every model
uses ``@dataclass(frozen=True, slots=True)`` and validates in ``__post_init__``
so invalid instances never escape the constructor.

Attributes:
    FixedBytes: ``bytes`` subclass with a length fixed per subclass.
    SecretScalar, XOnlyPublicKey, EventId, Signature: 32/32/32/64-byte values.
    Key: A secret scalar paired with its x-only public key.
    EventRecord: Unsigned event fields (the *Built* state).
    IdentifiedEvent: Record plus id (the *Identified* state).
    SignedEvent: Record, id, and signature (the *Signed* state).
    EventKind: Well-known event kinds.
    ErrorCode: Numeric status codes attached to every exception.

Note:
    Models use ``object.__setattr__`` in ``__post_init__`` to normalize fields
    on frozen dataclasses (e.g. tags frozen to tuples). This runs during
    ``__init__`` before the instance is exposed to external code.
"""

from .constants import DEFAULT_BUFFER_SIZE, EVENT_KIND_MAX, ErrorCode, EventKind
from .event import EventRecord, IdentifiedEvent, SignedEvent
from .fixed import EventId, FixedBytes, SecretScalar, Signature, XOnlyPublicKey
from .key import Key


__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "EVENT_KIND_MAX",
    "ErrorCode",
    "EventId",
    "EventKind",
    "EventRecord",
    "FixedBytes",
    "IdentifiedEvent",
    "Key",
    "SecretScalar",
    "Signature",
    "SignedEvent",
    "XOnlyPublicKey",
]
