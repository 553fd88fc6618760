"""Nostr Implementation Possibilities -- protocol-specific logic.

The NIPs layer sits in the middle of the diamond DAG, depending on
[nostrseal.models][] and [nostrseal.core][]. Only NIP-01 (event structure,
id, and signature) is implemented.

Attributes:
    nip01: Key management, event assembly, canonical id, Schnorr signing,
        and serialization.
"""

from nostrseal.nips.nip01 import (
    EventBuilder,
    EventIdentifier,
    EventSerializer,
    EventSigner,
    KeyManager,
    OutputBuffer,
)


__all__ = [
    "EventBuilder",
    "EventIdentifier",
    "EventSerializer",
    "EventSigner",
    "KeyManager",
    "OutputBuffer",
]
