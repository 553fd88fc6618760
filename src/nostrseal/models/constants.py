"""Shared constants for the models layer.

Defines enumerations and size constants used across the model, core, and
NIP layers. Placing them here avoids circular dependencies between
[nostrseal.core.exceptions][] and the models that reference error codes.

See Also:
    [nostrseal.models.event][]: Uses [EventKind][nostrseal.models.constants.EventKind]
        and the integer bounds during construction.
    [nostrseal.core.exceptions][]: Attaches an
        [ErrorCode][nostrseal.models.constants.ErrorCode] to every exception.
"""

from __future__ import annotations

from enum import IntEnum


class EventKind(IntEnum):
    """Well-known Nostr event kinds.

    Attributes:
        SET_METADATA: Kind 0 -- user profile metadata (NIP-01).
        TEXT_NOTE: Kind 1 -- short text note (NIP-01). The only kind
            produced by [create_event()][nostrseal.api.create_event].
    """

    SET_METADATA = 0
    TEXT_NOTE = 1


class ErrorCode(IntEnum):
    """Numeric status codes reported for each failure category.

    ``CONTEXT``, ``KEY_GENERATION``, ``SIGNING``, ``KEY_DECODE`` and
    ``BUFFER_TOO_SMALL`` are the historical status codes of the signing glue
    and are kept stable so existing callers can map failures 1:1. The other
    values were added for failures that previously had no code.

    Attributes:
        OK: Success.
        CONTEXT: The secp256k1 context could not be initialized.
        KEY_GENERATION: Key generation failed inside the library.
        SIGNING: The Schnorr primitive rejected the input.
        KEY_DECODE: A supplied secret key is malformed or out of range.
        INVALID_INPUT: Malformed pubkey, content, tags, or serialized event.
        CONFIGURATION: Invalid configuration file or environment.
        VERIFICATION: An event failed id or signature verification.
        BUFFER_TOO_SMALL: The output buffer cannot hold the rendered event.
    """

    OK = 0
    CONTEXT = 2
    KEY_GENERATION = 4
    SIGNING = 6
    KEY_DECODE = 8
    INVALID_INPUT = 10
    CONFIGURATION = 12
    VERIFICATION = 14
    BUFFER_TOO_SMALL = 88


EVENT_KIND_MAX = 65_535

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

SECRET_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 32
EVENT_ID_SIZE = 32
SIGNATURE_SIZE = 64

DEFAULT_BUFFER_SIZE = 1024
