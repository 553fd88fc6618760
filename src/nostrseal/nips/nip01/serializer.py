"""
Rendering of signed events into bounded output buffers, and parsing back.

The rendered form is the NIP-01 JSON object

```text
{"id":"..","pubkey":"..","created_at":..,"kind":..,"tags":[..],"content":"..","sig":".."}
```

encoded as UTF-8 with the same escaping rules as the canonical id
serialization (see [nostrseal.nips.nip01.identifier][]). Byte fields are
lowercase hex.

Output goes into a caller-provided buffer of fixed capacity. If the full
rendering does not fit,
[BufferTooSmallError][nostrseal.core.exceptions.BufferTooSmallError] is raised
and the buffer is left exactly as it was; output is never truncated.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from nostrseal.core.exceptions import BufferTooSmallError, InvalidInputError
from nostrseal.core.logger import Logger
from nostrseal.models._validation import validate_instance
from nostrseal.models.constants import DEFAULT_BUFFER_SIZE
from nostrseal.models.event import EventRecord, SignedEvent
from nostrseal.models.fixed import EventId, Signature, XOnlyPublicKey


logger = Logger("nostrseal.serializer")

_EVENT_FIELDS = ("id", "pubkey", "created_at", "kind", "tags", "content", "sig")


class OutputBuffer:
    """Fixed-capacity byte buffer that records how much of it holds output.

    Args:
        capacity: Size in bytes. Defaults to
            [DEFAULT_BUFFER_SIZE][nostrseal.models.constants.DEFAULT_BUFFER_SIZE].
    """

    def __init__(self, capacity: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"capacity must be a positive int, got {capacity!r}")
        self._data = bytearray(capacity)
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self._length

    def write(self, data: bytes) -> int:
        """Replace the buffer contents with ``data``.

        Raises:
            BufferTooSmallError: If ``data`` exceeds the capacity. Nothing
                is written in that case.
        """
        if len(data) > self.capacity:
            raise BufferTooSmallError(required=len(data), capacity=self.capacity)
        self._data[: len(data)] = data
        self._length = len(data)
        return self._length

    def getvalue(self) -> bytes:
        return bytes(self._data[: self._length])

    def text(self) -> str:
        return self.getvalue().decode("utf-8")


class EventSerializer:
    """Renders [SignedEvent][nostrseal.models.event.SignedEvent] values."""

    def render(self, signed: SignedEvent) -> bytes:
        """Return the full UTF-8 JSON rendering of ``signed``."""
        validate_instance(signed, SignedEvent, "signed")
        return json.dumps(
            signed.to_dict(), separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")

    def serialize(self, signed: SignedEvent, buffer: OutputBuffer | bytearray | memoryview) -> int:
        """Write the rendering of ``signed`` into ``buffer``.

        Args:
            signed: The event to render.
            buffer: An [OutputBuffer][nostrseal.nips.nip01.serializer.OutputBuffer]
                or any writable ``bytearray`` / byte ``memoryview``. Raw
                buffers receive the rendering at offset 0; the remaining
                bytes are left untouched.

        Returns:
            Number of bytes written.

        Raises:
            BufferTooSmallError: If the rendering exceeds the buffer capacity.
            TypeError: If ``buffer`` is not a writable byte buffer.
        """
        data = self.render(signed)

        if isinstance(buffer, OutputBuffer):
            capacity = buffer.capacity
        elif isinstance(buffer, bytearray) or (
            isinstance(buffer, memoryview) and not buffer.readonly
        ):
            capacity = buffer.nbytes if isinstance(buffer, memoryview) else len(buffer)
        else:
            raise TypeError(f"buffer must be a writable byte buffer, got {type(buffer).__name__}")

        if len(data) > capacity:
            logger.warning("buffer_too_small", required=len(data), capacity=capacity)
            raise BufferTooSmallError(required=len(data), capacity=capacity)

        if isinstance(buffer, OutputBuffer):
            written = buffer.write(data)
        else:
            buffer[: len(data)] = data
            written = len(data)

        logger.debug("event_serialized", event_id=signed.event_id.hex(), size=written)
        return written


def parse_event(data: str | bytes | Mapping[str, Any]) -> SignedEvent:
    """Parse a serialized event object into a [SignedEvent][nostrseal.models.event.SignedEvent].

    The id and signature are decoded but **not** verified; pass the result
    to [verify_event()][nostrseal.nips.nip01.signer.verify_event].

    Args:
        data: JSON text, UTF-8 bytes, or an already decoded mapping.

    Raises:
        InvalidInputError: If the JSON is malformed, a field is missing, or a
            field has the wrong type or length.
    """
    if isinstance(data, str | bytes | bytearray):
        try:
            obj = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidInputError(f"Event is not valid JSON: {e}") from e
    else:
        obj = data

    if not isinstance(obj, Mapping):
        raise InvalidInputError(f"Event must be a JSON object, got {type(obj).__name__}")

    missing = [name for name in _EVENT_FIELDS if name not in obj]
    if missing:
        raise InvalidInputError(f"Event is missing fields: {', '.join(missing)}")

    try:
        record = EventRecord(
            pubkey=XOnlyPublicKey.from_hex(obj["pubkey"]),
            created_at=obj["created_at"],
            kind=obj["kind"],
            tags=obj["tags"],
            content=obj["content"],
        )
        return SignedEvent(
            record=record,
            event_id=EventId.from_hex(obj["id"]),
            sig=Signature.from_hex(obj["sig"]),
        )
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Malformed event: {e}") from e
