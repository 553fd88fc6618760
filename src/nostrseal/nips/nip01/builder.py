"""
Assembly of unsigned NIP-01 event records.

[EventBuilder][nostrseal.nips.nip01.builder.EventBuilder] holds the mutable
fields of an event while it is being composed and freezes them into an
[EventRecord][nostrseal.models.event.EventRecord] on
[build()][nostrseal.nips.nip01.builder.EventBuilder.build]. After that the
record can only move forward through the pipeline.

Validation is limited to well-formedness: a 32-byte pubkey, UTF-8 content,
integer ``created_at`` and ``kind``, and tags that are sequences of strings.
All violations are reported as
[InvalidInputError][nostrseal.core.exceptions.InvalidInputError].
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Self

from nostrseal.core.exceptions import InvalidInputError
from nostrseal.models.constants import EventKind
from nostrseal.models.event import EventRecord
from nostrseal.models.fixed import XOnlyPublicKey


def coerce_pubkey(pubkey: bytes | bytearray | str) -> XOnlyPublicKey:
    """Convert 32 raw bytes or 64 hex characters to an [XOnlyPublicKey][nostrseal.models.fixed.XOnlyPublicKey].

    Raises:
        InvalidInputError: If ``pubkey`` has the wrong type or length.
    """
    try:
        if isinstance(pubkey, str):
            return XOnlyPublicKey.from_hex(pubkey)
        return XOnlyPublicKey(pubkey)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Invalid pubkey: {e}") from e


class EventBuilder:
    """Mutable composer for a single event.

    Setters return the builder so calls can be chained. ``created_at``
    defaults to the wall-clock time at [build()][nostrseal.nips.nip01.builder.EventBuilder.build],
    ``kind`` to [EventKind.TEXT_NOTE][nostrseal.models.constants.EventKind],
    ``tags`` to empty, and ``content`` to the empty string.

    Examples:
        ```python
        record = (
            EventBuilder(key.public)
            .content("hello world")
            .created_at(1700000000)
            .build()
        )
        ```
    """

    def __init__(self, pubkey: bytes | bytearray | str) -> None:
        self._pubkey = coerce_pubkey(pubkey)
        self._created_at: int | None = None
        self._kind: int = EventKind.TEXT_NOTE
        self._tags: list[list[str]] = []
        self._content: str = ""

    def created_at(self, timestamp: int) -> Self:
        self._created_at = timestamp
        return self

    def kind(self, kind: int) -> Self:
        self._kind = kind
        return self

    def tags(self, tags: Sequence[Sequence[str]]) -> Self:
        """Replace all tags. Order is preserved and is significant for the id."""
        if isinstance(tags, str | bytes) or not isinstance(tags, Sequence):
            raise InvalidInputError(f"tags must be a sequence of tags, got {type(tags).__name__}")
        self._tags = [
            tag if isinstance(tag, str | bytes) or not isinstance(tag, Sequence) else list(tag)
            for tag in tags
        ]
        return self

    def add_tag(self, *values: str) -> Self:
        """Append one tag made of ``values``."""
        self._tags.append(list(values))
        return self

    def content(self, content: str) -> Self:
        self._content = content
        return self

    def build(self) -> EventRecord:
        """Freeze the current fields into an [EventRecord][nostrseal.models.event.EventRecord].

        Raises:
            InvalidInputError: If any field is malformed.
        """
        created_at = self._created_at if self._created_at is not None else int(time.time())
        try:
            return EventRecord(
                pubkey=self._pubkey,
                created_at=created_at,
                kind=self._kind,
                tags=self._tags,
                content=self._content,
            )
        except (TypeError, ValueError) as e:
            raise InvalidInputError(str(e)) from e


def build_event(
    pubkey: bytes | bytearray | str,
    created_at: int | None = None,
    kind: int = EventKind.TEXT_NOTE,
    tags: Sequence[Sequence[str]] | None = None,
    content: str = "",
) -> EventRecord:
    """Build an [EventRecord][nostrseal.models.event.EventRecord] in one call.

    Args:
        pubkey: Author x-only public key, 32 bytes or 64 hex characters.
        created_at: Unix timestamp; defaults to the current time.
        kind: Event kind; defaults to a text note.
        tags: Ordered tags; defaults to none.
        content: Event content.

    Raises:
        InvalidInputError: If any field is malformed.
    """
    builder = EventBuilder(pubkey).kind(kind).content(content)
    if created_at is not None:
        builder.created_at(created_at)
    if tags is not None:
        builder.tags(tags)
    return builder.build()
