"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used by ``__post_init__``
methods in sibling model modules and by the NIP-01 builder to enforce
runtime type constraints, integer ranges, and UTF-8 encodability.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .constants import INT64_MAX, INT64_MIN


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_int(value: Any, name: str, *, minimum: int, maximum: int) -> None:
    """Raise if *value* is not an ``int`` within ``[minimum, maximum]`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not minimum <= value <= maximum:
        raise ValueError(f"{name} must be between {minimum} and {maximum}, got {value}")


def validate_timestamp(value: Any, name: str) -> None:
    """Raise if *value* is not a signed 64-bit ``int``."""
    validate_int(value, name, minimum=INT64_MIN, maximum=INT64_MAX)


def validate_utf8_str(value: Any, name: str) -> None:
    """Raise if *value* is not a ``str`` that can be encoded as UTF-8.

    Python strings may hold lone surrogates (e.g. from ``surrogateescape``
    decoding); those have no UTF-8 encoding and would make the canonical
    serialization fail later.
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"{name} is not valid UTF-8: {e.reason}") from e


def freeze_tags(value: Any, name: str = "tags") -> tuple[tuple[str, ...], ...]:
    """Validate a tag list and return it as a tuple of tuples.

    Accepts any sequence of sequences of strings (but not a bare ``str``
    at either level). Ordering is preserved at both levels.

    Raises:
        TypeError: If the structure or element types are wrong.
        ValueError: If a tag value is not UTF-8 encodable.
    """
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        raise TypeError(f"{name} must be a sequence of tags, got {type(value).__name__}")
    frozen: list[tuple[str, ...]] = []
    for i, tag in enumerate(value):
        if isinstance(tag, str | bytes) or not isinstance(tag, Sequence):
            raise TypeError(f"{name}[{i}] must be a sequence of str, got {type(tag).__name__}")
        for j, item in enumerate(tag):
            validate_utf8_str(item, f"{name}[{i}][{j}]")
        frozen.append(tuple(tag))
    return tuple(frozen)
