"""
Unit tests for models.fixed module.

Tests:
- FixedBytes length and type enforcement for every concrete size
- from_hex() decoding, length checks, and lowercase hex()
- SecretScalar repr/str redaction
"""

import pytest

from nostrseal.models.fixed import EventId, FixedBytes, SecretScalar, Signature, XOnlyPublicKey


# ============================================================================
# Construction Tests
# ============================================================================


class TestFixedBytesConstruction:
    """Length and type checks at construction."""

    @pytest.mark.parametrize(
        ("cls", "size"),
        [(SecretScalar, 32), (XOnlyPublicKey, 32), (EventId, 32), (Signature, 64)],
    )
    def test_exact_size_accepted(self, cls: type[FixedBytes], size: int) -> None:
        """Test that a value of exactly SIZE bytes is accepted."""
        value = cls(b"\x01" * size)
        assert len(value) == size
        assert isinstance(value, bytes)

    @pytest.mark.parametrize(
        ("cls", "size"),
        [(SecretScalar, 32), (XOnlyPublicKey, 32), (EventId, 32), (Signature, 64)],
    )
    def test_off_by_one_rejected(self, cls: type[FixedBytes], size: int) -> None:
        """Test that one byte short or long raises ValueError."""
        with pytest.raises(ValueError, match=f"exactly {size} bytes"):
            cls(b"\x01" * (size - 1))
        with pytest.raises(ValueError, match=f"exactly {size} bytes"):
            cls(b"\x01" * (size + 1))

    def test_accepts_bytearray_and_memoryview(self) -> None:
        """Test that bytearray and memoryview are copied into an immutable value."""
        raw = bytearray(b"\xaa" * 32)
        from_array = EventId(raw)
        from_view = EventId(memoryview(raw))
        raw[0] = 0
        assert from_array == b"\xaa" * 32
        assert from_view == b"\xaa" * 32

    def test_rejects_str(self) -> None:
        """Test that a str is rejected with TypeError."""
        with pytest.raises(TypeError, match="must be bytes"):
            EventId("ab" * 32)  # type: ignore[arg-type]

    def test_rejects_int(self) -> None:
        """Test that bytes(32)-style int construction is not allowed."""
        with pytest.raises(TypeError):
            EventId(32)  # type: ignore[arg-type]

    def test_equal_to_plain_bytes(self) -> None:
        """Test that fixed values compare equal to the same plain bytes."""
        assert XOnlyPublicKey(b"\x02" * 32) == b"\x02" * 32


# ============================================================================
# Hex Tests
# ============================================================================


class TestFromHex:
    """from_hex() decoding."""

    def test_round_trip_lowercase(self) -> None:
        """Test that hex() is lowercase even for uppercase input."""
        value = EventId.from_hex("AB" * 32)
        assert value.hex() == "ab" * 32

    def test_wrong_length(self) -> None:
        """Test that a hex string of the wrong length raises ValueError."""
        with pytest.raises(ValueError, match="64 characters"):
            XOnlyPublicKey.from_hex("ab" * 31)

    def test_signature_needs_128_chars(self) -> None:
        """Test that Signature hex requires 128 characters."""
        with pytest.raises(ValueError, match="128 characters"):
            Signature.from_hex("ab" * 32)

    def test_non_hex_characters(self) -> None:
        """Test that non-hex characters raise ValueError."""
        with pytest.raises(ValueError):
            EventId.from_hex("zz" * 32)

    def test_non_str(self) -> None:
        """Test that bytes input to from_hex raises TypeError."""
        with pytest.raises(TypeError, match="must be a str"):
            EventId.from_hex(b"ab" * 32)  # type: ignore[arg-type]


# ============================================================================
# Repr Tests
# ============================================================================


class TestRepr:
    """repr() output."""

    def test_public_values_show_hex(self) -> None:
        """Test that non-secret values show their hex."""
        assert repr(EventId(b"\x00" * 32)) == f"EventId('{'00' * 32}')"

    def test_secret_is_redacted(self) -> None:
        """Test that SecretScalar never reveals its bytes."""
        secret = SecretScalar(b"\x11" * 32)
        assert "11" not in repr(secret)
        assert "<redacted>" in repr(secret)
        assert "<redacted>" in str(secret)
