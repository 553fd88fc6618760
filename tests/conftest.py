"""
Pytest configuration and shared fixtures for nostrseal tests.

Provides:
- Crypto context, key manager, signer, and fixed-key fixtures
- Sample record and signed-event fixtures
- Custom pytest markers for test categorization
"""

import logging

import pytest

from nostrseal.core.context import CryptoContext
from nostrseal.models import EventRecord, Key, SignedEvent
from nostrseal.nips.nip01 import (
    EventIdentifier,
    EventSigner,
    KeyManager,
    build_event,
)


# ============================================================================
# Test Constants
# ============================================================================

# Valid secp256k1 test key (DO NOT USE IN PRODUCTION)
VALID_HEX_KEY = (
    "67dea2ed018072d675f5415ecfaed7d2597555e202d85b3d65ea4e58d2d92ffa"  # pragma: allowlist secret
)
VALID_NSEC_KEY = (
    "nsec1vl029mgpspedva04g90vltkh6fvh240zqtv9k0t9af8935ke9laqsnlfe5"  # pragma: allowlist secret
)

# x-coordinate of the generator G (secret 1)
G_X_HEX = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"

FIXED_CREATED_AT = 1_700_000_000


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Crypto Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def crypto_context() -> CryptoContext:
    """One randomized context shared by the whole session (read-only use)."""
    return CryptoContext.create()


@pytest.fixture
def key_manager(crypto_context: CryptoContext) -> KeyManager:
    return KeyManager(crypto_context)


@pytest.fixture
def fixed_key(key_manager: KeyManager) -> Key:
    """The key behind VALID_HEX_KEY."""
    return key_manager.decode(VALID_HEX_KEY)


@pytest.fixture
def other_key(key_manager: KeyManager) -> Key:
    return key_manager.decode("03" + "00" * 30 + "07")


@pytest.fixture
def signer(crypto_context: CryptoContext) -> EventSigner:
    return EventSigner(crypto_context)


@pytest.fixture
def deterministic_signer(crypto_context: CryptoContext) -> EventSigner:
    return EventSigner(crypto_context, deterministic=True)


# ============================================================================
# Event Fixtures
# ============================================================================


@pytest.fixture
def sample_record(fixed_key: Key) -> EventRecord:
    """A kind-1 note with no tags and a fixed timestamp."""
    return build_event(fixed_key.public, created_at=FIXED_CREATED_AT, content="hello world")


@pytest.fixture
def signed_event(fixed_key: Key, sample_record: EventRecord, signer: EventSigner) -> SignedEvent:
    identified = EventIdentifier().attach(sample_record)
    return signer.seal(fixed_key, identified)


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (no external dependencies)")
    config.addinivalue_line("markers", "slow: marks tests as slow running")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
