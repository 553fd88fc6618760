"""
Explicitly owned secp256k1 context.

libsecp256k1 needs a context object for key derivation, signing, and
verification. Rather than relying on a process-wide global, callers create
one [CryptoContext][nostrseal.core.context.CryptoContext] and pass it to
[KeyManager][nostrseal.nips.nip01.keys.KeyManager] and
[EventSigner][nostrseal.nips.nip01.signer.EventSigner], so its lifetime and
sharing are under their control.

Note:
    After creation the context is only read. libsecp256k1 guarantees that
    read-only use of a context is thread-safe, so one instance may be shared
    by concurrent callers without locking.
"""

from __future__ import annotations

from dataclasses import dataclass

from coincurve.context import Context

from .exceptions import ContextError
from .logger import Logger


_SEED_SIZE = 32

logger = Logger("nostrseal.context")


@dataclass(frozen=True, slots=True)
class CryptoContext:
    """Handle to an initialized libsecp256k1 context.

    Attributes:
        raw: The underlying ``coincurve`` context, passed to coincurve key
            objects by the pipeline stages.

    Examples:
        ```python
        ctx = CryptoContext.create()
        keys = KeyManager(ctx)
        signer = EventSigner(ctx)
        ```
    """

    raw: Context

    @classmethod
    def create(cls, seed: bytes | None = None, *, name: str = "nostrseal") -> CryptoContext:
        """Create and randomize a new context.

        Args:
            seed: Optional 32 bytes used to randomize the context against
                side-channel attacks. Fresh entropy is used when omitted.
            name: Label stored on the coincurve context.

        Returns:
            A ready-to-use context.

        Raises:
            ContextError: If the seed has the wrong size or the library
                fails to allocate or randomize the context.
        """
        if seed is not None and len(seed) != _SEED_SIZE:
            raise ContextError(f"Context seed must be {_SEED_SIZE} bytes, got {len(seed)}")
        try:
            raw = Context(seed=seed, name=name)
        except Exception as e:  # Intentionally broad: cffi allocation and randomization fail with varied types
            logger.error("context_init_failed", error=str(e))
            raise ContextError(f"Could not initialize secp256k1 context: {e}") from e
        logger.debug("context_created", name=name)
        return cls(raw)
