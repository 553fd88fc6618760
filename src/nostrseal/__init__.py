r"""nostrseal -- NIP-01 event key generation, identification, and signing.

Builds Nostr events, computes their canonical identifiers, signs them with
BIP-340 Schnorr signatures over secp256k1, and serializes them into bounded
output buffers.

Architecture follows a **diamond DAG** dependency structure where imports
flow strictly downward:

```text
                 api           get_keys() / create_event()
              /   |   \
          core  nips  utils    Context, protocol, and helpers
             \   |   /
              models           Pure frozen dataclasses (zero I/O)
```

Attributes:
    models: Pure frozen dataclasses and fixed-length byte types. Depends only
        on stdlib.
    core: Crypto context, exceptions, logging, YAML and configuration.
    nips: NIP-01 key management, event assembly, id, signing, serialization.
    utils: Environment-based secret loading and NIP-19 encoding.
    api: The two top-level operations.

Note:
    For lightweight usage, import directly from subpackages::

        from nostrseal.models import EventRecord
        from nostrseal.nips.nip01 import EventSigner

    Top-level imports (``from nostrseal import create_event``) use lazy
    loading and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("nostrseal")

__all__ = [
    "CreateEventResult",
    "CryptoContext",
    "ErrorCode",
    "EventBuilder",
    "EventIdentifier",
    "EventKind",
    "EventRecord",
    "EventSerializer",
    "EventSigner",
    "IdentifiedEvent",
    "Key",
    "KeyManager",
    "Logger",
    "NostrSealConfig",
    "NostrSealError",
    "OutputBuffer",
    "SignedEvent",
    "create_event",
    "get_keys",
    "parse_event",
    "verify_event",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "CryptoContext": ("nostrseal.core", "CryptoContext"),
    "Logger": ("nostrseal.core", "Logger"),
    "NostrSealConfig": ("nostrseal.core", "NostrSealConfig"),
    "NostrSealError": ("nostrseal.core", "NostrSealError"),
    "ErrorCode": ("nostrseal.models", "ErrorCode"),
    "EventKind": ("nostrseal.models", "EventKind"),
    "EventRecord": ("nostrseal.models", "EventRecord"),
    "IdentifiedEvent": ("nostrseal.models", "IdentifiedEvent"),
    "Key": ("nostrseal.models", "Key"),
    "SignedEvent": ("nostrseal.models", "SignedEvent"),
    "EventBuilder": ("nostrseal.nips.nip01", "EventBuilder"),
    "EventIdentifier": ("nostrseal.nips.nip01", "EventIdentifier"),
    "EventSerializer": ("nostrseal.nips.nip01", "EventSerializer"),
    "EventSigner": ("nostrseal.nips.nip01", "EventSigner"),
    "KeyManager": ("nostrseal.nips.nip01", "KeyManager"),
    "OutputBuffer": ("nostrseal.nips.nip01", "OutputBuffer"),
    "parse_event": ("nostrseal.nips.nip01", "parse_event"),
    "verify_event": ("nostrseal.nips.nip01", "verify_event"),
    "CreateEventResult": ("nostrseal.api", "CreateEventResult"),
    "create_event": ("nostrseal.api", "create_event"),
    "get_keys": ("nostrseal.api", "get_keys"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'nostrseal' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
