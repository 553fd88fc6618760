"""CLI entry point for nostrseal.

Three commands cover the pipeline end to end: generate a keypair, create and
sign a text note with a key taken from the environment, and verify a
serialized event. Every [NostrSealError][nostrseal.core.exceptions.NostrSealError]
ends the process with its numeric ``code`` as the exit status.

Log output goes to stderr; event JSON and keys go to stdout.

Examples:
    ```bash
    python -m nostrseal keys --bech32
    PRIVATE_KEY=nsec1... nostrseal note --content "hello world"
    nostrseal note --content "gm" --created-at 1700000000 --deterministic
    nostrseal note --content "gm" --config config/nostrseal.yaml
    nostrseal verify event.json
    ```
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from nostrseal.api import create_event, get_keys
from nostrseal.core.config import NostrSealConfig
from nostrseal.core.context import CryptoContext
from nostrseal.core.exceptions import ConfigurationError, NostrSealError, VerificationError
from nostrseal.core.logger import Logger, StructuredFormatter
from nostrseal.nips.nip01 import KeyManager, OutputBuffer, parse_event, verify_event
from nostrseal.utils.keys import KeysConfig, to_bech32


_HANDLER_NAME = "nostrseal"

logger = Logger("cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="nostrseal",
        description="Nostr NIP-01 event signer",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="YAML config path (default: built-in defaults)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: from config, else INFO)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit log records as JSON objects",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    keys = commands.add_parser("keys", help="Generate a new keypair")
    keys.add_argument(
        "--bech32",
        action="store_true",
        help="Also print NIP-19 nsec/npub encodings",
    )

    note = commands.add_parser("note", help="Create and sign a kind-1 text note")
    note.add_argument("--content", required=True, help="Note text")
    note.add_argument(
        "--created-at",
        type=int,
        help="Unix timestamp (default: now)",
    )
    note.add_argument(
        "--deterministic",
        action="store_true",
        help="Use fixed BIP-340 auxiliary data (default: from config)",
    )

    verify = commands.add_parser("verify", help="Verify a serialized event")
    verify.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Event JSON file (default: stdin)",
    )

    return parser.parse_args(argv)


def setup_logging(level: str, *, json_output: bool = False) -> None:
    """Configure the root logger with structured formatting.

    Installs a ``StructuredFormatter`` on a stderr handler attached to the
    root logger, replacing any handler a previous call installed.
    """
    for existing in list(logging.root.handlers):
        if existing.name == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.name = _HANDLER_NAME
    handler.setFormatter(StructuredFormatter(json_output=json_output))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def _load_config(path: Path | None) -> NostrSealConfig:
    if path is None:
        return NostrSealConfig()
    return NostrSealConfig.from_yaml(path)


def run_keys(args: argparse.Namespace) -> int:
    key = get_keys(CryptoContext.create())
    print(f"secret: {key.secret.hex()}")
    print(f"public: {key.public.hex()}")
    if args.bech32:
        nsec, npub = to_bech32(key)
        print(f"nsec: {nsec}")
        print(f"npub: {npub}")
    return 0


def run_note(args: argparse.Namespace, config: NostrSealConfig) -> int:
    try:
        keys_config = KeysConfig(keys_env=config.keys_env)
    except ValidationError as e:
        raise ConfigurationError(f"Cannot load secret key: {e}") from e

    ctx = CryptoContext.create()
    key = KeyManager(ctx).decode(keys_config.secret)
    result = create_event(
        key.public,
        key.secret,
        args.content,
        context=ctx,
        created_at=args.created_at,
        buffer=OutputBuffer(config.output.buffer_size),
        deterministic=args.deterministic or config.signing.deterministic,
    )
    print(result.buffer.text())
    return 0


def run_verify(args: argparse.Namespace) -> int:
    if args.file is None:
        data = sys.stdin.read()
    else:
        try:
            data = args.file.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read event file: {e}") from e

    signed = parse_event(data)
    if verify_event(signed, CryptoContext.create()):
        print("valid")
        return 0

    print("invalid")
    raise VerificationError(f"Event {signed.event_id.hex()} does not verify")


def main(argv: list[str] | None = None) -> int:
    """Main entry point: parse args, configure logging, and run the command."""
    args = parse_args(argv)

    try:
        config = _load_config(args.config)
    except ConfigurationError as e:
        setup_logging(args.log_level or "INFO", json_output=args.json_logs)
        logger.error("config_failed", error=str(e))
        return int(e.code)

    setup_logging(
        args.log_level or config.logging.level,
        json_output=args.json_logs or config.logging.json_output,
    )

    try:
        if args.command == "keys":
            return run_keys(args)
        if args.command == "note":
            return run_note(args, config)
        return run_verify(args)
    except NostrSealError as e:
        logger.error(f"{args.command}_failed", code=int(e.code), error=str(e))
        return int(e.code)
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 130


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
