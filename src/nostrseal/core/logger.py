"""
Structured logging for the signing pipeline.

Every pipeline stage logs through [Logger][nostrseal.core.logger.Logger],
which attaches keyword arguments to the stdlib ``LogRecord`` as the
``structured_kv`` extra. [StructuredFormatter][nostrseal.core.logger.StructuredFormatter]
renders those records either as ``level name message key=value ...`` lines
or as one JSON object per record; the CLI installs it on the root handler.

Field values are normalized before they reach a record:

* [SecretScalar][nostrseal.models.fixed.SecretScalar] values become
  ``<redacted>``, so a secret passed by mistake never reaches a handler;
* other ``bytes`` values (ids, public keys, signatures) become lowercase hex;
* strings longer than the configured limit (event content, for instance)
  are cut and annotated with the number of dropped characters.

Examples:
    ```python
    logger = Logger("nostrseal.signer")
    logger.debug("event_signed", event_id=event_id)
    # debug nostrseal.signer event_signed event_id=5c83...

    logger.info("key_decoded", secret=key.secret)
    # info ... key_decoded secret=<redacted>
    ```
"""

import datetime
import json
import logging
from typing import Any, ClassVar

from nostrseal.models.fixed import SecretScalar


_REDACTED = "<redacted>"
_NEEDS_QUOTES = (" ", "=", '"', "'", "\n")


def _truncate(text: str, max_length: int | None) -> str:
    if max_length and len(text) > max_length:
        return text[:max_length] + f"...<truncated {len(text) - max_length} chars>"
    return text


def _normalize(value: Any, max_length: int | None) -> Any:
    """Redact secrets, hex-encode bytes, and truncate long strings.

    Numbers, booleans and ``None`` pass through unchanged so JSON output keeps
    their types.
    """
    if isinstance(value, SecretScalar):
        return _REDACTED
    if isinstance(value, bytes | bytearray | memoryview):
        return _truncate(bytes(value).hex(), max_length)
    if isinstance(value, str):
        return _truncate(value, max_length)
    if value is None or isinstance(value, bool | int | float):
        return value
    return _truncate(str(value), max_length)


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Render ``kwargs`` as space-separated ``key=value`` pairs.

    Values that are empty or contain whitespace, ``=``, quotes or newlines
    are double-quoted with backslash escapes, so every record stays on one
    parseable line.

    Args:
        kwargs: Fields to render.
        max_value_length: Maximum characters per value; None disables
            truncation.
        prefix: Prepended to non-empty output.

    Returns:
        E.g. ``' kind=1 content="hello world"'``, or ``""`` for no fields.
    """
    if not kwargs:
        return ""

    rendered = []
    for key, value in kwargs.items():
        text = str(_normalize(value, max_value_length))
        if not text or any(ch in text for ch in _NEEDS_QUOTES):
            text = '"' + text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n") + '"'
        rendered.append(f"{key}={text}")
    return prefix + " ".join(rendered)


def _json_line(created: float, level: str, name: str, message: str, fields: dict[str, Any]) -> str:
    payload = {
        "timestamp": datetime.datetime.fromtimestamp(created, datetime.UTC).isoformat(),
        "level": level,
        "logger": name,
        "message": message,
        **fields,
    }
    return json.dumps(payload, default=str, ensure_ascii=False)


class StructuredFormatter(logging.Formatter):
    """Root-handler formatter for pipeline and plain stdlib records.

    Args:
        json_output: Emit one JSON object per record (``timestamp``,
            ``level``, ``logger``, ``message`` plus the structured fields)
            instead of a ``key=value`` line. Applies to loggers that were
            created before the handler was installed.
    """

    def __init__(self, *, json_output: bool = False) -> None:
        super().__init__()
        self._json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        fields: dict[str, Any] = getattr(record, "structured_kv", {})
        level = record.levelname.lower()
        if self._json_output:
            return _json_line(record.created, level, record.name, record.getMessage(), fields)
        return f"{level} {record.name} {record.getMessage()}" + format_kv_pairs(fields)


class Logger:
    """Thin structured wrapper over ``logging.getLogger(name)``.

    Args:
        name: Logger name, usually ``nostrseal.<stage>``.
        json_output: Pre-render each message as a JSON object, for handlers
            that do not use [StructuredFormatter][nostrseal.core.logger.StructuredFormatter].
        max_value_length: Per-value character limit. Defaults to 1000.
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = (
            self._DEFAULT_MAX_VALUE_LENGTH if max_value_length is None else max_value_length
        )

    @property
    def name(self) -> str:
        return self._logger.name

    def _fields(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        return {k: _normalize(v, self._max_value_length) for k, v in kwargs.items()}

    def _emit(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        fields = self._fields(kwargs)
        if self._json_output:
            line = _json_line(
                datetime.datetime.now(datetime.UTC).timestamp(),
                logging.getLevelName(level).lower(),
                self._logger.name,
                msg,
                fields,
            )
            self._logger.log(level, line, exc_info=exc_info)
        else:
            extra = {"structured_kv": fields} if fields else {}
            self._logger.log(level, msg, extra=extra, exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._emit(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._emit(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._emit(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log at ERROR with the active exception's traceback attached."""
        self._emit(logging.ERROR, msg, kwargs, exc_info=True)
