"""
Structured event logging for the discovery layer.

Discovery events are short snake_case names (``srv_lookup_failed``,
``txt_absent``) with their context passed as keyword fields. The
[Logger][srvdiscovery.core.logger.Logger] wrapper renders those fields one of
two ways:

* **kv** (default): the event name stays the log message and the fields ride
  along on the record as ``structured_kv``. Attach
  [StructuredFormatter][srvdiscovery.core.logger.StructuredFormatter] to a
  handler to print them as ``key=value`` pairs.
* **json**: the whole event is serialized into the message as one JSON
  object per line.

Field values are cut to ``max_value_length`` characters, since a TXT record
or a resolver error string has no upper bound on its size.

Examples:
    ```python
    logger = Logger("srvdiscovery.discovery")
    logger.warning("srv_record_rejected", target="node.evil.com")
    # warning srvdiscovery.discovery srv_record_rejected target=node.evil.com
    ```
"""

import datetime
import json
import logging
import re
from typing import Any


DEFAULT_MAX_VALUE_LENGTH = 1000

# Characters that would break naive key=value splitting
_NEEDS_QUOTING = re.compile(r"[\s=\"']")


def _shorten(text: str, limit: int | None) -> str:
    if not limit or len(text) <= limit:
        return text
    return f"{text[:limit]}...<truncated {len(text) - limit} chars>"


def _quote(text: str) -> str:
    if text and not _NEEDS_QUOTING.search(text):
        return text
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def format_kv_pairs(
    fields: dict[str, Any],
    max_value_length: int | None = DEFAULT_MAX_VALUE_LENGTH,
    prefix: str = " ",
) -> str:
    """Render *fields* as ``key=value`` pairs separated by spaces.

    Empty values and values holding whitespace, ``=`` or quotes are wrapped
    in double quotes with backslash escaping.

    Args:
        fields: Event fields, rendered in insertion order.
        max_value_length: Per-value cut-off, or ``None`` for no limit.
        prefix: Prepended to a non-empty result.

    Returns:
        The rendered pairs, or ``""`` when *fields* is empty.
    """
    if not fields:
        return ""
    pairs = (
        f"{key}={_quote(_shorten(str(value), max_value_length))}" for key, value in fields.items()
    )
    return prefix + " ".join(pairs)


class StructuredFormatter(logging.Formatter):
    """Render records as ``<level> <logger> <event> key=value...``.

    Records without ``structured_kv`` (the plain ``logging`` calls of the
    utils layer) are rendered without the trailing pairs.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        return line + format_kv_pairs(getattr(record, "structured_kv", {}), max_value_length=None)


class Logger:
    """Event logger with keyword fields, on top of a stdlib ``logging.Logger``.

    Args:
        name: Name of the underlying stdlib logger.
        json_output: Serialize each event as a JSON object instead of
            attaching the fields as ``structured_kv``.
        max_value_length: Per-value cut-off; ``None`` keeps the default of
            1000 characters.
    """

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
            DEFAULT_MAX_VALUE_LENGTH if max_value_length is None else max_value_length
        )

    @property
    def name(self) -> str:
        return self._logger.name

    def _fields(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Cut oversized values; short values keep their original type."""
        limit = self._max_value_length
        return {
            key: _shorten(str(value), limit) if limit and len(str(value)) > limit else value
            for key, value in fields.items()
        }

    def _emit(self, level: int, event: str, fields: dict[str, Any], exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        fields = self._fields(fields)
        if not self._json_output:
            extra = {"structured_kv": fields} if fields else {}
            self._logger.log(level, event, extra=extra, exc_info=exc_info)
            return

        payload = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": logging.getLevelName(level).lower(),
            "logger": self._logger.name,
            "message": event,
            **fields,
        }
        self._logger.log(level, json.dumps(payload, default=str), exc_info=exc_info)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit(logging.DEBUG, event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit(logging.INFO, event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit(logging.WARNING, event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit(logging.ERROR, event, fields)

    def exception(self, event: str, **fields: Any) -> None:
        """Log at ERROR with the active exception's traceback attached."""
        self._emit(logging.ERROR, event, fields, exc_info=True)
