"""Structured logging for ninewire tools.

Each line is a single JSON object. Decode failures carry a
:class:`~ninewire.util.DecodeFailure` under the ``decode_failure`` extra,
rendered as its own object so the failing operation, the record offset and
the record bytes can be filtered on without parsing the message.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from logging import Handler
from logging.config import dictConfig
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import Any

import msgspec

from ..const import LOG_STREAM_ENV
from ..util import set_hexdump_limit
from .model import CodecSettings

SYSLOG_SOCKET = Path("/dev/log")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_KEYS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime", "taskName"}


def _hex_bytes(value: bytes | bytearray | memoryview) -> str:
    # Wire data is never decoded as text; render as [DE AD BE EF].
    return f"[{bytes(value).hex(' ').upper()}]"


def _serialise_value(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _hex_bytes(value)
    if isinstance(value, msgspec.Struct):
        return {key: _serialise_value(item) for key, item in msgspec.structs.asdict(value).items()}
    return str(value)


class StructuredLogFormatter(logging.Formatter):
    """Emit JSON per log line, trimming the ``ninewire.`` logger prefix."""

    PREFIX = "ninewire."

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name.removeprefix(self.PREFIX),
            "message": record.getMessage(),
        }

        failure = record.__dict__.get("decode_failure")
        if failure is not None:
            payload["decode_failure"] = _serialise_value(failure)

        extras = {
            key: _serialise_value(value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_KEYS and key != "decode_failure" and not key.startswith("_")
        }
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return msgspec.json.encode(payload).decode("utf-8")


def _build_handler(log_stream: bool = False) -> Handler:
    if log_stream or os.environ.get(LOG_STREAM_ENV) or not SYSLOG_SOCKET.exists():
        return logging.StreamHandler()

    handler = SysLogHandler(address=str(SYSLOG_SOCKET), facility=SysLogHandler.LOG_USER)
    handler.ident = "ninewire "
    return handler


def configure_logging(settings: CodecSettings) -> None:
    """Route the ``ninewire`` logger through the structured formatter.

    Only the package logger is configured, so embedding applications keep
    their own root setup.
    """
    level_name = "DEBUG" if settings.debug_logging else "INFO"
    set_hexdump_limit(settings.hexdump_limit)

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {"()": StructuredLogFormatter},
            },
            "handlers": {
                "ninewire": {
                    "()": _build_handler,
                    "log_stream": settings.log_stream,
                    "formatter": "structured",
                }
            },
            "loggers": {
                "ninewire": {
                    "level": level_name,
                    "handlers": ["ninewire"],
                    "propagate": False,
                }
            },
        }
    )
