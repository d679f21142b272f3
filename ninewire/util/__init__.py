"""General-purpose utilities for ninewire."""

from __future__ import annotations

import logging

import msgspec

from .. import const
from ..buffer import BytesLike, Cursor
from ..errors import MalformedInputError


__all__ = [
    "DecodeFailure",
    "log_decode_failure",
    "log_hexdump",
    "set_hexdump_limit",
]

_hexdump_limit = const.DEFAULT_HEXDUMP_LIMIT


class DecodeFailure(msgspec.Struct, frozen=True):
    """Where and why a record failed to decode.

    ``offset`` is the position of the failing record in the input handed
    to the decoder, ``size`` the number of bytes left from there, and
    ``record`` at most the hexdump limit of those bytes.
    """

    operation: str
    reason: str
    offset: int
    size: int
    record: bytes


def set_hexdump_limit(limit: int) -> None:
    """Cap the number of bytes :func:`log_hexdump` renders (0 disables the cap)."""
    global _hexdump_limit
    if limit < 0:
        raise ValueError("hexdump limit must be non-negative")
    _hexdump_limit = limit


def _bounded(data: BytesLike | Cursor) -> bytes:
    view = Cursor(data).view
    if _hexdump_limit:
        view = view[:_hexdump_limit]
    return view.tobytes()


def log_hexdump(logger_instance: logging.Logger, level: int, label: str, data: BytesLike | Cursor) -> None:
    """Log binary data in hexadecimal format using syslog-friendly output.

    Format: [HEXDUMP] %s: %s
    """
    if not logger_instance.isEnabledFor(level):
        return

    total = len(Cursor(data))
    hex_str = _bounded(data).hex(" ").upper()
    if _hexdump_limit and total > _hexdump_limit:
        hex_str += f" ... ({total} bytes)"
    logger_instance.log(level, "[HEXDUMP] %s: %s", label, hex_str)


def log_decode_failure(
    logger_instance: logging.Logger,
    label: str,
    error: MalformedInputError,
    offset: int,
    remaining: BytesLike | Cursor,
) -> None:
    """Record a decode failure at DEBUG as a ``decode_failure`` extra plus a hexdump."""
    if not logger_instance.isEnabledFor(logging.DEBUG):
        return

    failure = DecodeFailure(
        operation=error.operation,
        reason=error.message,
        offset=offset,
        size=len(Cursor(remaining)),
        record=_bounded(remaining),
    )
    logger_instance.debug(
        "%s failed at offset %d: %s",
        error.operation,
        offset,
        error.message,
        extra={"decode_failure": failure},
    )
    log_hexdump(logger_instance, logging.DEBUG, label, remaining)
