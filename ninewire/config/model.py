"""Data model for ninewire configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ..const import (
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_HEXDUMP_LIMIT,
    DEFAULT_LOG_STREAM,
    DEFAULT_STRICT_STAT_LENGTH,
)


@dataclass(slots=True)
class CodecSettings:
    """Strongly typed settings for codec consumers and tools."""

    debug_logging: bool = DEFAULT_DEBUG_LOGGING
    log_stream: bool = DEFAULT_LOG_STREAM
    strict_stat_length: bool = DEFAULT_STRICT_STAT_LENGTH
    hexdump_limit: int = DEFAULT_HEXDUMP_LIMIT
