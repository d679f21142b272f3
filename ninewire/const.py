"""Wire constants for the 9P2000 codec."""

from __future__ import annotations

from typing import Final

INT8_SIZE: Final[int] = 1
INT16_SIZE: Final[int] = 2
INT32_SIZE: Final[int] = 4
INT64_SIZE: Final[int] = 8

UINT16_MAX: Final[int] = 65535

QID_SIZE: Final[int] = 13
DATA_LENGTH_SIZE: Final[int] = INT16_SIZE
DATA_MAX_LENGTH: Final[int] = UINT16_MAX
STAT_LENGTH_SIZE: Final[int] = INT16_SIZE

DEFAULT_STRING_ENCODING: Final[str] = "utf-8"

# Qid type bits
QTDIR: Final[int] = 0x80
QTAPPEND: Final[int] = 0x40
QTEXCL: Final[int] = 0x20
QTMOUNT: Final[int] = 0x10
QTAUTH: Final[int] = 0x08
QTTMP: Final[int] = 0x04
QTFILE: Final[int] = 0x00

# Stat mode bits
DMDIR: Final[int] = 0x80000000
DMAPPEND: Final[int] = 0x40000000
DMEXCL: Final[int] = 0x20000000
DMAUTH: Final[int] = 0x08000000
DMTMP: Final[int] = 0x04000000

DEFAULT_DEBUG_LOGGING: Final[bool] = False
DEFAULT_LOG_STREAM: Final[bool] = False
DEFAULT_STRICT_STAT_LENGTH: Final[bool] = False
DEFAULT_HEXDUMP_LIMIT: Final[int] = 256

CONFIG_TABLE: Final[str] = "ninewire"
LOG_STREAM_ENV: Final[str] = "NINEWIRE_LOG_STREAM"
