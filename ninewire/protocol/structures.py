"""Construct schemas for the 9P2000 wire types.

Every multi-byte field is little-endian and unsigned. The cursor codecs in
this package apply these schemas one field at a time.
"""

from __future__ import annotations

from typing import Final

from construct import (  # type: ignore
    Bytes,
    Int8ul,
    Int16ul,
    Int32ul,
    Int64ul,
    Struct as BinStruct,
)

from .. import const

INT8_STRUCT: Final = Int8ul
INT16_STRUCT: Final = Int16ul
INT32_STRUCT: Final = Int32ul
INT64_STRUCT: Final = Int64ul

QID_STRUCT: Final = Bytes(const.QID_SIZE)
QID_FIELDS_STRUCT: Final = BinStruct(
    "qtype" / Int8ul,
    "version" / Int32ul,
    "path" / Int64ul,
)

DATA_LENGTH_STRUCT: Final = Int16ul

# Everything between the leading size field and the four strings.
STAT_FIXED_STRUCT: Final = BinStruct(
    "type" / Int16ul,
    "dev" / Int32ul,
    "qid" / QID_STRUCT,
    "mode" / Int32ul,
    "atime" / Int32ul,
    "mtime" / Int32ul,
    "length" / Int64ul,
)
STAT_FIXED_SIZE: Final[int] = STAT_FIXED_STRUCT.sizeof()  # type: ignore
