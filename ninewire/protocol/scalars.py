"""Fixed-width little-endian integer codecs."""

from __future__ import annotations

from typing import Any, ClassVar

from construct import Construct, ConstructError  # type: ignore

from .. import const
from ..buffer import Cursor
from ..errors import MalformedInputError
from .structures import INT8_STRUCT, INT16_STRUCT, INT32_STRUCT, INT64_STRUCT

__all__ = ["Int8", "Int16", "Int32", "Int64"]


class _FixedWidth:
    """Unsigned integer of ``WIDTH`` bytes at the front of a cursor."""

    NAME: ClassVar[str]
    WIDTH: ClassVar[int]
    _STRUCT: ClassVar[Construct[Any, Any]]

    @classmethod
    def sizeof(cls, value: int | None = None) -> int:
        return cls.WIDTH

    @classmethod
    def _wire_value(cls, value: int) -> int:
        # Signed hosts hand us negative 32/64-bit values; keep their bit pattern.
        bits = cls.WIDTH * 8
        if not -(1 << (bits - 1)) <= value < (1 << bits):
            raise MalformedInputError(f"{cls.NAME}.write", f"value out of range ({value})")
        return value & ((1 << bits) - 1)

    @classmethod
    def read(cls, cursor: Cursor) -> tuple[int, Cursor]:
        operation = f"{cls.NAME}.read"
        raw = cursor.peek(cls.WIDTH, operation)
        try:
            value = cls._STRUCT.parse(raw)
        except ConstructError as exc:
            raise MalformedInputError(operation, str(exc)) from exc
        return value, cursor.shift(cls.WIDTH)

    @classmethod
    def write(cls, value: int, cursor: Cursor) -> Cursor:
        operation = f"{cls.NAME}.write"
        cursor.require(cls.WIDTH, operation)
        return cursor.blit(cls._STRUCT.build(cls._wire_value(value)), operation)


class Int8(_FixedWidth):
    NAME = "Int8"
    WIDTH = const.INT8_SIZE
    _STRUCT = INT8_STRUCT


class Int16(_FixedWidth):
    NAME = "Int16"
    WIDTH = const.INT16_SIZE
    _STRUCT = INT16_STRUCT


class Int32(_FixedWidth):
    NAME = "Int32"
    WIDTH = const.INT32_SIZE
    _STRUCT = INT32_STRUCT


class Int64(_FixedWidth):
    NAME = "Int64"
    WIDTH = const.INT64_SIZE
    _STRUCT = INT64_STRUCT
