"""Tests for the fixed-width integer codecs."""

from __future__ import annotations

import pytest

from ninewire.buffer import Cursor
from ninewire.errors import MalformedInputError
from ninewire.protocol import Int8, Int16, Int32, Int64

CODECS = [(Int8, 1), (Int16, 2), (Int32, 4), (Int64, 8)]


@pytest.mark.parametrize(("codec", "width"), CODECS)
def test_sizeof_is_constant(codec, width) -> None:
    assert codec.sizeof() == width
    assert codec.sizeof(0) == width
    assert codec.sizeof(2 ** (8 * width) - 1) == width


@pytest.mark.parametrize(("codec", "width"), CODECS)
def test_read_is_little_endian_and_shifts(codec, width) -> None:
    data = bytes(range(1, width + 1)) + b"\xff\xee"
    value, rest = codec.read(Cursor(data))
    assert value == int.from_bytes(data[:width], "little")
    assert rest == b"\xff\xee"


@pytest.mark.parametrize(("codec", "width"), CODECS)
def test_read_short_buffer_fails(codec, width) -> None:
    with pytest.raises(MalformedInputError) as excinfo:
        codec.read(Cursor(bytes(width - 1)))
    assert str(excinfo.value) == f"{codec.NAME}.read: buffer too small ({width - 1} < {width})"


@pytest.mark.parametrize(("codec", "width"), CODECS)
def test_write_in_place_and_shifts(codec, width) -> None:
    storage = bytearray(width + 3)
    value = 2 ** (8 * width) - 2
    rest = codec.write(value, Cursor(storage))
    assert storage[:width] == value.to_bytes(width, "little")
    assert storage[width:] == bytearray(3)
    assert len(rest) == 3


@pytest.mark.parametrize(("codec", "width"), CODECS)
def test_write_short_buffer_fails_untouched(codec, width) -> None:
    storage = bytearray(b"\x55" * (width - 1))
    with pytest.raises(MalformedInputError) as excinfo:
        codec.write(1, Cursor(storage))
    assert str(excinfo.value) == f"{codec.NAME}.write: buffer too small ({width - 1} < {width})"
    assert storage == bytearray(b"\x55" * (width - 1))


def test_int16_known_encoding() -> None:
    storage = bytearray(2)
    Int16.write(0x1234, Cursor(storage))
    assert bytes(storage) == b"\x34\x12"


def test_int32_reads_unsigned() -> None:
    value, _ = Int32.read(Cursor(b"\xff\xff\xff\xff"))
    assert value == 0xFFFFFFFF


def test_int64_reads_unsigned() -> None:
    value, _ = Int64.read(Cursor(b"\xff" * 8))
    assert value == 2**64 - 1


def test_negative_values_keep_bit_pattern() -> None:
    storage = bytearray(4)
    Int32.write(-1, Cursor(storage))
    assert bytes(storage) == b"\xff\xff\xff\xff"
    value, _ = Int32.read(Cursor(storage))
    assert value == 0xFFFFFFFF

    Int32.write(-(2**31), Cursor(storage))
    assert bytes(storage) == b"\x00\x00\x00\x80"


@pytest.mark.parametrize("value", [2**32, -(2**31) - 1])
def test_out_of_range_fails(value: int) -> None:
    with pytest.raises(MalformedInputError, match="Int32.write: value out of range"):
        Int32.write(value, Cursor(bytearray(4)))


def test_chained_reads_consume_monotonically() -> None:
    data = b"\x01" + b"\x02\x00" + b"\x03\x00\x00\x00" + b"\x04" + bytes(7)
    cursor = Cursor(data)
    a, cursor = Int8.read(cursor)
    assert len(cursor) == len(data) - 1
    b, cursor = Int16.read(cursor)
    assert len(cursor) == len(data) - 3
    c, cursor = Int32.read(cursor)
    assert len(cursor) == len(data) - 7
    d, cursor = Int64.read(cursor)
    assert (a, b, c, d) == (1, 2, 3, 4)
    assert len(cursor) == 0
