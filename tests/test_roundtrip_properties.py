"""Property tests: every codec reads back exactly what it wrote."""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from ninewire.buffer import Cursor
from ninewire.const import QID_SIZE
from ninewire.protocol import Data, Int8, Int16, Int32, Int64, Qid, Stat

SCALARS = [(Int8, 8), (Int16, 16), (Int32, 32), (Int64, 64)]

qids = st.binary(min_size=QID_SIZE, max_size=QID_SIZE).map(Qid.of_bytes)
names = st.text(max_size=64)
stats = st.builds(
    Stat,
    type=st.integers(min_value=0, max_value=0xFFFF),
    dev=st.integers(min_value=0, max_value=0xFFFFFFFF),
    qid=qids,
    mode=st.integers(min_value=0, max_value=0xFFFFFFFF),
    atime=st.integers(min_value=0, max_value=0xFFFFFFFF),
    mtime=st.integers(min_value=0, max_value=0xFFFFFFFF),
    length=st.integers(min_value=0, max_value=0xFFFFFFFFFFFFFFFF),
    name=names,
    uid=names,
    gid=names,
    muid=names,
)


@pytest.mark.parametrize(("codec", "bits"), SCALARS)
@given(data=st.data())
def test_scalar_round_trip(codec, bits, data) -> None:
    value = data.draw(st.integers(min_value=0, max_value=(1 << bits) - 1))
    storage = bytearray(codec.sizeof(value))

    assert len(codec.write(value, Cursor(storage))) == 0
    decoded, rest = codec.read(Cursor(storage))

    assert decoded == value
    assert len(rest) == 0


@pytest.mark.parametrize(("codec", "bits"), SCALARS)
@given(data=st.data())
def test_negative_scalar_reads_back_as_twos_complement(codec, bits, data) -> None:
    value = data.draw(st.integers(min_value=-(1 << (bits - 1)), max_value=-1))
    storage = bytearray(codec.sizeof())
    codec.write(value, Cursor(storage))

    decoded, _ = codec.read(Cursor(storage))

    assert decoded == value + (1 << bits)


@pytest.mark.parametrize(("codec", "bits"), SCALARS)
def test_scalar_extremes(codec, bits) -> None:
    for value, expected in ((0, 0), ((1 << bits) - 1, (1 << bits) - 1), (-(1 << (bits - 1)), 1 << (bits - 1))):
        storage = bytearray(codec.sizeof())
        codec.write(value, Cursor(storage))
        assert codec.read(Cursor(storage))[0] == expected


@given(qid=qids)
def test_qid_round_trip(qid: Qid) -> None:
    storage = bytearray(Qid.sizeof(qid))

    assert len(Qid.write(qid, Cursor(storage))) == 0
    decoded, rest = Qid.read(Cursor(storage))

    assert decoded == qid
    assert len(rest) == 0


@given(
    qtype=st.integers(min_value=0, max_value=0xFF),
    version=st.integers(min_value=0, max_value=0xFFFFFFFF),
    path=st.integers(min_value=0, max_value=0xFFFFFFFFFFFFFFFF),
)
def test_qid_fields_round_trip(qtype: int, version: int, path: int) -> None:
    qid = Qid.from_fields(qtype, version, path)
    assert (qid.qtype, qid.version, qid.path) == (qtype, version, path)


@given(payload=st.binary(max_size=1024))
def test_data_round_trip(payload: bytes) -> None:
    storage = bytearray(Data.sizeof(payload))

    assert len(Data.write(payload, Cursor(storage))) == 0
    decoded, rest = Data.read(Cursor(storage))

    assert bytes(decoded) == payload
    assert len(rest) == 0


@given(text=st.text(max_size=256))
def test_data_string_round_trip(text: str) -> None:
    assert Data.to_string(Data.of_string(text)) == text


@given(stat=stats)
def test_stat_round_trip(stat: Stat) -> None:
    storage = bytearray(Stat.sizeof(stat))

    assert len(Stat.write(stat, Cursor(storage))) == 0
    decoded, rest = Stat.read(Cursor(storage), strict=True)

    assert decoded == stat
    assert len(rest) == 0


@given(records=st.lists(stats, max_size=4))
def test_directory_data_round_trip(records: list[Stat]) -> None:
    data = b"".join(stat.encode() for stat in records)
    assert Stat.read_all(Cursor(data), strict=True) == records
