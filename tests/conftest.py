"""Pytest configuration for ninewire tests."""

from __future__ import annotations

import pytest

from ninewire.const import DMDIR, QTDIR
from ninewire.protocol import Qid, Stat

TEST_RANDOM_SEED = 0x9F2000


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "fuzz: seeded random-input decode tests")


@pytest.fixture
def random_seed() -> int:
    return TEST_RANDOM_SEED


@pytest.fixture
def sample_qid() -> Qid:
    return Qid.from_fields(QTDIR, 7, 0x0102030405060708)


@pytest.fixture
def sample_stat(sample_qid: Qid) -> Stat:
    return Stat(
        type=0x4D,
        dev=0xDEADBEEF,
        qid=sample_qid,
        mode=DMDIR | 0o755,
        atime=1_700_000_000,
        mtime=1_700_000_123,
        length=0x1_0000_0001,
        name="lib",
        uid="glenda",
        gid="sys",
        muid="bootes",
    )
