"""Stat: the 9P2000 file-status record.

Wire layout, in this exact order::

    size[2] type[2] dev[4] qid[13] mode[4] atime[4] mtime[4] length[8]
    name[s] uid[s] gid[s] muid[s]

``size`` counts every byte after itself. Strings are :class:`Data` encoded
UTF-8.
"""

from __future__ import annotations

import logging
from typing import Any

import msgspec

from .. import const
from ..buffer import BytesLike, Cursor
from ..errors import MalformedInputError
from ..util import log_decode_failure
from .data import Data
from .qid import Qid
from .scalars import Int16, Int32, Int64
from .structures import STAT_FIXED_SIZE

__all__ = ["Stat"]

logger = logging.getLogger(__name__)


class Stat(msgspec.Struct, frozen=True, kw_only=True):
    """Decoded stat record.

    Attributes:
        type: Server type (16-bit).
        dev: Server subtype (32-bit).
        qid: File identity token.
        mode: Permissions and DM* flags (32-bit).
        atime: Last access time (32-bit).
        mtime: Last modification time (32-bit).
        length: File length in bytes (64-bit).
        name: File name.
        uid: Owner name.
        gid: Group name.
        muid: Name of the user who last modified the file.
    """

    type: int = 0
    dev: int = 0
    qid: Qid = msgspec.field(default_factory=Qid.zero)
    mode: int = 0
    atime: int = 0
    mtime: int = 0
    length: int = 0
    name: str = ""
    uid: str = ""
    gid: str = ""
    muid: str = ""

    @staticmethod
    def sizeof(stat: Stat) -> int:
        size = const.STAT_LENGTH_SIZE + STAT_FIXED_SIZE
        for text in (stat.name, stat.uid, stat.gid, stat.muid):
            size += Data.sizeof(Data.of_string(text))
        return size

    @classmethod
    def read(cls, cursor: Cursor, strict: bool = False) -> tuple[Stat, Cursor]:
        """Decode one record from the front of ``cursor``.

        The declared length is only checked against the bytes actually
        consumed when ``strict`` is set.
        """
        declared, rest = Int16.read(cursor)
        body = rest
        type_, rest = Int16.read(rest)
        dev, rest = Int32.read(rest)
        qid, rest = Qid.read(rest)
        mode, rest = Int32.read(rest)
        atime, rest = Int32.read(rest)
        mtime, rest = Int32.read(rest)
        length, rest = Int64.read(rest)
        name, rest = Data.read(rest)
        uid, rest = Data.read(rest)
        gid, rest = Data.read(rest)
        muid, rest = Data.read(rest)

        if strict:
            consumed = len(body) - len(rest)
            if declared != consumed:
                raise MalformedInputError("Stat.read", f"declared length {declared} does not match {consumed}")

        stat = cls(
            type=type_,
            dev=dev,
            qid=qid,
            mode=mode,
            atime=atime,
            mtime=mtime,
            length=length,
            name=Data.to_string(name),
            uid=Data.to_string(uid),
            gid=Data.to_string(gid),
            muid=Data.to_string(muid),
        )
        return stat, rest

    @staticmethod
    def write(stat: Stat, cursor: Cursor) -> Cursor:
        body = Stat.sizeof(stat) - const.STAT_LENGTH_SIZE
        if body > const.UINT16_MAX:
            raise MalformedInputError("Stat.write", f"record too large ({body} > {const.UINT16_MAX})")
        rest = Int16.write(body, cursor)
        rest = Int16.write(stat.type, rest)
        rest = Int32.write(stat.dev, rest)
        rest = Qid.write(stat.qid, rest)
        rest = Int32.write(stat.mode, rest)
        rest = Int32.write(stat.atime, rest)
        rest = Int32.write(stat.mtime, rest)
        rest = Int64.write(stat.length, rest)
        rest = Data.write(Data.of_string(stat.name), rest)
        rest = Data.write(Data.of_string(stat.uid), rest)
        rest = Data.write(Data.of_string(stat.gid), rest)
        return Data.write(Data.of_string(stat.muid), rest)

    def encode(self) -> bytes:
        """Serialize into a freshly allocated buffer of exactly ``sizeof`` bytes."""
        buffer = bytearray(Stat.sizeof(self))
        Stat.write(self, Cursor(buffer))
        return bytes(buffer)

    @classmethod
    def decode(cls, data: BytesLike | Cursor, strict: bool = False) -> Stat:
        """Decode a buffer holding exactly one record."""
        cursor = Cursor(data)
        try:
            stat, rest = cls.read(cursor, strict=strict)
            if len(rest):
                raise MalformedInputError("Stat.decode", f"{len(rest)} trailing bytes")
        except MalformedInputError as exc:
            log_decode_failure(logger, "stat", exc, 0, cursor)
            raise
        return stat

    @classmethod
    def read_all(cls, cursor: Cursor, strict: bool = False) -> list[Stat]:
        """Decode back-to-back records until ``cursor`` is exhausted."""
        stats: list[Stat] = []
        rest = cursor
        while len(rest):
            try:
                stat, rest = cls.read(rest, strict=strict)
            except MalformedInputError as exc:
                log_decode_failure(logger, "stat", exc, len(cursor) - len(rest), rest)
                raise
            stats.append(stat)
        return stats

    def to_dict(self) -> dict[str, Any]:
        payload = msgspec.structs.asdict(self)
        payload["qid"] = self.qid.hex()
        return payload

    def is_dir(self) -> bool:
        return bool(self.mode & const.DMDIR)
