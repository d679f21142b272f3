"""Qid: the opaque 13-byte file identity token."""

from __future__ import annotations

from typing import Any, ClassVar

import msgspec
from construct import ConstructError  # type: ignore

from .. import const
from ..buffer import BytesLike, Cursor
from ..errors import MalformedInputError
from .structures import QID_FIELDS_STRUCT

__all__ = ["Qid"]


class Qid(msgspec.Struct, frozen=True):
    """Exactly :data:`~ninewire.const.QID_SIZE` uninterpreted bytes.

    The codec copies the token verbatim. ``from_fields`` and the ``qtype``,
    ``version`` and ``path`` properties apply the conventional 9P layout
    type[1] version[4] path[8] for callers that need it.
    """

    raw: bytes

    SIZE: ClassVar[int] = const.QID_SIZE

    def __post_init__(self) -> None:
        if not isinstance(self.raw, bytes):
            raise MalformedInputError("Qid", f"token must be bytes, not {type(self.raw).__name__}")
        if len(self.raw) != const.QID_SIZE:
            raise MalformedInputError("Qid", f"token must be exactly {const.QID_SIZE} bytes (got {len(self.raw)})")

    @classmethod
    def of_bytes(cls, data: BytesLike | Cursor) -> Qid:
        return cls(bytes(data))

    @classmethod
    def zero(cls) -> Qid:
        return cls(bytes(const.QID_SIZE))

    @classmethod
    def from_fields(cls, qtype: int = const.QTFILE, version: int = 0, path: int = 0) -> Qid:
        try:
            raw = QID_FIELDS_STRUCT.build({"qtype": qtype, "version": version, "path": path})
        except ConstructError as exc:
            raise MalformedInputError("Qid.from_fields", str(exc)) from exc
        return cls(raw)

    def _fields(self) -> Any:
        return QID_FIELDS_STRUCT.parse(self.raw)

    @property
    def qtype(self) -> int:
        return self._fields().qtype

    @property
    def version(self) -> int:
        return self._fields().version

    @property
    def path(self) -> int:
        return self._fields().path

    def is_dir(self) -> bool:
        return bool(self.qtype & const.QTDIR)

    def hex(self) -> str:
        return self.raw.hex()

    @staticmethod
    def sizeof(value: Qid | None = None) -> int:
        return const.QID_SIZE

    @classmethod
    def read(cls, cursor: Cursor) -> tuple[Qid, Cursor]:
        raw = cursor.peek(const.QID_SIZE, "Qid.read")
        return cls(raw), cursor.shift(const.QID_SIZE)

    @staticmethod
    def write(qid: Qid, cursor: Cursor) -> Cursor:
        return cursor.blit(qid.raw, "Qid.write")
