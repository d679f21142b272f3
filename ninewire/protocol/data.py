"""Data: a byte string prefixed by its 16-bit length.

``Data.read`` returns a :class:`~ninewire.buffer.Cursor` that aliases the
source buffer; callers that keep the payload past the lifetime of the
source (or mutate the source afterwards) should copy it with ``bytes()``
or :meth:`Data.to_string`.
"""

from __future__ import annotations

from .. import const
from ..buffer import BytesLike, Cursor
from ..errors import MalformedInputError
from .structures import DATA_LENGTH_STRUCT

__all__ = ["Data"]


class Data:
    @staticmethod
    def of_string(text: str, encoding: str = const.DEFAULT_STRING_ENCODING) -> bytes:
        try:
            return text.encode(encoding)
        except UnicodeEncodeError as exc:
            raise MalformedInputError("Data.of_string", f"text is not encodable as {encoding}: {exc.reason}") from exc

    @staticmethod
    def to_string(data: BytesLike | Cursor, encoding: str = const.DEFAULT_STRING_ENCODING) -> str:
        try:
            return bytes(data).decode(encoding)
        except UnicodeDecodeError as exc:
            raise MalformedInputError("Data.to_string", f"payload is not valid {encoding}: {exc.reason}") from exc

    @staticmethod
    def sizeof(data: BytesLike | Cursor) -> int:
        return const.DATA_LENGTH_SIZE + len(Cursor(data))

    @staticmethod
    def read(cursor: Cursor) -> tuple[Cursor, Cursor]:
        length = len(cursor)
        if length < const.DATA_LENGTH_SIZE:
            raise MalformedInputError(
                "Data.read",
                f"buffer too short to contain a string length ({length} < {const.DATA_LENGTH_SIZE})",
            )
        required = DATA_LENGTH_STRUCT.parse(cursor.peek(const.DATA_LENGTH_SIZE, "Data.read"))
        rest = cursor.shift(const.DATA_LENGTH_SIZE)
        remaining = len(rest)
        if remaining < required:
            raise MalformedInputError(
                "Data.read",
                f"buffer too short to contain string payload ({remaining} < {required})",
            )
        return rest.sub(0, required), rest.shift(required)

    @staticmethod
    def write(data: BytesLike | Cursor, cursor: Cursor) -> Cursor:
        payload = Cursor(data)
        if len(payload) > const.DATA_MAX_LENGTH:
            raise MalformedInputError("Data.write", f"payload too long ({len(payload)} > {const.DATA_MAX_LENGTH})")
        needed = const.DATA_LENGTH_SIZE + len(payload)
        cursor.require(needed, "Data.write")
        rest = cursor.blit(DATA_LENGTH_STRUCT.build(len(payload)), "Data.write")
        return rest.blit(payload, "Data.write")
