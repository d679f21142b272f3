"""Cursor over a contiguous byte region.

A :class:`Cursor` never owns or copies its storage: ``shift`` and ``sub``
only narrow the ``memoryview`` it wraps. Codecs read from the front of a
cursor and hand back the shifted remainder, so chained reads never need
manual offset bookkeeping.
"""

from __future__ import annotations

from typing import Any

from .errors import MalformedInputError

__all__ = ["BytesLike", "Cursor"]

BytesLike = bytes | bytearray | memoryview


class Cursor:
    """Non-owning window over a bytes-like object.

    Cursors over ``bytearray`` (or a writable ``memoryview``) accept writes;
    cursors over ``bytes`` are read-only.
    """

    __slots__ = ("_view",)

    def __init__(self, data: BytesLike | Cursor) -> None:
        if isinstance(data, Cursor):
            view = data._view
        else:
            view = memoryview(data)
            if view.format != "B" or view.ndim != 1:
                view = view.cast("B")
        self._view = view

    @classmethod
    def create(cls, size: int) -> Cursor:
        """Allocate a zero-filled writable region of ``size`` bytes."""
        if size < 0:
            raise ValueError("size must be non-negative")
        return cls(bytearray(size))

    def __len__(self) -> int:
        return len(self._view)

    def __bytes__(self) -> bytes:
        return self._view.tobytes()

    def __getitem__(self, index: Any) -> Any:
        return self._view[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cursor):
            return self._view == other._view
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._view == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        preview = self._view[:16].hex(" ")
        if len(self._view) > 16:
            preview += " ..."
        return f"Cursor(len={len(self)}, data=[{preview}])"

    @property
    def view(self) -> memoryview:
        return self._view

    @property
    def readonly(self) -> bool:
        return self._view.readonly

    def tobytes(self) -> bytes:
        return self._view.tobytes()

    def require(self, needed: int, operation: str) -> None:
        """Fail with ``operation`` unless at least ``needed`` bytes remain."""
        length = len(self._view)
        if length < needed:
            raise MalformedInputError(operation, f"buffer too small ({length} < {needed})")

    def shift(self, count: int) -> Cursor:
        """Return the view starting ``count`` bytes later."""
        length = len(self._view)
        if count < 0 or count > length:
            raise MalformedInputError("Cursor.shift", f"cannot shift by {count} ({length} bytes available)")
        return Cursor(self._view[count:])

    def sub(self, offset: int, length: int) -> Cursor:
        """Return a ``length``-byte view starting at ``offset``."""
        available = len(self._view)
        if offset < 0 or length < 0 or offset + length > available:
            raise MalformedInputError(
                "Cursor.sub", f"range {offset}+{length} exceeds buffer ({available} bytes available)"
            )
        return Cursor(self._view[offset : offset + length])

    def peek(self, count: int, operation: str) -> bytes:
        """Copy the first ``count`` bytes out of the view."""
        self.require(count, operation)
        return self._view[:count].tobytes()

    def blit(self, data: BytesLike | Cursor, operation: str) -> Cursor:
        """Copy ``data`` to the front of the view; return the remainder."""
        source = Cursor(data)._view
        count = len(source)
        self.require(count, operation)
        if self._view.readonly:
            raise MalformedInputError(operation, "buffer is read-only")
        self._view[:count] = source
        return Cursor(self._view[count:])
