"""Error type shared by every codec in the package."""

from __future__ import annotations

__all__ = ["MalformedInputError"]


class MalformedInputError(ValueError):
    """Raised when a buffer cannot be read from or written to.

    ``operation`` names the failing step (``"Qid.read"``, ``"Data.write"``)
    and ``message`` the violated constraint, e.g. ``buffer too small (3 < 13)``.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message
