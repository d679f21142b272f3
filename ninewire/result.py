"""Value-based outcomes for codec operations.

Codecs raise :class:`~ninewire.errors.MalformedInputError`. Callers that
prefer to thread outcomes as values wrap an operation with :func:`capture`
and chain further steps with :func:`bind`; the first ``Err`` short-circuits
every later step unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import msgspec

from .errors import MalformedInputError

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["Ok", "Err", "Outcome", "bind", "capture", "unwrap"]


class Ok(msgspec.Struct, Generic[T], frozen=True):
    """Successful outcome carrying ``value``."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


class Err(msgspec.Struct, frozen=True):
    """Failed outcome carrying the error that stopped the chain."""

    error: Any

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.error)


Outcome = Ok[T] | Err


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """Run ``fn`` and turn a :class:`MalformedInputError` into an ``Err``.

    Any other exception propagates; it signals a programming error rather
    than malformed input.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except MalformedInputError as exc:
        return Err(exc)


def bind(outcome: Outcome[T], fn: Callable[[T], Outcome[U]]) -> Outcome[U]:
    """Feed a success into ``fn``; hand a failure back untouched without calling ``fn``."""
    if isinstance(outcome, Err):
        return outcome
    return fn(outcome.value)


def unwrap(outcome: Outcome[T]) -> T:
    """Return the carried value or re-raise the carried error."""
    if isinstance(outcome, Err):
        raise outcome.error
    return outcome.value
