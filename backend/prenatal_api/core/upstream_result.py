"""Upstream Result — explicit success-or-error value for the model call.

Invariants:
    - Exactly one of value / error is set
    - unwrap_or_else() always returns a value: the failure branch is the fallback

Design Decisions:
    - Result value over a bare try/except in the route: the masking of upstream
      failures is visible at the call site and testable on its own
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from prenatal_api.core.errors import UpstreamError

T = TypeVar("T")


@dataclass(frozen=True)
class UpstreamResult(Generic[T]):
    value: T | None = None
    error: UpstreamError | None = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("UpstreamResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "UpstreamResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: UpstreamError) -> "UpstreamResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or_else(self, fallback: Callable[[UpstreamError], T]) -> T:
        """Return the value, or the fallback built from the error."""
        if self.error is not None:
            return fallback(self.error)
        return self.value
