# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Success-or-failure result used by the login / sign-up resolution chain."""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "Outcome[T]":
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.reason is None

    def or_else(self, fallback: Callable[[], "Outcome[T]"]) -> "Outcome[T]":
        """Return self on success, otherwise the result of *fallback()*."""
        return self if self.ok else fallback()
