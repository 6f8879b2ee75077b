"""Explicit outcome type returned by every store operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class StoreOutcome(str, Enum):
    """What happened to a single store read or write."""

    OK = "ok"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of a store operation plus its value or error.

    ``value`` may be set on a ``STORE_ERROR`` when the store located a record
    before the failing step (a find-and-remove whose commit failed).
    """

    outcome: StoreOutcome
    value: T | None = None
    error: Exception | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> StoreResult[T]:
        return cls(StoreOutcome.OK, value=value)

    @classmethod
    def not_found(cls) -> StoreResult[T]:
        return cls(StoreOutcome.NOT_FOUND)

    @classmethod
    def failed(cls, error: Exception, value: T | None = None) -> StoreResult[T]:
        return cls(StoreOutcome.STORE_ERROR, value=value, error=error)

    @property
    def is_ok(self) -> bool:
        return self.outcome is StoreOutcome.OK

    @property
    def is_not_found(self) -> bool:
        return self.outcome is StoreOutcome.NOT_FOUND

    @property
    def is_error(self) -> bool:
        return self.outcome is StoreOutcome.STORE_ERROR
