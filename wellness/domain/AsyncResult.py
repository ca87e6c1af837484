"""AsyncResult: lifecycle of one action button's remote call."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from wellness.utilities.errors import RemoteCallError

T = TypeVar("T")


class Status(str, Enum):
    NOT_STARTED = "not_started"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class AsyncResult(Generic[T]):
    status: Status = Status.NOT_STARTED
    data: Optional[T] = None
    reason: Optional[RemoteCallError] = None

    @classmethod
    def not_started(cls) -> "AsyncResult[Any]":
        return cls()

    @classmethod
    def loading(cls) -> "AsyncResult[Any]":
        return cls(Status.LOADING)

    @classmethod
    def succeeded(cls, data: T) -> "AsyncResult[T]":
        return cls(Status.SUCCEEDED, data=data)

    @classmethod
    def failed(cls, reason: RemoteCallError) -> "AsyncResult[Any]":
        return cls(Status.FAILED, reason=reason)

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "error": self.reason.to_dict() if self.reason is not None else None,
        }


__all__ = ["Status", "AsyncResult"]
