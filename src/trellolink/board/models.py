"""Data models for the Board Client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class BoardFailure:
    """A failed request to the board service.

    Attributes:
        url: Request URL (without credentials).
        status_code: HTTP status, or None for transport errors.
        message: Status text or transport error description.
    """

    url: str
    status_code: int | None
    message: str

    def __str__(self) -> str:
        status = self.status_code if self.status_code is not None else "network"
        return f"{self.url} Error {status} {self.message}"


@dataclass(frozen=True)
class BoardResult(Generic[T]):
    """Tagged result of a Board Client call.

    Either `failure` is None and `value` holds the result, or `failure`
    describes what went wrong and `value` is None.
    """

    value: T | None = None
    failure: BoardFailure | None = None

    @property
    def ok(self) -> bool:
        """Whether the request succeeded."""
        return self.failure is None

    @classmethod
    def success(cls, value: T | None) -> BoardResult[T]:
        return cls(value=value)

    @classmethod
    def failed(cls, failure: BoardFailure) -> BoardResult[T]:
        return cls(failure=failure)
