"""
Operation Result Model

DESIGN DECISION: The core raises typed exceptions (FormatError,
StorageIOError). Callers that would rather branch on an error kind than
catch exceptions use the try_* helpers, which wrap the same operations
and return an OperationResult.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


class ErrorKind(str, Enum):
    """Kinds of failure the core can report."""
    FORMAT = "format"  # malformed persisted record
    IO = "io"          # backing store unreadable or unwritable


class OperationResult(BaseModel, Generic[T]):
    """Success-or-error outcome of a decode, load or save."""

    success: bool
    value: Optional[T] = None
    error_kind: Optional[ErrorKind] = Field(
        default=None,
        description="Set only when success is False"
    )
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "OperationResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "OperationResult[T]":
        return cls(success=False, error_kind=kind, error_message=message)
