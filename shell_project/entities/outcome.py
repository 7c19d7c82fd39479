"""
Operation outcome returned by every filesystem operation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Kinds of failures the shell can report."""

    MISSING = "missing"
    UNQUOTED_WHITESPACE = "unquoted_whitespace"
    INVALID_ARGUMENTS = "invalid_arguments"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALLOCATION_FAILURE = "allocation_failure"
    READ_FAILURE = "read_failure"
    WRITE_FAILURE = "write_failure"
    OPEN_FAILURE = "open_failure"
    SAME_FILE = "same_file"
    FILE_FAILURE = "file_failure"
    INVALID_COMMAND = "invalid_command"
    OPERATION_FAILED = "operation_failed"


@dataclass(frozen=True)
class OperationOutcome(Generic[T]):
    """
    Tagged result of a filesystem operation.

    A successful outcome carries an optional value, a failed one carries the
    error kind and an optional human readable detail (usually the OS message).
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    detail: str = ""

    @classmethod
    def success(cls, value: Optional[T] = None) -> "OperationOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, detail: str = "") -> "OperationOutcome[T]":
        return cls(error=kind, detail=detail)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok
