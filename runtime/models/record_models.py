"""
Result and log models for the recdb runtime.

These describe:
- ErrorKind enum (NOT_FOUND, PARSE_ERROR, KEY_ERROR, WRITE_ERROR, ALREADY_EXISTS)
- OperationResult returned by every record operation
- LogEntry, one parsed line of the operation log
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    PARSE_ERROR = "PARSE_ERROR"
    KEY_ERROR = "KEY_ERROR"
    WRITE_ERROR = "WRITE_ERROR"
    ALREADY_EXISTS = "ALREADY_EXISTS"


class OperationResult(BaseModel):
    """
    Outcome of a single record operation.

    message is the exact text written to the operation log. data carries
    the payload for read-only operations (the value for get, the key list
    for union/intersect/difference).
    """
    operation: str
    ok: bool
    message: str
    error: Optional[ErrorKind] = None
    data: Optional[Any] = None

    @classmethod
    def success(cls, operation: str, message: str, data: Any = None) -> "OperationResult":
        return cls(operation=operation, ok=True, message=message, data=data)

    @classmethod
    def failure(cls, operation: str, message: str, error: ErrorKind) -> "OperationResult":
        return cls(operation=operation, ok=False, message=message, error=error)


class LogEntry(BaseModel):
    message: str
    timestamp: int     # epoch milliseconds

    @classmethod
    def parse_line(cls, line: str) -> "LogEntry":
        """Split '<message> <epoch-ms>' on its last space."""
        message, sep, stamp = line.rstrip("\n").rpartition(" ")
        if not sep or not stamp.isdigit():
            raise ValueError(f"Malformed log line: {line!r}")
        return cls(message=message, timestamp=int(stamp))
