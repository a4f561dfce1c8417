"""
Normalized endpoint error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the business router, the error
reply documents and structured logging. Values are lowercase snake_case and
are considered a stable public contract for callers parsing error replies.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    UNSUPPORTED = "unsupported"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    TRANSPORT = "transport"
    INTERNAL = "internal"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
