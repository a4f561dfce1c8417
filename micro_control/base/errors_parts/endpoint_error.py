"""
Structured endpoint error exception type.

Raised by business handlers to report a failure with an explicit
`ErrorCode`. The router records it in the endpoint statistics and turns it
into a normal error reply; it never escapes as a transport fault.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class EndpointError(Exception):
    """Represents a business endpoint failure with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message; becomes ``last_error`` in stats.
        endpoint: Endpoint name where the error originated, when known.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    endpoint: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


__all__ = ["EndpointError"]
