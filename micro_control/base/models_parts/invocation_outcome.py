"""
InvocationOutcome dataclass.

Returned by the business router for every invocation of a known endpoint so
callers (HTTP surface, tests) can inspect what was recorded and replied.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import ErrorCode


@dataclass(frozen=True)
class InvocationOutcome:
    """Result of routing one business message to an endpoint.

    Attributes:
        endpoint: Name of the endpoint that was invoked.
        succeeded: Whether the handler completed without raising.
        duration_ns: Measured handler wall time in nanoseconds.
        payload: Reply body (handler result, or the error document).
        error: Failure message when ``succeeded`` is False.
        error_code: Normalized failure code when ``succeeded`` is False.
        replied: Whether the reply was handed to the publisher successfully.
    """

    endpoint: str
    succeeded: bool
    duration_ns: int
    payload: bytes
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    replied: bool = False


__all__ = ["InvocationOutcome"]
