"""
EndpointStats snapshot dataclass.

Immutable copy of one endpoint's counters as produced by the stats registry.
Processing times are nanoseconds.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class EndpointStats:
    """Point-in-time statistics for a single endpoint.

    Attributes:
        name: Endpoint name.
        subject: Endpoint subject.
        queue_group: Endpoint queue group.
        num_requests: Total invocations recorded.
        num_errors: Failed invocations recorded (never above ``num_requests``).
        last_error: Message of the most recent failure, if any.
        processing_time: Sum of all invocation durations (ns).
        average_processing_time: ``processing_time / num_requests`` or ``0``.
        data: Optional endpoint-specific stats data.
    """

    name: str
    subject: str
    queue_group: str
    num_requests: int = 0
    num_errors: int = 0
    last_error: Optional[str] = None
    processing_time: int = 0
    average_processing_time: float = 0
    data: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation; ``data`` is omitted when unset."""
        out = asdict(self)
        if out["data"] is None:
            out.pop("data")
        return out


__all__ = ["EndpointStats"]
