"""Mutable per-endpoint counters owned by the stats registry.

Not thread-safe on its own: every access goes through the registry lock.
"""

from __future__ import annotations

from typing import Any, Optional

from ...models import EndpointDescriptor, EndpointStats


class EndpointCounters:
    """Running totals for one endpoint."""

    __slots__ = (
        "descriptor",
        "num_requests",
        "num_errors",
        "last_error",
        "processing_time",
        "average_processing_time",
    )

    def __init__(self, descriptor: EndpointDescriptor):
        self.descriptor = descriptor
        self.num_requests = 0
        self.num_errors = 0
        self.last_error: Optional[str] = None
        self.processing_time = 0
        self.average_processing_time: float = 0

    def apply(self, succeeded: bool, error_message: Optional[str], duration_ns: int) -> None:
        self.num_requests += 1
        if not succeeded:
            self.num_errors += 1
            self.last_error = error_message or "unknown error"
        self.processing_time += duration_ns
        self.average_processing_time = self.processing_time / self.num_requests

    def freeze(self, data: Any = None) -> EndpointStats:
        d = self.descriptor
        return EndpointStats(
            name=d.name,
            subject=d.subject,
            queue_group=d.queue_group,
            num_requests=self.num_requests,
            num_errors=self.num_errors,
            last_error=self.last_error,
            processing_time=self.processing_time,
            average_processing_time=self.average_processing_time,
            data=data,
        )


__all__ = ["EndpointCounters"]
