"""
EndpointDescriptor value object.

Describes one business endpoint: the subject it answers, its queue group and
the handler capability the router invokes. The descriptor set is fixed once
the registry and router are built.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

EndpointHandler = Callable[[bytes], Any]
StatsDataHandler = Callable[[], Any]


@dataclass(frozen=True)
class EndpointDescriptor:
    """A named business operation reachable on its own subject.

    Attributes:
        name: Endpoint name (unique within a service).
        subject: Exact subject the endpoint answers (unique within a service).
        queue_group: Competing-consumer group label used when subscribing.
        handler: Callable receiving the raw request body. Optional; an
            endpoint without a handler answers every request with an
            ``unsupported`` error.
        metadata: Free-form string metadata reported by INFO.
        stats_handler: Optional callable whose JSON-able return value is
            reported as ``data`` in the endpoint's STATS entry.
    """

    name: str
    subject: str
    queue_group: str
    handler: Optional[EndpointHandler] = field(default=None, compare=False, repr=False)
    metadata: Mapping[str, str] = field(default_factory=dict)
    stats_handler: Optional[StatsDataHandler] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("endpoint name must be non-empty")
        if not self.subject:
            raise ValueError(f"endpoint {self.name!r} requires a subject")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_info_dict(self) -> Dict[str, Any]:
        """Return the INFO representation of this endpoint."""
        return {
            "name": self.name,
            "subject": self.subject,
            "queue_group": self.queue_group,
            "metadata": dict(self.metadata),
        }


__all__ = ["EndpointDescriptor", "EndpointHandler", "StatsDataHandler"]
