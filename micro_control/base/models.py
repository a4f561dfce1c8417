"""Domain models public surface.

Re-exports the frozen dataclasses from ``models_parts`` so callers import
from one stable location.
"""

from .models_parts import (
    ServiceIdentity,
    EndpointDescriptor,
    EndpointHandler,
    StatsDataHandler,
    EndpointStats,
    ServiceStatsSnapshot,
    InboundMessage,
    InvocationOutcome,
)

__all__ = [
    "ServiceIdentity",
    "EndpointDescriptor",
    "EndpointHandler",
    "StatsDataHandler",
    "EndpointStats",
    "ServiceStatsSnapshot",
    "InboundMessage",
    "InvocationOutcome",
]
