"""One-class-per-file domain models."""

from .service_identity import ServiceIdentity
from .endpoint_descriptor import EndpointDescriptor, EndpointHandler, StatsDataHandler
from .endpoint_stats import EndpointStats
from .service_stats_snapshot import ServiceStatsSnapshot
from .inbound_message import InboundMessage
from .invocation_outcome import InvocationOutcome

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
