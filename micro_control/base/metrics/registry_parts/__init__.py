"""One-class-per-file parts for the endpoint stats registry."""

from .endpoint_counters import EndpointCounters
from .stats_registry import StatsRegistry

__all__ = ["EndpointCounters", "StatsRegistry"]
