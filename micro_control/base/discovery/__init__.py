"""Discovery responder (PING / INFO / STATS)."""

from .responder import (
    DiscoveryResponder,
    format_started,
    STARTED_FORMAT,
    PING_RESPONSE_TYPE,
    INFO_RESPONSE_TYPE,
    STATS_RESPONSE_TYPE,
)

__all__ = [
    "DiscoveryResponder",
    "format_started",
    "STARTED_FORMAT",
    "PING_RESPONSE_TYPE",
    "INFO_RESPONSE_TYPE",
    "STATS_RESPONSE_TYPE",
]
