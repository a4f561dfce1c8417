"""
Service Base Package

Exports the transport-agnostic core of the control-plane responder:

- Subjects: tokenization and control/business classification
- Models: identity, endpoint descriptors, stats snapshots (frozen dataclasses)
- Metrics: the lock-protected stats registry
- Discovery: PING / INFO / STATS replies
- Routing: exact-subject business dispatch
- Dispatch: ``MicroService``, the single inbound entry point
- Transport: the ``ReplyPublisher`` capability and an in-memory implementation
"""

from .errors import EndpointError, ErrorCode, TransportError, classify_exception
from .models import (
    EndpointDescriptor,
    EndpointStats,
    InboundMessage,
    InvocationOutcome,
    ServiceIdentity,
    ServiceStatsSnapshot,
)
from .subjects import BusinessSubject, ControlCommand, ControlVerb, join_tokens, parse_subject, tokenize
from .metrics import StatsRegistry
from .discovery import DiscoveryResponder
from .routing import BusinessRouter
from .dispatch import DEFAULT_CONTROL_PREFIX, MicroService
from .transport import InMemoryTransport, PublishedMessage, ReplyPublisher

__all__ = [
    "EndpointError",
    "ErrorCode",
    "TransportError",
    "classify_exception",
    "EndpointDescriptor",
    "EndpointStats",
    "InboundMessage",
    "InvocationOutcome",
    "ServiceIdentity",
    "ServiceStatsSnapshot",
    "BusinessSubject",
    "ControlCommand",
    "ControlVerb",
    "join_tokens",
    "parse_subject",
    "tokenize",
    "StatsRegistry",
    "DiscoveryResponder",
    "BusinessRouter",
    "DEFAULT_CONTROL_PREFIX",
    "MicroService",
    "InMemoryTransport",
    "PublishedMessage",
    "ReplyPublisher",
]
