"""Discovery responder for the PING / INFO / STATS control verbs.

Scoping
-------
Every verb is answered at exactly three subject forms::

    <prefix>.<VERB>
    <prefix>.<VERB>.<service-name>
    <prefix>.<VERB>.<service-name>.<instance-id>

Any other suffix (another service's name, another instance's id, extra
tokens) is ignored. STATS follows the same rule as PING and INFO.

Replies
-------
PING and INFO depend only on the immutable identity and endpoint set, so
their payloads are built once and reused. STATS reads a fresh registry
snapshot on every request.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, Optional

from ..dto import (
    EndpointInfoDTO,
    EndpointStatsDTO,
    InfoResponse,
    PingResponse,
    StatsResponse,
)
from ..logging import LogContext, get_logger, log_event
from ..metrics import StatsRegistry
from ..models import EndpointDescriptor, ServiceIdentity, ServiceStatsSnapshot
from ..subjects import ControlCommand, ControlVerb
from ..transport import ReplyPublisher, deliver_reply

STARTED_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

PING_RESPONSE_TYPE = "ping_response"
INFO_RESPONSE_TYPE = "info_response"
STATS_RESPONSE_TYPE = "stats_response"


def format_started(value: datetime) -> str:
    """Render a start timestamp as ISO-8601 UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(STARTED_FORMAT)


class DiscoveryResponder:
    """Builds and publishes discovery replies for one service instance.

    Args:
        identity: Immutable service identity.
        endpoints: Endpoint descriptors in registration order.
        registry: Stats registry read by STATS.
        publisher: Reply transport.
        type_prefix: Namespace prepended to reply ``type`` values
            (e.g. ``"io.nats.micro.v1."``).
        started: Process start time; defaults to now (UTC).
    """

    def __init__(
        self,
        identity: ServiceIdentity,
        endpoints: Iterable[EndpointDescriptor],
        registry: StatsRegistry,
        publisher: ReplyPublisher,
        *,
        type_prefix: str = "",
        started: Optional[datetime] = None,
    ) -> None:
        self._identity = identity
        self._endpoints = tuple(endpoints)
        self._registry = registry
        self._publisher = publisher
        self._type_prefix = type_prefix
        self._started = format_started(started or datetime.now(timezone.utc))
        self._logger = get_logger("micro.discovery")
        self._ctx = LogContext(service=identity.name, instance_id=identity.id)
        self._ping_payload = self._build_ping().to_bytes()
        self._info_payload = self._build_info().to_bytes()
        self._builders: Dict[ControlVerb, Callable[[], bytes]] = {
            ControlVerb.PING: self.ping_payload,
            ControlVerb.INFO: self.info_payload,
            ControlVerb.STATS: self.stats_payload,
        }

    @property
    def identity(self) -> ServiceIdentity:
        return self._identity

    @property
    def started(self) -> str:
        return self._started

    def response_type(self, base: str) -> str:
        return f"{self._type_prefix}{base}"

    # ------------------------------------------------------------------ #
    # Scoping
    # ------------------------------------------------------------------ #
    def matches_scope(self, command: ControlCommand) -> bool:
        """Return True when ``command`` addresses this instance."""
        depth = command.depth
        if depth == 1:
            return True
        if depth == 2:
            return command.service == self._identity.name
        if depth == 3:
            return command.service == self._identity.name and command.instance_id == self._identity.id
        return False

    # ------------------------------------------------------------------ #
    # Payloads
    # ------------------------------------------------------------------ #
    def _build_ping(self) -> PingResponse:
        ident = self._identity
        return PingResponse(
            type=self.response_type(PING_RESPONSE_TYPE),
            name=ident.name,
            id=ident.id,
            version=ident.version,
            metadata=dict(ident.metadata),
        )

    def _build_info(self) -> InfoResponse:
        ident = self._identity
        return InfoResponse(
            type=self.response_type(INFO_RESPONSE_TYPE),
            name=ident.name,
            id=ident.id,
            version=ident.version,
            metadata=dict(ident.metadata),
            description=ident.description,
            endpoints=[EndpointInfoDTO(**ep.to_info_dict()) for ep in self._endpoints],
        )

    def ping_payload(self) -> bytes:
        return self._ping_payload

    def info_payload(self) -> bytes:
        return self._info_payload

    def stats_snapshot(self) -> ServiceStatsSnapshot:
        """Return a consistent snapshot of identity plus endpoint stats."""
        ident = self._identity
        return ServiceStatsSnapshot(
            name=ident.name,
            id=ident.id,
            version=ident.version,
            metadata=ident.metadata,
            endpoints=self._registry.snapshot(),
            started=self._started,
        )

    def stats_payload(self) -> bytes:
        snap = self.stats_snapshot()
        doc = StatsResponse(
            type=self.response_type(STATS_RESPONSE_TYPE),
            name=snap.name,
            id=snap.id,
            version=snap.version,
            metadata=dict(snap.metadata),
            endpoints=[EndpointStatsDTO(**ep.to_dict()) for ep in snap.endpoints],
            started=snap.started,
        )
        return doc.to_bytes()

    def payload_for(self, command: ControlCommand) -> Optional[bytes]:
        """Return the reply payload for ``command`` or ``None`` when it is not ours."""
        verb = command.known_verb
        if verb is None or not self.matches_scope(command):
            return None
        return self._builders[verb]()

    # ------------------------------------------------------------------ #
    # Reply
    # ------------------------------------------------------------------ #
    def respond(self, command: ControlCommand, reply_to: Optional[str]) -> bool:
        """Answer ``command`` on ``reply_to``.

        Returns True when a reply was handed to the publisher. Commands
        without a return address, unknown verbs and out-of-scope subjects
        are silently ignored.
        """
        if not reply_to:
            log_event(self._logger, "dispatch.ignored", self._ctx, level=logging.DEBUG, reason="no_reply_to", verb=command.verb)
            return False
        payload = self.payload_for(command)
        if payload is None:
            log_event(self._logger, "dispatch.ignored", self._ctx, level=logging.DEBUG, reason="not_addressed", verb=command.verb)
            return False
        sent = deliver_reply(self._publisher, reply_to, payload, self._logger, self._ctx)
        if sent:
            log_event(self._logger, "discovery.reply", self._ctx, level=logging.DEBUG, verb=command.verb, reply_to=reply_to)
        return sent


__all__ = [
    "DiscoveryResponder",
    "format_started",
    "STARTED_FORMAT",
    "PING_RESPONSE_TYPE",
    "INFO_RESPONSE_TYPE",
    "STATS_RESPONSE_TYPE",
]
