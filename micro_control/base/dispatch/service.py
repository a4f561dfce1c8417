"""Service dispatcher: the single entry point for inbound messages.

``MicroService`` wires one stats registry, one discovery responder and one
business router around an explicit identity and endpoint set. The transport
adapter calls :meth:`MicroService.handle_message` once per delivered message,
possibly from many threads at once; the method never raises.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from ..discovery import DiscoveryResponder
from ..logging import LogContext, get_logger, log_event
from ..metrics import StatsRegistry
from ..models import (
    EndpointDescriptor,
    InboundMessage,
    InvocationOutcome,
    ServiceIdentity,
    ServiceStatsSnapshot,
)
from ..routing import BusinessRouter
from ..subjects import BusinessSubject, ControlCommand, ControlVerb, control_subjects, parse_subject, tokenize
from ..transport import ReplyPublisher

DEFAULT_CONTROL_PREFIX = "$CTL"


class MicroService:
    """A discoverable service instance fronting a fixed set of endpoints.

    Args:
        identity: Immutable service identity.
        endpoints: Endpoint descriptors in registration order.
        publisher: Reply transport.
        control_prefix: First token of control subjects.
        type_prefix: Namespace prepended to reply document types.
        started: Start timestamp reported by STATS; defaults to now.
    """

    def __init__(
        self,
        identity: ServiceIdentity,
        endpoints: Iterable[EndpointDescriptor],
        publisher: ReplyPublisher,
        *,
        control_prefix: str = DEFAULT_CONTROL_PREFIX,
        type_prefix: str = "",
        started: Optional[datetime] = None,
    ) -> None:
        if not control_prefix or "." in control_prefix:
            raise ValueError(f"control prefix must be a single non-empty token, got {control_prefix!r}")
        self._identity = identity
        self._endpoints: Tuple[EndpointDescriptor, ...] = tuple(endpoints)
        self._control_prefix = control_prefix
        self._registry = StatsRegistry(self._endpoints)
        self._responder = DiscoveryResponder(
            identity,
            self._endpoints,
            self._registry,
            publisher,
            type_prefix=type_prefix,
            started=started,
        )
        self._router = BusinessRouter(
            self._endpoints,
            self._registry,
            publisher,
            type_prefix=type_prefix,
            service_name=identity.name,
        )
        for ep in self._endpoints:
            if tokenize(ep.subject)[0] == control_prefix:
                raise ValueError(f"endpoint subject {ep.subject!r} collides with the control namespace")
        self._logger = get_logger("micro.dispatch")
        self._ctx = LogContext(service=identity.name, instance_id=identity.id)

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #
    @property
    def identity(self) -> ServiceIdentity:
        return self._identity

    @property
    def endpoints(self) -> Tuple[EndpointDescriptor, ...]:
        return self._endpoints

    @property
    def control_prefix(self) -> str:
        return self._control_prefix

    @property
    def registry(self) -> StatsRegistry:
        return self._registry

    @property
    def responder(self) -> DiscoveryResponder:
        return self._responder

    @property
    def router(self) -> BusinessRouter:
        return self._router

    def stats_snapshot(self) -> ServiceStatsSnapshot:
        return self._responder.stats_snapshot()

    def subscriptions(self) -> List[Tuple[str, Optional[str]]]:
        """Subjects to subscribe, paired with a queue group.

        Control subjects have no queue group so every instance answers a
        broadcast; endpoint subjects use the endpoint's queue group.
        """
        subs: List[Tuple[str, Optional[str]]] = []
        for verb in ControlVerb:
            for subject in control_subjects(self._control_prefix, verb, self._identity.name, self._identity.id):
                subs.append((subject, None))
        for ep in self._endpoints:
            subs.append((ep.subject, ep.queue_group or None))
        return subs

    # ------------------------------------------------------------------ #
    # Dispatch
    # ------------------------------------------------------------------ #
    def invoke(self, subject: str, body: bytes = b"", reply_to: Optional[str] = None) -> Optional[InvocationOutcome]:
        """Route a business message directly, bypassing subject classification."""
        return self._router.route(subject, body, reply_to)

    def handle_message(self, msg: InboundMessage) -> None:
        """Process one inbound message to completion. Never raises."""
        try:
            self._dispatch(msg)
        except Exception as exc:  # one bad message must not stop the transport loop
            log_event(
                self._logger,
                "dispatch.failed",
                self._ctx,
                level=logging.ERROR,
                subject=msg.subject,
                error=str(exc),
                error_type=type(exc).__name__,
            )

    def _dispatch(self, msg: InboundMessage) -> None:
        parsed = parse_subject(msg.subject, self._control_prefix)
        if parsed is None:
            log_event(self._logger, "dispatch.ignored", self._ctx, level=logging.DEBUG, subject=msg.subject, reason="malformed_control")
        elif isinstance(parsed, ControlCommand):
            self._responder.respond(parsed, msg.reply_to)
        elif isinstance(parsed, BusinessSubject):
            self._router.route(parsed.subject, msg.body, msg.reply_to)
        else:  # pragma: no cover - closed variant
            raise TypeError(f"unexpected parsed subject: {parsed!r}")


__all__ = ["MicroService", "DEFAULT_CONTROL_PREFIX"]
