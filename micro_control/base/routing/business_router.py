"""Business endpoint router.

Maps an exact business subject to its endpoint, invokes the handler, records
the outcome in the stats registry and replies with either the handler's
result or a structured error document.

Contract:
    - Subjects match exactly; there is no wildcarding.
    - Unknown subjects are dropped: no reply, no stats change, no error.
    - Handler exceptions never propagate. They are recorded (``num_errors``,
      ``last_error``) and turned into an ``error_response`` reply.
    - Stats reflect the handler outcome regardless of whether the reply
      could be delivered.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel

from ..dto import ErrorResponse
from ..errors import EndpointError, ErrorCode, classify_exception
from ..logging import LogContext, get_logger, log_event
from ..metrics import StatsRegistry
from ..models import EndpointDescriptor, InvocationOutcome
from ..transport import ReplyPublisher, deliver_reply

ERROR_RESPONSE_TYPE = "error_response"


def encode_result(result: Any) -> bytes:
    """Normalize a handler return value into a reply body.

    ``bytes`` pass through, ``str`` is UTF-8 encoded, ``None`` becomes an
    empty body, pydantic models and other values are encoded as compact JSON.
    """
    if result is None:
        return b""
    if isinstance(result, (bytes, bytearray, memoryview)):
        return bytes(result)
    if isinstance(result, str):
        return result.encode("utf-8")
    if isinstance(result, BaseModel):
        return result.model_dump_json().encode("utf-8")
    return json.dumps(result, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class BusinessRouter:
    """Exact-subject dispatcher for business endpoints.

    Example usage:
        router = BusinessRouter(endpoints, registry, transport)
        outcome = router.route("add", b"[1, 2]", reply_to="_INBOX.1")
    """

    def __init__(
        self,
        endpoints: Iterable[EndpointDescriptor],
        registry: StatsRegistry,
        publisher: ReplyPublisher,
        *,
        type_prefix: str = "",
        service_name: Optional[str] = None,
    ) -> None:
        self._by_subject: Dict[str, EndpointDescriptor] = {}
        for ep in endpoints:
            if ep.name not in registry:
                raise ValueError(f"endpoint {ep.name!r} is not registered with the stats registry")
            if ep.subject in self._by_subject:
                raise ValueError(f"duplicate endpoint subject: {ep.subject!r}")
            self._by_subject[ep.subject] = ep
        self._registry = registry
        self._publisher = publisher
        self._error_type = f"{type_prefix}{ERROR_RESPONSE_TYPE}"
        self._service_name = service_name
        self._logger = get_logger("micro.routing")

    @property
    def subjects(self) -> Tuple[str, ...]:
        return tuple(self._by_subject)

    def lookup(self, subject: str) -> Optional[EndpointDescriptor]:
        """Return the endpoint registered for exactly ``subject``."""
        return self._by_subject.get(subject)

    def route(self, subject: str, body: bytes, reply_to: Optional[str] = None) -> Optional[InvocationOutcome]:
        """Invoke the endpoint for ``subject`` and reply when ``reply_to`` is set.

        Returns ``None`` when no endpoint owns ``subject``.
        """
        endpoint = self.lookup(subject)
        if endpoint is None:
            log_event(
                self._logger,
                "dispatch.ignored",
                LogContext(service=self._service_name, subject=subject),
                level=logging.DEBUG,
                reason="unknown_subject",
            )
            return None

        ctx = LogContext(service=self._service_name, endpoint=endpoint.name, subject=subject)
        outcome = self._invoke(endpoint, body, ctx)
        self._registry.record_invocation(
            endpoint.name,
            succeeded=outcome.succeeded,
            error_message=outcome.error,
            duration_ns=outcome.duration_ns,
        )
        if not reply_to:
            return outcome
        replied = deliver_reply(self._publisher, reply_to, outcome.payload, self._logger, ctx)
        return replace(outcome, replied=replied)

    def _invoke(self, endpoint: EndpointDescriptor, body: bytes, ctx: LogContext) -> InvocationOutcome:
        start = StatsRegistry.monotonic_ns()
        try:
            if endpoint.handler is None:
                raise EndpointError(
                    code=ErrorCode.UNSUPPORTED,
                    message=f"endpoint '{endpoint.name}' has no handler",
                    endpoint=endpoint.name,
                )
            payload = encode_result(endpoint.handler(body))
        except Exception as exc:  # handler failures become error replies, never transport faults
            duration = max(0, StatsRegistry.monotonic_ns() - start)
            code = classify_exception(exc)
            message = str(exc) or type(exc).__name__
            log_event(
                self._logger,
                "endpoint.failed",
                ctx,
                level=logging.WARNING,
                error=message,
                error_code=code.value,
                duration_ns=duration,
            )
            error_doc = ErrorResponse(
                type=self._error_type,
                endpoint=endpoint.name,
                code=code.value,
                error=message,
            )
            return InvocationOutcome(
                endpoint=endpoint.name,
                succeeded=False,
                duration_ns=duration,
                payload=error_doc.to_bytes(),
                error=message,
                error_code=code,
            )
        duration = max(0, StatsRegistry.monotonic_ns() - start)
        log_event(self._logger, "endpoint.invoked", ctx, level=logging.DEBUG, duration_ns=duration)
        return InvocationOutcome(
            endpoint=endpoint.name,
            succeeded=True,
            duration_ns=duration,
            payload=payload,
        )


__all__ = ["BusinessRouter", "encode_result", "ERROR_RESPONSE_TYPE"]
