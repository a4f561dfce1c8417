"""NATS binding for :class:`MicroService`.

Connection management (connect, reconnect, credentials) belongs to the
caller; this module takes an already connected ``nats.aio.client.Client``.

Threading model
---------------
nats-py invokes subscription callbacks on the event loop, one message at a
time per subscription. Each message is handed to a worker thread so handlers
run concurrently and never block the loop. Replies are scheduled back onto
the loop with ``asyncio.run_coroutine_threadsafe`` and not awaited; a failed
publish is logged from the future's done-callback.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, List, Optional, Set

from nats.aio.client import Client as NATS
from nats.aio.msg import Msg
from nats.aio.subscription import Subscription

from ..base.dispatch import MicroService
from ..base.errors import TransportError
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import InboundMessage
from ..config.defaults import NATS_DEFAULT_WORKERS


class NatsReplyPublisher:
    """:class:`ReplyPublisher` that schedules publishes on the NATS event loop."""

    def __init__(self, nc: NATS, loop: asyncio.AbstractEventLoop) -> None:
        self._nc = nc
        self._loop = loop
        self._logger = get_logger("micro.nats")

    def publish(self, subject: str, body: bytes) -> None:
        if self._nc.is_closed or self._loop.is_closed():
            raise TransportError(message="NATS connection is closed", subject=subject)
        try:
            fut = asyncio.run_coroutine_threadsafe(self._nc.publish(subject, body), self._loop)
        except RuntimeError as exc:
            raise TransportError(message=str(exc), subject=subject, raw=exc) from exc
        fut.add_done_callback(lambda f: self._report(f, subject))

    def _report(self, fut: "Future[Any]", subject: str) -> None:
        if fut.cancelled():
            return
        exc = fut.exception()
        if exc is not None:
            log_event(
                self._logger,
                "reply.publish_failed",
                LogContext(subject=subject),
                level=logging.ERROR,
                error=str(exc),
                error_type=type(exc).__name__,
            )


class NatsTransport:
    """Subscribes a :class:`MicroService` to its subjects on NATS.

    Example usage:
        nc = await nats.connect(servers=["nats://127.0.0.1:4222"])
        transport = NatsTransport(nc)
        service = build_calculator_service(transport.publisher)
        await transport.start(service)
        ...
        await transport.stop()
    """

    def __init__(
        self,
        nc: NATS,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        executor: Optional[Executor] = None,
        workers: int = NATS_DEFAULT_WORKERS,
    ) -> None:
        self._nc = nc
        self._loop = loop or asyncio.get_running_loop()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=workers, thread_name_prefix="micro-handler")
        self._publisher = NatsReplyPublisher(nc, self._loop)
        self._subscriptions: List[Subscription] = []
        self._inflight: Set["asyncio.Future[None]"] = set()
        self._service: Optional[MicroService] = None
        self._logger = get_logger("micro.nats")

    @property
    def publisher(self) -> NatsReplyPublisher:
        return self._publisher

    async def start(self, service: MicroService) -> None:
        """Subscribe every subject the service answers."""
        if self._service is not None:
            raise RuntimeError("transport already started")
        self._service = service
        ctx = LogContext(service=service.identity.name, instance_id=service.identity.id)
        for subject, queue in service.subscriptions():
            sub = await self._nc.subscribe(subject, queue=queue or "", cb=self._on_message)
            self._subscriptions.append(sub)
            log_event(self._logger, "nats.subscribed", ctx, level=logging.DEBUG, subject=subject, queue=queue)
        log_event(self._logger, "service.started", ctx, subscriptions=len(self._subscriptions))

    async def _on_message(self, msg: Msg) -> None:
        service = self._service
        if service is None:
            return
        inbound = InboundMessage(subject=msg.subject, reply_to=msg.reply or None, body=msg.data or b"")
        fut = self._loop.run_in_executor(self._executor, service.handle_message, inbound)
        self._inflight.add(fut)
        fut.add_done_callback(self._inflight.discard)

    async def stop(self) -> None:
        """Unsubscribe and wait for in-flight handlers to finish."""
        for sub in self._subscriptions:
            await sub.unsubscribe()
        self._subscriptions.clear()
        if self._inflight:
            await asyncio.gather(*self._inflight, return_exceptions=True)
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        self._service = None


__all__ = ["NatsTransport", "NatsReplyPublisher"]
