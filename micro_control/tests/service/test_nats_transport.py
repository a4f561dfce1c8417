"""NATS adapter tests against an in-process stand-in for the nats-py client.

The fake implements only what ``NatsTransport`` touches: ``subscribe`` (with
``queue`` and ``cb``), ``publish``, ``is_closed`` and subscription
``unsubscribe``. Delivered messages run through the real executor path.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

import pytest

from micro_control.base.models import InboundMessage
from micro_control.calculator import build_calculator_service
from micro_control.config.defaults import SERVICE_DEFAULT_ID
from micro_control.service.nats_transport import NatsTransport
from micro_control.tests.utils import STARTED


@dataclass
class FakeMsg:
    subject: str
    reply: str
    data: bytes


class FakeSubscription:
    def __init__(self, owner: "FakeNats", subject: str) -> None:
        self._owner = owner
        self.subject = subject
        self.active = True

    async def unsubscribe(self) -> None:
        self.active = False
        self._owner.subs.pop(self.subject, None)


class FakeNats:
    def __init__(self, fail_publish: bool = False) -> None:
        self.subs: Dict[str, Tuple[str, Callable[[Any], Awaitable[None]]]] = {}
        self.published: List[Tuple[str, bytes]] = []
        self.is_closed = False
        self._fail_publish = fail_publish

    async def subscribe(self, subject: str, queue: str = "", cb=None) -> FakeSubscription:
        self.subs[subject] = (queue, cb)
        return FakeSubscription(self, subject)

    async def publish(self, subject: str, payload: bytes = b"") -> None:
        if self._fail_publish:
            raise ConnectionError("nats: connection lost")
        self.published.append((subject, payload))

    async def deliver(self, subject: str, data: bytes = b"", reply: str = "") -> None:
        _, cb = self.subs[subject]
        await cb(FakeMsg(subject=subject, reply=reply, data=data))


async def _wait_for(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    deadline = asyncio.get_running_loop().time() + timeout
    while not predicate():
        if asyncio.get_running_loop().time() > deadline:
            raise AssertionError("condition not reached before timeout")
        await asyncio.sleep(0.01)


async def _started(nc: FakeNats) -> Tuple[NatsTransport, Any]:
    transport = NatsTransport(nc, workers=4)
    service = build_calculator_service(transport.publisher, started=STARTED)
    await transport.start(service)
    return transport, service


def test_start_subscribes_control_and_endpoint_subjects():
    async def scenario() -> Dict[str, Tuple[str, Any]]:
        nc = FakeNats()
        transport, _ = await _started(nc)
        subs = dict(nc.subs)
        await transport.stop()
        assert nc.subs == {}  # nosec B101
        return subs

    subs = asyncio.run(scenario())
    assert len(subs) == 12  # nosec B101
    assert subs["$CTL.PING"][0] == ""  # nosec B101
    assert subs[f"$CTL.STATS.calculator.{SERVICE_DEFAULT_ID}"][0] == ""  # nosec B101
    assert subs["add"][0] == "q" and subs["multiply"][0] == "q"  # nosec B101


def test_request_reply_round_trip():
    async def scenario() -> Tuple[List[Tuple[str, bytes]], Any]:
        nc = FakeNats()
        transport, service = await _started(nc)
        await nc.deliver("$CTL.PING", reply="_INBOX.1")
        await nc.deliver("add", b"[20, 22]", reply="_INBOX.2")
        await nc.deliver("subtract", b"[1]", reply="_INBOX.3")
        await nc.deliver("multiply", b"[2, 2]")
        await _wait_for(lambda: len(nc.published) == 3)
        await transport.stop()
        return nc.published, service

    published, service = asyncio.run(scenario())
    replies = {subject: json.loads(body) for subject, body in published}
    assert replies["_INBOX.1"]["type"] == "ping_response"  # nosec B101
    assert replies["_INBOX.2"] == {"result": 42}  # nosec B101
    assert replies["_INBOX.3"]["code"] == "validation"  # nosec B101
    stats = {s.name: s for s in service.registry.snapshot()}
    assert stats["add"].num_requests == 1 and stats["subtract"].num_errors == 1  # nosec B101
    assert stats["multiply"].num_requests == 1  # nosec B101


def test_publish_on_closed_connection_is_logged(log_records):
    async def scenario() -> Any:
        nc = FakeNats()
        transport, service = await _started(nc)
        nc.is_closed = True
        await nc.deliver("add", b"[1, 2]", reply="_INBOX.x")
        await transport.stop()
        return service

    service = asyncio.run(scenario())
    failed = log_records.events("reply.publish_failed")
    assert len(failed) == 1 and failed[0]["error_code"] == "transport"  # nosec B101
    assert service.registry.endpoint_snapshot("add").num_errors == 0  # nosec B101


def test_async_publish_failure_is_logged(log_records):
    async def scenario() -> None:
        nc = FakeNats(fail_publish=True)
        transport, _ = await _started(nc)
        await nc.deliver("$CTL.INFO", reply="_INBOX.y")
        await _wait_for(lambda: bool(log_records.events("reply.publish_failed")))
        await transport.stop()

    asyncio.run(scenario())
    (event,) = log_records.events("reply.publish_failed")
    assert event["subject"] == "_INBOX.y" and event["error_type"] == "ConnectionError"  # nosec B101


def test_start_twice_is_rejected():
    async def scenario() -> None:
        nc = FakeNats()
        transport, service = await _started(nc)
        try:
            with pytest.raises(RuntimeError):
                await transport.start(service)
        finally:
            await transport.stop()

    asyncio.run(scenario())


def test_messages_after_stop_are_dropped():
    async def scenario() -> List[Tuple[str, bytes]]:
        nc = FakeNats()
        transport, _ = await _started(nc)
        _, cb = nc.subs["add"]
        await transport.stop()
        await cb(FakeMsg(subject="add", reply="_INBOX.z", data=b"[1, 2]"))
        await asyncio.sleep(0.05)
        return nc.published

    assert asyncio.run(scenario()) == []  # nosec B101


def test_inbound_message_defaults():
    msg = InboundMessage(subject="add")
    assert msg.reply_to is None and msg.body == b""  # nosec B101
