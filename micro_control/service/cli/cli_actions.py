"""CLI action handlers.

``describe`` runs a discovery request through the full dispatch path against
an in-memory transport and prints the reply; it performs no network I/O.
``serve`` connects to NATS and answers requests until SIGINT/SIGTERM.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import signal
import sys
from contextlib import suppress
from typing import Any, Dict, Optional

from ...base.logging import LogContext, get_logger, log_event
from ...base.models import InboundMessage
from ...base.subjects import join_tokens
from ...base.transport import InMemoryTransport
from ...calculator import build_calculator_service
from ...config import get_service_config

_CLI_INBOX = "_INBOX.micro-control.cli"


def _config_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    return get_service_config(
        {
            "name": getattr(args, "name", None),
            "id": getattr(args, "service_id", None),
            "nats_url": getattr(args, "nats_url", None),
            "control_prefix": getattr(args, "control_prefix", None),
            "nats_workers": getattr(args, "workers", None),
        }
    )


def describe_document(verb: str, cfg: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the decoded reply the service publishes for ``verb``."""
    cfg = cfg if cfg is not None else get_service_config()
    transport = InMemoryTransport()
    service = build_calculator_service(transport, cfg)
    subject = join_tokens((service.control_prefix, verb.upper()))
    service.handle_message(InboundMessage(subject=subject, reply_to=_CLI_INBOX))
    msg = transport.pop(_CLI_INBOX)
    if msg is None:
        raise RuntimeError(f"service produced no reply for {subject}")
    return json.loads(msg.body)


def handle_describe(args: argparse.Namespace) -> int:
    doc = describe_document(args.verb, _config_from_args(args))
    sys.stdout.write(json.dumps(doc, indent=2) + "\n")
    return 0


async def _serve(cfg: Dict[str, Any]) -> None:
    import nats

    from ..nats_transport import NatsTransport

    logger = get_logger("micro.cli")
    nc = await nats.connect(servers=[cfg["nats_url"]])
    transport = NatsTransport(nc, workers=int(cfg["nats_workers"]))
    service = build_calculator_service(transport.publisher, cfg)
    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # not available on Windows event loops
        with suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop.set)
    await transport.start(service)
    log_event(
        logger,
        "cli.serve",
        LogContext(service=service.identity.name, instance_id=service.identity.id),
        nats_url=cfg["nats_url"],
        control_prefix=service.control_prefix,
    )
    try:
        await stop.wait()
    finally:
        await transport.stop()
        await nc.drain()


def handle_serve(args: argparse.Namespace) -> int:
    asyncio.run(_serve(_config_from_args(args)))
    return 0


__all__ = ["handle_describe", "handle_serve", "describe_document"]
