"""Transport message envelope consumed by the dispatcher."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InboundMessage:
    """A message delivered by the pub/sub transport.

    Attributes:
        subject: Subject the message was published on.
        reply_to: Return address; ``None`` when the sender expects no reply.
        body: Raw payload bytes.
    """

    subject: str
    reply_to: Optional[str] = None
    body: bytes = b""


__all__ = ["InboundMessage"]
