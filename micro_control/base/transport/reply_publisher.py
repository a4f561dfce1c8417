"""ReplyPublisher Protocol (single-class module).

The narrow capability the responder needs from a transport: hand a payload
to a destination subject. Delivery is best-effort and at-most-once; the core
only relies on the call being made.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ReplyPublisher(Protocol):
    """Fire-and-forget publish capability."""

    def publish(self, subject: str, body: bytes) -> None:
        """Publish ``body`` to ``subject``.

        Raises ``TransportError`` when the payload could not be handed to the
        transport. Implementations must not block waiting for delivery.
        """
        ...


__all__ = ["ReplyPublisher"]
