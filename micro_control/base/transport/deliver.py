"""Best-effort reply delivery shared by the responder and the router."""

from __future__ import annotations

import logging

from ..errors import classify_exception
from ..logging import LogContext, log_event
from .reply_publisher import ReplyPublisher


def deliver_reply(
    publisher: ReplyPublisher,
    subject: str,
    body: bytes,
    logger: logging.Logger,
    ctx: LogContext | None = None,
) -> bool:
    """Publish ``body`` to ``subject`` once; never raises.

    Returns ``True`` when the publisher accepted the payload. Failures are
    logged as ``reply.publish_failed`` and not retried.
    """
    try:
        publisher.publish(subject, body)
    except Exception as exc:  # publisher is transport code; a failed reply must not fault dispatch
        log_event(
            logger,
            "reply.publish_failed",
            ctx,
            level=logging.ERROR,
            reply_to=subject,
            error=str(exc),
            error_code=classify_exception(exc).value,
            size=len(body),
        )
        return False
    return True


__all__ = ["deliver_reply"]
