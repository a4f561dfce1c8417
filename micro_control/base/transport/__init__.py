"""Reply transport capability and the in-process implementation."""

from .reply_publisher import ReplyPublisher
from .in_memory import InMemoryTransport, PublishedMessage
from .deliver import deliver_reply

__all__ = ["ReplyPublisher", "InMemoryTransport", "PublishedMessage", "deliver_reply"]
