"""In-process transport that records published messages.

Used by the HTTP surface, the CLI ``describe`` command and the test suite in
place of a live broker. Thread-safe: replies may be published concurrently by
several in-flight handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Iterable, List, Optional, Set

from ..errors import TransportError


@dataclass(frozen=True)
class PublishedMessage:
    """One recorded publish call."""

    subject: str
    body: bytes


class InMemoryTransport:
    """A :class:`ReplyPublisher` that stores messages instead of sending them.

    Args:
        fail_subjects: Destinations for which ``publish`` raises
            :class:`TransportError`, to simulate undeliverable replies.
    """

    def __init__(self, fail_subjects: Optional[Iterable[str]] = None) -> None:
        self._lock = Lock()
        self._messages: List[PublishedMessage] = []
        self._fail_subjects: Set[str] = set(fail_subjects or ())

    def publish(self, subject: str, body: bytes) -> None:
        if subject in self._fail_subjects:
            raise TransportError(message="destination unreachable", subject=subject)
        with self._lock:
            self._messages.append(PublishedMessage(subject=subject, body=bytes(body)))

    @property
    def messages(self) -> List[PublishedMessage]:
        with self._lock:
            return list(self._messages)

    def messages_for(self, subject: str) -> List[PublishedMessage]:
        """Return messages published to ``subject`` in publish order."""
        with self._lock:
            return [m for m in self._messages if m.subject == subject]

    def pop(self, subject: str) -> Optional[PublishedMessage]:
        """Remove and return the oldest message for ``subject``."""
        with self._lock:
            for i, m in enumerate(self._messages):
                if m.subject == subject:
                    return self._messages.pop(i)
        return None

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()


__all__ = ["InMemoryTransport", "PublishedMessage"]
