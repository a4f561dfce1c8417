"""
Transport publish failure exception type.

Reply publishers raise `TransportError` when a reply could not be handed to
the transport. Callers log it and move on; replies are never retried.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class TransportError(Exception):
    """A reply could not be published.

    Attributes:
        message: Human-readable description of the failure.
        subject: Destination subject the publish targeted.
        raw: Optional underlying client exception.
    """

    message: str
    subject: Optional[str] = None
    raw: Optional[Exception] = None

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.TRANSPORT

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.subject or '-'}: {self.message}"


__all__ = ["TransportError"]
