"""Structured logging context object for the responder.

This module defines :class:`LogContext`, a dataclass carrying the fields
common to most service log events (service name, instance id, endpoint and
subject). ``to_dict`` merges ``extra`` and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for service logging events."""

    service: Optional[str] = None
    instance_id: Optional[str] = None
    endpoint: Optional[str] = None
    subject: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
