"""Wire documents for discovery replies (PING / INFO / STATS).

Pydantic models give the replies a fixed field order and a single JSON
encoding path, so identical service state always yields byte-identical PING
and INFO payloads.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_bytes(self) -> bytes:
        """Encode as compact UTF-8 JSON."""
        return self.model_dump_json().encode("utf-8")


class PingResponse(_WireModel):
    """Reply to ``PING``."""

    type: str
    name: str
    id: str
    version: str
    metadata: Dict[str, str] = Field(default_factory=dict)


class EndpointInfoDTO(_WireModel):
    """One endpoint entry of an ``INFO`` reply."""

    name: str
    subject: str
    queue_group: str
    metadata: Dict[str, str] = Field(default_factory=dict)


class InfoResponse(_WireModel):
    """Reply to ``INFO``."""

    type: str
    name: str
    id: str
    version: str
    metadata: Dict[str, str] = Field(default_factory=dict)
    description: str = ""
    endpoints: List[EndpointInfoDTO] = Field(default_factory=list)


class EndpointStatsDTO(_WireModel):
    """One endpoint entry of a ``STATS`` reply (``data`` omitted when unset)."""

    name: str
    subject: str
    queue_group: str
    num_requests: int = Field(ge=0)
    num_errors: int = Field(ge=0)
    last_error: Optional[str] = None
    data: Optional[Any] = None
    processing_time: int = Field(ge=0)
    average_processing_time: float = Field(ge=0)

    @model_serializer(mode="wrap")
    def _omit_missing_data(self, handler):
        out = handler(self)
        if out.get("data") is None:
            out.pop("data", None)
        return out


class StatsResponse(_WireModel):
    """Reply to ``STATS``."""

    type: str
    name: str
    id: str
    version: str
    metadata: Dict[str, str] = Field(default_factory=dict)
    endpoints: List[EndpointStatsDTO] = Field(default_factory=list)
    started: str


__all__ = [
    "PingResponse",
    "EndpointInfoDTO",
    "InfoResponse",
    "EndpointStatsDTO",
    "StatsResponse",
]
