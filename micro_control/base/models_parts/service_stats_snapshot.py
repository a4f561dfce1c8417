"""
ServiceStatsSnapshot dataclass.

Read-only value combining the service identity with the endpoint statistics
in registration order. Built fresh for every STATS request.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from .endpoint_stats import EndpointStats


@dataclass(frozen=True)
class ServiceStatsSnapshot:
    """Immutable point-in-time view of a service and its endpoint stats."""

    name: str
    id: str
    version: str
    metadata: Mapping[str, str]
    endpoints: Tuple[EndpointStats, ...]
    started: str

    def endpoint(self, name: str) -> EndpointStats:
        """Return the stats entry for ``name`` (``KeyError`` when absent)."""
        for ep in self.endpoints:
            if ep.name == name:
                return ep
        raise KeyError(name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "id": self.id,
            "version": self.version,
            "metadata": dict(self.metadata),
            "endpoints": [ep.to_dict() for ep in self.endpoints],
            "started": self.started,
        }


__all__ = ["ServiceStatsSnapshot"]
