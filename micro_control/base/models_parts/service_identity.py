"""
ServiceIdentity value object.

The immutable identity of one running service instance. It is built once at
process start (normally from configuration) and passed explicitly to the
discovery responder and dispatcher.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ServiceIdentity:
    """Identity advertised by PING, INFO and STATS replies.

    Attributes:
        name: Service name; the second scoping token of control subjects.
        id: Unique instance id; the third scoping token of control subjects.
        version: Service version string.
        metadata: Free-form string metadata, read-only after construction.
        description: Human readable description reported by INFO.
    """

    name: str
    id: str
    version: str
    metadata: Mapping[str, str] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("service name must be non-empty")
        if not self.id:
            raise ValueError("service id must be non-empty")
        if "." in self.name or "." in self.id:
            raise ValueError("service name and id must not contain '.'")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the identity fields."""
        return {
            "name": self.name,
            "id": self.id,
            "version": self.version,
            "metadata": dict(self.metadata),
            "description": self.description,
        }


__all__ = ["ServiceIdentity"]
