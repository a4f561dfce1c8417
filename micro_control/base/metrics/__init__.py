"""Endpoint metrics package.

Exports the concurrency-safe stats registry.
"""

from .registry import StatsRegistry

__all__ = ["StatsRegistry"]
