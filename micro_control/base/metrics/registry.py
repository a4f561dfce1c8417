"""Endpoint statistics registry.

Re-exports one-class-per-file implementations from ``metrics/registry_parts``
to keep a single import surface.
"""

from .registry_parts import StatsRegistry

__all__ = ["StatsRegistry"]
