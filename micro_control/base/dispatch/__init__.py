"""Inbound message dispatch."""

from .service import MicroService, DEFAULT_CONTROL_PREFIX

__all__ = ["MicroService", "DEFAULT_CONTROL_PREFIX"]
