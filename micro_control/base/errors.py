"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``micro_control.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.endpoint_error import EndpointError
from .errors_parts.transport_error import TransportError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "EndpointError", "TransportError", "classify_exception"]
