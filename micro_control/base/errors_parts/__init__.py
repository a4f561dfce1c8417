"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `micro_control.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .endpoint_error import EndpointError
from .transport_error import TransportError
from .classification import classify_exception

__all__ = ["ErrorCode", "EndpointError", "TransportError", "classify_exception"]
