"""micro_control package

Control-plane responder for services on a publish/subscribe transport.

Purpose:
    Answer PING / INFO / STATS discovery requests under a reserved control
    namespace and route business subjects to their endpoints while keeping
    per-endpoint invocation statistics.

Public API (re-exported):
    - Version: ``__version__``
    - Service: :class:`MicroService`, :func:`build_calculator_service`
    - Models: :class:`ServiceIdentity`, :class:`EndpointDescriptor`,
      :class:`InboundMessage`
    - Exceptions: :class:`EndpointError`, :class:`TransportError`, :class:`ErrorCode`
    - Transport: :class:`ReplyPublisher`, :class:`InMemoryTransport`
"""

from .base.errors import EndpointError, ErrorCode, TransportError
from .base.models import EndpointDescriptor, InboundMessage, ServiceIdentity
from .base.dispatch import MicroService
from .base.transport import InMemoryTransport, ReplyPublisher
from .calculator import build_calculator_service

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "EndpointError",
    "ErrorCode",
    "TransportError",
    "EndpointDescriptor",
    "InboundMessage",
    "ServiceIdentity",
    "MicroService",
    "InMemoryTransport",
    "ReplyPublisher",
    "build_calculator_service",
]
