"""Wire DTOs for replies published by the responder."""

from .discovery import (
    PingResponse,
    EndpointInfoDTO,
    InfoResponse,
    EndpointStatsDTO,
    StatsResponse,
)
from .error_reply import ErrorResponse

__all__ = [
    "PingResponse",
    "EndpointInfoDTO",
    "InfoResponse",
    "EndpointStatsDTO",
    "StatsResponse",
    "ErrorResponse",
]
