"""Standard error document returned when a business handler fails.

Mirrors the shape of a tool-result envelope: the caller always receives a
normal reply, and ``code``/``error`` describe what went wrong.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error envelope for a failed endpoint invocation.

    Attributes:
        type: Document type discriminator (``error_response`` by default).
        endpoint: Endpoint name that failed.
        code: Normalized error code string.
        error: Human-readable error message.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str
    endpoint: str
    code: str
    error: str

    def to_bytes(self) -> bytes:
        return self.model_dump_json().encode("utf-8")


__all__ = ["ErrorResponse"]
