"""Business endpoint routing."""

from .business_router import BusinessRouter, encode_result, ERROR_RESPONSE_TYPE

__all__ = ["BusinessRouter", "encode_result", "ERROR_RESPONSE_TYPE"]
