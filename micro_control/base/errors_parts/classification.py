"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Business handlers are free to raise plain Python exceptions. The router uses
:func:`classify_exception` to give every failure a stable code for the error
reply, falling back to message heuristics and finally ``UNKNOWN``.
"""
from __future__ import annotations

import asyncio
import json
from typing import Optional, Tuple, Type

from .error_code import ErrorCode
from .endpoint_error import EndpointError
from .transport_error import TransportError


# Order matters: subclasses before their bases (JSONDecodeError is a ValueError).
_TYPE_MAP: Tuple[Tuple[Tuple[Type[BaseException], ...], ErrorCode], ...] = (
    ((json.JSONDecodeError, UnicodeDecodeError), ErrorCode.VALIDATION),
    ((NotImplementedError,), ErrorCode.UNSUPPORTED),
    ((KeyError, LookupError), ErrorCode.NOT_FOUND),
    ((ConnectionError,), ErrorCode.UNAVAILABLE),
    ((ValueError, TypeError, ArithmeticError), ErrorCode.VALIDATION),
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for exceptions without a known type."""
    PATTERN_GROUPS = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
        (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
        (ErrorCode.CONFLICT, ("conflict", "already exists")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "temporarily down")),
        (ErrorCode.VALIDATION, ("validation", "invalid", "malformed")),
    )
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. EndpointError / TransportError passthrough.
        2. Timeout exceptions (sync/async).
        3. Exception type mapping.
        4. Substring heuristics on the message.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, (EndpointError, TransportError)):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    for types, code in _TYPE_MAP:
        if isinstance(exc, types):
            return code
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = ["classify_exception"]
