"""Tests for exception classification into ErrorCode values."""

from __future__ import annotations

import asyncio
import json

import pytest

from micro_control.base.errors import EndpointError, ErrorCode, TransportError, classify_exception


@pytest.mark.parametrize(
    "exc,expected",
    [
        (EndpointError(ErrorCode.CONFLICT, "dup"), ErrorCode.CONFLICT),
        (TransportError("closed", subject="r"), ErrorCode.TRANSPORT),
        (TimeoutError(), ErrorCode.TIMEOUT),
        (asyncio.TimeoutError(), ErrorCode.TIMEOUT),
        (json.JSONDecodeError("bad", "x", 0), ErrorCode.VALIDATION),
        (NotImplementedError(), ErrorCode.UNSUPPORTED),
        (KeyError("k"), ErrorCode.NOT_FOUND),
        (IndexError("i"), ErrorCode.NOT_FOUND),
        (ConnectionRefusedError(), ErrorCode.UNAVAILABLE),
        (ValueError("v"), ErrorCode.VALIDATION),
        (TypeError("t"), ErrorCode.VALIDATION),
        (ZeroDivisionError(), ErrorCode.VALIDATION),
        (RuntimeError("operation timed out"), ErrorCode.TIMEOUT),
        (RuntimeError("record already exists"), ErrorCode.CONFLICT),
        (RuntimeError("malformed frame"), ErrorCode.VALIDATION),
        (RuntimeError("???"), ErrorCode.UNKNOWN),
    ],
)
def test_classify_exception(exc, expected):
    assert classify_exception(exc) is expected  # nosec B101


def test_error_strings():
    err = EndpointError(ErrorCode.VALIDATION, "bad operand", endpoint="add")
    assert str(err) == "bad operand"  # nosec B101
    assert str(TransportError("closed", subject="_INBOX.1")) == "_INBOX.1: closed"  # nosec B101
    assert str(TransportError("closed")) == "-: closed"  # nosec B101


def test_error_codes_are_stable_strings():
    assert [c.value for c in ErrorCode] == [  # nosec B101
        "validation",
        "not_found",
        "timeout",
        "unsupported",
        "conflict",
        "unavailable",
        "transport",
        "internal",
        "unknown",
    ]
