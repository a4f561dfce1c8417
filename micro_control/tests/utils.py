"""Shared testing utilities.

Exports:
    - assert_true(condition: bool, message: str) -> None
    - decode(payload: bytes) -> dict
    - STARTED / STARTED_ISO: fixed service start time used by fixtures
"""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict

STARTED = datetime(2023, 9, 18, 19, 1, 45, 470464, tzinfo=timezone.utc)
STARTED_ISO = "2023-09-18T19:01:45.470464Z"


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False.

    Parameters
    ----------
    condition: bool
        Boolean expression under test.
    message: str
        Contextual diagnostic message to display on failure.
    """
    if not condition:
        raise AssertionError(message)


def decode(payload: bytes) -> Dict[str, Any]:
    """Parse a JSON reply body."""
    return json.loads(payload.decode("utf-8"))
