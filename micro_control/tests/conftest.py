"""Pytest configuration for the micro_control test suite.

Every test starts from built-in defaults: ``MICRO_*`` environment variables
are cleared and the config file cache is reset. ``log_records`` captures
records emitted on the shared ``micro`` logger, which does not propagate to
the root logger (so ``caplog`` cannot see it).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List

import pytest

from micro_control.base.logging import get_logger
from micro_control.base.transport import InMemoryTransport
from micro_control.calculator import build_calculator_service
from micro_control.config import ENV_FIELD_MAP, get_service_config, reset_config_cache
from micro_control.tests.utils import STARTED


@pytest.fixture(autouse=True)
def clean_micro_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (*ENV_FIELD_MAP.values(), "MICRO_CONFIG_FILE", "MICRO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class LogCapture:
    """Structured view over captured ``micro`` log records."""

    def __init__(self, handler: _ListHandler) -> None:
        self._handler = handler

    def events(self, name: str | None = None) -> List[Dict[str, Any]]:
        out = []
        for rec in self._handler.records:
            try:
                payload = json.loads(rec.getMessage())
            except ValueError:
                continue
            if isinstance(payload, dict) and (name is None or payload.get("event") == name):
                payload["_level"] = rec.levelname
                out.append(payload)
        return out


@pytest.fixture()
def log_records() -> Iterator[LogCapture]:
    base = get_logger()
    previous = base.level
    base.setLevel(logging.DEBUG)
    handler = _ListHandler()
    base.addHandler(handler)
    try:
        yield LogCapture(handler)
    finally:
        base.removeHandler(handler)
        base.setLevel(previous)


@pytest.fixture()
def transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture()
def calculator(transport: InMemoryTransport):
    """The calculator service with default config and a fixed start time."""
    return build_calculator_service(transport, get_service_config(), started=STARTED)
