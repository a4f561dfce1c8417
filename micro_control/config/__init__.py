"""Unified configuration layer for the service.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional external config file (JSON or YAML) pointed to by ``MICRO_CONFIG_FILE``
    3. Environment variables (``MICRO_SERVICE_NAME``, ``MICRO_CONTROL_PREFIX``, ...)
    4. In-code overrides passed to :func:`get_service_config`

External config file example (YAML)::

    name: calculator
    id: 5f0c6f0e-9c55-4c1a-8a43-1f4d2d0b1c3a
    metadata:
      region: eu-west-1
    control_prefix: $SRV
    type_prefix: io.nats.micro.v1.

Public API
----------
* get_service_config(overrides: dict | None = None) -> dict
* build_identity(cfg: dict | None = None) -> ServiceIdentity
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from ..base.models import ServiceIdentity
from .defaults import (
    SERVICE_DEFAULT_NAME,
    SERVICE_DEFAULT_ID,
    SERVICE_DEFAULT_VERSION,
    SERVICE_DEFAULT_DESCRIPTION,
    SERVICE_DEFAULT_QUEUE_GROUP,
    CONTROL_DEFAULT_PREFIX,
    RESPONSE_TYPE_DEFAULT_PREFIX,
    NATS_DEFAULT_URL,
    NATS_DEFAULT_WORKERS,
)


DEFAULTS: Dict[str, Any] = {
    "name": SERVICE_DEFAULT_NAME,
    "id": SERVICE_DEFAULT_ID,
    "version": SERVICE_DEFAULT_VERSION,
    "description": SERVICE_DEFAULT_DESCRIPTION,
    "metadata": {},
    "queue_group": SERVICE_DEFAULT_QUEUE_GROUP,
    "control_prefix": CONTROL_DEFAULT_PREFIX,
    "type_prefix": RESPONSE_TYPE_DEFAULT_PREFIX,
    "nats_url": NATS_DEFAULT_URL,
    "nats_workers": NATS_DEFAULT_WORKERS,
}


ENV_FIELD_MAP = {
    "name": "MICRO_SERVICE_NAME",
    "id": "MICRO_SERVICE_ID",
    "version": "MICRO_SERVICE_VERSION",
    "description": "MICRO_SERVICE_DESCRIPTION",
    "queue_group": "MICRO_QUEUE_GROUP",
    "control_prefix": "MICRO_CONTROL_PREFIX",
    "type_prefix": "MICRO_TYPE_PREFIX",
    "nats_url": "MICRO_NATS_URL",
    "nats_workers": "MICRO_NATS_WORKERS",
}

_INT_FIELDS = frozenset({"nats_workers"})

_FILE_CACHE: Optional[Dict[str, Any]] = None


def reset_config_cache() -> None:
    """Forget the parsed config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("MICRO_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping, got {type(data).__name__}")
    _FILE_CACHE = data
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, env_name in ENV_FIELD_MAP.items():
        val = os.getenv(env_name)
        if val is None:
            continue
        out[field] = int(val) if field in _INT_FIELDS else val
    return out


def get_service_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged service configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= {k: v for k, v in _load_external_config().items() if k in DEFAULTS}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    cfg["metadata"] = {str(k): str(v) for k, v in (cfg.get("metadata") or {}).items()}
    return cfg


def build_identity(cfg: Optional[Dict[str, Any]] = None) -> ServiceIdentity:
    """Build the immutable service identity from configuration."""
    cfg = cfg if cfg is not None else get_service_config()
    return ServiceIdentity(
        name=str(cfg["name"]),
        id=str(cfg["id"]),
        version=str(cfg["version"]),
        metadata=cfg.get("metadata") or {},
        description=str(cfg.get("description") or ""),
    )


__all__ = [
    "get_service_config",
    "build_identity",
    "reset_config_cache",
    "DEFAULTS",
    "ENV_FIELD_MAP",
]
