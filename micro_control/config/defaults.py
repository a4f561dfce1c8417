"""micro_control.config.defaults
=============================

Central place for small, stable default values used across the package.
These defaults can be overridden via a config file, environment variables or
in-code overrides (see :func:`micro_control.config.get_service_config`).

Only plain constants live here; this module imports nothing from the package.
"""

from __future__ import annotations

# ---- Service identity ----
SERVICE_DEFAULT_NAME = "calculator"
SERVICE_DEFAULT_ID = "adfa8cb7-0821-4e63-9dbd-92a27c30f083"
SERVICE_DEFAULT_VERSION = "0.1.0"
SERVICE_DEFAULT_DESCRIPTION = "Calculator Service"
# Queue group shared by all calculator endpoints.
SERVICE_DEFAULT_QUEUE_GROUP = "q"

# ---- Protocol ----
# First subject token of the discovery namespace.
CONTROL_DEFAULT_PREFIX = "$CTL"
# Prepended to reply document types; "io.nats.micro.v1." for NATS micro parity.
RESPONSE_TYPE_DEFAULT_PREFIX = ""

# ---- Transport ----
NATS_DEFAULT_URL = "nats://127.0.0.1:4222"
# Worker threads used to run handlers for messages delivered by NATS.
NATS_DEFAULT_WORKERS = 8

# ---- HTTP surface ----
HTTP_DEFAULT_HOST = "127.0.0.1"
HTTP_DEFAULT_PORT = 8092


__all__ = [
    "SERVICE_DEFAULT_NAME",
    "SERVICE_DEFAULT_ID",
    "SERVICE_DEFAULT_VERSION",
    "SERVICE_DEFAULT_DESCRIPTION",
    "SERVICE_DEFAULT_QUEUE_GROUP",
    "CONTROL_DEFAULT_PREFIX",
    "RESPONSE_TYPE_DEFAULT_PREFIX",
    "NATS_DEFAULT_URL",
    "NATS_DEFAULT_WORKERS",
    "HTTP_DEFAULT_HOST",
    "HTTP_DEFAULT_PORT",
]
