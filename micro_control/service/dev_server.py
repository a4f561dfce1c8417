from __future__ import annotations

import os
import uvicorn

from ..config.defaults import HTTP_DEFAULT_HOST, HTTP_DEFAULT_PORT


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to a sane default."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def main() -> None:
    """Start the development server for the HTTP control-plane mirror.

    - MICRO_HTTP_HOST: interface to bind (default "127.0.0.1")
    - MICRO_HTTP_PORT: port to bind (default 8092)
    - MICRO_HTTP_RELOAD: "true"/"false" to toggle auto-reload (default false)
    """
    host = os.getenv("MICRO_HTTP_HOST", HTTP_DEFAULT_HOST)
    port = _parse_port(os.getenv("MICRO_HTTP_PORT"), HTTP_DEFAULT_PORT)
    reload_enabled = os.getenv("MICRO_HTTP_RELOAD", "false").lower() == "true"

    uvicorn.run(
        "micro_control.service.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
