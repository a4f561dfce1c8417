"""HTTP mirror of the discovery verbs and endpoint invocation.

Routes
------
- ``GET  /api/ping``                -> PING document
- ``GET  /api/info``                -> INFO document
- ``GET  /api/stats``               -> STATS document
- ``POST /api/endpoints/{subject}`` -> invoke the endpoint owning ``subject``

The documents are byte-for-byte the payloads the responder publishes on the
transport. Invocations go through the same router, so they are counted in
STATS exactly like transport traffic.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool

from ..base.dispatch import MicroService
from ..base.transport import InMemoryTransport
from ..calculator import build_calculator_service


def _decode_payload(payload: bytes) -> Any:
    if not payload:
        return None
    text = payload.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


def create_app(service: Optional[MicroService] = None) -> FastAPI:
    """Build the FastAPI app for ``service`` (defaults to the calculator)."""
    if service is None:
        service = build_calculator_service(InMemoryTransport())
    ident = service.identity
    app = FastAPI(title=f"{ident.name} control plane", version=ident.version)
    app.state.service = service

    def _json(payload: bytes) -> Response:
        return Response(content=payload, media_type="application/json")

    @app.get("/api/ping")
    def ping() -> Response:
        return _json(service.responder.ping_payload())

    @app.get("/api/info")
    def info() -> Response:
        return _json(service.responder.info_payload())

    @app.get("/api/stats")
    def stats() -> Response:
        return _json(service.responder.stats_payload())

    @app.post("/api/endpoints/{subject}")
    async def invoke(subject: str, request: Request) -> Dict[str, Any]:
        if service.router.lookup(subject) is None:
            raise HTTPException(status_code=404, detail=f"no endpoint for subject '{subject}'")
        body = await request.body()
        outcome = await run_in_threadpool(service.invoke, subject, body)
        if outcome is None:  # pragma: no cover - lookup above guarantees a match
            raise HTTPException(status_code=404, detail=f"no endpoint for subject '{subject}'")
        if outcome.succeeded:
            return {"ok": True, "endpoint": outcome.endpoint, "result": _decode_payload(outcome.payload)}
        return {
            "ok": False,
            "endpoint": outcome.endpoint,
            "code": outcome.error_code.value if outcome.error_code else None,
            "error": outcome.error,
        }

    return app


app = create_app()


__all__ = ["app", "create_app"]
