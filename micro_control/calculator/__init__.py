"""The ``calculator`` sample service.

``build_calculator_service`` assembles a :class:`MicroService` from the
merged configuration and the calculator endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from ..base.dispatch import MicroService
from ..base.transport import ReplyPublisher
from ..config import build_identity, get_service_config
from .endpoints import calculator_endpoints, parse_operands


def build_calculator_service(
    publisher: ReplyPublisher,
    cfg: Optional[Dict[str, Any]] = None,
    *,
    started: Optional[datetime] = None,
) -> MicroService:
    """Create the calculator service bound to ``publisher``."""
    cfg = cfg if cfg is not None else get_service_config()
    return MicroService(
        build_identity(cfg),
        calculator_endpoints(cfg["queue_group"]),
        publisher,
        control_prefix=cfg["control_prefix"],
        type_prefix=cfg["type_prefix"],
        started=started,
    )


__all__ = ["build_calculator_service", "calculator_endpoints", "parse_operands"]
