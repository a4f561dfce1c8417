"""Calculator endpoints: ``add``, ``subtract`` and ``multiply``.

Request body: a JSON array of numbers, e.g. ``[4, 2]``.
Reply body: ``{"result": <number>}``.

Bad input raises :class:`EndpointError` with ``validation`` so the router
records it and answers with an error document.
"""

from __future__ import annotations

import json
import math
from functools import reduce
from typing import Any, Callable, Dict, List, Sequence, Tuple

from ..base.errors import EndpointError, ErrorCode
from ..base.models import EndpointDescriptor
from ..config.defaults import SERVICE_DEFAULT_QUEUE_GROUP


def parse_operands(body: bytes, endpoint: str) -> List[float]:
    """Decode a request body into at least two numeric operands."""
    try:
        data: Any = json.loads(body.decode("utf-8") or "null")
    except ValueError as exc:
        raise EndpointError(ErrorCode.VALIDATION, f"request body is not valid JSON: {exc}", endpoint, exc) from exc
    if not isinstance(data, list) or len(data) < 2:
        raise EndpointError(ErrorCode.VALIDATION, "expected a JSON array of at least two numbers", endpoint)
    operands = []
    for item in data:
        # bool is an int subclass
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise EndpointError(ErrorCode.VALIDATION, f"operand {item!r} is not a number", endpoint)
        operands.append(item)
    return operands


def _make_handler(name: str, fold: Callable[[Sequence[float]], float]) -> Callable[[bytes], Dict[str, float]]:
    def handler(body: bytes) -> Dict[str, float]:
        result = fold(parse_operands(body, name))
        if isinstance(result, float) and not math.isfinite(result):
            raise EndpointError(ErrorCode.VALIDATION, "result is not a finite number", name)
        return {"result": result}

    handler.__name__ = f"{name}_handler"
    return handler


_OPERATIONS: Tuple[Tuple[str, Callable[[Sequence[float]], float]], ...] = (
    ("add", sum),
    ("subtract", lambda xs: reduce(lambda a, b: a - b, xs)),
    ("multiply", lambda xs: reduce(lambda a, b: a * b, xs)),
)


def calculator_endpoints(queue_group: str = SERVICE_DEFAULT_QUEUE_GROUP) -> List[EndpointDescriptor]:
    """Return the calculator endpoint descriptors in registration order."""
    return [
        EndpointDescriptor(
            name=name,
            subject=name,
            queue_group=queue_group,
            handler=_make_handler(name, fold),
        )
        for name, fold in _OPERATIONS
    ]


__all__ = ["calculator_endpoints", "parse_operands"]
