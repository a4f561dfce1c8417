"""Thread-safe in-memory statistics for business endpoints.

One registry per service. It owns an :class:`EndpointCounters` per registered
endpoint and exposes only two mutating/reading operations, both taken under
a single registry-wide lock:

* :meth:`StatsRegistry.record_invocation` applies one outcome atomically, so
  ``num_requests`` and ``num_errors`` always move together.
* :meth:`StatsRegistry.snapshot` copies every endpoint under the same lock,
  so a snapshot never observes a half-applied invocation.
"""

from __future__ import annotations

from dataclasses import replace
from threading import RLock
from typing import Any, Dict, Iterable, List, Optional, Tuple
import time

from ...models import EndpointDescriptor, EndpointStats
from .endpoint_counters import EndpointCounters


class StatsRegistry:
    """Per-endpoint invocation counters keyed by endpoint name.

    Endpoint order is registration order and is preserved by snapshots. The
    endpoint set is fixed at construction.
    """

    __slots__ = ("_lock", "_counters", "_order")

    def __init__(self, endpoints: Iterable[EndpointDescriptor]):
        """Initialize counters for each endpoint.

        Args:
            endpoints: Endpoint descriptors in registration order.

        Raises:
            ValueError: When two endpoints share a name or a subject.
        """
        self._lock = RLock()
        self._counters: Dict[str, EndpointCounters] = {}
        self._order: List[str] = []
        subjects = set()
        for ep in endpoints:
            if ep.name in self._counters:
                raise ValueError(f"duplicate endpoint name: {ep.name!r}")
            if ep.subject in subjects:
                raise ValueError(f"duplicate endpoint subject: {ep.subject!r}")
            subjects.add(ep.subject)
            self._counters[ep.name] = EndpointCounters(ep)
            self._order.append(ep.name)

    # -------------------------- Static Helpers -------------------------- #
    @staticmethod
    def monotonic_ns() -> int:
        """Return current monotonic time in nanoseconds for latency measurement."""
        return time.monotonic_ns()

    # -------------------------- Record Methods -------------------------- #
    def record_invocation(
        self,
        endpoint_name: str,
        succeeded: bool,
        error_message: Optional[str] = None,
        duration_ns: int = 0,
    ) -> None:
        """Record one completed invocation.

        Args:
            endpoint_name: Registered endpoint name.
            succeeded: Outcome of the handler call.
            error_message: Failure description; stored as ``last_error``.
            duration_ns: Handler wall time in nanoseconds.

        Raises:
            KeyError: ``endpoint_name`` is not registered.
            ValueError: ``duration_ns`` is negative.
        """
        if duration_ns < 0:
            raise ValueError(f"duration_ns must be >= 0, got {duration_ns}")
        counters = self._counters.get(endpoint_name)
        if counters is None:
            raise KeyError(f"unknown endpoint: {endpoint_name!r}")
        with self._lock:
            counters.apply(succeeded, error_message, int(duration_ns))

    # -------------------------- Snapshot API -------------------------- #
    def snapshot(self) -> Tuple[EndpointStats, ...]:
        """Return an immutable copy of all endpoints' stats in registration order."""
        with self._lock:
            frozen = [self._counters[name].freeze() for name in self._order]
        return tuple(self._with_data(stats) for stats in frozen)

    def endpoint_snapshot(self, endpoint_name: str) -> EndpointStats:
        """Return an immutable copy of one endpoint's stats."""
        counters = self._counters.get(endpoint_name)
        if counters is None:
            raise KeyError(f"unknown endpoint: {endpoint_name!r}")
        with self._lock:
            frozen = counters.freeze()
        return self._with_data(frozen)

    def _with_data(self, stats: EndpointStats) -> EndpointStats:
        # stats handlers are user code; call them outside the lock
        handler = self._counters[stats.name].descriptor.stats_handler
        if handler is None:
            return stats
        data: Any = handler()
        if data is None:
            return stats
        return replace(stats, data=data)

    # -------------------------- Introspection -------------------------- #
    @property
    def endpoint_names(self) -> Tuple[str, ...]:
        return tuple(self._order)

    def __contains__(self, endpoint_name: object) -> bool:
        return endpoint_name in self._counters

    def __len__(self) -> int:
        return len(self._order)


__all__ = ["StatsRegistry"]
