"""Focused tests for StatsRegistry behavior.

Covers counters, average computation, last_error semantics, argument
validation, registration order and consistency under concurrent updates.
"""
from __future__ import annotations

import threading

import pytest

from micro_control.base.metrics import StatsRegistry
from micro_control.base.models import EndpointDescriptor


def _endpoints(*names: str):
    return [EndpointDescriptor(name=n, subject=n, queue_group="q") for n in names]


def test_fresh_registry_reports_zeroes_in_registration_order():
    reg = StatsRegistry(_endpoints("add", "subtract", "multiply"))
    snap = reg.snapshot()
    assert [s.name for s in snap] == ["add", "subtract", "multiply"]  # nosec B101
    for s in snap:
        assert s.num_requests == 0 and s.num_errors == 0  # nosec B101
        assert s.processing_time == 0 and s.average_processing_time == 0  # nosec B101
        assert s.last_error is None and s.data is None  # nosec B101


def test_record_invocation_updates_counts_and_average():
    reg = StatsRegistry(_endpoints("add"))
    reg.record_invocation("add", True, duration_ns=100)
    reg.record_invocation("add", False, "boom", duration_ns=200)
    reg.record_invocation("add", True, duration_ns=301)

    s = reg.endpoint_snapshot("add")
    assert s.num_requests == 3 and s.num_errors == 1  # nosec B101
    assert s.processing_time == 601  # nosec B101
    assert s.average_processing_time == 601 / 3  # nosec B101
    assert s.last_error == "boom"  # nosec B101


def test_average_matches_total_after_every_update():
    reg = StatsRegistry(_endpoints("add"))
    for i, d in enumerate([7, 0, 13, 1_000_000_007, 5], start=1):
        reg.record_invocation("add", i % 2 == 0, "e" if i % 2 else None, duration_ns=d)
        s = reg.endpoint_snapshot("add")
        assert s.num_requests == i  # nosec B101
        assert s.average_processing_time == s.processing_time / s.num_requests  # nosec B101


def test_last_error_is_overwritten_never_cleared():
    reg = StatsRegistry(_endpoints("add"))
    reg.record_invocation("add", False, "first", duration_ns=1)
    reg.record_invocation("add", False, "second", duration_ns=1)
    reg.record_invocation("add", True, duration_ns=1)
    assert reg.endpoint_snapshot("add").last_error == "second"  # nosec B101


def test_failure_without_message_still_sets_last_error():
    reg = StatsRegistry(_endpoints("add"))
    reg.record_invocation("add", False, None, duration_ns=1)
    assert reg.endpoint_snapshot("add").last_error == "unknown error"  # nosec B101


def test_invalid_arguments_do_not_mutate():
    reg = StatsRegistry(_endpoints("add"))
    with pytest.raises(KeyError):
        reg.record_invocation("divide", True, duration_ns=1)
    with pytest.raises(ValueError):
        reg.record_invocation("add", True, duration_ns=-1)
    assert reg.endpoint_snapshot("add").num_requests == 0  # nosec B101


def test_duplicate_endpoints_are_rejected():
    with pytest.raises(ValueError):
        StatsRegistry(_endpoints("add", "add"))
    with pytest.raises(ValueError):
        StatsRegistry(
            [
                EndpointDescriptor(name="a", subject="same", queue_group="q"),
                EndpointDescriptor(name="b", subject="same", queue_group="q"),
            ]
        )


def test_stats_handler_data_is_reported():
    ep = EndpointDescriptor(name="add", subject="add", queue_group="q", stats_handler=lambda: {"cache": 3})
    reg = StatsRegistry([ep])
    s = reg.snapshot()[0]
    assert s.data == {"cache": 3}  # nosec B101
    assert s.to_dict()["data"] == {"cache": 3}  # nosec B101
    assert "data" not in StatsRegistry(_endpoints("x")).snapshot()[0].to_dict()  # nosec B101


def test_snapshot_is_a_detached_copy():
    reg = StatsRegistry(_endpoints("add"))
    before = reg.snapshot()
    reg.record_invocation("add", True, duration_ns=5)
    assert before[0].num_requests == 0  # nosec B101
    assert reg.snapshot()[0].num_requests == 1  # nosec B101


def test_concurrent_updates_never_expose_half_applied_state():
    reg = StatsRegistry(_endpoints("add", "subtract"))
    writers, per_writer = 8, 400
    done = threading.Event()
    violations = []

    def writer(idx: int) -> None:
        for i in range(per_writer):
            name = "add" if (i + idx) % 2 else "subtract"
            ok = i % 3 != 0
            reg.record_invocation(name, ok, None if ok else f"err-{idx}-{i}", duration_ns=i)

    def reader() -> None:
        while not done.is_set():
            for s in reg.snapshot():
                if s.num_errors > s.num_requests:
                    violations.append(s)
                if s.num_requests and s.average_processing_time != s.processing_time / s.num_requests:
                    violations.append(s)

    threads = [threading.Thread(target=writer, args=(i,)) for i in range(writers)]
    r = threading.Thread(target=reader)
    r.start()
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    done.set()
    r.join()

    assert violations == []  # nosec B101
    snap = reg.snapshot()
    assert sum(s.num_requests for s in snap) == writers * per_writer  # nosec B101
    expected_errors = writers * len([i for i in range(per_writer) if i % 3 == 0])
    assert sum(s.num_errors for s in snap) == expected_errors  # nosec B101


def test_monotonic_ns_is_non_decreasing():
    a = StatsRegistry.monotonic_ns()
    b = StatsRegistry.monotonic_ns()
    assert isinstance(a, int) and b >= a  # nosec B101
