"""Tests for the isolated executor."""

import logging
import threading
import time

import pytest

from latency_sweep import (
    EXECUTION_FAULT,
    MEMORY_EXHAUSTED,
    STACK_EXHAUSTED,
    TIMED_OUT,
    IsolatedExecutor,
)
from latency_sweep.executor import classify_fault, describe_fault
from latency_sweep.workloads import count_capitals_iterative


def _recurse_forever(depth=0):
    return _recurse_forever(depth + 1)


@pytest.mark.parametrize("size", [0, 1, 10, 1000])
def test_isolated_bounded_unit_completes(size):
    text = "aB" * size
    outcome = IsolatedExecutor().run(lambda: count_capitals_iterative(text), isolate=True)

    assert outcome.failed is False
    assert outcome.elapsed_ns >= 0
    assert outcome.failure_reason is None


def test_isolated_unbounded_recursion_is_contained():
    started = time.monotonic()
    outcome = IsolatedExecutor().run(_recurse_forever, isolate=True)
    waited = time.monotonic() - started

    assert outcome.failed is True
    assert outcome.failure_reason == STACK_EXHAUSTED
    assert outcome.elapsed_ns is None
    assert "RecursionError" in outcome.failure_detail
    assert waited < 30.0


def test_isolated_generic_exception_is_contained():
    def unit():
        raise ValueError("bad input")

    outcome = IsolatedExecutor().run(unit, isolate=True)

    assert outcome.failed is True
    assert outcome.failure_reason == EXECUTION_FAULT
    assert outcome.failure_detail == "ValueError: bad input"


def test_isolated_memory_error_is_contained():
    def unit():
        raise MemoryError()

    outcome = IsolatedExecutor().run(unit, isolate=True)

    assert outcome.failed is True
    assert outcome.failure_reason == MEMORY_EXHAUSTED
    assert outcome.failure_detail == "MemoryError"


def test_isolated_system_exit_does_not_escape():
    def unit():
        raise SystemExit(3)

    outcome = IsolatedExecutor().run(unit, isolate=True)

    assert outcome.failed is True
    assert outcome.failure_reason == EXECUTION_FAULT
    assert outcome.failure_detail == "SystemExit: 3"


def test_isolated_unit_runs_on_another_thread():
    seen = []
    IsolatedExecutor().run(lambda: seen.append(threading.current_thread()), isolate=True)

    assert seen and seen[0] is not threading.current_thread()


def test_isolated_elapsed_covers_unit_duration():
    outcome = IsolatedExecutor().run(lambda: time.sleep(0.01), isolate=True)

    assert outcome.failed is False
    assert outcome.elapsed_ms >= 10.0


def test_fault_does_not_affect_following_runs():
    executor = IsolatedExecutor()
    first = executor.run(_recurse_forever, isolate=True)
    second = executor.run(lambda: sum(range(100)), isolate=True)
    third = executor.run(lambda: sum(range(100)), isolate=False)

    assert first.failed is True
    assert second.failed is False
    assert third.failed is False


def test_direct_run_is_repeatable():
    executor = IsolatedExecutor()
    text = "Hello World" * 50

    outcomes = [executor.run(lambda: count_capitals_iterative(text), isolate=False) for _ in range(2)]

    assert all(o.failed is False for o in outcomes)
    assert all(o.elapsed_ns >= 0 for o in outcomes)


def test_direct_run_runs_on_calling_thread():
    seen = []
    IsolatedExecutor().run(lambda: seen.append(threading.current_thread()), isolate=False)

    assert seen == [threading.current_thread()]


def test_direct_fault_propagates():
    def unit():
        raise ZeroDivisionError("division by zero")

    with pytest.raises(ZeroDivisionError, match="division by zero"):
        IsolatedExecutor().run(unit, isolate=False)


def test_timeout_reports_hung_unit(caplog):
    release = threading.Event()
    executor = IsolatedExecutor(timeout_s=0.05)
    caplog.set_level(logging.WARNING, logger="latency_sweep.executor")

    try:
        outcome = executor.run(release.wait, isolate=True)
    finally:
        release.set()

    assert outcome.failed is True
    assert outcome.failure_reason == TIMED_OUT
    assert "did not finish" in caplog.text


def test_timeout_does_not_affect_fast_units():
    outcome = IsolatedExecutor(timeout_s=5.0).run(lambda: None, isolate=True)

    assert outcome.failed is False


def test_timeout_must_be_positive():
    with pytest.raises(ValueError, match="timeout_s must be positive"):
        IsolatedExecutor(timeout_s=0)


def test_classify_fault():
    assert classify_fault(RecursionError()) == STACK_EXHAUSTED
    assert classify_fault(MemoryError()) == MEMORY_EXHAUSTED
    assert classify_fault(KeyError("x")) == EXECUTION_FAULT


def test_describe_fault():
    assert describe_fault(RuntimeError("boom")) == "RuntimeError: boom"
    assert describe_fault(RuntimeError()) == "RuntimeError"
