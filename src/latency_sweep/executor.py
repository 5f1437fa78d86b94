"""Fault-containing executor for timing a single work unit.

Isolated units run on their own thread. The thread's entry point traps every
exception the unit raises and turns it into an ExecutionOutcome, which it hands
back through a single-slot queue. The caller blocks on that queue and nothing
else, so a unit that blows its recursion limit degrades to a failed outcome
instead of taking the sweep down with it.

Units run with ``isolate=False`` execute on the caller's thread and their
exceptions propagate unchanged.
"""

import logging
import queue
import threading
from typing import Optional

from .metrics import now_ns, time_execution
from .results import ExecutionOutcome
from .strategy import WorkUnit

logger = logging.getLogger(__name__)

STACK_EXHAUSTED = "stack-exhausted"
MEMORY_EXHAUSTED = "memory-exhausted"
EXECUTION_FAULT = "execution-fault"
TIMED_OUT = "timed-out"


def classify_fault(exc: BaseException) -> str:
    """Map a trapped exception to its failure reason token."""
    if isinstance(exc, RecursionError):
        return STACK_EXHAUSTED
    if isinstance(exc, MemoryError):
        return MEMORY_EXHAUSTED
    return EXECUTION_FAULT


def describe_fault(exc: BaseException) -> str:
    message = str(exc)
    if message:
        return f"{type(exc).__name__}: {message}"
    return type(exc).__name__


class IsolatedExecutor:
    """Runs work units and reports exactly one outcome per call."""

    def __init__(self, timeout_s: Optional[float] = None):
        """Initialize executor.

        Args:
            timeout_s: Optional bound on how long to wait for an isolated unit.
                None waits indefinitely; a unit that never returns then blocks
                the caller forever.
        """
        if timeout_s is not None and timeout_s <= 0:
            raise ValueError("timeout_s must be positive")
        self.timeout_s = timeout_s
        self._invocations = 0

    def run(self, unit: WorkUnit, isolate: bool) -> ExecutionOutcome:
        """Run a unit and time it.

        Args:
            unit: Zero-argument callable to measure
            isolate: Run on a separate thread and contain any fault

        Returns:
            ExecutionOutcome with the elapsed time or the failure reason
        """
        if isolate:
            return self._run_isolated(unit)
        return self._run_direct(unit)

    def _run_direct(self, unit: WorkUnit) -> ExecutionOutcome:
        with time_execution() as timing:
            unit()
        return ExecutionOutcome.completed(timing["elapsed_ns"])

    def _run_isolated(self, unit: WorkUnit) -> ExecutionOutcome:
        self._invocations += 1
        handoff: queue.Queue = queue.Queue(maxsize=1)
        start = now_ns()

        def entry() -> None:
            try:
                unit()
                outcome = ExecutionOutcome.completed(now_ns() - start)
            except BaseException as e:
                outcome = ExecutionOutcome.fault(classify_fault(e), describe_fault(e))
            handoff.put(outcome)

        worker = threading.Thread(
            target=entry,
            name=f"isolated-unit-{self._invocations}",
            daemon=True,
        )
        worker.start()

        try:
            outcome = handoff.get(timeout=self.timeout_s)
        except queue.Empty:
            logger.warning(
                "Isolated unit on %s did not finish within %.3fs; abandoning it",
                worker.name,
                self.timeout_s,
            )
            return ExecutionOutcome.fault(
                TIMED_OUT, f"no outcome after {self.timeout_s}s"
            )

        worker.join()
        if outcome.failed:
            logger.debug("Contained fault on %s: %s", worker.name, outcome.failure_detail)
        return outcome
