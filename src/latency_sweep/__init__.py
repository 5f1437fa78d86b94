"""Fault-tolerant latency sweeps for comparing candidate implementations."""

from .config import SweepConfig
from .executor import (
    EXECUTION_FAULT,
    MEMORY_EXHAUSTED,
    STACK_EXHAUSTED,
    TIMED_OUT,
    IsolatedExecutor,
)
from .metrics import time_execution
from .report import format_table, write_table
from .results import (
    ExecutionOutcome,
    ResultTable,
    SweepPoint,
    export_to_csv,
    plot_series,
    print_summary,
    tabular_series,
)
from .runner import SweepRunner, run_sweep
from .strategy import SweepStrategy, WorkUnit

__all__ = [
    "EXECUTION_FAULT",
    "MEMORY_EXHAUSTED",
    "STACK_EXHAUSTED",
    "TIMED_OUT",
    "ExecutionOutcome",
    "IsolatedExecutor",
    "ResultTable",
    "SweepConfig",
    "SweepPoint",
    "SweepRunner",
    "SweepStrategy",
    "WorkUnit",
    "export_to_csv",
    "format_table",
    "plot_series",
    "print_summary",
    "run_sweep",
    "tabular_series",
    "time_execution",
    "write_table",
]

__version__ = "0.1.0"
