"""Sweep outcome model, derived views and CSV export."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .metrics import ns_to_ms

FAILED_MARKER = "failed"


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of running one work unit.

    Exactly one of `elapsed_ns` and `failure_reason` is set.

    Attributes:
        elapsed_ns: Wall-clock duration in nanoseconds; None when failed
        failed: True if the unit terminated abnormally
        failure_reason: Stable token describing the fault class; None on success
        failure_detail: Exception type and message of the trapped fault
    """

    elapsed_ns: Optional[int]
    failed: bool
    failure_reason: Optional[str] = None
    failure_detail: Optional[str] = None

    def __post_init__(self):
        if self.failed:
            if not self.failure_reason:
                raise ValueError("failed outcome requires a failure_reason")
            if self.elapsed_ns is not None:
                raise ValueError("failed outcome must not carry elapsed_ns")
        else:
            if self.elapsed_ns is None or self.elapsed_ns < 0:
                raise ValueError("successful outcome requires a non-negative elapsed_ns")
            if self.failure_reason is not None or self.failure_detail is not None:
                raise ValueError("successful outcome must not carry failure information")

    @classmethod
    def completed(cls, elapsed_ns: int) -> ExecutionOutcome:
        return cls(elapsed_ns=elapsed_ns, failed=False)

    @classmethod
    def fault(cls, reason: str, detail: Optional[str] = None) -> ExecutionOutcome:
        return cls(elapsed_ns=None, failed=True, failure_reason=reason, failure_detail=detail)

    @property
    def elapsed_ms(self) -> Optional[float]:
        if self.elapsed_ns is None:
            return None
        return ns_to_ms(self.elapsed_ns)


@dataclass(frozen=True)
class SweepPoint:
    """One (size, strategy) measurement."""

    size: int
    strategy_name: str
    outcome: ExecutionOutcome

    @property
    def failed(self) -> bool:
        return self.outcome.failed


class ResultTable:
    """Ordered, immutable sequence of sweep points in evaluation order."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[SweepPoint] = ()):
        self._points = tuple(points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[SweepPoint]:
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ResultTable):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"ResultTable({len(self._points)} points)"

    @property
    def points(self) -> tuple[SweepPoint, ...]:
        return self._points

    @property
    def sizes(self) -> list[int]:
        """Distinct sizes in sweep order."""
        return list(dict.fromkeys(p.size for p in self._points))

    @property
    def strategy_names(self) -> list[str]:
        """Distinct strategy names in first-seen order."""
        return list(dict.fromkeys(p.strategy_name for p in self._points))

    def points_for(self, strategy_name: str) -> list[SweepPoint]:
        return [p for p in self._points if p.strategy_name == strategy_name]

    @property
    def failures(self) -> list[SweepPoint]:
        return [p for p in self._points if p.failed]


def tabular_series(table: ResultTable) -> dict[str, list[tuple[int, Union[int, str]]]]:
    """Per-strategy (size, elapsed_ns) pairs with failed points marked as "failed"."""
    series: dict[str, list[tuple[int, Union[int, str]]]] = {}
    for name in table.strategy_names:
        series[name] = [
            (p.size, FAILED_MARKER if p.failed else p.outcome.elapsed_ns)
            for p in table.points_for(name)
        ]
    return series


def plot_series(table: ResultTable) -> dict[str, list[tuple[int, int]]]:
    """Per-strategy (size, elapsed_ns) pairs restricted to successful points.

    Failed points are omitted rather than replaced by a numeric sentinel.
    """
    series: dict[str, list[tuple[int, int]]] = {}
    for name in table.strategy_names:
        series[name] = [
            (p.size, p.outcome.elapsed_ns)
            for p in table.points_for(name)
            if not p.failed
        ]
    return series


CSV_FIELDNAMES = [
    "size",
    "strategy",
    "failed",
    "elapsed_ns",
    "elapsed_ms",
    "failure_reason",
    "failure_detail",
]


def export_to_csv(table: ResultTable, csv_path: Union[str, Path]) -> str:
    """Export the result table to a CSV file.

    Returns:
        Path to the created CSV file
    """
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)

    with open(csv_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDNAMES)
        writer.writeheader()
        for point in table:
            outcome = point.outcome
            writer.writerow({
                "size": point.size,
                "strategy": point.strategy_name,
                "failed": outcome.failed,
                "elapsed_ns": "" if outcome.failed else outcome.elapsed_ns,
                "elapsed_ms": "" if outcome.failed else f"{outcome.elapsed_ms:.6f}",
                "failure_reason": outcome.failure_reason or "",
                "failure_detail": outcome.failure_detail or "",
            })

    return str(csv_path)


def print_summary(table: ResultTable) -> None:
    """Print summary of results to console."""
    if not len(table):
        print("No results collected.")
        return

    failed = table.failures
    print("\nSweep Results Summary:")
    print(f"  Total points: {len(table)}")
    print(f"  Successful: {len(table) - len(failed)}")
    print(f"  Failed: {len(failed)}")

    for name in table.strategy_names:
        points = table.points_for(name)
        ok = [p for p in points if not p.failed]
        print(f"\n  {name}:")
        print(f"    Successful: {len(ok)}/{len(points)}")
        if ok:
            slowest = max(ok, key=lambda p: p.outcome.elapsed_ns)
            print(f"    Slowest: {slowest.outcome.elapsed_ms:.3f}ms at n={slowest.size}")
        reasons = sorted({p.outcome.failure_reason for p in points if p.failed})
        if reasons:
            first = next(p for p in points if p.failed)
            print(f"    First failure: n={first.size} ({', '.join(reasons)})")
