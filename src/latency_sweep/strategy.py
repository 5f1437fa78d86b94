"""Sweep strategy definitions.

A strategy pairs a name with an isolation policy and a factory that builds a
fresh zero-argument work unit for each input size. The harness calls the
factory once per (size, strategy) point and discards the unit afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

WorkUnit = Callable[[], Any]
UnitFactory = Callable[[int], WorkUnit]


@dataclass(frozen=True)
class SweepStrategy:
    """A named candidate measured at every sweep size.

    Attributes:
        name: Label used in the result table and reports
        isolate: Run units on an isolated thread that contains faults. Leave
            False only for strategies known to be bounded; their exceptions
            abort the sweep.
        unit_factory: Builds the work unit for a given input size
    """

    name: str
    isolate: bool
    unit_factory: UnitFactory

    def __post_init__(self):
        if not self.name:
            raise ValueError("strategy name must not be empty")
        if not callable(self.unit_factory):
            raise ValueError(f"unit_factory for {self.name!r} must be callable")

    def make_unit(self, size: int) -> WorkUnit:
        return self.unit_factory(size)
