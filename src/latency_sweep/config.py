"""Configuration classes for sweep execution."""

from dataclasses import dataclass, field
import operator
from typing import Optional

DEFAULT_SIZES = [3000, 8000, 31000, 49000, 56000, 131000]


def validate_sizes(sizes) -> list[int]:
    """Return sizes as a list of ints, raising ValueError unless every entry is a positive integer.

    Anything implementing __index__ (numpy integers included) is accepted; bools are not.
    """
    normalized = []
    for size in sizes:
        if isinstance(size, bool):
            raise ValueError(f"sizes must be integers, got {size!r}")
        try:
            value = operator.index(size)
        except TypeError:
            raise ValueError(f"sizes must be integers, got {size!r}") from None
        if value < 1:
            raise ValueError(f"sizes must be positive, got {value}")
        normalized.append(value)
    return normalized


@dataclass
class SweepConfig:
    """Configuration for a latency sweep.

    Attributes:
        sizes: Input sizes to measure, in sweep order
        seed: Seed for the input generator (default: 42)
        isolate_timeout_s: Optional bound on how long an isolated unit may run
            before it is reported as timed out (default: None, wait forever)
        output_dir: Directory for report output (default: "./results")
        table_filename: Filename for the text table (default: "latency_table.txt")
        csv_filename: Filename for the CSV export (default: "latency_results.csv")
        chart_filename: Filename for the chart image (default: "latency_chart.png")
        chart_title: Title drawn above the chart
        chart_width_in: Chart width in inches (default: 10.0)
        chart_height_in: Chart height in inches (default: 5.0)
        write_chart: Render the chart image (default: True)
        verbose: Print per-point progress (default: False)
    """

    sizes: list[int] = field(default_factory=lambda: list(DEFAULT_SIZES))
    seed: int = 42
    isolate_timeout_s: Optional[float] = None
    output_dir: str = "./results"
    table_filename: str = "latency_table.txt"
    csv_filename: str = "latency_results.csv"
    chart_filename: str = "latency_chart.png"
    chart_title: str = "Execution Time: Recursive vs Iterative"
    chart_width_in: float = 10.0
    chart_height_in: float = 5.0
    write_chart: bool = True
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if not self.sizes:
            raise ValueError("sizes must not be empty")
        self.sizes = validate_sizes(self.sizes)
        if self.isolate_timeout_s is not None and self.isolate_timeout_s <= 0:
            raise ValueError("isolate_timeout_s must be positive")
        if self.chart_width_in <= 0 or self.chart_height_in <= 0:
            raise ValueError("chart dimensions must be positive")
