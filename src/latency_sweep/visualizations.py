"""Generate latency charts from sweep results as static PNG images using matplotlib."""

import math
from pathlib import Path
from typing import Optional

import matplotlib

matplotlib.use("Agg")  # Use non-interactive backend
import matplotlib.pyplot as plt
import pandas as pd

from .metrics import ns_to_ms
from .results import ResultTable, plot_series

SERIES_COLORS = ["#ff7f0e", "#1f77b4", "#2ca02c", "#9467bd", "#d62728", "#8c564b"]


def to_dataframe(table: ResultTable) -> pd.DataFrame:
    """Flatten a result table into one row per sweep point.

    Failed points keep a NaN elapsed time so they never read as zero.
    """
    rows = [
        {
            "size": point.size,
            "strategy": point.strategy_name,
            "failed": point.outcome.failed,
            "elapsed_ms": point.outcome.elapsed_ms,
            "failure_reason": point.outcome.failure_reason,
        }
        for point in table
    ]
    df = pd.DataFrame(rows, columns=["size", "strategy", "failed", "elapsed_ms", "failure_reason"])
    df["elapsed_ms"] = df["elapsed_ms"].astype(float)
    return df


def _y_axis_limit(max_ms: float) -> float:
    return math.ceil(max_ms * 1.2 + 1)


def create_latency_chart(
    table: ResultTable,
    output_dir: str = "./results",
    output_filename: str = "latency_chart.png",
    title: str = "Execution Time vs Input Size",
    width_in: float = 10.0,
    height_in: float = 5.0,
) -> Optional[plt.Figure]:
    """Create a latency-vs-size line chart with one series per strategy.

    Args:
        table: Completed sweep results
        output_dir: Directory to save chart
        output_filename: Chart image filename
        title: Chart title
        width_in: Figure width in inches
        height_in: Figure height in inches

    Returns:
        Matplotlib figure object, or None if no strategy has a successful point
    """
    series = plot_series(table)
    if not any(series.values()):
        print("No successful measurements to chart.")
        return None

    max_ms = float(to_dataframe(table)["elapsed_ms"].max())

    fig, ax = plt.subplots(figsize=(width_in, height_in))
    for idx, (name, pairs) in enumerate(series.items()):
        if not pairs:
            print(f"Warning: every run of {name} failed, leaving it out of the chart")
            continue
        # Repeated sizes stack at the same x instead of doubling back.
        pairs = sorted(pairs, key=lambda pair: pair[0])
        sizes = [size for size, _ in pairs]
        times_ms = [ns_to_ms(elapsed_ns) for _, elapsed_ns in pairs]
        ax.plot(
            sizes,
            times_ms,
            marker="o",
            linewidth=2,
            markersize=6,
            label=name,
            color=SERIES_COLORS[idx % len(SERIES_COLORS)],
        )

    ax.set_xlabel("Input Length (n)", fontsize=12)
    ax.set_ylabel("Time (ms)", fontsize=12)
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_ylim(0, _y_axis_limit(max_ms))
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best", fontsize=10)

    plt.tight_layout()
    output_path = Path(output_dir) / output_filename
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(output_path), dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved chart to {output_path}")
    return fig
