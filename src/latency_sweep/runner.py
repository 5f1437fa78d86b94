"""Sweep runner that measures every strategy at every input size."""

from pathlib import Path
from typing import Optional, Sequence

from .config import SweepConfig, validate_sizes
from .executor import IsolatedExecutor
from .report import write_table
from .results import ResultTable, SweepPoint, export_to_csv, print_summary
from .strategy import SweepStrategy
from .visualizations import create_latency_chart


def _check_strategy_names(strategies: Sequence[SweepStrategy]) -> None:
    seen = set()
    for strategy in strategies:
        if strategy.name in seen:
            raise ValueError(f"duplicate strategy name: {strategy.name!r}")
        seen.add(strategy.name)


def run_sweep(
    sizes: Sequence[int],
    strategies: Sequence[SweepStrategy],
    executor: Optional[IsolatedExecutor] = None,
    verbose: bool = False,
) -> ResultTable:
    """Measure each strategy once per size, size-major then strategy order.

    Faults from isolated strategies are recorded as failed points and the sweep
    continues. Exceptions from non-isolated strategies, or from a unit factory,
    propagate and abort the sweep.

    Args:
        sizes: Input sizes in sweep order
        strategies: Strategies in evaluation order
        executor: Executor to use (default: IsolatedExecutor without timeout)
        verbose: Print one progress line per point

    Returns:
        ResultTable with len(sizes) * len(strategies) points
    """
    sizes = validate_sizes(sizes)
    strategies = list(strategies)
    _check_strategy_names(strategies)
    if executor is None:
        executor = IsolatedExecutor()

    points: list[SweepPoint] = []
    total = len(sizes) * len(strategies)
    for size in sizes:
        for strategy in strategies:
            unit = strategy.make_unit(size)
            outcome = executor.run(unit, strategy.isolate)
            points.append(SweepPoint(size=size, strategy_name=strategy.name, outcome=outcome))

            if verbose:
                if outcome.failed:
                    detail = outcome.failure_reason
                    status = "✗"
                else:
                    detail = f"{outcome.elapsed_ms:.4f}ms"
                    status = "✓"
                print(f"  {status} [{len(points)}/{total}] n={size} {strategy.name}: {detail}")

    return ResultTable(points)


class SweepRunner:
    """Runs a sweep from configuration and writes its reports."""

    def __init__(self, strategies: Sequence[SweepStrategy], config: SweepConfig):
        """Initialize sweep runner.

        Args:
            strategies: Strategies to measure, in evaluation order
            config: Sweep configuration
        """
        self.strategies = list(strategies)
        self.config = config
        self.executor = IsolatedExecutor(timeout_s=config.isolate_timeout_s)
        self.table: Optional[ResultTable] = None
        self.artifacts: dict[str, str] = {}

    def run(self) -> ResultTable:
        """Run the sweep according to configuration.

        Returns:
            ResultTable with all measured points
        """
        config = self.config
        if config.verbose:
            names = ", ".join(s.name for s in self.strategies)
            print(f"Starting sweep: {len(config.sizes)} sizes x {len(self.strategies)} strategies ({names})")

        try:
            self.table = run_sweep(
                config.sizes,
                self.strategies,
                executor=self.executor,
                verbose=config.verbose,
            )

            output_dir = Path(config.output_dir)
            self.artifacts["table"] = write_table(self.table, output_dir / config.table_filename)
            self.artifacts["csv"] = export_to_csv(self.table, output_dir / config.csv_filename)
            if config.write_chart:
                fig = create_latency_chart(
                    self.table,
                    output_dir=config.output_dir,
                    output_filename=config.chart_filename,
                    title=config.chart_title,
                    width_in=config.chart_width_in,
                    height_in=config.chart_height_in,
                )
                if fig is not None:
                    self.artifacts["chart"] = str(output_dir / config.chart_filename)

            if config.verbose:
                for kind, path in self.artifacts.items():
                    print(f"Saved {kind} to {path}")

            print_summary(self.table)

        except Exception as e:
            print(f"Sweep failed: {e}")
            raise

        return self.table
