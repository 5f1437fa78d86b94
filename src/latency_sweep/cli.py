"""Command-line entry point for the capital-count latency sweep."""

import argparse
import sys
from typing import Optional, Sequence

from .config import DEFAULT_SIZES, SweepConfig
from .report import format_table
from .runner import SweepRunner
from .workloads import TextCorpus, capital_count_strategies


def _parse_sizes(value: str) -> list[int]:
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid size list {value!r}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Time recursive vs iterative capital-letter counting across input sizes."
    )
    parser.add_argument(
        "--sizes",
        type=_parse_sizes,
        default=list(DEFAULT_SIZES),
        help=f"Comma-separated input sizes (default: {','.join(map(str, DEFAULT_SIZES))}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Seed for random input text (default: 42).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for an isolated run before reporting it as timed out (default: wait forever).",
    )
    parser.add_argument(
        "--output-dir",
        default="./results",
        help="Directory for the table, CSV and chart (default: ./results).",
    )
    parser.add_argument(
        "--no-chart",
        action="store_true",
        help="Skip rendering the chart image.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress per-point progress output.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the capital-count sweep."""
    args = build_parser().parse_args(argv)

    config = SweepConfig(
        sizes=args.sizes,
        seed=args.seed,
        isolate_timeout_s=args.timeout,
        output_dir=args.output_dir,
        write_chart=not args.no_chart,
        verbose=not args.quiet,
    )
    strategies = capital_count_strategies(TextCorpus(seed=config.seed))

    print("Running capital-count latency sweep:")
    print(f"  Sizes: {', '.join(map(str, config.sizes))}")
    print(f"  Strategies: {', '.join(s.name for s in strategies)}")
    print(f"  Seed: {config.seed}")
    if config.isolate_timeout_s is None:
        print("  Isolated timeout: none")
    else:
        print(f"  Isolated timeout: {config.isolate_timeout_s}s")
    print()

    runner = SweepRunner(strategies, config)
    table = runner.run()

    print()
    print(format_table(table), end="")
    print(f"\nResults saved to: {config.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
