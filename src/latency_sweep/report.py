"""Text table rendering for sweep results."""

from pathlib import Path
from typing import Union

from .results import ResultTable

ERROR_TOKEN = "ERR"
TABLE_TITLE = "=== LATENCY SWEEP RESULTS ==="
SIZE_COLUMN_WIDTH = 8
MIN_VALUE_COLUMN_WIDTH = 21


def _separator(widths: list[int]) -> str:
    return "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def _row(cells: list[str], widths: list[int], align: str) -> str:
    padded = [f"{cell:{align}{width}}" for cell, width in zip(cells, widths)]
    return "| " + " | ".join(padded) + " |"


def format_table(table: ResultTable) -> str:
    """Render the table with one row per sweep pass and one column per strategy.

    Failed points show as ERR; a footnote follows when any point failed.
    """
    names = table.strategy_names
    headers = ["n"] + [f"{name} (ms)" for name in names]
    widths = [SIZE_COLUMN_WIDTH] + [max(MIN_VALUE_COLUMN_WIDTH, len(h)) for h in headers[1:]]

    # One row per sweep pass; a repeated size gets its own row.
    rows: list[tuple[int, dict[str, str]]] = []
    for point in table:
        if not rows or rows[-1][0] != point.size or point.strategy_name in rows[-1][1]:
            rows.append((point.size, {}))
        if point.failed:
            cell = ERROR_TOKEN
        else:
            cell = f"{point.outcome.elapsed_ms:.4f}"
        rows[-1][1][point.strategy_name] = cell

    separator = _separator(widths)
    lines = [TABLE_TITLE, separator, _row(headers, widths, "<"), separator]
    for size, cells in rows:
        row = [str(size)] + [cells.get(name, "") for name in names]
        lines.append(_row(row, widths, ">"))
        lines.append(separator)

    reasons = sorted({p.outcome.failure_reason for p in table.failures})
    if reasons:
        lines.append("")
        lines.append(f"Note: '{ERROR_TOKEN}' marks a run that faulted ({', '.join(reasons)}).")

    return "\n".join(lines) + "\n"


def write_table(table: ResultTable, path: Union[str, Path]) -> str:
    """Write the formatted table to a text file and return its path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_table(table))
    return str(path)
