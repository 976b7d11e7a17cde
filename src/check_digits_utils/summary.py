"""Human-readable rendering of batch results and method listings."""

from __future__ import annotations

from collections.abc import Sequence

from .models import BatchResult


def render_calc_lines(batch: BatchResult) -> tuple[list[str], list[str]]:
    """Return (stdout lines, stderr lines) for a calc batch."""
    out: list[str] = []
    err: list[str] = []
    for result in batch.results:
        if result.ok:
            out.append(str(result.value))
        else:
            err.append(f"ERROR: {result.item_id}: {result.message}")
    return out, err


def render_check_lines(batch: BatchResult) -> list[str]:
    lines = []
    for result in batch.results:
        if result.ok:
            lines.append(f"{result.item_id} is valid")
        elif result.error is None:
            lines.append(f"{result.item_id} is INVALID (incorrect check digit(s))")
        else:
            lines.append(f"{result.item_id} is INVALID ({result.message})")
    return lines


def render_method_table(rows: Sequence[dict[str, str]]) -> str:
    """Render ``{"method", "summary"}`` rows as an aligned two-column table."""
    width = max([len("method")] + [len(row["method"]) for row in rows])
    lines = [f"{'method':<{width}}  summary", f"{'-' * width}  {'-' * 7}"]
    for row in rows:
        lines.append(f"{row['method']:<{width}}  {row['summary']}")
    return "\n".join(lines) + "\n"
