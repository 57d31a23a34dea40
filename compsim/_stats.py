from __future__ import annotations

import statistics
from dataclasses import dataclass
from typing import Sequence

from ._timing import ns_to_ms


@dataclass(frozen=True)
class OperationStats:
    min_ms: float
    avg_ms: float
    max_ms: float
    count: int


def summarize(samples_ns: Sequence[int]) -> OperationStats | None:
    """Return min/avg/max in milliseconds, or None when there are no samples."""
    if not samples_ns:
        return None
    return OperationStats(
        min_ms=ns_to_ms(min(samples_ns)),
        avg_ms=ns_to_ms(statistics.mean(samples_ns)),
        max_ms=ns_to_ms(max(samples_ns)),
        count=len(samples_ns),
    )


def format_stats(label: str, stats: OperationStats | None) -> str:
    if stats is None:
        return f"{label}: No data"
    return (
        f"{label}: Min = {stats.min_ms:.3f} ms, Avg = {stats.avg_ms:.3f} ms,"
        f" Max = {stats.max_ms:.3f} ms ({stats.count} samples)"
    )


def print_report(categories: Sequence[tuple[str, Sequence[int]]]) -> None:
    print()
    print("Operation Statistics (in milliseconds):")
    for label, samples in categories:
        print(format_stats(label, summarize(samples)))
