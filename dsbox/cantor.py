"""Successive levels of the Cantor set construction."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


def propagate(intervals: Iterable[tuple[float, float]]) -> list[tuple[float, float]]:
    """Replace each interval by its outer thirds."""
    result: list[tuple[float, float]] = []
    for start, end in intervals:
        third = (end - start) / 3
        result.append((start, start + third))
        result.append((end - third, end))
    return result


def cantor_levels(start: float, end: float, levels: int) -> list[list[tuple[float, float]]]:
    """Return the intervals of levels 0 through ``levels``."""
    if levels < 0:
        raise ValueError("levels must be non-negative")
    current = [(float(start), float(end))]
    result = [current]
    for _ in range(levels):
        current = propagate(current)
        result.append(current)
    return result


def format_level(intervals: Iterable[tuple[float, float]]) -> str:
    """Render intervals as tab-separated ``[start] -- [end]`` pairs."""
    return "".join(f"\t[{start:f}] -- [{end:f}]" for start, end in intervals)


def main(argv: Sequence[str] | None = None) -> int:
    """Print each level for start, end and level count from arguments or stdin."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Enter 3 arguments: start_num \t end_num \t levels")
        args = sys.stdin.read().split()
    try:
        start, end, levels = (int(value) for value in args[:3])
    except ValueError:
        print("expected three integers: start_num end_num levels", file=sys.stderr)
        return 2
    if levels < 0:
        print("levels must be non-negative", file=sys.stderr)
        return 2
    all_levels = cantor_levels(start, end, levels)
    for index, intervals in enumerate(all_levels):
        sys.stdout.write(f"Level {index}\t{format_level(intervals)}\n")
        if index < levels:
            sys.stdout.write("\n")
    return 0