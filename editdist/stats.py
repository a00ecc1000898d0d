"""Argument checking, progress display and timing statistics for benchmarks."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "USAGE",
    "BenchmarkArgs",
    "validate_input",
    "progress_bar",
    "quartiles",
    "mean_and_stdev",
]

USAGE = (
    "Usage: <filename> <RUNS> <LOWER> <UPPER> <STEP>\n"
    "<filename> is the name of the file where performance data will be written.\n"
    "It is recommended for <filename> to have .csv extension and it should not previously exist.\n"
    "<RUNS>: numbers of runs per test case: should be >= 32.\n"
    "<LOWER> <UPPER> <STEP>: range of test cases.\n"
    "These should all be positive."
)

_BAR_WIDTH = 70


@dataclass(frozen=True)
class BenchmarkArgs:
    """Validated benchmark command-line settings."""

    filename: str
    runs: int
    lower: int
    upper: int
    step: int


def validate_input(argv: Sequence[str]) -> BenchmarkArgs:
    """Parse ``<filename> <RUNS> <LOWER> <UPPER> <STEP>``; raise ValueError if invalid."""
    if len(argv) != 5:
        raise ValueError(USAGE)

    filename, *numbers = argv
    try:
        runs, lower, upper, step = (int(value) for value in numbers)
    except ValueError as exc:
        raise ValueError(f"invalid integer argument: {exc}") from None

    if runs < 4:
        raise ValueError("<RUNS> must be at least 4.")
    if step <= 0 or lower <= 0 or upper <= 0:
        raise ValueError("<STEP>, <LOWER> and <UPPER> have to be positive.")
    if lower > upper:
        raise ValueError("<LOWER> must be at most equal to <UPPER>.")

    return BenchmarkArgs(filename, runs, lower, upper, step)


def progress_bar(done: int, total: int) -> str:
    """Render a one-line bold progress bar ending in a carriage return."""
    progress = done / total
    filled = int(_BAR_WIDTH * progress)
    cells = "".join(
        "=" if i < filled else ">" if i == filled else " " for i in range(_BAR_WIDTH)
    )
    return f"\033[1m[{cells}] {int(progress * 100.0)}%\r\033[0m"


def quartiles(data: Iterable[float]) -> tuple[float, float, float, float, float]:
    """Return (min, Q1, median, Q3, max) of at least four values."""
    values = sorted(data)
    n = len(values)
    if n < 4:
        raise ValueError("quartiles needs at least 4 data points.")

    if n % 2 == 1:
        median = values[n // 2]
    else:
        half = n // 2
        median = (values[half - 1] + values[half]) / 2.0

    if n % 4 >= 2:
        lower_q = values[n // 4]
        upper_q = values[(3 * n) // 4]
    else:
        p = n // 4
        lower_q = 0.25 * values[p - 1] + 0.75 * values[p]
        p = (3 * n) // 4
        upper_q = 0.75 * values[p - 1] + 0.25 * values[p]

    return values[0], lower_q, median, upper_q, values[-1]


def mean_and_stdev(samples: Sequence[float]) -> tuple[float, float]:
    """Return the mean and the unbiased sample standard deviation."""
    if not samples:
        raise ValueError("mean_and_stdev needs at least one sample.")
    mean = sum(samples) / len(samples)
    if len(samples) == 1:
        return mean, 0.0
    variance = sum((x - mean) ** 2 for x in samples) / (len(samples) - 1)
    return mean, math.sqrt(variance)