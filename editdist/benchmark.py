"""Time every edit-distance algorithm on each pair of input files and write CSV."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations
from typing import TextIO

from editdist.algorithms import ALGORITHMS
from editdist.cli import read_file
from editdist.stats import BenchmarkArgs, mean_and_stdev, progress_bar, quartiles, validate_input

__all__ = [
    "CSV_HEADER",
    "DEFAULT_FILES",
    "BenchmarkRow",
    "file_pairs",
    "time_algorithm",
    "run_benchmarks",
    "main",
]

CSV_HEADER = "n,str1,str2,str1_len,str2_len,t_mean,t_stdev,t_Q0,t_Q1,t_Q2,t_Q3,t_Q4"
DEFAULT_FILES = ("archivo1.txt", "archivo2.txt", "archivo3.txt", "archivo4.txt")


@dataclass(frozen=True)
class BenchmarkRow:
    """Timing summary, in nanoseconds, of one algorithm on one pair of files."""

    algorithm: str
    file1: str
    file2: str
    len1: int
    len2: int
    mean: float
    stdev: float
    quartiles: tuple[float, float, float, float, float]

    def csv_line(self) -> str:
        """Render the row in the column order of ``CSV_HEADER``."""
        fields = [
            self.algorithm,
            self.file1,
            self.file2,
            str(self.len1),
            str(self.len2),
            f"{self.mean:g}",
            f"{self.stdev:g}",
            *(f"{q:g}" for q in self.quartiles),
        ]
        return ",".join(fields)


def file_pairs(names: Iterable[str]) -> list[tuple[str, str]]:
    """Return every unordered pair of distinct positions, in input order."""
    return list(combinations(names, 2))


def time_algorithm(
    func: Callable[[str, str], int], str1: str, str2: str, runs: int
) -> list[float]:
    """Run ``func(str1, str2)`` ``runs`` times and return each duration in nanoseconds."""
    if runs < 1:
        raise ValueError("runs must be at least 1.")
    times = []
    for _ in range(runs):
        begin = time.perf_counter_ns()
        func(str1, str2)
        times.append(float(time.perf_counter_ns() - begin))
    return times


def run_benchmarks(
    args: BenchmarkArgs,
    out: TextIO,
    file_names: Sequence[str] = DEFAULT_FILES,
    progress: Callable[[int, int], None] | None = None,
) -> list[BenchmarkRow]:
    """Benchmark all algorithms on all file pairs, writing CSV to ``out``.

    Raises OSError if an input file cannot be read.
    """
    pairs = file_pairs(file_names)
    total = len(pairs) * len(ALGORITHMS) * args.runs
    executed = 0
    rows: list[BenchmarkRow] = []

    out.write(CSV_HEADER + "\n")
    for name1, name2 in pairs:
        print(f"Testing with S1: {name1} and S2: {name2}")
        str1 = read_file(name1)
        str2 = read_file(name2)

        for algorithm_name, func in ALGORITHMS.items():
            print(f"Testing algorithm: {algorithm_name}")
            times = []
            for _ in range(args.runs):
                executed += 1
                if progress is not None:
                    progress(executed, total)
                times.extend(time_algorithm(func, str1, str2, 1))

            mean, stdev = mean_and_stdev(times)
            row = BenchmarkRow(
                algorithm=algorithm_name,
                file1=name1,
                file2=name2,
                len1=len(str1),
                len2=len(str2),
                mean=mean,
                stdev=stdev,
                quartiles=quartiles(times),
            )
            out.write(row.csv_line() + "\n")
            rows.append(row)
    return rows


def _show_progress(done: int, total: int) -> None:
    sys.stderr.write(progress_bar(done, total))
    sys.stderr.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark command; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = validate_input(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("\033[0;36mRunning tests...\033[0m\n", file=sys.stderr)
    try:
        with open(args.filename, "w", encoding="utf-8", newline="") as out:
            run_benchmarks(args, out, DEFAULT_FILES, _show_progress)
    except OSError as exc:
        print(f"\nCould not open file: {exc.filename}", file=sys.stderr)
        return 1

    print("\n\n\033[1;32mDone!\033[0m", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())