"""Benchmark runner that times each sort over the generated data files."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable

from .counter import CharCompareCounter
from .generator import SIZES
from .sorts import (
    merge_sort,
    quick_radix_sort,
    quick_sort,
    radix_sort,
    str_merge_sort,
    str_quick_sort,
)

SortFunction = Callable[[list[str], CharCompareCounter], None]

DATA_TYPES = ("random", "almost_sort", "reverse_sort")
"""Data variants benchmarked, in order."""

SORTERS: tuple[tuple[str, SortFunction], ...] = (
    ("merge_sort_result.txt", merge_sort),
    ("quick_sort_result.txt", quick_sort),
    ("radix_sort_result.txt", radix_sort),
    ("quick_radix_sort_result.txt", quick_radix_sort),
    ("str_merge_sort_result.txt", str_merge_sort),
    ("str_quick_sort_result.txt", str_quick_sort),
)
"""Result file name and sort function for every benchmarked algorithm."""


def load_data(path: str | Path) -> list[str]:
    """Read a data file: a count line followed by one string per line.

    A file that cannot be opened is reported on stderr and yields no strings.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
    except OSError:
        print(f"Failed to open: {path}", file=sys.stderr)
        return []
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines[1:]


@dataclass(frozen=True)
class SortResult:
    """Average time and character comparisons of one sort on one input size."""

    size: int
    average_ms: float
    comparisons: int

    def __str__(self) -> str:
        return f"{self.size} {self.average_ms:g} {self.comparisons}"


class StringSortTester:
    """Runs every sort over every data variant and size and records the results."""

    def __init__(
        self,
        data_dir: str | Path = "../data",
        results_dir: str | Path = "../results",
        repetitions: int = 5,
    ) -> None:
        if repetitions < 1:
            raise ValueError("repetitions must be at least 1")
        self.data_dir = Path(data_dir)
        self.results_dir = Path(results_dir)
        self.repetitions = repetitions

    def measure(self, data: list[str], sort_function: SortFunction) -> SortResult:
        """Sort fresh copies of ``data`` repeatedly; report the mean time and last count."""
        counter = CharCompareCounter()
        total_ms = 0.0
        for _ in range(self.repetitions):
            copy = list(data)
            counter.reset()
            start = time.perf_counter()
            sort_function(copy, counter)
            total_ms += (time.perf_counter() - start) * 1000.0
        return SortResult(len(data), total_ms / self.repetitions, counter.count)

    def run_tests(self) -> list[Path]:
        """Benchmark all sorts on all data files and write one result file per sort and type."""
        self.results_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for data_type in DATA_TYPES:
            type_dir = self.results_dir / data_type
            type_dir.mkdir(parents=True, exist_ok=True)
            for filename, sort_function in SORTERS:
                path = type_dir / filename
                with path.open("w", encoding="utf-8", newline="\n") as out:
                    for size in SIZES:
                        data = load_data(self.data_dir / data_type / f"{data_type}_{size}.txt")
                        result = replace(self.measure(data, sort_function), size=size)
                        out.write(f"{result}\n")
                        print(f"Done: {data_type} {filename} {size}")
                written.append(path)
        return written