"""Command line entry point: generate data sets, then benchmark the sorts."""

from __future__ import annotations

import argparse

from .generator import StringGenerator
from .tester import StringSortTester


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stringsorts",
        description="Generate string data sets and benchmark string sorting algorithms.",
    )
    parser.add_argument("--data-dir", default="../data", help="directory for generated data")
    parser.add_argument("--results-dir", default="../results", help="directory for results")
    parser.add_argument("--seed", type=int, default=None, help="seed for data generation")
    parser.add_argument("--repetitions", type=int, default=5, help="runs averaged per measurement")
    stage = parser.add_mutually_exclusive_group()
    stage.add_argument("--skip-generate", action="store_true", help="use existing data files")
    stage.add_argument("--generate-only", action="store_true", help="only generate data files")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Generate the data files and run the benchmark; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.repetitions < 1:
        parser.error("--repetitions must be at least 1")

    if not args.skip_generate:
        StringGenerator(args.seed).generate_all(args.data_dir)
    if not args.generate_only:
        StringSortTester(args.data_dir, args.results_dir, args.repetitions).run_tests()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())