"""collect CLI - command-line interface for the collect benchmarks.

This module provides the main CLI entrypoint for collect, allowing users
to time apply() across the benchmark cases from the command line.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from collect.bench.runner import CASES, DEFAULT_ITERATIONS, DEFAULT_SIZE, run_cases
from collect.bench.settings import BenchSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the collect command."""
    parser = argparse.ArgumentParser(
        prog="collect",
        description="collect - transforms over sequences and mappings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run every benchmark case
  collect bench

  # One case, larger input, results as JSON
  collect bench --case struct_to_struct --size 1000 --output results.json

Note:
  Defaults are read from config.json, e.g. {"bench": {"iterations": 50000}},
  or from the BENCH_ITERATIONS / BENCH_SIZE environment variables.
"""
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    bench_parser = subparsers.add_parser(
        "bench",
        help="Time apply() over the benchmark cases"
    )
    bench_parser.add_argument(
        "--case",
        action="append",
        dest="cases",
        metavar="NAME",
        help=f"Case to run, may be repeated (choices: {', '.join(CASES)}; default: all)"
    )
    bench_parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help=f"Timed calls per case (default: from config.json or {DEFAULT_ITERATIONS})"
    )
    bench_parser.add_argument(
        "--size",
        type=int,
        default=None,
        help=f"Elements per call (default: from config.json or {DEFAULT_SIZE})"
    )
    bench_parser.add_argument(
        "--output",
        help="Write results as JSON to this file"
    )
    bench_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint for collect."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')
    else:
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    if args.command == "bench":
        return cmd_bench(args)
    parser.print_help()
    return 1


def cmd_bench(args: argparse.Namespace) -> int:
    """Handle bench command."""
    unknown = [name for name in (args.cases or []) if name not in CASES]
    if unknown:
        logger.error(f"Unknown benchmark case(s): {', '.join(unknown)}")
        return 1

    # CLI args override config.json and BENCH_* env vars
    settings = BenchSettings.load()
    iterations = settings.iterations if args.iterations is None else args.iterations
    size = settings.size if args.size is None else args.size

    try:
        results = run_cases(args.cases, iterations=iterations, size=size)
    except ValueError as e:
        logger.error(str(e))
        return 1

    for result in results:
        print(result.format_line())

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump([r.to_dict() for r in results], f, indent=2)
        logger.info(f"Results saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
