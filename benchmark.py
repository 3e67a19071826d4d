#!/usr/bin/env python
"""
Parser Micro-Benchmark

Times repeated parses of a small fixed input with the generated parser
and prints latency statistics.

Usage:
    python benchmark.py
    python benchmark.py --iterations 10000
    python benchmark.py --parser mypkg.generated:Parser --input "|div Hello"
"""

import argparse
import sys

sys.path.insert(0, 'src')

from descent_harness.benchmark import BenchmarkConfig, BenchmarkResult, BenchmarkRunner
from descent_harness.benchmark.runner import MINIMAL_INPUT
from descent_harness.config import DEFAULT_PARSER
from descent_harness.exceptions import ParserLoadError
from descent_harness.parsers import load_parser


def print_result(result: BenchmarkResult) -> None:
    """Print benchmark results."""
    timing = result.timing
    print(f"\n{'='*60}")
    print(f"Benchmark: {result.name}")
    print(f"{'='*60}")
    print(f"  Parser:            {result.parser_name}")
    print(f"  Input size:        {result.input_size} bytes")
    print(f"  Events per parse:  {result.events_per_parse}")
    print(f"  Iterations:        {timing.iterations}")
    print(f"  Total time:        {timing.total_ms:.2f} ms")
    print(f"  Parses/second:     {timing.parses_per_second:,.0f}")
    print()
    print("  Latency Statistics:")
    print(f"    Mean:            {timing.mean_ms * 1000:.3f} us")
    print(f"    Median (p50):    {timing.median_ms * 1000:.3f} us")
    print(f"    Min:             {timing.min_ms * 1000:.3f} us")
    print(f"    Max:             {timing.max_ms * 1000:.3f} us")
    print(f"    p95:             {timing.p95_ms * 1000:.3f} us")
    print(f"    p99:             {timing.p99_ms * 1000:.3f} us")
    print(f"    Std dev:         {timing.std_dev_ms * 1000:.3f} us")
    if not result.deterministic:
        print("\n  WARNING: event count varied between iterations")


def main():
    """Main entry point."""
    arg_parser = argparse.ArgumentParser(
        description="Micro-benchmark the generated parser",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    arg_parser.add_argument(
        "--iterations", "-i",
        type=int,
        default=1000,
        help="Number of timed iterations (default: 1000)"
    )
    arg_parser.add_argument(
        "--warmup", "-w",
        type=int,
        default=100,
        help="Number of untimed warmup iterations (default: 100)"
    )
    arg_parser.add_argument(
        "--parser", "-p",
        default=DEFAULT_PARSER,
        help=f"Parser target as module:Class (default: {DEFAULT_PARSER})"
    )
    arg_parser.add_argument(
        "--input",
        default=MINIMAL_INPUT.decode(),
        help="Input text to parse (default: 'hello world')"
    )

    args = arg_parser.parse_args()

    try:
        parser_cls = load_parser(args.parser)
        runner = BenchmarkRunner(BenchmarkConfig(
            iterations=args.iterations,
            warmup_iterations=args.warmup,
        ))
    except (ParserLoadError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    result = runner.run(parser_cls, args.input.encode())
    print_result(result)

    print("\nBenchmark complete!")


if __name__ == "__main__":
    main()
