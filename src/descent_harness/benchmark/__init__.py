"""Benchmarking and verification for generated parsers."""

from .runner import BenchmarkRunner, BenchmarkConfig, BenchmarkResult, count_events
from .throughput import measure_throughput
from .verify import GoldenComparison, check_contract, compare_to_golden, format_events

__all__ = [
    "BenchmarkRunner",
    "BenchmarkConfig",
    "BenchmarkResult",
    "count_events",
    "measure_throughput",
    "GoldenComparison",
    "check_contract",
    "compare_to_golden",
    "format_events",
]
