"""Micro-benchmark runner for generated parsers."""

import logging
import statistics
import time
from dataclasses import dataclass, field

from descent_harness.models import Event
from descent_harness.parsers.base import BaseParser

logger = logging.getLogger(__name__)

MINIMAL_INPUT = b"hello world"


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""
    iterations: int = 1000
    warmup_iterations: int = 100


@dataclass
class TimingResult:
    """Timing statistics from a benchmark."""
    total_ms: float
    mean_ms: float
    median_ms: float
    min_ms: float
    max_ms: float
    p95_ms: float
    p99_ms: float
    std_dev_ms: float
    iterations: int
    parses_per_second: float


@dataclass
class BenchmarkResult:
    """Complete result from a benchmark run."""
    name: str
    parser_name: str
    timing: TimingResult
    events_per_parse: int
    input_size: int
    event_counts: list[int] = field(default_factory=list, repr=False)

    @property
    def deterministic(self) -> bool:
        """Return whether every timed pass emitted the same number of events."""
        return len(set(self.event_counts)) <= 1


def count_events(parser_cls: type[BaseParser], data: bytes) -> int:
    """Parse once, counting every event delivered to the callback."""
    count = 0

    def on_event(_event: Event) -> None:
        nonlocal count
        count += 1

    parser_cls(data).parse(on_event)
    return count


class BenchmarkRunner:
    """Runs micro-benchmarks across parser classes."""

    def __init__(self, config: BenchmarkConfig | None = None):
        """Initialize the benchmark runner.

        Args:
            config: Benchmark configuration.
        """
        self.config = config or BenchmarkConfig()
        if self.config.iterations < 1:
            raise ValueError(
                f"iterations must be >= 1, got {self.config.iterations}"
            )

    def run(
        self,
        parser_cls: type[BaseParser],
        data: bytes = MINIMAL_INPUT,
        name: str = "parse_minimal",
    ) -> BenchmarkResult:
        """Run a benchmark on one parser class.

        Args:
            parser_cls: Parser class to benchmark.
            data: Input parsed on every iteration.
            name: Benchmark label.

        Returns:
            BenchmarkResult with timing and event count data.
        """
        # Warmup
        for _ in range(self.config.warmup_iterations):
            count_events(parser_cls, data)

        times: list[float] = []
        counts: list[int] = []

        for _ in range(self.config.iterations):
            start = time.perf_counter()
            count = count_events(parser_cls, data)
            elapsed_ms = (time.perf_counter() - start) * 1000

            times.append(elapsed_ms)
            counts.append(count)

        times_sorted = sorted(times)
        total_time = sum(times)

        p95_idx = int(len(times_sorted) * 0.95)
        p99_idx = int(len(times_sorted) * 0.99)

        timing = TimingResult(
            total_ms=total_time,
            mean_ms=statistics.mean(times),
            median_ms=statistics.median(times),
            min_ms=min(times),
            max_ms=max(times),
            p95_ms=times_sorted[min(p95_idx, len(times_sorted) - 1)],
            p99_ms=times_sorted[min(p99_idx, len(times_sorted) - 1)],
            std_dev_ms=statistics.stdev(times) if len(times) > 1 else 0.0,
            iterations=self.config.iterations,
            parses_per_second=(len(times) / total_time) * 1000 if total_time > 0 else 0,
        )

        result = BenchmarkResult(
            name=name,
            parser_name=parser_cls(b"").name,
            timing=timing,
            events_per_parse=counts[-1],
            input_size=len(data),
            event_counts=counts,
        )
        logger.debug(
            "%s/%s: %d iterations, mean %.4f ms",
            name, result.parser_name, timing.iterations, timing.mean_ms,
        )
        return result

    def compare(
        self,
        parser_classes: list[type[BaseParser]],
        data: bytes = MINIMAL_INPUT,
    ) -> dict[str, BenchmarkResult]:
        """Run benchmarks on multiple parsers over the same input.

        Args:
            parser_classes: Parser classes to compare.
            data: Shared input.

        Returns:
            Dictionary mapping parser names to results.
        """
        results = {}
        for parser_cls in parser_classes:
            result = self.run(parser_cls, data)
            results[result.parser_name] = result
        return results

    def format_results(self, results: dict[str, BenchmarkResult]) -> str:
        """Format benchmark results as a table.

        Args:
            results: Dictionary of benchmark results.

        Returns:
            Formatted string table.
        """
        lines = []
        lines.append("=" * 80)
        lines.append("BENCHMARK RESULTS")
        lines.append("=" * 80)
        lines.append(
            f"{'Parser':<25} {'Mean (ms)':<12} {'p95 (ms)':<12} "
            f"{'Parses/s':<15} {'Events':<10}"
        )
        lines.append("-" * 80)

        for name, result in results.items():
            lines.append(
                f"{name:<25} {result.timing.mean_ms:<12.4f} "
                f"{result.timing.p95_ms:<12.4f} "
                f"{result.timing.parses_per_second:<15,.0f} "
                f"{result.events_per_parse:<10}"
            )

        lines.append("=" * 80)
        return "\n".join(lines)
