"""Bench-mode throughput measurement."""

import logging
import time

from descent_harness.models import Event, Measurement
from descent_harness.parsers.base import BaseParser

logger = logging.getLogger(__name__)


def measure_throughput(
    parser_cls: type[BaseParser],
    data: bytes,
    iterations: int,
) -> Measurement:
    """Time repeated full parses of one input buffer.

    A fresh parser is built for every pass. The event counter restarts each
    pass, so the reported count is the final pass's total.

    Args:
        parser_cls: Parser class under test.
        data: Input buffer, reused read-only across passes.
        iterations: Number of timed passes.

    Returns:
        Measurement for the whole run.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")

    event_count = 0
    start = time.perf_counter()
    for _ in range(iterations):
        count = 0

        def on_event(_event: Event) -> None:
            nonlocal count
            count += 1

        parser_cls(data).parse(on_event)
        event_count = count
    total_seconds = time.perf_counter() - start

    logger.debug(
        "Timed %d passes of %d bytes in %.6fs", iterations, len(data), total_seconds
    )
    return Measurement.from_run(len(data), event_count, total_seconds, iterations)
