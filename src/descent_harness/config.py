"""Harness configuration."""

import logging
import os
from dataclasses import dataclass

DEFAULT_PARSER = "descent_harness.generated:Parser"
DEFAULT_BENCH_ITERATIONS = 10

ENV_PARSER = "DESCENT_HARNESS_PARSER"
ENV_BENCH_ITERATIONS = "DESCENT_HARNESS_BENCH_ITERATIONS"
ENV_LOG_LEVEL = "DESCENT_HARNESS_LOG_LEVEL"


@dataclass
class HarnessConfig:
    """Configuration for a harness run.

    Attributes:
        parser: Parser target in ``module:Class`` form.
        bench_iterations: Parse passes timed in bench mode.
        log_level: Logging level name for stderr diagnostics.
    """
    parser: str = DEFAULT_PARSER
    bench_iterations: int = DEFAULT_BENCH_ITERATIONS
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.bench_iterations < 1:
            raise ValueError(
                f"bench_iterations must be >= 1, got {self.bench_iterations}"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "HarnessConfig":
        """Build a config from ``DESCENT_HARNESS_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            HarnessConfig with unset variables left at their defaults.
        """
        env = os.environ if environ is None else environ

        iterations = env.get(ENV_BENCH_ITERATIONS, "").strip()
        if iterations:
            try:
                bench_iterations = int(iterations)
            except ValueError:
                raise ValueError(
                    f"{ENV_BENCH_ITERATIONS} must be an integer, got {iterations!r}"
                )
        else:
            bench_iterations = DEFAULT_BENCH_ITERATIONS

        return cls(
            parser=env.get(ENV_PARSER, "").strip() or DEFAULT_PARSER,
            bench_iterations=bench_iterations,
            log_level=env.get(ENV_LOG_LEVEL, "").strip() or "WARNING",
        )
