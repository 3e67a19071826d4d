"""Bench-mode measurement record."""

from pydantic import BaseModel, Field

MIB = 1024 * 1024


class Measurement(BaseModel):
    """Throughput numbers from one bench-mode run.

    Attributes:
        size_mb: Input size in MiB.
        event_count: Events emitted by the final iteration.
        per_iter_seconds: Total elapsed time divided by iterations.
        throughput_mb_s: size_mb / per_iter_seconds (0.0 if no time elapsed).
    """

    size_mb: float = Field(..., ge=0.0)
    event_count: int = Field(..., ge=0)
    per_iter_seconds: float = Field(..., ge=0.0)
    throughput_mb_s: float = Field(..., ge=0.0)

    @classmethod
    def from_run(
        cls,
        input_size: int,
        event_count: int,
        total_seconds: float,
        iterations: int,
    ) -> "Measurement":
        """Derive a measurement from raw loop totals.

        Args:
            input_size: Input length in bytes.
            event_count: Final iteration's event count.
            total_seconds: Wall-clock time across all iterations.
            iterations: Number of parse passes that were timed.

        Returns:
            Measurement with per-iteration time and throughput filled in.
        """
        if iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {iterations}")
        size_mb = input_size / MIB
        per_iter = total_seconds / iterations
        throughput = size_mb / per_iter if per_iter > 0 else 0.0
        return cls(
            size_mb=size_mb,
            event_count=event_count,
            per_iter_seconds=per_iter,
            throughput_mb_s=throughput,
        )

    def format_line(self) -> str:
        """Render the fixed bench-mode summary line."""
        return (
            f"{self.size_mb:.2f} MB, {self.event_count} events, "
            f"{self.per_iter_seconds:.3f}s/iter, {self.throughput_mb_s:.1f} MB/s"
        )
