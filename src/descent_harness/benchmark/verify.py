"""Golden-output comparison and contract checks for parsers."""

import difflib
from dataclasses import dataclass

from descent_harness.models import Event
from descent_harness.parsers.base import BaseParser


@dataclass
class GoldenComparison:
    """Result of diffing formatted output against golden lines."""
    matches: bool
    actual: list[str]
    expected: list[str]
    first_mismatch: int | None
    diff: str


def format_events(parser_cls: type[BaseParser], data: bytes) -> list[str]:
    """Parse once and return the formatted line of every event, in order."""
    lines: list[str] = []
    parser_cls(data).parse(lambda event: lines.append(event.format_line()))
    return lines


def compare_to_golden(
    parser_cls: type[BaseParser],
    data: bytes,
    expected: list[str],
) -> GoldenComparison:
    """Compare a parse's formatted output with golden output.

    Args:
        parser_cls: Parser class under test.
        data: Input buffer.
        expected: Golden lines, without trailing newlines.

    Returns:
        GoldenComparison with the first differing index and a unified diff.
    """
    actual = format_events(parser_cls, data)

    first_mismatch = None
    for i, (got, want) in enumerate(zip(actual, expected)):
        if got != want:
            first_mismatch = i
            break
    if first_mismatch is None and len(actual) != len(expected):
        first_mismatch = min(len(actual), len(expected))

    diff = "\n".join(
        difflib.unified_diff(expected, actual, "expected", "actual", lineterm="")
    )

    return GoldenComparison(
        matches=first_mismatch is None,
        actual=actual,
        expected=list(expected),
        first_mismatch=first_mismatch,
        diff=diff,
    )


def check_contract(parser_cls: type[BaseParser], data: bytes) -> list[str]:
    """Check a parser against the event-streaming guarantees.

    Checks:
        - two passes over the same bytes give identical output
        - event start offsets never decrease and stay inside the input
        - no rendered line contains a line break

    Args:
        parser_cls: Parser class under test.
        data: Input buffer.

    Returns:
        Human-readable violations; empty when the parser conforms.
    """
    violations: list[str] = []

    events: list[Event] = []
    parser_cls(data).parse(events.append)
    first = [event.format_line() for event in events]
    second = format_events(parser_cls, data)

    if first != second:
        violations.append(
            f"non-deterministic output: {len(first)} lines then {len(second)} lines"
        )

    last_start = 0
    for i, event in enumerate(events):
        if event.start < last_start:
            violations.append(
                f"event {i} ({event.kind}) starts at {event.start}, before {last_start}"
            )
        if event.end > len(data):
            violations.append(
                f"event {i} ({event.kind}) ends at {event.end}, past input end {len(data)}"
            )
        last_start = max(last_start, event.start)

    for i, line in enumerate(first):
        if len(line.splitlines()) != 1:
            violations.append(f"event {i} renders a line break: {line!r}")

    return violations
