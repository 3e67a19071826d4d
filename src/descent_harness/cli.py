"""Command-line driver for generated parsers.

Reads all of stdin, parses it, and writes one line per event to stdout.
With ``--bench`` the input is parsed repeatedly instead and a single
throughput line goes to stderr.

Usage:
    run-parser < input.txt
    run-parser --bench < input.txt
"""

import argparse
import logging
import sys
from typing import BinaryIO, TextIO

from descent_harness.benchmark.throughput import measure_throughput
from descent_harness.config import HarnessConfig
from descent_harness.exceptions import HarnessError, InputReadError
from descent_harness.models import Event
from descent_harness.parsers import BaseParser, load_parser

logger = logging.getLogger(__name__)

PROG = "run-parser"


def read_input(stream: BinaryIO) -> bytes:
    """Read a binary stream to the end.

    Raises:
        InputReadError: If the stream cannot be read.
    """
    try:
        return stream.read()
    except OSError as e:
        raise InputReadError(f"failed to read stdin: {e}") from e


def run_stream(parser_cls: type[BaseParser], data: bytes, out: TextIO) -> int:
    """Write every event's formatted line to ``out``.

    Returns:
        Number of events written.
    """
    count = 0

    def on_event(event: Event) -> None:
        nonlocal count
        out.write(event.format_line())
        out.write("\n")
        count += 1

    parser_cls(data).parse(on_event)
    return count


def run_bench(
    parser_cls: type[BaseParser],
    data: bytes,
    iterations: int,
    err: TextIO,
) -> None:
    """Time ``iterations`` full parses and write the summary line to ``err``."""
    measurement = measure_throughput(parser_cls, data, iterations)
    print(measurement.format_line(), file=err)


def configure_logging(level: str, stream: TextIO) -> None:
    """Send package log records to ``stream`` with a ``run-parser:`` prefix.

    Each record is one prefixed line, distinguishable from the bench summary.
    """
    package_logger = logging.getLogger("descent_harness")
    for handler in list(package_logger.handlers):
        if getattr(handler, "_harness_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler._harness_handler = True
    handler.setFormatter(logging.Formatter(f"{PROG}: %(levelname)s: %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argument parser. ``--bench`` is the only option."""
    arg_parser = argparse.ArgumentParser(
        prog=PROG,
        description="Run a generated parser over stdin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    arg_parser.add_argument(
        "--bench",
        action="store_true",
        help="Time repeated parses and report throughput on stderr",
    )
    return arg_parser


def main(
    argv: list[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    config: HarnessConfig | None = None,
) -> int:
    """Main entry point.

    Returns:
        Process exit status.
    """
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stderr = stderr if stderr is not None else sys.stderr

    args = build_arg_parser().parse_args(argv)

    try:
        config = config or HarnessConfig.from_env()
    except ValueError as e:
        print(f"{PROG}: {e}", file=stderr)
        return 1

    configure_logging(config.log_level, stderr)

    try:
        parser_cls = load_parser(config.parser)
        data = read_input(stdin)
    except HarnessError as e:
        print(f"{PROG}: {e}", file=stderr)
        return 1

    logger.debug("Read %d bytes, parser %s", len(data), parser_cls.__name__)

    if args.bench:
        run_bench(parser_cls, data, config.bench_iterations, stderr)
    else:
        if stdout is None:
            stdout = sys.stdout
            stdout.reconfigure(encoding="utf-8")
        run_stream(parser_cls, data, stdout)
        stdout.flush()

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
