"""Parser under test.

The parser generator overwrites this module before a harness run. The
copy shipped here splits input into lines so the harness works out of the
box: one ``Text`` event per line, newline included in the content.
"""

from typing import Iterator

from descent_harness.models import Event
from descent_harness.parsers.base import BaseParser


class Parser(BaseParser):
    """Line parser: ``Text`` per line, trailing newline kept."""

    parser_name = "lines"

    def iter_events(self) -> Iterator[Event]:
        data = self.input
        pos = 0
        while pos < len(data):
            nl = data.find(b"\n", pos)
            end = len(data) if nl == -1 else nl + 1
            yield Event(kind="Text", content=data[pos:end], start=pos, end=end)
            pos = end
