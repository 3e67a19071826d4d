"""Shared fixtures: parser classes used across the test suite."""

from typing import Iterator

import pytest

from descent_harness import Event, Parser
from descent_harness.parsers import BaseParser


class ElementParser(BaseParser):
    """Element-style parser for ``|name text`` lines.

    Emits bracket events around a ``Name`` and optional ``Text``; other
    lines become plain ``Text`` without the newline.
    """

    parser_name = "elements"

    def iter_events(self) -> Iterator[Event]:
        data = self.input
        pos = 0
        while pos < len(data):
            nl = data.find(b"\n", pos)
            line_end = len(data) if nl == -1 else nl
            next_pos = len(data) if nl == -1 else nl + 1

            if data[pos:pos + 1] == b"|":
                i = pos + 1
                yield Event(kind="ElementStart", start=i, end=i)
                name_end = i
                while name_end < line_end and data[name_end:name_end + 1] != b" ":
                    name_end += 1
                yield Event(kind="Name", content=data[i:name_end], start=i, end=name_end)
                text_start = min(name_end + 1, line_end)
                if text_start < line_end:
                    yield Event(
                        kind="Text",
                        content=data[text_start:line_end],
                        start=text_start,
                        end=line_end,
                    )
                yield Event(kind="ElementEnd", start=next_pos, end=next_pos)
            elif pos < line_end:
                yield Event(kind="Text", content=data[pos:line_end], start=pos, end=line_end)

            pos = next_pos


@pytest.fixture
def parser_cls():
    """The generated parser exported by the harness."""
    return Parser


@pytest.fixture
def element_parser_cls():
    """Element-style parser class."""
    return ElementParser


@pytest.fixture(params=[Parser, ElementParser], ids=["lines", "elements"])
def any_parser_cls(request):
    """Parameterized fixture over every parser class."""
    return request.param
