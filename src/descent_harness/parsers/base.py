"""Abstract base class for generated parsers."""

from abc import ABC, abstractmethod
from typing import Callable, Iterator

from descent_harness.models import Event


class BaseParser(ABC):
    """Abstract base class that every generated parser must inherit from.

    A parser is bound to one input buffer at construction and produces
    one full pass over it per ``parse`` call. Subclasses only implement
    ``iter_events``; ``parse`` drives it and hands each event to a callback.

    Example:
        class Parser(BaseParser):
            parser_name = "lines"

            def iter_events(self):
                yield Event(kind="Text", content=self.input, start=0,
                            end=len(self.input))
    """

    parser_name: str = "parser"

    def __init__(self, data: bytes):
        """Bind the parser to an input buffer. No parsing happens yet.

        Args:
            data: Complete input. Empty input is valid.
        """
        self.input = bytes(data)

    @property
    def name(self) -> str:
        """Identifier for this parser.

        Used in benchmarks and logging.
        """
        return self.parser_name

    @abstractmethod
    def iter_events(self) -> Iterator[Event]:
        """Yield every event for the bound input in document order.

        Must terminate on any input, including malformed input.
        """
        pass

    def parse(self, on_event: Callable[[Event], None]) -> None:
        """Run one full pass, invoking ``on_event`` once per event.

        Args:
            on_event: Callback that consumes each event before returning.
        """
        for event in self.iter_events():
            on_event(event)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', size={len(self.input)})"
