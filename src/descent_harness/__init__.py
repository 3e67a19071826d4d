"""Test harness for descent-generated parsers.

The ``generated`` module holds the parser under test; the generator
rewrites it before a run. It is re-exported here as ``Parser`` so
consumers never import the generated module directly.
"""

from .models import Event, Measurement
from .parsers import BaseParser, load_parser
from .generated import Parser

__all__ = [
    "Event",
    "Measurement",
    "BaseParser",
    "Parser",
    "load_parser",
]
