"""Parser contract and loading."""

from .base import BaseParser
from .loader import load_parser

__all__ = [
    "BaseParser",
    "load_parser",
]
