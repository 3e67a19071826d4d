"""Resolve ``module:Class`` targets to parser classes."""

import importlib
import logging

from descent_harness.exceptions import ParserLoadError
from descent_harness.parsers.base import BaseParser

logger = logging.getLogger(__name__)

DEFAULT_CLASS = "Parser"


def load_parser(target: str) -> type[BaseParser]:
    """Import a parser class from a ``module:Class`` target.

    The class part defaults to ``Parser``, the name the generator uses.

    Args:
        target: e.g. ``"descent_harness.generated:Parser"``.

    Returns:
        The parser class (not an instance).

    Raises:
        ParserLoadError: If the module cannot be imported, the attribute is
            missing, or it is not a BaseParser subclass.
    """
    module_name, _, class_name = target.strip().partition(":")
    class_name = class_name or DEFAULT_CLASS
    if not module_name:
        raise ParserLoadError(target, "empty module name")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ParserLoadError(target, str(e)) from e

    parser_cls = getattr(module, class_name, None)
    if parser_cls is None:
        raise ParserLoadError(target, f"module has no attribute '{class_name}'")
    if not (isinstance(parser_cls, type) and issubclass(parser_cls, BaseParser)):
        raise ParserLoadError(target, f"'{class_name}' is not a BaseParser subclass")

    logger.debug("Loaded parser %s from %s", parser_cls.__name__, module_name)
    return parser_cls
