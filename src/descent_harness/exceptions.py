"""Exceptions raised by the harness."""


class HarnessError(Exception):
    """Base class for harness failures."""


class InputReadError(HarnessError):
    """Standard input could not be read."""


class ParserLoadError(HarnessError):
    """A parser target could not be resolved to a parser class.

    Attributes:
        target: The ``module:Class`` string that failed to load.
    """

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"cannot load parser '{target}': {reason}")
