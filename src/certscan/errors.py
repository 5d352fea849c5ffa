from __future__ import annotations


class OutputError(Exception):
    """Base class for result-writer failures."""


class ConstructionError(OutputError):
    pass


class FormatError(OutputError):
    pass


class WriteError(OutputError):
    pass


class CloseError(OutputError):
    pass
