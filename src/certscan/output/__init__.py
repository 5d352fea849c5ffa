"""Result formatting and output sinks."""

from certscan.output.ansi import strip_ansi
from certscan.output.colors import Colorizer, ColorTag
from certscan.output.formatter import (
    JSONFormatter,
    RecordFormatter,
    TextFormatter,
    available_formatters,
    create_formatter,
    register_formatter,
)
from certscan.output.names import normalize_cert_names
from certscan.output.sinks import FileSink
from certscan.output.writer import StandardWriter, create_writer

__all__ = [
    "ColorTag",
    "Colorizer",
    "FileSink",
    "JSONFormatter",
    "RecordFormatter",
    "StandardWriter",
    "TextFormatter",
    "available_formatters",
    "create_formatter",
    "create_writer",
    "normalize_cert_names",
    "register_formatter",
    "strip_ansi",
]
