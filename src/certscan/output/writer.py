from __future__ import annotations

import logging
import sys
import threading
from types import TracebackType
from typing import BinaryIO

from certscan.errors import CloseError, ConstructionError, WriteError
from certscan.models.config import PresentationConfig
from certscan.models.results import ScanResult
from certscan.output.ansi import strip_ansi
from certscan.output.formatter import RecordFormatter, create_formatter
from certscan.output.sinks import FileSink

logger = logging.getLogger(__name__)

LINE_TERMINATOR = b"\n"


class StandardWriter:
    """Formats scan results and writes them to stdout and an optional file.

    Formatting and both writes for one record happen under a single lock, so
    records from concurrent ``submit`` calls never interleave and appear in the
    same order in both sinks. ``close`` is not synchronized with ``submit``;
    callers must finish submitting first.
    """

    def __init__(
        self,
        config: PresentationConfig,
        *,
        primary: BinaryIO | None = None,
        formatter: RecordFormatter | None = None,
    ) -> None:
        self.config = config
        self.formatter = formatter or create_formatter(config)
        self._primary = primary if primary is not None else sys.stdout.buffer
        self._lock = threading.Lock()
        self._file_sink: FileSink | None = None
        if config.output_file is not None:
            try:
                self._file_sink = FileSink(config.output_file)
            except OSError as exc:
                raise ConstructionError(f"could not create output file {config.output_file}: {exc}") from exc
            logger.info("Mirroring results to %s", config.output_file)

    def submit(self, result: ScanResult) -> None:
        with self._lock:
            data = self.formatter.format(result).rstrip(LINE_TERMINATOR)
            self._write_primary(data)
            if self._file_sink is None:
                return
            if not self.config.json_mode:
                data = strip_ansi(data)
            try:
                self._file_sink.write(data + LINE_TERMINATOR)
            except (OSError, ValueError) as exc:
                raise WriteError(f"could not write to output file {self.config.output_file}: {exc}") from exc

    def close(self) -> None:
        if self._file_sink is None:
            return
        try:
            self._file_sink.close()
        except OSError as exc:
            raise CloseError(f"could not close output file {self.config.output_file}: {exc}") from exc

    def _write_primary(self, data: bytes) -> None:
        try:
            self._primary.write(data + LINE_TERMINATOR)
            self._primary.flush()
        except (OSError, ValueError) as exc:
            logger.warning("Could not write result to standard output: %s", exc)

    def __enter__(self) -> StandardWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def create_writer(config: PresentationConfig, *, primary: BinaryIO | None = None) -> StandardWriter:
    return StandardWriter(config, primary=primary)
