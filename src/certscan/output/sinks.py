from __future__ import annotations

from pathlib import Path
from typing import BinaryIO


class FileSink:
    """Append-only binary file opened once for the lifetime of a writer."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._handle: BinaryIO | None = self.path.open("ab")

    def write(self, data: bytes) -> None:
        if self._handle is None:
            raise ValueError(f"write to closed file sink: {self.path}")
        self._handle.write(data)
        self._handle.flush()

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        handle.close()

    @property
    def closed(self) -> bool:
        return self._handle is None
