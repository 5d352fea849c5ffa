from __future__ import annotations

import re
from typing import overload

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")
ANSI_ESCAPE_BYTES_RE = re.compile(rb"\x1b\[[0-9;]*[a-zA-Z]")


@overload
def strip_ansi(data: bytes) -> bytes: ...


@overload
def strip_ansi(data: str) -> str: ...


def strip_ansi(data: bytes | str) -> bytes | str:
    if isinstance(data, bytes):
        return ANSI_ESCAPE_BYTES_RE.sub(b"", data)
    return ANSI_ESCAPE_RE.sub("", data)
