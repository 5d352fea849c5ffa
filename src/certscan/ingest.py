from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from certscan.models.results import ScanResult

logger = logging.getLogger(__name__)


@dataclass
class SkippedLine:
    line: int
    message: str


@dataclass
class LoadResult:
    results: list[ScanResult] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)


def parse_results(lines: Iterable[str]) -> LoadResult:
    loaded = LoadResult()
    for number, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text:
            continue
        try:
            loaded.results.append(ScanResult.model_validate_json(text))
        except ValidationError as exc:
            message = f"{exc.error_count()} validation error(s): {exc.errors()[0]['msg']}"
            logger.warning("Skipping invalid scan result on line %s: %s", number, message)
            loaded.skipped.append(SkippedLine(line=number, message=message))
    return loaded


def load_results(source: str | Path | TextIO) -> LoadResult:
    if isinstance(source, (str, Path)):
        with Path(source).open(encoding="utf-8") as handle:
            return parse_results(handle)
    return parse_results(source)
