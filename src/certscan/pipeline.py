from __future__ import annotations

import asyncio
import logging

from pydantic import BaseModel, Field

from certscan.errors import OutputError
from certscan.models.results import ScanResult
from certscan.output.writer import StandardWriter

logger = logging.getLogger(__name__)


class EmitSummary(BaseModel):
    submitted: int = 0
    written: int = 0
    failed: int = 0
    errors: list[str] = Field(default_factory=list)


def emit_results(results: list[ScanResult], writer: StandardWriter, *, jobs: int = 8) -> EmitSummary:
    return asyncio.run(emit_results_async(results, writer, jobs=jobs))


async def emit_results_async(
    results: list[ScanResult],
    writer: StandardWriter,
    *,
    jobs: int = 8,
) -> EmitSummary:
    semaphore = asyncio.Semaphore(max(1, jobs))

    async def _bounded_submit(result: ScanResult) -> str | None:
        async with semaphore:
            try:
                await asyncio.to_thread(writer.submit, result)
            except OutputError as exc:
                logger.warning("Failed to emit result for %r:%s: %s", result.host, result.port, exc)
                return str(exc)
            return None

    tasks = [asyncio.create_task(_bounded_submit(result)) for result in results]
    outcomes = await asyncio.gather(*tasks)

    errors = [item for item in outcomes if item is not None]
    summary = EmitSummary(
        submitted=len(results),
        written=len(results) - len(errors),
        failed=len(errors),
        errors=errors,
    )
    logger.info(
        "emit completed: submitted=%s written=%s failed=%s",
        summary.submitted,
        summary.written,
        summary.failed,
    )
    return summary
