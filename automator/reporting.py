"""Plain summaries of run results for logging and output."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from automator.models.result import Result
from automator.models.status import Status

STATUS_SYMBOLS = {
    Status.SUCCESS: "✅",
    Status.FAILURE: "❌",
    Status.ERROR: "❗",
}


@dataclass(frozen=True, kw_only=True)
class ResultSummary:
    """Snapshot of a result's outcome, detached from the live result."""

    id: Any
    status: Status
    duration: float
    entries: int = 0
    data: Mapping[Any, Any] = field(default_factory=dict)


def summarize(result: Result) -> ResultSummary:
    """Take a snapshot of a result."""
    return ResultSummary(
        id=result.id,
        status=result.status,
        duration=result.timer.total,
        entries=len(result.logger.entries),
        data=dict(result.data_log),
    )


def log_result_summary(log: logging.Logger, summaries: Sequence[ResultSummary]) -> None:
    """Log a formatted summary line for each result."""
    log.info("=" * 80)
    log.info("Run Results Summary:")
    log.info("=" * 80)

    for summary in summaries:
        log.info(
            "%s %s: %s (%.2fs)",
            STATUS_SYMBOLS.get(summary.status, "?"),
            summary.id,
            summary.status,
            summary.duration,
        )


def format_output(summaries: Sequence[ResultSummary]) -> dict[str, Any]:
    """Format result summaries as a JSON-compatible mapping."""
    results: list[dict[str, Any]] = [
        {
            "id": summary.id,
            "status": str(summary.status),
            "duration": summary.duration,
            "data": dict(summary.data),
        }
        for summary in summaries
    ]

    return {
        "total": len(results),
        "passed": sum(1 for r in results if r["status"] == Status.SUCCESS),
        "failed": sum(1 for r in results if r["status"] == Status.FAILURE),
        "errors": sum(1 for r in results if r["status"] == Status.ERROR),
        "results": results,
    }
