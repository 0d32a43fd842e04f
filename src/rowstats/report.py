"""Report generation — one text block per dataset row."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

import structlog

from src.common.constants import DATA_JOINER, DATA_LABEL, MEAN_LABEL, MEDIAN_LABEL
from src.rowstats.stats import mean, median

# Whole floats at or above this render via repr (1e+15)
_INTEGRAL_LIMIT = 1e15


@dataclass(frozen=True)
class RowSummary:
    """Statistics for a single dataset row, with the row in its original order."""

    data: tuple[float | int, ...]
    median: float
    mean: float


def summarize_row(row: Sequence[float | int]) -> RowSummary:
    return RowSummary(data=tuple(row), median=median(row), mean=mean(row))


def format_number(x: float | int) -> str:
    """Render *x* for humans: ``5.0`` → ``5``, ``4.333…`` keeps full precision."""
    if isinstance(x, float) and x.is_integer() and abs(x) < _INTEGRAL_LIMIT:
        return str(int(x))
    return repr(x) if isinstance(x, float) else str(x)


def format_row(summary: RowSummary) -> list[str]:
    return [
        f"{DATA_LABEL}: {DATA_JOINER.join(format_number(x) for x in summary.data)}",
        f"{MEDIAN_LABEL}: {format_number(summary.median)}",
        f"{MEAN_LABEL}: {format_number(summary.mean)}",
    ]


def run_report(
    dataset: Iterable[Sequence[float | int]],
    out: TextIO | None = None,
) -> list[RowSummary]:
    """Summarise every row of *dataset* in order and write the blocks to *out*.

    Log events go wherever structlog is configured; call
    ``configure_structlog()`` first so they stay off stdout.
    """
    log = structlog.get_logger("report")
    out = out if out is not None else sys.stdout
    summaries: list[RowSummary] = []
    for idx, row in enumerate(dataset):
        summary = summarize_row(row)
        for line in format_row(summary):
            print(line, file=out)
        log.debug(
            "row_summarized",
            row=idx,
            size=len(summary.data),
            median=summary.median,
            mean=summary.mean,
        )
        summaries.append(summary)
    log.info("report_done", rows=len(summaries))
    return summaries
