"""CLI entrypoint for the row statistics walkthrough."""

from __future__ import annotations

import argparse

from src.common.console import fail
from src.common.constants import LOG_LEVEL
from src.common.logging import configure_structlog
from src.rowstats.dataset import load_dataset
from src.rowstats.report import run_report
from src.rowstats.stats import EmptySequenceError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print the median and mean of every row in the bundled dataset.",
        epilog="Set ROWSTATS_LOG_LEVEL=DEBUG for per-row log events on stderr.",
    )
    parser.parse_args(argv)

    configure_structlog(LOG_LEVEL)

    try:
        run_report(load_dataset())
    except EmptySequenceError as exc:
        fail(f"Cannot summarise dataset: {exc}")
