"""Shared constants for the row statistics walkthrough."""

import os

# ── Report layout ────────────────────────────────────────────────────────────
DATA_LABEL = "Data"
MEDIAN_LABEL = "Median"
MEAN_LABEL = "Mean"
DATA_JOINER = ","

# Logging (stderr only; stdout carries the report)
LOG_LEVEL = os.environ.get("ROWSTATS_LOG_LEVEL", "WARNING")
