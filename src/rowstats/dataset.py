"""The fixed dataset the walkthrough summarises."""

from __future__ import annotations

Row = tuple[float | int, ...]

# Rows are reported in this order; position is their only identity.
DATASET: tuple[Row, ...] = (
    (1, 4, 8, 5, 10, 6, 5, 2, 5, 10),
    (1, 3, 8, 7, 8, 7, 4, 2, 4, 10),
    (1, 1, 2, 2, 5, 6, 6, 8, 8),
)


def load_dataset() -> tuple[Row, ...]:
    return DATASET
