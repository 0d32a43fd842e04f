"""Basic statistical helpers (stdlib only, no numpy needed)."""

from __future__ import annotations

from collections.abc import Sequence


class EmptySequenceError(ValueError):
    """Raised when a statistic is requested for an empty sequence."""


def mean(v: Sequence[float | int]) -> float:
    if not v:
        raise EmptySequenceError("mean of an empty sequence is undefined")
    return sum(v) / len(v)


def median(v: Sequence[float | int]) -> float:
    """Middle value of *v*, or the average of the two middle values.

    Sorts a copy; the caller's sequence keeps its order.
    """
    if not v:
        raise EmptySequenceError("median of an empty sequence is undefined")
    s = sorted(v)
    n = len(s)
    return float(s[n // 2]) if n % 2 == 1 else (s[n // 2 - 1] + s[n // 2]) / 2.0
