"""ANSI colour codes and fatal-error helper."""

from __future__ import annotations

import sys


class C:
    """ANSI colour codes (no-op if not a tty)."""

    _tty = sys.stderr.isatty()
    RED = "\033[0;31m" if _tty else ""
    NC = "\033[0m" if _tty else ""


def fail(msg: str) -> None:
    print(f"{C.RED}[FAIL]{C.NC} {msg}", file=sys.stderr)
    sys.exit(1)
