#!/usr/bin/env python3
"""
Row Statistics Walkthrough
==========================
Thin entry-point. All logic lives in src.rowstats.

Usage:
  python3 summarize_rows.py
"""

from src.rowstats.cli import main

if __name__ == "__main__":
    main()
