"""Main entry point for running lcalc_pkg as a module.

This allows running LCalc with:
    python -m lcalc_pkg
    python -m lcalc_pkg --health-check
    python -m lcalc_pkg -e "5+2="

This is equivalent to running:
    python -m lcalc_pkg.cli
    python lcalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
