#!/usr/bin/env python3
"""
LCalc - Desktop calculator engine

Main entry point for the LCalc calculator. This file serves as a thin
wrapper that delegates all functionality to the lcalc_pkg package.

Usage:
    python lcalc.py                    # Interactive REPL
    python lcalc.py -e "5+2="          # Press a key sequence
    python lcalc.py --help             # Show help
"""

from __future__ import annotations

import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for LCalc.

    Delegates all functionality to the lcalc_pkg.cli module, which handles
    argument parsing, key dispatch, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from lcalc_pkg.cli import main_entry

        return main_entry(argv)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import lcalc_pkg: {e}")
        print("Please ensure the package is installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
