"""Centralized configuration for LCalc.

This module defines:
- The initial display text and notification title
- User-facing messages for each recoverable error
- Button label sets recognized by the key parser
- Regex patterns for display parsing and key-sequence tokenizing

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with LCALC_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("lcalc")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Logging
LOG_LEVEL = os.getenv("LCALC_LOG_LEVEL", "WARNING").upper()

# Display and notifications
INITIAL_DISPLAY = "0"
NOTIFICATION_TITLE = os.getenv("LCALC_NOTIFICATION_TITLE", "Calculator")
NOTIFICATION_SEVERITY = "warning"

MSG_INVALID_NUMBER = "Invalid number on display. Calculator has been cleared."
MSG_DIVIDE_BY_ZERO = "Cannot divide by zero."
MSG_UNKNOWN_OPERATOR = "Unknown operator. Calculator has been cleared."
MSG_OUT_OF_RANGE = "Result is out of range. Calculator has been cleared."

# Button labels (names are matched case-insensitively)
DIGIT_LABELS = frozenset("0123456789")
DECIMAL_LABEL = "."
EQUALS_LABEL = "="
CLEAR_ENTRY_LABELS = frozenset({"CE"})
CLEAR_ALL_LABELS = frozenset({"C", "AC"})
BACKSPACE_LABELS = frozenset({"BS", "<", "⌫"})
TOGGLE_SIGN_LABELS = frozenset({"+/-", "±", "NEG"})

ADD_LABELS = frozenset({"+"})
SUBTRACT_LABELS = frozenset({"-"})
MULTIPLY_LABELS = frozenset({"x", "X", "*"})
DIVIDE_LABELS = frozenset({"/"})

# Optionally signed decimal literal with optional exponent
NUMBER_RE = re.compile(
    r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII
)

# One key per match; longer names must come before their prefixes
KEY_TOKEN_RE = re.compile(
    r"\s*(CE|AC|BS|NEG|C|\+/-|±|⌫|[0-9]|[xX]|[^\sA-Za-z0-9])", re.IGNORECASE
)
