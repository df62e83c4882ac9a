"""Display parsing, number rendering, and button-label parsing."""

from __future__ import annotations

import math

from .config import (
    ADD_LABELS,
    BACKSPACE_LABELS,
    CLEAR_ALL_LABELS,
    CLEAR_ENTRY_LABELS,
    DECIMAL_LABEL,
    DIGIT_LABELS,
    DIVIDE_LABELS,
    EQUALS_LABEL,
    KEY_TOKEN_RE,
    MSG_INVALID_NUMBER,
    MSG_UNKNOWN_OPERATOR,
    MULTIPLY_LABELS,
    NUMBER_RE,
    SUBTRACT_LABELS,
    TOGGLE_SIGN_LABELS,
)
from .types import (
    Backspace,
    ClearAll,
    ClearEntry,
    DecimalPoint,
    Digit,
    Equals,
    Event,
    Operator,
    OperatorKind,
    ParseError,
    ToggleSign,
    UnknownOperatorError,
    ValidationError,
)

_OPERATOR_LABELS = (
    (ADD_LABELS, OperatorKind.ADD),
    (SUBTRACT_LABELS, OperatorKind.SUBTRACT),
    (MULTIPLY_LABELS, OperatorKind.MULTIPLY),
    (DIVIDE_LABELS, OperatorKind.DIVIDE),
)


def parse_display(text: str) -> float:
    """Parse display text as a finite real number.

    Args:
        text: Current display text (e.g., "12.5", "-0.", "1e+16")

    Returns:
        The parsed value

    Raises:
        ParseError: If the text is empty, non-numeric, or not finite
    """
    if not isinstance(text, str) or not NUMBER_RE.match(text):
        raise ParseError(MSG_INVALID_NUMBER)
    try:
        value = float(text)
    except ValueError:
        raise ParseError(MSG_INVALID_NUMBER)
    if not math.isfinite(value):
        raise ParseError(MSG_INVALID_NUMBER)
    return value


def format_number(value: float) -> str:
    """Render a value as the shortest text that parses back to the same double.

    Integral values drop the trailing ".0", so 7.0 renders as "7".
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def parse_operator(label: str) -> OperatorKind:
    """Parse an operator button label.

    Raises:
        UnknownOperatorError: If the label is not + - x X * or /
    """
    stripped = label.strip()
    for labels, kind in _OPERATOR_LABELS:
        if stripped in labels:
            return kind
    raise UnknownOperatorError(MSG_UNKNOWN_OPERATOR)


def parse_key(label: str) -> Event:
    """Map a button label to an input event.

    Named keys (CE, C, AC, BS, NEG) are case-insensitive. Anything that is not
    a digit, decimal point, equals, or named key is passed through as an
    operator label so the engine can reject unknown operators itself.

    Raises:
        ValidationError: If the label is empty
    """
    stripped = label.strip()
    if not stripped:
        raise ValidationError("Empty key label", code="EMPTY_KEY")
    upper = stripped.upper()
    if stripped in DIGIT_LABELS:
        return Digit(stripped)
    if stripped == DECIMAL_LABEL:
        return DecimalPoint()
    if stripped == EQUALS_LABEL:
        return Equals()
    if upper in CLEAR_ENTRY_LABELS:
        return ClearEntry()
    if upper in CLEAR_ALL_LABELS:
        return ClearAll()
    if upper in BACKSPACE_LABELS:
        return Backspace()
    if upper in TOGGLE_SIGN_LABELS:
        return ToggleSign()
    return Operator(stripped)


def split_keys(text: str) -> list[str]:
    """Split a key sequence such as "12.5 x 3 =" into button labels.

    Raises:
        ValidationError: If the text contains a word that is not a known key
    """
    keys: list[str] = []
    pos = 0
    end = len(text.rstrip())
    while pos < end:
        match = KEY_TOKEN_RE.match(text, pos)
        if match is None:
            bad = text[pos:].split()[0]
            raise ValidationError(f"Unknown key: {bad}", code="UNKNOWN_KEY")
        keys.append(match.group(1))
        pos = match.end()
    return keys


def parse_keys(text: str) -> list[Event]:
    """Tokenize a key sequence and map every key to an event."""
    return [parse_key(key) for key in split_keys(text)]
