"""Public API for LCalc - returns structured objects without side effects."""

from __future__ import annotations

from .engine import INITIAL_STATE, pending_expression, step
from .parser import parse_keys
from .types import SessionResult, ValidationError


def evaluate(keys: str) -> SessionResult:
    """Run a key sequence through a fresh calculator.

    Args:
        keys: Key sequence (e.g., "5+2=", "12.5 x 3 =", "5/0=")

    Returns:
        SessionResult with the final display, pending expression, and any
        notifications raised along the way

    Example:
        >>> from lcalc_pkg.api import evaluate
        >>> evaluate("5+2==").display
        '9'
        >>> evaluate("5/0=").notifications
        ['Cannot divide by zero.']
    """
    try:
        events = parse_keys(keys)
    except ValidationError as e:
        return SessionResult(ok=False, error=str(e))

    state = INITIAL_STATE
    notifications: list[str] = []
    for event in events:
        result = step(state, event)
        state = result.state
        if result.notification is not None:
            notifications.append(result.notification.message)
    return SessionResult(
        ok=True,
        display=state.display,
        pending=pending_expression(state),
        notifications=notifications,
    )


def validate_keys(keys: str) -> tuple[bool, str | None]:
    """Check that a key sequence can be tokenized without running it.

    Example:
        >>> from lcalc_pkg.api import validate_keys
        >>> validate_keys("5 + 2 =")
        (True, None)
        >>> validate_keys("5 plus 2")
        (False, 'Unknown key: plus')
    """
    try:
        parse_keys(keys)
        return True, None
    except ValidationError as e:
        return False, str(e)
