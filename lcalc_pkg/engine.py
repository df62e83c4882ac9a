"""Calculator engine: a pure state-transition function plus a stateful facade.

`step(state, event)` returns a new `EngineState` and, when the event hit an
invalid condition, a `Notification`. Invalid conditions never propagate:
they are reported and the state is reset to its initial value.

Example:
    >>> from lcalc_pkg.engine import Calculator
    >>> calc = Calculator()
    >>> for key in "5+2==":
    ...     _ = calc.press(key)
    >>> calc.display
    '9'
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Callable, Optional

from .config import INITIAL_DISPLAY, MSG_DIVIDE_BY_ZERO, MSG_OUT_OF_RANGE
from .logging_config import get_logger
from .parser import format_number, parse_display, parse_key, parse_operator
from .types import (
    Backspace,
    CalculatorError,
    ClearAll,
    ClearEntry,
    DecimalPoint,
    Digit,
    DivideByZeroError,
    EngineState,
    Equals,
    Event,
    Notification,
    Operator,
    OperatorKind,
    ResultOverflowError,
    StepResult,
    ToggleSign,
)

logger = get_logger("engine")

INITIAL_STATE = EngineState()

NotificationSink = Callable[[Notification], None]


def compute(op: OperatorKind, left: float, right: float) -> float:
    """Apply a binary operator using float arithmetic.

    Raises:
        DivideByZeroError: If op is DIVIDE and right is zero
        ResultOverflowError: If the result is not finite
    """
    if op is OperatorKind.ADD:
        result = left + right
    elif op is OperatorKind.SUBTRACT:
        result = left - right
    elif op is OperatorKind.MULTIPLY:
        result = left * right
    else:
        if right == 0:
            raise DivideByZeroError(MSG_DIVIDE_BY_ZERO)
        result = left / right
    if not math.isfinite(result):
        raise ResultOverflowError(MSG_OUT_OF_RANGE)
    return result


def _digit(state: EngineState, event: Digit) -> EngineState:
    if state.awaiting_right_operand:
        return replace(state, display=event.value, awaiting_right_operand=False)
    if state.display == INITIAL_DISPLAY:
        return replace(state, display=event.value)
    return replace(state, display=state.display + event.value)


def _decimal_point(state: EngineState, event: DecimalPoint) -> EngineState:
    if state.awaiting_right_operand:
        return replace(state, display="0.", awaiting_right_operand=False)
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


def _backspace(state: EngineState, event: Backspace) -> EngineState:
    if len(state.display) > 1:
        return replace(state, display=state.display[:-1])
    return replace(state, display=INITIAL_DISPLAY)


def _clear_entry(state: EngineState, event: ClearEntry) -> EngineState:
    return replace(state, display=INITIAL_DISPLAY, awaiting_right_operand=False)


def _clear_all(state: EngineState, event: ClearAll) -> EngineState:
    return INITIAL_STATE


def _toggle_sign(state: EngineState, event: ToggleSign) -> EngineState:
    value = parse_display(state.display)
    return replace(state, display=format_number(-value))


def _operator(state: EngineState, event: Operator) -> EngineState:
    kind = parse_operator(event.label)

    # Second operator before any right-operand digit: correct the operator only
    if state.operator is not None and state.awaiting_right_operand:
        return replace(state, operator=kind)

    value = parse_display(state.display)
    return replace(
        state,
        display=INITIAL_DISPLAY,
        left_operand=value,
        operator=kind,
        awaiting_right_operand=True,
    )


def _equals(state: EngineState, event: Equals) -> EngineState:
    value = parse_display(state.display)

    if state.operator is None:
        if state.last_operator is None or state.last_operand is None:
            return state
        result = compute(state.last_operator, value, state.last_operand)
        return replace(
            state,
            display=format_number(result),
            left_operand=result,
            awaiting_right_operand=False,
        )

    state = replace(state, last_operator=state.operator, last_operand=value)
    result = compute(state.operator, state.left_operand, value)
    return replace(
        state,
        display=format_number(result),
        left_operand=result,
        operator=None,
        awaiting_right_operand=False,
    )


_HANDLERS: dict[type, Callable[[EngineState, Event], EngineState]] = {
    Digit: _digit,
    DecimalPoint: _decimal_point,
    Backspace: _backspace,
    ClearEntry: _clear_entry,
    ClearAll: _clear_all,
    ToggleSign: _toggle_sign,
    Operator: _operator,
    Equals: _equals,
}


def step(state: EngineState, event: Event) -> StepResult:
    """Apply one input event to a state.

    Args:
        state: Current engine state
        event: Input event (Digit, DecimalPoint, Operator, Equals, ...)

    Returns:
        StepResult with the new state and, on a recoverable error, the
        notification to show. After an error the state is INITIAL_STATE.

    Raises:
        TypeError: If event is not one of the event types
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unsupported event: {event!r}")
    try:
        return StepResult(state=handler(state, event))
    except CalculatorError as e:
        return StepResult(
            state=INITIAL_STATE,
            notification=Notification(message=e.message, code=e.code),
        )


def pending_expression(state: EngineState) -> str:
    """Return the expression being built, e.g. "5 +", or "" if none is pending."""
    if state.operator is None:
        return ""
    return f"{format_number(state.left_operand)} {state.operator.value}"


class Calculator:
    """Stateful calculator driven by button presses.

    The UI collaborator delivers labels through `press`, reads and may
    overwrite `display`, and receives notifications through `notify`.
    """

    def __init__(self, notify: Optional[NotificationSink] = None) -> None:
        self._state = INITIAL_STATE
        self._notify = notify

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    @display.setter
    def display(self, text: str) -> None:
        # Direct writes bypass the engine; the text is validated on next read
        self._state = replace(self._state, display=str(text))

    @property
    def pending_expression(self) -> str:
        return pending_expression(self._state)

    def reset(self) -> None:
        self._state = INITIAL_STATE

    def press(self, label: str) -> str:
        """Press a button by label and return the new display text."""
        return self.dispatch(parse_key(label))

    def dispatch(self, event: Event) -> str:
        """Apply an event and return the new display text."""
        result = step(self._state, event)
        self._state = result.state
        logger.debug("%r -> display=%r", event, self._state.display)
        if result.notification is not None:
            logger.info(
                "%s (%s); state reset",
                result.notification.message,
                result.notification.code,
            )
            if self._notify is not None:
                self._notify(result.notification)
        return self._state.display
