"""Type definitions: operators, input events, engine state, and result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .config import INITIAL_DISPLAY, NOTIFICATION_SEVERITY, NOTIFICATION_TITLE


class OperatorKind(str, Enum):
    """Binary operators; the value is the symbol shown in readouts."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"


# Input events. Each variant carries only its semantic payload.


@dataclass(frozen=True)
class Digit:
    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1 or self.value not in "0123456789":
            raise ValueError(f"Digit must be a single character 0-9, got {self.value!r}")


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class ClearEntry:
    pass


@dataclass(frozen=True)
class ClearAll:
    pass


@dataclass(frozen=True)
class ToggleSign:
    pass


@dataclass(frozen=True)
class Operator:
    """An operator button press; the label is parsed by the engine."""

    label: str


@dataclass(frozen=True)
class Equals:
    pass


Event = Union[
    Digit, DecimalPoint, Backspace, ClearEntry, ClearAll, ToggleSign, Operator, Equals
]


@dataclass(frozen=True)
class EngineState:
    """Complete calculator state. Transitions return new instances."""

    display: str = INITIAL_DISPLAY
    left_operand: float = 0.0
    operator: OperatorKind | None = None
    awaiting_right_operand: bool = False
    last_operator: OperatorKind | None = None
    last_operand: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "display": self.display,
            "left_operand": self.left_operand,
            "operator": self.operator.value if self.operator else None,
            "awaiting_right_operand": self.awaiting_right_operand,
            "last_operator": self.last_operator.value if self.last_operator else None,
            "last_operand": self.last_operand,
        }


@dataclass(frozen=True)
class Notification:
    """A user-facing message for the notification sink."""

    message: str
    code: str
    title: str = NOTIFICATION_TITLE
    severity: str = NOTIFICATION_SEVERITY

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "title": self.title,
            "severity": self.severity,
        }


@dataclass(frozen=True)
class StepResult:
    """Outcome of applying one event to a state."""

    state: EngineState
    notification: Notification | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"state": self.state.to_dict()}
        if self.notification is not None:
            result_dict["notification"] = self.notification.to_dict()
        return result_dict


@dataclass
class SessionResult:
    """Result of running a key sequence through a fresh calculator."""

    ok: bool
    display: str | None = None
    pending: str | None = None
    notifications: list[str] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.display is not None:
            result_dict["display"] = self.display
        if self.pending:
            result_dict["pending"] = self.pending
        if self.notifications:
            result_dict["notifications"] = self.notifications
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"SessionResult(ok=False, error={self.error!r})"
        parts = [f"ok={self.ok}", f"display={self.display!r}"]
        if self.pending:
            parts.append(f"pending={self.pending!r}")
        if self.notifications:
            parts.append(f"notifications={self.notifications!r}")
        return f"SessionResult({', '.join(parts)})"


class ValidationError(Exception):
    """Raised when key input cannot be turned into events."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class CalculatorError(Exception):
    """Base for conditions the engine recovers from with a notification and reset."""

    default_code = "CALCULATOR_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(CalculatorError):
    """Raised when the display text is not a finite number."""

    default_code = "PARSE_ERROR"


class UnknownOperatorError(CalculatorError):
    """Raised when an operator label is not one of + - x / (or X, *)."""

    default_code = "UNKNOWN_OPERATOR"


class DivideByZeroError(CalculatorError):
    """Raised when dividing by a zero right operand or cached last operand."""

    default_code = "DIVIDE_BY_ZERO"


class ResultOverflowError(CalculatorError):
    """Raised when an arithmetic result is not finite."""

    default_code = "OVERFLOW"
