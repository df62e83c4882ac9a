"""Test error codes carried by errors and notifications."""

import unittest

from lcalc_pkg.engine import step
from lcalc_pkg.parser import parse_display, parse_key, parse_operator, split_keys
from lcalc_pkg.types import (
    CalculatorError,
    DivideByZeroError,
    EngineState,
    Equals,
    OperatorKind,
    ParseError,
    ResultOverflowError,
    UnknownOperatorError,
    ValidationError,
)


class TestErrorCodes(unittest.TestCase):
    """Test that errors carry stable codes."""

    def test_parse_error_code(self):
        try:
            parse_display("x")
            self.fail("Should have raised ParseError")
        except ParseError as e:
            self.assertEqual(e.code, "PARSE_ERROR")
            self.assertIn("invalid number", str(e).lower())

    def test_unknown_operator_code(self):
        with self.assertRaises(UnknownOperatorError) as ctx:
            parse_operator("%")
        self.assertEqual(ctx.exception.code, "UNKNOWN_OPERATOR")

    def test_engine_errors_share_base(self):
        for cls in (ParseError, UnknownOperatorError, DivideByZeroError, ResultOverflowError):
            self.assertTrue(issubclass(cls, CalculatorError))
        self.assertFalse(issubclass(ValidationError, CalculatorError))

    def test_code_override(self):
        e = ParseError("custom", code="CUSTOM")
        self.assertEqual(e.code, "CUSTOM")
        self.assertEqual(str(e), "custom")

    def test_validation_codes(self):
        with self.assertRaises(ValidationError) as ctx:
            parse_key("")
        self.assertEqual(ctx.exception.code, "EMPTY_KEY")
        with self.assertRaises(ValidationError) as ctx:
            split_keys("1 + two")
        self.assertEqual(ctx.exception.code, "UNKNOWN_KEY")

    def test_notification_code_from_step(self):
        state = EngineState(
            display="0", operator=OperatorKind.DIVIDE, left_operand=1.0
        )
        result = step(state, Equals())
        self.assertEqual(result.notification.code, "DIVIDE_BY_ZERO")
        self.assertEqual(
            result.to_dict()["notification"],
            {
                "message": "Cannot divide by zero.",
                "code": "DIVIDE_BY_ZERO",
                "title": "Calculator",
                "severity": "warning",
            },
        )

    def test_step_result_to_dict_without_notification(self):
        result = step(EngineState(display="5"), Equals())
        self.assertEqual(
            result.to_dict(),
            {
                "state": {
                    "display": "5",
                    "left_operand": 0.0,
                    "operator": None,
                    "awaiting_right_operand": False,
                    "last_operator": None,
                    "last_operand": None,
                }
            },
        )


if __name__ == "__main__":
    unittest.main()
