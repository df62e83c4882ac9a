"""Tests for logging setup and engine log output."""

import logging

from lcalc_pkg.engine import Calculator
from lcalc_pkg.logging_config import StructuredFormatter, get_logger, setup_logging


def test_get_logger_namespace():
    assert get_logger("engine").name == "lcalc.engine"


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "lcalc.log"
    logger = setup_logging(level="debug", log_file=str(log_file))
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        get_logger("test").info("hello")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "[INFO] lcalc.test: hello" in content
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_structured_formatter():
    record = logging.LogRecord("lcalc.x", logging.WARNING, __file__, 1, "msg %s", ("a",), None)
    assert StructuredFormatter().format(record).endswith("[WARNING] lcalc.x: msg a")


def test_notification_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="lcalc")
    calc = Calculator()
    for key in "5/0=":
        calc.press(key)
    assert any(
        "Cannot divide by zero." in r.getMessage() and "DIVIDE_BY_ZERO" in r.getMessage()
        for r in caplog.records
    )


def test_presses_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="lcalc")
    Calculator().press("7")
    assert any("display='7'" in r.getMessage() for r in caplog.records)
