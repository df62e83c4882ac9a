"""Integration tests for CLI functionality."""

import json
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def run_cli(*args, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "lcalc_pkg.cli", *args],
        capture_output=True,
        text=True,
        input=stdin,
        timeout=10,
        cwd=ROOT,
    )


def test_cli_version():
    """Test --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_health_check():
    """Test --health-check command."""
    result = run_cli("--health-check")
    assert result.returncode == 0
    assert "health check" in result.stdout.lower()
    assert "[FAIL]" not in result.stdout


def test_cli_eval_human():
    """Test key evaluation with human output."""
    result = run_cli("--eval", "5+2==")
    assert result.returncode == 0
    assert result.stdout.strip() == "9"


def test_cli_eval_json():
    """Test key evaluation with JSON output."""
    result = run_cli("--eval", "12.5 x", "--format", "json")
    assert result.returncode == 0
    data = json.loads(result.stdout.strip())
    assert data == {"ok": True, "display": "0", "pending": "12.5 x"}


def test_cli_eval_notification():
    """Test that notifications go to stderr and the display resets."""
    result = run_cli("--eval", "5/0=")
    assert result.returncode == 0
    assert result.stdout.strip() == "0"
    assert "Warning: Cannot divide by zero." in result.stderr


def test_cli_invalid_input():
    """Test CLI with an unknown key."""
    result = run_cli("--eval", "5 plus 2")
    assert result.returncode == 1
    assert "Unknown key: plus" in result.stdout


def test_cli_invalid_input_json():
    result = run_cli("--eval", "5 plus 2", "--format", "json")
    assert result.returncode == 1
    data = json.loads(result.stdout.strip())
    assert data["ok"] is False


def test_cli_empty_input():
    result = run_cli("--eval", "  ")
    assert result.returncode == 1
    assert "Empty input" in result.stdout


def test_cli_repl():
    """Test REPL keeps state between lines."""
    result = run_cli(stdin="5+\n2=\n=\nhelp\nquit\n")
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert any(line.endswith("[5 +] 0") for line in lines)
    assert any(line.endswith(">>> 7") for line in lines)
    assert any(line.endswith(">>> 9") for line in lines)
    assert "Goodbye." in result.stdout


def test_cli_repl_eof():
    result = run_cli(stdin="5+2=\n")
    assert result.returncode == 0
    assert "Goodbye." in result.stdout


def test_cli_help():
    """Test --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "usage" in result.stdout.lower()


def test_root_script():
    result = subprocess.run(
        [sys.executable, "lcalc.py", "-e", "4 +/-"],
        capture_output=True,
        text=True,
        timeout=10,
        cwd=ROOT,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "-4"
