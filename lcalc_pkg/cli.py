from __future__ import annotations

import argparse
import json
import sys

from .config import LOG_LEVEL, VERSION
from .engine import Calculator
from .logging_config import get_logger, setup_logging
from .types import Notification, ValidationError

logger = get_logger("cli")


def _health_check() -> int:
    """Run health check against the documented calculator behaviors.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    from .api import evaluate

    checks = [
        ("No leading zero", "07", "7", 0),
        ("Single decimal point", ".5.", "0.5", 0),
        ("Backspace never empties", "5<<", "0", 0),
        ("Basic addition", "5+2=", "7", 0),
        ("Repeated equals", "5+2===", "11", 0),
        ("Operator replacement", "5+-2=", "3", 0),
        ("Divide by zero resets", "5/0=", "0", 1),
        ("Clear entry keeps operation", "5+3 CE 4=", "9", 0),
        ("Sign toggle round-trip", "4 +/- +/-", "4", 0),
    ]
    checks_passed = 0
    checks_failed = 0

    print("Running LCalc health check...")
    print("-" * 50)

    for name, keys, expected, expected_notifications in checks:
        result = evaluate(keys)
        if (
            result.ok
            and result.display == expected
            and len(result.notifications) == expected_notifications
        ):
            print(f"[OK] {name}")
            checks_passed += 1
        else:
            print(f"[FAIL] {name}: {keys!r} expected {expected!r}, got {result!r}")
            checks_failed += 1

    print("-" * 50)
    print(f"Checks passed: {checks_passed}, failed: {checks_failed}")
    return 0 if checks_failed == 0 else 1


def _print_notification(notification: Notification) -> None:
    print(f"Warning: {notification.message}", file=sys.stderr)


def run_keys(calc: Calculator, keys: str) -> None:
    """Split a key sequence and press each key on the calculator.

    Raises:
        ValidationError: If the sequence contains an unknown key
    """
    from .parser import parse_keys

    events = parse_keys(keys)
    logger.debug("Pressing %d keys from %r", len(events), keys)
    for event in events:
        calc.dispatch(event)


def print_help_text() -> None:
    """Print help text for REPL commands."""
    print(
        f"""LCalc version {VERSION}

Type keys and press Enter; they are pressed in order.
  0-9 .          digits and decimal point
  + - x * /      operators (x and * both multiply)
  =              equals (press again to repeat the last operation)
  CE             clear entry
  C, AC          clear all
  BS, <          backspace
  +/-, NEG       toggle sign

Examples:
  5+2=           -> 7
  =              -> 9 (repeats + 2)
  12.5 x 3 =     -> 37.5

Commands: help, quit, exit"""
    )


def repl_loop() -> None:
    """Interactive REPL loop with graceful interrupt handling."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    calc = Calculator(notify=_print_notification)
    print("LCalc - type 'help' for keys, 'quit' to exit.")
    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue
        if raw.lower() in ("quit", "exit"):
            print("Goodbye.")
            break
        if raw.lower() == "help":
            print_help_text()
            continue
        try:
            run_keys(calc, raw)
        except ValidationError as e:
            print("Error:", e)
            continue
        pending = calc.pending_expression
        if pending:
            print(f"[{pending}] {calc.display}")
        else:
            print(calc.display)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for LCalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="lcalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Press a key sequence and print the display (non-interactive)",
        dest="eval_keys",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=LOG_LEVEL if LOG_LEVEL in ("DEBUG", "INFO", "WARNING", "ERROR") else "WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check against the documented calculator behaviors",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_keys is not None:
        keys = args.eval_keys.strip()
        if not keys:
            print("Error: Empty input. Please enter a key sequence such as 5+2=.")
            return 1
        if args.format == "json":
            from .api import evaluate

            result = evaluate(keys)
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
            return 0 if result.ok else 1
        calc = Calculator(notify=_print_notification)
        try:
            run_keys(calc, keys)
        except ValidationError as e:
            print("Error:", e)
            return 1
        print(calc.display)
        return 0

    repl_loop()
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
