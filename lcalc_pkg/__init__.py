"""LCalc package: calculator engine, key parser, and CLI."""

__all__ = [
    "config",
    "parser",
    "engine",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "validate_keys",
]
