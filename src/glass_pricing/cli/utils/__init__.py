"""CLI utilities package."""

from .helpers import (
    ExitCode,
    exit_code_for,
    format_money,
    get_env_vars,
    handle_error,
    load_config,
    parse_line_spec,
    resolve_format,
)

__all__ = [
    "ExitCode",
    "exit_code_for",
    "format_money",
    "get_env_vars",
    "handle_error",
    "load_config",
    "parse_line_spec",
    "resolve_format",
]
