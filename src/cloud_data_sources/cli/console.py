"""Shared Rich console for CLI output."""

import json
import os
from functools import wraps

from rich.console import Console
from rich.markup import escape

_console = Console()
_error_console = Console(stderr=True)


def _should_print() -> bool:
    """Check if console output is enabled."""
    return os.environ.get("CDS_CONSOLE_ENABLED", "true").lower() == "true"


def _console_output(func):
    """Decorator to check if console output is enabled."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if _should_print():
            return func(*args, **kwargs)

    return wrapper


@_console_output
def print_error(message: str):
    """Print error message to stderr."""
    _error_console.print(f"[red]{escape(message)}[/red]", markup=True, highlight=False)


def print_result(message: str):
    """Print one line of command output (always outputs, ignores CDS_CONSOLE_ENABLED)."""
    _console.print(escape(message), highlight=False)


def print_json(data):
    """Print JSON data (always outputs, ignores CDS_CONSOLE_ENABLED)."""
    print(json.dumps(data, indent=2, default=str))
