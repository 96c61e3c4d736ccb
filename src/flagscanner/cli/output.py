"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import json
import re
import typer
from typing import Any, Optional
from rich.console import Console as RichConsole
from rich.table import Table

from flagscanner.cli.config import CLIConfig

_MARKUP_RE = re.compile(r'\[/?[a-z ]*?\]')


class MachineAwareConsole:
    """
    A Console wrapper that automatically adapts output based on machine mode.
    Acts as a drop-in replacement for rich.console.Console.
    """

    def __init__(self):
        self._rich_console = RichConsole()

    def print(self, *args, **kwargs):
        """Print that respects machine mode."""
        if CLIConfig.is_machine_mode():
            for arg in args:
                if isinstance(arg, str):
                    # Remove rich markup
                    plain = _MARKUP_RE.sub('', arg).strip()
                    if plain:
                        typer.echo(plain)
                elif isinstance(arg, Table) or hasattr(arg, '__rich__'):
                    # Tables are human-only; machine mode uses plain lines or --json
                    pass
                elif arg:
                    typer.echo(str(arg))
        else:
            self._rich_console.print(*args, **kwargs)

    def __getattr__(self, name):
        """Delegate all other attributes to the rich console."""
        return getattr(self._rich_console, name)


_console = MachineAwareConsole()


def echo(message: str = "", **kwargs) -> None:
    """
    Print a plain message on stdout.
    """
    typer.echo(message, **kwargs)


def print_json(data: Any, minified: bool = None) -> None:
    """
    Print JSON data respecting machine mode.
    In machine mode, always minifies. In human mode, pretty prints.
    """
    if minified is None:
        minified = CLIConfig.is_machine_mode()

    if minified:
        echo(json.dumps(data, separators=(',', ':')))
    else:
        echo(json.dumps(data, indent=2))


def print_table(table: Table) -> None:
    """
    Print a rich table. Only meaningful in human mode.
    """
    if not CLIConfig.is_machine_mode():
        _console.print(table)


def print_error(message: str, code: Optional[str] = None,
                input_value: Optional[str] = None, suggest: Optional[list] = None) -> None:
    """
    Print an error message respecting machine mode.
    In machine mode, outputs a structured JSON error object.

    Args:
        message: Error message
        code: Error code (e.g., "UNKNOWN_STYLE")
        input_value: The input that caused the error
        suggest: List of suggestions
    """
    if CLIConfig.is_machine_mode():
        print_json(structured_error(code or "ERROR", message, input_value, suggest))
    else:
        typer.echo(f"Error: {message}", err=True)
        if suggest:
            typer.echo(f"Suggestions: {', '.join(suggest)}", err=True)


def structured_error(code: str, message: str, input_value: Optional[str] = None,
                     suggestions: Optional[list] = None) -> dict:
    """
    Create a structured error object for machine mode.
    """
    error_obj = {
        "status": "error",
        "code": code,
        "message": message
    }
    if input_value is not None:
        error_obj["input"] = input_value
    if suggestions:
        error_obj["suggestions"] = suggestions
    return error_obj


def get_console() -> MachineAwareConsole:
    """
    Get the console instance for advanced usage.
    """
    return _console
