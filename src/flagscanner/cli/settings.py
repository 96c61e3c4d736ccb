"""
User configuration commands for the flagscanner CLI.

- show: print the merged configuration
- set: store a value in the project's .flagscanner/config.json
"""

import json

import typer

from flagscanner.logging_config import logger
from flagscanner.user_config import get_user_config
from .output import echo, print_json

app = typer.Typer()


def _parse_value(raw: str):
    """
    Interpret a command-line value as JSON when possible, else as a string.

    '["-", "+"]' -> list, 'null' -> None, 'gnu' -> "gnu"
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@app.command()
def show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """
    Shows the merged user configuration (defaults, global, local).
    """
    config = get_user_config()
    if json_output:
        print_json(config.to_dict())
        return

    echo(f"Global: {config.global_config_path}")
    echo(f"Local:  {config.local_config_path}")
    echo(json.dumps(config.to_dict(), indent=2))


@app.command(name="set")
def set_value(
    key: str = typer.Argument(..., help="Dot-separated key, e.g. scanner.style"),
    value: str = typer.Argument(..., help="Value; JSON literals are decoded (e.g. '[\"-\"]', null)."),
):
    """
    Sets a configuration value in the local project config.
    """
    config = get_user_config()
    parsed = _parse_value(value)
    config.set(key, parsed)
    path = config.save()
    logger.debug(f"Set {key}={parsed!r}")
    echo(f"Set {key} in {path}")
