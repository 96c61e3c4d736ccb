"""
Scanning commands for the flagscanner CLI.

- scan: tokenize the arguments given after '--' and print the tokens
- styles: list the available command-line style presets
"""

from typing import Any, List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from flagscanner.exceptions import ConfigError, UnknownStyleError
from flagscanner.logging_config import logger
from flagscanner.scanner import Scanner
from flagscanner.scanner.config import get_style, list_styles, validate_prefixes, validate_separator
from flagscanner.schemas import Token, TokenList
from flagscanner.user_config import UserConfig, get_user_config
from .config import CLIConfig
from .output import echo, get_console, print_error, print_json, print_table

console = get_console()


def resolve_scanner(
    config: UserConfig,
    style: Optional[str] = None,
    prefixes: Optional[List[str]] = None,
    no_prefixes: bool = False,
    separator: Optional[str] = None,
    strict: bool = False,
) -> Scanner:
    """
    Build a Scanner from command-line overrides, user config, and style preset.

    Precedence (highest first): explicit options, user config values,
    the style preset.

    Raises:
        UnknownStyleError: If the selected style does not exist.
        ConfigError: If the user config holds malformed values, or strict
                     validation rejects the resolved settings.
    """
    if style is None:
        style = config.get("scanner.style", "gnu")
        if not isinstance(style, str):
            raise ConfigError("scanner.style must be a string")
    preset = get_style(style)

    if no_prefixes:
        resolved_prefixes: List[str] = []
    elif prefixes:
        resolved_prefixes = list(prefixes)
    else:
        configured = config.get("scanner.prefixes")
        if configured is None:
            resolved_prefixes = list(preset.prefixes)
        elif isinstance(configured, list) and all(isinstance(p, str) for p in configured):
            resolved_prefixes = configured
        else:
            raise ConfigError("scanner.prefixes must be a list of strings or null")

    if separator is None:
        configured_separator = config.get("scanner.separator")
        if configured_separator is None:
            separator = preset.separator
        elif isinstance(configured_separator, str):
            separator = configured_separator
        else:
            raise ConfigError("scanner.separator must be a string or null")

    if strict:
        validate_prefixes(resolved_prefixes)
        validate_separator(separator)

    logger.debug(
        f"Resolved scanner: style={preset.name} prefixes={resolved_prefixes} separator={separator!r}"
    )
    return Scanner(prefixes=resolved_prefixes, separator=separator)


def _token_payload(token: Token) -> str:
    if token.kind == "option":
        return token.name
    if token.kind == "separator":
        return token.separator
    return token.value


def _render_tokens(tokens: List[Token], json_output: bool) -> None:
    if json_output:
        print_json(TokenList.dump_python(tokens, mode="json"))
        return

    if CLIConfig.is_machine_mode():
        for token in tokens:
            echo(f"{token.idx}\t{token.kind}\t{token}")
        return

    table = Table(title="Tokens")
    table.add_column("Index", justify="right", style="magenta")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Prefix", style="green")
    table.add_column("Name / Value", style="yellow")
    table.add_column("Original")
    for token in tokens:
        table.add_row(
            str(token.idx),
            token.kind,
            escape(token.prefix) if token.kind == "option" else "",
            escape(_token_payload(token)),
            escape(str(token)),
        )
    print_table(table)
    console.print(f"Scanned [bold blue]{len(tokens)}[/bold blue] arguments.")


def _fail(exc: Exception, code: str, exit_code: int, input_value: Any = None) -> None:
    suggestions = exc.available if isinstance(exc, UnknownStyleError) else None
    print_error(str(exc), code=code, input_value=input_value, suggest=suggestions)
    raise typer.Exit(code=exit_code)


def scan_cmd(
    args: Optional[List[str]] = typer.Argument(
        None, help="Arguments to scan. Put them after '--' so they are not parsed as options."
    ),
    style: Optional[str] = typer.Option(
        None, "--style", "-s", help="Style preset (gnu, dig, go, unix, windows). Defaults to the user config or 'gnu'."
    ),
    prefix: Optional[List[str]] = typer.Option(
        None, "--prefix", "-p", help="Option prefix. Can be used multiple times; overrides the style."
    ),
    no_prefixes: bool = typer.Option(
        False, "--no-prefixes", help="Recognize no option prefixes at all."
    ),
    separator: Optional[str] = typer.Option(
        None, "--separator", help="Options/arguments separator. Use '' to disable; overrides the style."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Reject empty, duplicate, or whitespace-containing prefixes."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output tokens as JSON."
    ),
):
    """
    Tokenizes command-line arguments into options, separator, and positionals.
    """
    try:
        scanner = resolve_scanner(
            get_user_config(),
            style=style,
            prefixes=prefix,
            no_prefixes=no_prefixes,
            separator=separator,
            strict=strict,
        )
    except UnknownStyleError as e:
        _fail(e, "UNKNOWN_STYLE", 1, input_value=e.style)
    except ConfigError as e:
        _fail(e, "INVALID_CONFIG", 2)

    tokens = scanner.scan(args or [])
    _render_tokens(tokens, json_output)


def styles_cmd(
    json_output: bool = typer.Option(
        False, "--json", help="Output styles as JSON."
    ),
):
    """
    Lists the available command-line style presets.
    """
    presets = list_styles()

    if json_output:
        print_json([
            {
                "name": p.name,
                "prefixes": list(p.prefixes),
                "separator": p.separator,
                "description": p.description,
            }
            for p in presets
        ])
        return

    if CLIConfig.is_machine_mode():
        for p in presets:
            echo(f"{p.name}\t{' '.join(p.prefixes)}\t{p.separator}")
        return

    table = Table(title="Command-line Styles")
    table.add_column("Style", style="cyan", no_wrap=True)
    table.add_column("Prefixes", style="green")
    table.add_column("Separator", style="magenta")
    table.add_column("Description")
    for p in presets:
        table.add_row(
            p.name,
            escape(" ".join(p.prefixes)),
            escape(p.separator) or "[dim](none)[/dim]",
            p.description,
        )
    print_table(table)
