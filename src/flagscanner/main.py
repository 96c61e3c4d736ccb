import typer

from flagscanner import __version__
from flagscanner.logging_config import setup_logging
from flagscanner.cli import scanning, settings
from flagscanner.cli.config import CLIConfig

app = typer.Typer()


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: tables and colors (also via FLAGSCANNER_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug messages to stderr (human mode only)"
    ),
):
    """
    flagscanner: command-line argument tokenizer

    Machine mode is DEFAULT (plain data, no formatting).
    Use --human/-H for pretty output.
    """
    CLIConfig.set_machine_mode(False if human else None)

    if CLIConfig.is_machine_mode():
        # Keep stdout/stderr clean for consumers
        setup_logging(suppress_console=True, force=True)
    else:
        setup_logging(level="DEBUG" if verbose else "INFO", suppress_console=False, force=True)


app.command(name="scan", context_settings={"ignore_unknown_options": True})(scanning.scan_cmd)
app.command(name="styles")(scanning.styles_cmd)
app.add_typer(settings.app, name="config", help="User configuration commands (show, set)")


@app.command()
def version():
    """
    Prints the current version of flagscanner.
    """
    typer.echo(f"flagscanner v{__version__}")


if __name__ == "__main__":
    app()
