"""LintLens CLI - Main entrypoint."""

import os

import typer
from rich.console import Console

from lintlens import __version__
from lintlens.cli.commands import annotate_cmd, docs_cmd

app = typer.Typer(
    name="lintlens",
    help="LintLens - inline ESLint rule metadata and documentation.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

console = Console()

app.command(name="annotate", help="Annotate a file with rule metadata")(annotate_cmd.annotate)
app.command(name="docs", help="Show a rule documentation page")(docs_cmd.docs)


def _show_version(value: bool) -> None:
    if value:
        console.print(f"[bold blue]LintLens[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def callback(
    *,
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    """LintLens CLI.

    Logging flags are exported as LINTLENS_LOG_LEVEL, which takes precedence
    over the configuration file.
    """
    if quiet:
        os.environ["LINTLENS_LOG_LEVEL"] = "ERROR"
    elif verbose:
        os.environ["LINTLENS_LOG_LEVEL"] = "DEBUG"


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
