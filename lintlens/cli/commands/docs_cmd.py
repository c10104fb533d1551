"""Open a documentation page in the console viewer."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from lintlens.cli.utils import load_cli_config
from lintlens.drivers.doc_viewer import ConsolePanelHost
from lintlens.extension import LintLensExtension
from lintlens.kernel.exceptions import CommandLinkError, ConfigurationError, DocumentFetchError

console = Console()


def docs(
    target: Annotated[
        str,
        typer.Argument(help="Documentation URL, or a command: URI copied from a hover link"),
    ],
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Panel title (defaults to the URL)"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to lintlens.toml or pyproject.toml"),
    ] = None,
) -> None:
    """Fetch a documentation page and show it.

    Examples
    --------
    lintlens docs https://eslint.org/docs/latest/rules/no-console
    lintlens docs "command:lintlens.openWebView?%7B%22url%22..."
    """
    host = ConsolePanelHost(console)
    try:
        extension = LintLensExtension.activate(load_cli_config(config_path), host, notifier=host)
    except (ConfigurationError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    async def _run() -> None:
        try:
            if target.startswith("command:"):
                await extension.aopen_documentation(target)
            else:
                await extension.viewer.ashow_document(target, title or target)
        finally:
            await extension.adispose()

    try:
        asyncio.run(_run())
    except (CommandLinkError, DocumentFetchError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
