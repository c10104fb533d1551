"""Annotate a file with inline rule metadata."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from lintlens.cli.utils import load_cli_config
from lintlens.drivers.doc_viewer import ConsolePanelHost
from lintlens.drivers.views import InMemoryView, render_view
from lintlens.extension import LintLensExtension
from lintlens.kernel.domain import TextDocument
from lintlens.kernel.exceptions import ConfigurationError

console = Console()


def annotate(
    file: Annotated[
        Path,
        typer.Argument(
            help="Source or eslintrc file to annotate",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    catalog: Annotated[
        Path | None,
        typer.Option("--catalog", "-c", help="Rule catalog YAML (overrides configuration)"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to lintlens.toml or pyproject.toml"),
    ] = None,
    hover: Annotated[
        bool,
        typer.Option("--hover", help="Also print the hover document of each annotation"),
    ] = False,
    json_out: Annotated[
        bool,
        typer.Option("--json", help="Output annotations as JSON"),
    ] = False,
) -> None:
    """Show the rules referenced in FILE with their metadata after each line.

    Examples
    --------
    lintlens annotate src/app.js --catalog rules.yaml
    lintlens annotate .eslintrc.json --hover
    """
    try:
        config = load_cli_config(config_path, catalog)
        extension = LintLensExtension.activate(config, ConsolePanelHost(console))
    except (ConfigurationError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    view = InMemoryView(TextDocument.from_path(file))

    async def _run() -> bool:
        try:
            return await extension.arefresh_view(view)
        finally:
            await extension.adispose()

    if not asyncio.run(_run()):
        console.print("[red]Error:[/red] could not resolve rule metadata (see log)")
        raise typer.Exit(1)

    annotations = view.annotations_for(extension.controller.decoration)
    if json_out:
        payload = [
            {
                "line": annotation.range.start.line + 1,
                "character": annotation.range.start.character,
                "text": annotation.content_text,
                "hover": annotation.hover_message.value if annotation.hover_message else None,
            }
            for annotation in annotations
        ]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    render_view(view, extension.controller.decoration, console=console, show_hover=hover)
    console.print(f"\n[dim]{len(annotations)} annotation(s)[/dim]")
