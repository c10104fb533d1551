"""Command-line interface for LintLens."""

from lintlens.cli.main import app, main

__all__ = ["app", "main"]
