"""Shared helpers for CLI commands."""

from __future__ import annotations

import dataclasses
from pathlib import Path

from lintlens.kernel.config import LintLensConfig, load_config


def load_cli_config(config_path: Path | None, catalog: Path | None = None) -> LintLensConfig:
    """Load configuration, letting ``--catalog`` override the configured catalog path."""
    config = load_config(config_path)
    if catalog is not None:
        config = dataclasses.replace(
            config, catalog=dataclasses.replace(config.catalog, path=str(catalog))
        )
    return config
