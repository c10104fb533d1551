"""Loguru setup for LintLens.

``configure_logging`` installs the sinks described by a ``LoggingConfig``:
one stderr sink (console, structured, json or rich) and, if ``output_file``
is set, a JSON file sink. Until it is called, the first ``get_logger`` call
installs a default sink from LINTLENS_LOG_LEVEL and LINTLENS_LOG_FORMAT.

Examples
--------
Example usage::

    from lintlens.kernel.config import LoggingConfig
    from lintlens.kernel.logging import configure_logging, get_logger

    configure_logging(LoggingConfig(level="DEBUG", format="rich"))
    logger = get_logger(__name__)
    logger.info("Applied {count} annotations", count=3)
"""

from __future__ import annotations

import os
import sys
from contextlib import suppress
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger
from rich.logging import RichHandler

if TYPE_CHECKING:
    from loguru import Logger

    from lintlens.kernel.config.models import LoggingConfig

_TIMESTAMP = "{time:YYYY-MM-DD HH:mm:ss}"

_active_config: LoggingConfig | None = None
_handler_ids: list[int] = []


def configure_logging(config: LoggingConfig | None = None, force_reconfigure: bool = False) -> None:
    """Replace the LintLens sinks with the ones ``config`` describes.

    Parameters
    ----------
    config : LoggingConfig | None
        Sink settings; None reads LINTLENS_LOG_LEVEL and LINTLENS_LOG_FORMAT
    force_reconfigure : bool, default=False
        Rebuild the sinks even if ``config`` equals the active one. Sinks bind
        ``sys.stderr`` when added, so callers that swap stderr pass True.

    Notes
    -----
    Only sinks added here are removed; handlers added elsewhere stay.
    """
    global _active_config

    if config is None:
        config = _config_from_env()
    if config == _active_config and not force_reconfigure:
        return

    for handler_id in _handler_ids:
        with suppress(ValueError):
            logger.remove(handler_id)
    _handler_ids.clear()

    _handler_ids.append(_add_stderr_sink(config))
    if config.output_file:
        _handler_ids.append(_add_file_sink(config.level, Path(config.output_file)))
    _active_config = config


def _add_stderr_sink(config: LoggingConfig) -> int:
    if config.use_rich or config.format == "rich":
        handler = RichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=config.include_timestamp,
            show_path=True,
        )
        return logger.add(handler, level=config.level, format="{message}")

    if config.format == "json":
        return logger.add(sys.stderr, level=config.level, serialize=True)

    colorize = config.format == "structured" and config.use_color and sys.stderr.isatty()
    return logger.add(
        sys.stderr, level=config.level, format=_line_format(config), colorize=colorize
    )


def _line_format(config: LoggingConfig) -> str:
    if config.format == "structured":
        stamp = f"<green>{_TIMESTAMP}</green> " if config.include_timestamp else ""
        return (
            f"{stamp}[<level>{{level: <8}}</level>]"
            "<cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>"
        )
    stamp = f"{_TIMESTAMP} " if config.include_timestamp else ""
    return f"{stamp}{{level: <8}} | {{name}} | {{message}}"


def _add_file_sink(level: str, path: Path) -> int:
    # File logs are always JSON lines
    path.parent.mkdir(parents=True, exist_ok=True)
    return logger.add(path, level=level, serialize=True, rotation="10 MB", retention="1 week")


def _config_from_env() -> LoggingConfig:
    from lintlens.kernel.config.models import LoggingConfig

    return LoggingConfig(
        level=os.getenv("LINTLENS_LOG_LEVEL", "INFO").upper(),  # type: ignore[arg-type]
        format=os.getenv("LINTLENS_LOG_FORMAT", "structured").lower(),  # type: ignore[arg-type]
    )


@lru_cache(maxsize=256)
def get_logger(name: str) -> Logger:
    """Logger bound with ``module=name``; installs the default sink on first use."""
    if _active_config is None:
        configure_logging()
    return logger.bind(module=name)
