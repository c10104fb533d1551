"""Configuration loading and management for LintLens."""

from lintlens.kernel.config.loader import ConfigLoader, clear_config_cache, load_config
from lintlens.kernel.config.models import (
    AnnotationConfig,
    CatalogConfig,
    DocsViewerConfig,
    LintLensConfig,
    LoggingConfig,
)

__all__ = [
    "AnnotationConfig",
    "CatalogConfig",
    "ConfigLoader",
    "DocsViewerConfig",
    "LintLensConfig",
    "LoggingConfig",
    "clear_config_cache",
    "load_config",
]
