"""TOML configuration loader for LintLens."""

from __future__ import annotations

import os
import re
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, cast

from lintlens.kernel.config.models import (
    AnnotationConfig,
    CatalogConfig,
    DocsViewerConfig,
    LintLensConfig,
    LoggingConfig,
)
from lintlens.kernel.exceptions import ConfigurationError, ValidationError
from lintlens.kernel.logging import get_logger

# Constants for boolean environment variable parsing
_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse boolean from environment variable value.

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = _TRUTHY_VALUES | _FALSY_VALUES
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


@lru_cache(maxsize=32)
def _load_and_parse_cached(path_str: str) -> LintLensConfig:
    """Cached configuration loader."""
    loader = ConfigLoader()
    return loader._load_and_parse(Path(path_str))


class ConfigLoader:
    """Loads and processes LintLens configuration from TOML files."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    def load_from_toml(self, path: str | Path | None = None) -> LintLensConfig:
        """Load configuration from TOML file.

        Parameters
        ----------
        path : str | Path | None
            Path to TOML file. If None, searches for lintlens.toml or pyproject.toml

        Returns
        -------
        LintLensConfig
            Parsed configuration with environment variables substituted
        """
        config_path = self._find_config_file(path)
        return _load_and_parse_cached(str(config_path.absolute()))

    def _load_and_parse(self, config_path: Path) -> LintLensConfig:
        """Load and parse configuration file."""
        logger.info("Loading configuration from {path}", path=config_path)

        with config_path.open("rb") as f:
            data = tomllib.load(f)

        if config_path.name == "pyproject.toml":
            lintlens_data = data.get("tool", {}).get("lintlens", {})
            if not lintlens_data:
                logger.warning("No [tool.lintlens] section found in pyproject.toml, using defaults")
                return LintLensConfig(logging=self._parse_logging_config({}))
        elif "tool" in data and "lintlens" in data.get("tool", {}):
            lintlens_data = data["tool"]["lintlens"]
        else:
            lintlens_data = data

        lintlens_data = self._substitute_env_vars(lintlens_data)
        return self._parse_config(lintlens_data)

    def _find_config_file(self, path: str | Path | None) -> Path:
        """Find configuration file.

        Raises
        ------
        FileNotFoundError
            If no configuration file is found
        """
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return config_path

        if env_path := os.getenv("LINTLENS_CONFIG_PATH"):
            config_path = Path(env_path)
            if config_path.exists():
                logger.debug(f"Using config from LINTLENS_CONFIG_PATH: {config_path}")
                return config_path
            logger.warning(f"LINTLENS_CONFIG_PATH set but file not found: {config_path}")

        for search_path in (Path("lintlens.toml"), Path(".lintlens.toml")):
            if search_path.exists():
                return search_path

        # pyproject.toml only counts when it carries a [tool.lintlens] table
        current = Path.cwd()
        while current != current.parent:
            pyproject = current / "pyproject.toml"
            if pyproject.exists():
                with pyproject.open("rb") as f:
                    data = tomllib.load(f)
                if "lintlens" in data.get("tool", {}):
                    return pyproject
            current = current.parent

        raise FileNotFoundError(
            "No configuration file found. Searched for: lintlens.toml, .lintlens.toml, "
            "pyproject.toml"
        )

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively substitute ``${VAR}`` placeholders with environment values."""
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                var_name = match.group(1)
                value = os.environ.get(var_name)
                if value is None:
                    logger.debug(
                        f"Environment variable ${{{var_name}}} not found, keeping placeholder"
                    )
                    return match.group(0)
                return value

            return self.ENV_VAR_PATTERN.sub(replacer, data)

        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}

        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]

        return data

    def _parse_config(self, data: dict[str, Any]) -> LintLensConfig:
        """Parse configuration data into LintLensConfig.

        Raises
        ------
        ConfigurationError
            If a section is not a table, carries unknown keys or fails validation
        """
        return LintLensConfig(
            logging=self._parse_logging_config(self._section(data, "logging")),
            annotations=self._build_section(AnnotationConfig, data, "annotations"),
            docs_viewer=self._build_section(DocsViewerConfig, data, "docs_viewer"),
            catalog=self._build_section(CatalogConfig, data, "catalog"),
        )

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data.get(name, {})
        if not isinstance(section, dict):
            raise ConfigurationError(name, "section must be a table")
        return section

    def _build_section[T](self, cls: type[T], data: dict[str, Any], name: str) -> T:
        section = self._section(data, name)
        try:
            return cls(**section)
        except (TypeError, ValidationError) as e:
            raise ConfigurationError(name, str(e)) from e

    def _parse_logging_config(self, logging_data: dict[str, Any]) -> LoggingConfig:
        """Parse logging configuration with environment variable overrides.

        Environment variables take precedence over TOML configuration:
        - LINTLENS_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        - LINTLENS_LOG_FORMAT: Output format (console, json, structured, rich)
        - LINTLENS_LOG_FILE: Optional file path for log output
        - LINTLENS_LOG_COLOR: Use color output (true/false)
        - LINTLENS_LOG_RICH: Use Rich library for console output (true/false)
        """
        level = logging_data.get("level", "INFO")
        format_type = logging_data.get("format", "structured")
        output_file = logging_data.get("output_file")
        use_color = logging_data.get("use_color", True)
        include_timestamp = logging_data.get("include_timestamp", True)
        use_rich = logging_data.get("use_rich", False)

        if env_level := os.getenv("LINTLENS_LOG_LEVEL"):
            level = env_level.upper()
            logger.debug(f"Overriding log level from env: {level}")

        if env_format := os.getenv("LINTLENS_LOG_FORMAT"):
            format_type = env_format.lower()
            logger.debug(f"Overriding log format from env: {format_type}")

        if env_file := os.getenv("LINTLENS_LOG_FILE"):
            output_file = env_file
            logger.debug(f"Overriding log file from env: {output_file}")

        if env_color := os.getenv("LINTLENS_LOG_COLOR"):
            try:
                use_color = _parse_bool_env(env_color)
            except ValueError as e:
                logger.warning(f"Invalid LINTLENS_LOG_COLOR value: {e}")

        if env_rich := os.getenv("LINTLENS_LOG_RICH"):
            try:
                use_rich = _parse_bool_env(env_rich)
            except ValueError as e:
                logger.warning(f"Invalid LINTLENS_LOG_RICH value: {e}")

        return LoggingConfig(
            level=cast("Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']", level),
            format=cast("Literal['console', 'json', 'structured', 'rich']", format_type),
            output_file=output_file,
            use_color=use_color,
            include_timestamp=include_timestamp,
            use_rich=use_rich,
        )


def load_config(path: str | Path | None = None) -> LintLensConfig:
    """Load configuration from TOML file or return defaults.

    Parameters
    ----------
    path : str | Path | None
        Path to configuration file or None to search

    Returns
    -------
    LintLensConfig
        Loaded configuration, or defaults with the LINTLENS_LOG_* overrides
        applied if no file is found
    """
    try:
        return ConfigLoader().load_from_toml(path)
    except FileNotFoundError:
        if path:
            raise
        logger.info("No configuration file found, using defaults")
        return LintLensConfig(logging=ConfigLoader()._parse_logging_config({}))


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when configuration files have been modified.
    """
    _load_and_parse_cached.cache_clear()
