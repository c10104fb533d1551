"""Configuration data models for LintLens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from lintlens.kernel.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration for LintLens.

    Attributes
    ----------
    level : str, default="INFO"
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    format : str, default="structured"
        Output format (console, json, structured, rich)
    output_file : str | None, default=None
        Optional file path to write logs to
    use_color : bool, default=True
        Use ANSI color codes (auto-disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output
    use_rich : bool, default=False
        Use Rich library for console output

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.lintlens.logging]
    level = "DEBUG"
    format = "rich"
    ```

    Environment variable overrides:

    ```bash
    export LINTLENS_LOG_LEVEL=DEBUG
    export LINTLENS_LOG_FORMAT=rich
    export LINTLENS_LOG_FILE=/var/log/lintlens/app.log
    ```
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "structured", "rich"] = "structured"
    output_file: str | None = None
    use_color: bool = True
    include_timestamp: bool = True
    use_rich: bool = False


@dataclass(frozen=True, slots=True)
class AnnotationConfig:
    """Settings for the inline annotations.

    Attributes
    ----------
    extension_name : str
        Appended to documentation page titles ("<title> - <extension_name>")
    open_docs_command : str
        Command id targeted by the "more information" links in hovers
    margin : str
        CSS margin of the trailing annotation text
    color : str
        Foreground colour of the trailing annotation text
    """

    extension_name: str = "LintLens"
    open_docs_command: str = "lintlens.openWebView"
    margin: str = "0 0 0 1em"
    color: str = "#999999"
    font_weight: str = "normal"
    font_style: str = "normal"
    text_decoration: str = "none"

    def __post_init__(self) -> None:
        """Validate annotation settings.

        Raises
        ------
        ValidationError
            If the command id is empty or contains characters that would
            break a command link
        """
        if not self.open_docs_command:
            raise ValidationError("open_docs_command", "cannot be empty")
        if any(ch in self.open_docs_command for ch in "?() \"'"):
            raise ValidationError(
                "open_docs_command", "must be a plain command id", self.open_docs_command
            )


@dataclass(frozen=True, slots=True)
class DocsViewerConfig:
    """Settings for the documentation viewer panel."""

    panel_view_type: str = "lintlensPanel"
    panel_title: str = "LintLens Web View"
    timeout: float = 30.0
    follow_redirects: bool = True

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValidationError("timeout", "must be positive", self.timeout)


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Rule catalog location and installed plugins.

    Attributes
    ----------
    path : str | None
        YAML file with rule metadata. None means an empty catalog.
    installed_plugins : dict[str, str]
        Plugin short name -> package name, merged over the catalog's own list
    """

    path: str | None = None
    installed_plugins: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class LintLensConfig:
    """Complete LintLens configuration.

    Examples
    --------
    TOML configuration in pyproject.toml:

    ```toml
    [tool.lintlens]

    [tool.lintlens.logging]
    level = "DEBUG"

    [tool.lintlens.annotations]
    color = "#888888"

    [tool.lintlens.docs_viewer]
    timeout = 10.0

    [tool.lintlens.catalog]
    path = "rules.yaml"
    installed_plugins = { react = "eslint-plugin-react" }
    ```
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    annotations: AnnotationConfig = field(default_factory=AnnotationConfig)
    docs_viewer: DocsViewerConfig = field(default_factory=DocsViewerConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
