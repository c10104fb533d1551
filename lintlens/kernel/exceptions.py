"""Core exception hierarchy for LintLens.

All LintLens-specific exceptions inherit from LintLensError so callers can
handle every framework failure with a single ``except`` clause.
"""

from __future__ import annotations

# ============================================================================
# Base Exception
# ============================================================================


class LintLensError(Exception):
    """Base exception for all LintLens errors.

    This is the root exception that all LintLens-specific exceptions inherit from.
    Catch this to handle all LintLens errors.
    """

    pass


# ============================================================================
# Configuration & Validation Errors
# ============================================================================


class ConfigurationError(LintLensError):
    """Raised when configuration is invalid or missing.

    Examples
    --------
    Example usage::

        raise ConfigurationError("catalog", "YAML file not found")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Name of the component with invalid configuration
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


class ValidationError(LintLensError):
    """Raised when data validation fails.

    Examples
    --------
    Example usage::

        raise ValidationError("line", "must be non-negative", value=-1)
    """

    def __init__(self, field: str, constraint: str, value: object = None) -> None:
        """Initialize validation error.

        Args
        ----
            field: Name of the field that failed validation
            constraint: Description of the validation constraint
            value: The invalid value (optional)
        """
        if value is not None:
            msg = f"Validation failed for '{field}': {constraint} (got {value!r})"
        else:
            msg = f"Validation failed for '{field}': {constraint}"
        super().__init__(msg)
        self.field = field
        self.constraint = constraint
        self.value = value


# ============================================================================
# Annotation Pipeline Errors
# ============================================================================


class MetadataResolutionError(LintLensError):
    """Raised when the metadata for a rule cannot be resolved.

    The annotation controller treats this (and any other lookup failure) as a
    failure of the whole refresh pass: the previous annotations stay in place.

    Examples
    --------
    Example usage::

        raise MetadataResolutionError("no-unused-vars", "catalog entry is not a mapping")
    """

    def __init__(self, rule_name: str, reason: str) -> None:
        super().__init__(f"Cannot resolve metadata for rule '{rule_name}': {reason}")
        self.rule_name = rule_name
        self.reason = reason


class CommandLinkError(LintLensError):
    """Raised when a command link or command URI cannot be decoded."""

    pass


# ============================================================================
# Documentation Viewer Errors
# ============================================================================


class DocumentFetchError(LintLensError):
    """Raised when a documentation page cannot be fetched.

    Attributes
    ----------
    url : str
        The URL that was requested.
    status_code : int | None
        The HTTP status code, or None for transport-level failures.
    """

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to fetch '{url}': {reason}")
