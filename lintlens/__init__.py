"""LintLens - inline ESLint rule metadata for editor views.

Examples
--------
Example usage::

    from lintlens import AnnotationController, RuleCatalog, parse_directive_comments

    controller = AnnotationController(RuleCatalog.from_yaml("rules.yaml"))
    await controller.arefresh(view, parse_directive_comments)
"""

from lintlens.drivers.parsers import parse_directive_comments, parse_eslintrc_rules
from lintlens.drivers.rule_catalog import RuleCatalog
from lintlens.kernel.annotations import AnnotationController, compose_hover, compose_summary

__version__ = "0.1.0"

__all__ = [
    "AnnotationController",
    "RuleCatalog",
    "__version__",
    "compose_hover",
    "compose_summary",
    "parse_directive_comments",
    "parse_eslintrc_rules",
]
