"""Parsers that find the ESLint rules referenced by a document."""

from lintlens.drivers.parsers.eslint import (
    parse_directive_comments,
    parse_eslintrc_rules,
    select_parser,
)

__all__ = ["parse_directive_comments", "parse_eslintrc_rules", "select_parser"]
