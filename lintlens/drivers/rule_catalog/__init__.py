"""Rule metadata lookup backed by a YAML catalog."""

from lintlens.drivers.rule_catalog.catalog import (
    ESLINT_RULES_URL,
    NPM_PACKAGE_URL,
    CatalogRuleEntry,
    RuleCatalog,
    split_plugin,
)

__all__ = [
    "ESLINT_RULES_URL",
    "NPM_PACKAGE_URL",
    "CatalogRuleEntry",
    "RuleCatalog",
    "split_plugin",
]
