"""YAML-backed rule metadata lookup.

Catalog file format::

    plugins:                      # installed plugins: short name -> package
      react: eslint-plugin-react
    rules:
      no-unused-vars:
        category: Variables
        description: disallow unused variables
        recommended: true
        fixable: false
        deprecated: false
        replacedBy: null
        url: https://eslint.org/docs/latest/rules/no-unused-vars
      react/jsx-key:
        description: disallow missing `key` props in iterators
        recommended: true

Plugin rules (``plugin/rule``, ``@scope/rule``, ``@scope/plugin/rule``) whose
plugin is not installed resolve to PluginMissing; names without a catalog
entry resolve to RuleNotFound. Entries are validated on first lookup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from lintlens.kernel.domain import PluginMissing, ResolvedRule, RuleInfo, RuleNotFound
from lintlens.kernel.exceptions import ConfigurationError, MetadataResolutionError
from lintlens.kernel.logging import get_logger

logger = get_logger(__name__)

ESLINT_RULES_URL = "https://eslint.org/docs/latest/rules/"
NPM_PACKAGE_URL = "https://www.npmjs.com/package/"


class CatalogRuleEntry(BaseModel):
    """One rule entry of a catalog file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    category: str | None = None
    description: str | None = None
    recommended: bool = False
    fixable: bool = False
    deprecated: bool = False
    replaced_by: str | list[str] | None = Field(default=None, alias="replacedBy")
    url: str | None = None
    page_title: str | None = Field(default=None, alias="pageTitle")


def split_plugin(rule_name: str) -> tuple[str | None, str | None]:
    """Return ``(plugin name, package name)`` for a rule, or ``(None, None)`` for core rules.

    Examples
    --------
    >>> split_plugin("react/jsx-key")
    ('react', 'eslint-plugin-react')
    >>> split_plugin("@typescript-eslint/no-explicit-any")
    ('@typescript-eslint', '@typescript-eslint/eslint-plugin')
    >>> split_plugin("@scope/foo/bar")
    ('@scope/foo', '@scope/eslint-plugin-foo')
    >>> split_plugin("no-console")
    (None, None)
    """
    if "/" not in rule_name:
        return None, None
    plugin = rule_name.rsplit("/", 1)[0]
    if plugin.startswith("@"):
        scope, _, name = plugin.partition("/")
        package = f"{scope}/eslint-plugin-{name}" if name else f"{scope}/eslint-plugin"
        return plugin, package
    return plugin, f"eslint-plugin-{plugin}"


class RuleCatalog:
    """RuleInfoLookup backed by an in-memory catalog, usually loaded from YAML.

    Parameters
    ----------
    rules : dict[str, Any] | None
        Raw rule entries keyed by rule name
    plugins : dict[str, str] | None
        Installed plugins, short name -> package name
    """

    def __init__(
        self,
        rules: dict[str, Any] | None = None,
        plugins: dict[str, str] | None = None,
    ) -> None:
        self._rules = dict(rules or {})
        self._plugins = dict(plugins or {})
        self._cache: dict[str, RuleInfo] = {}

    @classmethod
    def from_yaml(
        cls, path: str | Path, installed_plugins: dict[str, str] | None = None
    ) -> RuleCatalog:
        """Load a catalog file; ``installed_plugins`` extends its ``plugins`` table.

        Raises
        ------
        ConfigurationError
            If the file is missing, is not valid YAML, or has the wrong shape
        """
        path = Path(path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except FileNotFoundError as e:
            raise ConfigurationError("catalog", f"file not found: {path}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError("catalog", f"invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError("catalog", "top level must be a mapping")
        rules = data.get("rules") or {}
        plugins = data.get("plugins") or {}
        if not isinstance(rules, dict) or not isinstance(plugins, dict):
            raise ConfigurationError("catalog", "'rules' and 'plugins' must be mappings")

        logger.info(
            "Loaded rule catalog {path} ({count} rules)", path=str(path), count=len(rules)
        )
        return cls(rules=rules, plugins={**plugins, **(installed_plugins or {})})

    def __len__(self) -> int:
        return len(self._rules)

    async def aget_rule_info(self, rule_name: str) -> RuleInfo:
        """Resolve ``rule_name``; results are cached per name.

        Raises
        ------
        MetadataResolutionError
            If the catalog entry for the rule is malformed
        """
        if (cached := self._cache.get(rule_name)) is not None:
            return cached
        info = self._resolve(rule_name)
        self._cache[rule_name] = info
        return info

    def _resolve(self, rule_name: str) -> RuleInfo:
        plugin, package = split_plugin(rule_name)
        if plugin is not None and plugin not in self._plugins:
            return PluginMissing(
                rule_name=rule_name,
                plugin_name=plugin,
                plugin_package_name=package,
                info_url=f"{NPM_PACKAGE_URL}{package}",
                info_page_title=package,
            )

        raw = self._rules.get(rule_name)
        if raw is None:
            package = self._plugins.get(plugin, package) if plugin else None
            return RuleNotFound(
                rule_name=rule_name,
                info_url=f"{NPM_PACKAGE_URL}{package}" if package else ESLINT_RULES_URL,
                info_page_title=package or "Rules Reference",
            )

        try:
            entry = CatalogRuleEntry.model_validate(raw)
        except PydanticValidationError as e:
            raise MetadataResolutionError(rule_name, f"invalid catalog entry: {e}") from e

        replaced_by = entry.replaced_by
        if isinstance(replaced_by, list):
            replaced_by = ", ".join(replaced_by) or None

        if entry.url:
            info_url = entry.url
        elif plugin:
            info_url = f"{NPM_PACKAGE_URL}{self._plugins[plugin]}"
        else:
            info_url = f"{ESLINT_RULES_URL}{rule_name}"

        return ResolvedRule(
            rule_name=rule_name,
            is_recommended=entry.recommended,
            is_deprecated=entry.deprecated,
            is_fixable=entry.fixable,
            category=entry.category,
            description=entry.description,
            replaced_by=replaced_by,
            info_url=info_url,
            info_page_title=entry.page_title or rule_name,
        )
