"""Rule metadata as a tagged variant.

A rule is in exactly one of three states: its plugin is missing, it is not
known, or it is resolved with flags and text. The flat external record
(``RuleInfoRecord``) is folded into one of these with the precedence
plugin-missing > not-found > resolved.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class PluginMissing:
    """The plugin that provides the rule is not installed."""

    rule_name: str
    plugin_name: str | None = None
    plugin_package_name: str | None = None
    info_url: str | None = None
    info_page_title: str | None = None


@dataclass(frozen=True, slots=True)
class RuleNotFound:
    """No rule with this name is known."""

    rule_name: str
    info_url: str | None = None
    info_page_title: str | None = None


@dataclass(frozen=True, slots=True)
class ResolvedRule:
    """A known rule with its classification flags and documentation."""

    rule_name: str
    is_recommended: bool = False
    is_deprecated: bool = False
    is_fixable: bool = False
    category: str | None = None
    description: str | None = None
    replaced_by: str | None = None
    info_url: str | None = None
    info_page_title: str | None = None


type RuleInfo = PluginMissing | RuleNotFound | ResolvedRule


class RuleInfoRecord(BaseModel):
    """Flat rule-metadata record as produced by metadata services.

    Accepts both the camelCase wire names and the snake_case field names.

    Examples
    --------
    Example usage::

        record = RuleInfoRecord.model_validate(
            {"ruleName": "no-undef", "isRuleFound": True, "isRecommended": True}
        )
        info = record.to_rule_info()  # ResolvedRule(rule_name="no-undef", ...)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rule_name: str = Field(alias="ruleName")
    is_rule_found: bool = Field(default=False, alias="isRuleFound")
    is_plugin_missing: bool = Field(default=False, alias="isPluginMissing")
    is_recommended: bool = Field(default=False, alias="isRecommended")
    is_deprecated: bool = Field(default=False, alias="isDeprecated")
    is_fixable: bool = Field(default=False, alias="isFixable")
    category: str | None = None
    description: str | None = None
    replaced_by: str | None = Field(default=None, alias="replacedBy")
    plugin_package_name: str | None = Field(default=None, alias="pluginPackageName")
    plugin_name: str | None = Field(default=None, alias="pluginName")
    info_url: str | None = Field(default=None, alias="infoUrl")
    info_page_title: str | None = Field(default=None, alias="infoPageTitle")

    def to_rule_info(self) -> RuleInfo:
        if self.is_plugin_missing:
            return PluginMissing(
                rule_name=self.rule_name,
                plugin_name=self.plugin_name,
                plugin_package_name=self.plugin_package_name,
                info_url=self.info_url,
                info_page_title=self.info_page_title,
            )
        if not self.is_rule_found:
            return RuleNotFound(
                rule_name=self.rule_name,
                info_url=self.info_url,
                info_page_title=self.info_page_title,
            )
        return ResolvedRule(
            rule_name=self.rule_name,
            is_recommended=self.is_recommended,
            is_deprecated=self.is_deprecated,
            is_fixable=self.is_fixable,
            category=self.category or None,
            description=self.description or None,
            replaced_by=self.replaced_by or None,
            info_url=self.info_url,
            info_page_title=self.info_page_title,
        )
