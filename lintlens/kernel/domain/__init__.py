"""Domain models for LintLens annotations."""

from lintlens.kernel.domain.annotation import (
    AfterContent,
    Annotation,
    DecorationStyle,
    MarkdownContent,
    RangeBehavior,
)
from lintlens.kernel.domain.document import Position, TextDocument, TextRange, ViolatedRule
from lintlens.kernel.domain.rule_info import (
    PluginMissing,
    ResolvedRule,
    RuleInfo,
    RuleInfoRecord,
    RuleNotFound,
)

__all__ = [
    "AfterContent",
    "Annotation",
    "DecorationStyle",
    "MarkdownContent",
    "PluginMissing",
    "Position",
    "RangeBehavior",
    "ResolvedRule",
    "RuleInfo",
    "RuleInfoRecord",
    "RuleNotFound",
    "TextDocument",
    "TextRange",
    "ViolatedRule",
]
