"""Port interfaces implemented by host editors and drivers."""

from lintlens.kernel.ports.documentation import Notifier, Panel, PanelHost
from lintlens.kernel.ports.rule_info import RuleInfoLookup
from lintlens.kernel.ports.view import EditorView, RuleParser

__all__ = [
    "EditorView",
    "Notifier",
    "Panel",
    "PanelHost",
    "RuleInfoLookup",
    "RuleParser",
]
