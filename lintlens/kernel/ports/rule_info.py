"""Port interface for rule metadata lookup."""

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lintlens.kernel.domain import RuleInfo


@runtime_checkable
class RuleInfoLookup(Protocol):
    """Resolves a lint rule name to its metadata.

    Implementations own their caching and any retry policy. Lookups may fail
    by raising; the annotation controller treats a failure as a failed refresh.
    """

    @abstractmethod
    async def aget_rule_info(self, rule_name: str) -> "RuleInfo":
        """Resolve metadata for ``rule_name``.

        Args
        ----
            rule_name: Rule identifier, optionally prefixed with its plugin
                (e.g. ``"no-console"``, ``"react/jsx-key"``)

        Returns
        -------
        RuleInfo
            One of PluginMissing, RuleNotFound or ResolvedRule
        """
        ...
