"""Top-level lifecycle object wiring the annotation pipeline to a host editor."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from lintlens.drivers.doc_viewer import DocumentationViewer
from lintlens.drivers.http_client import DocumentFetcher
from lintlens.drivers.parsers import select_parser
from lintlens.drivers.rule_catalog import RuleCatalog
from lintlens.kernel.annotations import AnnotationController
from lintlens.kernel.config import LintLensConfig
from lintlens.kernel.logging import configure_logging, get_logger

if TYPE_CHECKING:
    from lintlens.kernel.ports import EditorView, Notifier, Panel, PanelHost, RuleInfoLookup

logger = get_logger(__name__)


class LintLensExtension:
    """Owns the controller, the rule lookup and the documentation viewer.

    The host creates one instance on activation, forwards document changes
    and command invocations to it, and awaits :meth:`adispose` on shutdown.

    Parameters
    ----------
    config : LintLensConfig
        Loaded configuration
    lookup : RuleInfoLookup
        Rule metadata source
    panel_host : PanelHost
        Creates the documentation panel
    notifier : Notifier | None
        Receives alerts posted by documentation pages
    fetcher : DocumentFetcher | None
        Documentation fetcher; built from ``config.docs_viewer`` if None
    """

    def __init__(
        self,
        config: LintLensConfig,
        lookup: RuleInfoLookup,
        panel_host: PanelHost,
        notifier: Notifier | None = None,
        fetcher: DocumentFetcher | None = None,
    ) -> None:
        self.config = config
        self.controller = AnnotationController(lookup, config.annotations)
        self._fetcher = fetcher or DocumentFetcher(
            timeout=config.docs_viewer.timeout,
            follow_redirects=config.docs_viewer.follow_redirects,
        )
        self.viewer = DocumentationViewer(
            panel_host,
            self._fetcher,
            notifier=notifier,
            config=config.docs_viewer,
            command=config.annotations.open_docs_command,
        )

    @classmethod
    def activate(
        cls,
        config: LintLensConfig,
        panel_host: PanelHost,
        notifier: Notifier | None = None,
    ) -> LintLensExtension:
        """Configure logging and build the extension with a catalog from ``config``."""
        configure_logging(config.logging)
        catalog_config = config.catalog
        if catalog_config.path:
            lookup = RuleCatalog.from_yaml(
                catalog_config.path, installed_plugins=catalog_config.installed_plugins
            )
        else:
            lookup = RuleCatalog(plugins=catalog_config.installed_plugins)
        logger.info("LintLens activated")
        return cls(config, lookup, panel_host, notifier=notifier)

    def on_document_changed(self, view: EditorView | None) -> asyncio.Task[bool] | None:
        """Schedule a refresh of ``view`` with the parser matching its document."""
        if view is None or view.document is None:
            return None
        return self.controller.refresh(view, select_parser(view.document))

    async def arefresh_view(self, view: EditorView) -> bool:
        """Refresh ``view`` and wait for the result."""
        if view.document is None:
            return False
        return await self.controller.arefresh(view, select_parser(view.document))

    def on_view_closed(self, view: EditorView | None) -> None:
        self.controller.clear(view)

    async def aopen_documentation(self, command_uri: str) -> Panel:
        """Run the documentation command behind a hover link."""
        return await self.viewer.aexecute_command_uri(command_uri)

    async def adispose(self) -> None:
        await self._fetcher.aclose()
        logger.info("LintLens disposed")
