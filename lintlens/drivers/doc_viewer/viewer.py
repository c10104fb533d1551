"""Documentation viewer: one reusable panel showing fetched documentation pages.

The panel is created on first use, dropped when the user closes it, and
recreated on the next request. Messages posted by the page content with
``{"command": "alert", "text": ...}`` are surfaced as error notifications.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lintlens.kernel.annotations.command_link import DEFAULT_COMMAND, decode_command_uri
from lintlens.kernel.config.models import DocsViewerConfig
from lintlens.kernel.exceptions import CommandLinkError, DocumentFetchError
from lintlens.kernel.logging import get_logger

if TYPE_CHECKING:
    from lintlens.drivers.http_client import DocumentFetcher
    from lintlens.kernel.ports import Notifier, Panel, PanelHost

logger = get_logger(__name__)


class DocumentationViewer:
    """Owns the single documentation panel.

    Parameters
    ----------
    host : PanelHost
        Creates panels in the host editor
    fetcher : DocumentFetcher
        Fetches page bodies
    notifier : Notifier | None
        Receives ``alert`` messages from page content
    config : DocsViewerConfig | None
        Panel type and title (defaults if None)
    command : str
        Command id accepted by :meth:`aexecute_command_uri`
    """

    def __init__(
        self,
        host: PanelHost,
        fetcher: DocumentFetcher,
        notifier: Notifier | None = None,
        config: DocsViewerConfig | None = None,
        command: str = DEFAULT_COMMAND,
    ) -> None:
        self._host = host
        self._fetcher = fetcher
        self._notifier = notifier
        self._config = config or DocsViewerConfig()
        self._command = command
        self._panel: Panel | None = None

    @property
    def panel(self) -> Panel | None:
        """The open panel, or None if none exists."""
        return self._panel

    async def ashow_document(self, url: str, title: str) -> Panel:
        """Fetch ``url`` and show it in the panel under ``title``.

        Raises
        ------
        DocumentFetchError
            If the page cannot be fetched; the panel is left unchanged
        """
        try:
            body = await self._fetcher.afetch_text(url)
        except DocumentFetchError as e:
            logger.error("Cannot show documentation page: {error}", error=e)
            raise

        panel = self._get_panel()
        panel.title = title
        panel.html = body
        panel.reveal()
        return panel

    async def aexecute_command_uri(self, uri: str) -> Panel:
        """Handle a ``command:`` URI produced by a hover's documentation link.

        Raises
        ------
        CommandLinkError
            If the URI targets another command or carries no URL
        """
        payload = decode_command_uri(uri)
        if payload.command != self._command:
            raise CommandLinkError(f"Unsupported command: {payload.command!r}")
        if not payload.url:
            raise CommandLinkError("Command link carries no URL")
        return await self.ashow_document(payload.url, payload.page_title or payload.url)

    def _get_panel(self) -> Panel:
        if self._panel is None:
            panel = self._host.create_panel(self._config.panel_view_type, self._config.panel_title)
            panel.on_did_receive_message(self._on_message)
            panel.on_did_dispose(self._on_dispose)
            self._panel = panel
            logger.debug("Created documentation panel")
        return self._panel

    def _on_message(self, message: dict[str, Any]) -> None:
        if message.get("command") == "alert" and self._notifier is not None:
            self._notifier.show_error_message(str(message.get("text", "")))

    def _on_dispose(self) -> None:
        self._panel = None
        logger.debug("Documentation panel closed")
