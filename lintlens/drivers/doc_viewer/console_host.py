"""Panel host that renders documentation panels to a Rich console."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel as RichPanel
from rich.text import Text


class ConsolePanel:
    """A documentation panel printed to the terminal when revealed."""

    def __init__(self, console: Console, view_type: str, title: str) -> None:
        self.view_type = view_type
        self.title = title
        self.html = ""
        self.disposed = False
        self._console = console
        self._dispose_callbacks: list[Callable[[], None]] = []
        self._message_callbacks: list[Callable[[dict[str, Any]], None]] = []

    def reveal(self) -> None:
        self._console.print(RichPanel(Text(self.html), title=Text(self.title), expand=True))

    def on_did_dispose(self, callback: Callable[[], None]) -> None:
        self._dispose_callbacks.append(callback)

    def on_did_receive_message(self, callback: Callable[[dict[str, Any]], None]) -> None:
        self._message_callbacks.append(callback)

    def post_message(self, message: dict[str, Any]) -> None:
        """Deliver a message as if posted by the page content."""
        for callback in list(self._message_callbacks):
            callback(message)

    def dispose(self) -> None:
        """Close the panel and notify dispose listeners once."""
        if self.disposed:
            return
        self.disposed = True
        for callback in list(self._dispose_callbacks):
            callback()


class ConsolePanelHost:
    """Creates :class:`ConsolePanel` instances and shows alerts on the console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self.panels: list[ConsolePanel] = []

    def create_panel(self, view_type: str, title: str) -> ConsolePanel:
        panel = ConsolePanel(self._console, view_type, title)
        self.panels.append(panel)
        return panel

    def show_error_message(self, text: str) -> None:
        self._console.print(f"[red]✗[/red] {escape(text)}", markup=True, highlight=False)
