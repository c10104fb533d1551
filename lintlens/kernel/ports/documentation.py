"""Port interfaces for the documentation viewer surface."""

from abc import abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Panel(Protocol):
    """A host panel that displays an HTML document."""

    title: str
    html: str

    @abstractmethod
    def reveal(self) -> None:
        """Bring the panel to the front."""
        ...

    @abstractmethod
    def on_did_dispose(self, callback: Callable[[], None]) -> None:
        """Register ``callback`` to run when the user closes the panel."""
        ...

    @abstractmethod
    def on_did_receive_message(self, callback: Callable[[dict[str, Any]], None]) -> None:
        """Register ``callback`` for messages posted by the panel content."""
        ...


@runtime_checkable
class PanelHost(Protocol):
    """Creates panels in the host editor."""

    @abstractmethod
    def create_panel(self, view_type: str, title: str) -> Panel:
        """Create a new panel.

        Args
        ----
            view_type: Identifier of the panel type
            title: Initial title shown in the panel tab
        """
        ...


@runtime_checkable
class Notifier(Protocol):
    """Surfaces messages to the user as host-level alerts."""

    @abstractmethod
    def show_error_message(self, text: str) -> None: ...
