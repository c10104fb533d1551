"""Documentation viewer driver."""

from lintlens.drivers.doc_viewer.console_host import ConsolePanel, ConsolePanelHost
from lintlens.drivers.doc_viewer.viewer import DocumentationViewer

__all__ = ["ConsolePanel", "ConsolePanelHost", "DocumentationViewer"]
