"""Editor view drivers."""

from lintlens.drivers.views.memory_view import InMemoryView, render_view

__all__ = ["InMemoryView", "render_view"]
