"""Editor view kept in memory, with a Rich renderer for terminals."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text

if TYPE_CHECKING:
    from lintlens.kernel.domain import Annotation, DecorationStyle, TextDocument


class InMemoryView:
    """EditorView implementation that records the annotations applied to it.

    Examples
    --------
    Example usage::

        view = InMemoryView(TextDocument.from_path("src/app.js"))
        await controller.arefresh(view, parse_directive_comments)
        view.annotations_for(controller.decoration)
    """

    def __init__(self, document: TextDocument | None) -> None:
        self._document = document
        self._disposed = False
        self._annotations: dict[str, tuple[Annotation, ...]] = {}
        self.apply_count = 0

    @property
    def document(self) -> TextDocument | None:
        return self._document

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def set_annotations(self, kind: DecorationStyle, annotations: Sequence[Annotation]) -> None:
        if self._disposed:
            return
        self._annotations[kind.key] = tuple(annotations)
        self.apply_count += 1

    def annotations_for(self, kind: DecorationStyle) -> tuple[Annotation, ...]:
        return self._annotations.get(kind.key, ())

    def dispose(self) -> None:
        self._disposed = True
        self._annotations.clear()


def render_view(
    view: InMemoryView,
    kind: DecorationStyle,
    console: Console | None = None,
    show_hover: bool = False,
) -> None:
    """Print the view's document with its annotations after each line."""
    console = console or Console()
    document = view.document
    if document is None:
        return

    by_line: dict[int, list[Annotation]] = {}
    for annotation in view.annotations_for(kind):
        by_line.setdefault(annotation.range.start.line, []).append(annotation)

    width = len(str(document.line_count))
    for line_number in range(document.line_count):
        text = Text(f"{line_number + 1:>{width}} ", style="dim")
        text.append(document.line_at(line_number))
        annotations = sorted(by_line.get(line_number, ()), key=lambda a: a.range.start)
        for annotation in annotations:
            text.append("  ")
            text.append(annotation.content_text, style=kind.color)
        console.print(text, highlight=False)
        if show_hover:
            for annotation in annotations:
                if annotation.hover_message is not None:
                    console.print(Markdown(annotation.hover_message.value))
