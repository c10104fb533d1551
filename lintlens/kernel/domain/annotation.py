"""Renderable annotation units and their decoration style."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from lintlens.kernel.domain.document import TextRange


@dataclass(frozen=True, slots=True)
class MarkdownContent:
    """Markdown text handed to the host's rich-text renderer.

    ``is_trusted`` allows ``command:`` links in the content to be executed.
    """

    value: str
    is_trusted: bool = False


@dataclass(frozen=True, slots=True)
class AfterContent:
    """Text rendered after the end of the anchored range."""

    content_text: str


@dataclass(frozen=True, slots=True)
class Annotation:
    """One inline annotation: trailing text plus an on-demand hover."""

    range: TextRange
    after: AfterContent
    hover_message: MarkdownContent | None = None

    @property
    def content_text(self) -> str:
        return self.after.content_text


class RangeBehavior(StrEnum):
    """How a decoration grows when text is typed at its edges."""

    OPEN_OPEN = "open-open"
    CLOSED_CLOSED = "closed-closed"
    OPEN_CLOSED = "open-closed"
    CLOSED_OPEN = "closed-open"


@dataclass(frozen=True, slots=True)
class DecorationStyle:
    """The kind of decoration annotations are applied under."""

    key: str
    margin: str = "0 0 0 1em"
    color: str = "#999999"
    font_weight: str = "normal"
    font_style: str = "normal"
    text_decoration: str = "none"
    range_behavior: RangeBehavior = RangeBehavior.CLOSED_OPEN
