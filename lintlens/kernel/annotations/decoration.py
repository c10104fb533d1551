"""Turn composed text and an anchor range into an annotation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lintlens.kernel.domain import (
    AfterContent,
    Annotation,
    DecorationStyle,
    MarkdownContent,
    RangeBehavior,
    TextRange,
)

if TYPE_CHECKING:
    from lintlens.kernel.config.models import AnnotationConfig

ANNOTATION_DECORATION_KEY = "lintlens.annotation"


def build_decoration(
    summary: str, hover: MarkdownContent | None, range: TextRange
) -> Annotation:
    """Attach ``summary`` as trailing content at ``range`` with ``hover`` on demand."""
    return Annotation(range=range, after=AfterContent(summary), hover_message=hover)


def build_decoration_style(config: AnnotationConfig) -> DecorationStyle:
    """Decoration kind all LintLens annotations are applied under."""
    return DecorationStyle(
        key=ANNOTATION_DECORATION_KEY,
        margin=config.margin,
        color=config.color,
        font_weight=config.font_weight,
        font_style=config.font_style,
        text_decoration=config.text_decoration,
        range_behavior=RangeBehavior.CLOSED_OPEN,
    )
