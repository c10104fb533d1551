"""Annotation controller - refreshes the inline rule annotations of a view.

A refresh pass parses the view's document, resolves the metadata of every
referenced rule concurrently in an asyncio.TaskGroup, and replaces the view's
annotations in a single call. A pass is all-or-nothing: if any lookup fails
the remaining lookups are cancelled and the previous annotations stay in place.

Each view carries a generation number that every refresh and clear advances.
A pass applies its result only if its generation is still current and the
view is still alive, so a slow pass never overwrites a newer one.
"""

from __future__ import annotations

import asyncio
import weakref
from collections.abc import Sequence
from typing import TYPE_CHECKING

from lintlens.kernel.annotations.composer import compose_hover, compose_summary
from lintlens.kernel.annotations.decoration import build_decoration, build_decoration_style
from lintlens.kernel.config.models import AnnotationConfig
from lintlens.kernel.logging import get_logger

if TYPE_CHECKING:
    from lintlens.kernel.domain import Annotation, ViolatedRule
    from lintlens.kernel.ports import EditorView, RuleInfoLookup, RuleParser

logger = get_logger(__name__)


def _is_open(view: EditorView | None) -> bool:
    return view is not None and not view.is_disposed


def _is_live(view: EditorView | None) -> bool:
    return _is_open(view) and view.document is not None  # type: ignore[union-attr]


class AnnotationController:
    """Keeps the inline rule annotations of editor views up to date.

    Parameters
    ----------
    lookup : RuleInfoLookup
        Resolves rule names to metadata
    config : AnnotationConfig | None
        Decoration style and command settings (defaults if None)

    Notes
    -----
    Views are tracked in a ``WeakKeyDictionary`` and must be weak-referenceable.

    Examples
    --------
    Example usage::

        controller = AnnotationController(catalog)
        await controller.arefresh(view, parse_directive_comments)
        controller.clear(view)
    """

    def __init__(self, lookup: RuleInfoLookup, config: AnnotationConfig | None = None) -> None:
        self._lookup = lookup
        self._config = config or AnnotationConfig()
        self.decoration = build_decoration_style(self._config)
        self._generations: weakref.WeakKeyDictionary[EditorView, int] = (
            weakref.WeakKeyDictionary()
        )
        self._pending: set[asyncio.Task[bool]] = set()

    def refresh(self, view: EditorView | None, parse: RuleParser) -> asyncio.Task[bool] | None:
        """Schedule a refresh pass on the running loop and return without waiting.

        Must be called from a coroutine or callback running on the event loop.
        Returns the scheduled task, or None when the view is not live.

        Raises
        ------
        RuntimeError
            If no event loop is running in the current thread
        """
        if not _is_live(view):
            return None
        task = asyncio.get_running_loop().create_task(self.arefresh(view, parse))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def arefresh(self, view: EditorView | None, parse: RuleParser) -> bool:
        """Run one refresh pass.

        Returns
        -------
        bool
            True if new annotations were applied, False if the pass was skipped,
            failed, or went stale
        """
        if view is None or not _is_live(view):
            return False
        document = view.document
        generation = self._advance(view)

        try:
            rules = list(parse(document))  # type: ignore[arg-type]
            if not rules:
                return self._apply(view, [], generation)
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(self._abuild(rule)) for rule in rules]
            annotations = [task.result() for task in tasks]
        except Exception as e:
            errors = e.exceptions if isinstance(e, ExceptionGroup) else (e,)
            logger.warning(
                "Refresh of {uri} abandoned, keeping previous annotations: {error}",
                uri=document.uri if document else None,
                error="; ".join(str(error) for error in errors),
            )
            return False

        return self._apply(view, annotations, generation)

    def clear(self, view: EditorView | None) -> None:
        """Remove every annotation from ``view``; no-op for missing or disposed views."""
        if view is None or not _is_open(view):
            return
        self._apply(view, [], self._advance(view))

    async def _abuild(self, rule: ViolatedRule) -> Annotation:
        info = await self._lookup.aget_rule_info(rule.name)
        hover = compose_hover(
            info,
            extension_name=self._config.extension_name,
            command=self._config.open_docs_command,
        )
        return build_decoration(compose_summary(info), hover, rule.line_ending_range)

    def _advance(self, view: EditorView) -> int:
        generation = self._generations.get(view, 0) + 1
        self._generations[view] = generation
        return generation

    def _apply(
        self, view: EditorView, annotations: Sequence[Annotation], generation: int
    ) -> bool:
        if not _is_open(view):
            logger.debug("View disposed before annotations were applied")
            return False
        if self._generations.get(view) != generation:
            logger.debug(
                "Discarding stale refresh (generation {generation})", generation=generation
            )
            return False
        view.set_annotations(self.decoration, list(annotations))
        logger.debug("Applied {count} annotations", count=len(annotations))
        return True
