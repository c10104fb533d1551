"""Tests for lintlens.kernel.annotations.controller."""

from __future__ import annotations

import asyncio

import pytest

from lintlens.drivers.parsers import parse_directive_comments
from lintlens.drivers.views import InMemoryView
from lintlens.kernel.annotations.controller import AnnotationController
from lintlens.kernel.domain import Position, ResolvedRule, TextDocument, ViolatedRule
from lintlens.kernel.glyphs import Glyph


def _rules_at_line_ends(*names: str):
    """Parser yielding ``names`` anchored at the end of consecutive lines."""

    def parse(document: TextDocument) -> list[ViolatedRule]:
        return [
            ViolatedRule(name, document.line_ending_range(index))
            for index, name in enumerate(names)
        ]

    return parse


def _no_rules(document: TextDocument) -> list[ViolatedRule]:
    return []


def _broken_parser(document: TextDocument) -> list[ViolatedRule]:
    raise ValueError("unparseable")


FIVE_LINES = "a;\nb;\nc;\nd;\ne;\n"
FIVE_RULES = _rules_at_line_ends("r1", "r2", "r3", "r4", "r5")


class TestRefresh:
    @pytest.mark.asyncio
    async def test_one_annotation_per_rule(self, lookup_factory, document) -> None:
        lookup = lookup_factory({
            "no-console": ResolvedRule(
                rule_name="no-console", is_recommended=True, description="disallow console"
            ),
        })
        controller = AnnotationController(lookup)
        view = InMemoryView(document("console.log(1) // eslint-disable-line no-console\n"))

        assert await controller.arefresh(view, parse_directive_comments) is True

        annotations = view.annotations_for(controller.decoration)
        assert len(annotations) == 1
        assert annotations[0].content_text == f"{Glyph.RECOMMENDED} disallow console"
        assert annotations[0].hover_message is not None
        assert annotations[0].hover_message.is_trusted

    @pytest.mark.asyncio
    async def test_ranges_are_pinned_to_line_ends(self, lookup, document) -> None:
        controller = AnnotationController(lookup)
        view = InMemoryView(document("short\na much longer line\nmid\n"))

        await controller.arefresh(view, _rules_at_line_ends("a", "b", "c"))

        ranges = [a.range for a in view.annotations_for(controller.decoration)]
        assert [r.start for r in ranges] == [Position(0, 5), Position(1, 18), Position(2, 3)]
        assert all(r.is_empty for r in ranges)

    @pytest.mark.asyncio
    async def test_output_follows_parser_order(self, lookup_factory, document) -> None:
        lookup = lookup_factory(
            {name: ResolvedRule(rule_name=name, description=name) for name in ("a", "b", "c")},
            delays={"a": 0.03, "b": 0.01},
        )
        controller = AnnotationController(lookup)
        view = InMemoryView(document("1\n2\n3\n"))

        await controller.arefresh(view, _rules_at_line_ends("a", "b", "c"))

        texts = [a.content_text for a in view.annotations_for(controller.decoration)]
        assert texts == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_lookups_run_concurrently(self, lookup_factory, document) -> None:
        names = [f"r{i}" for i in range(5)]
        lookup = lookup_factory(delays=dict.fromkeys(names, 0.05))
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))

        loop = asyncio.get_running_loop()
        started = loop.time()
        await controller.arefresh(view, _rules_at_line_ends(*names))

        assert loop.time() - started < 0.2
        assert sorted(lookup.calls) == names

    @pytest.mark.asyncio
    async def test_empty_parse_clears_previous(self, lookup, document) -> None:
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))
        await controller.arefresh(view, FIVE_RULES)
        assert len(view.annotations_for(controller.decoration)) == 5

        assert await controller.arefresh(view, _no_rules) is True

        assert view.annotations_for(controller.decoration) == ()
        assert lookup.calls.count("r1") == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failing", [{"r1"}, {"r3", "r5"}, {"r1", "r2", "r3", "r4", "r5"}])
    async def test_lookup_failure_keeps_previous(
        self, lookup_factory, document, failing: set[str]
    ) -> None:
        lookup = lookup_factory()
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))
        await controller.arefresh(view, _rules_at_line_ends("old"))
        previous = view.annotations_for(controller.decoration)

        lookup.failing = failing
        assert await controller.arefresh(view, FIVE_RULES) is False

        assert view.annotations_for(controller.decoration) == previous
        assert view.apply_count == 1

    @pytest.mark.asyncio
    async def test_failed_lookup_cancels_siblings(self, lookup_factory, document) -> None:
        lookup = lookup_factory(failing={"a", "b"}, delays={"b": 0.05, "c": 0.05})
        controller = AnnotationController(lookup)
        view = InMemoryView(document("1\n2\n3\n"))

        assert await controller.arefresh(view, _rules_at_line_ends("a", "b", "c")) is False
        await asyncio.sleep(0.1)

        assert lookup.finished == ["a"]
        assert view.apply_count == 0

    @pytest.mark.asyncio
    async def test_parser_failure_keeps_previous(self, lookup, document) -> None:
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))
        await controller.arefresh(view, FIVE_RULES)

        assert await controller.arefresh(view, _broken_parser) is False
        assert len(view.annotations_for(controller.decoration)) == 5

    @pytest.mark.asyncio
    async def test_missing_view_is_skipped(self, lookup) -> None:
        controller = AnnotationController(lookup)
        assert await controller.arefresh(None, FIVE_RULES) is False
        assert await controller.arefresh(InMemoryView(None), FIVE_RULES) is False
        assert lookup.calls == []

    @pytest.mark.asyncio
    async def test_disposed_view_is_skipped(self, lookup, document) -> None:
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))
        view.dispose()

        assert await controller.arefresh(view, FIVE_RULES) is False
        assert lookup.calls == []

    @pytest.mark.asyncio
    async def test_view_disposed_during_lookup(self, lookup_factory, document) -> None:
        lookup = lookup_factory(delays={"r1": 0.02})
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))

        task = asyncio.create_task(controller.arefresh(view, FIVE_RULES))
        await asyncio.sleep(0)
        view.dispose()

        assert await task is False
        assert view.apply_count == 0

    @pytest.mark.asyncio
    async def test_stale_refresh_is_discarded(self, lookup_factory, document) -> None:
        lookup = lookup_factory(
            {
                "slow": ResolvedRule(rule_name="slow", description="slow"),
                "fast": ResolvedRule(rule_name="fast", description="fast"),
            },
            delays={"slow": 0.05},
        )
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))

        first = asyncio.create_task(controller.arefresh(view, _rules_at_line_ends("slow")))
        await asyncio.sleep(0)
        second = await controller.arefresh(view, _rules_at_line_ends("fast"))

        assert second is True
        assert await first is False
        texts = [a.content_text for a in view.annotations_for(controller.decoration)]
        assert texts == ["fast"]

    @pytest.mark.asyncio
    async def test_clear_invalidates_pending_refresh(self, lookup_factory, document) -> None:
        lookup = lookup_factory(delays={"r1": 0.02})
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))

        task = asyncio.create_task(controller.arefresh(view, FIVE_RULES))
        await asyncio.sleep(0)
        controller.clear(view)

        assert await task is False
        assert view.annotations_for(controller.decoration) == ()

    @pytest.mark.asyncio
    async def test_refresh_schedules_task(self, lookup, document) -> None:
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))

        task = controller.refresh(view, FIVE_RULES)

        assert isinstance(task, asyncio.Task)
        assert view.apply_count == 0
        assert await task is True
        assert len(view.annotations_for(controller.decoration)) == 5

    @pytest.mark.asyncio
    async def test_refresh_without_live_view(self, lookup) -> None:
        controller = AnnotationController(lookup)
        assert controller.refresh(None, FIVE_RULES) is None
        assert controller.refresh(InMemoryView(None), FIVE_RULES) is None

    def test_refresh_requires_running_loop(self, lookup, document) -> None:
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))

        with pytest.raises(RuntimeError):
            controller.refresh(view, FIVE_RULES)

        assert lookup.calls == []


class TestClear:
    @pytest.mark.asyncio
    async def test_clear_removes_all(self, lookup, document) -> None:
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))
        await controller.arefresh(view, FIVE_RULES)
        assert len(view.annotations_for(controller.decoration)) == 5

        controller.clear(view)

        assert view.annotations_for(controller.decoration) == ()

    def test_clear_on_missing_or_disposed_view(self, lookup, document) -> None:
        controller = AnnotationController(lookup)
        view = InMemoryView(document(FIVE_LINES))
        view.dispose()

        controller.clear(None)
        controller.clear(view)

        assert view.apply_count == 0

    def test_clear_without_document(self, lookup) -> None:
        controller = AnnotationController(lookup)
        view = InMemoryView(None)

        controller.clear(view)

        assert view.apply_count == 1
