"""Configuration file for pytest containing shared fixtures.

This module provides fixtures that can be used across multiple test files:
- lookup: an in-memory RuleInfoLookup with controllable failures and delays
- document: builds TextDocument snapshots
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import pytest

from lintlens.kernel.config import LoggingConfig, clear_config_cache
from lintlens.kernel.domain import RuleInfo, RuleNotFound, TextDocument
from lintlens.kernel.logging import configure_logging


class StaticLookup:
    """RuleInfoLookup returning canned metadata.

    Names listed in ``failing`` raise; ``delays`` postpones individual lookups.
    ``finished`` records lookups that ran to the end (returned or raised).
    """

    def __init__(
        self,
        infos: dict[str, RuleInfo] | None = None,
        failing: set[str] | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.infos = dict(infos or {})
        self.failing = set(failing or ())
        self.delays = dict(delays or {})
        self.calls: list[str] = []
        self.finished: list[str] = []

    async def aget_rule_info(self, rule_name: str) -> RuleInfo:
        self.calls.append(rule_name)
        if delay := self.delays.get(rule_name):
            await asyncio.sleep(delay)
        self.finished.append(rule_name)
        if rule_name in self.failing:
            raise RuntimeError(f"lookup failed for {rule_name}")
        return self.infos.get(rule_name, RuleNotFound(rule_name=rule_name))


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    # activate() and CLI runs rebind sinks to the current sys.stderr
    configure_logging(LoggingConfig(level="WARNING", format="console"), force_reconfigure=True)


@pytest.fixture(autouse=True)
def _fresh_config_cache() -> None:
    clear_config_cache()


@pytest.fixture
def lookup() -> StaticLookup:
    return StaticLookup()


@pytest.fixture
def document() -> Callable[..., TextDocument]:
    def _make(text: str, name: str = "app.js") -> TextDocument:
        return TextDocument(uri=f"file:///project/{name}", text=text)

    return _make


@pytest.fixture
def lookup_factory() -> type[StaticLookup]:
    return StaticLookup
