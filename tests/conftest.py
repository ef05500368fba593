"""Shared in-memory adapters and fixtures for all bounded contexts."""

from typing import Optional

import pytest

from update_rules.domain.model import PromptFrequency
from update_rules.domain.ports import ConfigPort, VersionSourcePort
from update_rules.domain.rules import RuleEngine


# ── In-memory adapters ──────────────────────────────────────────────


class InMemoryVersionSource(VersionSourcePort):
    def __init__(self, version: Optional[str] = None):
        self.version = version
        self.calls = 0

    def latest_version(self) -> Optional[str]:
        self.calls += 1
        return self.version


class FailingVersionSource(VersionSourcePort):
    def latest_version(self) -> Optional[str]:
        raise ConnectionError("lookup service unreachable")


class InMemoryConfig(ConfigPort):
    def __init__(self, data: Optional[dict] = None):
        self._data = data or {}

    def load(self) -> dict:
        return dict(self._data)

    def save(self, cfg: dict) -> None:
        self._data = dict(cfg)

    def is_configured(self) -> bool:
        return bool(self._data)


# ── Shared fixtures ─────────────────────────────────────────────────


@pytest.fixture
def conditional_engine():
    """Offer the update 2 minors behind, force it 5 minors behind or at x.5 of the next major."""
    return RuleEngine.conditional(
        PromptFrequency.DAILY,
        voluntary_gap=2,
        involuntary_gap=5,
        major_involuntary_gap=5,
    )


@pytest.fixture
def version_source():
    return InMemoryVersionSource()


@pytest.fixture
def failing_source():
    return FailingVersionSource()
