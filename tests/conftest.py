"""Shared fixtures for the dockgen test suite.

Settings are built without reading .env so a developer's local overrides
never leak into assertions. Port prompts are always non-interactive.
"""

import pytest

from dockgen.config import Settings
from dockgen.runtime.types import PortResult


class FailingPrompt:
    """Port prompt that always fails, counting how often it was asked."""

    def __init__(self, error: str = "prompt aborted"):
        self.error = error
        self.calls = 0

    def __call__(self) -> PortResult:
        self.calls += 1
        return PortResult.failure(self.error)


class ExplodingPrompt:
    """Port prompt that must never be consulted."""

    def __call__(self) -> PortResult:
        raise AssertionError("port prompt should not have been called")


@pytest.fixture
def settings(monkeypatch) -> Settings:
    for var in ("DOCKGEN_DEFAULT_NET_VERSION", "DOCKGEN_DEFAULT_GO_VERSION",
                "DOCKGEN_DEFAULT_PORT", "DOCKGEN_STRICT_PORT", "DOCKGEN_PUBLISH_DIR"):
        monkeypatch.delenv(var, raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def failing_prompt() -> FailingPrompt:
    return FailingPrompt()


@pytest.fixture
def exploding_prompt() -> ExplodingPrompt:
    return ExplodingPrompt()
