"""
Pytest fixtures and test configuration for notesmcp tests.
"""

from typing import List

import pytest

from notesmcp.notes import NotesManager
from notesmcp.rate_limit import set_rate_limiter
from notesmcp.scripting.executor import CommandOutcome


class FakeExecutor:
    """Records scripts and replays queued outcomes in order.

    When the queue is empty it answers with a successful, empty outcome.
    """

    def __init__(self):
        self.scripts: List[str] = []
        self.outcomes: List[CommandOutcome] = []

    def queue(self, *outcomes: CommandOutcome) -> "FakeExecutor":
        self.outcomes.extend(outcomes)
        return self

    def succeed(self, output: str = "") -> "FakeExecutor":
        return self.queue(CommandOutcome(success=True, output=output, exit_code=0))

    def fail(self, error: str = "execution error: boom (-1728)", exit_code: int = 1) -> "FakeExecutor":
        return self.queue(CommandOutcome(success=False, output="", error=error, exit_code=exit_code))

    async def execute(self, script: str) -> CommandOutcome:
        self.scripts.append(script)
        if not self.outcomes:
            return CommandOutcome(success=True, output="", exit_code=0)
        return self.outcomes.pop(0)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_executor():
    return FakeExecutor()


@pytest.fixture
def notes_manager(fake_executor):
    return NotesManager(fake_executor, account="iCloud")


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Isolate module-level state and environment between tests."""
    from notesmcp.mcp.server import set_notes_manager

    for name in (
        "APPLE_NOTES_ACCOUNT",
        "APPLE_NOTES_OSASCRIPT",
        "APPLE_NOTES_TIMEOUT",
        "APPLE_NOTES_RATE_LIMIT",
        "APPLE_NOTES_RATE_WINDOW",
        "APPLE_NOTES_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    set_notes_manager(None)
    set_rate_limiter(None)
    yield
    set_notes_manager(None)
    set_rate_limiter(None)
