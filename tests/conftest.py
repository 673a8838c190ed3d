"""Shared fixtures."""

import pytest

from commitgen.llm import LLMClient, LLMResponse


class StubClient(LLMClient):
    """Replays scripted replies; an Exception entry is raised instead.

    The last reply repeats once the script runs out.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    @property
    def name(self) -> str:
        return "Stub"

    def generate(self, system: str, messages: list[str]) -> LLMResponse:
        self.calls.append((system, messages))
        reply = self.replies[min(len(self.calls), len(self.replies)) - 1]
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(content=reply, model="stub", tokens_used=12)


@pytest.fixture
def make_client():
    """Return a factory for StubClient."""
    return StubClient
