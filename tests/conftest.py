"""Shared pytest fixtures for Ghostwriter tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from ghostwriter.core.config import GhostwriterConfig
from ghostwriter.core.generator import LyricsGenerator
from ghostwriter.core.models import GenerationRequest
from ghostwriter.ui.models import UIState

SAMPLE_LYRICS = """
[Intro]
[Beat Style: orchestral strings] [Vocal Style: announcer]
Ladies and gentlemen, two knives, one kitchen.

[Verse 1]
Salt in the wound, I season every sentence...

[Outro]
Plates down. Service.
"""


class FakeGenerationClient:
    """Stand-in for GeminiClient that records every call.

    Attributes:
        response: Text returned by generate_text (ignored if error is set)
        error: Exception raised by generate_text, if any
        calls: List of (prompt, temperature) tuples, one per call
        closed: True once close() has been called
    """

    def __init__(
        self,
        response: str | None = SAMPLE_LYRICS,
        error: Exception | None = None,
        model: str = "gemini-test-model",
    ):
        self.response = response
        self.error = error
        self.model = model
        self.calls: list[tuple[str, float]] = []
        self.closed = False

    def generate_text(self, prompt: str, temperature: float) -> str | None:
        self.calls.append((prompt, temperature))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True

    @property
    def last_prompt(self) -> str:
        return self.calls[-1][0]


@pytest.fixture
def test_config(monkeypatch) -> GhostwriterConfig:
    """Create a test configuration that ignores the environment and .env.

    Returns:
        GhostwriterConfig instance with a dummy API key
    """
    for var in ("GHOSTWRITER_API_KEY", "GHOSTWRITER_MODEL_ID", "GHOSTWRITER_THINKING_BUDGET"):
        monkeypatch.delenv(var, raising=False)
    return GhostwriterConfig(
        _env_file=None,
        api_key="test-key",
        model_id="gemini-test-model",
    )


@pytest.fixture
def fake_client() -> FakeGenerationClient:
    """Generation client that returns SAMPLE_LYRICS."""
    return FakeGenerationClient()


@pytest.fixture
def generator(test_config, fake_client) -> Generator[LyricsGenerator, None, None]:
    """LyricsGenerator wired to the fake client."""
    gen = LyricsGenerator(test_config, client=fake_client)
    try:
        yield gen
    finally:
        gen.close()


@pytest.fixture
def chef_request() -> GenerationRequest:
    """The two-rival-chefs request with every axis at its default.

    Returns:
        GenerationRequest with the ERB preset and a clean directive
    """
    return GenerationRequest(concept="a rivalry between two rival chefs")


@pytest.fixture
def ui_state(generator) -> UIState:
    """UI state with the fake-backed generator attached."""
    return UIState(generator=generator)


@pytest.fixture
def test_client(monkeypatch, generator):
    """FastAPI TestClient whose lifespan installs the fake-backed generator.

    Yields:
        TestClient with the application lifespan running
    """
    from fastapi.testclient import TestClient

    import ghostwriter.api.main as api_main

    monkeypatch.setattr(api_main, "LyricsGenerator", lambda cfg: generator)

    with TestClient(api_main.app) as client:
        yield client


@pytest.fixture
def make_generator(test_config):
    """Factory for generators backed by a FakeGenerationClient.

    Keyword arguments are passed to FakeGenerationClient.

    Returns:
        Callable returning a LyricsGenerator
    """

    def _make(**client_kwargs) -> LyricsGenerator:
        return LyricsGenerator(test_config, client=FakeGenerationClient(**client_kwargs))

    return _make
