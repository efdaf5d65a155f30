"""Tests for ghostwriter.core.gemini_client.

HTTP traffic is served by ``httpx.MockTransport``; nothing leaves the process.
"""

import json

import httpx
import pytest

from ghostwriter.core.exceptions import MissingCredentialError
from ghostwriter.core.gemini_client import GeminiClient, extract_text


def text_response(*texts, **part_extra):
    """Build a generateContent response body with the given text parts."""
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": t, **part_extra} for t in texts]}}
        ]
    }


class RecordingTransport:
    """MockTransport handler that records requests and returns a fixed answer."""

    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body if body is not None else text_response("[Intro]\nbars")
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
def client(recorder):
    c = GeminiClient(
        "secret-key",
        "gemini-test-model",
        base_url="https://example.test/v1beta/",
        transport=httpx.MockTransport(recorder),
    )
    yield c
    c.close()


class TestGenerateText:
    """Tests for GeminiClient.generate_text."""

    def test_returns_text(self, client):
        assert client.generate_text("prompt", 0.88) == "[Intro]\nbars"

    def test_request_shape(self, client, recorder):
        """One POST to the model endpoint with the key header and JSON body."""
        client.generate_text("write bars", 0.88)

        assert len(recorder.requests) == 1
        request = recorder.requests[0]
        assert request.method == "POST"
        assert str(request.url) == (
            "https://example.test/v1beta/models/gemini-test-model:generateContent"
        )
        assert request.headers["x-goog-api-key"] == "secret-key"

        body = json.loads(request.content)
        assert body["contents"] == [{"role": "user", "parts": [{"text": "write bars"}]}]
        assert body["generationConfig"] == {"temperature": 0.88}

    def test_thinking_budget_sent_when_set(self, recorder):
        with GeminiClient(
            "k", "m", thinking_budget=0, transport=httpx.MockTransport(recorder)
        ) as c:
            c.generate_text("p", 0.5)
        body = json.loads(recorder.requests[0].content)
        assert body["generationConfig"]["thinkingConfig"] == {"thinkingBudget": 0}

    def test_http_error_raises(self):
        recorder = RecordingTransport(status_code=500, body={"error": {"message": "boom"}})
        with GeminiClient("k", "m", transport=httpx.MockTransport(recorder)) as c:
            with pytest.raises(httpx.HTTPStatusError):
                c.generate_text("p", 0.88)

    def test_blocked_response_returns_none(self):
        recorder = RecordingTransport(body={"promptFeedback": {"blockReason": "SAFETY"}})
        with GeminiClient("k", "m", transport=httpx.MockTransport(recorder)) as c:
            assert c.generate_text("p", 0.88) is None

    def test_padded_key_sent_stripped(self, recorder):
        """Whitespace around a key read from .env is not sent upstream."""
        with GeminiClient("  secret-key\n", "m", transport=httpx.MockTransport(recorder)) as c:
            c.generate_text("p", 0.88)
        assert recorder.requests[0].headers["x-goog-api-key"] == "secret-key"

    @pytest.mark.parametrize("key", [None, "", "  "])
    def test_missing_key(self, key):
        with pytest.raises(MissingCredentialError):
            GeminiClient(key, "m")


class TestExtractText:
    """Tests for extract_text."""

    def test_single_part(self):
        assert extract_text(text_response("hello")) == "hello"

    def test_parts_concatenated(self):
        assert extract_text(text_response("one ", "two")) == "one two"

    def test_thought_parts_skipped(self):
        data = text_response("answer")
        data["candidates"][0]["content"]["parts"].insert(0, {"text": "thinking...", "thought": True})
        assert extract_text(data) == "answer"

    @pytest.mark.parametrize(
        "data",
        [
            None,
            [],
            {},
            {"candidates": []},
            {"candidates": [{}]},
            {"candidates": [{"content": {}}]},
            {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
        ],
        ids=["none", "list", "empty", "no-candidates", "no-content", "no-parts", "no-text"],
    )
    def test_no_text(self, data):
        assert extract_text(data) is None
