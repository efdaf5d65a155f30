"""HTTP client for the Gemini ``generateContent`` REST endpoint.

The client sends one request per call and returns the text of the first
candidate. It does not retry and does not translate errors: transport
failures surface as ``httpx`` exceptions and non-2xx answers as
:class:`httpx.HTTPStatusError`. Classifying those is the job of
:class:`~ghostwriter.core.generator.LyricsGenerator`.

Request shape::

    POST {base_url}/models/{model}:generateContent
    x-goog-api-key: <key>

    {
      "contents": [{"role": "user", "parts": [{"text": "<prompt>"}]}],
      "generationConfig": {
        "temperature": 0.88,
        "thinkingConfig": {"thinkingBudget": 0}   # only when configured
      }
    }
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .exceptions import MissingCredentialError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


def extract_text(data: Any) -> str | None:
    """Pull the generated text out of a ``generateContent`` response body.

    Text parts of the first candidate are concatenated. Anything that does
    not look like a text response yields ``None``.
    """
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return None

    texts = [
        part["text"]
        for part in parts
        if isinstance(part, dict) and isinstance(part.get("text"), str) and not part.get("thought")
    ]
    if not texts:
        return None
    return "".join(texts)


class GeminiClient:
    """Minimal synchronous Gemini client.

    Attributes:
        model: Model identifier used in the request path.
        base_url: API base URL without trailing slash.
        thinking_budget: Optional thinking budget; omitted from the payload
            when ``None``.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        thinking_budget: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        api_key = (api_key or "").strip()
        if not api_key:
            raise MissingCredentialError()

        self.model = model
        self.base_url = base_url.rstrip("/")
        self.thinking_budget = thinking_budget
        self._client = httpx.Client(
            headers={"x-goog-api-key": api_key, "Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def build_payload(self, prompt: str, temperature: float) -> dict[str, Any]:
        """Build the JSON body for a single-turn text request."""
        generation_config: dict[str, Any] = {"temperature": temperature}
        if self.thinking_budget is not None:
            generation_config["thinkingConfig"] = {"thinkingBudget": self.thinking_budget}
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }

    def generate_text(self, prompt: str, temperature: float) -> str | None:
        """Send ``prompt`` to the model and return the generated text.

        Returns:
            The candidate text, or ``None`` if the response carried no text.

        Raises:
            httpx.HTTPError: On transport failures and non-2xx responses.
            ValueError: If the response body is not valid JSON.
        """
        url = f"{self.base_url}/models/{self.model}:generateContent"
        logger.debug(f"POST {url} ({len(prompt)} chars, temperature={temperature})")

        response = self._client.post(url, json=self.build_payload(prompt, temperature))
        response.raise_for_status()
        return extract_text(response.json())

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def __enter__(self) -> GeminiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
