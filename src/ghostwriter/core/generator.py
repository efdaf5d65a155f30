"""Lyric generation: validate, compile instructions, call the model once.

This module provides :class:`LyricsGenerator`, the single entry point the API
and UI use to turn a :class:`~ghostwriter.core.models.GenerationRequest` into
lyrics.

Flow of :meth:`LyricsGenerator.generate`
----------------------------------------
1. Validate the concept (``EmptyConceptError`` propagates unchanged and no
   request is sent).
2. Compile the instruction string with
   :func:`~ghostwriter.core.prompt_builder.build_instructions`.
3. Call the generation service exactly once at :data:`GENERATION_TEMPERATURE`.
4. Strip the answer; an empty answer raises ``EmptyGenerationError``.
5. Any failure of the call raises ``GenerationServiceError`` with a user-safe
   message. The original exception is logged and chained, never exposed in
   the message.

There is no retry loop, no caching and no locking. Each call is independent;
preventing concurrent submissions is the caller's job.

Usage
-----
::

    from ghostwriter.core.config import config
    from ghostwriter.core.generator import LyricsGenerator

    generator = LyricsGenerator(config)
    lyrics = generator.generate(GenerationRequest(concept="two rival chefs"))
    generator.close()
"""

from __future__ import annotations

import logging
import time
from typing import Protocol

from .config import GhostwriterConfig
from .exceptions import EmptyGenerationError, GenerationServiceError, MissingCredentialError
from .gemini_client import GeminiClient
from .models import GenerationRequest, validate_concept
from .prompt_builder import build_instructions

logger = logging.getLogger(__name__)

#: Sampling temperature for every request: creative but controlled.
GENERATION_TEMPERATURE = 0.88


class TextGenerationClient(Protocol):
    """What the generator needs from a generation-service client."""

    model: str

    def generate_text(self, prompt: str, temperature: float) -> str | None: ...

    def close(self) -> None: ...


class LyricsGenerator:
    """Turns generation requests into lyrics through one model call each.

    Attributes:
        client: The generation-service client. Built from the configuration
            unless one is passed in.
    """

    def __init__(
        self,
        config: GhostwriterConfig,
        client: TextGenerationClient | None = None,
    ) -> None:
        """Initialise the generator.

        Args:
            config: Application configuration. ``api_key``, ``model_id``,
                ``api_base_url``, ``request_timeout`` and ``thinking_budget``
                are read when building the default client.
            client: Optional pre-built client (used by tests and embedders).

        Raises:
            MissingCredentialError: If no client is given and no API key is
                configured.
        """
        self._config = config

        if client is None:
            if not config.has_api_key:
                logger.error("Refusing to start: no API key configured (GHOSTWRITER_API_KEY)")
                raise MissingCredentialError()
            client = GeminiClient(
                config.api_key.get_secret_value(),
                config.model_id,
                base_url=config.api_base_url,
                timeout=config.request_timeout,
                thinking_budget=config.thinking_budget,
            )

        self.client = client
        logger.info(f"LyricsGenerator ready (model={client.model})")

    @property
    def model_id(self) -> str:
        """Identifier of the model requests are sent to."""
        return self.client.model

    def generate(self, request: GenerationRequest) -> str:
        """Generate lyrics for a request.

        Args:
            request: The generation request.

        Returns:
            The generated lyrics, stripped of surrounding whitespace.

        Raises:
            EmptyConceptError: If the concept is blank.
            GenerationServiceError: If the model call failed.
            EmptyGenerationError: If the model returned no usable text.
        """
        concept = validate_concept(request.concept)
        instructions = build_instructions(request)

        logger.info(
            f"Generating lyrics: concept={len(concept)} chars, {request.describe()}, "
            f"model={self.model_id}"
        )
        start = time.monotonic()

        try:
            text = self.client.generate_text(instructions, GENERATION_TEMPERATURE)
        except Exception as e:
            logger.error(f"Generation service call failed: {e}", exc_info=True)
            raise GenerationServiceError() from e

        lyrics = text.strip() if isinstance(text, str) else ""
        if not lyrics:
            logger.warning("Generation service returned no usable text")
            raise EmptyGenerationError()

        logger.info(
            f"Generated {len(lyrics)} characters in {time.monotonic() - start:.1f}s"
        )
        return lyrics

    def close(self) -> None:
        """Release the client's resources."""
        self.client.close()
