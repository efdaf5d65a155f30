"""Core functionality for lyric generation.

This package holds everything that does not depend on a front-end:

- **styles**: Closed style axes (enums), UI labels and instruction fragments
- **models**: ``GenerationRequest`` and ``validate_concept``
- **prompt_builder**: Deterministic instruction compilation
- **gemini_client**: One-shot HTTP client for the Gemini REST API
- **generator**: ``LyricsGenerator``, which validates, compiles and calls the model
- **config**: Configuration management using Pydantic Settings
- **exceptions**: Error taxonomy shared by the API and the UI

Usage Example
-------------
::

    from ghostwriter.core import GenerationRequest, LyricsGenerator, config

    generator = LyricsGenerator(config)
    lyrics = generator.generate(GenerationRequest(concept="a heist on the moon"))
"""

from ghostwriter.core.config import GhostwriterConfig, config
from ghostwriter.core.generator import GENERATION_TEMPERATURE, LyricsGenerator
from ghostwriter.core.models import GenerationRequest, validate_concept
from ghostwriter.core.prompt_builder import build_instructions

__all__ = [
    "GENERATION_TEMPERATURE",
    "GenerationRequest",
    "GhostwriterConfig",
    "LyricsGenerator",
    "build_instructions",
    "config",
    "validate_concept",
]
