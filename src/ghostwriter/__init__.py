"""Ghostwriter Lyric Generator - structured rap-lyric prompts for the Gemini API."""

__version__ = "0.1.0"

from ghostwriter.core.config import GhostwriterConfig, config
from ghostwriter.core.exceptions import (
    EmptyConceptError,
    EmptyGenerationError,
    GenerationServiceError,
    GhostwriterError,
    MissingCredentialError,
)
from ghostwriter.core.generator import LyricsGenerator
from ghostwriter.core.models import GenerationRequest, validate_concept
from ghostwriter.core.prompt_builder import build_instructions

__all__ = [
    "GhostwriterConfig",
    "config",
    "GenerationRequest",
    "validate_concept",
    "build_instructions",
    "LyricsGenerator",
    "GhostwriterError",
    "EmptyConceptError",
    "GenerationServiceError",
    "EmptyGenerationError",
    "MissingCredentialError",
]
