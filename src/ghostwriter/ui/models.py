"""Data models for Ghostwriter UI state."""

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class UIState:
    """Session state for the Gradio UI.

    This represents all the stateful objects that need to be maintained
    per user session. Each user gets their own UIState instance, so the
    loading flag and last result are never shared between sessions.

    Attributes
    ----------
    generator : Any | None
        LyricsGenerator instance used for this session
    lyrics : str
        Lyrics from the last successful generation
    error : str | None
        User-facing message from the last failed generation
    is_loading : bool
        True while a generation request is outstanding
    show_advanced : bool
        Whether the advanced controls panel is visible
    generation_count : int
        Number of successful generations in this session
    """

    generator: Any | None = None  # LyricsGenerator instance
    lyrics: str = ""
    error: str | None = None
    is_loading: bool = False
    show_advanced: bool = False
    generation_count: int = 0

    def is_initialized(self) -> bool:
        """Check if the state has a generator attached.

        Returns:
            True if a generator is available
        """
        return self.generator is not None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(initialized={self.is_initialized()}, "
            f"loading={self.is_loading}, "
            f"generations={self.generation_count})"
        )


# UI Constants
GENERATE_BUTTON_LABEL = "Generate Masterpiece"
LOADING_BUTTON_LABEL = "Architecting Bars..."
SHOW_ADVANCED_LABEL = "All Controls"
HIDE_ADVANCED_LABEL = "Simple View"

CONCEPT_PLACEHOLDER = "What's the track about? Be specific or abstract..."
READY_MESSAGE = "*Ready to write*"

# Axes shown in the always-visible part of the form; the rest sit behind
# the "All Controls" toggle.
BASIC_AXES = ("rhyme_complexity", "energy_level", "storytelling_depth", "emotional_tone")
ADVANCED_AXES = ("vocabulary_level", "ad_lib_intensity", "regional_flavor")
