"""State management utilities for the Ghostwriter UI.

This module handles the initialization and cleanup of per-session UI state.
"""

import logging

from ghostwriter.core.config import config
from ghostwriter.core.generator import LyricsGenerator

from .models import UIState

logger = logging.getLogger(__name__)

# Shared generator used by every session. Built by the entry point before the
# UI launches so that a missing credential stops startup.
_shared_generator: LyricsGenerator | None = None


def set_shared_generator(generator: LyricsGenerator | None) -> None:
    """Install the generator new sessions should use.

    Args:
        generator: Generator instance, or None to clear it
    """
    global _shared_generator
    _shared_generator = generator


def initialize_ui_state(state: UIState | None = None) -> UIState:
    """Initialize or ensure UI state is ready.

    If state is None a new one is created. A state without a generator gets
    the shared generator, or a newly built one if none was installed.

    Args:
        state: Existing UIState or None

    Returns:
        Initialized UIState instance

    Raises:
        MissingCredentialError: If a generator has to be built and no API key
            is configured
    """
    if state is None:
        logger.info("Creating new UIState")
        state = UIState()

    if state.is_initialized():
        logger.debug("UIState already initialized")
        return state

    global _shared_generator
    if _shared_generator is None:
        logger.info("Initializing LyricsGenerator")
        _shared_generator = LyricsGenerator(config)

    state.generator = _shared_generator
    logger.info(f"UIState initialization complete: {state}")
    return state


def cleanup_ui_state(state: UIState) -> None:
    """Clear per-session references.

    The shared generator is left open; it is closed by the entry point when
    the server stops.

    Args:
        state: UI state to clean up
    """
    logger.info("Cleaning up UIState")
    state.generator = None
    state.lyrics = ""
    state.error = None
    state.is_loading = False
