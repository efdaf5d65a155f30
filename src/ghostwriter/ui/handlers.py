"""Gradio event handlers for the lyric form."""

import logging

import gradio as gr

from ghostwriter.core.exceptions import (
    EmptyConceptError,
    EmptyGenerationError,
    GenerationServiceError,
)

from .adapters import convert_form_values_to_request
from .models import (
    GENERATE_BUTTON_LABEL,
    HIDE_ADVANCED_LABEL,
    LOADING_BUTTON_LABEL,
    SHOW_ADVANCED_LABEL,
    UIState,
)
from .state import initialize_ui_state

logger = logging.getLogger(__name__)


def start_generation(state: UIState) -> tuple[gr.Button, UIState]:
    """Lock the form before a generation request is sent.

    Args:
        state: UI state

    Returns:
        Tuple of (generate_button_update, updated_state)
    """
    state.is_loading = True
    state.error = None
    state.lyrics = ""
    return gr.update(value=LOADING_BUTTON_LABEL, interactive=False), state


def finish_generation(state: UIState) -> tuple[gr.Button, UIState]:
    """Unlock the form once the generation request has resolved.

    Args:
        state: UI state

    Returns:
        Tuple of (generate_button_update, updated_state)
    """
    state.is_loading = False
    return gr.update(value=GENERATE_BUTTON_LABEL, interactive=True), state


def generate_lyrics(
    concept: str,
    explicit: bool,
    style_preset: str,
    rhyme_complexity: str,
    storytelling_depth: str,
    emotional_tone: str,
    vocabulary_level: str,
    ad_lib_intensity: str,
    regional_flavor: str,
    energy_level: str,
    state: UIState,
) -> tuple[str, str, UIState]:
    """Generate lyrics from the form inputs.

    Axis arguments are the selected UI labels, in instruction order.

    Args:
        concept: Concept text
        explicit: Explicit-content flag
        style_preset: Selected style preset label
        rhyme_complexity: Selected rhyme label
        storytelling_depth: Selected story label
        emotional_tone: Selected tone label
        vocabulary_level: Selected vocabulary label
        ad_lib_intensity: Selected ad-lib label
        regional_flavor: Selected dialect label
        energy_level: Selected energy label
        state: UI state

    Returns:
        Tuple of (lyrics, status_markdown, updated_state)
    """
    try:
        state = initialize_ui_state(state)

        request = convert_form_values_to_request(
            concept,
            explicit,
            (
                style_preset,
                rhyme_complexity,
                storytelling_depth,
                emotional_tone,
                vocabulary_level,
                ad_lib_intensity,
                regional_flavor,
                energy_level,
            ),
        )

        lyrics = state.generator.generate(request)

        state.lyrics = lyrics
        state.error = None
        state.generation_count += 1

        info = f"✅ **Lyrics ready!** ({len(lyrics):,} characters, {state.generator.model_id})"
        return lyrics, info, state

    except EmptyConceptError as e:
        # User-friendly validation error
        logger.warning(f"Validation error: {e}")
        state.error = str(e)
        return "", f"❌ **Validation Error**\n\n{e}", state

    except EmptyGenerationError as e:
        logger.warning(f"Empty generation: {e}")
        state.error = str(e)
        return "", f"❌ **No Lyrics Returned**\n\n{e}", state

    except GenerationServiceError as e:
        # Details are already logged by the generator
        state.error = str(e)
        return "", f"❌ **Error**\n\n{e}", state

    except Exception as e:
        # Unexpected error
        logger.error(f"Error generating lyrics: {e}", exc_info=True)
        state.error = "An unexpected error occurred. Check logs for details."
        return "", f"❌ **Error**\n\n{state.error}", state


def toggle_advanced(state: UIState) -> tuple[gr.Group, gr.Button, UIState]:
    """Show or hide the advanced controls.

    Args:
        state: UI state

    Returns:
        Tuple of (advanced_group_update, toggle_button_update, updated_state)
    """
    state.show_advanced = not state.show_advanced
    label = HIDE_ADVANCED_LABEL if state.show_advanced else SHOW_ADVANCED_LABEL
    return gr.update(visible=state.show_advanced), gr.update(value=label), state
