"""Tests for the Gradio event handlers, form adapters and session state."""

import pytest

from ghostwriter.core.exceptions import (
    EMPTY_CONCEPT_MESSAGE,
    EMPTY_GENERATION_MESSAGE,
    SERVICE_ERROR_MESSAGE,
    MissingCredentialError,
)
from ghostwriter.core.styles import (
    AXES,
    AdLibIntensity,
    EmotionalTone,
    RhymeComplexity,
    StylePreset,
)
from ghostwriter.ui import state as ui_state_module
from ghostwriter.ui.adapters import AXIS_INPUT_ORDER, convert_form_values_to_request
from ghostwriter.ui.handlers import (
    finish_generation,
    generate_lyrics,
    start_generation,
    toggle_advanced,
)
from ghostwriter.ui.models import (
    ADVANCED_AXES,
    BASIC_AXES,
    GENERATE_BUTTON_LABEL,
    HIDE_ADVANCED_LABEL,
    LOADING_BUTTON_LABEL,
    SHOW_ADVANCED_LABEL,
    UIState,
)
from ghostwriter.ui.state import cleanup_ui_state, initialize_ui_state, set_shared_generator


def default_labels():
    """Default label for every axis, in input order."""
    return tuple(AXES[name].labels[AXES[name].default] for name in AXIS_INPUT_ORDER)


@pytest.fixture(autouse=True)
def reset_shared_generator():
    """Keep the module-level generator from leaking between tests."""
    set_shared_generator(None)
    yield
    set_shared_generator(None)


class TestConvertFormValues:
    """Tests for convert_form_values_to_request."""

    def test_default_labels(self):
        request = convert_form_values_to_request("chefs", False, default_labels())
        assert request.concept == "chefs"
        assert request.explicit is False
        for name, axis in AXES.items():
            assert getattr(request, name) is axis.default

    def test_selected_labels(self):
        labels = list(default_labels())
        labels[AXIS_INPUT_ORDER.index("style_preset")] = "Dark Carnival"
        labels[AXIS_INPUT_ORDER.index("rhyme_complexity")] = "Infinite"
        labels[AXIS_INPUT_ORDER.index("emotional_tone")] = "Witty"
        labels[AXIS_INPUT_ORDER.index("ad_lib_intensity")] = "Loud"

        request = convert_form_values_to_request("x", True, tuple(labels))
        assert request.explicit is True
        assert request.style_preset is StylePreset.ICP
        assert request.rhyme_complexity is RhymeComplexity.GOD_TIER
        assert request.emotional_tone is EmotionalTone.HUMOROUS
        assert request.ad_lib_intensity is AdLibIntensity.HEAVY

    def test_none_concept(self):
        """A missing textbox value becomes an empty concept."""
        assert convert_form_values_to_request(None, False, default_labels()).concept == ""

    def test_wrong_count(self):
        with pytest.raises(ValueError, match="Expected 8"):
            convert_form_values_to_request("x", False, default_labels()[:3])

    def test_unknown_label(self):
        labels = ("Polka",) + default_labels()[1:]
        with pytest.raises(ValueError, match="Style Core"):
            convert_form_values_to_request("x", False, labels)

    def test_axis_layout_covers_all_but_preset(self):
        """Basic and advanced panels together show every refinement axis."""
        assert set(BASIC_AXES) | set(ADVANCED_AXES) | {"style_preset"} == set(AXES)
        assert not set(BASIC_AXES) & set(ADVANCED_AXES)


class TestLoadingState:
    """Tests for start_generation and finish_generation."""

    def test_start_disables_button(self, ui_state):
        ui_state.error = "old error"
        ui_state.lyrics = "old lyrics"

        button, state = start_generation(ui_state)

        assert button["value"] == LOADING_BUTTON_LABEL
        assert button["interactive"] is False
        assert state.is_loading is True
        assert state.error is None
        assert state.lyrics == ""

    def test_finish_enables_button(self, ui_state):
        ui_state.is_loading = True

        button, state = finish_generation(ui_state)

        assert button["value"] == GENERATE_BUTTON_LABEL
        assert button["interactive"] is True
        assert state.is_loading is False


class TestGenerateLyrics:
    """Tests for the generate_lyrics handler."""

    def test_success(self, ui_state, fake_client):
        lyrics, status, state = generate_lyrics("two rival chefs", False, *default_labels(), ui_state)

        assert "[Intro]" in lyrics
        assert lyrics == fake_client.response.strip()
        assert status.startswith("✅ **Lyrics ready!**")
        assert "gemini-test-model" in status
        assert state.lyrics == lyrics
        assert state.error is None
        assert state.generation_count == 1
        assert len(fake_client.calls) == 1

    def test_explicit_checkbox_reaches_prompt(self, ui_state, fake_client):
        generate_lyrics("x", True, *default_labels(), ui_state)
        assert "EXPLICIT: Unfiltered." in fake_client.last_prompt

    def test_empty_concept(self, ui_state, fake_client):
        lyrics, status, state = generate_lyrics("   ", False, *default_labels(), ui_state)

        assert lyrics == ""
        assert status == f"❌ **Validation Error**\n\n{EMPTY_CONCEPT_MESSAGE}"
        assert state.error == EMPTY_CONCEPT_MESSAGE
        assert fake_client.calls == []

    def test_empty_generation(self, ui_state, fake_client):
        fake_client.response = "  "
        lyrics, status, state = generate_lyrics("x", False, *default_labels(), ui_state)

        assert lyrics == ""
        assert "No Lyrics Returned" in status
        assert state.error == EMPTY_GENERATION_MESSAGE
        assert state.generation_count == 0

    def test_service_error(self, ui_state, fake_client):
        fake_client.error = ConnectionError("network down")
        lyrics, status, state = generate_lyrics("x", False, *default_labels(), ui_state)

        assert lyrics == ""
        assert status == f"❌ **Error**\n\n{SERVICE_ERROR_MESSAGE}"
        assert "network down" not in status
        assert state.error == SERVICE_ERROR_MESSAGE

    def test_unknown_label_reports_generic_error(self, ui_state, fake_client):
        labels = ("Polka",) + default_labels()[1:]
        lyrics, status, state = generate_lyrics("x", False, *labels, ui_state)

        assert lyrics == ""
        assert status.startswith("❌ **Error**")
        assert "unexpected error" in state.error
        assert fake_client.calls == []

    def test_failure_then_success(self, ui_state, fake_client):
        """A failed attempt does not block the next one."""
        fake_client.error = ConnectionError("flaky")
        generate_lyrics("x", False, *default_labels(), ui_state)

        fake_client.error = None
        lyrics, _, state = generate_lyrics("x", False, *default_labels(), ui_state)
        assert lyrics
        assert state.error is None
        assert state.generation_count == 1


class TestToggleAdvanced:
    """Tests for toggle_advanced."""

    def test_show_then_hide(self):
        state = UIState()

        group, button, state = toggle_advanced(state)
        assert group["visible"] is True
        assert button["value"] == HIDE_ADVANCED_LABEL
        assert state.show_advanced is True

        group, button, state = toggle_advanced(state)
        assert group["visible"] is False
        assert button["value"] == SHOW_ADVANCED_LABEL
        assert state.show_advanced is False


class TestUIState:
    """Tests for UIState and the state helpers."""

    def test_new_state(self):
        state = UIState()
        assert not state.is_initialized()
        assert state.lyrics == ""
        assert state.generation_count == 0
        assert "initialized=False" in repr(state)

    def test_initialize_uses_shared_generator(self, generator):
        set_shared_generator(generator)
        state = initialize_ui_state(None)
        assert state.generator is generator

    def test_initialize_keeps_existing_generator(self, ui_state, generator):
        assert initialize_ui_state(ui_state).generator is generator

    def test_initialize_without_key(self, monkeypatch, test_config):
        keyless = test_config.model_copy(update={"api_key": None})
        monkeypatch.setattr(ui_state_module, "config", keyless)
        with pytest.raises(MissingCredentialError):
            initialize_ui_state(UIState())

    def test_missing_key_reported_in_handler(self, monkeypatch, test_config):
        keyless = test_config.model_copy(update={"api_key": None})
        monkeypatch.setattr(ui_state_module, "config", keyless)

        lyrics, status, state = generate_lyrics("x", False, *default_labels(), UIState())
        assert lyrics == ""
        assert status.startswith("❌ **Error**")

    def test_cleanup(self, ui_state):
        ui_state.lyrics = "bars"
        ui_state.is_loading = True
        cleanup_ui_state(ui_state)
        assert not ui_state.is_initialized()
        assert ui_state.lyrics == ""
        assert ui_state.is_loading is False
