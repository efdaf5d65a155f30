"""Reusable UI components for the Ghostwriter Gradio interface."""

import gradio as gr

from ghostwriter.core.styles import STYLE_PRESET_DESCRIPTIONS, STYLE_PRESET_LABELS, Axis


class AxisControl:
    """Radio control for one style axis.

    Choices are the axis' UI labels; the default label is preselected.
    """

    def __init__(self, axis: Axis, interactive: bool = True):
        """Initialize an axis control.

        Args:
            axis: The style axis this control selects a value for
            interactive: Whether the control starts enabled
        """
        self.axis = axis
        self.radio = gr.Radio(
            label=axis.title,
            choices=list(axis.labels.values()),
            value=axis.labels[axis.default],
            interactive=interactive,
        )

    @property
    def component(self) -> gr.Radio:
        """The underlying Gradio component."""
        return self.radio


def style_preset_guide() -> str:
    """Markdown list of style presets with their one-line descriptions."""
    lines = [
        f"- **{STYLE_PRESET_LABELS[preset]}**: {description}"
        for preset, description in STYLE_PRESET_DESCRIPTIONS.items()
    ]
    return "\n".join(lines)
