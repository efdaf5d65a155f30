"""Gradio UI for the Ghostwriter Lyric Generator."""

import logging

import gradio as gr

from ghostwriter.core.config import config
from ghostwriter.core.generator import LyricsGenerator
from ghostwriter.core.styles import AXES

from .components import AxisControl, style_preset_guide
from .handlers import finish_generation, generate_lyrics, start_generation, toggle_advanced
from .models import (
    ADVANCED_AXES,
    BASIC_AXES,
    CONCEPT_PLACEHOLDER,
    GENERATE_BUTTON_LABEL,
    READY_MESSAGE,
    SHOW_ADVANCED_LABEL,
    UIState,
)
from .state import set_shared_generator

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> gr.Blocks:
    """Create the Gradio UI.

    Returns:
        Gradio Blocks app
    """
    app = gr.Blocks(title="Ghostwriter Lyric Generator")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState())

        gr.Markdown(
            """
            # Ghostwriter
            ### The Architect lyrical engine
            """
        )

        with gr.Row():
            with gr.Column(scale=1):
                concept_input = gr.Textbox(
                    label="The Concept",
                    placeholder=CONCEPT_PLACEHOLDER,
                    lines=4,
                )

                controls = {}

                # Presets column
                gr.Markdown("### Style Core")
                controls["style_preset"] = AxisControl(AXES["style_preset"])
                with gr.Accordion("Preset guide", open=False):
                    gr.Markdown(style_preset_guide())

                # Refinement column
                gr.Markdown("### The Fine Print")
                for name in BASIC_AXES:
                    controls[name] = AxisControl(AXES[name])

                advanced_btn = gr.Button(SHOW_ADVANCED_LABEL, variant="secondary", size="sm")
                with gr.Group(visible=False) as advanced_group:
                    for name in ADVANCED_AXES:
                        controls[name] = AxisControl(AXES[name])

                explicit_check = gr.Checkbox(
                    label="Explicit Content",
                    value=False,
                    info="Unfiltered lyrics; off keeps them radio clean",
                )

                generate_btn = gr.Button(GENERATE_BUTTON_LABEL, variant="primary", size="lg")

            with gr.Column(scale=2):
                status_output = gr.Markdown(value=READY_MESSAGE)
                lyrics_output = gr.Textbox(
                    label="Lyrics",
                    lines=30,
                    interactive=False,
                )

        gr.Markdown(
            f"""
            ---
            **Model:** {config.model_id}
            """
        )

        # Event handlers
        advanced_btn.click(
            fn=toggle_advanced,
            inputs=[ui_state],
            outputs=[advanced_group, advanced_btn, ui_state],
        )

        # The button stays disabled until the request resolves, so a session
        # never has two generations in flight.
        axis_inputs = [controls[name].component for name in AXES]
        generate_btn.click(
            fn=start_generation,
            inputs=[ui_state],
            outputs=[generate_btn, ui_state],
            queue=False,
        ).then(
            fn=generate_lyrics,
            inputs=[concept_input, explicit_check, *axis_inputs, ui_state],
            outputs=[lyrics_output, status_output, ui_state],
        ).then(
            fn=finish_generation,
            inputs=[ui_state],
            outputs=[generate_btn, ui_state],
            queue=False,
        )

    return app


def main():
    """Main entry point for the application."""
    logger.info("Starting Ghostwriter Lyric Generator UI...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")

    # Build the generator up front so a missing API key stops startup
    generator = LyricsGenerator(config)
    set_shared_generator(generator)

    app = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    try:
        app.launch(
            server_name=config.gradio_server_name,
            server_port=config.gradio_server_port,
            share=config.gradio_share,
            show_error=True,
            inbrowser=False,
        )
    finally:
        generator.close()
        set_shared_generator(None)


if __name__ == "__main__":
    main()
