"""Gradio form UI for the Ghostwriter Lyric Generator."""
