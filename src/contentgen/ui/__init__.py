"""Gradio user interface: views, components, handlers and session state."""
