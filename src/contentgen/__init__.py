"""Content Generator - Gradio front end for a text and image generation backend."""

__version__ = "0.1.0"

from contentgen.core.config import ContentGenConfig, config

__all__ = [
    "ContentGenConfig",
    "config",
]
