"""UI event handlers organized by view.

This package provides handlers for all Gradio UI events, organized into logical modules:
- generator: Text content generation
- image: Image generation, backend notification, and download
- history: Text generation history and its modal
- image_history: Image generation history, preview modal, and download
- detail: Single stored generation by identifier
- shell: Sidebar toggle and tab navigation
"""

from .detail import begin_detail_load, load_detail, load_detail_from_url, render_idle
from .generator import finish_generation, start_generation, submit_content
from .history import (
    begin_history_load,
    close_history_modal,
    load_history,
    open_selected_in_detail,
    refresh_history,
    select_history_item,
)
from .image import (
    download_generated_image,
    finish_image_generation,
    notify_image_generation,
    start_image_generation,
    submit_image,
)
from .image_history import (
    begin_image_history_load,
    close_image_modal,
    download_history_image,
    load_image_history,
    refresh_image_history,
    select_image_item,
)
from .shell import navigate_to, toggle_sidebar_handler

__all__ = [
    # Generator handlers
    "finish_generation",
    "start_generation",
    "submit_content",
    # Image handlers
    "download_generated_image",
    "finish_image_generation",
    "notify_image_generation",
    "start_image_generation",
    "submit_image",
    # History handlers
    "begin_history_load",
    "close_history_modal",
    "load_history",
    "open_selected_in_detail",
    "refresh_history",
    "select_history_item",
    # Image history handlers
    "begin_image_history_load",
    "close_image_modal",
    "download_history_image",
    "load_image_history",
    "refresh_image_history",
    "select_image_item",
    # Detail handlers
    "begin_detail_load",
    "load_detail",
    "load_detail_from_url",
    "render_idle",
    # Shell handlers
    "navigate_to",
    "toggle_sidebar_handler",
]
