"""Navigation shell handlers: sidebar toggle and tab links."""

import logging

import gradio as gr

from ..formatting import sidebar_labels
from ..models import ShellState
from ..state import toggle_sidebar

logger = logging.getLogger(__name__)


def sidebar_classes(sidebar_open: bool) -> list[str]:
    """CSS classes for the sidebar column."""
    return ["sidebar"] if sidebar_open else ["sidebar", "sidebar-collapsed"]


def toggle_sidebar_handler(state: ShellState) -> tuple:
    """Switch the link panel between full labels and glyphs.

    Args:
        state: Shell state

    Returns:
        Tuple of (sidebar_update, toggle_button_update, *nav_button_updates, updated_state)
    """
    state = toggle_sidebar(state)
    toggle_label, labels = sidebar_labels(state.sidebar_open)
    logger.debug(f"Sidebar {'expanded' if state.sidebar_open else 'collapsed'}")
    return (
        gr.update(elem_classes=sidebar_classes(state.sidebar_open)),
        gr.update(value=toggle_label),
        *[gr.update(value=label) for label in labels],
        state,
    )


def navigate_to(tab_id: str) -> dict:
    """Select the tab with ``tab_id``."""
    return gr.update(selected=tab_id)
