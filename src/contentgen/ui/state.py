"""State management utilities for the Content Generator UI.

Every fetching view follows the same lifecycle: it starts in ``loading`` on
mount, then lands in ``success`` or ``error``. A terminal phase is only left
through a fresh mount or an explicit refetch. The helpers here perform those
transitions and the modal open/close steps so handlers stay small.
"""

import logging

from contentgen.api.client import ContentAPIClient
from contentgen.core.config import config

from .models import PHASE_ERROR, PHASE_LOADING, PHASE_SUCCESS, FetchState, ShellState

logger = logging.getLogger(__name__)


def get_api_client() -> ContentAPIClient:
    """Create a backend client from the global configuration.

    Returns:
        ContentAPIClient pointed at ``config.api_base_url``
    """
    return ContentAPIClient(config.api_base_url, timeout=config.request_timeout)


def begin_fetch(state: FetchState, force: bool = False) -> bool:
    """Enter the loading phase unless the view already fetched.

    Args:
        state: View state
        force: Refetch even if data was already loaded (explicit refresh)

    Returns:
        True if a fetch should run, False if the view keeps its current data
    """
    if state.loaded and not force:
        logger.debug(f"{type(state).__name__} already loaded, skipping fetch")
        return False

    state.phase = PHASE_LOADING
    state.error = ""
    return True


def complete_fetch(state: FetchState) -> FetchState:
    """Mark a fetch as successful."""
    state.phase = PHASE_SUCCESS
    state.error = ""
    state.loaded = True
    return state


def fail_fetch(state: FetchState, message: str) -> FetchState:
    """Mark a fetch as failed with a user-facing message."""
    logger.warning(f"{type(state).__name__} fetch failed: {message}")
    state.phase = PHASE_ERROR
    state.error = message
    state.loaded = True
    return state


def open_modal(state, index: int):
    """Select the item at ``index`` for display in the view's modal.

    Args:
        state: HistoryState or ImageHistoryState
        index: Position of the selected card

    Returns:
        Updated state (``selected`` is None if the index is out of range)
    """
    if index is None or index < 0 or index >= len(state.items):
        logger.warning(f"Ignoring selection of index {index} ({len(state.items)} items)")
        state.selected = None
    else:
        state.selected = state.items[index]
    return state


def close_modal(state):
    """Clear the modal selection; the list itself is left untouched."""
    state.selected = None
    return state


def toggle_sidebar(state: ShellState) -> ShellState:
    """Flip the sidebar between expanded and collapsed."""
    state.sidebar_open = not state.sidebar_open
    return state
