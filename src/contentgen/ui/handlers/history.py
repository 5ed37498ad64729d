"""Text history handlers: list loading, detail modal, and Read More."""

import logging

import gradio as gr

from contentgen.api.client import APIError

from ..formatting import (
    HISTORY_COLUMNS,
    format_error_banner,
    format_history_summary,
    format_loading,
    format_text_modal,
    history_rows,
)
from ..models import DETAIL_TAB_ID, HistoryState
from ..state import begin_fetch, close_modal, complete_fetch, fail_fetch, get_api_client, open_modal

logger = logging.getLogger(__name__)


def _selected_row(index) -> int | None:
    """Row number from a Dataframe/Gallery select index."""
    if isinstance(index, (list, tuple)):
        return index[0] if index else None
    return index


def render_history(state: HistoryState) -> tuple[str, dict]:
    """Render the list area for the current phase.

    Returns:
        Tuple of (status_html, table_update)
    """
    if state.is_loading:
        return format_loading(), gr.update(visible=False)

    if state.has_error:
        return format_error_banner(state.error), gr.update(visible=False)

    return (
        format_history_summary(len(state.items)),
        gr.update(
            value={"data": history_rows(state.items), "headers": HISTORY_COLUMNS},
            visible=True,
        ),
    )


def begin_history_load(state: HistoryState, force: bool = False) -> tuple[str, dict, HistoryState]:
    """Show the loading indicator when the view is about to fetch.

    Called when the History tab is mounted (selected). A view that already
    fetched keeps its data; pass ``force`` for an explicit refresh.

    Args:
        state: History view state
        force: Refetch even if already loaded

    Returns:
        Tuple of (status_html, table_update, updated_state)
    """
    if begin_fetch(state, force=force):
        state.selected = None
    status_html, table_update = render_history(state)
    return status_html, table_update, state


def refresh_history(state: HistoryState) -> tuple[str, dict, HistoryState]:
    """Explicit refetch trigger for the Refresh button."""
    return begin_history_load(state, force=True)


def load_history(state: HistoryState) -> tuple[str, dict, HistoryState]:
    """Fetch ``GET /content/history`` if the view is in its loading phase.

    A response without a ``generations`` field yields an empty list, not an
    error.

    Args:
        state: History view state

    Returns:
        Tuple of (status_html, table_update, updated_state)
    """
    if state.is_loading:
        try:
            state.items = get_api_client().list_history()
            complete_fetch(state)
            logger.info(f"Loaded {len(state.items)} text generations")
        except APIError as e:
            fail_fetch(state, e.message)

    status_html, table_update = render_history(state)
    return status_html, table_update, state


def select_history_item(evt: gr.SelectData, state: HistoryState) -> tuple[dict, str, HistoryState]:
    """Open the full-content modal for the selected row.

    Args:
        evt: Gradio SelectData event containing the selected cell
        state: History view state

    Returns:
        Tuple of (modal_update, modal_html, updated_state)
    """
    state = open_modal(state, _selected_row(evt.index))
    if state.selected is None:
        return gr.update(visible=False), "", state
    return gr.update(visible=True), format_text_modal(state.selected), state


def close_history_modal(state: HistoryState) -> tuple[dict, HistoryState]:
    """Close the modal; the list is left as it was.

    Returns:
        Tuple of (modal_update, updated_state)
    """
    return gr.update(visible=False), close_modal(state)


def open_selected_in_detail(state: HistoryState) -> tuple[dict, str, dict, HistoryState]:
    """Read More: switch to the detail view for the selected generation.

    Returns:
        Tuple of (tabs_update, detail_id_value, modal_update, updated_state)
    """
    if state.selected is None:
        return gr.update(), gr.update(), gr.update(), state

    generation_id = str(state.selected.id)
    close_modal(state)
    logger.info(f"Opening generation {generation_id} in detail view")
    return gr.update(selected=DETAIL_TAB_ID), generation_id, gr.update(visible=False), state
