"""Detail view handlers: load one stored text generation by identifier."""

import logging

import gradio as gr

from contentgen.api.client import APIError

from ..formatting import format_detail, format_error_banner, format_loading
from ..models import DETAIL_TAB_ID, DetailState
from ..state import begin_fetch, complete_fetch, fail_fetch, get_api_client
from ..validation import ValidationError, validate_generation_id

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Content not found"


def render_detail(state: DetailState) -> str:
    """Render the detail body for the current phase."""
    if state.is_loading:
        return format_loading()
    if state.has_error:
        return format_error_banner(state.error)
    if state.record is None:
        return format_error_banner(NOT_FOUND_MESSAGE)
    return format_detail(state.record)


def begin_detail_load(generation_id: str, state: DetailState) -> tuple[str, DetailState]:
    """Enter the loading phase for ``generation_id``.

    Every load of the detail view counts as a fresh mount.

    Returns:
        Tuple of (detail_html, updated_state)
    """
    state.generation_id = str(generation_id or "").strip()
    state.record = None
    begin_fetch(state, force=True)
    return render_detail(state), state


def load_detail(generation_id: str, state: DetailState) -> tuple[str, DetailState]:
    """Fetch ``GET /content/history/{id}`` and render the record.

    Args:
        generation_id: Identifier from the ID box or the page URL
        state: Detail view state

    Returns:
        Tuple of (detail_html, updated_state)
    """
    state.generation_id = str(generation_id or "").strip()

    try:
        record_id = validate_generation_id(generation_id)
        state.record = get_api_client().get_generation(record_id)
        complete_fetch(state)
        logger.info(f"Loaded generation {record_id}")
    except ValidationError as e:
        state.record = None
        fail_fetch(state, str(e))
    except APIError as e:
        state.record = None
        fail_fetch(state, e.message)

    return render_detail(state), state


def load_detail_from_url(
    state: DetailState, request: gr.Request
) -> tuple[dict, dict, str, DetailState]:
    """Route ``/?id=<n>`` to the detail view on page load.

    Args:
        state: Detail view state
        request: Incoming page request (injected by Gradio)

    Returns:
        Tuple of (tabs_update, detail_id_update, detail_html, updated_state)
    """
    generation_id = None
    if request is not None:
        generation_id = request.query_params.get("id")

    if not generation_id:
        return gr.update(), gr.update(), render_idle(), state

    logger.info(f"Page opened for generation {generation_id}")
    detail_html, state = load_detail(generation_id, state)
    return gr.update(selected=DETAIL_TAB_ID), generation_id, detail_html, state


def render_idle() -> str:
    """Placeholder shown before any identifier was requested."""
    return '<p class="list-summary">Enter a content ID and press Load.</p>'
