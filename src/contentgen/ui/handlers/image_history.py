"""Image history handlers: gallery loading, preview modal, and downloads."""

import logging

import gradio as gr
import httpx

from contentgen.api.client import APIError
from contentgen.core.config import config
from contentgen.core.downloads import download_image, history_image_filename

from ..formatting import (
    format_error_banner,
    format_history_summary,
    format_image,
    format_image_details,
    format_loading,
    gallery_items,
)
from ..models import ImageHistoryState
from ..state import begin_fetch, close_modal, complete_fetch, fail_fetch, get_api_client, open_modal

logger = logging.getLogger(__name__)


def render_image_history(state: ImageHistoryState) -> tuple[str, dict]:
    """Render the gallery area for the current phase.

    Returns:
        Tuple of (status_html, gallery_update)
    """
    if state.is_loading:
        return format_loading(), gr.update(visible=False)

    if state.has_error:
        return format_error_banner(state.error), gr.update(visible=False)

    return format_history_summary(len(state.items)), gr.update(
        value=gallery_items(state.items), visible=True
    )


def begin_image_history_load(
    state: ImageHistoryState, force: bool = False
) -> tuple[str, dict, ImageHistoryState]:
    """Show the loading indicator when the view is about to fetch.

    Args:
        state: Image history view state
        force: Refetch even if already loaded

    Returns:
        Tuple of (status_html, gallery_update, updated_state)
    """
    if begin_fetch(state, force=force):
        state.selected = None
    status_html, gallery_update = render_image_history(state)
    return status_html, gallery_update, state


def refresh_image_history(state: ImageHistoryState) -> tuple[str, dict, ImageHistoryState]:
    """Explicit refetch trigger for the Refresh button."""
    return begin_image_history_load(state, force=True)


def load_image_history(state: ImageHistoryState) -> tuple[str, dict, ImageHistoryState]:
    """Fetch ``GET /content/image-history`` if the view is in its loading phase.

    Args:
        state: Image history view state

    Returns:
        Tuple of (status_html, gallery_update, updated_state)
    """
    if state.is_loading:
        try:
            state.items = get_api_client().list_image_history()
            complete_fetch(state)
            logger.info(f"Loaded {len(state.items)} image generations")
        except APIError as e:
            fail_fetch(state, e.message)

    status_html, gallery_update = render_image_history(state)
    return status_html, gallery_update, state


def select_image_item(
    evt: gr.SelectData, state: ImageHistoryState
) -> tuple[dict, str, str, dict, ImageHistoryState]:
    """Open the preview modal for the clicked thumbnail.

    Args:
        evt: Gradio SelectData event containing the selected index
        state: Image history view state

    Returns:
        Tuple of (modal_update, image_html, details_markdown, file_update, updated_state)
    """
    state = open_modal(state, evt.index)
    if state.selected is None:
        return gr.update(visible=False), "", "", gr.update(), state

    return (
        gr.update(visible=True),
        format_image(state.selected.image_url, state.selected.prompt),
        format_image_details(state.selected),
        gr.update(value=None, visible=False),
        state,
    )


def close_image_modal(state: ImageHistoryState) -> tuple[dict, ImageHistoryState]:
    """Close the preview modal; the gallery is left as it was.

    Wired to the close button and to clicks on the overlay outside the
    modal content.

    Returns:
        Tuple of (modal_update, updated_state)
    """
    return gr.update(visible=False), close_modal(state)


def download_history_image(state: ImageHistoryState) -> dict:
    """Save the previewed image and offer it as a file download.

    The filename is derived from the prompt plus a timestamp suffix.

    Args:
        state: Image history view state

    Returns:
        Update for the download ``gr.File`` component
    """
    record = state.selected
    if record is None:
        return gr.update()

    try:
        path = download_image(
            record.image_url,
            history_image_filename(record.prompt),
            config.downloads_dir,
            keep=config.downloads_keep,
            timeout=config.request_timeout,
        )
        return gr.update(value=str(path), visible=True)
    except (httpx.HTTPError, OSError) as e:
        logger.error(f"Error downloading image: {e}", exc_info=True)
        return gr.update()
