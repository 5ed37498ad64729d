"""Image generation and download handlers.

Submitting is split in two events. ``submit_image`` builds the direct image
URL and shows it at once. ``notify_image_generation`` is chained after it
and records the event with the backend. Its failures are logged and
ignored, so the image on screen never depends on the backend.
"""

import logging

import gradio as gr
import httpx

from contentgen.api.client import APIError
from contentgen.core.config import config
from contentgen.core.downloads import download_image, generated_image_filename
from contentgen.core.image_service import build_image_url, new_seed

from ..formatting import format_error_banner, format_image
from ..models import ImageGeneratorState, ImageRequest
from ..state import get_api_client
from ..validation import ValidationError, validate_image_request

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Generate Image"
PENDING_LABEL = "Generating..."


def start_image_generation(state: ImageGeneratorState) -> tuple[dict, ImageGeneratorState]:
    """Disable the submit button while a submit is pending.

    Returns:
        Tuple of (button_update, updated_state)
    """
    state.loading = True
    state.error = ""
    return gr.update(value=PENDING_LABEL, interactive=False), state


def finish_image_generation(state: ImageGeneratorState) -> tuple[dict, ImageGeneratorState]:
    """Re-enable the submit button.

    Returns:
        Tuple of (button_update, updated_state)
    """
    state.loading = False
    return gr.update(value=SUBMIT_LABEL, interactive=True), state


def submit_image(
    prompt: str,
    width: int,
    height: int,
    model: str,
    state: ImageGeneratorState,
) -> tuple[str | dict, str, dict, ImageGeneratorState]:
    """Build the image URL for the form and display it.

    A fresh time-based seed is used on every submit so repeating a prompt
    still renders a new image. The backend notification is queued in
    ``state.pending_event`` for :func:`notify_image_generation`.

    Args:
        prompt: Image prompt
        width: Width in pixels
        height: Height in pixels
        model: Rendering model
        state: Image generator view state

    Returns:
        Tuple of (image_html, error_html, download_group_update, updated_state)
    """
    request = ImageRequest.from_form(prompt, width, height, model)
    state.request = request
    state.error = ""
    state.pending_event = None

    try:
        validate_image_request(request)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        state.error = str(e)
        return (
            gr.update(),
            format_error_banner(state.error),
            gr.update(visible=bool(state.image_url)),
            state,
        )

    image_url = build_image_url(
        config.image_service_url, request.prompt, request.width, request.height, new_seed()
    )
    state.image_url = image_url
    state.pending_event = request.to_event(image_url)
    logger.info(f"Image URL built: {image_url}")

    return (
        format_image(image_url, request.prompt),
        format_error_banner(state.error),
        gr.update(visible=True),
        state,
    )


def notify_image_generation(state: ImageGeneratorState) -> ImageGeneratorState:
    """Record the last submitted image with the backend, best effort.

    Args:
        state: Image generator view state

    Returns:
        Updated state (``pending_event`` cleared)
    """
    event = state.pending_event
    if event is None:
        return state

    state.pending_event = None
    try:
        get_api_client().record_image_generation(event)
        logger.info(f"Recorded image generation for prompt {event.prompt!r}")
    except APIError as e:
        logger.warning(f"Could not record image generation: {e}")

    return state


def download_generated_image(state: ImageGeneratorState) -> dict:
    """Save the displayed image and offer it as a file download.

    Args:
        state: Image generator view state

    Returns:
        Update for the download ``gr.File`` component
    """
    if not state.image_url:
        return gr.update()

    try:
        path = download_image(
            state.image_url,
            generated_image_filename(),
            config.downloads_dir,
            keep=config.downloads_keep,
            timeout=config.request_timeout,
        )
        return gr.update(value=str(path), visible=True)
    except (httpx.HTTPError, OSError) as e:
        logger.error(f"Error downloading image: {e}", exc_info=True)
        return gr.update()
