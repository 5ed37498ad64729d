"""Text generation handlers."""

import logging

import gradio as gr

from contentgen.api.client import APIError

from ..formatting import format_error_banner, format_generated_content
from ..models import GeneratorState, TextRequest
from ..state import get_api_client
from ..validation import ValidationError, validate_text_request

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Generate Content"
PENDING_LABEL = "Generating..."


def start_generation(state: GeneratorState) -> tuple[dict, GeneratorState]:
    """Disable the submit button while a request is pending.

    Args:
        state: Generator view state

    Returns:
        Tuple of (button_update, updated_state)
    """
    state.loading = True
    state.error = ""
    return gr.update(value=PENDING_LABEL, interactive=False), state


def finish_generation(state: GeneratorState) -> tuple[dict, GeneratorState]:
    """Re-enable the submit button once the request resolved.

    Args:
        state: Generator view state

    Returns:
        Tuple of (button_update, updated_state)
    """
    state.loading = False
    return gr.update(value=SUBMIT_LABEL, interactive=True), state


def submit_content(
    topic: str,
    content_type: str,
    tone: str,
    word_count: int,
    max_tokens: int,
    state: GeneratorState,
) -> tuple[str, str, GeneratorState]:
    """Send the generator form to the backend and show the result.

    On success the displayed content is replaced by the returned text.
    On any failure the previous content stays and an error banner is shown.

    Args:
        topic: Topic text
        content_type: Selected content type value
        tone: Selected tone value
        word_count: Requested word count
        max_tokens: Max token budget
        state: Generator view state

    Returns:
        Tuple of (content_html, error_html, updated_state)
    """
    request = TextRequest.from_form(topic, content_type, tone, word_count, max_tokens)
    state.request = request
    state.error = ""

    try:
        validate_text_request(request)

        logger.info(
            f"Generating {request.content_type} on {request.topic!r} "
            f"({request.tone}, {request.word_count} words)"
        )
        state.content = get_api_client().generate_content(request.to_payload())
        logger.info(f"Generation complete: {len(state.content)} characters")

    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        state.error = str(e)

    except APIError as e:
        logger.error(f"Content generation failed: {e}", exc_info=True)
        state.error = e.message

    return format_generated_content(state.content), format_error_banner(state.error), state
