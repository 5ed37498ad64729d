"""Validation utilities for Content Generator UI inputs."""

import logging

from .models import ImageRequest, TextRequest

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def validate_text_request(request: TextRequest) -> None:
    """Validate a text generation request with user-friendly messages.

    Args:
        request: Request built from the generator form

    Raises:
        ValidationError: If validation fails with user-friendly message
    """
    try:
        request.validate()
    except ValueError as e:
        raise ValidationError(str(e)) from e


def validate_image_request(request: ImageRequest) -> None:
    """Validate an image generation request with user-friendly messages.

    Args:
        request: Request built from the image generator form

    Raises:
        ValidationError: If validation fails with user-friendly message
    """
    try:
        request.validate()
    except ValueError as e:
        raise ValidationError(str(e)) from e


def validate_generation_id(generation_id) -> int:
    """Validate a stored generation identifier.

    Args:
        generation_id: Identifier typed by the user or read from the URL

    Returns:
        The identifier as an int

    Raises:
        ValidationError: If the identifier is missing or not a positive integer
    """
    # gr.Number hands over floats
    if isinstance(generation_id, float) and generation_id.is_integer():
        generation_id = int(generation_id)

    text = str(generation_id).strip() if generation_id is not None else ""
    if not text:
        raise ValidationError("Please enter a content ID")

    try:
        value = int(text)
    except ValueError as e:
        logger.warning(f"Rejected content ID: {text!r}")
        raise ValidationError(f"Invalid content ID: {text}") from e

    if value < 1:
        raise ValidationError(f"Invalid content ID: {text}")

    return value
