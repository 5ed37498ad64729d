"""HTTP client for the content-generation backend.

Every backend call goes through :class:`ContentAPIClient`. Failures are
reduced to a single :class:`APIError` family so UI handlers only need one
``except`` clause to turn any failure into a banner message:

- :class:`APIConnectionError` -- network/transport failure
- :class:`APIStatusError` -- non-success HTTP status
- :class:`APIResponseError` -- malformed or unexpected response body

The message of every error is user-facing. For non-success statuses it is
the server-provided ``message`` field when the error body carries one, else
an endpoint-specific message that includes the numeric status.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from .models import (
    GenerateContentResponse,
    HistoryList,
    ImageGeneration,
    ImageGenerationEvent,
    ImageHistoryList,
    TextGeneration,
)

logger = logging.getLogger(__name__)

NOT_FOUND_GENERATE_MESSAGE = "API endpoint not found. Please check if the server is running."


class APIError(Exception):
    """Base class for backend failures. ``str(error)`` is shown to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class APIConnectionError(APIError):
    """The request never produced an HTTP response."""


class APIStatusError(APIError):
    """The backend answered with a non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class APIResponseError(APIError):
    """The backend answered 2xx but the body could not be understood."""


def extract_server_message(response: httpx.Response) -> str | None:
    """Return the ``message`` field of a JSON error body, if any.

    Bodies that are not JSON, not an object, or lack a non-empty string
    ``message`` yield None.
    """
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class ContentAPIClient:
    """Synchronous client for the ``/content`` endpoints.

    A new ``httpx.Client`` is opened per call; the UI issues at most one
    request per user action so there is nothing to pool.

    Args:
        base_url: Backend base URL, e.g. ``http://localhost:8080/api``.
        timeout: Seconds before giving up, or None to wait indefinitely.
        transport: Optional httpx transport (tests inject ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        status_message: str,
        json: dict | None = None,
        headers: dict[str, str] | None = None,
        not_found_message: str | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to ``base_url``.
            status_message: Fallback message for non-success statuses; may
                contain ``{status}``.
            json: Optional JSON body.
            headers: Optional extra headers.
            not_found_message: Message used verbatim for a 404, overriding
                any server message.

        Raises:
            APIConnectionError: On transport failure.
            APIStatusError: On a non-success status.
            APIResponseError: If a success body is not valid JSON.
        """
        url = self._url(path)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.request(method, url, json=json, headers=headers)
        except httpx.RequestError as e:
            logger.exception(f"{method} {url} failed")
            raise APIConnectionError(str(e) or f"Network error while contacting {url}") from e

        if response.status_code == 404 and not_found_message:
            logger.warning(f"{method} {url} returned 404")
            raise APIStatusError(not_found_message, 404)

        if not response.is_success:
            message = extract_server_message(response) or status_message.format(
                status=response.status_code
            )
            logger.warning(f"{method} {url} returned {response.status_code}: {message}")
            raise APIStatusError(message, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {url} returned a non-JSON body")
            raise APIResponseError(f"Invalid response from server: {e}") from e

    def generate_content(self, payload: dict) -> str:
        """Submit a text generation request.

        Args:
            payload: camelCase request body (topic, contentType, tone,
                wordCount, maxTokens).

        Returns:
            The generated text.
        """
        data = self._request(
            "POST",
            "/content/generate",
            json=payload,
            headers={"Accept": "application/json"},
            status_message="Server error: {status}",
            not_found_message=NOT_FOUND_GENERATE_MESSAGE,
        )
        try:
            return GenerateContentResponse.model_validate(data).content
        except PydanticValidationError as e:
            raise APIResponseError(f"Unexpected response from server: {e}") from e

    def record_image_generation(self, event: ImageGenerationEvent) -> None:
        """Tell the backend an image was generated.

        The response body is not inspected; only the status matters.
        """
        url = self._url("/content/generate-image")
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(url, json=event.to_wire())
        except httpx.RequestError as e:
            logger.exception(f"POST {url} failed")
            raise APIConnectionError(str(e) or f"Network error while contacting {url}") from e

        if not response.is_success:
            message = extract_server_message(response) or (
                f"Failed to record image generation (status {response.status_code})"
            )
            raise APIStatusError(message, response.status_code)

    def list_history(self) -> list[TextGeneration]:
        """Fetch past text generations (empty list when none are recorded)."""
        data = self._request(
            "GET",
            "/content/history",
            status_message="Failed to fetch history (status {status})",
        )
        try:
            return HistoryList.model_validate(data or {}).generations
        except PydanticValidationError as e:
            raise APIResponseError(f"Unexpected history format: {e}") from e

    def get_generation(self, generation_id: int | str) -> TextGeneration:
        """Fetch one stored text generation by identifier."""
        data = self._request(
            "GET",
            f"/content/history/{generation_id}",
            status_message="Failed to fetch content (status {status})",
        )
        try:
            return TextGeneration.model_validate(data)
        except PydanticValidationError as e:
            raise APIResponseError(f"Unexpected content format: {e}") from e

    def list_image_history(self) -> list[ImageGeneration]:
        """Fetch past image generations (empty list when none are recorded)."""
        data = self._request(
            "GET",
            "/content/image-history",
            status_message="HTTP error! status: {status}",
        )
        try:
            return ImageHistoryList.model_validate(data or {}).generations
        except PydanticValidationError as e:
            raise APIResponseError(f"Unexpected image history format: {e}") from e
