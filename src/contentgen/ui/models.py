"""Data models for Content Generator UI state and form requests."""

import logging
from dataclasses import dataclass, field
from typing import Any

from contentgen.api.models import ImageGeneration, ImageGenerationEvent, TextGeneration

logger = logging.getLogger(__name__)

# View lifecycle phases
PHASE_LOADING = "loading"
PHASE_SUCCESS = "success"
PHASE_ERROR = "error"


def _to_int(value: Any, default: int) -> int:
    """Parse a form number the way a browser's parseInt would, with a fallback."""
    if value is None or value == "":
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


@dataclass
class TextRequest:
    """Form state for a text generation request.

    Created with defaults when the page loads, filled from the form on submit
    and sent to ``POST /content/generate``.
    """

    topic: str = ""
    content_type: str = "article"
    tone: str = "professional"
    word_count: int = 500
    max_tokens: int = 1000

    @classmethod
    def from_form(
        cls, topic: str, content_type: str, tone: str, word_count: Any, max_tokens: Any
    ) -> "TextRequest":
        """Build a request from raw form values."""
        return cls(
            topic=topic or "",
            content_type=content_type or "article",
            tone=tone or "professional",
            word_count=_to_int(word_count, 500),
            max_tokens=_to_int(max_tokens, 1000),
        )

    def validate(self) -> None:
        """Validate the request.

        Raises:
            ValueError: If any field is invalid, with descriptive message
        """
        if not self.topic or not self.topic.strip():
            raise ValueError("Please enter a topic")

        if self.content_type not in CONTENT_TYPE_VALUES:
            raise ValueError(f"Unknown content type: {self.content_type}")

        if self.tone not in TONE_VALUES:
            raise ValueError(f"Unknown tone: {self.tone}")

        if self.word_count < MIN_WORD_COUNT or self.word_count > MAX_WORD_COUNT:
            raise ValueError(
                f"Word count must be {MIN_WORD_COUNT}-{MAX_WORD_COUNT}, got {self.word_count}"
            )

        if self.max_tokens < MIN_MAX_TOKENS or self.max_tokens > MAX_MAX_TOKENS:
            raise ValueError(
                f"Max tokens must be {MIN_MAX_TOKENS}-{MAX_MAX_TOKENS}, got {self.max_tokens}"
            )

    def to_payload(self) -> dict[str, Any]:
        """camelCase body for the generate endpoint."""
        return {
            "topic": self.topic,
            "contentType": self.content_type,
            "tone": self.tone,
            "wordCount": self.word_count,
            "maxTokens": self.max_tokens,
        }


@dataclass
class ImageRequest:
    """Form state for an image generation request."""

    prompt: str = ""
    width: int = 1024
    height: int = 1024
    model: str = "flux"

    @classmethod
    def from_form(cls, prompt: str, width: Any, height: Any, model: str) -> "ImageRequest":
        """Build a request from raw form values."""
        return cls(
            prompt=prompt or "",
            width=_to_int(width, 1024),
            height=_to_int(height, 1024),
            model=model or "flux",
        )

    def validate(self) -> None:
        """Validate the request.

        Raises:
            ValueError: If any field is invalid, with descriptive message
        """
        if not self.prompt or not self.prompt.strip():
            raise ValueError("Please describe the image you want to generate")

        # Validate dimension ranges
        if self.width < MIN_DIMENSION or self.width > MAX_DIMENSION:
            raise ValueError(f"Width must be {MIN_DIMENSION}-{MAX_DIMENSION}, got {self.width}")
        if self.height < MIN_DIMENSION or self.height > MAX_DIMENSION:
            raise ValueError(f"Height must be {MIN_DIMENSION}-{MAX_DIMENSION}, got {self.height}")

        if self.model not in IMAGE_MODELS:
            raise ValueError(f"Unknown model: {self.model}")

    def to_event(self, image_url: str) -> ImageGenerationEvent:
        """Notification body recording that ``image_url`` was generated."""
        return ImageGenerationEvent(
            prompt=self.prompt,
            width=self.width,
            height=self.height,
            model=self.model,
            image_url=image_url,
        )


@dataclass
class GeneratorState:
    """Session state of the text generator view."""

    request: TextRequest = field(default_factory=TextRequest)
    content: str = ""
    error: str = ""
    loading: bool = False


@dataclass
class ImageGeneratorState:
    """Session state of the image generator view.

    ``pending_event`` holds the notification for the most recent submit
    until the follow-up event sends it to the backend.
    """

    request: ImageRequest = field(default_factory=ImageRequest)
    image_url: str = ""
    error: str = ""
    loading: bool = False
    pending_event: ImageGenerationEvent | None = None


@dataclass
class FetchState:
    """Common loading -> success | error lifecycle of a fetching view."""

    phase: str = PHASE_LOADING
    error: str = ""
    loaded: bool = False  # Fetched at least once since mount

    @property
    def is_loading(self) -> bool:
        return self.phase == PHASE_LOADING

    @property
    def has_error(self) -> bool:
        return self.phase == PHASE_ERROR


@dataclass
class HistoryState(FetchState):
    """Session state of the text history view."""

    items: list[TextGeneration] = field(default_factory=list)
    selected: TextGeneration | None = None

    def __repr__(self) -> str:
        return f"HistoryState(phase={self.phase}, items={len(self.items)})"


@dataclass
class ImageHistoryState(FetchState):
    """Session state of the image history view."""

    items: list[ImageGeneration] = field(default_factory=list)
    selected: ImageGeneration | None = None

    def __repr__(self) -> str:
        return f"ImageHistoryState(phase={self.phase}, items={len(self.items)})"


@dataclass
class DetailState(FetchState):
    """Session state of the single-record detail view."""

    generation_id: str = ""
    record: TextGeneration | None = None


@dataclass
class ShellState:
    """Session state of the navigation shell. Not persisted across reloads."""

    sidebar_open: bool = True


# Form option sets: (label, value) pairs as accepted by gr.Dropdown
CONTENT_TYPES = [
    ("Article", "article"),
    ("Blog Post", "blog"),
    ("Social Post", "social-post"),
]
CONTENT_TYPE_VALUES = [value for _, value in CONTENT_TYPES]

TONES = [
    ("Professional", "professional"),
    ("Casual", "casual"),
    ("Friendly", "friendly"),
]
TONE_VALUES = [value for _, value in TONES]

IMAGE_MODELS = ["flux"]

# Form ranges
MIN_WORD_COUNT = 50
MAX_WORD_COUNT = 2000
MIN_MAX_TOKENS = 1
MAX_MAX_TOKENS = 4096
MIN_DIMENSION = 64
MAX_DIMENSION = 2048
DIMENSION_STEP = 64

# Navigation: (tab id, expanded label, collapsed glyph)
NAV_LINKS = [
    ("generate_tab", "Generate Content", "✏️"),
    ("history_tab", "History", "📜"),
    ("generate_image_tab", "Generate Images", "🖼️"),
    ("image_history_tab", "Image History", "🎞️"),
]
DETAIL_TAB_ID = "detail_tab"
