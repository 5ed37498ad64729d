"""Pydantic models for the content-generation backend's JSON payloads.

The backend speaks camelCase JSON. Each model exposes snake_case attributes
and accepts/produces the camelCase wire names through field aliases, so
callers can write ``record.word_count`` while the payload says ``wordCount``.

Models
------
TextGeneration
    One stored text generation, as returned by ``GET /content/history`` and
    ``GET /content/history/{id}``.
ImageGeneration
    One stored image generation, as returned by ``GET /content/image-history``.
HistoryList / ImageHistoryList
    The ``{"generations": [...]}`` envelopes of the two list endpoints.
GenerateContentResponse
    Payload of a successful ``POST /content/generate``.
ImageGenerationEvent
    Body of the ``POST /content/generate-image`` notification.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Serialise to the camelCase dictionary sent over HTTP."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class TextGeneration(WireModel):
    """A stored text generation.

    Attributes:
        id: Backend identifier.
        topic: Topic the user asked for.
        content_type: One of ``article``, ``blog``, ``social-post``.
        tone: One of ``professional``, ``casual``, ``friendly``.
        word_count: Requested length in words.
        generated_content: Newline-delimited paragraphs of generated text.
        created_at: Creation timestamp.
    """

    id: int
    topic: str
    content_type: str
    tone: str
    word_count: int
    generated_content: str = ""
    created_at: datetime

    @property
    def paragraphs(self) -> list[str]:
        """Body split into paragraphs on newline boundaries."""
        return self.generated_content.split("\n")


class ImageGeneration(WireModel):
    """A stored image generation.

    Attributes:
        id: Backend identifier.
        prompt: Prompt the image was rendered from.
        image_url: Direct URL of the rendered image.
        width: Image width in pixels, when recorded.
        height: Image height in pixels, when recorded.
        model: Rendering model name, when recorded.
        created_at: Creation timestamp.
    """

    id: int
    prompt: str
    image_url: str
    width: int | None = None
    height: int | None = None
    model: str | None = None
    created_at: datetime

    @property
    def dimensions(self) -> str | None:
        """``WxH`` string, or None unless both width and height are known."""
        if self.width and self.height:
            return f"{self.width}x{self.height}"
        return None


class HistoryList(WireModel):
    """Envelope returned by ``GET /content/history``."""

    generations: list[TextGeneration] = Field(default_factory=list)

    @field_validator("generations", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value


class ImageHistoryList(WireModel):
    """Envelope returned by ``GET /content/image-history``."""

    generations: list[ImageGeneration] = Field(default_factory=list)

    @field_validator("generations", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value


class GenerateContentResponse(WireModel):
    """Successful response of ``POST /content/generate``."""

    content: str


class ImageGenerationEvent(WireModel):
    """Body of the ``POST /content/generate-image`` notification.

    Attributes:
        prompt: Prompt the image was rendered from.
        width: Requested width in pixels.
        height: Requested height in pixels.
        model: Rendering model name.
        image_url: Direct image URL that was displayed to the user.
    """

    prompt: str
    width: int
    height: int
    model: str
    image_url: str
