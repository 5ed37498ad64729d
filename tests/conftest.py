"""Shared pytest fixtures for Content Generator tests."""

import io
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Generator

import httpx
import pytest
from PIL import Image

from contentgen.api.client import ContentAPIClient
from contentgen.api.models import ImageGeneration, TextGeneration
from contentgen.core.config import ContentGenConfig
from contentgen.ui.models import PHASE_SUCCESS, HistoryState, ImageHistoryState

API_BASE = "http://backend.test/api"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> ContentGenConfig:
    """Create a test configuration with a temporary downloads directory.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        ContentGenConfig instance for testing
    """
    return ContentGenConfig(
        api_base_url=API_BASE,
        image_service_url="https://images.test",
        downloads_dir=temp_dir / "downloads",
    )


@pytest.fixture
def make_client():
    """Factory for a ContentAPIClient whose requests are answered by ``handler``.

    Every request seen by the transport is appended to ``factory.requests``.
    """

    def factory(handler):
        def recording_handler(request: httpx.Request) -> httpx.Response:
            factory.requests.append(request)
            return handler(request)

        return ContentAPIClient(API_BASE, transport=httpx.MockTransport(recording_handler))

    factory.requests = []
    return factory


@pytest.fixture
def text_record() -> TextGeneration:
    """A stored two-paragraph article."""
    return TextGeneration(
        id=7,
        topic="Solar power",
        content_type="article",
        tone="professional",
        word_count=500,
        generated_content="First paragraph.\nSecond paragraph.",
        created_at=datetime(2025, 3, 7, 14, 5, 9),
    )


@pytest.fixture
def text_record_json() -> dict:
    """camelCase wire form of a stored text generation."""
    return {
        "id": 7,
        "topic": "Solar power",
        "contentType": "article",
        "tone": "professional",
        "wordCount": 500,
        "generatedContent": "First paragraph.\nSecond paragraph.",
        "createdAt": "2025-03-07T14:05:09",
    }


@pytest.fixture
def image_record() -> ImageGeneration:
    """A stored image generation with full metadata."""
    return ImageGeneration(
        id=3,
        prompt="a red fox in snow",
        image_url="https://images.test/prompt/a%20red%20fox%20in%20snow?width=512&height=768&seed=1",
        width=512,
        height=768,
        model="flux",
        created_at=datetime(2025, 1, 2, 9, 30, 0),
    )


@pytest.fixture
def image_record_json() -> dict:
    """camelCase wire form of a stored image generation."""
    return {
        "id": 3,
        "prompt": "a red fox in snow",
        "imageUrl": "https://images.test/prompt/a%20red%20fox%20in%20snow?width=512&height=768&seed=1",
        "width": 512,
        "height": 768,
        "model": "flux",
        "createdAt": "2025-01-02T09:30:00",
    }


@pytest.fixture
def history_state(text_record) -> HistoryState:
    """History state that already loaded one record."""
    return HistoryState(phase=PHASE_SUCCESS, loaded=True, items=[text_record])


@pytest.fixture
def image_history_state(image_record) -> ImageHistoryState:
    """Image history state that already loaded one record."""
    return ImageHistoryState(phase=PHASE_SUCCESS, loaded=True, items=[image_record])


@pytest.fixture
def png_bytes() -> bytes:
    """A tiny RGB PNG."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def cmyk_jpeg_bytes() -> bytes:
    """A tiny CMYK JPEG, a mode PNG cannot store directly."""
    buffer = io.BytesIO()
    Image.new("CMYK", (4, 4), color=(0, 128, 128, 0)).save(buffer, format="JPEG")
    return buffer.getvalue()
