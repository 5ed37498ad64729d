"""Saving rendered images to disk for the browser to download.

An image is streamed into a temporary ``.part`` file inside the downloads
directory, re-encoded to PNG under its final name, and the temporary file is
removed whether or not the save succeeded. Only the newest ``keep`` saved
images stay in the directory. The returned path is what the UI
hands to a ``gr.File`` output.
"""

import logging
import os
import re
import tempfile
from pathlib import Path

import httpx
from PIL import Image

from .image_service import current_millis

logger = logging.getLogger(__name__)

PROMPT_FILENAME_LENGTH = 30

# PNG cannot carry these modes directly
_CONVERT_MODES = {"CMYK": "RGB", "YCbCr": "RGB", "LAB": "RGB", "HSV": "RGB", "F": "L"}


def sanitize_prompt_filename(prompt: str, max_length: int = PROMPT_FILENAME_LENGTH) -> str:
    """Turn a prompt into a filename-safe token.

    The prompt is truncated to ``max_length`` characters and every character
    that is not an ASCII letter or digit is replaced with ``_``.

    Args:
        prompt: Prompt text
        max_length: Number of prompt characters to keep

    Returns:
        Sanitized token (same length as the truncated prompt)
    """
    return re.sub(r"[^a-z0-9]", "_", prompt[:max_length], flags=re.IGNORECASE | re.ASCII)


def generated_image_filename(timestamp_ms: int | None = None) -> str:
    """Filename for an image saved from the generator view."""
    if timestamp_ms is None:
        timestamp_ms = current_millis()
    return f"generated-image-{timestamp_ms}.png"


def history_image_filename(prompt: str, timestamp_ms: int | None = None) -> str:
    """Filename for an image saved from the image history view."""
    if timestamp_ms is None:
        timestamp_ms = current_millis()
    return f"{sanitize_prompt_filename(prompt)}-{timestamp_ms}.png"


def prune_downloads(dest_dir: Path, keep: int, current: Path | None = None) -> list[Path]:
    """Delete all but the ``keep`` newest PNG files in ``dest_dir``.

    ``current`` is always kept and counts towards ``keep``.

    Returns:
        Paths that were deleted
    """
    saved = [
        path
        for path in Path(dest_dir).glob("*.png")
        if path.is_file() and path != current
    ]
    saved.sort(key=lambda path: path.stat().st_mtime, reverse=True)

    retained = keep - 1 if current is not None else keep
    stale = saved[max(retained, 0):]
    for path in stale:
        path.unlink(missing_ok=True)

    if stale:
        logger.debug(f"Pruned {len(stale)} old downloads from {dest_dir}")
    return stale


def download_image(
    url: str,
    filename: str,
    dest_dir: Path,
    *,
    keep: int | None = None,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Path:
    """Fetch an image and save it as PNG under ``dest_dir / filename``.

    Args:
        url: Image URL
        filename: Target filename (should end in ``.png``)
        dest_dir: Directory to save into (created if missing)
        keep: Prune ``dest_dir`` down to this many images after saving
        timeout: HTTP timeout in seconds, or None for no timeout
        transport: Optional httpx transport (used by tests)

    Returns:
        Path of the saved file

    Raises:
        httpx.HTTPError: If the image cannot be fetched
        OSError: If the bytes are not a readable image, are too large to
            decode safely, or cannot be written
    """
    dest_dir = Path(dest_dir)
    dest_dir.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(suffix=".part", dir=dest_dir)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            with httpx.Client(
                timeout=timeout, transport=transport, follow_redirects=True
            ) as client:
                with client.stream("GET", url) as response:
                    response.raise_for_status()
                    for chunk in response.iter_bytes():
                        fh.write(chunk)

        target = dest_dir / filename
        try:
            with Image.open(tmp_path) as image:
                if image.mode in _CONVERT_MODES:
                    image = image.convert(_CONVERT_MODES[image.mode])
                image.save(target, format="PNG")
        except Image.DecompressionBombError as e:
            target.unlink(missing_ok=True)
            raise OSError(f"Image too large to decode: {e}") from e

        logger.info(f"Saved image from {url} to {target}")
    finally:
        tmp_path.unlink(missing_ok=True)

    if keep is not None:
        prune_downloads(dest_dir, keep, current=target)
    return target
