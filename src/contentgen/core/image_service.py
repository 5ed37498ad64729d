"""Direct-URL construction for the third-party image rendering service.

The service renders an image from a GET request of the form::

    <service>/prompt/<url-encoded prompt>?width=W&height=H&seed=S

and returns the image bytes. No call is made here; the URL is handed to the
browser, which fetches the image itself.
"""

import time
from urllib.parse import quote, urlencode

# Characters encodeURIComponent leaves alone besides the unreserved set.
_PROMPT_SAFE_CHARS = "!~*'()"


def current_millis() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def new_seed() -> int:
    """Time-based seed so repeating a prompt still renders a fresh image."""
    return current_millis()


def encode_prompt(prompt: str) -> str:
    """Percent-encode a prompt for use as a single path segment."""
    return quote(prompt, safe=_PROMPT_SAFE_CHARS)


def build_image_url(
    service_url: str, prompt: str, width: int, height: int, seed: int | None = None
) -> str:
    """Build the direct image URL for a prompt.

    Args:
        service_url: Base URL of the rendering service
        prompt: Free-text prompt
        width: Image width in pixels
        height: Image height in pixels
        seed: Render seed (default: a fresh time-based seed)

    Returns:
        Fully-qualified image URL
    """
    if seed is None:
        seed = new_seed()
    params = urlencode({"width": int(width), "height": int(height), "seed": int(seed)})
    return f"{service_url.rstrip('/')}/prompt/{encode_prompt(prompt)}?{params}"
