"""Core functionality shared by the UI views.

- **ContentGenConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)
- **image_service**: Direct image URL construction for the rendering service
- **downloads**: Saving rendered images to disk as PNG files

Architecture Overview
---------------------
1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with CONTENTGEN_ in .env files

2. **Image Layer** (image_service.py, downloads.py):
   - Prompt encoding and seeded image URLs
   - Streaming download and PNG re-encoding with Pillow

Usage Example
-------------
    from contentgen.core import config
    from contentgen.core.image_service import build_image_url

    url = build_image_url(config.image_service_url, "a red fox", 1024, 1024)
"""

from contentgen.core.config import ContentGenConfig, config

__all__ = [
    "ContentGenConfig",
    "config",
]
