"""Configuration management for the Content Generator UI.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the CONTENTGEN_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (CONTENTGEN_* prefix)
2. .env file in the project root
3. Default values defined in ContentGenConfig

Example .env file:
    CONTENTGEN_API_BASE_URL=http://localhost:8080/api
    CONTENTGEN_IMAGE_SERVICE_URL=https://image.pollinations.ai
    CONTENTGEN_DOWNLOADS_DIR=downloads

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
This ensures a single source of truth for all configuration values across
the application.

Usage Example
-------------
    from contentgen.core.config import config

    print(config.api_base_url)
    print(config.downloads_dir)

Network Behaviour
-----------------
The backend is an external collaborator reached over HTTP. Calls carry no
timeout unless ``request_timeout`` is set, so a hung backend leaves a view
in its loading state until the request finally resolves.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContentGenConfig(BaseSettings):
    """Main configuration for the Content Generator UI.

    Values are loaded from environment variables with the CONTENTGEN_ prefix,
    with fallback to defaults defined here.

    Attributes
    ----------
    Backend Settings:
        api_base_url : str
            Base URL of the content-generation backend (no trailing slash)
        image_service_url : str
            Base URL of the third-party image rendering service
        request_timeout : float | None
            Timeout in seconds for backend and image calls (None disables it)

    Paths:
        downloads_dir : Path
            Directory where downloaded images are saved
        downloads_keep : int
            Number of saved images kept; older ones are pruned after each save
        cache_cleanup_seconds : int
            Gradio deletes served copies of files older than this

    UI Settings:
        app_title : str
            Brand shown in the navbar and the browser title
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = ContentGenConfig(
        ...     api_base_url="http://backend:9000/api",
        ...     request_timeout=30.0,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONTENTGEN_",
        case_sensitive=False,
    )

    # Backend settings
    api_base_url: str = Field(
        default="http://localhost:8080/api",
        description="Base URL of the content-generation backend",
    )
    image_service_url: str = Field(
        default="https://image.pollinations.ai",
        description="Base URL of the third-party image rendering service",
    )
    request_timeout: float | None = Field(
        default=None,
        description="HTTP timeout in seconds (None = wait indefinitely)",
        gt=0,
    )

    # Paths
    downloads_dir: Path = Field(
        default=Path("downloads"),
        description="Directory to save downloaded images",
    )
    downloads_keep: int = Field(
        default=20,
        description="Saved images kept in downloads_dir; older ones are deleted",
        ge=1,
    )
    cache_cleanup_seconds: int = Field(
        default=3600,
        description="Age and sweep interval for Gradio's served-file cache",
        ge=60,
    )

    # UI settings
    app_title: str = Field(
        default="Content Generator",
        description="Brand shown in the navbar and browser title",
    )
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    @field_validator("api_base_url", "image_service_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def __init__(self, **kwargs):
        """Initialize configuration and create the downloads directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.downloads_dir.mkdir(parents=True, exist_ok=True)


# Global configuration instance
# Loads values from environment variables (CONTENTGEN_* prefix) and .env file.
config = ContentGenConfig()
